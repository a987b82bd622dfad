"""
This module implements a ``run()`` function to start an ASGI server of choice.
"""

import asyncio


def run(app, server="uvicorn", bind="localhost:8080", **kwargs):
    """ Run the given ASGI app with the given ASGI server. Unlike the
    ``run()`` of Asgineer, the app is passed as an object, so that an app
    that is composed at runtime (e.g. a ``StaticMiddleware``) can be served.

    Arguments:

    * ``app`` (required): The ASGI application object.
    * ``server``: The name of the server to use, "uvicorn" or "hypercorn".
    * ``bind``: The address to listen on, as "host:port".
    * ``kwargs``: additional arguments to pass to the underlying server.
    """

    # Check server and bind
    assert isinstance(server, str), "vendorstatic.run() server arg must be a string."
    assert isinstance(bind, str), "vendorstatic.run() bind arg must be a string."
    assert ":" in bind, "vendorstatic.run() bind arg must be 'host:port'"
    bind = bind.replace("localhost", "127.0.0.1")

    # Select server function
    try:
        func = SERVERS[server.lower()]
    except KeyError:
        raise ValueError(f"Invalid server specified: {server!r}")

    # Delegate
    return func(app, bind, **kwargs)


def _run_uvicorn(app, bind, **kwargs):
    import uvicorn

    host, _, port = bind.partition(":")

    # Default to a warning log_level, otherwise uvicorn is quite verbose
    kwargs.setdefault("log_level", "warning")

    return uvicorn.run(app, host=host, port=int(port), **kwargs)


def _run_hypercorn(app, bind, **kwargs):
    from hypercorn.config import Config
    from hypercorn.asyncio import serve

    config = Config()
    config.bind = [bind]
    for key, val in kwargs.items():
        setattr(config, key, val)

    return asyncio.run(serve(app, config))


SERVERS = {"hypercorn": _run_hypercorn, "uvicorn": _run_uvicorn}
