"""
CLI to serve the static assets of a vendor tree:

    python -m vendorstatic --root=/app [--cache-path=/app/var/cache]
        [--server=uvicorn] [--bind=localhost:8080] [--prefix=/static]

Other ``--key=value`` arguments are passed to the server.
"""

import sys

import asgineer

from ._app import StaticMiddleware
from ._config import StaticConfig
from ._logging import logger
from ._run import run


@asgineer.to_asgi
async def not_found(request):
    return 404, {}, "Not found"


def parse_args(argv):
    """ Parse ``--key=value`` (or ``--key value``) arguments into a dict.
    """
    kwargs = {}
    argv = list(argv)
    while argv:
        arg = argv.pop(0)
        if not arg.startswith("--"):
            raise RuntimeError(f"vendorstatic got unexpected argument: {arg!r}")
        if "=" in arg:
            key, _, val = arg[2:].partition("=")
        else:
            key = arg[2:]
            val = argv.pop(0) if argv else ""
        kwargs[key] = val
    return kwargs


def _convert(val):
    """ Turn numeric CLI values into int or float, so that servers get the
    types they expect (e.g. ``--workers=2``).
    """
    for cls in (int, float):
        try:
            return cls(val)
        except ValueError:
            pass
    return val


def main(argv):
    """ CLI API to serve static assets. Underscores in argument names
    are dashes in the CLI.
    """
    kwargs = parse_args(argv)

    try:
        root = kwargs.pop("root")
    except KeyError:
        raise RuntimeError("vendorstatic command needs --root=dir")
    cache_path = kwargs.pop("cache-path", None)
    server = kwargs.pop("server", "uvicorn")
    bind = kwargs.pop("bind", "localhost:8080")
    prefix = kwargs.pop("prefix", "/static")

    config = StaticConfig(root, bool(cache_path), cache_path)
    app = StaticMiddleware(not_found, config, prefix)

    logger.info(f"Serving {prefix} from {root} on {bind} with {server}")
    kwargs = {key.replace("-", "_"): _convert(val) for key, val in kwargs.items()}
    return run(app, server, bind, **kwargs)


def cli():
    """ Entry point for the ``vendorstatic`` console script.
    """
    main(sys.argv[1:])


if __name__ == "__main__":
    cli()
