"""
Common utilities used in our test scripts.
"""

import os
import asyncio
from collections import namedtuple


Response = namedtuple("Response", ["status", "headers", "body"])


def run_tests(scope):
    for func in list(scope.values()):
        if callable(func) and func.__name__.startswith("test_"):
            print(f"Running {func.__name__} ...")
            func()
    print("Done")


def make_asset(root, relpath, content):
    """ Write a file below root/vendor/eureka and return its full path.
    """
    filename = os.path.join(root, "vendor", "eureka", *relpath.split("/"))
    os.makedirs(os.path.dirname(filename), exist_ok=True)
    with open(filename, "wb") as f:
        f.write(content if isinstance(content, bytes) else content.encode())
    return filename


def snapshot(root):
    """ Get a set representing all files (and their mtimes) below root.
    """
    result = set()
    for dirpath, dirnames, filenames in os.walk(root):
        result.add(dirpath)
        for fname in filenames:
            filename = os.path.join(dirpath, fname)
            result.add((filename, os.stat(filename).st_mtime_ns))
    return result


def request(app, method, path, query_string=b"", headers=None):
    """ Do a request on an ASGI app, in-process. Returns a named tuple
    ``(status, headers, body)``.
    """
    sent = []

    scope = {
        "type": "http",
        "method": method,
        "scheme": "http",
        "server": ("127.0.0.1", 8080),
        "root_path": "",
        "path": path,
        "query_string": query_string,
        "headers": [(k.encode(), v.encode()) for k, v in (headers or {}).items()],
    }

    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(m):
        sent.append(m)

    asyncio.run(app(scope, receive, send))

    assert sent and sent[0]["type"] == "http.response.start"
    status = sent[0]["status"]
    rheaders = dict((k.decode(), v.decode()) for k, v in sent[0]["headers"])
    body = b"".join(m.get("body", b"") for m in sent[1:])
    return Response(status, rheaders, body)
