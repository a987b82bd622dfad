"""
This module implements the adapter between the resolver and the HTTP
world: an Asgineer request handler that serves assets from query
parameters, and an ASGI middleware that routes ``/static/...`` urls to it.
"""

from urllib.parse import urlencode

import asgineer

from ._logging import logger
from ._resolver import StaticAssetResolver, AssetError, request_from_query
from ._resolver import CSS, JS, IMAGE, FONT, OTHER, CATEGORIES


# Map file extensions to asset categories. Other extensions are not
# intercepted by the middleware.
EXTENSIONS = {
    "css": CSS,
    "js": JS,
    "jpg": IMAGE,
    "jpeg": IMAGE,
    "png": IMAGE,
    "eot": FONT,
    "svg": FONT,
    "ttf": FONT,
    "woff": FONT,
    "woff2": FONT,
}


def category_for_extension(ext):
    """ Get the asset category for the given file extension, or None if
    the extension is not one that is served as a static asset.
    """
    return EXTENSIONS.get(ext.lower())


def make_static_handler(config, category=None):
    """ Get a coroutine function (an Asgineer handler) for serving vendor
    static assets. The handler reads the ``file`` and ``ext`` query
    parameters and responds with the file content and its content-type.

    If ``category`` is not given, the ``type`` query parameter is used
    (and defaults to "other" when absent or invalid).

    Resolution failures are logged and result in a 400, 404 or 500
    response; the body does not contain file system paths.
    """

    if category is not None and category not in CATEGORIES:
        raise ValueError(f"Invalid asset category: {category!r}")

    resolvers = {c: StaticAssetResolver(config, c) for c in CATEGORIES}

    async def static_handler(request):
        if request.method not in ("GET", "HEAD"):
            return 405, {}, "Method not allowed"

        query = request.querydict
        asset_request = request_from_query(query)
        if category is None:
            resolver = resolvers.get(query.get("type", "").strip().lower())
            resolver = resolver or resolvers[OTHER]
        else:
            resolver = resolvers[category]

        try:
            content, ctype = resolver.resolve(asset_request.file, asset_request.ext)
        except AssetError as err:
            logger.warning(f"Could not serve {request.path}: {err}")
            return err.status, {}, err.public_message

        headers = {"content-type": ctype}
        if request.method == "HEAD":
            headers["content-length"] = str(len(content))
            return 200, headers, b""
        return 200, headers, content

    return static_handler


class StaticMiddleware:
    """ ASGI middleware that serves vendor static assets. A request for
    ``{prefix}/{file}.{ext}`` is served from the vendor packages if
    ``ext`` is a static asset extension (css, js, jpg, jpeg, png, eot,
    svg, ttf, woff, woff2). All other requests are passed to ``app``.

    Requests are always resolved here, also when a cached copy exists.
    Serving the cached copies directly is left to the reverse proxy or
    web server in front of the app.
    """

    def __init__(self, app, config, prefix="/static"):
        self.app = app
        self.config = config
        self.prefix = "/" + prefix.strip("/")
        self._apps = {
            c: asgineer.to_asgi(make_static_handler(config, c)) for c in CATEGORIES
        }

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            route = self.match(scope["path"])
            if route is not None:
                file, ext, category = route
                scope = dict(scope)
                scope["query_string"] = _encode_query(file, ext)
                return await self._apps[category](scope, receive, send)
        return await self.app(scope, receive, send)

    def match(self, path):
        """ Get a tuple ``(file, ext, category)`` for the given url path,
        or None if the path is not a static asset path.
        """
        if not path.startswith(self.prefix + "/"):
            return None
        rest = path[len(self.prefix) + 1 :]
        # Dot segments would escape the vendor and cache directories
        if any(part in (".", "..") for part in rest.split("/")):
            return None
        file, dot, ext = rest.rpartition(".")
        if not (dot and file):
            return None
        category = category_for_extension(ext)
        if category is None:
            return None
        return file, ext, category


def _encode_query(file, ext):
    return urlencode([("file", file), ("ext", ext)]).encode()
