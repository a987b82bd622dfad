"""
This module implements the ``StaticAssetResolver``, which maps a request
for a static asset to a file in a vendor theme package, reads it, and
optionally writes a copy of it to the cache directory.

The ``file`` query parameter has the form
``cache/{theme}/{package}/{module}/{type}/{filename}``, which resolves to
``{root}/vendor/eureka/theme-{theme}-{package}/src/static/{module}/{type}/{filename}.{ext}``.
"""

import os
import re
from collections import namedtuple

from ._logging import logger
from .utils import sniff_content_type


# Asset categories
CSS = "css"
JS = "js"
IMAGE = "image"
FONT = "font"
OTHER = "other"

CATEGORIES = CSS, JS, IMAGE, FONT, OTHER

# Marker for categories that get their content-type from the file's bytes
SNIFF = None

MIME_POLICY = {
    CSS: "text/css",
    JS: "application/javascript",
    IMAGE: SNIFF,
    FONT: SNIFF,
    OTHER: SNIFF,
}

# Error kinds
INVALID_PATH = "invalid_path"
FILE_NOT_FOUND = "file_not_found"
CACHE_DIR_FAILED = "cache_dir_failed"

STATUS_CODES = {INVALID_PATH: 400, FILE_NOT_FOUND: 404, CACHE_DIR_FAILED: 500}

PUBLIC_MESSAGES = {
    INVALID_PATH: "Invalid asset path",
    FILE_NOT_FOUND: "File not found",
    CACHE_DIR_FAILED: "Unable to create cache directory",
}

ASSET_PATH_PATTERN = re.compile(
    r"cache/([a-z0-9_-]+)/([a-z0-9_-]+)/([a-z0-9_-]+)/([a-z]+)/([a-z0-9_./-]+)",
    re.IGNORECASE | re.ASCII,
)

AssetRequest = namedtuple("AssetRequest", ["file", "ext"])

AssetPath = namedtuple(
    "AssetPath", ["cache", "theme", "package", "module", "type", "filename"]
)


class AssetError(Exception):
    """ An error raised when an asset cannot be served. The ``kind``
    attribute is one of ``INVALID_PATH``, ``FILE_NOT_FOUND`` or
    ``CACHE_DIR_FAILED``, so that the HTTP layer can pick a status code
    (see ``status``). The message may contain file system paths and is
    meant for logging; use ``public_message`` for the client.
    """

    def __init__(self, kind, message, path=None):
        if kind not in STATUS_CODES:
            raise ValueError(f"Invalid asset error kind: {kind!r}")
        super().__init__(message)
        self.kind = kind
        self.path = path

    @property
    def status(self):
        """ The HTTP status code that corresponds to this error (int).
        """
        return STATUS_CODES[self.kind]

    @property
    def public_message(self):
        """ A message that is safe to show to untrusted clients (str).
        """
        return PUBLIC_MESSAGES[self.kind]


def request_from_query(querydict):
    """ Get an ``AssetRequest`` from a dict of query parameters. The
    ``file`` and ``ext`` keys must be present.
    """
    return AssetRequest(querydict["file"].strip(), querydict["ext"].strip())


def parse_asset_path(file):
    """ Parse the ``file`` query parameter into an ``AssetPath``. Raises
    an ``AssetError`` (INVALID_PATH) if it does not have the form
    ``cache/{theme}/{package}/{module}/{type}/{filename}``.
    """
    m = ASSET_PATH_PATTERN.search(file)
    if m is None:
        raise AssetError(INVALID_PATH, f"Invalid asset path: {file!r}")
    return AssetPath(m.group(0)[:5], *m.groups())


class StaticAssetResolver:
    """ Resolve asset requests to file content and a content-type.

    Arguments:

    * ``config (StaticConfig)``: the root and cache settings.
    * ``category (str)``: one of "css", "js", "image", "font" or "other".
      CSS and JS assets get a fixed content-type, the content-type of
      other assets is derived from the bytes of the file.
    """

    __slots__ = ("_config", "_category")

    def __init__(self, config, category=OTHER):
        if category not in MIME_POLICY:
            raise ValueError(f"Invalid asset category: {category!r}")
        self._config = config
        self._category = category

    @property
    def config(self):
        """ The ``StaticConfig`` of this resolver.
        """
        return self._config

    @property
    def category(self):
        """ The asset category (string).
        """
        return self._category

    def source_path(self, asset_path, ext):
        """ Get the path of the source file for the given ``AssetPath``.
        """
        return (
            f"{self._config.root}/vendor/eureka"
            f"/theme-{asset_path.theme}-{asset_path.package}/src/static"
            f"/{asset_path.module}/{asset_path.type}/{asset_path.filename}.{ext}"
        )

    def cache_file_path(self, file, asset_path, ext):
        """ Get the path of the cache copy for the given request. The
        directory part mirrors that of the ``file`` query parameter.
        """
        dirname = self._config.cache_path + os.sep + os.path.dirname(file)
        return dirname + os.sep + os.path.basename(f"{asset_path.filename}.{ext}")

    def resolve(self, file, ext):
        """ Resolve the asset and return a tuple ``(content, content_type)``.
        Raises ``AssetError`` on failure.

        When caching is enabled, a failure to create the cache directory
        fails the whole call, even though the content could be read.
        """
        file, ext = file.strip(), ext.strip()
        asset_path = parse_asset_path(file)

        filename = self.source_path(asset_path, ext)
        if not os.path.isfile(filename):
            raise AssetError(
                FILE_NOT_FOUND, f"File does not exist: {filename}", filename
            )

        with open(filename, "rb") as f:
            content = f.read()

        if self._config.cache_enabled:
            self._write_cache(self.cache_file_path(file, asset_path, ext), content)

        ctype = MIME_POLICY[self._category]
        if ctype is SNIFF:
            ctype = sniff_content_type(content)

        return content, ctype

    def _write_cache(self, filename, content):
        # Concurrent writers to the same file are not synchronized
        dirname = os.path.dirname(filename)
        if not os.path.isdir(dirname):
            try:
                os.makedirs(dirname, 0o777, exist_ok=True)
            except OSError as err:
                raise AssetError(
                    CACHE_DIR_FAILED,
                    f"Unable to create cache directory {dirname}: {err}",
                    dirname,
                ) from err
        with open(filename, "wb") as f:
            f.write(content)
        logger.debug(f"Wrote {len(content)} bytes to cache: {filename}")
