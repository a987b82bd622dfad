"""
Vendorstatic - serve the static assets of vendor theme packages via ASGI
"""

from ._config import StaticConfig, ConfigError
from ._resolver import StaticAssetResolver, AssetError, AssetPath, AssetRequest
from ._resolver import parse_asset_path, request_from_query
from ._app import StaticMiddleware, make_static_handler, category_for_extension
from ._run import run
from . import utils


__all__ = [
    "StaticConfig",
    "ConfigError",
    "StaticAssetResolver",
    "AssetError",
    "AssetPath",
    "AssetRequest",
    "parse_asset_path",
    "request_from_query",
    "StaticMiddleware",
    "make_static_handler",
    "category_for_extension",
    "run",
    "utils",
]


__version__ = "0.1.0"
