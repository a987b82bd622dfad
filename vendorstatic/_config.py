"""
This module implements the ``StaticConfig`` class, the explicit
configuration object that is passed to the resolver.
"""

import os


ROOT_KEY = "global.dir.root"
CACHE_ENABLED_KEY = "global.cache.static.enabled"
CACHE_PATH_KEY = "global.cache.static.path"

TRUE_STRINGS = ("1", "true", "yes", "on")


class ConfigError(ValueError):
    """ Raised when the static asset configuration is invalid.
    """


def _lookup(mapping, key, default=None):
    """ Get a dotted key from a flat mapping (``{"a.b": 1}``) or from
    a nested one (``{"a": {"b": 1}}``).
    """
    if key in mapping:
        return mapping[key]
    ob = mapping
    for part in key.split("."):
        if not isinstance(ob, dict) or part not in ob:
            return default
        ob = ob[part]
    return ob


class StaticConfig:
    """ Configuration for serving vendor static assets.

    Arguments:

    * ``root (str)``: the root directory, under which the ``vendor/eureka``
      packages live.
    * ``cache_enabled (bool)``: whether to write a copy of each served asset
      to the cache directory. Default False.
    * ``cache_path (str)``: the root of the cache directory. Required when
      caching is enabled.
    """

    __slots__ = ("_root", "_cache_enabled", "_cache_path")

    def __init__(self, root, cache_enabled=False, cache_path=None):
        if not isinstance(root, str) or not root:
            raise ConfigError(f"{ROOT_KEY} must be a nonempty string, not {root!r}")
        if cache_enabled and not (isinstance(cache_path, str) and cache_path):
            raise ConfigError(
                f"{CACHE_PATH_KEY} must be a nonempty string when caching is enabled."
            )
        self._root = root
        self._cache_enabled = bool(cache_enabled)
        self._cache_path = cache_path if cache_enabled else None

    def __repr__(self):
        return (
            f"<StaticConfig root={self._root!r} cache_enabled={self._cache_enabled} "
            f"cache_path={self._cache_path!r}>"
        )

    @property
    def root(self):
        """ The root directory (string).
        """
        return self._root

    @property
    def cache_enabled(self):
        """ Whether served assets are written to the cache directory (bool).
        """
        return self._cache_enabled

    @property
    def cache_path(self):
        """ The root of the cache directory (string), or None when caching
        is disabled.
        """
        return self._cache_path

    @classmethod
    def from_mapping(cls, mapping):
        """ Create a config from a mapping with the keys ``global.dir.root``,
        ``global.cache.static.enabled`` and ``global.cache.static.path``.
        The mapping can be flat (dotted keys) or nested. Caching is only
        enabled if the value is literally ``True``.
        """
        if not isinstance(mapping, dict):
            raise ConfigError(f"Config must be a dict, not {type(mapping)}")
        root = _lookup(mapping, ROOT_KEY)
        cache_enabled = _lookup(mapping, CACHE_ENABLED_KEY, False) is True
        cache_path = _lookup(mapping, CACHE_PATH_KEY) if cache_enabled else None
        return cls(root, cache_enabled, cache_path)

    @classmethod
    def from_environ(cls, environ=None):
        """ Create a config from the ``VENDORSTATIC_ROOT``, ``VENDORSTATIC_CACHE``
        and ``VENDORSTATIC_CACHE_PATH`` environment variables.
        """
        environ = os.environ if environ is None else environ
        root = environ.get("VENDORSTATIC_ROOT", "")
        cache = environ.get("VENDORSTATIC_CACHE", "").strip().lower()
        cache_enabled = cache in TRUE_STRINGS
        cache_path = environ.get("VENDORSTATIC_CACHE_PATH") if cache_enabled else None
        return cls(root, cache_enabled, cache_path)
