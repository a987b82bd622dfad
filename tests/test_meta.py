"""
Test some meta stuff.
"""

import os
import vendorstatic


def test_namespace():
    assert vendorstatic.__version__

    ns = set(name for name in dir(vendorstatic) if not name.startswith("_"))

    assert ns == {
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
    }
    assert ns == set(vendorstatic.__all__)


def test_newlines():
    # Let's be a bit pedantic about sanitizing whitespace :)

    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    for dirname in ("vendorstatic", "tests", "examples"):
        for dirpath, dirs, files in os.walk(os.path.join(root, dirname)):
            for fname in files:
                if fname.endswith((".py", ".md", ".rst", ".yml")):
                    with open(os.path.join(dirpath, fname), "rb") as f:
                        text = f.read().decode()
                        assert "\r" not in text, f"{fname} has CR!"
                        assert "\t" not in text, f"{fname} has tabs!"


if __name__ == "__main__":
    test_namespace()
    test_newlines()
