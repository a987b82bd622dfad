"""
Serve the static assets of vendor theme packages in front of an Asgineer app.

A request for e.g. ``/static/cache/blue/shop/catalog/css/main.min.css`` is
served from ``{root}/vendor/eureka/theme-blue-shop/src/static/catalog/css/main.min.css``.
Served assets are also written to ``{root}/var/cache/static``, so that a
reverse proxy can serve them directly on subsequent requests.
"""

import os

import asgineer
import vendorstatic


ROOT = os.path.abspath(os.getenv("VENDORSTATIC_ROOT", "."))

config = vendorstatic.StaticConfig.from_mapping(
    {
        "global": {
            "dir": {"root": ROOT},
            "cache": {
                "static": {
                    "enabled": True,
                    "path": os.path.join(ROOT, "var", "cache", "static"),
                }
            },
        }
    }
)


@asgineer.to_asgi
async def main_handler(request):
    return "<html>Assets live at <a href='/static/'>/static/...</a></html>"


main = vendorstatic.StaticMiddleware(main_handler, config)


if __name__ == "__main__":
    vendorstatic.run(main, "uvicorn", "localhost:8080")
