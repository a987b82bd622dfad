"""
Use the static handler directly, with the asset given by query parameters,
as in ``/static?type=css&file=cache/blue/shop/catalog/css/main.min&ext=css``.
The configuration is read from the ``VENDORSTATIC_*`` environment variables.
"""

import asgineer
import vendorstatic


static_handler = vendorstatic.make_static_handler(
    vendorstatic.StaticConfig.from_environ()
)


@asgineer.to_asgi
async def main(request):
    if request.path == "/static":
        return await static_handler(request)
    return 404, {}, "Not found"


if __name__ == "__main__":
    vendorstatic.run(main, "hypercorn", "localhost:8080")
