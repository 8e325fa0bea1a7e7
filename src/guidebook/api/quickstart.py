"""Quick start API endpoints.

Provides the ordered quick start sequence and per-page pagination.
"""

import re

from aiohttp import web

from guidebook.app_keys import content_index_key

_ORDER_RE = re.compile(r"-?[0-9]+")


def create_quickstart_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/quickstart", get_quickstart_pages),
        web.get("/api/quickstart/{order}", get_quickstart_page),
    ]


async def get_quickstart_pages(request: web.Request) -> web.Response:
    index = request.app[content_index_key]
    return web.json_response(
        {"items": [page.to_dict() for page in index.sorted_quick_start_pages]},
    )


async def get_quickstart_page(request: web.Request) -> web.Response:
    raw_order = request.match_info["order"]
    # int() alone also accepts "1_0", surrounding spaces and non-ASCII digits
    if _ORDER_RE.fullmatch(raw_order) is None:
        return web.json_response(
            {"error": "Order must be an integer", "order": raw_order},
            status=400,
        )
    order = int(raw_order)

    index = request.app[content_index_key]
    page = index.get_quick_start_page(order)
    if page is None:
        return web.json_response(
            {"error": "Page not found", "order": order},
            status=404,
        )

    pagination = index.get_pagination(order)
    return web.json_response(
        {
            "page": page.to_dict(),
            "previous": pagination.previous.to_dict() if pagination.previous else None,
            "next": pagination.next.to_dict() if pagination.next else None,
        },
    )
