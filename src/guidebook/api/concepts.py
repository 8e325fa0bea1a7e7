"""Concept API endpoints.

Serves concept pages together with their resolved related concepts.
"""

import logging

from aiohttp import web

from guidebook.app_keys import content_index_key
from guidebook.errors import MissingConceptError

logger = logging.getLogger(__name__)


def create_concepts_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/concepts", get_concept_pages),
        web.get("/api/concepts/{id}", get_concept_page),
    ]


async def get_concept_pages(request: web.Request) -> web.Response:
    index = request.app[content_index_key]
    return web.json_response({"items": [page.to_dict() for page in index.concept_pages]})


async def get_concept_page(request: web.Request) -> web.Response:
    concept_id = request.match_info["id"]
    index = request.app[content_index_key]

    page = index.get_concept_page(concept_id)
    if page is None:
        return web.json_response(
            {"error": "Concept not found", "id": concept_id},
            status=404,
        )

    try:
        related = index.related_concept_pages(page.related)
    except MissingConceptError as e:
        logger.error(f"Concept {concept_id!r} references unknown concepts: {list(e.missing_ids)}")
        return web.json_response(
            {
                "error": "Related concepts not found",
                "id": concept_id,
                "missing": list(e.missing_ids),
            },
            status=500,
        )

    return web.json_response(
        {"page": page.to_dict(), "related": [item.to_dict() for item in related]},
    )
