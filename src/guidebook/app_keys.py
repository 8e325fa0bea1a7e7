"""Application keys for type-safe app configuration access."""

from aiohttp import web

from guidebook.core.content import ContentIndex

content_index_key = web.AppKey("content_index", ContentIndex)
