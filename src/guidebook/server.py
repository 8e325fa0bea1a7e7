"""aiohttp server for Guidebook.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from guidebook.api.concepts import create_concepts_routes
from guidebook.api.quickstart import create_quickstart_routes
from guidebook.app_keys import content_index_key
from guidebook.config import Config
from guidebook.core.content import ContentIndex
from guidebook.core.documents import MarkdownDocumentLoader

logger = logging.getLogger(__name__)


def build_content_index(config: Config) -> ContentIndex:
    """Load content from the configured folders.

    Args:
        config: Application configuration

    Returns:
        ContentIndex over the configured quick start and concept folders

    Raises:
        DocumentError: If a folder is missing or a document is invalid
    """
    loader = MarkdownDocumentLoader(config.content.root_dir, config.content.pages_dir)
    return ContentIndex.load(
        loader,
        quick_start_folder=config.content.quick_start_folder,
        concepts_folder=config.content.concepts_folder,
    )


def create_app(config: Config, *, index: ContentIndex | None = None) -> web.Application:
    """Create aiohttp application.

    The content index is built once here and shared by all handlers.

    Args:
        config: Application configuration
        index: Prebuilt content index (default: load from config)

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[content_index_key] = index if index is not None else build_content_index(config)

    app.router.add_routes(create_quickstart_routes())
    app.router.add_routes(create_concepts_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving content from {config.content.root_dir}")
    web.run_app(app, host=config.server.host, port=config.server.port)
