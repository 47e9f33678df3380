"""FastAPI application wiring."""

import logging

from fastapi import FastAPI

from lexicon import __version__
from lexicon.api.routes import translations
from lexicon.provider import TranslationProvider

logger = logging.getLogger(__name__)


def create_app(provider: TranslationProvider) -> FastAPI:
    """Build the API app serving a single provider."""
    app = FastAPI(title="Lexicon", version=__version__)
    app.state.translation_provider = provider
    app.include_router(translations.router, prefix="/api", tags=["Translations"])
    logger.info("[STARTUP] Lexicon API ready locale=%s locales=%s", provider.locale, provider.locales)
    return app
