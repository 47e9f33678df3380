"""HTTP API for Lexicon."""

from lexicon.api.app import create_app

__all__ = ["create_app"]
