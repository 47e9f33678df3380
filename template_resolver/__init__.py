"""Translation Resolution Engine.

Resolves dotted keys against a locale dictionary, picks zero/plural
variants and fills placeholders.

Usage:
    from template_resolver import make_translator

    t = make_translator({"greeting": "Hello {name}", "nested": {"key": "value"}})
    t("greeting", {"name": "Ada"})  # "Hello Ada"
    t("nested.key")  # "value"

Unknown keys come back as the key itself; missing placeholder values
become empty strings.
"""

from template_resolver.path import resolve_path
from template_resolver.resolver import (
    PLACEHOLDER_PATTERN,
    TemplateResolver,
    Variant,
    interpolate,
    make_translator,
    resolve,
    select_variant,
    translate_function_factory,
)

__all__ = [
    # Main API
    "TemplateResolver",
    "make_translator",
    "resolve",
    "translate_function_factory",
    # Steps
    "resolve_path",
    "select_variant",
    "interpolate",
    "PLACEHOLDER_PATTERN",
    "Variant",
]
