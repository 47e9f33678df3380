"""Translation resolver: variant selection and placeholder interpolation.

Resolution runs in three steps:
    1. resolve_path() finds the string for a dotted key
    2. select_variant() swaps in a `_zero` / `_plural` sibling based on data["n"]
    3. interpolate() fills {placeholder} / {{placeholder}} tokens from data

Nothing here raises for missing keys or data. An unknown key is used
as its own template, and a missing placeholder value becomes "".
"""

import logging
import re
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any

from core import DataPayload, Dictionary, ResolutionPath, TranslateFunction
from template_resolver.path import resolve_path

logger = logging.getLogger(__name__)

# Placeholder body: a decimal index, or identifier segments joined by "."
_TOKEN = r"[0-9]+|[a-z$_][a-z0-9$_]*(?:\.[a-z0-9$_]+)*"

# {{name}} is tried before {name} so the doubled form is consumed whole
PLACEHOLDER_PATTERN = re.compile(
    rf"\{{\{{(?P<double>{_TOKEN})\}}\}}|\{{(?P<single>{_TOKEN})\}}",
    re.IGNORECASE,
)

# Payload field that drives variant selection
COUNT_FIELD = "n"


class Variant(Enum):
    """Sibling suffixes probed next to a resolved key, in priority order."""

    ZERO = "_zero"  # n == 0
    PLURAL = "_plural"  # n != 1, including 0, negatives and fractions


def _count(data: DataPayload | None) -> Real | Decimal | None:
    """Extract a usable numeric n from data, or None.

    bool is rejected even though it subclasses int, as is a Decimal NaN
    (it cannot be ordered); anything that is not a real number or a
    Decimal skips variant selection.
    """
    if data is None:
        return None
    n = data.get(COUNT_FIELD)
    if isinstance(n, Decimal):
        return None if n.is_nan() else n
    if isinstance(n, bool) or not isinstance(n, Real):
        return None
    return n


def _sibling(path: ResolutionPath, variant: Variant) -> str | None:
    """Get the `<name><suffix>` string leaf next to the resolved key."""
    if path.parent is None:
        return None
    value = path.parent.get(f"{path.name}{variant.value}")
    return value if isinstance(value, str) else None


def select_variant(path: ResolutionPath, data: DataPayload | None = None) -> str:
    """Pick the string to interpolate for a resolved path.

    Args:
        path: Result of resolve_path()
        data: Optional payload; only data["n"] is consulted

    Returns:
        The raw key when unresolved, a `_zero`/`_plural` sibling when n
        calls for one and it exists, otherwise the resolved value
    """
    if not path.exists:
        return path.key

    n = _count(data)
    if n is None:
        return path.value

    if n == 0:
        zero = _sibling(path, Variant.ZERO)
        if zero is not None:
            return zero

    if n > 1 or n < 1:
        plural = _sibling(path, Variant.PLURAL)
        if plural is not None:
            return plural

    return path.value


def _lookup(data: DataPayload, token: str) -> Any:
    """Flat lookup of a placeholder token; "a.b" reads data["a.b"]."""
    if token in data:
        return data[token]
    # {0} also matches integer keys
    if token.isdigit():
        return data.get(int(token))
    return None


def interpolate(template: str, data: DataPayload | None = None) -> str:
    """Replace placeholder tokens in template with values from data.

    With data=None the template is returned untouched. Otherwise every
    {token} / {{token}} is replaced; absent and None values become "",
    while 0, False and "" are kept and stringified.
    """
    if data is None:
        return template

    def replace(match: re.Match) -> str:
        token = match.group("double") or match.group("single")
        value = _lookup(data, token)
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(replace, template)


class TemplateResolver:
    """Resolves lookup keys against a single locale's dictionary.

    Usage:
        resolver = TemplateResolver({"apples": "{n} apple", "apples_plural": "{n} apples"})
        resolver.resolve("apples", {"n": 3})  # "3 apples"
        resolver("missing.key")  # "missing.key"

    The dictionary is read, never modified, so one instance can serve
    any number of threads.
    """

    def __init__(self, dictionary: Dictionary):
        self._dictionary = dictionary

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    def resolve(self, key: str, data: DataPayload | None = None) -> str:
        """Translate key, selecting a variant and filling placeholders."""
        path = resolve_path(self._dictionary, key)
        if not path.exists:
            logger.debug("[MISSING_KEY] %s", key)
        return interpolate(select_variant(path, data), data)

    __call__ = resolve


def make_translator(dictionary: Dictionary) -> TranslateFunction:
    """Build a translate(key, data=None) function bound to dictionary."""
    return TemplateResolver(dictionary).resolve


# Name used by the provider layer
translate_function_factory = make_translator


def resolve(dictionary: Dictionary, key: str, data: DataPayload | None = None) -> str:
    """One-shot translation without keeping a resolver around."""
    return TemplateResolver(dictionary).resolve(key, data)
