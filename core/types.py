"""Core data types for Lexicon.

Dictionaries are plain nested mappings supplied by the caller.
Per-lookup records and consumer-facing context are frozen dataclasses.

Use attribute access: path.exists, context.locale, etc.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, Union

# A locale's strings: leaves are str, branches are nested dictionaries
Dictionary = Mapping[str, Union[str, "Dictionary"]]

# Values substituted into placeholders; "n" drives variant selection
DataPayload = Mapping[str, Any]


class TranslateFunction(Protocol):
    """translate(key, data=None) -> display string"""

    def __call__(self, key: str, data: DataPayload | None = None) -> str: ...


@dataclass(frozen=True)
class ResolutionPath:
    """Result of walking a Dictionary with a dotted key.

    `parent` is the mapping that directly contains `name` (or the deepest
    mapping reached when the walk failed). Variant siblings such as
    `<name>_plural` are probed there.
    """

    key: str
    exists: bool
    name: str
    parent: Mapping[str, Any] | None = None
    value: str | None = None


@dataclass(frozen=True)
class TranslationContext:
    """What a consumer sees: the active locale and how to use/change it."""

    locale: str
    translate: TranslateFunction
    set_locale: Callable[[str], None]
