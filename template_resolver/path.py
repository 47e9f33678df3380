"""Dotted-key lookup into nested translation dictionaries.

"nested.values" walks dictionary["nested"]["values"]. Besides the leaf,
the walk reports the containing mapping and the leaf's own name so the
resolver can look for `<name>_zero` / `<name>_plural` siblings.
"""

from collections.abc import Mapping

from core import Dictionary, ResolutionPath

SEPARATOR = "."


def resolve_path(dictionary: Dictionary, key: str) -> ResolutionPath:
    """Resolve a dotted key against a dictionary.

    Never raises. Malformed keys (empty, leading/trailing/doubled dots)
    and paths ending on a nested mapping resolve with exists=False.

    Args:
        dictionary: Nested mapping of translated strings
        key: Dotted lookup key, e.g. "nested.values"

    Returns:
        ResolutionPath describing the lookup
    """
    segments = key.split(SEPARATOR)
    name = segments[-1]

    if not all(segments):
        return ResolutionPath(key=key, exists=False, name=name, parent=dictionary)

    # parent: deepest mapping reached so far
    parent: Mapping = dictionary
    current: object = dictionary
    for segment in segments:
        if not isinstance(current, Mapping):
            return ResolutionPath(key=key, exists=False, name=name, parent=parent)
        parent = current
        if segment not in current:
            return ResolutionPath(key=key, exists=False, name=name, parent=parent)
        current = current[segment]

    if not isinstance(current, str):
        return ResolutionPath(key=key, exists=False, name=name, parent=parent)

    return ResolutionPath(key=key, exists=True, name=name, parent=parent, value=current)
