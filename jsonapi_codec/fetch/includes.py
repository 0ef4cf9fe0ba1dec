"""Relationship paths named by the ``include`` query parameter.

An include is either a relationship name (``"author"``) or a single-key dict
nesting a farther include under a name (``{"comments": {"author": "posts"}}``
for ``comments.author.posts``).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

Include = Union[str, dict[str, Any]]

INCLUDE_SEPARATOR = ","
RELATIONSHIP_PATH_SEPARATOR = "."


def reverse_relationship_names_to_include(
    reverse_relationship_names: Sequence[str],
) -> Optional[Include]:
    """Nest relationship names given farthest first into an include.

    ``["posts", "author", "comments"]`` gives
    ``{"comments": {"author": "posts"}}``; no names give ``None``.
    """
    include: Optional[Include] = None
    for name in reverse_relationship_names:
        include = name if include is None else {name: include}
    return include


def relationship_path_to_include(relationship_path: str) -> Include:
    """Convert a dot-separated relationship path to an include."""
    *relationship_names, farthest = relationship_path.split(RELATIONSHIP_PATH_SEPARATOR)
    include: Include = farthest
    for name in reversed(relationship_names):
        include = {name: include}
    return include


def to_relationship_path(include: Include) -> str:
    """Convert an include back to its dot-separated relationship path."""
    names: list[str] = []
    current: Any = include
    while isinstance(current, dict):
        ((name, current),) = current.items()
        names.append(name)
    names.append(current)
    return RELATIONSHIP_PATH_SEPARATOR.join(names)


def includes_from_string(text: str) -> list[Include]:
    """Break a comma-separated ``include`` value into includes.

    Empty entries are skipped, so ``""`` has no includes.
    """
    return [
        relationship_path_to_include(path)
        for path in text.split(INCLUDE_SEPARATOR)
        if path
    ]


def includes_from_params(params: Mapping[str, Any]) -> list[Include]:
    """Extract the includes from ``params["include"]``, if present."""
    include = params.get("include")
    if include is None:
        return []
    return includes_from_string(include)


def includes_to_string(includes: Sequence[Include]) -> str:
    return INCLUDE_SEPARATOR.join(to_relationship_path(include) for include in includes)
