"""Sorting requested by the ``sort`` query parameter."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from jsonapi_codec.fetch.includes import (
    RELATIONSHIP_PATH_SEPARATOR,
    Include,
    reverse_relationship_names_to_include,
    to_relationship_path,
)

SORT_SEPARATOR = ","
DESCENDING_PREFIX = "-"


class Direction(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Sort(BaseModel):
    """A single sort key.

    * ``attribute`` - the attribute to sort by
    * ``direction`` - ascending unless the key was prefixed with ``-``
    * ``relationship`` - the include holding ``attribute``, ``None`` for the
      primary data
    """

    model_config = ConfigDict(frozen=True)

    attribute: str
    direction: Direction = Direction.ASCENDING
    relationship: Optional[Include] = None

    @classmethod
    def from_string(cls, text: str) -> "Sort":
        """Parse ``"-comments.author.name"`` style sort keys.

        The last dot-separated name is the attribute; the preceding names are
        the relationship path.
        """
        direction = Direction.ASCENDING
        if text.startswith(DESCENDING_PREFIX):
            direction = Direction.DESCENDING
            text = text[len(DESCENDING_PREFIX):]
        attribute, *reverse_relationship_names = reversed(text.split(RELATIONSHIP_PATH_SEPARATOR))
        return cls(
            attribute=attribute,
            direction=direction,
            relationship=reverse_relationship_names_to_include(reverse_relationship_names),
        )

    def to_string(self) -> str:
        prefix = DESCENDING_PREFIX if self.direction is Direction.DESCENDING else ""
        if self.relationship is None:
            return f"{prefix}{self.attribute}"
        path = to_relationship_path(self.relationship)
        return f"{prefix}{path}{RELATIONSHIP_PATH_SEPARATOR}{self.attribute}"


def sorts_from_string(text: str) -> list[Sort]:
    """Break a comma-separated ``sort`` value into sorts, skipping empty keys."""
    return [Sort.from_string(key) for key in text.split(SORT_SEPARATOR) if key]


def sorts_from_params(params: Mapping[str, Any]) -> list[Sort]:
    """Extract the sorts from ``params["sort"]``; none when it is absent."""
    sort = params.get("sort")
    if sort is None:
        return []
    return sorts_from_string(sort)


def sorts_to_string(sorts: Sequence[Sort]) -> str:
    return SORT_SEPARATOR.join(sort.to_string() for sort in sorts)
