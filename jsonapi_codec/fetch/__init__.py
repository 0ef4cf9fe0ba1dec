"""Fetch query parameters: includes and sorts."""

from .includes import (
    Include,
    includes_from_params,
    includes_from_string,
    includes_to_string,
    relationship_path_to_include,
    reverse_relationship_names_to_include,
    to_relationship_path,
)
from .sort import Direction, Sort, sorts_from_params, sorts_from_string, sorts_to_string

__all__ = [
    "Direction",
    "Include",
    "Sort",
    "includes_from_params",
    "includes_from_string",
    "includes_to_string",
    "relationship_path_to_include",
    "reverse_relationship_names_to_include",
    "sorts_from_params",
    "sorts_from_string",
    "sorts_to_string",
    "to_relationship_path",
]
