"""Pydantic models for JSON:API v1.0 documents.

Every model is frozen: parsers build them once and consumers only read them.
Members that are optional on the wire are ``None`` when absent, except
``data`` on documents and relationships, which distinguishes an absent member
(``UNSET``) from an explicit ``null`` (``None``).
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class Unset(Enum):
    """Marks a member that was absent from the JSON, as opposed to ``null``."""

    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


class Action(str, Enum):
    """What the sender of a document is asking for."""

    CREATE = "create"
    DELETE = "delete"
    FETCH = "fetch"
    UPDATE = "update"


class Sender(str, Enum):
    """Which side of the API produced a document."""

    CLIENT = "client"
    SERVER = "server"


class Source(BaseModel):
    """Location of an error: a JSON Pointer or a query parameter, never both."""

    model_config = ConfigDict(frozen=True)

    parameter: Optional[str] = None
    pointer: Optional[str] = None

    def descend(self, child: Union[str, int]) -> "Source":
        """Return a source pointing at ``child`` of the current pointer."""
        return self.model_copy(update={"pointer": f"{self.pointer or ''}/{child}"})


class Link(BaseModel):
    """Link object: a URL plus optional meta."""

    model_config = ConfigDict(frozen=True)

    href: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


Links = Dict[str, Union[str, Link]]


class Error(BaseModel):
    """Error object."""

    model_config = ConfigDict(frozen=True)

    code: Optional[str] = None
    detail: Optional[str] = None
    id: Optional[str] = None
    links: Optional[Links] = None
    meta: Optional[Dict[str, Any]] = None
    source: Optional[Source] = None
    status: Optional[str] = None
    title: Optional[str] = None

    @property
    def pointer(self) -> str:
        """Pointer of this error's source, ``""`` (the root) when unset."""
        if self.source is None or self.source.pointer is None:
            return ""
        return self.source.pointer

    def descend(self, child: Union[str, int]) -> "Error":
        """Return a copy whose source points at ``child`` of the current pointer."""
        source = self.source or Source(pointer="")
        return self.model_copy(update={"source": source.descend(child)})


class ResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(frozen=True)

    type: str
    id: str
    meta: Optional[Dict[str, Any]] = None


class Relationship(BaseModel):
    """Relationship object holding resource linkage, links and meta."""

    model_config = ConfigDict(frozen=True)

    data: Union[
        Unset,
        None,
        "Resource",
        ResourceIdentifier,
        List[Union["Resource", ResourceIdentifier]],
    ] = UNSET
    links: Optional[Links] = None
    meta: Optional[Dict[str, Any]] = None


class Resource(BaseModel):
    """Resource object with attributes and relationships."""

    model_config = ConfigDict(frozen=True)

    type: str
    id: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, Relationship]] = None
    links: Optional[Links] = None
    meta: Optional[Dict[str, Any]] = None


ResourceLinkage = Union[
    None,
    Resource,
    ResourceIdentifier,
    List[Union[Resource, ResourceIdentifier]],
]


class Document(BaseModel):
    """Top-level JSON:API document.

    ``data`` and ``errors`` are exclusive.  A document with neither is only
    meaningful when it carries ``meta``.
    """

    model_config = ConfigDict(frozen=True)

    data: Union[
        Unset,
        None,
        Resource,
        ResourceIdentifier,
        List[Union[Resource, ResourceIdentifier]],
    ] = UNSET
    errors: Optional[List[Error]] = None
    included: Optional[List[Resource]] = None
    jsonapi: Optional[Dict[str, Any]] = None
    links: Optional[Links] = None
    meta: Optional[Dict[str, Any]] = None


Relationship.model_rebuild()
Resource.model_rebuild()
Document.model_rebuild()
