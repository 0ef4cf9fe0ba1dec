"""Serializer turning typed JSON:API values back into wire JSON."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.exceptions import ExclusiveMembersError
from jsonapi_codec.schemas.resource import (
    UNSET,
    Document,
    Error,
    Link,
    Links,
    Relationship,
    Resource,
    ResourceIdentifier,
    Source,
    Unset,
)


class JSONAPISerializer:
    """Serialize typed documents into JSON-compatible dicts and lists.

    ``None`` members are left out of the output.  ``data`` is left out only
    when it is ``UNSET``; an explicit ``None`` is written as ``null``.
    """

    def to_json(self, value: Any) -> Any:
        """Serialize any value of the typed document tree."""
        if isinstance(value, Document):
            return self.document(value)
        if isinstance(value, Resource):
            return self.resource(value)
        if isinstance(value, ResourceIdentifier):
            return self.resource_identifier(value)
        if isinstance(value, Relationship):
            return self.relationship(value)
        if isinstance(value, Error):
            return self.error(value)
        if isinstance(value, Source):
            return self.source(value)
        if isinstance(value, Link):
            return self.link(value)
        if isinstance(value, list):
            return [self.to_json(item) for item in value]
        if isinstance(value, Unset):
            raise ValueError("UNSET has no JSON representation.")
        return value

    def document(self, document: Document) -> dict[str, Any]:
        """Return the JSON object for a top-level document."""
        if document.data is not UNSET and document.errors is not None:
            raise ExclusiveMembersError("data", document.data, "errors", document.errors)
        serialized: dict[str, Any] = {}
        if document.data is not UNSET:
            serialized["data"] = self.resource_linkage(document.data)
        if document.errors is not None:
            serialized["errors"] = [self.error(error) for error in document.errors]
        if document.included is not None:
            serialized["included"] = [self.resource(item) for item in document.included]
        if document.links is not None:
            serialized["links"] = self.links(document.links)
        if document.meta is not None:
            serialized["meta"] = dict(document.meta)
        if document.jsonapi is not None:
            serialized["jsonapi"] = dict(document.jsonapi)
        return serialized

    def resource_linkage(self, data: Any) -> Any:
        """Return ``null``, a single object or an array for resource linkage."""
        if data is None:
            return None
        if isinstance(data, list):
            return [self.resource_linkage(item) for item in data]
        if isinstance(data, Resource):
            return self.resource(data)
        if isinstance(data, ResourceIdentifier):
            return self.resource_identifier(data)
        raise TypeError(f"{data!r} is not resource linkage.")

    def resource(self, resource: Resource) -> dict[str, Any]:
        """Return the JSON object for a resource."""
        serialized: dict[str, Any] = {"type": resource.type}
        if resource.id is not None:
            serialized["id"] = resource.id
        if resource.attributes is not None:
            serialized["attributes"] = dict(resource.attributes)
        if resource.relationships is not None:
            serialized["relationships"] = {
                name: self.relationship(relationship)
                for name, relationship in resource.relationships.items()
            }
        if resource.links is not None:
            serialized["links"] = self.links(resource.links)
        if resource.meta is not None:
            serialized["meta"] = dict(resource.meta)
        return serialized

    def resource_identifier(self, identifier: ResourceIdentifier) -> dict[str, Any]:
        """Return the JSON object for a resource identifier."""
        serialized: dict[str, Any] = {"type": identifier.type, "id": identifier.id}
        if identifier.meta is not None:
            serialized["meta"] = dict(identifier.meta)
        return serialized

    def relationship(self, relationship: Relationship) -> dict[str, Any]:
        """Return the JSON object for a relationship."""
        serialized: dict[str, Any] = {}
        if relationship.data is not UNSET:
            serialized["data"] = self.resource_linkage(relationship.data)
        if relationship.links is not None:
            serialized["links"] = self.links(relationship.links)
        if relationship.meta is not None:
            serialized["meta"] = dict(relationship.meta)
        return serialized

    def links(self, links: Links) -> dict[str, Any]:
        """Return the JSON object for a links object."""
        return {
            name: value if isinstance(value, str) else self.link(value)
            for name, value in links.items()
        }

    def link(self, link: Link) -> dict[str, Any]:
        """Return the JSON object for a link object."""
        serialized: dict[str, Any] = {}
        if link.href is not None:
            serialized["href"] = link.href
        if link.meta is not None:
            serialized["meta"] = dict(link.meta)
        return serialized

    def error(self, error: Error) -> dict[str, Any]:
        """Return the JSON object for an error."""
        serialized: dict[str, Any] = {}
        if error.id is not None:
            serialized["id"] = error.id
        if error.links is not None:
            serialized["links"] = self.links(error.links)
        if error.status is not None:
            serialized["status"] = error.status
        if error.code is not None:
            serialized["code"] = error.code
        if error.title is not None:
            serialized["title"] = error.title
        if error.detail is not None:
            serialized["detail"] = error.detail
        if error.source is not None:
            serialized["source"] = self.source(error.source)
        if error.meta is not None:
            serialized["meta"] = dict(error.meta)
        return serialized

    def source(self, source: Source) -> dict[str, str]:
        """Return the JSON object for an error source."""
        if source.parameter is not None and source.pointer is not None:
            raise ExclusiveMembersError(
                "parameter", source.parameter, "pointer", source.pointer
            )
        if source.parameter is not None:
            return {"parameter": source.parameter}
        if source.pointer is not None:
            return {"pointer": source.pointer}
        return {}


serializer = JSONAPISerializer()
