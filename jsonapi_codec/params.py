"""Projection of validated documents into nested create/update params.

Params are plain dicts and lists: a resource becomes its attributes plus
``"id"``, and each relationship is nested under its name.  Resource
identifiers are expanded with the matching resource from ``included`` when
there is one, otherwise they become ``{"id": id}``.

Expanding the same ``(type, id)`` again below itself projects only
``{"id": id}``, so cyclic relationship graphs terminate.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from jsonapi_codec.core.document import ResourceByIdByType, included_resource_by_id_by_type
from jsonapi_codec.schemas.resource import (
    UNSET,
    Document,
    Relationship,
    Resource,
    ResourceIdentifier,
)

Params = Union[dict[str, Any], list[dict[str, Any]], None]
Converted = FrozenSet[Tuple[str, Optional[str]]]


def to_params(document: Document) -> Params:
    """Return the params for the primary data of ``document``.

    ``{}`` when there is no primary data, a dict for a single resource and a
    list for a collection.
    """
    return document_to_params(document, included_resource_by_id_by_type(document))


def document_to_params(
    document: Document,
    resource_by_id_by_type: ResourceByIdByType,
    converted: Converted = frozenset(),
) -> Params:
    data = document.data
    if data is UNSET or data is None:
        return {}
    return resource_linkage_to_params(data, resource_by_id_by_type, converted)


def resource_linkage_to_params(
    data: Any, resource_by_id_by_type: ResourceByIdByType, converted: Converted
) -> Params:
    if data is None:
        return None
    if isinstance(data, list):
        return [
            resource_linkage_to_params(item, resource_by_id_by_type, converted)
            for item in data
        ]
    if isinstance(data, Resource):
        return resource_to_params(data, resource_by_id_by_type, converted)
    if isinstance(data, ResourceIdentifier):
        return resource_identifier_to_params(data, resource_by_id_by_type, converted)
    raise TypeError(f"{data!r} is not resource linkage.")


def resource_to_params(
    resource: Resource, resource_by_id_by_type: ResourceByIdByType, converted: Converted
) -> dict[str, Any]:
    """Combine ``id`` and ``attributes`` and merge in the relationships' params."""
    key = (resource.type, resource.id)
    if key in converted:
        return {"id": resource.id}
    params = dict(resource.attributes or {})
    if resource.id is not None:
        params["id"] = resource.id
    params.update(
        relationships_to_params(resource.relationships, resource_by_id_by_type, converted | {key})
    )
    return params


def resource_identifier_to_params(
    identifier: ResourceIdentifier,
    resource_by_id_by_type: ResourceByIdByType,
    converted: Converted,
) -> dict[str, Any]:
    """Expand the identifier with its included resource, if any."""
    key = (identifier.type, identifier.id)
    resource = resource_by_id_by_type.get(identifier.type, {}).get(identifier.id)
    if resource is None or key in converted:
        return {"id": identifier.id}
    params = {**(resource.attributes or {}), "id": identifier.id}
    params.update(
        relationships_to_params(resource.relationships, resource_by_id_by_type, converted | {key})
    )
    return params


def relationships_to_params(
    relationships: Optional[dict[str, Relationship]],
    resource_by_id_by_type: ResourceByIdByType,
    converted: Converted,
) -> dict[str, Any]:
    """Params for each relationship whose ``data`` is set, keyed by name."""
    params: dict[str, Any] = {}
    for name, relationship in (relationships or {}).items():
        if relationship.data is UNSET:
            continue
        params[name] = resource_linkage_to_params(
            relationship.data, resource_by_id_by_type, converted
        )
    return params


class AssociationKind(str, Enum):
    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    MANY_TO_MANY = "many_to_many"


class Association(BaseModel):
    """How a relationship name maps onto the target schema.

    ``owner_key`` is the foreign key column on the owner of a ``belongs_to``
    (``"<name>_id"`` by default) and ``related_key`` is the column it refers
    to.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: AssociationKind
    related: Any = None
    owner_key: Optional[str] = None
    related_key: str = "id"

    @property
    def foreign_key(self) -> str:
        return self.owner_key or f"{self.name}_id"

    @property
    def many(self) -> bool:
        return self.kind in (AssociationKind.HAS_MANY, AssociationKind.MANY_TO_MANY)


def nested_to_foreign_keys(
    params: dict[str, Any], associations: Iterable[Association]
) -> dict[str, Any]:
    """Replace nested ``belongs_to`` params with the owner's foreign key.

    ``{"author": {"id": 2}}`` becomes ``{"author_id": 2}`` and
    ``{"author": None}`` becomes ``{"author_id": None}``.  Associations absent
    from ``params`` are left alone, as are nested params without the related
    key and every other kind of association.
    """
    converted = dict(params)
    for association in associations:
        if association.kind is not AssociationKind.BELONGS_TO:
            continue
        if association.name not in converted:
            continue
        nested = converted[association.name]
        if nested is None:
            foreign_key_value = None
        elif isinstance(nested, dict) and association.related_key in nested:
            foreign_key_value = nested[association.related_key]
        else:
            continue
        del converted[association.name]
        converted[association.foreign_key] = foreign_key_value
    return converted
