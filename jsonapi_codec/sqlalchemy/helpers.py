"""SQLAlchemy mapper introspection for params conversion."""

from __future__ import annotations

from typing import Any

from sqlalchemy.inspection import inspect

from jsonapi_codec.params import Association, AssociationKind


def associations_from_model(model: Any) -> list[Association]:
    """Describe every relationship of a mapped ``model`` as an ``Association``.

    Many-to-one relationships are ``belongs_to`` and keep their local foreign
    key column as ``owner_key``; one-to-many relationships are ``has_many`` or
    ``has_one`` depending on ``uselist``.
    """
    mapper = inspect(model)
    associations: list[Association] = []
    for relationship in mapper.relationships:
        direction = relationship.direction.name
        related = relationship.mapper.class_
        if direction == "MANYTOONE":
            local, remote = next(iter(relationship.local_remote_pairs))
            associations.append(
                Association(
                    name=relationship.key,
                    kind=AssociationKind.BELONGS_TO,
                    related=related,
                    owner_key=_attribute_key(mapper, local),
                    related_key=_attribute_key(relationship.mapper, remote),
                )
            )
        elif direction == "MANYTOMANY":
            associations.append(
                Association(
                    name=relationship.key, kind=AssociationKind.MANY_TO_MANY, related=related
                )
            )
        else:
            kind = AssociationKind.HAS_MANY if relationship.uselist else AssociationKind.HAS_ONE
            associations.append(Association(name=relationship.key, kind=kind, related=related))
    return associations


def column_attributes(model: Any) -> dict[str, Any]:
    """Map attribute key to column for every column attribute of ``model``."""
    mapper = inspect(model)
    return {prop.key: prop.columns[0] for prop in mapper.column_attrs}


def cast_column_value(column: Any, value: Any) -> Any:
    """Coerce a params value to the column's Python type where that is lossless.

    Params carry ids as strings, so numeric columns convert numeric strings.
    Values that cannot be converted are returned unchanged for the ORM or
    database to reject.
    """
    if value is None:
        return None
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value
    if isinstance(value, python_type) or python_type not in (int, float):
        return value
    if isinstance(value, bool):
        return value
    try:
        return python_type(value)
    except (TypeError, ValueError):
        return value


def _attribute_key(mapper: Any, column: Any) -> str:
    """Attribute name under which ``column`` is mapped (usually the column name)."""
    prop = mapper.get_property_by_column(column)
    return prop.key
