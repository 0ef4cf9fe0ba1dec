"""Conversion of params and documents into SQLAlchemy model instances."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_codec.core.exceptions import JSONAPIValidationError
from jsonapi_codec.params import Association, AssociationKind, to_params
from jsonapi_codec.schemas.resource import UNSET, Document, Resource, ResourceIdentifier
from jsonapi_codec.sqlalchemy.helpers import (
    associations_from_model,
    cast_column_value,
    column_attributes,
)


class SQLAlchemyDataLayer:
    """Bridge validated JSON:API documents with SQLAlchemy models.

    ``model_by_type`` maps a resource ``type`` to the mapped class used for
    it.  Instances are built transiently; adding them to a session is left to
    the caller.
    """

    def __init__(self, *, model_by_type: Mapping[str, Any]) -> None:
        """Store the resource type to model mapping."""
        self.model_by_type = dict(model_by_type)
        self._associations: dict[Any, list[Association]] = {}

    def associations(self, model: Any) -> list[Association]:
        """Return the cached association table of ``model``."""
        if model not in self._associations:
            self._associations[model] = associations_from_model(model)
        return self._associations[model]

    def to_model(self, params: Mapping[str, Any], model: Any) -> Any:
        """Build a ``model`` instance from nested params.

        Column attributes are copied from params.  Nested association params
        are converted recursively; a ``belongs_to`` also sets its foreign key
        from the nested instance's id.  Associations absent from params are
        not touched.
        """
        columns = column_attributes(model)
        values = {
            key: cast_column_value(columns[key], value)
            for key, value in params.items()
            if key in columns
        }
        instance = model(**values)
        for association in self.associations(model):
            if association.name not in params:
                continue
            self._put_association(instance, params[association.name], association)
        return instance

    def document_to_models(self, document: Document) -> Any:
        """Convert the primary data of ``document`` into model instances.

        Returns ``None`` for an empty to-one, a list for a collection and a
        single instance otherwise.

        Raises:
            JSONAPIValidationError: if ``document`` is an error document.
        """
        if document.errors is not None:
            raise JSONAPIValidationError(document)
        data = document.data
        if data is UNSET or data is None:
            return None
        params = to_params(document)
        if isinstance(data, list):
            return [
                self.to_model(item_params, self._model_for(item))
                for item, item_params in zip(data, params)
            ]
        return self.to_model(params, self._model_for(data))

    def _model_for(self, data: Resource | ResourceIdentifier) -> Any:
        try:
            return self.model_by_type[data.type]
        except KeyError:
            raise ValueError(f"No model registered for type '{data.type}'.") from None

    def _put_association(self, instance: Any, nested: Any, association: Association) -> None:
        related = association.related
        if association.many:
            if nested is None:
                return
            setattr(instance, association.name, [self.to_model(item, related) for item in nested])
            return

        associated = None if nested is None else self.to_model(nested, related)
        setattr(instance, association.name, associated)
        if association.kind is AssociationKind.BELONGS_TO and associated is not None:
            related_id = getattr(associated, association.related_key, None)
            if related_id is not None:
                setattr(instance, association.foreign_key, related_id)


def to_model(params: Mapping[str, Any], model: Any) -> Any:
    """Build a ``model`` instance from nested params."""
    return SQLAlchemyDataLayer(model_by_type={}).to_model(params, model)


def document_to_models(document: Document, model_by_type: Mapping[str, Any]) -> Any:
    """Convert the primary data of ``document`` into instances of ``model_by_type``."""
    return SQLAlchemyDataLayer(model_by_type=model_by_type).document_to_models(document)
