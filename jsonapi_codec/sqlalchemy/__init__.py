"""SQLAlchemy helpers for JSON:API."""

from .data_layer import SQLAlchemyDataLayer, document_to_models, to_model
from .helpers import associations_from_model, cast_column_value, column_attributes

__all__ = [
    "SQLAlchemyDataLayer",
    "associations_from_model",
    "cast_column_value",
    "column_attributes",
    "document_to_models",
    "to_model",
]
