"""Serializers from typed JSON:API values to wire JSON."""

from .base import JSONAPISerializer, serializer

__all__ = ["JSONAPISerializer", "serializer"]
