"""JSON:API document construction and inspection."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from jsonapi_codec.config import get_settings
from jsonapi_codec.schemas.resource import (
    Document,
    Error,
    Links,
    Resource,
    ResourceIdentifier,
)

ResourceByIdByType = dict[str, dict[str, Resource]]


class JSONAPIDocumentBuilder:
    """Build typed JSON:API documents."""

    def __init__(self, *, include_version: bool = False) -> None:
        """Optionally stamp every document with the ``jsonapi`` version object."""
        self.include_version = include_version

    def build_single(
        self,
        resource: Resource | ResourceIdentifier | None,
        *,
        included: Iterable[Resource] | None = None,
        links: Links | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> Document:
        """Return a document for a single resource (``None`` for an empty to-one)."""
        return self._build(data=resource, included=included, links=links, meta=meta)

    def build_collection(
        self,
        resources: Iterable[Resource | ResourceIdentifier],
        *,
        included: Iterable[Resource] | None = None,
        links: Links | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> Document:
        """Return a document for a collection of resources."""
        return self._build(data=list(resources), included=included, links=links, meta=meta)

    def build_error(self, errors: Iterable[Error]) -> Document:
        """Return an error document from error objects."""
        return Document(errors=list(errors), jsonapi=self._jsonapi())

    def build_meta(self, meta: Mapping[str, Any], *, links: Links | None = None) -> Document:
        """Return a meta-only document."""
        return Document(meta=dict(meta), links=links, jsonapi=self._jsonapi())

    def _build(
        self,
        *,
        data: Any,
        included: Iterable[Resource] | None,
        links: Links | None,
        meta: Mapping[str, Any] | None,
    ) -> Document:
        document: dict[str, Any] = {"data": data}
        if included:
            document["included"] = list(included)
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        jsonapi = self._jsonapi()
        if jsonapi:
            document["jsonapi"] = jsonapi
        return Document(**document)

    def _jsonapi(self) -> Optional[dict[str, Any]]:
        if not self.include_version:
            return None
        return {"version": get_settings().version}


def error_status_consensus(document: Document) -> Optional[str]:
    """Return the status that best sums up the errors of ``document``.

    * ``None`` for a document without errors
    * errors without a numeric status are ignored
    * agreeing statuses are the consensus
    * statuses in the same hundreds block give that block (``"404"`` and
      ``"422"`` give ``"400"``)
    * otherwise the greater block wins (``"422"`` and ``"500"`` give ``"500"``)
    """
    if document.errors is None:
        return None
    consensus: Optional[str] = None
    for error in document.errors:
        status = error.status
        if status is None or not status.isdigit() or status == consensus:
            continue
        if consensus is None:
            consensus = status
            continue
        block = max(int(status) // 100, int(consensus) // 100)
        consensus = str(block * 100)
    return consensus


def included_resource_by_id_by_type(document: Document) -> ResourceByIdByType:
    """Index ``included`` resources by type, then id."""
    resource_by_id_by_type: ResourceByIdByType = {}
    for resource in document.included or []:
        if resource.id is None:
            continue
        resource_by_id_by_type.setdefault(resource.type, {})[resource.id] = resource
    return resource_by_id_by_type
