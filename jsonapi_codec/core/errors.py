"""JSON:API error object builders."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from jsonapi_codec.config import get_settings
from jsonapi_codec.schemas.resource import Action, Document, Error, Links, Sender, Source


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents.

    Validation errors are derived from an *error template*: an ``Error`` whose
    ``source`` locates the value being parsed and whose ``meta`` carries the
    ``action`` and ``sender`` of the document.
    """

    def template(
        self,
        *,
        action: Action | str | None = None,
        sender: Sender | str | None = None,
        pointer: str = "",
    ) -> Error:
        """Return an error template rooted at ``pointer``."""
        meta: dict[str, Any] = {}
        if action is not None:
            meta["action"] = Action(action)
        if sender is not None:
            meta["sender"] = Sender(sender)
        return Error(meta=meta or None, source=Source(pointer=pointer))

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: Source | None = None,
        links: Links | None = None,
        meta: dict[str, Any] | None = None,
    ) -> Error:
        """Return a JSON:API error object."""
        fields: dict[str, Any] = {}
        if status is not None:
            fields["status"] = status
        if code is not None:
            fields["code"] = code
        if title is not None:
            fields["title"] = title
        if detail is not None:
            fields["detail"] = detail
        if source is not None:
            fields["source"] = source
        if links is not None:
            fields["links"] = links
        if meta is not None:
            fields["meta"] = meta
        if not fields:
            raise ValueError("Error object must include at least one field.")
        return Error(**fields)

    def error_document(self, errors: Iterable[Error]) -> Document:
        """Return a JSON:API document with an errors array."""
        return Document(errors=list(errors))

    def type_error(self, error_template: Error, human_type: str) -> Error:
        """The value at the template's pointer is not a ``human_type``."""
        return self._from_template(
            error_template,
            title="Type is wrong",
            detail=f"`{error_template.pointer}` type is not {human_type}",
            meta={"type": human_type},
        )

    def missing(self, error_template: Error, child: str) -> Error:
        """Required ``child`` is absent from the object at the template's pointer."""
        return self._from_template(
            error_template,
            title="Child missing",
            detail=f"`{error_template.pointer}/{child}` is missing",
            meta={"child": child},
        )

    def minimum_children(self, error_template: Error, children: Sequence[str]) -> Error:
        """None of ``children`` is present on the object at the template's pointer."""
        lines = "\n".join(children)
        return self._from_template(
            error_template,
            title="Not enough children",
            detail=(
                f"At least one of the following children of `{error_template.pointer}` "
                f"must be present:\n{lines}"
            ),
            meta={"children": list(children)},
        )

    def conflicting(self, error_template: Error, children: Sequence[str]) -> Error:
        """More than one of the mutually exclusive ``children`` is present."""
        lines = "\n".join(children)
        return self._from_template(
            error_template,
            title="Children conflicting",
            detail=(
                "The following members conflict with each other "
                f"(only one can be present):\n{lines}"
            ),
            meta={"children": list(children)},
        )

    def out_of_range(self, *, number: int, count: int) -> Error:
        """Page ``number`` is past the last of ``count`` pages."""
        return Error(
            title="Page out of range",
            detail=f"Page number ({number}) must be less than or equal to page count ({count})",
            meta={"count": count, "number": number},
            source=Source(parameter="page[number]"),
            status=get_settings().error_status,
        )

    def _from_template(
        self, error_template: Error, *, title: str, detail: str, meta: dict[str, Any]
    ) -> Error:
        return error_template.model_copy(
            update={
                "detail": detail,
                "meta": meta,
                "status": get_settings().error_status,
                "title": title,
            }
        )


error_builder = JSONAPIErrorBuilder()
