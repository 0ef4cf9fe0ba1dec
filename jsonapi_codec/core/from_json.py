"""Error-accumulating extraction of typed values from decoded JSON.

Every parser in :mod:`jsonapi_codec.parsers` returns either ``Ok(value)`` or
``Err(errors)``.  Sibling members are always all evaluated so that one call
reports every problem in the input; the errors keep the order in which the
members are declared and, for arrays, the order of the elements.

A parser receives an *error template* (see
:meth:`jsonapi_codec.core.errors.JSONAPIErrorBuilder.template`) whose source
pointer locates the JSON value it is given.  Before delegating to a child
parser the template is descended to the child's member name or index.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeVar, Union

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.schemas.resource import Document, Error

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successfully extracted ``value``."""

    value: T

    def map(self, function: Callable[[T], Any]) -> "Ok[Any]":
        return Ok(function(self.value))


@dataclass(frozen=True)
class Err:
    """Every error found while extracting a value."""

    errors: tuple[Error, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    def map(self, function: Callable[[Any], Any]) -> "Err":
        return self

    def to_document(self) -> Document:
        """Return the errors as an error document."""
        return Document(errors=list(self.errors))


Result = Union[Ok[Any], Err]
FromJson = Callable[[Any, Error], Result]


@dataclass(frozen=True)
class Member:
    """A JSON member of an object.

    ``from_json`` parses the member's value; without one the raw JSON value is
    kept as is.
    """

    name: str
    required: bool = False
    from_json: FromJson | None = None


@dataclass(frozen=True)
class FieldSpec:
    """Maps JSON ``member`` to the model ``field`` it populates."""

    field: str
    member: Member


def _put_fields(collected: Mapping[str, Any], fields: Mapping[str, Any]) -> dict[str, Any]:
    return {**collected, **fields}


def _errors(result: Result) -> tuple[Error, ...]:
    if isinstance(result, Err):
        return result.errors
    return ()


def merge(
    collected: Result,
    field_result: Result,
    put: Callable[[Any, Any], Any] = _put_fields,
) -> Result:
    """Combine ``field_result`` into ``collected``.

    Two ``Ok`` results are combined with ``put`` (a dict union by default).
    If either is an ``Err`` the result is an ``Err`` holding the errors of
    ``collected`` followed by those of ``field_result``.
    """
    if isinstance(collected, Ok) and isinstance(field_result, Ok):
        return Ok(put(collected.value, field_result.value))
    return Err(_errors(collected) + _errors(field_result))


def reduce(
    results: Iterable[Result],
    seed: Result | None = None,
    put: Callable[[Any, Any], Any] = _put_fields,
) -> Result:
    """Fold ``results`` into ``seed`` (``Ok({})`` by default) with :func:`merge`."""
    if seed is None:
        seed = Ok({})
    return functools.reduce(lambda collected, result: merge(collected, result, put), results, seed)


def put_key(result: Result, key: str) -> Result:
    """Wrap an ``Ok`` value as ``{key: value}`` so it can be merged into a map."""
    return result.map(lambda value: {key: value})


def from_parent_json_to_field_result(
    parent_json: Mapping[str, Any], error_template: Error, spec: FieldSpec
) -> Result:
    """Extract the field described by ``spec`` from the object ``parent_json``.

    * member present and valid: ``Ok({field: value})``
    * member absent and optional: ``Ok({})``
    * member absent and required: ``Err`` with a missing-child error
    * member present but invalid: the sub-parser's ``Err``
    """
    member = spec.member
    if member.name not in parent_json:
        if member.required:
            return Err((error_builder.missing(error_template, member.name),))
        return Ok({})

    value = parent_json[member.name]
    if member.from_json is None:
        return Ok({spec.field: value})
    return put_key(member.from_json(value, error_template.descend(member.name)), spec.field)


def from_fields(
    json: Mapping[str, Any], error_template: Error, specs: Sequence[FieldSpec]
) -> Result:
    """Extract every field of ``specs`` from ``json`` into one kwargs dict."""
    return reduce(
        from_parent_json_to_field_result(json, error_template, spec) for spec in specs
    )


def validate_minimum_children(
    collected: Result,
    json: Mapping[str, Any],
    error_template: Error,
    children: Sequence[str],
) -> Result:
    """Add a not-enough-children error when none of ``children`` is in ``json``."""
    if any(child in json for child in children):
        return collected
    return merge(collected, Err((error_builder.minimum_children(error_template, children),)))


def type_error(error_template: Error, human_type: str) -> Err:
    """Return an ``Err`` holding a single type error."""
    return Err((error_builder.type_error(error_template, human_type),))


def string_from_json(json: Any, error_template: Error) -> Result:
    """Accept a JSON string."""
    if isinstance(json, str):
        return Ok(json)
    return type_error(error_template, "string")


def integer_from_json(json: Any, error_template: Error) -> Result:
    """Accept a JSON integer.  ``true``/``false`` are not integers."""
    if isinstance(json, int) and not isinstance(json, bool):
        return Ok(json)
    return type_error(error_template, "integer")


def object_from_json(json: Any, error_template: Error, human_type: str) -> Result:
    """Accept a JSON object (kept as a ``dict``) or ``null``."""
    if json is None:
        return Ok(None)
    if isinstance(json, dict):
        return Ok(dict(json))
    return type_error(error_template, human_type)


def _append(collected: list[Any], value: Any) -> list[Any]:
    return [*collected, value]


def from_json_array(json: Any, error_template: Error, element_from_json: FromJson) -> Result:
    """Parse every element of a JSON array with ``element_from_json``.

    A value that is not an array is a single type error; otherwise every
    element is parsed and all element errors are kept.
    """
    if not isinstance(json, list):
        return type_error(error_template, "array")
    return reduce(
        (
            element_from_json(element, error_template.descend(index))
            for index, element in enumerate(json)
        ),
        seed=Ok([]),
        put=_append,
    )
