"""Tests for document builders and document helpers."""

import pytest

from jsonapi_codec import (
    Document,
    Error,
    JSONAPIDocumentBuilder,
    Resource,
    error_builder,
    error_status_consensus,
)
from jsonapi_codec.core import included_resource_by_id_by_type


def errors_with(*statuses):
    return Document(errors=[Error(status=status, title="x") for status in statuses])


class TestErrorStatusConsensus:
    def test_without_errors(self):
        assert error_status_consensus(Document(data=None)) is None

    def test_single_and_agreeing(self):
        assert error_status_consensus(errors_with("404")) == "404"
        assert error_status_consensus(errors_with("422", "422")) == "422"

    def test_missing_statuses_are_ignored(self):
        assert error_status_consensus(errors_with(None, "409", None)) == "409"
        assert error_status_consensus(errors_with(None)) is None

    def test_non_numeric_statuses_are_ignored(self):
        assert error_status_consensus(errors_with("bad", "422", "oops")) == "422"
        assert error_status_consensus(errors_with("bad")) is None

    def test_same_block(self):
        assert error_status_consensus(errors_with("404", "422")) == "400"

    def test_greater_block_wins(self):
        assert error_status_consensus(errors_with("422", "500")) == "500"
        assert error_status_consensus(errors_with("503", "404")) == "500"


class TestIncludedIndex:
    def test_index(self):
        author = Resource(type="authors", id="2", attributes={"name": "Alice"})
        document = Document(data=None, included=[author])
        assert included_resource_by_id_by_type(document) == {"authors": {"2": author}}
        assert included_resource_by_id_by_type(Document(data=None)) == {}


class TestBuilders:
    def test_collection_with_version(self):
        builder = JSONAPIDocumentBuilder(include_version=True)
        document = builder.build_collection([], meta={"record_count": 0})
        assert document.data == []
        assert document.jsonapi == {"version": "1.0"}
        assert document.meta == {"record_count": 0}

    def test_single(self):
        post = Resource(type="posts", id="1")
        document = JSONAPIDocumentBuilder().build_single(post, links={"self": "/posts/1"})
        assert document.data == post
        assert document.jsonapi is None

    def test_error_object_needs_a_member(self):
        with pytest.raises(ValueError):
            error_builder.error_object()

    def test_template_meta(self):
        template = error_builder.template(action="create", sender="client", pointer="/data")
        assert template.meta == {"action": "create", "sender": "client"}
        assert template.descend("attributes").source.pointer == "/data/attributes"
