"""Tests for encoding typed documents back into JSON."""

import pytest

from jsonapi_codec import (
    UNSET,
    Document,
    Error,
    ExclusiveMembersError,
    Relationship,
    Resource,
    ResourceIdentifier,
    Source,
    parse_document,
    serializer,
)


class TestDocument:
    def test_round_trip_keeps_empty_attributes(self):
        json = {"data": {"type": "posts", "id": "1", "attributes": {}}}
        document = parse_document(json)
        assert isinstance(document.data, Resource)
        assert serializer.document(document) == json

    def test_round_trip(self, post_json):
        assert serializer.document(parse_document(post_json)) == post_json

    def test_error_document_round_trip(self):
        json = {
            "errors": [
                {
                    "status": "422",
                    "title": "Child missing",
                    "source": {"pointer": "/data"},
                    "meta": {"child": "id"},
                }
            ]
        }
        assert serializer.document(parse_document(json)) == json

    def test_empty_collection_round_trip(self):
        assert serializer.document(parse_document({"data": []})) == {"data": []}

    def test_null_data_is_written(self):
        assert serializer.document(Document(data=None)) == {"data": None}

    def test_unset_data_is_left_out(self):
        assert serializer.document(Document(meta={"total": 3})) == {"meta": {"total": 3}}

    def test_data_and_errors_are_exclusive(self):
        document = Document(data=[], errors=[Error(title="Oops")])
        with pytest.raises(ExclusiveMembersError):
            serializer.document(document)

    def test_to_json_dispatches(self):
        identifier = ResourceIdentifier(type="tags", id="1")
        assert serializer.to_json([identifier]) == [{"type": "tags", "id": "1"}]
        with pytest.raises(ValueError):
            serializer.to_json(UNSET)


class TestMembers:
    def test_unset_relationship_data_is_left_out(self):
        relationship = Relationship(links={"related": "/posts/1/author"})
        assert serializer.relationship(relationship) == {"links": {"related": "/posts/1/author"}}

    def test_null_relationship_data_is_written(self):
        assert serializer.relationship(Relationship(data=None)) == {"data": None}

    def test_resource_without_id(self):
        resource = Resource(type="posts", attributes={"title": "New"})
        assert serializer.resource(resource) == {"type": "posts", "attributes": {"title": "New"}}

    def test_source_members_are_exclusive(self):
        with pytest.raises(ExclusiveMembersError) as excinfo:
            serializer.source(Source(parameter="sort", pointer="/data"))
        assert "`parameter` and `pointer` is exclusive" in str(excinfo.value)

    def test_empty_source(self):
        assert serializer.error(Error(title="x", source=Source())) == {"title": "x", "source": {}}
