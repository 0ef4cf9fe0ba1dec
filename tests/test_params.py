"""Tests for projecting documents into nested params."""

from jsonapi_codec import Document, Resource, parse_document, to_params
from jsonapi_codec.params import Association, AssociationKind, nested_to_foreign_keys


class TestToParams:
    def test_resource_with_included_relationship(self, post_json):
        assert to_params(parse_document(post_json)) == {
            "id": "1",
            "title": "Hello",
            "body": "First post",
            "author": {"id": "2", "name": "Alice"},
        }

    def test_identifier_without_included_resource(self):
        document = parse_document(
            {
                "data": {
                    "type": "posts",
                    "id": "1",
                    "relationships": {"author": {"data": {"type": "authors", "id": "2"}}},
                }
            }
        )
        assert to_params(document) == {"id": "1", "author": {"id": "2"}}

    def test_to_many_and_null_relationships(self):
        document = parse_document(
            {
                "data": {
                    "type": "posts",
                    "attributes": {"title": "New"},
                    "relationships": {
                        "editor": {"data": None},
                        "tags": {"data": [{"type": "tags", "id": "1"}, {"type": "tags", "id": "2"}]},
                    },
                }
            },
            action="create",
            sender="client",
        )
        assert to_params(document) == {
            "title": "New",
            "editor": None,
            "tags": [{"id": "1"}, {"id": "2"}],
        }

    def test_collection(self):
        document = Document(
            data=[
                Resource(type="posts", id="1", attributes={"title": "a"}),
                Resource(type="posts", id="2", attributes={"title": "b"}),
            ]
        )
        assert to_params(document) == [{"title": "a", "id": "1"}, {"title": "b", "id": "2"}]

    def test_without_primary_data(self):
        assert to_params(Document(meta={"a": 1})) == {}
        assert to_params(Document(data=None)) == {}

    def test_cycles_are_cut_at_already_expanded_resources(self):
        document = parse_document(
            {
                "data": {
                    "type": "posts",
                    "id": "1",
                    "attributes": {"title": "Hello"},
                    "relationships": {"author": {"data": {"type": "authors", "id": "2"}}},
                },
                "included": [
                    {
                        "type": "authors",
                        "id": "2",
                        "attributes": {"name": "Alice"},
                        "relationships": {"posts": {"data": [{"type": "posts", "id": "1"}]}},
                    },
                    {
                        "type": "posts",
                        "id": "1",
                        "attributes": {"title": "Hello"},
                        "relationships": {"author": {"data": {"type": "authors", "id": "2"}}},
                    },
                ],
            }
        )
        assert to_params(document) == {
            "id": "1",
            "title": "Hello",
            "author": {"id": "2", "name": "Alice", "posts": [{"id": "1"}]},
        }


class TestNestedToForeignKeys:
    ASSOCIATIONS = [
        Association(name="author", kind=AssociationKind.BELONGS_TO),
        Association(name="comments", kind="has_many"),
    ]

    def test_belongs_to_becomes_foreign_key(self):
        params = {"title": "Hello", "author": {"id": "2", "name": "Alice"}, "comments": []}
        assert nested_to_foreign_keys(params, self.ASSOCIATIONS) == {
            "title": "Hello",
            "author_id": "2",
            "comments": [],
        }

    def test_null_belongs_to_clears_foreign_key(self):
        assert nested_to_foreign_keys({"author": None}, self.ASSOCIATIONS) == {"author_id": None}

    def test_absent_association_is_untouched(self):
        assert nested_to_foreign_keys({"title": "x"}, self.ASSOCIATIONS) == {"title": "x"}

    def test_custom_keys(self):
        association = Association(
            name="writer", kind="belongs_to", owner_key="writer_uuid", related_key="uuid"
        )
        assert association.foreign_key == "writer_uuid"
        assert nested_to_foreign_keys({"writer": {"uuid": "u"}}, [association]) == {
            "writer_uuid": "u"
        }
