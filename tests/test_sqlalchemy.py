"""Tests for converting params and documents into SQLAlchemy models."""

import pytest
from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_codec import JSONAPIValidationError, parse_document
from jsonapi_codec.params import Association, AssociationKind
from jsonapi_codec.schemas import Document, Error
from jsonapi_codec.sqlalchemy import (
    SQLAlchemyDataLayer,
    associations_from_model,
    document_to_models,
    to_model,
)

Base = declarative_base()

post_tags = Table(
    "post_tags",
    Base.metadata,
    Column("post_id", ForeignKey("posts.id"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id"), primary_key=True),
)


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    posts = relationship("Post", back_populates="author")
    profile = relationship("Profile", back_populates="author", uselist=False)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True)
    bio = Column(String)
    author_id = Column(Integer, ForeignKey("authors.id"))
    author = relationship("Author", back_populates="profile")


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"))
    author = relationship("Author", back_populates="posts")
    tags = relationship("Tag", secondary=post_tags)


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True)
    name = Column(String)


MODEL_BY_TYPE = {"authors": Author, "posts": Post, "tags": Tag}


def by_name(associations):
    return {association.name: association for association in associations}


class TestAssociations:
    def test_belongs_to(self):
        author = by_name(associations_from_model(Post))["author"]
        assert author == Association(
            name="author",
            kind=AssociationKind.BELONGS_TO,
            related=Author,
            owner_key="author_id",
            related_key="id",
        )

    def test_many_to_many(self):
        tags = by_name(associations_from_model(Post))["tags"]
        assert tags.kind is AssociationKind.MANY_TO_MANY
        assert tags.related is Tag
        assert tags.many

    def test_has_many_and_has_one(self):
        associations = by_name(associations_from_model(Author))
        assert associations["posts"].kind is AssociationKind.HAS_MANY
        assert associations["profile"].kind is AssociationKind.HAS_ONE
        assert not associations["profile"].many


class TestToModel:
    def test_columns_are_cast(self):
        post = to_model({"id": "1", "title": "Hello", "unknown": "x"}, Post)
        assert isinstance(post, Post)
        assert post.id == 1
        assert post.title == "Hello"

    def test_belongs_to_sets_foreign_key(self):
        post = to_model({"id": "1", "author": {"id": "2", "name": "Alice"}}, Post)
        assert post.author.name == "Alice"
        assert post.author_id == 2

    def test_null_belongs_to(self):
        post = to_model({"id": "1", "author": None}, Post)
        assert post.author is None
        assert post.author_id is None

    def test_to_many(self):
        post = to_model({"title": "x", "tags": [{"id": "1"}, {"id": "2", "name": "b"}]}, Post)
        assert [tag.id for tag in post.tags] == [1, 2]
        assert post.tags[1].name == "b"
        assert post.id is None


class TestDocumentToModels:
    def test_single_resource(self, post_json):
        post = document_to_models(parse_document(post_json), MODEL_BY_TYPE)
        assert post.id == 1
        assert post.title == "Hello"
        assert post.author.name == "Alice"
        assert post.author_id == 2

    def test_collection(self):
        document = parse_document(
            {
                "data": [
                    {"type": "tags", "id": "1", "attributes": {"name": "a"}},
                    {"type": "tags", "id": "2", "attributes": {"name": "b"}},
                ]
            }
        )
        tags = SQLAlchemyDataLayer(model_by_type=MODEL_BY_TYPE).document_to_models(document)
        assert [(tag.id, tag.name) for tag in tags] == [(1, "a"), (2, "b")]

    def test_empty_data(self):
        assert document_to_models(Document(data=None), MODEL_BY_TYPE) is None
        assert document_to_models(Document(data=[]), MODEL_BY_TYPE) == []

    def test_error_document(self):
        with pytest.raises(JSONAPIValidationError):
            document_to_models(Document(errors=[Error(title="x")]), MODEL_BY_TYPE)

    def test_unknown_type(self):
        document = parse_document({"data": {"type": "comments", "id": "1", "attributes": {}}})
        with pytest.raises(ValueError):
            document_to_models(document, MODEL_BY_TYPE)
