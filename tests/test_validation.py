"""Tests for reflecting pydantic validation errors as JSON:API errors."""

import pytest
from pydantic import BaseModel, ValidationError

from jsonapi_codec.schemas import errors_from_validation_error, validation_error_document


class ArticleIn(BaseModel):
    title: str
    author_id: int
    rank: int = 0


@pytest.fixture
def validation_error():
    with pytest.raises(ValidationError) as excinfo:
        ArticleIn.model_validate({"author_id": "many", "rank": "high"})
    return excinfo.value


class TestErrorsFromValidationError:
    def test_pointers(self, validation_error):
        errors = errors_from_validation_error(
            validation_error, attributes={"title"}, relationships={"author"}
        )
        pointers = [error.source.pointer if error.source else None for error in errors]
        assert pointers == ["/data/attributes/title", "/data/relationships/author", None]

    def test_title_and_detail(self, validation_error):
        title, author, rank = errors_from_validation_error(validation_error)
        assert title.title == "Field required"
        assert title.detail == "title Field required"
        assert author.detail.startswith("author_id ")
        assert rank.status == "422"

    def test_explicit_foreign_keys(self, validation_error):
        errors = errors_from_validation_error(
            validation_error, foreign_keys={"author_id": "writer"}
        )
        assert errors[1].source.pointer == "/data/relationships/writer"

    def test_document(self, validation_error):
        document = validation_error_document(validation_error, attributes={"title", "rank"})
        assert len(document.errors) == 3
        assert document.errors[2].source.pointer == "/data/attributes/rank"
