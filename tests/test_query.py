"""Tests for watsoncli.query -- JMESPath projection."""

from __future__ import annotations

import pytest

from watsoncli.exceptions import QueryCompileError, QueryEvalError
from watsoncli.query import DEFAULT_SEGMENT, compile_query, last_query_segment, project

TREE = {
    "translations": [{"translation": "Hola"}, {"translation": "Mundo"}],
    "word_count": 2,
}


class TestProject:
    def test_none_is_identity(self) -> None:
        assert project(TREE, None) is TREE

    def test_empty_string_is_identity(self) -> None:
        assert project(TREE, "") is TREE

    def test_field(self) -> None:
        assert project(TREE, "word_count") == 2

    def test_index_and_field(self) -> None:
        assert project(TREE, "translations[0].translation") == "Hola"

    def test_projection(self) -> None:
        assert project(TREE, "translations[*].translation") == ["Hola", "Mundo"]

    def test_no_match_is_none(self) -> None:
        assert project(TREE, "missing") is None

    def test_invalid_expression(self) -> None:
        with pytest.raises(QueryCompileError) as exc_info:
            project(TREE, "translations[")
        assert exc_info.value.source == "jmes_query"

    def test_evaluation_error(self) -> None:
        with pytest.raises(QueryEvalError):
            project(TREE, "length(word_count)")


class TestCompileQuery:
    def test_valid(self) -> None:
        assert compile_query("a.b").search({"a": {"b": 1}}) == 1

    def test_invalid(self) -> None:
        with pytest.raises(QueryCompileError):
            compile_query("a..b")


class TestLastQuerySegment:
    def test_no_query(self) -> None:
        assert last_query_segment(None) == DEFAULT_SEGMENT

    def test_no_dot(self) -> None:
        assert last_query_segment("models") == "models"

    def test_last_segment(self) -> None:
        assert last_query_segment("translations[0].translation") == "translation"

    def test_trailing_projection(self) -> None:
        assert last_query_segment("models[*].model_id") == "model_id"
