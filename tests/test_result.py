"""Tests for QueryResult"""

from directory_gateway.models.result import QueryResult


def test_success():
    result = QueryResult.success([{"id": 1}, {"id": 2}])
    assert result.ok
    assert result.error is None
    assert result.first() == {"id": 1}


def test_success_empty_list():
    assert QueryResult.success([]).first() is None


def test_failure():
    result = QueryResult.failure("permission denied")
    assert not result.ok
    assert result.data is None
    assert result.error == "permission denied"


def test_failure_without_message_is_still_a_failure():
    assert not QueryResult.failure("").ok


def test_first_on_object():
    user = {"id": "abc"}
    assert QueryResult.success(user).first() is user
