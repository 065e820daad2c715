"""ValidationError / ValidationErrors のユニットテスト"""

import dataclasses

import pytest
from fluent_validation import ValidationError, ValidationErrors


def test_validation_error_is_immutable() -> None:
    """ValidationError は生成後に変更できないこと。"""
    err = ValidationError("email", "must be a valid email")
    with pytest.raises(dataclasses.FrozenInstanceError):
        err.message = "changed"  # type: ignore[misc]


def test_validation_error_to_dict() -> None:
    err = ValidationError("name", "is required")
    assert err.to_dict() == {"field": "name", "message": "is required"}
    assert str(err) == "name: is required"


def test_validation_errors_empty() -> None:
    """空のコレクションは has_errors() が False で、文字列表現は空。"""
    errors = ValidationErrors()
    assert not errors.has_errors()
    assert errors.get_errors() == []
    assert len(errors) == 0
    assert str(errors) == ""


def test_validation_errors_add_and_retrieve() -> None:
    errors = ValidationErrors()
    errors.add(ValidationError("name", "is required"))
    errors.add(ValidationError("mail", "must be a valid email"))

    assert errors.has_errors()
    assert len(errors) == 2
    assert errors[0].field == "name"
    assert errors[1].field == "mail"
    assert [e.field for e in errors] == ["name", "mail"]


def test_validation_errors_str() -> None:
    """`field: message` を "; " で連結した文字列になること。"""
    errors = ValidationErrors(
        [
            ValidationError("name", "is required"),
            ValidationError("mail", "must be a valid email"),
        ]
    )
    assert str(errors) == "name: is required; mail: must be a valid email"


def test_validation_errors_get_errors_returns_copy() -> None:
    errors = ValidationErrors([ValidationError("name", "is required")])
    errors.get_errors().clear()
    assert len(errors) == 1


def test_validation_errors_to_list() -> None:
    errors = ValidationErrors([ValidationError("age", "must be greater than or equal to minimum")])
    assert errors.to_list() == [
        {"field": "age", "message": "must be greater than or equal to minimum"}
    ]
