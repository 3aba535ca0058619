import pytest

from aiptools.validation.error import (
    BadRequest,
    FieldViolation,
    Status,
    StatusCode,
    ValidationError,
)


def _violations():
    return [
        FieldViolation(field="foo.bar", description="test"),
        FieldViolation(field="baz", description="test2"),
    ]


def test_new_error_rejects_empty_violations():
    with pytest.raises(ValueError):
        ValidationError([])


def test_error_message_multiple_fields():
    err = ValidationError(_violations())
    assert str(err) == (
        "field violation on multiple fields:\n | foo.bar: test\n | baz: test2"
    )


def test_error_message_single_field():
    err = ValidationError([FieldViolation(field="foo", description="bar")])
    assert str(err) == "field violation on foo: bar"


def test_grpc_status():
    violations = _violations()
    status = ValidationError(violations).grpc_status()
    assert status.code == StatusCode.INVALID_ARGUMENT
    assert status.message == "invalid fields: foo.bar, baz"
    assert len(status.details) == 1
    assert status.details[0] == BadRequest(field_violations=tuple(violations))


def test_grpc_status_value():
    status = ValidationError([FieldViolation("a", "b")]).grpc_status()
    assert status == Status(
        code=StatusCode.INVALID_ARGUMENT,
        message="invalid fields: a",
        details=(BadRequest((FieldViolation("a", "b"),)),),
    )


def test_field_violations_preserved_in_order():
    violations = _violations()
    err = ValidationError(iter(violations))
    assert err.field_violations == tuple(violations)


def test_invalid_argument_code_value():
    assert int(ValidationError(_violations()).grpc_status().code) == 3


def test_error_can_be_raised_and_caught():
    err = ValidationError([FieldViolation("x", "y")])
    with pytest.raises(ValidationError) as excinfo:
        raise err
    assert str(excinfo.value) == "field violation on x: y"
    assert excinfo.value.field_violations == (FieldViolation("x", "y"),)