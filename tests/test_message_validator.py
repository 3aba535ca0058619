from aiptools.validation.error import FieldViolation, ValidationError
from aiptools.validation.message_validator import MessageValidator


def test_no_violation():
    assert MessageValidator().err() is None


def test_add_single_violation():
    v = MessageValidator()
    v.add_field_violation("foo", "bar")
    assert str(v.err()) == "field violation on foo: bar"


def test_add_single_violation_with_parent():
    v = MessageValidator()
    v.parent_field = "foo"
    v.add_field_violation("bar", "baz")
    assert str(v.err()) == "field violation on foo.bar: baz"


def test_parent_field_in_constructor():
    v = MessageValidator("foo")
    v.add_field_violation("bar", "baz")
    assert str(v.err()) == "field violation on foo.bar: baz"


def test_add_nested_violations():
    inner = MessageValidator()
    inner.add_field_violation("b", "c")
    outer = MessageValidator()
    outer.add_field_error("a", inner.err())
    assert str(outer.err()) == "field violation on a.b: c"


def test_add_field_error():
    v = MessageValidator()
    v.add_field_error("a", RuntimeError("boom"))
    assert str(v.err()) == "field violation on a: boom"


def test_format_arguments():
    v = MessageValidator()
    v.add_field_violation("size", "must be at most %d, got %s", 10, "11")
    assert str(v.err()) == "field violation on size: must be at most 10, got 11"


def test_nested_keeps_parent_and_restores_it():
    inner = ValidationError([FieldViolation("b", "c"), FieldViolation("d", "e")])
    v = MessageValidator("root")
    v.add_field_error("a", inner)
    v.add_field_violation("x", "y")
    assert v.parent_field == "root"
    assert v.err().field_violations == (
        FieldViolation("root.a.b", "c"),
        FieldViolation("root.a.d", "e"),
        FieldViolation("root.x", "y"),
    )


def test_err_status_lists_all_fields():
    v = MessageValidator()
    v.add_field_violation("a", "1")
    v.add_field_violation("b", "2")
    assert v.err().grpc_status().message == "invalid fields: a, b"