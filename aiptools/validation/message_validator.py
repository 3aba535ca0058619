"""Collection of field violations while validating a message."""

from __future__ import annotations

from aiptools.validation.error import FieldViolation, ValidationError


def _with_parent(parent_field: str, field: str) -> str:
    if not parent_field:
        return field
    return f"{parent_field}.{field}"


class MessageValidator:
    """Collects field violations of a message.

    A non-empty ``parent_field`` is prepended to every field added afterwards.
    """

    def __init__(self, parent_field: str = "") -> None:
        self.parent_field = parent_field
        self._field_violations: list[FieldViolation] = []

    def add_field_violation(self, field: str, description: str, *args: object) -> None:
        """Add a violation; description is %-formatted with args when given."""
        if args:
            description = description % args
        self._field_violations.append(
            FieldViolation(field=_with_parent(self.parent_field, field), description=description)
        )

    def add_field_error(self, field: str, err: BaseException) -> None:
        """Add a violation from err.

        The violations of a ValidationError are added individually, nested under field.
        """
        if isinstance(err, ValidationError):
            prefix = _with_parent(self.parent_field, field)
            for violation in err.field_violations:
                self._field_violations.append(
                    FieldViolation(
                        field=_with_parent(prefix, violation.field),
                        description=violation.description,
                    )
                )
        else:
            self.add_field_violation(field, str(err))

    def err(self) -> ValidationError | None:
        """Return the collected violations as an error, or None if there are none."""
        if self._field_violations:
            return ValidationError(self._field_violations)
        return None