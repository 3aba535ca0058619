"""Validation errors for messages and requests, convertible to an RPC status."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class StatusCode(enum.IntEnum):
    """Canonical RPC status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@dataclass(frozen=True)
class FieldViolation:
    """A single invalid field of a request, with a description of what is wrong."""

    field: str
    description: str


@dataclass(frozen=True)
class BadRequest:
    """Error detail listing the field violations of a bad request."""

    field_violations: tuple[FieldViolation, ...] = ()


@dataclass(frozen=True)
class Status:
    """An RPC status: a code, a message and optional details."""

    code: StatusCode
    message: str
    details: tuple[object, ...] = field(default=())


class ValidationError(Exception):
    """A message validation error made of one or more field violations."""

    def __init__(self, field_violations: Iterable[FieldViolation]) -> None:
        violations = tuple(field_violations)
        if not violations:
            raise ValueError("must provide at least one field violation")
        self._field_violations = violations
        super().__init__(self._describe())

    @property
    def field_violations(self) -> tuple[FieldViolation, ...]:
        """The field violations that make up this error."""
        return self._field_violations

    def grpc_status(self) -> Status:
        """Convert the error to a status with code INVALID_ARGUMENT."""
        fields = ", ".join(violation.field for violation in self._field_violations)
        return Status(
            code=StatusCode.INVALID_ARGUMENT,
            message=f"invalid fields: {fields}",
            details=(BadRequest(field_violations=self._field_violations),),
        )

    def _describe(self) -> str:
        if len(self._field_violations) == 1:
            (violation,) = self._field_violations
            return f"field violation on {violation.field}: {violation.description}"
        lines = [
            f" | {violation.field}: {violation.description}"
            for violation in self._field_violations
        ]
        return "field violation on multiple fields:\n" + "\n".join(lines)

    def __str__(self) -> str:
        return self._describe()