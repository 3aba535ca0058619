"""Scanning of resource names into segments, and the segment and literal types."""

from __future__ import annotations

from collections.abc import Iterator

WILDCARD = "-"
"""The resource name wildcard segment."""

REVISION_SEPARATOR = "@"
"""The character that separates resource IDs from revision IDs."""


class ResourceNameError(ValueError):
    """Raised when a resource name or pattern is invalid or does not parse."""


class Literal(str):
    """The literal part of a resource name segment: ``RESOURCE_ID ["@" REVISION_ID]``."""

    __slots__ = ()

    def has_revision(self) -> bool:
        """Return True if the literal carries a valid revision."""
        index = self.find(REVISION_SEPARATOR)
        if index < 1 or index >= len(self) - 1:
            return False
        return REVISION_SEPARATOR not in self[index + 1 :]

    def resource_id(self) -> str:
        """Return the resource ID part of the literal."""
        if not self.has_revision():
            return str(self)
        return str(self[: self.index(REVISION_SEPARATOR)])

    def revision_id(self) -> str:
        """Return the revision ID part of the literal, or an empty string."""
        if not self.has_revision():
            return ""
        return str(self[self.index(REVISION_SEPARATOR) + 1 :])


class Segment(str):
    """A segment of a resource name or pattern: a literal or a ``{variable}``."""

    __slots__ = ()

    def is_variable(self) -> bool:
        """Return True if the segment is a variable such as ``{name}``."""
        return len(self) > 2 and self.startswith("{") and self.endswith("}")

    def literal(self) -> Literal:
        """Return the literal value; for variables, the variable name."""
        if self.is_variable():
            return Literal(self[1:-1])
        return Literal(self)

    def is_wildcard(self) -> bool:
        """Return True if the segment is the wildcard ``-``."""
        return self == WILDCARD


class Scanner:
    """Step-by-step scanner over the segments of a resource name."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._start = 0
        self._end = 0
        self._service_start = 0
        self._service_end = 0
        self._full = False

    def scan(self) -> bool:
        """Advance to the next segment; return False when none is left."""
        name = self._name
        if self._end == len(name):
            return False
        if self._end == 0:
            if name.startswith("//"):
                self._full = True
                next_slash = name.find("/", 2)
                if next_slash == -1:
                    self._service_start, self._service_end = 2, len(name)
                    self._start = self._end = len(name)
                    return False
                self._service_start, self._service_end = 2, next_slash
                self._start = self._end = next_slash + 1
            elif name.startswith("/"):
                self._start = 1
        else:
            self._start = self._end + 1
        next_slash = name.find("/", self._start)
        self._end = len(name) if next_slash == -1 else next_slash
        return True

    def __iter__(self) -> Iterator[Segment]:
        while self.scan():
            yield self.segment

    @property
    def start(self) -> int:
        """Start index (inclusive) of the current segment."""
        return self._start

    @property
    def end(self) -> int:
        """End index (exclusive) of the current segment."""
        return self._end

    @property
    def segment(self) -> Segment:
        """The current segment."""
        return Segment(self._name[self._start : self._end])

    @property
    def full(self) -> bool:
        """True if a full resource name (``//service/...``) was detected."""
        return self._full

    @property
    def service_name(self) -> str:
        """The service name of a full resource name, else an empty string."""
        return self._name[self._service_start : self._service_end]