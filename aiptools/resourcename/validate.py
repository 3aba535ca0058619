"""Validation of resource names and resource name patterns (AIP-122)."""

from __future__ import annotations

from aiptools.resourcename.dns import is_domain_name
from aiptools.resourcename.scanner import WILDCARD, ResourceNameError, Scanner


def validate(name: str) -> str:
    """Check that name is a valid resource name and return it.

    Raises ResourceNameError if it is not.
    """
    if not name:
        raise ResourceNameError("empty")
    scanner = Scanner(name)
    for index, segment in enumerate(scanner, start=1):
        if segment == "":
            raise ResourceNameError(f"segment {index} is empty")
        if segment == WILDCARD:
            continue
        if segment.is_variable():
            raise ResourceNameError(
                f"segment '{segment}': valid resource names must not contain variables"
            )
        if not is_domain_name(segment):
            raise ResourceNameError(f"segment '{segment}': not a valid DNS name")
    if scanner.full and not is_domain_name(scanner.service_name):
        raise ResourceNameError(
            f"service '{scanner.service_name}': not a valid DNS name"
        )
    return name


def validate_pattern(pattern: str) -> str:
    """Check that pattern is a valid resource name pattern and return it.

    Raises ResourceNameError if it is not.
    """
    if not pattern:
        raise ResourceNameError("empty")
    scanner = Scanner(pattern)
    for index, segment in enumerate(scanner, start=1):
        if segment == "":
            raise ResourceNameError(f"segment {index} is empty")
        if segment == WILDCARD:
            raise ResourceNameError(
                f"segment '{index}': wildcards not allowed in patterns"
            )
        if segment.is_variable():
            variable = segment.literal()
            if not variable:
                raise ResourceNameError(f"segment '{segment}': missing variable name")
            if not _is_snake_case(variable):
                raise ResourceNameError(f"segment '{segment}': must be valid snake case")
        elif not is_domain_name(segment):
            raise ResourceNameError(f"segment '{segment}': not a valid DNS name")
    if scanner.full:
        raise ResourceNameError("patterns can not be full resource names")
    return pattern


def _is_snake_case(s: str) -> bool:
    if not s:
        return True
    first, rest = s[0], s[1:]
    if not first.islower():
        return False
    return all(c == "_" or c.islower() or c.isdecimal() for c in rest)