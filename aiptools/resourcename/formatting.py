"""Joining, formatting and parsing of resource names."""

from __future__ import annotations

from aiptools.resourcename.scanner import ResourceNameError, Scanner


def join(*elems: str) -> str:
    """Combine resource names, separated by slashes.

    Empty segments are dropped. Only the first element keeps its service name
    when it is a full resource name. Joining nothing gives ``/``.
    """
    segments: list[str] = []
    for index, elem in enumerate(elems):
        scanner = Scanner(elem)
        for segment in scanner:
            if index == 0 and not segments and scanner.full:
                segments.append(f"//{scanner.service_name}")
            if segment == "":
                continue
            segments.append(str(segment))
    if not segments:
        return "/"
    return "/".join(segments)


def sprint(pattern: str, *variables: str) -> str:
    """Fill the variables of pattern, in order, and return the resource name.

    Missing variables are left empty; surplus variables are ignored.
    """
    values = iter(variables)
    parts = [
        next(values, "") if segment.is_variable() else str(segment.literal())
        for segment in Scanner(pattern)
    ]
    return "/".join(parts)


def sscan(name: str, pattern: str, count: int) -> tuple[str, ...]:
    """Parse name with pattern and return the values of its count variables.

    Raises ResourceNameError if name does not match pattern or the pattern does
    not have exactly count variables.
    """
    try:
        return _scan(name, pattern, count)
    except ResourceNameError as error:
        raise ResourceNameError(
            f"parse resource name '{name}' with pattern '{pattern}': {error}"
        ) from error


def _scan(name: str, pattern: str, count: int) -> tuple[str, ...]:
    name_scanner = Scanner(name)
    pattern_scanner = Scanner(pattern)
    values: list[str] = []
    for pattern_segment in pattern_scanner:
        if pattern_scanner.full:
            raise ResourceNameError("invalid pattern")
        if not name_scanner.scan():
            raise ResourceNameError(f"segment {pattern_segment}: unexpected EOF")
        name_segment = name_scanner.segment
        if not pattern_segment.is_variable():
            if pattern_segment.literal() != name_segment.literal():
                raise ResourceNameError(
                    f"segment {pattern_segment}: got {name_segment}"
                )
            continue
        if len(values) >= count:
            raise ResourceNameError(f"segment {pattern_segment}: too few variables")
        values.append(str(name_segment.literal()))
    if name_scanner.scan():
        raise ResourceNameError("got trailing segments in name")
    if len(values) != count:
        raise ResourceNameError(
            f"too many variables: got {len(values)} but expected {count}"
        )
    return tuple(values)