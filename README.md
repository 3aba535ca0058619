# aiptools

Helpers for working with resource names and for collecting field violations
when validating requests in resource-oriented APIs. Pure Python, no
dependencies.

## Installation

```
pip install aiptools
```

## Resource names

A resource name is a slash-separated list of segments, such as
`publishers/123/books/les-miserables`. A full resource name starts with a
service name: `//library.example.com/publishers/123`. Patterns use
`{variable}` segments: `publishers/{publisher}/books/{book}`. The segment `-`
is a wildcard. A segment may carry a revision after `@`, as in `sites/1@beef`.

### Scanning

`aiptools.resourcename.scanner` holds the building blocks:

- `Scanner(name)` steps through the segments with `scan()`, or can be iterated
  directly. Its properties `start`, `end`, `segment`, `full` and
  `service_name` describe the current position.
- `Segment` (a `str`) has `is_variable()`, `is_wildcard()` and `literal()`.
- `Literal` (a `str`) has `has_revision()`, `resource_id()` and
  `revision_id()`.
- `WILDCARD` (`"-"`), `REVISION_SEPARATOR` (`"@"`) and `ResourceNameError`
  (a `ValueError`).

```python
from aiptools.resourcename.scanner import Scanner

scanner = Scanner("//library.example.com/publishers/123")
print(list(scanner))          # ['publishers', '123']
print(scanner.full)           # True
print(scanner.service_name)   # library.example.com
```

### Validating, matching and relating names

```python
from aiptools.resourcename.validate import validate, validate_pattern
from aiptools.resourcename.matching import match
from aiptools.resourcename.ancestry import (
    ancestor, contains_wildcard, has_parent, range_parents,
)

validate("publishers/123/books/les-miserables")   # returns the name
validate_pattern("publishers/{publisher}/books/{book}")
# both raise ResourceNameError when the input is not valid

match("publishers/{publisher}", "publishers/123")  # True
contains_wildcard("shippers/-/sites/1")            # True
has_parent("shippers/1/sites/1", "shippers/-")     # True
has_parent("sites/1@beef", "sites/1")              # True
ancestor("foo/1/bar/2", "foo/{foo}")               # "foo/1"
ancestor("foo/1/bar/2", "baz/{baz}")               # None
list(range_parents("foo/bar/baz/123"))             # ["foo", "foo/bar", "foo/bar/baz"]
```

`validate` checks that every segment is a wildcard or a DNS-style label and
that no segment is a variable; `validate_pattern` rejects wildcards and full
resource names and requires variable names in snake case. The DNS check is
available on its own as `aiptools.resourcename.dns.is_domain_name`.

### Formatting and parsing

```python
from aiptools.resourcename.formatting import join, sprint, sscan

sprint("publishers/{publisher}/books/{book}", "foo", "bar")
# "publishers/foo/books/bar"
sscan("publishers/foo/books/bar", "publishers/{publisher}/books/{book}", 2)
# ("foo", "bar")
join("parent/1", "child/2")                        # "parent/1/child/2"
join()                                             # "/"
```

`sprint` leaves missing variables empty and ignores surplus ones. `sscan`
raises `ResourceNameError` if the name does not fit the pattern or the
pattern does not have exactly the given number of variables.

## Validation

`aiptools.validation.message_validator.MessageValidator` collects field
violations. An optional `parent_field` is prepended to every field added
afterwards. `err()` returns a `ValidationError`, or `None` when nothing was
added.

```python
from aiptools.validation.message_validator import MessageValidator

inner = MessageValidator()
inner.add_field_violation("b", "must be at most %d", 10)

outer = MessageValidator()
outer.add_field_error("a", inner.err())
outer.add_field_error("c", ValueError("boom"))

error = outer.err()
print(error)
# field violation on multiple fields:
#  | a.b: must be at most 10
#  | c: boom

status = error.grpc_status()
print(status.code.name, status.message)   # INVALID_ARGUMENT invalid fields: a.b, c
```

`aiptools.validation.error` defines `ValidationError` (which must be given at
least one violation, else `ValueError` is raised), `FieldViolation`,
`BadRequest`, `Status` and the `StatusCode` enumeration.

## What this package does not do

`Status`, `BadRequest` and `StatusCode` are plain Python values. The package
does not depend on gRPC or protocol buffers and does not produce or send wire
messages; turning a `Status` into a real RPC response is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```