from typing import Tuple

from .base import ValidatorDescriptor


# ---------------------------------------------------------------------------
# different (!=)
# ---------------------------------------------------------------------------

def different(line: str, value: str) -> bool:
    """
    True when the line differs from `value`.

    Strict string inequality; "1" and "1.0" are different.
    """
    return line != value


DIFFERENT = ValidatorDescriptor(
    name="different",
    operator="!=",
    arity=1,
    check=different,
    description="Checks that the value of the line is different from something.",
    example="!=:1",
)


# ---------------------------------------------------------------------------
# equal (==)
# ---------------------------------------------------------------------------

def equal(line: str, value: str) -> bool:
    return line == value


EQUAL = ValidatorDescriptor(
    name="equal",
    operator="==",
    arity=1,
    check=equal,
    description="Checks that the value of the line is exactly equal to something.",
    example="==:42",
)


# ---------------------------------------------------------------------------
# not_empty (?)
# ---------------------------------------------------------------------------

def not_empty(line: str) -> bool:
    # Whitespace-only counts as empty
    return line.strip() != ""


NOT_EMPTY = ValidatorDescriptor(
    name="not_empty",
    operator="?",
    arity=0,
    check=not_empty,
    description="Checks that the line has a value at all.",
    example="?",
)


# Registration order is the order validators are listed to users.
DEFAULT_VALIDATORS: Tuple[ValidatorDescriptor, ...] = (
    DIFFERENT,
    EQUAL,
    NOT_EMPTY,
)
