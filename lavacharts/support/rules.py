from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, Callable


@dataclass(frozen=True)
class Rule:
    """A value constraint for a single option key.

    ``description`` completes the sentence "<key> must be ..." in error messages.
    """

    description: str
    check: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.check(value))


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Number):
        return True
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return False
        return True
    return False


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


NUMERIC = Rule("numeric", _is_number)

INTEGER = Rule("an integer", _is_int)

NON_NEGATIVE_INT = Rule("a non-negative integer", lambda v: _is_int(v) and v >= 0)

BOOLEAN = Rule("a boolean", lambda v: isinstance(v, bool))

STRING = Rule("a string", lambda v: isinstance(v, str))

NON_EMPTY_STRING = Rule(
    "a non-empty string", lambda v: isinstance(v, str) and bool(v.strip())
)

MAPPING = Rule("a mapping", lambda v: isinstance(v, Mapping))

SEQUENCE = Rule("a list", lambda v: isinstance(v, (list, tuple)))

# chart dimensions accept pixel numbers or css strings such as "80%"
DIMENSION = Rule(
    "numeric or a percentage string",
    lambda v: _is_number(v)
    or (isinstance(v, str) and v.endswith("%") and _is_number(v[:-1])),
)


def one_of(*choices: Any) -> Rule:
    def check(value: Any) -> bool:
        # enum members serialize to their value
        if isinstance(value, Enum):
            value = value.value
        return not isinstance(value, bool) and value in choices

    return Rule(f"one of {', '.join(repr(x) for x in choices)}", check)


def between(lower: float, upper: float) -> Rule:
    return Rule(
        f"a number between {lower} and {upper}",
        lambda v: _is_number(v) and lower <= float(v) <= upper,
    )


def instance_of(*types: type) -> Rule:
    return Rule(
        f"an instance of {' or '.join(x.__name__ for x in types)}",
        lambda v: isinstance(v, types),
    )


def any_of(*rules: Rule) -> Rule:
    return Rule(
        " or ".join(x.description for x in rules),
        lambda v: any(rule(v) for rule in rules),
    )


def sequence_of(rule: Rule) -> Rule:
    return Rule(
        f"a list of {rule.description} values",
        lambda v: isinstance(v, (list, tuple)) and all(rule(x) for x in v),
    )
