from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, Iterator

from lavacharts.constants import CONFIG, MISSING, logger
from lavacharts.exceptions import (
    InvalidConfigProperty,
    InvalidConfigValue,
    InvalidParamType,
    MissingOption,
)
from lavacharts.support.rules import Rule

MAX_FLATTEN_DEPTH = 64

SCALAR_TYPES = (str, int, float, bool)


def flatten(value: Any, owner: str = "Options") -> Any:
    """Recursively convert an option value into plain JSON-representable data.

    Mappings become dicts with string keys, lists and tuples become lists,
    enum members become their value, and anything exposing a callable
    ``to_array`` is replaced by the flattened result of that call. Objects
    with no ``to_array`` are returned untouched.

    Raises InvalidConfigValue when the value graph references itself or nests
    deeper than MAX_FLATTEN_DEPTH.
    """
    return _flatten(value, owner, set(), 0)


def _flatten(value: Any, owner: str, active: set[int], depth: int) -> Any:
    if isinstance(value, Enum):
        value = value.value
    if value is None or isinstance(value, SCALAR_TYPES):
        return value
    if depth > MAX_FLATTEN_DEPTH:
        raise InvalidConfigValue(
            owner,
            type(value).__name__,
            f"nested less than {MAX_FLATTEN_DEPTH} levels deep",
            value,
        )
    marker = id(value)
    if marker in active:
        raise InvalidConfigValue(
            owner, type(value).__name__, "free of circular references", value
        )
    active.add(marker)
    try:
        if isinstance(value, Options):
            return {
                _flatten_key(key): _flatten(item, owner, active, depth + 1)
                for key, item in value.items()
            }
        to_array = getattr(value, "to_array", None)
        if callable(to_array):
            return _flatten(to_array(), owner, active, depth + 1)
        if isinstance(value, Mapping):
            return {
                _flatten_key(key): _flatten(item, owner, active, depth + 1)
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return [_flatten(item, owner, active, depth + 1) for item in value]
        return value
    finally:
        active.discard(marker)


def _flatten_key(key: Any) -> str:
    # json object keys are always strings
    if isinstance(key, Enum):
        key = key.value
    return str(key)


class Options:
    """Ordered key/value configuration bag.

    When ``allowed`` is given the container is strict: writes through
    ``set``/``merge`` reject keys outside the allow-list while
    ``CONFIG.strict_options`` is on. ``rules`` constrain the values of
    individual keys and are always enforced on checked writes. ``customize``
    is the unchecked path and accepts any string key.
    """

    def __init__(
        self,
        initial: Mapping[str, Any] | None = None,
        allowed: Iterable[str] | None = None,
        rules: Mapping[str, Rule] | None = None,
        defaults: Mapping[str, Any] | None = None,
        owner: str = "Options",
    ):
        self.owner = owner
        self.allowed: frozenset[str] | None = (
            frozenset(allowed) if allowed is not None else None
        )
        self.rules: dict[str, Rule] = dict(rules or {})
        self.defaults: dict[str, Any] = dict(defaults or {})
        self._values: dict[str, Any] = {}
        if initial is not None:
            self.merge(initial)

    @property
    def is_strict(self) -> bool:
        return self.allowed is not None and CONFIG.strict_options

    def validate(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise InvalidParamType(f"{self.owner} option name", "a string", key)
        if self.allowed is not None and key not in self.allowed:
            if self.is_strict:
                raise InvalidConfigProperty(self.owner, key, self.allowed)
            logger.warning(
                "Accepting unknown option %s for %s; strict options are disabled",
                key,
                self.owner,
            )
        rule = self.rules.get(key)
        if rule is not None and not rule(value):
            raise InvalidConfigValue(self.owner, key, rule.description, value)

    def has(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = MISSING) -> Any:
        if key in self._values:
            return self._values[key]
        if key in self.defaults:
            return self.defaults[key]
        if default is not MISSING:
            return default
        raise MissingOption(self.owner, key)

    def set(self, key: str, value: Any) -> "Options":
        self.validate(key, value)
        self._values[key] = value
        return self

    def merge(self, options: Mapping[str, Any]) -> "Options":
        options = self._as_mapping(options)
        # validate everything up front so a bad key leaves the container untouched
        for key, value in options.items():
            self.validate(key, value)
        self._values.update(options)
        return self

    def customize(self, options: Mapping[str, Any]) -> "Options":
        options = self._as_mapping(options)
        for key in options:
            if not isinstance(key, str):
                raise InvalidParamType(f"{self.owner} option name", "a string", key)
        logger.debug(
            "Customizing %s with unchecked options: %s", self.owner, list(options)
        )
        self._values.update(options)
        return self

    def remove(self, key: str) -> Any:
        if key not in self._values:
            raise MissingOption(self.owner, key)
        return self._values.pop(key)

    def to_array(self) -> dict[str, Any]:
        return flatten(self, self.owner)

    def keys(self):
        return self._values.keys()

    def values(self):
        return self._values.values()

    def items(self):
        return self._values.items()

    def _as_mapping(self, options: Any) -> Mapping[str, Any]:
        if isinstance(options, Options):
            return options._values
        if not isinstance(options, Mapping):
            raise InvalidParamType(f"{self.owner} options", "a mapping", options)
        return options

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Options):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Options<{self.owner}>({self._values!r})"
