from collections.abc import Mapping
from typing import Any, ClassVar

from lavacharts.constants import MISSING
from lavacharts.support.contracts import Arrayable
from lavacharts.support.options import Options
from lavacharts.support.rules import Rule


class ConfigObject(Arrayable):
    """A nested option value with its own allow-list, such as a text style.

    Accepts a mapping, keyword arguments, or both; keywords win.
    """

    allowed_options: ClassVar[frozenset[str]] = frozenset()
    option_rules: ClassVar[dict[str, Rule]] = {}

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any):
        self.options = Options(
            allowed=self.allowed_options,
            rules=self.option_rules,
            owner=type(self).__name__,
        )
        initial = {**(options or {}), **kwargs}
        self.options.merge(initial)

    def has(self, key: str) -> bool:
        return self.options.has(key)

    def get(self, key: str, default: Any = MISSING) -> Any:
        return self.options.get(key, default)

    def set(self, key: str, value: Any) -> "ConfigObject":
        self.options.set(key, value)
        return self

    def to_array(self) -> dict[str, Any]:
        return self.options.to_array()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigObject):
            return type(self) is type(other) and self.options == other.options
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.options.items())!r})"
