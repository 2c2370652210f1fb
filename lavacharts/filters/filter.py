from collections.abc import Mapping
from typing import Any, ClassVar

from lavacharts.constants import logger
from lavacharts.enums import FilterType, WrapType
from lavacharts.exceptions import InvalidFilterType, InvalidParamType
from lavacharts.registry import Registry
from lavacharts.support.contracts import Customizable, Jsonable, Renderable
from lavacharts.support.options import Options
from lavacharts.support.rules import MAPPING, NON_NEGATIVE_INT, STRING, Rule

FILTER_SUFFIX = "Filter"

COLUMN_LABEL_KEY = "filterColumnLabel"
COLUMN_INDEX_KEY = "filterColumnIndex"

FILTER_REGISTRY: Registry["Filter"] = Registry(
    "filter",
    WrapType.CONTROL,
    lambda tag, valid: InvalidFilterType(tag, valid),
)

# options every control understands
BASE_RULES: dict[str, Rule] = {
    COLUMN_INDEX_KEY: NON_NEGATIVE_INT,
    COLUMN_LABEL_KEY: STRING,
    "ui": MAPPING,
}


def register_filter(
    tag: FilterType | str, *, version: str = "1", package: str = "controls"
):
    if isinstance(tag, FilterType):
        tag = tag.value
    return FILTER_REGISTRY.register(
        tag, version=version, package=package, js_type=tag + FILTER_SUFFIX
    )


def validate_label_or_index(label_or_index: Any) -> str | int:
    if isinstance(label_or_index, bool):
        raise InvalidParamType(
            "labelOrIndex", "a non-empty string or non-negative int", label_or_index
        )
    if isinstance(label_or_index, int) and label_or_index >= 0:
        return label_or_index
    if isinstance(label_or_index, str) and label_or_index.strip():
        return label_or_index
    raise InvalidParamType(
        "labelOrIndex", "a non-empty string or non-negative int", label_or_index
    )


def column_key(label_or_index: str | int) -> str:
    if isinstance(label_or_index, str):
        return COLUMN_LABEL_KEY
    return COLUMN_INDEX_KEY


def options_dict(owner: str, options: Any) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, Options):
        return dict(options.items())
    if not isinstance(options, Mapping):
        raise InvalidParamType(f"{owner} options", "a mapping", options)
    return dict(options)


class Filter(Jsonable, Customizable, Renderable):
    """Parent to the dashboard filters.

    A filter targets one column of the dashboard data, either by label or by
    index. The column reference is written into the options under the key the
    runtime expects, and only one of the two keys is ever present.
    """

    option_rules: ClassVar[dict[str, Rule]] = BASE_RULES
    allowed_options: ClassVar[frozenset[str]] = frozenset(BASE_RULES)

    def __init__(
        self, label_or_index: str | int, options: Mapping[str, Any] | None = None
    ):
        self._require_meta()
        self.label_or_index = validate_label_or_index(label_or_index)
        self.options = Options(
            allowed=self.allowed_options,
            rules=self.option_rules,
            owner=type(self).__name__,
        )
        initial = options_dict(type(self).__name__, options)
        # label_or_index names the column
        initial.pop(COLUMN_LABEL_KEY, None)
        initial.pop(COLUMN_INDEX_KEY, None)
        initial[column_key(self.label_or_index)] = self.label_or_index
        self.options.merge(initial)
        logger.debug(
            "Built %s on column %r with options %s",
            self.get_type(),
            self.label_or_index,
            list(self.options),
        )

    @classmethod
    def _unregistered_error(cls) -> Exception:
        return InvalidFilterType(cls.__name__, FILTER_REGISTRY.tags())

    def get_label_or_index(self) -> str | int:
        return self.label_or_index

    def get_options(self) -> Options:
        return self.options

    def customize(self, options: Mapping[str, Any]) -> "Filter":
        """Set any option unchecked.

        A column key given here retargets the filter and replaces the
        column reference it was built with.
        """
        options = options_dict(type(self).__name__, options)
        column = None
        for key in (COLUMN_LABEL_KEY, COLUMN_INDEX_KEY):
            if key in options:
                value = options.pop(key)
                column = validate_label_or_index(value)
                if column_key(column) != key:
                    raise InvalidParamType(key, f"a valid {key}", value)
        self.options.customize(options)
        if column is not None:
            self.set_column(column)
        return self

    def set_column(self, label_or_index: str | int) -> "Filter":
        label_or_index = validate_label_or_index(label_or_index)
        for key in (COLUMN_LABEL_KEY, COLUMN_INDEX_KEY):
            if self.options.has(key):
                self.options.remove(key)
        self.label_or_index = label_or_index
        self.options.set(column_key(label_or_index), label_or_index)
        return self

    def to_array(self) -> dict[str, Any]:
        return {
            "type": self.get_type(),
            "options": self.options.to_array(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self.label_or_index!r}>"
