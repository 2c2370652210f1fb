from collections.abc import Mapping
from typing import Any, ClassVar

from lavacharts.constants import logger
from lavacharts.enums import ChartType, WrapType
from lavacharts.exceptions import (
    InvalidChartType,
    InvalidDataTable,
    InvalidParamType,
)
from lavacharts.registry import Registry
from lavacharts.support.contracts import (
    Customizable,
    DataTableSource,
    Jsonable,
    Renderable,
)
from lavacharts.support.options import Options, flatten
from lavacharts.support.rules import Rule
from lavacharts.values import ElementId, Label

ELEMENT_ID_KEY = "elementId"
EVENTS_KEY = "events"

CHART_REGISTRY: Registry["Chart"] = Registry(
    "chart",
    WrapType.CHART,
    lambda tag, valid: InvalidChartType(tag, valid),
)


def register_chart(
    tag: ChartType | str, *, version: str = "1", package: str = "corechart"
):
    if isinstance(tag, ChartType):
        tag = tag.value
    return CHART_REGISTRY.register(tag, version=version, package=package)


class Chart(Jsonable, Customizable, Renderable):
    """Parent to all charts.

    Holds the label, the table extracted from the dataset and the chart
    options. Concrete charts declare their allow-list and value rules and
    register themselves with ``register_chart``.
    """

    allowed_options: ClassVar[frozenset[str]] = frozenset()
    option_rules: ClassVar[dict[str, Rule]] = {}
    option_defaults: ClassVar[dict[str, Any]] = {EVENTS_KEY: {}}

    def __init__(
        self,
        label: str | Label,
        datatable: DataTableSource | None = None,
        options: Mapping[str, Any] | None = None,
    ):
        self._require_meta()
        self.label = Label(label)
        self.datatable = self._extract_table(datatable)
        self.element_id: ElementId | None = None
        self.options = Options(
            allowed=self.allowed_options | {ELEMENT_ID_KEY},
            rules=self.option_rules,
            defaults=self.option_defaults,
            owner=type(self).__name__,
        )
        if options is not None:
            self.options.merge(options)
        self._claim_element_id()
        logger.debug(
            "Built %s '%s' with options %s",
            self.get_type(),
            self.label,
            list(self.options),
        )

    @classmethod
    def _unregistered_error(cls) -> Exception:
        return InvalidChartType(cls.__name__, CHART_REGISTRY.tags())

    def _extract_table(self, datatable: DataTableSource | None) -> Any:
        if datatable is None:
            raise InvalidDataTable(f"{type(self).__name__} requires a DataTable.")
        getter = getattr(datatable, "get_data_table", None)
        if not callable(getter):
            raise InvalidDataTable(
                f"{type(datatable).__name__} does not provide get_data_table()."
            )
        return getter()

    def _claim_element_id(self) -> None:
        if self.options.has(ELEMENT_ID_KEY):
            self.element_id = ElementId(self.options.get(ELEMENT_ID_KEY))
            self.options.remove(ELEMENT_ID_KEY)

    def set_element_id(self, element_id: str | ElementId) -> "Chart":
        self.element_id = ElementId(element_id)
        return self

    def get_options(self) -> Options:
        return self.options

    def get_data_table(self) -> Any:
        return self.datatable

    def get_events(self) -> dict[str, Any]:
        return dict(self.options.get(EVENTS_KEY))

    def has_events(self) -> bool:
        return self.options.has(EVENTS_KEY)

    def customize(self, options: Mapping[str, Any]) -> "Chart":
        """Set any option, with no checks for name or value.

        For options the runtime supports that this library does not know
        about. Nested settings can be passed as plain dicts or config objects;
        they are flattened on serialization.
        """
        if isinstance(options, Options):
            options = dict(options.items())
        if not isinstance(options, Mapping):
            raise InvalidParamType(
                f"{type(self).__name__} options", "a mapping", options
            )
        # validate the element id before touching the options
        element_id = None
        if ELEMENT_ID_KEY in options:
            element_id = ElementId(options[ELEMENT_ID_KEY])
        self.options.customize(options)
        if element_id is not None:
            self.element_id = element_id
            self.options.remove(ELEMENT_ID_KEY)
        return self

    def to_array(self) -> dict[str, Any]:
        return {
            "type": self.get_type(),
            "label": self.get_label(),
            "options": self.options.to_array(),
            "datatable": flatten(self.datatable, type(self).__name__),
            "element_id": self.get_element_id(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self.label}>"
