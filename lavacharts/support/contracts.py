from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

from lavacharts.constants import CONFIG

if TYPE_CHECKING:
    from lavacharts.registry import VisualizationMeta
    from lavacharts.values import ElementId, Label


@runtime_checkable
class DataTableSource(Protocol):
    """Anything that can hand over the table a chart is drawn from."""

    def get_data_table(self) -> Any: ...


class Arrayable(ABC):
    @abstractmethod
    def to_array(self) -> dict[str, Any]:
        pass


class Jsonable(Arrayable):
    def to_json(self) -> str:
        from lavacharts.serialization import to_json

        return to_json(self)


class Customizable(ABC):
    @abstractmethod
    def customize(self, options: Mapping[str, Any]):
        pass


class Renderable(ABC):
    """Identity and version surface shared by everything sent to the runtime.

    Concrete classes receive ``meta`` from the registry when they are
    registered; the js class is always derived from the type tag.
    """

    meta: "VisualizationMeta | None" = None
    label: "Label | None" = None
    element_id: "ElementId | None" = None

    @classmethod
    @abstractmethod
    def _unregistered_error(cls) -> Exception:
        """The error raised when an unregistered class is used."""

    @classmethod
    def _require_meta(cls) -> "VisualizationMeta":
        if cls.meta is None:
            raise cls._unregistered_error()
        return cls.meta

    def get_type(self) -> str:
        return self._require_meta().type

    def get_wrap_type(self) -> str:
        return self._require_meta().wrap_type.value

    def get_version(self) -> str:
        return self._require_meta().version

    def get_js_package(self) -> str:
        return self._require_meta().package

    def get_js_class(self) -> str:
        return f"{CONFIG.js_namespace}.{self.get_type()}"

    def get_label(self) -> str | None:
        return str(self.label) if self.label is not None else None

    def get_element_id(self) -> str | None:
        return str(self.element_id) if self.element_id is not None else None

    def has_element_id(self) -> bool:
        return self.element_id is not None
