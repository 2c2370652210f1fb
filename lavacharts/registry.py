from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from lavacharts.constants import logger
from lavacharts.enums import WrapType

T = TypeVar("T")


@dataclass(frozen=True)
class VisualizationMeta:
    """Static per-variant data the runtime needs to load and wrap a visualization."""

    type: str
    wrap_type: WrapType
    version: str
    package: str


class Registry(Generic[T]):
    """Maps type tags to the classes that implement them.

    Registration stores a VisualizationMeta record on the class, so every
    accessor on a registered instance reads from that one record.
    """

    def __init__(
        self,
        kind: str,
        wrap_type: WrapType,
        not_found: Callable[[object, list[str]], Exception],
    ):
        self.kind = kind
        self.wrap_type = wrap_type
        self._not_found = not_found
        self._entries: dict[str, type[T]] = {}

    def register(
        self,
        tag: str,
        *,
        version: str,
        package: str,
        js_type: str | None = None,
    ) -> Callable[[type[T]], type[T]]:
        def decorator(cls: type[T]) -> type[T]:
            if tag in self._entries:
                raise ValueError(f"{self.kind} type '{tag}' is already registered.")
            meta = VisualizationMeta(
                type=js_type or tag,
                wrap_type=self.wrap_type,
                version=version,
                package=package,
            )
            setattr(cls, "meta", meta)
            setattr(cls, "type_tag", tag)
            self._entries[tag] = cls
            logger.debug("Registered %s type %s as %s", self.kind, tag, cls.__name__)
            return cls

        return decorator

    def resolve(self, tag: object) -> type[T]:
        if not isinstance(tag, str) or tag not in self._entries:
            raise self._not_found(tag, self.tags())
        return self._entries[tag]

    def metadata(self, tag: object) -> VisualizationMeta:
        return getattr(self.resolve(tag), "meta")

    def tags(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
