import json
from enum import Enum
from typing import Any

from lavacharts.constants import CONFIG
from lavacharts.support.contracts import Arrayable
from lavacharts.support.options import flatten


class PayloadEncoder(json.JSONEncoder):
    """JSON encoder that understands option value objects."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Enum):
            return o.value
        if callable(getattr(o, "to_array", None)):
            return flatten(o)
        return super().default(o)


def to_array(entity: Arrayable) -> dict[str, Any]:
    return flatten(entity.to_array(), type(entity).__name__)


def to_json(entity: Arrayable, indent: int | None = None) -> str:
    """Encode an entity's canonical array representation as JSON text.

    Decoding the result yields a structure equal to ``entity.to_array()``.
    """
    return json.dumps(
        to_array(entity),
        cls=PayloadEncoder,
        indent=indent if indent is not None else CONFIG.serialization.indent,
        sort_keys=CONFIG.serialization.sort_keys,
    )
