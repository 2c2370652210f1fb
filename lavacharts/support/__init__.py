from lavacharts.support.contracts import (
    Arrayable,
    Customizable,
    DataTableSource,
    Jsonable,
    Renderable,
)
from lavacharts.support.options import Options, flatten

__all__ = [
    "Arrayable",
    "Customizable",
    "DataTableSource",
    "Jsonable",
    "Renderable",
    "Options",
    "flatten",
]
