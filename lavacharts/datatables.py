import json
from pathlib import Path
from typing import IO, Any

from lavacharts.exceptions import InvalidDataTable


class StaticDataTable:
    """A dataset whose table has already been built elsewhere.

    Wraps a ready-made table payload, for example the JSON a DataTable
    produced upstream, so it can be handed to a chart.
    """

    def __init__(self, table: Any):
        if table is None:
            raise InvalidDataTable("StaticDataTable requires a table payload.")
        self.table = table

    @classmethod
    def from_json(cls, text: str) -> "StaticDataTable":
        try:
            return cls(json.loads(text))
        except json.JSONDecodeError as e:
            raise InvalidDataTable(f"DataTable JSON could not be decoded: {e}") from e

    @classmethod
    def from_file(cls, source: Path | IO[str]) -> "StaticDataTable":
        if isinstance(source, Path):
            with open(source, "r") as f:
                return cls.from_json(f.read())
        return cls.from_json(source.read())

    def get_data_table(self) -> Any:
        return self.table
