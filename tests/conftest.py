from pytest import fixture

from lavacharts.datatables import StaticDataTable

SALES_TABLE = {
    "cols": [
        {"id": "month", "label": "Month", "type": "string"},
        {"id": "sales", "label": "Sales", "type": "number"},
    ],
    "rows": [
        {"c": [{"v": "January"}, {"v": 1000}]},
        {"c": [{"v": "February"}, {"v": 1170}]},
        {"c": [{"v": "March"}, {"v": 660}]},
    ],
}


class RecordingDataTable:
    """Dataset double that counts how often its table is requested."""

    def __init__(self, table):
        self.table = table
        self.calls = 0

    def get_data_table(self):
        self.calls += 1
        return self.table


@fixture
def sales_table() -> dict:
    return SALES_TABLE


@fixture
def datatable() -> StaticDataTable:
    return StaticDataTable(SALES_TABLE)


@fixture
def recording_datatable() -> RecordingDataTable:
    return RecordingDataTable(SALES_TABLE)
