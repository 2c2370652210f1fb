import json
from enum import Enum

from lavacharts.charts import LineChart
from lavacharts.configs import TextStyle
from lavacharts.constants import CONFIG, Serialization
from lavacharts.serialization import PayloadEncoder, to_array, to_json


class Curve(Enum):
    SMOOTH = "function"


def test_to_json_matches_to_array(datatable):
    chart = LineChart("Sales", datatable, {"curveType": "function"})

    assert json.loads(to_json(chart)) == to_array(chart)


def test_indent_argument(datatable):
    chart = LineChart("Sales", datatable)

    assert "\n" not in to_json(chart)
    assert "\n    " in to_json(chart, indent=4)


def test_serialization_settings(datatable):
    chart = LineChart("Sales", datatable, {"title": "Q1"})

    with CONFIG.temporary(serialization=Serialization(indent=2)):
        assert "\n  " in chart.to_json()
    assert "\n" not in chart.to_json()


def test_sorted_keys(datatable):
    chart = LineChart("Sales", datatable, {"width": 400, "title": "Q1"})
    serialization = Serialization(sort_keys=True)

    with CONFIG.temporary(serialization=serialization):
        text = chart.to_json()

    assert text.index('"datatable"') < text.index('"type"')
    assert text.index('"title"') < text.index('"width"')


def test_encoder_handles_value_objects():
    payload = {"curve": Curve.SMOOTH, "style": TextStyle(bold=True)}

    assert json.loads(json.dumps(payload, cls=PayloadEncoder)) == {
        "curve": "function",
        "style": {"bold": True},
    }


def test_integer_keys_round_trip(datatable):
    chart = LineChart(
        "Sales",
        datatable,
        {"series": {0: {"color": "red"}, 1: {"lineDashStyle": [4, 4]}}},
    )

    assert chart.to_array()["options"]["series"] == {
        "0": {"color": "red"},
        "1": {"lineDashStyle": [4, 4]},
    }
    assert json.loads(chart.to_json()) == chart.to_array()
