from enum import Enum

import pytest

from lavacharts.constants import CONFIG
from lavacharts.exceptions import (
    InvalidConfigProperty,
    InvalidConfigValue,
    InvalidParamType,
    MissingOption,
)
from lavacharts.support.options import MAX_FLATTEN_DEPTH, Options, flatten
from lavacharts.support.rules import NUMERIC


class Color(Enum):
    RED = "red"


class Style:
    def __init__(self, **values):
        self.values = values

    def to_array(self):
        return self.values


class SelfReferencing:
    def to_array(self):
        return self


class EndlessChain:
    def to_array(self):
        return {"next": EndlessChain()}


class Opaque:
    pass


def strict_options(initial=None) -> Options:
    return Options(
        initial,
        allowed={"title", "width", "legend"},
        rules={"width": NUMERIC},
        owner="TestChart",
    )


def test_permissive_accepts_any_key():
    options = Options({"anything": 1, "goes": "here"})

    assert options.has("anything")
    assert options.get("goes") == "here"
    assert len(options) == 2
    assert "anything" in options


def test_strict_construction_rejects_unknown_key():
    with pytest.raises(InvalidConfigProperty) as exc_info:
        strict_options({"title": "Sales", "Lasagna": "50%"})

    assert exc_info.value.key == "Lasagna"
    assert exc_info.value.owner == "TestChart"
    assert "title" in exc_info.value.allowed


def test_strict_set_rejects_unknown_key_without_mutation():
    options = strict_options({"title": "Sales"})

    with pytest.raises(InvalidConfigProperty):
        options.set("potato", True)

    assert options == {"title": "Sales"}


def test_merge_is_all_or_nothing():
    options = strict_options({"title": "Sales"})

    with pytest.raises(InvalidConfigProperty):
        options.merge({"width": 400, "bogus": 1})

    assert options == {"title": "Sales"}
    assert not options.has("width")


def test_rule_violation_raises_invalid_value():
    options = strict_options()

    with pytest.raises(InvalidConfigValue) as exc_info:
        options.set("width", "wide")

    assert exc_info.value.key == "width"
    assert exc_info.value.value == "wide"
    assert not options.has("width")


def test_numeric_strings_pass_numeric_rule():
    options = strict_options({"width": "400"})
    assert options.get("width") == "400"


def test_get_missing_raises():
    options = strict_options()

    with pytest.raises(MissingOption) as exc_info:
        options.get("title")

    assert isinstance(exc_info.value, KeyError)
    assert "title" in str(exc_info.value)


def test_get_defaults():
    options = Options(defaults={"legend": "right"})

    assert options.get("legend") == "right"
    assert options.get("missing", None) is None
    # declared defaults are not stored values
    assert not options.has("legend")
    options.set("legend", "none")
    assert options.get("legend") == "none"


def test_merge_last_write_wins_and_keeps_order():
    options = Options({"a": 1, "b": 2})

    options.merge({"b": 3, "c": 4})

    assert list(options.keys()) == ["a", "b", "c"]
    assert options.get("b") == 3


def test_set_and_merge_chain():
    options = Options()

    result = options.set("a", 1).merge({"b": 2})

    assert result is options
    assert options == {"a": 1, "b": 2}


def test_customize_bypasses_allow_list():
    options = strict_options({"title": "Sales"})

    options.customize({"brandNewOption": {"nested": True}, "width": "wide"})

    assert options.get("brandNewOption") == {"nested": True}
    assert options.get("width") == "wide"


def test_customize_requires_string_keys():
    with pytest.raises(InvalidParamType):
        Options().customize({1: "one"})


def test_non_string_key_rejected():
    with pytest.raises(InvalidParamType):
        Options().set(5, "five")


def test_merge_requires_mapping():
    with pytest.raises(InvalidParamType):
        Options().merge([("a", 1)])


def test_relaxed_mode_accepts_unknown_keys():
    with CONFIG.temporary(strict_options=False):
        options = strict_options({"potato": 1})
        assert options.get("potato") == 1
        # value rules still apply
        with pytest.raises(InvalidConfigValue):
            options.set("width", "wide")
    assert CONFIG.strict_options is True


def test_remove():
    options = Options({"a": 1})

    assert options.remove("a") == 1
    assert not options.has("a")
    with pytest.raises(MissingOption):
        options.remove("a")


def test_to_array_flattens_nested_values():
    options = Options(
        {
            "title": "Sales",
            "titleTextStyle": Style(color=Color.RED, inner=Style(bold=True)),
            "colors": ("red", "blue"),
            "series": {0: {"style": Style(lineWidth=2)}},
        }
    )

    assert options.to_array() == {
        "title": "Sales",
        "titleTextStyle": {"color": "red", "inner": {"bold": True}},
        "colors": ["red", "blue"],
        "series": {"0": {"style": {"lineWidth": 2}}},
    }


def test_to_array_flattens_nested_options():
    inner = Options({"bold": True})
    assert Options({"textStyle": inner}).to_array() == {"textStyle": {"bold": True}}


def test_flatten_is_idempotent():
    flat = {"title": "Sales", "legend": {"position": "top"}, "colors": ["red"]}

    assert Options(flat).to_array() == flat
    assert flatten(flatten(flat)) == flatten(flat)


def test_opaque_objects_returned_as_is():
    opaque = Opaque()
    assert Options({"handler": opaque}).to_array()["handler"] is opaque


def test_cycle_detected():
    looped: dict = {}
    looped["self"] = looped

    with pytest.raises(InvalidConfigValue):
        Options({"looped": looped}).to_array()


def test_self_returning_to_array_detected():
    with pytest.raises(InvalidConfigValue):
        Options({"style": SelfReferencing()}).to_array()


def test_endless_nesting_stops():
    with pytest.raises(InvalidConfigValue) as exc_info:
        Options({"chain": EndlessChain()}).to_array()

    assert str(MAX_FLATTEN_DEPTH) in exc_info.value.expected


def test_shared_values_are_not_cycles():
    shared = {"color": "red"}
    options = Options({"a": shared, "b": shared, "c": [shared, shared]})

    assert options.to_array()["c"] == [{"color": "red"}, {"color": "red"}]


def test_equality():
    assert Options({"a": 1}) == Options({"a": 1})
    assert Options({"a": 1}) == {"a": 1}
    assert Options({"a": 1}) != Options({"a": 2})
