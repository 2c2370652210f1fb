from lavacharts.enums import FilterType, StringMatchType
from lavacharts.filters.filter import BASE_RULES, Filter, register_filter
from lavacharts.support.rules import (
    BOOLEAN,
    NUMERIC,
    SEQUENCE,
    STRING,
    any_of,
    one_of,
)

RANGE_RULES = {
    **BASE_RULES,
    "maxValue": NUMERIC,
    "minValue": NUMERIC,
}


@register_filter(FilterType.CATEGORY)
class CategoryFilter(Filter):
    option_rules = {
        **BASE_RULES,
        "useFormattedValue": BOOLEAN,
        "values": SEQUENCE,
    }
    allowed_options = frozenset(option_rules)


@register_filter(FilterType.CHART_RANGE)
class ChartRangeFilter(Filter):
    option_rules = BASE_RULES
    allowed_options = frozenset(option_rules)


@register_filter(FilterType.DATE_RANGE)
class DateRangeFilter(Filter):
    # dates are passed through as the runtime's Date() strings or epoch numbers
    option_rules = {
        **BASE_RULES,
        "maxValue": any_of(NUMERIC, STRING),
        "minValue": any_of(NUMERIC, STRING),
    }
    allowed_options = frozenset(option_rules)


@register_filter(FilterType.NUMBER_RANGE)
class NumberRangeFilter(Filter):
    option_rules = RANGE_RULES
    allowed_options = frozenset(option_rules)


@register_filter(FilterType.STRING)
class StringFilter(Filter):
    option_rules = {
        **BASE_RULES,
        "caseSensitive": BOOLEAN,
        "matchType": one_of(*[x.value for x in StringMatchType]),
        "useFormattedValue": BOOLEAN,
    }
    allowed_options = frozenset(option_rules)
