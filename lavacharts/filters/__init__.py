from lavacharts.filters.factory import (
    FilterFactory,
    create_filter,
    normalize_filter_type,
)
from lavacharts.filters.filter import FILTER_REGISTRY, Filter, register_filter
from lavacharts.filters.variants import (
    CategoryFilter,
    ChartRangeFilter,
    DateRangeFilter,
    NumberRangeFilter,
    StringFilter,
)

__all__ = [
    "FILTER_REGISTRY",
    "Filter",
    "FilterFactory",
    "register_filter",
    "create_filter",
    "normalize_filter_type",
    "CategoryFilter",
    "ChartRangeFilter",
    "DateRangeFilter",
    "NumberRangeFilter",
    "StringFilter",
]
