import re
from typing import Any, Mapping

from lavacharts.constants import logger
from lavacharts.enums import FilterType
from lavacharts.exceptions import InvalidFilterType
from lavacharts.filters.filter import FILTER_REGISTRY, FILTER_SUFFIX, Filter

RANGE_PATTERN = re.compile("range", re.IGNORECASE)


def normalize_filter_type(filter_type: str) -> str:
    """Map the accepted spellings of a filter type onto its tag.

    Every "Filter" substring is removed (case-sensitive), and compound range
    names get a capital "R" and a capitalized first letter, so "daterange",
    "DateRange" and "DateRangeFilter" all become "DateRange".
    """
    normalized = filter_type.replace(FILTER_SUFFIX, "")
    if RANGE_PATTERN.search(normalized):
        normalized = RANGE_PATTERN.sub("Range", normalized)
        normalized = normalized[:1].upper() + normalized[1:]
    return normalized


class FilterFactory:
    """Creates filters for use in a dashboard."""

    @staticmethod
    def resolve(filter_type: FilterType | str) -> type[Filter]:
        if isinstance(filter_type, FilterType):
            filter_type = filter_type.value
        if not isinstance(filter_type, str):
            raise InvalidFilterType(filter_type, FILTER_REGISTRY.tags())
        normalized = normalize_filter_type(filter_type)
        if normalized not in FILTER_REGISTRY:
            raise InvalidFilterType(filter_type, FILTER_REGISTRY.tags())
        return FILTER_REGISTRY.resolve(normalized)

    @staticmethod
    def create(
        filter_type: FilterType | str,
        label_or_index: str | int,
        options: Mapping[str, Any] | None = None,
    ) -> Filter:
        filter_class = FilterFactory.resolve(filter_type)
        logger.debug(
            "Resolved filter type %s to %s", filter_type, filter_class.__name__
        )
        return filter_class(label_or_index, options)


def create_filter(
    filter_type: FilterType | str,
    label_or_index: str | int,
    options: Mapping[str, Any] | None = None,
) -> Filter:
    return FilterFactory.create(filter_type, label_or_index, options)
