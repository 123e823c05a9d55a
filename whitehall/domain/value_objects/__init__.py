"""Domain value objects."""

from whitehall.domain.value_objects.filter_criteria import ALL_PEOPLE, FilterCriteria

__all__ = ["ALL_PEOPLE", "FilterCriteria"]
