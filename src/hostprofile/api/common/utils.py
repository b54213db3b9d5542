from collections.abc import Mapping
from typing import Any

from sqlalchemy import BinaryExpression
from sqlalchemy.orm import DeclarativeBase


def build_filters(
    model: type[DeclarativeBase],
    filter_data: Mapping[str, Any],
) -> list[BinaryExpression]:
    """Turn ``{column: value}`` query params into equality filters."""
    filters: list[BinaryExpression] = []
    for field, value in filter_data.items():
        column = getattr(model, field, None)
        if column is None:
            raise ValueError(f"Unknown filter field: {field}")
        filters.append(column == value)
    return filters


__all__ = ("build_filters",)
