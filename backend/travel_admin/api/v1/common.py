from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Query


@dataclass
class ListQueryArgs:
    """Сырые JSON-строки `range`, `sort`, `filter` из query string."""

    range: Optional[str] = None
    sort: Optional[str] = None
    filter: Optional[str] = None


def list_query_args(
    range_: Optional[str] = Query(default=None, alias="range", description='Окно выборки, например [0, 24]'),
    sort: Optional[str] = Query(default=None, description='Сортировка, например ["title", "ASC"]'),
    filter_: Optional[str] = Query(default=None, alias="filter", description='Фильтр, например {"title": "alps"}'),
) -> ListQueryArgs:
    return ListQueryArgs(range=range_, sort=sort, filter=filter_)
