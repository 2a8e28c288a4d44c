"""
Разбор параметров списков `range`, `sort`, `filter` и построение запроса.

Параметры приходят JSON-литералами в query string (как их шлёт админка):
    range=[0, 24]            -> offset 0, до 25 записей
    sort=["title", "ASC"]    -> ORDER BY title ASC
    filter={"title": "alps"} -> title ILIKE '%alps%'

Поля фильтра и сортировки сверяются с фиксированной картой полей ресурса
(camelCase имя -> колонка модели), произвольные имена не принимаются.
Битый JSON не перехватывается и уходит в общий обработчик ошибок (500).
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from fastapi import HTTPException
from pydantic.alias_generators import to_camel
from sqlalchemy import JSON, String, inspect
from sqlalchemy.orm import Query, Session

from travel_admin.core.config import settings


SORT_DIRECTIONS = ("asc", "desc")


@dataclass
class ListParams:
    start: int
    end: int
    sort_field: str
    sort_order: str
    filters: Dict[str, Any] = field(default_factory=dict)

    @property
    def span(self) -> int:
        return self.end - self.start + 1


def field_map(model) -> Dict[str, Any]:
    """Карта полей для фильтра/сортировки: все скалярные колонки модели.

    JSON-колонки (списки картинок, ссылок и т.п.) не фильтруются и не сортируются.
    """
    fields = {}
    for attr in inspect(model).column_attrs:
        column = attr.columns[0]
        if isinstance(column.type, JSON):
            continue
        fields[to_camel(attr.key)] = getattr(model, attr.key)
    return fields


def parse_list_params(
    range_param: Optional[str],
    sort_param: Optional[str],
    filter_param: Optional[str],
    default_sort: Tuple[str, str] = ("createdAt", "desc"),
) -> ListParams:
    if range_param:
        bounds = json.loads(range_param)
        if (
            not isinstance(bounds, list)
            or len(bounds) != 2
            or not all(isinstance(b, int) and not isinstance(b, bool) for b in bounds)
        ):
            raise HTTPException(status_code=400, detail="range must be a [start, end] array of integers")
        start, end = bounds
        if start < 0:
            raise HTTPException(status_code=400, detail="range start must not be negative")
    else:
        start = 0
        end = start + settings.DEFAULT_RANGE_SPAN

    if sort_param:
        sort = json.loads(sort_param)
        if not isinstance(sort, list) or len(sort) != 2 or not all(isinstance(s, str) for s in sort):
            raise HTTPException(status_code=400, detail="sort must be a [field, direction] array")
        sort_field, sort_order = sort[0], sort[1].lower()
    else:
        sort_field, sort_order = default_sort

    if sort_order not in SORT_DIRECTIONS:
        raise HTTPException(status_code=400, detail=f"Unsupported sort direction: {sort_order}")

    filters = json.loads(filter_param) if filter_param else {}
    if not isinstance(filters, dict):
        raise HTTPException(status_code=400, detail="filter must be a JSON object")

    return ListParams(
        start=start,
        end=end,
        sort_field=sort_field,
        sort_order=sort_order,
        filters=filters,
    )


def build_where(fields: Dict[str, Any], filters: Dict[str, Any]) -> List[Any]:
    """Фильтр -> список условий WHERE.

    массив -> IN, строка -> contains без учёта регистра (% и _ ищутся буквально),
    иное -> равенство. Текстовые колонки сравниваются только со строками.
    """
    clauses = []
    for name, value in filters.items():
        column = fields.get(name)
        if column is None:
            raise HTTPException(status_code=400, detail=f"Unknown filter field: {name}")

        if isinstance(value, list):
            clauses.append(column.in_(value))
        elif isinstance(value, str):
            if not isinstance(column.type, String):
                raise HTTPException(status_code=400, detail=f"Field {name} does not support text search")
            clauses.append(column.icontains(value, autoescape=True))
        elif isinstance(value, dict):
            raise HTTPException(status_code=400, detail=f"Invalid filter value for field: {name}")
        elif value is None:
            clauses.append(column.is_(None))
        elif isinstance(column.type, String):
            raise HTTPException(status_code=400, detail=f"Field {name} expects a string value")
        else:
            clauses.append(column == value)
    return clauses


def order_by_clause(fields: Dict[str, Any], sort_field: str, sort_order: str):
    column = fields.get(sort_field)
    if column is None:
        raise HTTPException(status_code=400, detail=f"Unknown sort field: {sort_field}")
    return column.asc() if sort_order == "asc" else column.desc()


def content_range(resource: str, start: int, end: int, total: int) -> str:
    return f"{resource} {start}-{min(end, total - 1)}/{total}"


def fetch_page(
    db: Session,
    model,
    params: ListParams,
    *,
    resource: str,
    fields: Dict[str, Any],
    options: Optional[list] = None,
    leading_fields: Sequence[str] = (),
) -> Tuple[list, str]:
    """Считает отфильтрованные строки и возвращает страницу + значение Content-Range.

    `leading_fields` всегда сортируются по возрастанию перед запрошенной сортировкой.
    """
    where = build_where(fields, params.filters)
    requested = order_by_clause(fields, params.sort_field, params.sort_order)
    ordering = [fields[name].asc() for name in leading_fields]
    if params.sort_field not in leading_fields:
        ordering.append(requested)

    query: Query = db.query(model).filter(*where)
    total = query.count()

    take = max(0, min(params.span, total))
    rows = []
    if take:
        rows = (
            query.options(*(options or []))
            .order_by(*ordering)
            .offset(params.start)
            .limit(take)
            .all()
        )

    return rows, content_range(resource, params.start, params.end, total)
