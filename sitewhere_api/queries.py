"""
Caller-side query string builders.

The facade concatenates query strings verbatim, so anything that needs
percent-encoding has to be encoded before it gets there. These helpers do
that for the paging and date-range criteria SiteWhere list endpoints take.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any
from urllib.parse import urlencode


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def build_query(page: int | None = None, page_size: int | None = None, **criteria: Any) -> str:
    """Encode paging + extra criteria; returns '' when nothing is set.

    Keyword names are converted to camelCase (include_device -> includeDevice)
    and None values are dropped.
    """
    params: dict[str, str] = {}
    if page is not None:
        params['page'] = _render(page)
    if page_size is not None:
        params['pageSize'] = _render(page_size)
    for key, value in criteria.items():
        if value is not None:
            params[_camel(key)] = _render(value)
    return urlencode(params)


def date_range_query(start: datetime | str | None = None, end: datetime | str | None = None,
                     page: int | None = None, page_size: int | None = None) -> str:
    """Query for event listings bounded by startDate/endDate."""
    return build_query(page=page, page_size=page_size, start_date=start, end_date=end)
