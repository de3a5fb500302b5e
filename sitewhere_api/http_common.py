"""
Authenticated HTTP transport shared by every facade function.

Each call issues exactly one request and returns:
    (decoded_json | None, None) on success or (None, error_message) on failure.
No retries, no caching. Transport errors never escape as exceptions.
"""
from __future__ import annotations

from typing import Any

import requests as http_requests

from sitewhere_api.session import SiteWhereSession

# (result, error): exactly one side is set
Result = tuple[Any, str | None]

ERROR_HEADER = 'X-SiteWhere-Error'
ERROR_CODE_HEADER = 'X-SiteWhere-Error-Code'


def build_url(base_url: str, path: str) -> str:
    """Join base and relative path with exactly one slash between them."""
    return base_url.rstrip('/') + '/' + path.lstrip('/')


def format_error(response) -> str:
    """Human-readable failure message for a non-2xx response."""
    message = response.headers.get(ERROR_HEADER)
    if message:
        code = response.headers.get(ERROR_CODE_HEADER)
        return f'{message} (code {code})' if code else message

    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ('message', 'error'):
            if body.get(key):
                return str(body[key])

    reason = response.reason or ''
    return f'HTTP {response.status_code} {reason}'.strip()


def _decode(response) -> Result:
    if not response.content:
        return None, None
    try:
        return response.json(), None
    except ValueError:
        return None, f'Invalid JSON in response (HTTP {response.status_code})'


def _request(session: SiteWhereSession, method: str, path: str, body: Any = None) -> Result:
    url = build_url(session.base_url, path)
    kwargs: dict[str, Any] = {
        'headers': session.auth_headers(),
        'timeout': session.timeout,
    }
    if body is not None:
        kwargs['json'] = body

    # UnicodeError: header values outside latin-1 (e.g. a non-ASCII tenant token)
    try:
        resp = http_requests.request(method, url, **kwargs)
    except (http_requests.RequestException, UnicodeError) as e:
        result, error = None, f'{type(e).__name__}: {e}'
    else:
        if 200 <= resp.status_code < 300:
            result, error = _decode(resp)
        else:
            result, error = None, format_error(resp)

    if error is not None:
        print(f"[sitewhere] {method} {url} failed: {error}")
    return result, error


def auth_get(session: SiteWhereSession, path: str) -> Result:
    """GET *path* (query included) relative to the session's base URL."""
    return _request(session, 'GET', path)


def auth_post(session: SiteWhereSession, path: str, body: Any = None) -> Result:
    """POST *body* as JSON; a None body sends no payload at all."""
    return _request(session, 'POST', path, body)


def auth_delete(session: SiteWhereSession, path: str) -> Result:
    """DELETE *path* relative to the session's base URL."""
    return _request(session, 'DELETE', path)
