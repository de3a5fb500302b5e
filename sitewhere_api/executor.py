"""
sitewhere_api.executor — Dispatch facade operations by name.

Maps the remote operation names (listSites, createZone, ...) to facade
functions. Each handler receives (session, *args) and returns
(result | None, error_string | None).

submit_operation() runs a dispatch on a worker thread and hands back a
Future, for callers that must not block on the request.
"""
from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

from sitewhere_api.assignments import missing_assignment, release_assignment
from sitewhere_api.http_common import Result
from sitewhere_api.session import SiteWhereSession
from sitewhere_api.sites import (
    get_site,
    list_alerts_for_site,
    list_assignments_for_site,
    list_locations_for_site,
    list_measurements_for_site,
    list_sites,
    list_zones_for_site,
)
from sitewhere_api.zones import create_zone, delete_zone

# Type alias for operation handlers
Handler = Callable[..., Result]

# Registry: operation name -> handler
_HANDLERS: dict[str, Handler] = {
    'listSites': list_sites,
    'getSite': get_site,
    'listAssignmentsForSite': list_assignments_for_site,
    'listLocationsForSite': list_locations_for_site,
    'listMeasurementsForSite': list_measurements_for_site,
    'listAlertsForSite': list_alerts_for_site,
    'listZonesForSite': list_zones_for_site,
    'createZone': create_zone,
    'deleteZone': delete_zone,
    'releaseAssignment': release_assignment,
    'missingAssignment': missing_assignment,
}

MAX_WORKERS = 8

_pool: ThreadPoolExecutor | None = None
_pool_lock = threading.Lock()


def get_handler(operation: str) -> Handler | None:
    """Look up the facade function for an operation name."""
    return _HANDLERS.get(operation)


def list_operations() -> list[str]:
    return sorted(_HANDLERS)


def execute_operation(session: SiteWhereSession, operation: str, *args: Any) -> Result:
    """Dispatch synchronously to the right facade function.

    Returns:
        (result, None) on success, or (None, error_message) on failure.
    """
    handler = get_handler(operation)
    if handler is None:
        return None, f'Unknown operation: {operation}'
    return handler(session, *args)


def _default_pool() -> ThreadPoolExecutor:
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = ThreadPoolExecutor(max_workers=MAX_WORKERS,
                                       thread_name_prefix='sitewhere')
        return _pool


def submit_operation(session: SiteWhereSession, operation: str, *args: Any,
                     pool: ThreadPoolExecutor | None = None) -> Future:
    """Run execute_operation on a worker thread; returns immediately.

    The Future resolves to the same (result, error) pair. Separate
    submissions are independent: no ordering between them is implied.
    """
    return (pool or _default_pool()).submit(execute_operation, session, operation, *args)


def add_callbacks(future: Future,
                  on_success: Callable[[Any], Any],
                  on_failure: Callable[[str], Any]) -> Future:
    """Deliver a submitted operation's outcome to a success/failure pair.

    Exactly one of the two is called, exactly once.
    """
    def _deliver(done: Future) -> None:
        if done.cancelled():
            on_failure('Operation cancelled')
            return
        exc = done.exception()
        if exc is not None:
            on_failure(f'{type(exc).__name__}: {exc}')
            return
        result, error = done.result()
        if error is not None:
            on_failure(error)
        else:
            on_success(result)

    future.add_done_callback(_deliver)
    return future
