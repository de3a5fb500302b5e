"""
sitewhere_api — Thin client for the SiteWhere REST API.

Every function takes an explicit SiteWhereSession and returns
(result, error_string | None). Nothing here keeps state between calls.

Public API:
    SiteWhereSession           — immutable auth/tenant handle
    list_sites, get_site       — site reads
    list_*_for_site            — assignments, locations, measurements, alerts, zones
    create_zone, delete_zone   — zone management
    release_assignment         — end an active assignment
    missing_assignment         — mark an assignment missing
    build_query                — encode paging/criteria for list calls
    execute_operation          — dispatch by remote operation name
    submit_operation           — same, on a worker thread (returns a Future)
"""

from sitewhere_api.session import SiteWhereSession
from sitewhere_api.sites import (
    list_sites,
    get_site,
    list_assignments_for_site,
    list_locations_for_site,
    list_measurements_for_site,
    list_alerts_for_site,
    list_zones_for_site,
)
from sitewhere_api.zones import create_zone, delete_zone
from sitewhere_api.assignments import release_assignment, missing_assignment
from sitewhere_api.queries import build_query, date_range_query
from sitewhere_api.executor import (
    execute_operation,
    submit_operation,
    add_callbacks,
    get_handler,
)

__all__ = [
    'SiteWhereSession',
    'list_sites',
    'get_site',
    'list_assignments_for_site',
    'list_locations_for_site',
    'list_measurements_for_site',
    'list_alerts_for_site',
    'list_zones_for_site',
    'create_zone',
    'delete_zone',
    'release_assignment',
    'missing_assignment',
    'build_query',
    'date_range_query',
    'execute_operation',
    'submit_operation',
    'add_callbacks',
    'get_handler',
]
