"""
sitewhere_api.sites — Site lookups and per-site listings.

Queries are passed through verbatim; callers encode them
(see sitewhere_api.queries).
"""
from __future__ import annotations

from sitewhere_api import http_common
from sitewhere_api.http_common import Result
from sitewhere_api.session import SiteWhereSession

# Always requested with assignment listings so rows carry device + asset
ASSIGNMENT_FLAGS = '&includeDevice=true&includeAsset=true'


def list_sites(session: SiteWhereSession, query: str | None = '') -> Result:
    """List sites."""
    return http_common.auth_get(session, 'sites?' + (query or ''))


def get_site(session: SiteWhereSession, site_token: str) -> Result:
    """Get a site by unique token."""
    return http_common.auth_get(session, 'sites/' + site_token)


def list_assignments_for_site(session: SiteWhereSession, site_token: str,
                              query: str | None = '') -> Result:
    """List device assignments for a site, including device and asset details."""
    return http_common.auth_get(
        session,
        'sites/' + site_token + '/assignments?' + (query or '') + ASSIGNMENT_FLAGS,
    )


def list_locations_for_site(session: SiteWhereSession, site_token: str,
                            query: str | None = '') -> Result:
    """List location events for a site."""
    return http_common.auth_get(session, 'sites/' + site_token + '/locations?' + (query or ''))


def list_measurements_for_site(session: SiteWhereSession, site_token: str,
                               query: str | None = '') -> Result:
    """List measurement events for a site."""
    return http_common.auth_get(session, 'sites/' + site_token + '/measurements?' + (query or ''))


def list_alerts_for_site(session: SiteWhereSession, site_token: str,
                         query: str | None = '') -> Result:
    """List alert events for a site."""
    return http_common.auth_get(session, 'sites/' + site_token + '/alerts?' + (query or ''))


def list_zones_for_site(session: SiteWhereSession, site_token: str,
                        query: str | None = '') -> Result:
    """List zones for a site."""
    return http_common.auth_get(session, 'sites/' + site_token + '/zones?' + (query or ''))
