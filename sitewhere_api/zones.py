"""
sitewhere_api.zones — Zone creation and removal.
"""
from __future__ import annotations

from typing import Any

from sitewhere_api import http_common
from sitewhere_api.http_common import Result
from sitewhere_api.session import SiteWhereSession


def create_zone(session: SiteWhereSession, site_token: str,
                payload: dict[str, Any] | None = None) -> Result:
    """Create a zone under a site.

    Args:
        session: Authenticated session (always the one passed in).
        site_token: Owning site.
        payload: Zone create request, sent as the JSON body unchanged.
    """
    return http_common.auth_post(session, '/sites/' + site_token + '/zones', payload)


def delete_zone(session: SiteWhereSession, zone_token: str) -> Result:
    """Delete a zone. The server-side force flag is always set."""
    return http_common.auth_delete(session, 'zones/' + zone_token + '?force=true')
