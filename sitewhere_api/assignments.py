"""
sitewhere_api.assignments — Device assignment lifecycle.

An active assignment ends either released (normal end) or missing.
Both transitions are body-less POSTs.
"""
from __future__ import annotations

from sitewhere_api import http_common
from sitewhere_api.http_common import Result
from sitewhere_api.session import SiteWhereSession


def release_assignment(session: SiteWhereSession, token: str) -> Result:
    """Release an active assignment."""
    return http_common.auth_post(session, '/assignments/' + token + '/end', None)


def missing_assignment(session: SiteWhereSession, token: str) -> Result:
    """Mark an assignment as missing."""
    return http_common.auth_post(session, '/assignments/' + token + '/missing', None)
