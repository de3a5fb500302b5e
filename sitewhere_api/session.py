"""
Immutable session handle: who we are and which tenant we talk to.

A SiteWhereSession is passed explicitly to every facade and transport call.
Nothing in this package keeps a session in module state; build one and
thread it through.
"""
from __future__ import annotations

import base64
from dataclasses import dataclass, field, replace

from sitewhere_api.config import DEFAULT_TIMEOUT, get_config


@dataclass(frozen=True)
class SiteWhereSession:
    """Authentication context for one SiteWhere server + tenant."""

    base_url: str
    username: str
    password: str = field(repr=False)
    tenant_token: str
    timeout: float = DEFAULT_TIMEOUT

    # --- factories -------------------------------------------------------

    @classmethod
    def from_env(cls) -> SiteWhereSession:
        """Build a session from SITEWHERE_* environment variables."""
        return cls(**get_config())

    def with_tenant(self, tenant_token: str) -> SiteWhereSession:
        """Return a copy scoped to another tenant (this one is unchanged)."""
        return replace(self, tenant_token=tenant_token)

    # --- request context -------------------------------------------------

    def auth_headers(self) -> dict[str, str]:
        """Headers carried by every authenticated request."""
        credentials = f'{self.username}:{self.password}'.encode('utf-8')
        return {
            'Authorization': 'Basic ' + base64.b64encode(credentials).decode('ascii'),
            'X-SiteWhere-Tenant': self.tenant_token,
            'Accept': 'application/json',
        }
