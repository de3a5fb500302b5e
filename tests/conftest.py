"""
Pytest configuration and shared fixtures for SiteWhere API client tests
"""
import pytest
import sys
from pathlib import Path
from unittest.mock import MagicMock

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def session():
    """A session pointing at a fake SiteWhere server"""
    from sitewhere_api.session import SiteWhereSession

    return SiteWhereSession(
        base_url='http://sitewhere.test:8080/sitewhere/api/',
        username='admin',
        password='password',
        tenant_token='tenant-abc',
        timeout=5,
    )


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects"""
    def _make(status_code=200, body=None, content=None, headers=None, reason='OK'):
        resp = MagicMock()
        resp.status_code = status_code
        resp.reason = reason
        resp.headers = headers or {}
        if content is None:
            content = b'' if body is None else b'{...}'
        resp.content = content
        if body is None:
            resp.json.side_effect = ValueError('No JSON object could be decoded')
        else:
            resp.json.return_value = body
        return resp
    return _make
