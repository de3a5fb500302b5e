"""
Tests for SiteWhereSession and environment configuration
"""
import dataclasses

import pytest

from sitewhere_api import config
from sitewhere_api.session import SiteWhereSession


class TestConfig:

    def test_defaults(self, monkeypatch):
        for var in ('SITEWHERE_API_URL', 'SITEWHERE_USERNAME', 'SITEWHERE_PASSWORD',
                    'SITEWHERE_TENANT', 'SITEWHERE_TIMEOUT'):
            monkeypatch.delenv(var, raising=False)

        cfg = config.get_config()

        assert cfg['base_url'] == config.DEFAULT_API_URL
        assert cfg['tenant_token'] == config.DEFAULT_TENANT
        assert cfg['timeout'] == config.DEFAULT_TIMEOUT

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv('SITEWHERE_API_URL', 'https://sw.example.com/sitewhere/api/')
        monkeypatch.setenv('SITEWHERE_USERNAME', 'ops')
        monkeypatch.setenv('SITEWHERE_TIMEOUT', '12.5')

        cfg = config.get_config()

        assert cfg['base_url'] == 'https://sw.example.com/sitewhere/api/'
        assert cfg['username'] == 'ops'
        assert cfg['timeout'] == 12.5

    @pytest.mark.parametrize('raw', ['abc', '0', '-3'])
    def test_bad_timeout_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv('SITEWHERE_TIMEOUT', raw)
        assert config.get_timeout() == config.DEFAULT_TIMEOUT


class TestSession:

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('SITEWHERE_TENANT', 'tenant-env')
        session = SiteWhereSession.from_env()
        assert session.tenant_token == 'tenant-env'

    def test_frozen(self, session):
        with pytest.raises(dataclasses.FrozenInstanceError):
            session.tenant_token = 'other'

    def test_with_tenant_returns_copy(self, session):
        other = session.with_tenant('tenant-xyz')
        assert other.tenant_token == 'tenant-xyz'
        assert session.tenant_token == 'tenant-abc'
        assert other.base_url == session.base_url

    def test_password_hidden_from_repr(self, session):
        assert "password='password'" not in repr(session)

    def test_auth_headers(self, session):
        headers = session.auth_headers()
        assert headers['Authorization'] == 'Basic YWRtaW46cGFzc3dvcmQ='
        assert headers['X-SiteWhere-Tenant'] == 'tenant-abc'
        assert headers['Accept'] == 'application/json'
