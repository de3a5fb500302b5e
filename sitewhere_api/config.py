"""
SiteWhere connection configuration, read from the environment.
"""
import os


DEFAULT_API_URL = 'http://localhost:8080/sitewhere/api/'
DEFAULT_USERNAME = 'admin'
DEFAULT_PASSWORD = 'password'
DEFAULT_TENANT = 'sitewhere1234567890'
DEFAULT_TIMEOUT = 30


def get_timeout():
    """
    Request timeout in seconds.
    Falls back to DEFAULT_TIMEOUT when unset or not a positive number
    """
    raw = os.environ.get('SITEWHERE_TIMEOUT')
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_config():
    """Current connection settings as a plain dict"""
    return {
        'base_url': os.environ.get('SITEWHERE_API_URL', DEFAULT_API_URL),
        'username': os.environ.get('SITEWHERE_USERNAME', DEFAULT_USERNAME),
        'password': os.environ.get('SITEWHERE_PASSWORD', DEFAULT_PASSWORD),
        'tenant_token': os.environ.get('SITEWHERE_TENANT', DEFAULT_TENANT),
        'timeout': get_timeout(),
    }
