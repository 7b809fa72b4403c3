import os
import ssl
from typing import Any, Dict, Optional, Union

from .constants import ENV_DISABLE_SSL_VERIFY


def is_truthy(value: str) -> bool:
    return value.lower() in ("1", "true", "yes", "on")


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def verify_setting() -> Union[bool, ssl.SSLContext]:
    """TLS verification for both httpx clients.

    ``FETCH_API_DISABLE_SSL_VERIFY`` turns verification off. Otherwise the
    operating system trust store is used, or, where ``truststore`` is not
    installed, the CA bundle named by ``SSL_CERT_FILE`` / ``REQUESTS_CA_BUNDLE``
    (``certifi`` when neither is set) plus ``SSL_CERT_DIR``.
    """
    if is_truthy(os.environ.get(ENV_DISABLE_SSL_VERIFY, "")):
        return False

    try:
        import truststore
    except ImportError:
        import certifi

        cafile = _env_path("SSL_CERT_FILE") or _env_path("REQUESTS_CA_BUNDLE")
        return ssl.create_default_context(
            cafile=cafile or certifi.where(), capath=_env_path("SSL_CERT_DIR")
        )

    return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def get_httpx_client_kwargs() -> Dict[str, Any]:
    """Get the httpx client settings shared by the sync and async clients.

    Requests never time out and redirects are followed.
    """
    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default
    return {"follow_redirects": True, "timeout": None, "verify": verify_setting()}
