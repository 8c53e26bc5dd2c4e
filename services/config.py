import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from django.core.exceptions import ImproperlyConfigured

from services.errors import MissingConfiguration

DEFAULT_CLIENT_CLASS = "services.eth_client.Web3Client"

# Django settings that feed GatewaySettings
GATEWAY_SETTING_NAMES = frozenset(
    {
        "ETH_RPC_URL",
        "ETH_RPC_TIMEOUT",
        "GATEWAY_HOST",
        "GATEWAY_PORT",
        "ETH_CLIENT_CLASS",
    }
)


def parse_port(value) -> int:
    """
    Parse a listen port. Anything that is not an unsigned
    16-bit decimal integer is a startup error.
    """
    text = str(value).strip()
    if not re.fullmatch(r"[0-9]+", text):
        raise ImproperlyConfigured(f"GATEWAY_PORT must be an integer, got {value!r}")

    port = int(text)
    if port > 65535:
        raise ImproperlyConfigured(f"GATEWAY_PORT out of range: {port}")
    return port


def parse_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ImproperlyConfigured(f"ETH_RPC_TIMEOUT must be a number, got {value!r}")

    if not timeout > 0:
        raise ImproperlyConfigured(f"ETH_RPC_TIMEOUT must be positive, got {value!r}")
    return timeout


@dataclass(frozen=True)
class GatewaySettings:
    rpc_url: Optional[str]
    rpc_timeout: float
    host: str
    port: int
    client_class: str = DEFAULT_CLIENT_CLASS

    @classmethod
    def from_django(cls, settings) -> "GatewaySettings":
        return cls(
            rpc_url=getattr(settings, "ETH_RPC_URL", None) or None,
            rpc_timeout=parse_timeout(getattr(settings, "ETH_RPC_TIMEOUT", 10)),
            host=getattr(settings, "GATEWAY_HOST", "127.0.0.1"),
            port=parse_port(getattr(settings, "GATEWAY_PORT", 3000)),
            client_class=getattr(settings, "ETH_CLIENT_CLASS", DEFAULT_CLIENT_CLASS),
        )

    def require_rpc_url(self) -> str:
        if not self.rpc_url:
            raise MissingConfiguration("ETH_RPC_URL")
        return self.rpc_url


@lru_cache(maxsize=None)
def get_gateway_settings() -> GatewaySettings:
    """Process-wide gateway configuration, built once from Django settings."""
    from django.conf import settings

    return GatewaySettings.from_django(settings)


def reset_gateway_settings(*, setting=None, **kwargs):
    # Receiver for django.test.signals.setting_changed
    if setting is None or setting in GATEWAY_SETTING_NAMES:
        get_gateway_settings.cache_clear()


def default_allowed_hosts(listen_host: str) -> list:
    """
    Host headers to accept when DJANGO_ALLOWED_HOSTS is unset.
    Listening on every interface accepts any host name.
    """
    if listen_host in ("0.0.0.0", "::", ""):
        return ["*"]

    hosts = ["127.0.0.1", "localhost"]
    if listen_host not in hosts:
        hosts.append(listen_host.strip("[]"))
    return hosts
