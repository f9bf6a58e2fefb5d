# ABOUTME: Client configuration for OpenWeatherMap using a frozen Pydantic BaseModel.
# ABOUTME: Loads settings from the environment and builds the httpx.AsyncClient used for requests.

import os
from urllib.parse import quote

import httpx
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict

from owm.address import Language, OWMAddress, Units

DEFAULT_TIMEOUT = 10.0


class OWMSettings(BaseModel):
    """Immutable settings passed to the address builder and the transport."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    units: Units = Units.IMPERIAL
    lang: Language = Language.ENGLISH
    timeout: float = DEFAULT_TIMEOUT
    proxy_host: str | None = None
    proxy_port: int | None = None
    proxy_user: str | None = None
    proxy_password: str | None = None

    def address(self) -> OWMAddress:
        return OWMAddress(api_key=self.api_key, units=self.units, lang=self.lang)

    def proxy_url(self) -> str | None:
        """Return the HTTP proxy URL, with credentials when both user and password are set."""
        if not self.proxy_host or self.proxy_port is None:
            return None
        auth = ""
        if self.proxy_user and self.proxy_password:
            auth = f"{quote(self.proxy_user, safe='')}:{quote(self.proxy_password, safe='')}@"
        return f"http://{auth}{self.proxy_host}:{self.proxy_port}"


def load_settings() -> OWMSettings:
    """Read OWM_* variables from the environment (and a .env file, if any)."""
    load_dotenv(find_dotenv(usecwd=True))
    port = os.environ.get("OWM_PROXY_PORT")
    return OWMSettings(
        api_key=os.environ.get("OWM_API_KEY", ""),
        units=os.environ.get("OWM_UNITS", Units.IMPERIAL.value),
        lang=os.environ.get("OWM_LANG", Language.ENGLISH.value),
        timeout=float(os.environ.get("OWM_TIMEOUT", DEFAULT_TIMEOUT)),
        proxy_host=os.environ.get("OWM_PROXY_HOST") or None,
        proxy_port=int(port) if port else None,
        proxy_user=os.environ.get("OWM_PROXY_USER") or None,
        proxy_password=os.environ.get("OWM_PROXY_PASSWORD") or None,
    )


def create_http_client(settings: OWMSettings) -> httpx.AsyncClient:
    """Create an httpx client that accepts compressed responses and honours the configured proxy.

    httpx decodes gzip and deflate bodies itself.
    """
    return httpx.AsyncClient(
        timeout=settings.timeout,
        headers={"Accept-Encoding": "gzip, deflate"},
        proxy=settings.proxy_url(),
    )
