import urllib.parse
from dataclasses import dataclass
from .payload import Payload


@dataclass
class FacebookPayload(Payload):
    """Facebook sign-in payload"""

    api_key: str = "some api key"

    def validate(self) -> "FacebookPayload":
        if not self.api_key:
            raise ValueError("API key is required")
        return self


@dataclass
class GooglePayload(Payload):
    """Google sign-in payload"""

    api_key: str = "some api key"
    host: str = "https://google.com"

    def validate(self) -> "GooglePayload":
        if not self.api_key:
            raise ValueError("API key is required")
        parsed = urllib.parse.urlparse(self.host)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid host: {self.host}")
        return self

    def url(self, path: str = "") -> str:
        """Join a path onto the configured host"""
        return urllib.parse.urljoin(self.host.rstrip("/") + "/", path.lstrip("/"))
