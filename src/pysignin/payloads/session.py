import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import aiohttp
from .payload import Payload

logger = logging.getLogger(__name__)


@dataclass
class SessionPayload(Payload):
    """Payload holding a shared HTTP session for email/password sign-in.

    The aiohttp session needs a running event loop, so it is opened on first use
    instead of at construction.
    """

    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = 30.0
    _session: Optional[aiohttp.ClientSession] = field(
        default=None, init=False, repr=False, compare=False
    )

    def validate(self) -> "SessionPayload":
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        return self

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def get_session(self) -> aiohttp.ClientSession:
        if self.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
            logger.debug("Opened HTTP session")
        return self._session

    async def request(
        self, url: str, headers: Dict[str, str] = None, data: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Make HTTP request through the shared session"""
        session = await self.get_session()
        if data:
            logger.debug("POST %s", url)
            async with session.post(url, headers=headers, data=data) as response:
                response.raise_for_status()
                return await response.json()
        else:
            logger.debug("GET %s", url)
            async with session.get(url, headers=headers) as response:
                response.raise_for_status()
                return await response.json()

    async def close(self) -> None:
        if self.closed:
            return
        await self._session.close()
        self._session = None
        logger.debug("Closed HTTP session")

    async def __aenter__(self) -> "SessionPayload":
        await self.get_session()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
