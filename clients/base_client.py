"""
Base class for outbound HTTP clients
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Optional
import aiohttp
from loguru import logger

# Anything that means "the request never produced a usable response"
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)


class BaseClient(ABC):
    """Base class for the widget's HTTP clients"""

    def __init__(self, base_url: str, name: str, timeout: Optional[aiohttp.ClientTimeout] = None):
        self.base_url = base_url.rstrip("/")
        self.name = name
        # None keeps aiohttp's own defaults
        self.timeout = timeout

    def _session(self) -> aiohttp.ClientSession:
        """Open a fresh session bound to the running event loop"""
        if self.timeout is None:
            return aiohttp.ClientSession()
        return aiohttp.ClientSession(timeout=self.timeout)

    def _log_response(self, url: str, status: int) -> None:
        logger.info(f"{self.name}: GET {url} -> {status}")

    @abstractmethod
    def get_description(self) -> str:
        """Get client description"""
        pass
