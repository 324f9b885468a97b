"""
HTTP client for the third-party contact form relay
"""
import httpx
from typing import Dict, Optional
import logging

from ..config import settings

logger = logging.getLogger(__name__)


class ContactFormClient:
    """Posts contact form submissions to the form relay"""

    def __init__(self, form_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.form_url = form_url or settings.CONTACT_FORM_URL
        self.timeout = httpx.Timeout(settings.CONTACT_TIMEOUT_SECONDS, connect=5.0)
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def start(self):
        """Initialize HTTP client"""
        self.client = httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
        logger.info("Contact form client initialized")

    async def stop(self):
        """Close HTTP client"""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Contact form client closed")

    async def submit(self, fields: Dict[str, str]) -> bool:
        """
        Submit form fields to the relay

        A single attempt; success is inferred from the response status only.

        Returns:
            True on a 2xx response, False on any other status or error
        """
        if not self.client:
            logger.error("Contact form client not initialized")
            return False

        try:
            response = await self.client.post(
                self.form_url,
                data=fields,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            return True
        except httpx.HTTPStatusError as e:
            logger.error(f"Contact form relay returned {e.response.status_code}")
            return False
        except Exception as e:
            logger.error(f"Contact form submission failed: {e}")
            return False


# Global contact client instance
contact_client = ContactFormClient()


async def get_contact_client() -> ContactFormClient:
    """Dependency for getting contact client instance"""
    return contact_client
