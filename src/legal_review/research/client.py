"""Client for the third-party legal research API."""

import logging
from typing import Optional

import httpx
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from legal_review.config import get_settings

logger = logging.getLogger(__name__)


class ResearchError(Exception):
    """Error communicating with the legal research API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class TransientResearchError(ResearchError):
    """A failure worth retrying (network error or 5xx)."""

    pass


class ResearchClient:
    """Posts research prompts and returns the raw markdown answer."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the research client.

        Args:
            api_url: Research endpoint (defaults to LEGAL_RESEARCH_API_URL)
            api_token: Bearer token (defaults to API_TOKEN)
            timeout: Request timeout in seconds
            max_retries: Attempts for transient failures
            transport: Optional httpx transport, e.g. for tests
        """
        settings = get_settings()
        self.api_url = api_url or settings.research_api_url
        self.api_token = api_token or settings.api_token
        self.timeout = timeout or settings.request_timeout
        self.max_retries = max_retries or settings.max_retries
        self.transport = transport
        self.retry_wait = wait_exponential(multiplier=1, min=2, max=10)

    def research(self, prompt: str) -> str:
        """Run a research prompt.

        Args:
            prompt: The research question

        Returns:
            The API's response body as text

        Raises:
            ResearchError: If the token is missing or the API call fails
        """
        if not self.api_token:
            raise ResearchError("API token not configured")

        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception_type(TransientResearchError),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                result = self._post(prompt)

        logger.info("Research API response received, length: %d", len(result))
        return result

    def _post(self, prompt: str) -> str:
        logger.debug("Calling research API at %s", self.api_url)
        try:
            with httpx.Client(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = client.post(
                    self.api_url,
                    json={"prompt": prompt},
                    headers={"Authorization": f"Bearer {self.api_token}"},
                )
        except httpx.TransportError as e:
            raise TransientResearchError(f"Research API unreachable: {e}") from e

        if response.status_code >= 500:
            logger.warning("Research API error: %d", response.status_code)
            raise TransientResearchError(
                f"API request failed: {response.status_code}",
                status_code=response.status_code,
                details=response.text,
            )
        if not response.is_success:
            logger.error("Research API error: %d", response.status_code)
            raise ResearchError(
                f"API request failed: {response.status_code}",
                status_code=response.status_code,
                details=response.text,
            )

        return response.text
