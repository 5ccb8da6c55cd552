"""CWA open-data datastore client (36-hour and weekly forecasts)."""

import logging
from typing import Any

import httpx

from weatherproxy.config.defaults import (
    CWA_BASE_URL,
    SHORT_TERM_DATASET,
    WEEKLY_DATASET,
    WEEKLY_ELEMENT_NAME,
)
from weatherproxy.config.schema import ServerConfig
from weatherproxy.models.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_UPSTREAM_MESSAGE = "Unable to fetch weather data"


class CwaClient:
    """Async client for two CWA datastore endpoints.

    One GET per call, no retries. HTTP error statuses are raised as
    UpstreamError; transport errors propagate as httpx.RequestError.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = CWA_BASE_URL,
        short_term_dataset: str = SHORT_TERM_DATASET,
        weekly_dataset: str = WEEKLY_DATASET,
        weekly_element_name: str = WEEKLY_ELEMENT_NAME,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.short_term_dataset = short_term_dataset
        self.weekly_dataset = weekly_dataset
        self.weekly_element_name = weekly_element_name
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ServerConfig) -> "CwaClient":
        upstream = config.upstream
        return cls(
            api_key=config.api_key_value() or "",
            base_url=upstream.base_url,
            short_term_dataset=upstream.short_term_dataset,
            weekly_dataset=upstream.weekly_dataset,
            weekly_element_name=upstream.weekly_element_name,
            timeout=upstream.timeout_seconds,
        )

    def dataset_url(self, dataset_id: str) -> str:
        return f"{self.base_url}/v1/rest/datastore/{dataset_id}"

    async def fetch_short_term(self, location_name: str) -> dict:
        """Fetch the 36-hour forecast for a county/city."""
        params = {"Authorization": self.api_key, "locationName": location_name}
        return await self._get(self.short_term_dataset, params)

    async def fetch_weekly(self, location_name: str) -> dict:
        """Fetch the weekly forecast, filtered to the temperature element."""
        params = {
            "Authorization": self.api_key,
            "locationName": location_name,
            "ElementName": self.weekly_element_name,
        }
        return await self._get(self.weekly_dataset, params)

    async def _get(self, dataset_id: str, params: dict[str, str]) -> dict:
        url = self.dataset_url(dataset_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("CWA request failed for %s: %s", dataset_id, e)
            raise

        if resp.status_code >= 400:
            details = _decode_body(resp)
            message = DEFAULT_UPSTREAM_MESSAGE
            if isinstance(details, dict) and details.get("message"):
                message = str(details["message"])
            logger.error(
                "CWA API %d for %s: %s", resp.status_code, dataset_id, details
            )
            raise UpstreamError(resp.status_code, message, details)
        return resp.json()


def _decode_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text
