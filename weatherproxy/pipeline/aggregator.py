"""Aggregator: resolve region, fetch both datasets, normalize and merge."""

import asyncio
import logging

from weatherproxy.config.schema import ServerConfig
from weatherproxy.ingest.cwa_client import CwaClient
from weatherproxy.ingest.normalizer import normalize_response
from weatherproxy.ingest.region_resolver import resolve_location
from weatherproxy.models.errors import ConfigurationError, DataNotFoundError
from weatherproxy.models.forecast import CombinedResult, WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherAggregator:
    def __init__(self, config: ServerConfig, client: CwaClient | None = None):
        self.config = config
        self._client = client

    @property
    def client(self) -> CwaClient:
        if self._client is None:
            self._client = CwaClient.from_config(self.config)
        return self._client

    async def combine(self, location_key: str) -> CombinedResult:
        """Build the merged short-term + weekly result for one region.

        Raises ConfigurationError without contacting upstream when no API key
        is configured, and DataNotFoundError when neither dataset normalizes.
        """
        if not self.config.api_key_value():
            raise ConfigurationError(
                "Set CWA_API_KEY in the environment or a .env file"
            )

        location_name = resolve_location(location_key)
        logger.info("Fetching forecasts for %r -> %s", location_key, location_name)

        hours_raw, week_raw = await self._fetch_both(location_name)

        hours = normalize_response(hours_raw)
        week = normalize_response(week_raw)
        if hours is None:
            logger.warning("No usable short-term data for %s", location_name)
        if week is None:
            logger.warning("No usable weekly data for %s", location_name)

        if hours is None and week is None:
            raise DataNotFoundError(
                "Unable to retrieve weather data for this region"
            )
        return merge_snapshots(hours, week, location_name)

    async def _fetch_both(self, location_name: str) -> tuple[dict | None, dict | None]:
        """Run both fetches concurrently and wait for both to settle.

        All-or-nothing unless allow_partial_results is set: the first failure
        (short-term before weekly) is raised. With partial results a failed
        source becomes None and only a double failure is raised.
        """
        pending = (
            self.client.fetch_short_term(location_name),
            self.client.fetch_weekly(location_name),
        )
        results = await asyncio.gather(*pending, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
        failures = [r for r in results if isinstance(r, Exception)]
        if failures and (
            not self.config.allow_partial_results or len(failures) == len(results)
        ):
            raise failures[0]
        for name, result in zip(("short-term", "weekly"), results):
            if isinstance(result, Exception):
                logger.warning(
                    "Dropping %s source for %s: %s", name, location_name, result
                )
        hours_raw, week_raw = (
            None if isinstance(r, Exception) else r for r in results
        )
        return hours_raw, week_raw


def merge_snapshots(
    hours: WeatherSnapshot | None,
    week: WeatherSnapshot | None,
    location_name: str,
) -> CombinedResult:
    """Merge two optional snapshots; city falls back hours -> week -> name."""
    city = (hours and hours.city) or (week and week.city) or location_name
    return CombinedResult(
        city=city,
        update_time_hours=hours.update_time if hours else None,
        update_time_week=week.update_time if week else None,
        hours=hours.forecasts if hours else (),
        week=week.forecasts if week else (),
    )
