import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import ParseError, StatsClientError
from app.schemas.stats import StatsResponse


class StatsClient:
    """Calls the deployed stats function over HTTP."""

    def __init__(self, url: str, timeout: float = 5.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def build_payload(histogram: Mapping[str, Union[str, int]]) -> str:
        """
        Build the request body for the stats function. Counts read from the
        ratings store are strings, so they are converted to integers here:

            {"ratings": {"0": 10, "1": 20, "2": 30, "3": 40, "4": 50, "5": 60}}
        """
        ratings = {}
        for rating, count in histogram.items():
            try:
                ratings[str(rating)] = int(count)
            except (TypeError, ValueError):
                raise ParseError(str(rating), f"count {count!r} is not an integer")
        return json.dumps({"ratings": ratings})

    async def get_stats(self, histogram: Mapping[str, Union[str, int]]) -> bytes:
        """Return the raw response body of the stats function, e.g. {"avg":3.5,"totalCount":210}."""
        payload = self.build_payload(histogram)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.url,
                    content=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise StatsClientError(f"error calling stats function at {self.url}: {e}") from e
        return response.content

    async def get_summary(self, histogram: Mapping[str, Union[str, int]]) -> Dict[str, Any]:
        """
        Ratings histogram plus, when the stats function answers, its stats.
        A failing stats function never fails the summary: the stats are just left out.
        """
        try:
            body = await self.get_stats(histogram)
            stats = StatsResponse.model_validate_json(body)
        except (StatsClientError, ParseError) as e:
            self.logger.warning(f"error calling stats function: {e}")
            return {"ratings": dict(histogram)}
        except ValidationError as e:
            self.logger.warning(f"error decoding stats function response: {e}")
            return {"ratings": dict(histogram)}
        return {"ratings": dict(histogram), "stats": stats.model_dump()}


def get_stats_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> StatsClient:
    return StatsClient(settings.STATS_FUNCTION_URL, timeout=settings.STATS_CLIENT_TIMEOUT, transport=transport)
