"""Rating histogram aggregation.

A histogram maps a rating label (a decimal integer encoded as a string, as it
arrives on the wire) to the number of times that rating was given. The
aggregation is a single pass over the entries, so the result does not depend on
their order.
"""

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Union

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import InvalidCountError, ParseError
from app.schemas.stats import RatingsEvent, StatsResponse

_LABEL_PATTERN = re.compile(r"[+-]?[0-9]+")

# Labels and counts are 64-bit signed integers on the wire
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class AggregationResult:
    average: float
    total_count: int

    def to_response(self) -> StatsResponse:
        return StatsResponse(avg=self.average, totalCount=self.total_count)


def parse_label(label: Union[str, int]) -> int:
    """Parse a rating label as a base-10 integer, without whitespace or digit separators."""
    if isinstance(label, int) and not isinstance(label, bool):
        value = label
    elif isinstance(label, str) and _LABEL_PATTERN.fullmatch(label) is not None:
        try:
            value = int(label)
        except ValueError:
            # longer than the interpreter will convert
            raise ParseError(label, "value out of range")
    else:
        raise ParseError(str(label))
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(str(label), "value out of range")
    return value


def aggregate_histogram(histogram: Mapping[Union[str, int], int], allow_negative_counts: bool = True) -> AggregationResult:
    """
    Compute the count-weighted average rating and the total number of ratings.

    Args:
        histogram: rating label -> count. It is only read.
        allow_negative_counts: when False, a negative count raises InvalidCountError.

    Returns:
        AggregationResult, with average 0 when the total count is 0 or less.

    Raises:
        ParseError: a label is not an integer. No partial result is returned.
    """
    total_count = 0
    weighted_sum = 0
    for label, count in histogram.items():
        if not INT64_MIN <= count <= INT64_MAX:
            raise InvalidCountError(label, count, "value out of range")
        if count < 0 and not allow_negative_counts:
            raise InvalidCountError(label, count, "negative count")
        total_count += count
        weighted_sum += count * parse_label(label)

    if total_count <= 0:
        return AggregationResult(average=0.0, total_count=total_count)
    return AggregationResult(average=float(weighted_sum) / float(total_count), total_count=total_count)


class StatsService:
    def __init__(self, allow_negative_counts: bool = True):
        self.allow_negative_counts = allow_negative_counts
        self.logger = logging.getLogger(__name__)

    def compute(self, event: RatingsEvent) -> StatsResponse:
        result = aggregate_histogram(event.ratings, allow_negative_counts=self.allow_negative_counts)
        self.logger.debug(
            f"Aggregated {len(event.ratings)} ratings buckets: avg={result.average} totalCount={result.total_count}"
        )
        return result.to_response()

    def compute_from_body(self, body: Union[str, bytes]) -> StatsResponse:
        """Decode a raw request body and aggregate it. Raises pydantic.ValidationError on a bad body."""
        try:
            event = RatingsEvent.model_validate_json(body)
        except ValidationError as e:
            self.logger.warning(f"Rejected ratings event: {e.error_count()} validation error(s)")
            raise
        return self.compute(event)


def get_stats_service() -> StatsService:
    return StatsService(allow_negative_counts=settings.ALLOW_NEGATIVE_COUNTS)
