import math
from decimal import Decimal

from fastapi.responses import Response

from app.schemas.stats import StatsResponse

# Magnitudes rendered in plain positional notation; everything else uses an exponent
POSITIONAL_MIN = 1e-6
POSITIONAL_MAX = 1e21


def format_float(value: float) -> str:
    """
    Render a float with the fewest digits that round-trip, in the form existing
    stats clients compare byte for byte: 0 and 4 rather than 0.0 and 4.0,
    0.00001 rather than 1e-05, and 1e-7 rather than 1e-07.
    """
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"unsupported float value: {value}")
    if value == 0:
        return "0"

    shortest = repr(value)
    if POSITIONAL_MIN <= abs(value) < POSITIONAL_MAX:
        return format(Decimal(shortest).normalize(), "f")

    mantissa, exponent = shortest.split("e")
    sign = exponent[0] if exponent[0] in "+-" else "+"
    digits = exponent.lstrip("+-").lstrip("0") or "0"
    return f"{mantissa}e{sign}{digits}"


def encode_stats(stats: StatsResponse) -> bytes:
    return f'{{"avg":{format_float(stats.avg)},"totalCount":{int(stats.totalCount)}}}'.encode("utf-8")


class StatsJSONResponse(Response):
    media_type = "application/json"

    def render(self, content) -> bytes:
        if isinstance(content, dict):
            content = StatsResponse.model_validate(content)
        return encode_stats(content)
