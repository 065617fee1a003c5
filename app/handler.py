"""Serverless entry point for the stats function.

Handles Lambda function URL events: the ratings histogram arrives as the JSON
body of the event and the stats are returned as the JSON body of the response.
"""

import json
from typing import Any, Dict

from aws_lambda_powertools.utilities.data_classes import LambdaFunctionUrlEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from app.core.config import settings
from app.core.exceptions import StatsError
from app.core.logging import setup_logging
from app.services.stats import get_stats_service
from app.utils.encoding import encode_stats

logger = setup_logging(settings.APP_NAME)

JSON_HEADERS = {"Content-Type": "application/json"}


def _response(status_code: int, body: str) -> Dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(JSON_HEADERS), "body": body}


def _error_response(status_code: int, message: str) -> Dict[str, Any]:
    return _response(status_code, json.dumps({"message": message}))


@event_source(data_class=LambdaFunctionUrlEvent)
def handle_stats(event: LambdaFunctionUrlEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Payload:

        {"ratings": {"0": 10, "1": 20, "2": 30, "3": 40, "4": 50, "5": 60}}

    Response body:

        {"avg":3.3333333333333335,"totalCount":210}
    """
    stats_service = get_stats_service()
    try:
        stats = stats_service.compute_from_body(event.decoded_body or "")
    except ValueError as e:  # pydantic.ValidationError, bad base64 or utf-8
        logger.warning(f"Rejected ratings event: {e}")
        return _error_response(400, f"failed to unmarshal ratings event: {e}")
    except StatsError as e:
        logger.warning(f"Failed to aggregate ratings: {e}")
        return _error_response(400, str(e))

    return _response(200, encode_stats(stats).decode("utf-8"))
