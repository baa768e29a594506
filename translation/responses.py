"""Conversion of service results into JSON responses."""

import logging
from typing import Any, Optional

from django.http import JsonResponse

from .results import Result, ResultStatus

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ResultStatus.OK: 200,
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.CONFLICT: 409,
    ResultStatus.INVALID: 400,
}


def envelope(data: Any = None, is_success: bool = True, errors: Optional[list[str]] = None) -> dict[str, Any]:
    """Build the response body shared by all translation API endpoints."""
    return {
        "data": data,
        "isSuccess": is_success,
        "errors": errors or [],
    }


def result_response(result: Result, operation: str, params: Any = None, log_body: bool = True) -> JsonResponse:
    """
    Log the outcome of an operation and convert it to a JSON response.

    Args:
        result: Result returned by the translation service
        operation: Name of the invoked operation, used in log messages
        params: Request parameters, used in log messages
        log_body: Whether to include the response data in the success log

    Returns:
        JsonResponse with the status code matching the result status
    """
    if result.is_success:
        if log_body:
            logger.info(f"Request {operation} with params {params!r} is success: {result.value!r}")
        else:
            logger.info(f"Request {operation} with params {params!r} is success")
    else:
        logger.warning(f"Request {operation} with params {params!r} is NOT success ({result.status.value}): {result.errors}")

    return JsonResponse(
        envelope(result.value if result.is_success else None, result.is_success, result.errors),
        status=STATUS_CODES[result.status],
    )


def error_response(message: str, status: int) -> JsonResponse:
    """Create a failure response that did not come from the service."""
    return JsonResponse(envelope(None, False, [message]), status=status)
