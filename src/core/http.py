"""Lambda proxy integration: turns API Gateway events into operation calls.

Every action handler goes through ``run_operation``: the caller's identity is
read from the authorizer context, the payload is assembled from path, query
and JSON body, validated against the operation's input model, and the
operation runs inside its own database session.
"""

import base64
import binascii
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.auth.interface import AuthUser, RequestContext
from core.clients import get_aurora_client
from core.errors import USER_MESSAGES, BadRequestError, ErrorCode, ItineraryError
from core.log import setup_logger
from core.models import ActionResult
from core.services.ownership import require_identity
from core.validation import parse_input

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
Operation = Callable[[Session, RequestContext, InputT], ActionResult[Any]]

# Messages for these codes are written for the caller and returned verbatim.
_CALLER_FACING = {ErrorCode.UNAUTHORIZED, ErrorCode.NOT_FOUND, ErrorCode.BAD_REQUEST}


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    body = event.get("body")
    if not body:
        return {}
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")
        payload = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BadRequestError("Request body must be valid JSON.") from e
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object.")
    return payload


def build_payload(event: dict[str, Any]) -> dict[str, Any]:
    """Merge query string, path parameters and body; later sources win."""
    return {
        **(event.get("queryStringParameters") or {}),
        **(event.get("pathParameters") or {}),
        **parse_body(event),
    }


def request_context(event: dict[str, Any]) -> RequestContext:
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    # HTTP APIs nest simple-response authorizer context under "lambda".
    claims = authorizer.get("lambda") or authorizer
    user_id = claims.get("userId")
    if not user_id:
        return RequestContext()
    return RequestContext(
        user=AuthUser(user_id=str(user_id), email=claims.get("email") or "", name=claims.get("name") or "")
    )


def respond(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: ItineraryError) -> dict[str, Any]:
    message = error.message if error.code in _CALLER_FACING else error.user_message
    return respond(
        error.status_code,
        {"success": False, "error": {"code": error.code.value, "message": message}},
    )


def run_operation(event: dict[str, Any], operation: Operation[InputT], input_model: type[InputT]) -> dict[str, Any]:
    setup_logger()
    try:
        context = request_context(event)
        require_identity(context)
        data = parse_input(input_model, build_payload(event))

        with get_aurora_client().session() as session:
            result = operation(session, context, data)

        return respond(200, result.model_dump(mode="json", by_alias=True))
    except ItineraryError as e:
        logger.warning("%s failed: %s %s", operation.__name__, e.code.value, e.message)
        return error_response(e)
    except Exception:
        logger.exception("Unhandled error in %s", operation.__name__)
        return respond(
            500,
            {
                "success": False,
                "error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": USER_MESSAGES[ErrorCode.INTERNAL_ERROR]},
            },
        )
