"""
HelloAPI - Data Route Handler
==============================

What:  Handles POST /data, which decodes a JSON object and echoes it back.
How:   Reads the raw body and decodes the first JSON value in it with the
       json module. The body is parsed whatever the Content-Type header says.

Request Flow:
    1. Read the full request body
    2. Decode the first JSON value; syntax errors (and an empty body) raise
       ClientInputError. Anything after that first value is ignored, so
       `{"a":1} {"b":2}` is accepted as `{"a":1}`
    3. Arrays, strings, numbers and booleans raise ClientInputError
    4. Return 200 with the decoded object under "data" (`null` echoes as null)

Malformed input must produce 400 with an `error` string, never FastAPI's
422 `detail` list, so the body is not declared as a `dict` parameter.
"""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request

from helloapi.exceptions import ClientInputError
from helloapi.schemas.demo import ClientErrorResponse, DataReceived

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Data"])

# Whitespace allowed before a JSON value (RFC 8259)
_JSON_WHITESPACE = " \t\n\r"

_decoder = json.JSONDecoder()

# JSON names for the Python types the decoder can produce
_JSON_TYPE_NAMES = {
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
}


def decode_json_object(body: bytes) -> Optional[Dict[str, Any]]:
    """
    Decode the first JSON value of a request body, which must be an object
    or `null`.

    Returns:
        The decoded object, or None for a `null` body.

    Raises:
        ClientInputError: The body is empty, not valid UTF-8, starts with
            invalid JSON, or holds an array, string, number or boolean.
    """
    context = {"body_length": len(body)}
    try:
        text = body.decode("utf-8")
        text = text.lstrip(_JSON_WHITESPACE)
        payload, end = _decoder.raw_decode(text)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise ClientInputError(message=str(e), context=context) from e

    # A bare literal must be delimited; `nullx` is a syntax error, `null {}` is not
    if payload is None and text[end:end + 1] not in ("", *_JSON_WHITESPACE):
        raise ClientInputError(
            message=f"Invalid character {text[end]!r} after top-level value",
            context=context,
        )

    if payload is not None and not isinstance(payload, dict):
        kind = _JSON_TYPE_NAMES.get(type(payload), type(payload).__name__)
        raise ClientInputError(
            message=f"Expected a JSON object, got {kind}",
            context=context,
        )

    return payload


@router.post(
    "/data",
    response_model=DataReceived,
    responses={
        200: {"description": "Body accepted and echoed", "model": DataReceived},
        400: {"description": "Body is not a JSON object", "model": ClientErrorResponse},
    },
    summary="Echo a JSON object",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": {"type": "object"}}},
        }
    },
)
async def receive_data(request: Request) -> DataReceived:
    body = await request.body()
    payload = decode_json_object(body)
    logger.debug("Received object with %d top-level keys", len(payload or {}))
    return DataReceived(data=payload)
