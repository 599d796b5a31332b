"""
Helpers that turn raw response bodies into validated pydantic objects.

Anything that does not match the expected shape is reported as
MojangSchemaError so callers never see half-parsed data.
"""

import base64
import binascii
import json
from typing import Any, Optional, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from mojang_api.exceptions.mojang_exceptions import MojangSchemaError

T = TypeVar("T")


def decode_json(resp: requests.Response) -> Optional[Any]:
    """Decode a JSON body. An empty body decodes to None."""
    if not resp.content or not resp.content.strip():
        return None

    try:
        return resp.json()
    except ValueError as e:
        raise MojangSchemaError(f"Invalid JSON from {resp.url}: {e}") from e


def parse_as(schema: Type[T], data: Any, what: str) -> T:
    """
    Validate `data` against `schema`.

    `schema` may be a pydantic model or any type TypeAdapter accepts,
    e.g. List[SomeModel].
    """
    try:
        return TypeAdapter(schema).validate_python(data)
    except ValidationError as e:
        raise MojangSchemaError(
            f"Unexpected {what} response: {e.error_count()} validation error(s)"
        ) from e


def decode_base64_json(value: str, what: str) -> Any:
    """Decode a base64 string carrying a JSON document."""
    try:
        raw = base64.b64decode(value, validate=True)
        return json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise MojangSchemaError(f"Malformed {what} payload: {e}") from e
