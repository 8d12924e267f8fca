"""
Request body parsing.

Accepts JSON and url-encoded (or multipart) form bodies. Other content
types, and JSON documents that are not objects, parse as an empty body,
so required-field checks report the fields as missing.
"""
import json
from typing import Any, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.api.errors import BadRequest

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def read_body(request: Request) -> Dict[str, Any]:
    """FastAPI dependency returning the request body as a dict"""
    media_type = _media_type(request)

    if media_type in FORM_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items()}

    if not (media_type == "application/json" or media_type.endswith("+json")):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise BadRequest("Invalid JSON body")

    return data if isinstance(data, dict) else {}


def parse_body(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """Validate a parsed body, turning type errors into a 400"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise BadRequest(f"Invalid value for {field}: {first.get('msg', 'invalid')}")
