from typing import Type, Any
from pydantic import BaseModel

from app.schemas.response import ErrorResponse


def validate_envelope(body: Any, schema: Type[BaseModel] = None):
    assert "message" in body and "data" in body, f"not an APIResponse envelope: {body}"
    data = body["data"]
    if schema is None:
        return data
    if isinstance(data, list):
        for item in data:
            schema.model_validate(item)
    else:
        schema.model_validate(data)
    return data


def validate_error(body: Any, code: str):
    error = ErrorResponse.model_validate(body).error
    assert error.code == code, f"expected {code}, got {error.code}: {error.message}"
    return error
