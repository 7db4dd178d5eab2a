"""
Parsing of fetched or cached JSON documents into version models.
"""

from typing import Type, TypeVar

import pydantic

from mcfetch.mcfetch_exceptions import ParseError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def parse_document(model: Type[ModelT], data: bytes, source: str) -> ModelT:
    """
    Validates raw JSON bytes against model.

    Args:
        model: The pydantic model class to build
        data: Raw bytes as fetched or read from the cache
        source: URL or path the bytes came from, used in the error message

    Raises:
        ParseError: If the bytes are not JSON or do not match the model
    """
    try:
        return model.model_validate_json(data)
    except pydantic.ValidationError as e:
        raise ParseError(source, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
