"""
JSON Codec Module

Converts raw response bytes into typed values and request bodies into
JSON bytes using pydantic. Decoding is strict: field presence and JSON
types must match the target annotations.
"""

from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticUserError


class DecodingError(ValueError):
    """Response bytes could not be decoded into the requested type."""


class EncodingError(ValueError):
    """A request body could not be serialized to JSON."""


def _json_path(loc) -> str:
    path = "$"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def format_validation_error(error: ValidationError, limit: int = 3) -> str:
    """Render pydantic errors as ``$.path: message`` lines joined by '; '."""
    details = error.errors(include_url=False)
    parts = [f"{_json_path(d['loc'])}: {d['msg']}" for d in details[:limit]]
    if len(details) > limit:
        parts.append(f"... {len(details) - limit} more")
    return "; ".join(parts)


class JSONDecoder:
    """
    Decoder from JSON bytes to typed Python values.

    Any type pydantic can validate works as a target: models, lists,
    dicts, Optional and primitives.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def decode(self, target_type: Any, data: bytes) -> Any:
        """
        Decode ``data`` as ``target_type``.

        Args:
            target_type: The type to produce.
            data: Raw JSON bytes.

        Returns:
            An instance of ``target_type``.

        Raises:
            DecodingError: If the bytes are not JSON or do not match the type.
        """
        try:
            adapter = TypeAdapter(target_type)
        except PydanticUserError as e:
            raise DecodingError(f"unsupported target type {target_type!r}: {e}") from e

        try:
            return adapter.validate_json(data, strict=self.strict)
        except ValidationError as e:
            raise DecodingError(format_validation_error(e)) from e
        except (ValueError, RecursionError) as e:
            raise DecodingError(f"{type(e).__name__}: {e}") from e


class JSONEncoder:
    """Encoder from Python values to JSON bytes."""

    def encode(self, value: Any) -> bytes:
        """
        Serialize ``value`` to JSON bytes, writing fields by alias.

        Raises:
            EncodingError: If the value contains something JSON cannot represent.
        """
        try:
            return TypeAdapter(type(value)).dump_json(value, by_alias=True)
        except (ValueError, TypeError, RecursionError) as e:
            raise EncodingError(f"{type(e).__name__}: {e}") from e
