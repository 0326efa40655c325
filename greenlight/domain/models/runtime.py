import re
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema, from_json, to_json

from greenlight.domain.exceptions import FormatError

# stored in a Postgres integer column
MAX_RUNTIME = 2**31 - 1

_RUNTIME_PATTERN = re.compile(r"([0-9]{1,10}) mins")
_NEGATIVE_PATTERN = re.compile(r"-[0-9]+ mins")


class Runtime(int):
    """Movie length in minutes, exchanged as a ``"<N> mins"`` string."""

    def to_text(self) -> str:
        return f"{int(self)} mins"

    def marshal_json(self) -> bytes:
        return to_json(self.to_text())

    @classmethod
    def from_text(cls, text: str) -> "Runtime":
        if _NEGATIVE_PATTERN.fullmatch(text):
            raise FormatError(f"runtime must not be negative: {text!r}")

        match = _RUNTIME_PATTERN.fullmatch(text)
        if match is None:
            raise FormatError(f"invalid runtime format: {text!r}")

        minutes = int(match.group(1))
        if minutes > MAX_RUNTIME:
            raise FormatError(f"runtime must not exceed {MAX_RUNTIME} minutes")

        return cls(minutes)

    @classmethod
    def unmarshal_json(cls, data: bytes) -> "Runtime":
        try:
            value = from_json(data)
        except ValueError as e:
            raise FormatError(f"invalid runtime format: {e}") from e

        if not isinstance(value, str):
            raise FormatError("invalid runtime format: expected a quoted string")

        return cls.from_text(value)

    @classmethod
    def _validate(cls, value: Any) -> "Runtime":
        if isinstance(value, Runtime):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        raise FormatError("invalid runtime format: expected a string like '102 mins'")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda runtime: runtime.to_text(), when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^[0-9]+ mins$", "examples": ["102 mins"]}
