"""SafePath: a path value that passed traversal classification."""

import os
from pathlib import PurePath
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from traversal_guard.components import ComponentKind, is_traversal_attack, split_components
from traversal_guard.errors import REJECTION_MESSAGE, TRAVERSAL_ERROR_TYPE, TraversalAttackError

_CLASSIFIED = object()


class SafePath:
    """
    Immutable wrapper around a relative path containing only "." and normal segments.
    Instances only come from SafePath.parse (directly, via a route dependency, or via
    pydantic validation of a SafePath field). The raw text is kept as received.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: str, *, _guard: object = None) -> None:
        if _guard is not _CLASSIFIED:
            raise TypeError("SafePath cannot be constructed directly, use SafePath.parse()")
        object.__setattr__(self, "_raw", raw)

    @classmethod
    def parse(cls, raw: str | os.PathLike[str]) -> "SafePath":
        """Classify raw and wrap it. Raises TraversalAttackError if it is rejected."""
        if is_traversal_attack(raw):
            raise TraversalAttackError()
        return cls(os.fspath(raw), _guard=_CLASSIFIED)

    @property
    def path(self) -> PurePath:
        return PurePath(self._raw)

    @property
    def parts(self) -> tuple[str, ...]:
        """Names of the normal segments, in order."""
        return tuple(c.text for c in split_components(self._raw) if c.kind is ComponentKind.NORMAL)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SafePath is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("SafePath is immutable")

    def __reduce__(self):
        return (SafePath.parse, (self._raw,))

    def __fspath__(self) -> str:
        return self._raw

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"SafePath({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafePath):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    # pydantic integration: form and JSON body fields

    @classmethod
    def _validate_str(cls, value: str) -> "SafePath":
        try:
            return cls.parse(value)
        except TraversalAttackError as exc:
            raise PydanticCustomError(TRAVERSAL_ERROR_TYPE, REJECTION_MESSAGE) from exc

    @classmethod
    def _validate_python(cls, value: Any) -> "SafePath":
        if isinstance(value, (str, os.PathLike)):
            value = os.fspath(value)
        if not isinstance(value, str):
            raise PydanticCustomError("path_type", "Input should be a valid path string")
        return cls._validate_str(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls._validate_str, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(cls._validate_python),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema.str_schema())
        json_schema["format"] = "path"
        return json_schema
