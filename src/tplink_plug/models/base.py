"""Base class for decoded response blocks.

Devices omit whatever they do not support, so every field of every block
defaults to ``None``. A field whose JSON key differs from the attribute
name declares it with :func:`wire`. Unknown keys are ignored; a known key
holding the wrong JSON type is a :class:`SchemaError`.
"""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Union


class SchemaError(ValueError):
    """A known response field has the wrong JSON type."""


def wire(name: str, default: Any = None) -> Any:
    """Declare a field whose JSON key is ``name``."""
    return field(default=default, metadata={"wire": name})


def _wire_name(f) -> str:
    return f.metadata.get("wire", f.name)


def _unwrap_optional(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _coerce(value: Any, tp: Any, path: str) -> Any:
    if value is None:
        return None
    tp = _unwrap_optional(tp)
    if tp is Any:
        return value

    origin = typing.get_origin(tp)
    if origin is list:
        if not isinstance(value, list):
            raise SchemaError(f"{path}: expected a list, got {type(value).__name__}")
        (item_tp,) = typing.get_args(tp) or (Any,)
        return [_coerce(item, item_tp, f"{path}[{i}]") for i, item in enumerate(value)]
    if origin is dict or tp is dict:
        if not isinstance(value, dict):
            raise SchemaError(f"{path}: expected an object, got {type(value).__name__}")
        return value

    if isinstance(tp, type) and issubclass(tp, ResponseModel):
        if not isinstance(value, dict):
            raise SchemaError(f"{path}: expected an object, got {type(value).__name__}")
        return tp._from_dict(value, path)

    # bool is an int subclass; JSON true/false never stands in for a number
    if tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    elif tp is bool:
        if isinstance(value, bool):
            return value
    else:
        raise TypeError(f"Unsupported field type {tp!r} at {path}")

    raise SchemaError(
        f"{path}: expected {tp.__name__}, got {type(value).__name__} ({value!r})"
    )


@dataclass
class ResponseModel:
    """A response block whose fields may each be absent."""

    _hints: ClassVar[dict[type, dict[str, Any]]] = {}

    @classmethod
    def _type_hints(cls) -> dict[str, Any]:
        hints = ResponseModel._hints.get(cls)
        if hints is None:
            hints = typing.get_type_hints(cls)
            ResponseModel._hints[cls] = hints
        return hints

    @classmethod
    def from_dict(cls, data: dict):
        """Build the block from a decoded JSON object.

        Raises:
            SchemaError: If ``data`` is not an object or a known field holds
                the wrong JSON type.
        """
        if not isinstance(data, dict):
            raise SchemaError(
                f"{cls.__name__}: expected an object, got {type(data).__name__}"
            )
        return cls._from_dict(data, cls.__name__)

    @classmethod
    def _from_dict(cls, data: dict, path: str):
        hints = cls._type_hints()
        kwargs = {}
        for f in fields(cls):
            if not f.init:
                continue
            key = _wire_name(f)
            if key in data:
                kwargs[f.name] = _coerce(data[key], hints[f.name], f"{path}.{key}")
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Return the present fields keyed by their JSON names."""
        out = {}
        for f in fields(self):
            if not f.init:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, ResponseModel):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [v.to_dict() if isinstance(v, ResponseModel) else v for v in value]
            out[_wire_name(f)] = value
        return out


@dataclass
class ActionResult(ResponseModel):
    """Result of an action that returns only a status."""

    err_code: int | None = None
    err_msg: str | None = None

    @property
    def ok(self) -> bool:
        """True unless the device reported a non-zero error code."""
        return not self.err_code
