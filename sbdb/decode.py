"""Decoding of SBDB Query API JSON payloads into records and typed bodies."""

from __future__ import annotations

import dataclasses
import json
import math
import re
from decimal import Decimal
from functools import lru_cache
from typing import IO, Any, Callable, Optional, Union

from .logger import get_logger
from .model import (
    Body,
    Field,
    Identity,
    NonGrav,
    Orbit,
    Physical,
    Quality,
    Solution,
    Uncertainty,
)

__all__ = [
    "DecodeError",
    "JsonNumber",
    "Signature",
    "Payload",
    "Record",
    "decode",
]

FieldLike = Union[Field, str]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT_SYNTAX = re.compile(r"[+-]?[0-9]+")
_INF_WORDS = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"}

_INT_FIELDS = frozenset(
    {
        "spkid",
        "sats",
        "data_arc",
        "n_obs_used",
        "n_del_obs_used",
        "n_dop_obs_used",
        "condition_code",
    }
)
_BOOL_FIELDS = frozenset({"neo", "pha", "two_body"})
_STRING_FIELDS = frozenset(
    {
        "full_name",
        "kind",
        "pdes",
        "name",
        "prefix",
        "class",
        "orbit_id",
        "epoch_cal",
        "equinox",
        "tp_cal",
        "source",
        "soln_date",
        "producer",
        "first_obs",
        "last_obs",
        "pe_used",
        "sb_used",
        "extent",
        "pole",
        "spec_T",
        "spec_B",
    }
)


class DecodeError(ValueError):
    """Raised when a payload cannot be decoded or is malformed."""


def _parse_int(text: str) -> int:
    """Parse a base-10 64-bit integer; ValueError on bad syntax, OverflowError on range."""
    if not _INT_SYNTAX.fullmatch(text):
        raise ValueError(f"invalid integer syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Parse a float strictly; ValueError on bad syntax, OverflowError on range."""
    if not text or not text.isascii() or "_" in text or text != text.strip():
        raise ValueError(f"invalid float syntax: {text!r}")
    value = float(text)
    if math.isinf(value) and text.lower() not in _INF_WORDS:
        raise OverflowError(f"float out of range: {text!r}")
    return value


class JsonNumber(str):
    """The literal text of a JSON number, kept exactly as it appeared."""

    def as_float(self) -> float:
        """The number as a float."""
        return _parse_float(str(self))

    def as_int(self) -> int:
        """The number as a 64-bit integer; ValueError if it is not integral text."""
        return _parse_int(str(self))

    def __repr__(self) -> str:
        return f"JsonNumber({str(self)!r})"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    number = Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    text = "".join(map(str, digits))
    magnitude = len(text) + exponent - 1
    prefix = "-" if sign else ""
    if magnitude < -4 or magnitude >= 21:
        mantissa = text[0] + (f".{text[1:]}" if len(text) > 1 else "")
        return f"{prefix}{mantissa}e{'+' if magnitude >= 0 else '-'}{abs(magnitude):02d}"
    return format(number, "f")


def _as_text(value: Any) -> str:
    """Render any decoded value in a compact, language-neutral text form."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_as_text(v) for v in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        return "map[" + " ".join(f"{k}:{_as_text(v)}" for k, v in items) + "]"
    return str(value)


def _log_failed(fn: str, field: FieldLike, value: Any) -> None:
    get_logger().debug(
        "Type assertion failed: fn=%s field=%s value=%r", fn, field, value
    )


class Record(dict):
    """A single result row, mapping field names to raw decoded values.

    Keys may be given as Field members or plain strings.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__((str(k), v) for k, v in dict(*args, **kwargs).items())

    def __getitem__(self, key: FieldLike) -> Any:
        return super().__getitem__(str(key))

    def __setitem__(self, key: FieldLike, value: Any) -> None:
        super().__setitem__(str(key), value)

    def __contains__(self, key: object) -> bool:
        return super().__contains__(str(key))

    def get(self, key: FieldLike, default: Any = None) -> Any:
        return super().get(str(key), default)

    def get_float(self, field: FieldLike) -> Optional[float]:
        """The value as a float, or None when missing or not convertible."""
        value = self.get(field)
        if value is None:
            return None
        if isinstance(value, JsonNumber):
            fn = "get_float(JsonNumber)"
        elif isinstance(value, str):
            fn = "get_float(str)"
        else:
            _log_failed("get_float", field, value)
            return None
        try:
            return _parse_float(str(value))
        except (ValueError, OverflowError):
            _log_failed(fn, field, value)
            return None

    def get_int(self, field: FieldLike) -> Optional[int]:
        """The value as an integer, or None when missing or not convertible.

        Non-integral JSON numbers are truncated toward zero.
        """
        value = self.get(field)
        if value is None:
            return None
        if isinstance(value, JsonNumber):
            try:
                return value.as_int()
            except OverflowError:
                _log_failed("get_int(JsonNumber)", field, value)
                return None
            except ValueError:
                pass
            try:
                number = value.as_float()
            except (ValueError, OverflowError):
                _log_failed("get_float(JsonNumber)", field, value)
                return None
            if not math.isfinite(number) or not _INT64_MIN <= int(number) <= _INT64_MAX:
                _log_failed("get_int(JsonNumber)", field, value)
                return None
            return int(number)
        if isinstance(value, str):
            try:
                return _parse_int(value)
            except (ValueError, OverflowError):
                _log_failed("get_int(str)", field, value)
                return None
        _log_failed("get_int", field, value)
        return None

    def get_string(self, field: FieldLike) -> Optional[str]:
        """The value as text, or None when missing.

        The full name is stripped of surrounding whitespace.
        """
        value = self.get(field)
        if value is None:
            return None
        if isinstance(value, JsonNumber):
            return str(value)
        if isinstance(value, str):
            text = str(value)
            return text.strip() if str(field) == Field.FULL_NAME.value else text
        get_logger().debug(
            "Type assertion failed, using text form: fn=get_string field=%s value=%r",
            field,
            value,
        )
        return _as_text(value)

    def get_bool(self, field: FieldLike) -> Optional[bool]:
        """The value as a bool (Y/T or N/F flags accepted), or None."""
        value = self.get(field)
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and not isinstance(value, JsonNumber):
            flag = value.upper()
            if flag in ("Y", "T"):
                return True
            if flag in ("N", "F"):
                return False
        _log_failed("get_bool", field, value)
        return None

    def to_body(self) -> Body:
        """Convert the row into a strongly typed Body."""
        return Body(
            identity=self._section(Identity),
            orbit=self._section(Orbit),
            uncertainty=self._section(Uncertainty),
            solution=self._section(Solution),
            quality=self._section(Quality),
            nongrav=self._section(NonGrav),
            physical=self._section(Physical),
        )

    def _section(self, cls: type) -> Any:
        return cls(**{name: getter(self, source) for name, source, getter in _layout(cls)})


def _getter_for(source: FieldLike) -> Callable[[Record, FieldLike], Any]:
    name = str(source)
    if name in _INT_FIELDS:
        return Record.get_int
    if name in _BOOL_FIELDS:
        return Record.get_bool
    if name in _STRING_FIELDS:
        return Record.get_string
    return Record.get_float


@lru_cache(maxsize=None)
def _layout(cls: type) -> tuple[tuple[str, Field, Callable[[Record, FieldLike], Any]], ...]:
    return tuple(
        (item.name, item.metadata["sbdb"], _getter_for(item.metadata["sbdb"]))
        for item in dataclasses.fields(cls)
    )


@dataclasses.dataclass
class Signature:
    """API version and source reported with a payload."""

    version: str = ""
    source: str = ""


@dataclasses.dataclass
class Payload:
    """A raw SBDB response: field names, data rows and metadata."""

    signature: Signature = dataclasses.field(default_factory=Signature)
    fields: list[str] = dataclasses.field(default_factory=list)
    data: list[list[Any]] = dataclasses.field(default_factory=list)
    count: int = 0

    def records(self) -> list[Record]:
        """The data rows as Records keyed by field name.

        Numeric values are JsonNumber instances.
        """
        records = []
        for index, row in enumerate(self.data):
            row = row or []
            if len(row) != len(self.fields):
                raise DecodeError(
                    f"data element {index} has {len(row)} fields, "
                    f"expected {len(self.fields)}"
                )
            records.append(Record(zip(self.fields, row)))
        return records

    def bodies(self) -> list[Body]:
        """The data rows as strongly typed Body values."""
        return [record.to_body() for record in self.records()]


def _fail(message: str) -> DecodeError:
    return DecodeError(f"decode failed: {message}")


def _text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str) and not isinstance(value, JsonNumber):
        return str(value)
    raise _fail(f"cannot read {_as_text(value)!r} as a string in {where}")


def _signature(value: Any) -> Signature:
    if value is None:
        return Signature()
    if not isinstance(value, dict):
        raise _fail("signature must be an object")
    return Signature(
        version=_text(value.get("version"), "signature.version"),
        source=_text(value.get("source"), "signature.source"),
    )


def _fields(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _fail("fields must be an array")
    return [_text(name, "fields") for name in value]


def _data(value: Any) -> list[list[Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _fail("data must be an array")
    rows = []
    for row in value:
        if row is None:
            rows.append([])
        elif isinstance(row, list):
            rows.append(row)
        else:
            raise _fail("data rows must be arrays")
    return rows


def _count(value: Any) -> int:
    if value is None:
        return 0
    if not isinstance(value, JsonNumber):
        raise _fail("count must be a number")
    try:
        return value.as_int()
    except (ValueError, OverflowError) as exc:
        raise _fail(f"count: {exc}") from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


_DECODER = json.JSONDecoder(
    parse_float=JsonNumber,
    parse_int=JsonNumber,
    parse_constant=_reject_constant,
)


def decode(stream: Optional[IO[Any]]) -> Payload:
    """Parse an SBDB JSON payload from a text or binary stream.

    Numbers are kept as JsonNumber. Only the first JSON value is read.
    """
    if stream is None:
        raise DecodeError("nil reader")
    content = stream.read()
    if isinstance(content, (bytes, bytearray)):
        content = bytes(content).decode("utf-8", errors="replace")
    text = content.lstrip(" \t\r\n")
    if not text:
        raise _fail("unexpected end of input")
    try:
        obj, _ = _DECODER.raw_decode(text)
    except (ValueError, RecursionError) as exc:
        raise _fail(str(exc)) from exc
    if obj is None:
        return Payload()
    if not isinstance(obj, dict):
        raise _fail("payload must be a JSON object")
    return Payload(
        signature=_signature(obj.get("signature")),
        fields=_fields(obj.get("fields")),
        data=_data(obj.get("data")),
        count=_count(obj.get("count")),
    )