"""Query construction for the SBDB Query API."""

from __future__ import annotations

import dataclasses
import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Iterator, Optional, Union
from urllib.parse import urlencode

from .model import Field

__all__ = [
    "NumStatusFilter",
    "KindFilter",
    "GroupFilter",
    "ClassFilter",
    "Operator",
    "Expr",
    "And",
    "Or",
    "ComparisonExpr",
    "FieldSet",
    "Filter",
    "format_classes",
    "eq",
    "ne",
    "lt",
    "gt",
    "le",
    "ge",
    "rg",
    "regex",
    "df",
    "nd",
]

FieldLike = Union[Field, str]

MAX_CLASSES = 3


class NumStatusFilter(Enum):
    """Limits results by numbered status."""

    ANY = ""
    NUMBERED = "n"
    UNNUMBERED = "u"

    def __str__(self) -> str:
        return self.value


class KindFilter(Enum):
    """Restricts results to asteroids or comets."""

    ANY = ""
    ASTEROID = "a"
    COMET = "c"

    def __str__(self) -> str:
        return self.value


class GroupFilter(Enum):
    """Narrows results to the NEO or PHA group."""

    ANY = ""
    NEO = "neo"
    PHA = "pha"

    def __str__(self) -> str:
        return self.value


class ClassFilter(Enum):
    """Orbit class codes accepted by the API."""

    IEO = "IEO"  # Atira
    ATE = "ATE"  # Aten
    APO = "APO"  # Apollo
    AMO = "AMO"  # Amor
    MCA = "MCA"  # Mars-crossing Asteroid
    IMB = "IMB"  # Inner Main-belt Asteroid
    MBA = "MBA"  # Main-belt Asteroid
    OMB = "OMB"  # Outer Main-belt Asteroid
    TJN = "TJN"  # Jupiter Trojan
    AST = "AST"  # Asteroid
    CEN = "CEN"  # Centaur
    TNO = "TNO"  # TransNeptunian Object
    PAA = "PAA"  # Parabolic "Asteroid"
    HYA = "HYA"  # Hyperbolic "Asteroid"
    ETc = "ETc"  # Encke-type Comet
    JFc = "JFc"  # Jupiter-family Comet
    JFC = "JFC"  # Jupiter-family Comet*
    CTc = "CTc"  # Chiron-type Comet
    HTC = "HTC"  # Halley-type Comet*
    PAR = "PAR"  # Parabolic Comet
    HYP = "HYP"  # Hyperbolic Comet
    COM = "COM"  # Comet

    def __str__(self) -> str:
        return self.value


def format_classes(classes: Iterable[ClassFilter]) -> str:
    """Join orbit classes into the comma separated form the API expects."""
    return ",".join(str(c) for c in classes)


class Operator(Enum):
    """Comparison operators of the field-constraint syntax."""

    EQ = "EQ"  # equal
    NE = "NE"  # not equal
    LT = "LT"  # less than
    GT = "GT"  # greater than
    LE = "LE"  # less than or equal
    GE = "GE"  # greater than or equal
    RG = "RG"  # inclusive range
    RE = "RE"  # regular expression
    DF = "DF"  # defined (not NULL)
    ND = "ND"  # not defined (NULL)

    def __str__(self) -> str:
        return self.value


def _dumps(value) -> str:
    """Compact JSON with the same HTML-safe escaping as the API's reference encoder."""
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _payload(expr: "Expr"):
    if isinstance(expr, ComparisonExpr):
        return str(expr)
    return json.loads(expr.to_json())


class Expr(ABC):
    """A field-constraint expression that can be rendered as JSON."""

    @abstractmethod
    def to_json(self) -> str:
        """Render the expression as compact JSON text."""


class _Group(Expr):
    _key = ""

    def __init__(self, *args: Expr) -> None:
        self.exprs: tuple[Expr, ...] = tuple(args)

    def __iter__(self) -> Iterator[Expr]:
        return iter(self.exprs)

    def __len__(self) -> int:
        return len(self.exprs)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.exprs == other.exprs

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.exprs))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self.exprs))})"


class And(_Group):
    """Expressions that must all hold."""

    def __init__(self, *args: Expr) -> None:
        super().__init__(*args)

    def to_json(self) -> str:
        return _dumps({"AND": [_payload(e) for e in self.exprs]})


class Or(_Group):
    """Expressions of which at least one must hold."""

    def __init__(self, *args: Expr) -> None:
        super().__init__(*args)

    def to_json(self) -> str:
        return _dumps({"OR": [_payload(e) for e in self.exprs]})


class ComparisonExpr(str, Expr):
    """A single comparison such as ``"H|LT|20"``."""

    def to_json(self) -> str:
        return _dumps(str(self))


def _compare(field: FieldLike, op: Operator, *args: str) -> ComparisonExpr:
    return ComparisonExpr("|".join([str(field), str(op), *args]))


def eq(field: FieldLike, value: str) -> ComparisonExpr:
    """Field equals value."""
    return _compare(field, Operator.EQ, value)


def ne(field: FieldLike, value: str) -> ComparisonExpr:
    """Field does not equal value."""
    return _compare(field, Operator.NE, value)


def lt(field: FieldLike, value: str) -> ComparisonExpr:
    """Field is less than value."""
    return _compare(field, Operator.LT, value)


def gt(field: FieldLike, value: str) -> ComparisonExpr:
    """Field is greater than value."""
    return _compare(field, Operator.GT, value)


def le(field: FieldLike, value: str) -> ComparisonExpr:
    """Field is less than or equal to value."""
    return _compare(field, Operator.LE, value)


def ge(field: FieldLike, value: str) -> ComparisonExpr:
    """Field is greater than or equal to value."""
    return _compare(field, Operator.GE, value)


def rg(field: FieldLike, minimum: str, maximum: str) -> ComparisonExpr:
    """Field lies in the inclusive range [minimum, maximum]."""
    return _compare(field, Operator.RG, minimum, maximum)


def regex(field: FieldLike, value: str) -> ComparisonExpr:
    """Field matches the regular expression value."""
    return _compare(field, Operator.RE, value)


def df(field: FieldLike) -> ComparisonExpr:
    """Field is defined."""
    return _compare(field, Operator.DF)


def nd(field: FieldLike) -> ComparisonExpr:
    """Field is not defined."""
    return _compare(field, Operator.ND)


class FieldSet:
    """The set of fields requested from the API, listed in sorted order."""

    def __init__(self, *args: FieldLike) -> None:
        self._names: set[str] = set()
        self.add_fields(*args)

    def add(self, field: FieldLike) -> None:
        self._names.add(str(field))

    def add_fields(self, *args: FieldLike) -> None:
        for field in args:
            self.add(field)

    def remove(self, field: FieldLike) -> None:
        self._names.discard(str(field))

    def names(self) -> list[str]:
        """Field names in sorted order."""
        return sorted(self._names)

    def __str__(self) -> str:
        return ",".join(self.names())

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, field: object) -> bool:
        return str(field) in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSet):
            return NotImplemented
        return self._names == other._names

    def __repr__(self) -> str:
        return f"FieldSet({', '.join(map(repr, self.names()))})"


@dataclasses.dataclass
class Filter:
    """Search parameters of a query."""

    fields: Optional[FieldSet] = None
    limit: int = 0
    limit_from: int = 0
    numbered_status: NumStatusFilter = NumStatusFilter.ANY
    kind: KindFilter = KindFilter.ANY
    group: GroupFilter = GroupFilter.ANY
    # At most three orbit classes.
    classes: list[ClassFilter] = dataclasses.field(default_factory=list)
    must_have_satellite: bool = False
    exclude_fragments: bool = False
    field_constraints: Optional[Expr] = None

    def values(self) -> dict[str, str]:
        """Query parameters for this filter.

        Raises ValueError when no field is requested, more than three classes
        are given, or a limit is negative.
        """
        if not self.fields:
            raise ValueError("must provide at least one field")
        if len(self.classes) > MAX_CLASSES:
            raise ValueError(f"len(classes) = {len(self.classes)}, max = {MAX_CLASSES}")
        if self.limit < 0 or self.limit_from < 0:
            raise ValueError("limit and limit_from must not be negative")

        params = {"fields": str(self.fields)}
        if self.limit > 0:
            params["limit"] = str(self.limit)
        if self.limit_from > 0:
            params["limit-from"] = str(self.limit_from)
        if self.numbered_status is not NumStatusFilter.ANY:
            params["sb-ns"] = str(self.numbered_status)
        if self.kind is not KindFilter.ANY:
            params["sb-kind"] = str(self.kind)
        if self.group is not GroupFilter.ANY:
            params["sb-group"] = str(self.group)
        if self.must_have_satellite:
            params["sb-sat"] = "true"
        if self.exclude_fragments:
            params["sb-xfrag"] = "true"
        if self.classes:
            params["sb-class"] = format_classes(self.classes)
        if self.field_constraints is not None:
            params["sb-cf"] = self.field_constraints.to_json()
        return params

    def encode(self) -> str:
        """URL-encoded query string with keys in sorted order."""
        return urlencode(sorted(self.values().items()))