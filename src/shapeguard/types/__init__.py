"""Runtype combinators."""

from shapeguard.types.array import Array
from shapeguard.types.constraint import Brand, Constraint
from shapeguard.types.dictionary import Dictionary
from shapeguard.types.intersect import Intersect
from shapeguard.types.lazy import Lazy
from shapeguard.types.literal import Literal, LiteralValue, Null
from shapeguard.types.primitives import (
    Boolean,
    Function,
    InstanceOf,
    Never,
    Number,
    String,
    Unknown,
)
from shapeguard.types.record import ExactRecord, Partial, Record
from shapeguard.types.tuples import Tuple
from shapeguard.types.union import Optional, Union

__all__ = [
    "Array",
    "Boolean",
    "Brand",
    "Constraint",
    "Dictionary",
    "ExactRecord",
    "Function",
    "InstanceOf",
    "Intersect",
    "Lazy",
    "Literal",
    "LiteralValue",
    "Never",
    "Null",
    "Number",
    "Optional",
    "Partial",
    "Record",
    "String",
    "Tuple",
    "Union",
    "Unknown",
]
