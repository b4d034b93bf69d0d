"""
shapeguard — runtime validation of structurally described types.

File: src/shapeguard/__init__.py
Last updated: 2026-10-19

Purpose
- Package root. Re-exports the runtype combinators, results, and contracts.

Functional requirements
- Must not have side effects at import time (no logging configuration).

Example
    >>> from shapeguard import Number, Optional, Record, String
    >>> Person = Record({"name": String, "age": Optional(Number)})
    >>> Person.guard({"name": "Ada"})
    True
    >>> Person.validate({}).key
    'name'
"""

from shapeguard.contract import AsyncContract, Contract
from shapeguard.errors import ValidationError
from shapeguard.reflect import Tag
from shapeguard.result import Failure, Result, Success
from shapeguard.runtype import Runtype
from shapeguard.show import show
from shapeguard.types import (
    Array,
    Boolean,
    Brand,
    Constraint,
    Dictionary,
    ExactRecord,
    Function,
    InstanceOf,
    Intersect,
    Lazy,
    Literal,
    Never,
    Null,
    Number,
    Optional,
    Partial,
    Record,
    String,
    Tuple,
    Union,
    Unknown,
)

__version__ = "0.1.0"

__all__ = [
    "Array",
    "AsyncContract",
    "Boolean",
    "Brand",
    "Constraint",
    "Contract",
    "Dictionary",
    "ExactRecord",
    "Failure",
    "Function",
    "InstanceOf",
    "Intersect",
    "Lazy",
    "Literal",
    "Never",
    "Null",
    "Number",
    "Optional",
    "Partial",
    "Record",
    "Result",
    "Runtype",
    "String",
    "Success",
    "Tag",
    "Tuple",
    "Union",
    "Unknown",
    "ValidationError",
    "__version__",
    "show",
]
