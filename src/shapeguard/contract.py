"""
shapeguard — function contracts.

File: src/shapeguard/contract.py
Last updated: 2026-10-19

Purpose
- Enforce parameter and return runtypes around synchronous and async callables.

What should be included in this file
- ``Contract``: validates positional arguments, calls the function, validates the result.
- ``AsyncContract``: same argument checks, then requires an awaitable and validates
  the awaited value.

Functional requirements
- Too few positional arguments fail before the wrapped function runs.
- Arguments are validated in order; the first invalid argument fails the call.
- Async contracts report every failure through the awaited result, never synchronously.

Non-functional requirements
- Violations are logged through ``structlog`` with the function name and key path.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from shapeguard.errors import ValidationError
from shapeguard.result import Failure
from shapeguard.runtype import (
    Runtype,
    VisitedState,
    inner_validate,
    require_runtype,
    require_runtypes,
    type_name,
)


class _ContractBase:
    __slots__ = ("arg_types", "return_type", "_logger")

    def __init__(
        self,
        *arg_types: Runtype,
        returns: Runtype,
        logger: Any | None = None,
    ) -> None:
        self.arg_types: tuple[Runtype, ...] = require_runtypes(arg_types, "Contract argument")
        self.return_type: Runtype = require_runtype(returns, "Contract return type")
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def _checked_arguments(self, function_name: str, args: tuple[Any, ...]) -> tuple[Any, ...]:
        expected = len(self.arg_types)
        if len(args) < expected:
            message = f"Expected {expected} arguments but only received {len(args)}"
            self._logger.warning(
                "contract_arity_rejected",
                function=function_name,
                expected=expected,
                received=len(args),
            )
            raise ValidationError(message)

        checked = list(args)
        visited = VisitedState()
        for index, arg_type in enumerate(self.arg_types):
            result = inner_validate(arg_type, args[index], visited, key=str(index))
            if isinstance(result, Failure):
                self._logger.warning(
                    "contract_argument_rejected",
                    function=function_name,
                    index=index,
                    key=result.key,
                    message=result.message,
                )
                raise ValidationError(result.message, result.key)
            checked[index] = result.value
        return tuple(checked)

    def _checked_return(self, function_name: str, value: Any) -> Any:
        result = self.return_type.validate(value)
        if isinstance(result, Failure):
            self._logger.warning(
                "contract_return_rejected",
                function=function_name,
                key=result.key,
                message=result.message,
            )
            raise ValidationError(result.message, result.key)
        return value


class Contract(_ContractBase):
    """Contract for a synchronous function.

    ``enforce`` can be applied directly or used as a decorator::

        @Contract(Number, Number, returns=Number).enforce
        def add(a, b):
            return a + b
    """

    __slots__ = ()

    def enforce(self, function: Callable[..., Any]) -> Callable[..., Any]:
        function_name = _function_name(function)

        @functools.wraps(function)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            checked = self._checked_arguments(function_name, args)
            return self._checked_return(function_name, function(*checked, **kwargs))

        return wrapper


class AsyncContract(_ContractBase):
    """Contract for a function returning an awaitable.

    The wrapper is a coroutine function: argument, shape, and return violations as well
    as exceptions raised by the wrapped function all surface when it is awaited.
    """

    __slots__ = ()

    def enforce(self, function: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        function_name = _function_name(function)

        @functools.wraps(function)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            checked = self._checked_arguments(function_name, args)
            returned = function(*checked, **kwargs)
            if not inspect.isawaitable(returned):
                self._logger.warning(
                    "contract_shape_rejected",
                    function=function_name,
                    returned=type_name(returned),
                )
                raise ValidationError(
                    "Expected function to return an awaitable, "
                    f"but instead got {type_name(returned)}"
                )
            value = await returned
            return self._checked_return(function_name, value)

        return wrapper


def _function_name(function: Callable[..., Any]) -> str:
    if not callable(function):
        raise TypeError(f"contracts can only enforce callables, got {type_name(function)}")
    return getattr(function, "__qualname__", None) or repr(function)


__all__ = ["AsyncContract", "Contract"]
