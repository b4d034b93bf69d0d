"""Validation failure raised by ``Runtype.check`` and by function contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapeguard.result import Failure


class ValidationError(ValueError):
    """Raised when a value does not conform to a runtype.

    ``key`` is the dot-delimited path of the first failing nested field, or ``None``
    when the failure is at the top level.
    """

    message: str
    key: str | None

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        rendered = f"{key}: {message}" if key else message
        super().__init__(rendered)

    @classmethod
    def from_failure(cls, failure: Failure) -> ValidationError:
        return cls(failure.message, failure.key)

    def to_failure(self) -> Failure:
        from shapeguard.result import Failure

        return Failure(message=self.message, key=self.key)


__all__ = ["ValidationError"]
