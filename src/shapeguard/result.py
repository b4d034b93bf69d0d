"""Tagged validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from shapeguard.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Success:
    """Accepted value, possibly normalized by the runtype that validated it."""

    value: Any

    @property
    def success(self) -> Literal[True]:
        return True

    def unwrap(self) -> Any:
        return self.value

    def to_dict(self) -> dict[str, object]:
        return {"success": True, "value": self.value}


@dataclass(frozen=True, slots=True)
class Failure:
    """Rejected value with the reason and the key path of the offending field."""

    message: str
    key: str | None = None

    @property
    def success(self) -> Literal[False]:
        return False

    def unwrap(self) -> Any:
        raise ValidationError(self.message, self.key)

    def nested_under(self, key: str) -> Failure:
        """Return this failure re-rooted below ``key`` (``key.nested`` or ``key``)."""

        return Failure(message=self.message, key=join_key(key, self.key))

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"success": False, "message": self.message}
        if self.key is not None:
            payload["key"] = self.key
        return payload


Result = Success | Failure


def join_key(parent: str, nested: str | None) -> str:
    if not nested:
        return parent
    return f"{parent}.{nested}"


__all__ = ["Failure", "Result", "Success", "join_key"]
