"""Result of a load-or-default read."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class LoadResult(Generic[T]):
    """Loaded (or default) value plus the reason the default was used, if any."""

    value: T
    diagnostic: str | None = None

    @property
    def used_default(self) -> bool:
        return self.diagnostic is not None
