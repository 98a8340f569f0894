"""Response body encoders."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Encoder(ABC):
    """Something that can turn itself into a response body."""

    @abstractmethod
    def encode(self) -> tuple[bytes, str]:
        """Return the body bytes and their content type."""


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _dump(data: Any) -> bytes:
    return json.dumps(data, separators=(",", ":"), default=_default).encode("utf-8")


@dataclass(frozen=True)
class JSONEncoder(Encoder):
    """Encodes its data as application/json."""

    data: Any

    def encode(self) -> tuple[bytes, str]:
        return _dump(self.data), "application/json"


@dataclass(frozen=True)
class JSONProblemEncoder(Encoder):
    """Encodes its data as application/problem+json."""

    data: Any

    def encode(self) -> tuple[bytes, str]:
        return _dump(self.data), "application/problem+json"