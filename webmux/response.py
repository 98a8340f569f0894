"""Turning handler results into HTTP replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Optional

from .encoders import Encoder


@dataclass(frozen=True)
class NoResponse(Encoder):
    """A result telling the framework that nothing should be sent."""

    def encode(self) -> tuple[bytes, str]:
        return b"", ""


@dataclass
class Reply:
    """A status, headers and body ready to be written."""

    status: int
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""


class RespondError(Exception):
    """Raised when a reply cannot be produced; may carry a fallback reply."""

    def __init__(self, message: str, reply: Optional[Reply] = None):
        super().__init__(message)
        self.reply = reply


def respond(resp: Optional[Encoder], disconnected: bool = False) -> Optional[Reply]:
    """Build the reply for a handler result, or None when nothing is sent."""
    if isinstance(resp, NoResponse):
        return None
    if disconnected:
        raise RespondError("client disconnected, do not send response")
    if callable(getattr(resp, "http_status", None)):
        status = int(resp.http_status())
    elif isinstance(resp, BaseException):
        status = HTTPStatus.INTERNAL_SERVER_ERROR
    else:
        status = HTTPStatus.NO_CONTENT if resp is None else HTTPStatus.OK
    if status == HTTPStatus.NO_CONTENT:
        return Reply(int(status))
    try:
        data, content_type = resp.encode()
    except Exception as exc:
        raise RespondError(f"respond: encode: {exc}", Reply(500)) from exc
    return Reply(int(status), [("Content-Type", content_type)], bytes(data))