"""Root of the hermes-trace error hierarchy.

Errors serialise to flat dicts so they can be handed straight to a
structlog call or a transport as event fields.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Base class for every error raised by hermes-trace.

    ``code`` is a stable slug for programmatic handling, ``detail`` holds
    JSON-friendly context, and ``cause`` (when given) is also chained as
    ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            fields["cause"] = repr(self.cause)
        return fields

    def __str__(self) -> str:
        # single line, so it stays one record in line-oriented sinks
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
