"""
Exception hierarchy for formmixins.

Every error carries a machine-readable `code` string so callers can branch
on it without parsing English messages.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class FormMixinsError(Exception):
    """Base class for all formmixins errors."""
    code: str = "FORM_MIXINS_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ConstructionError(FormMixinsError):
    """Raised while building a registry; the registry is unusable."""
    code = "CONSTRUCTION_ERROR"


class PartialNotFoundError(ConstructionError):
    code = "PARTIAL_NOT_FOUND"

    def __init__(self, partial: str, path: Path | str):
        super().__init__(
            message=f"Partial '{partial}' could not be read from {path}.",
            details={"partial": partial, "path": str(path)},
        )


class RecursionLimitError(FormMixinsError):
    code = "RECURSION_LIMIT"

    def __init__(self, limit: int, child: str | None = None):
        super().__init__(
            message=f"Child template nesting exceeded {limit} levels"
                    + (f" while rendering '{child}'." if child else "."),
            details={"limit": limit, "child": child},
        )
