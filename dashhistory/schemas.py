"""Data contracts (DTO) for the dashboard history API. No business logic here."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from .errors import ValidationError

# Вид диффа, который отдаёт сервер: размеченный html, сырой json или упрощённый
DiffView = Literal["html", "json", "basic"]
DEFAULT_DIFF_VIEW: DiffView = "html"

DEFAULT_HISTORY_LIMIT: int = 10


@dataclass(slots=True)
class Dashboard:
    """
    The versioned resource.

    Note: 'id' is None (or 0) until the dashboard is saved for the first time.
    """

    id: int | str | None = None
    title: str = ""


@dataclass(slots=True)
class HistoryListOptions:
    """Paging/filtering for the revision list, forwarded as query parameters."""

    limit: int | None = DEFAULT_HISTORY_LIMIT
    start: int | None = None  # offset into the list, newest first
    org_id: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValidationError("limit must be >= 0")
        if self.start is not None and self.start < 0:
            raise ValidationError("start must be >= 0")

    def as_params(self) -> dict[str, Any]:
        params = {"limit": self.limit, "start": self.start, "orgId": self.org_id}
        return {k: v for k, v in params.items() if v is not None}


@dataclass(slots=True, frozen=True)
class CompareSelector:
    """Pair of revisions to diff; the URL is built as '{original}...{new}'."""

    original: int
    new: int

    def __post_init__(self) -> None:
        for name in ("original", "new"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValidationError(f"{name} must be a positive revision number, got {value!r}")
