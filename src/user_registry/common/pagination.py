from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Generic, List, Mapping, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.exceptions import FieldViolation, ValidationError

T = TypeVar("T")

# OFFSET must fit a signed 64-bit integer in SQL backends.
MAX_OFFSET = 2**63 - 1


def _bad_param(name: str, message: str, value: Any) -> ValidationError:
    return ValidationError(f"{name} {message}", [FieldViolation(name, message, value)])


@dataclass(frozen=True)
class Sort:
    property: str = "id"
    descending: bool = False

    @classmethod
    def parse(cls, raw: str | None, allowed: Sequence[str]) -> "Sort":
        """Parse ``property[,asc|desc]``."""
        if not raw:
            return cls()

        parts = [p.strip() for p in raw.split(",")]
        prop = parts[0]
        if prop not in allowed:
            raise _bad_param("sort", f"must be one of {', '.join(allowed)}", raw)

        direction = parts[1].lower() if len(parts) > 1 and parts[1] else "asc"
        if direction not in ("asc", "desc") or len(parts) > 2:
            raise _bad_param("sort", "direction must be asc or desc", raw)
        return cls(property=prop, descending=direction == "desc")

    def __str__(self) -> str:
        return f"{self.property},{'desc' if self.descending else 'asc'}"


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index plus page size and ordering."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: Sort = field(default_factory=Sort)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_args(
        cls,
        args: Mapping[str, str],
        *,
        sortable: Sequence[str],
        default_size: int = DEFAULT_PAGE_SIZE,
        max_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        page = _parse_int(args.get("page"), "page", default=0)
        size = _parse_int(args.get("size"), "size", default=default_size)

        if page < 0:
            raise _bad_param("page", "may not be negative", page)
        if size < 1:
            raise _bad_param("size", "must be at least 1", size)

        size = min(size, max_size)
        if page * size > MAX_OFFSET:
            raise _bad_param("page", "is too large", page)

        return cls(page=page, size=size, sort=Sort.parse(args.get("sort"), sortable))

    def next(self) -> "PageRequest":
        return PageRequest(page=self.page + 1, size=self.size, sort=self.sort)

    def previous(self) -> "PageRequest":
        return PageRequest(page=max(self.page - 1, 0), size=self.size, sort=self.sort)

    def at(self, page: int) -> "PageRequest":
        return PageRequest(page=page, size=self.size, sort=self.sort)


def _parse_int(raw: str | None, name: str, *, default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise _bad_param(name, "must be an integer", raw) from None


@dataclass(frozen=True)
class Page(Generic[T]):
    content: List[T]
    request: PageRequest
    total_elements: int

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def is_empty(self) -> bool:
        return not self.content
