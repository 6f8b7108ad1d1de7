"""Paging parameters, paged results and select options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["PageParam", "PageResult", "Option", "OptionWithPy"]

_MAX_PAGE_SIZE = 1000


@dataclass
class PageParam:
    """Paging request: page number, page size, keyword and ordering."""

    not_page: bool = False
    page_no: int = 1
    page_size: int = 20
    keyword: str = ""
    order_by: str = ""

    def __post_init__(self) -> None:
        if self.page_no < 1:
            raise ValueError("page_no must be at least 1")
        if not 1 <= self.page_size <= _MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {_MAX_PAGE_SIZE}")

    def offset(self) -> int:
        """Number of rows to skip for this page."""
        return (self.page_no - 1) * self.page_size


@dataclass
class PageResult:
    """A page of results with its paging metadata."""

    header: Any = None
    items: Any = None
    extended_field1: Any = None
    extended_field2: Any = None
    not_page: bool = False
    total: int = 0
    page_no: int = 0
    page_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a mapping, leaving out empty optional fields."""
        out: dict[str, Any] = {}
        if self.header is not None:
            out["header"] = self.header
        out["list"] = self.items
        if self.extended_field1 is not None:
            out["extended_field1"] = self.extended_field1
        if self.extended_field2 is not None:
            out["extended_field2"] = self.extended_field2
        if self.not_page:
            out["not_page"] = self.not_page
        if self.total:
            out["total"] = self.total
        if self.page_no:
            out["page_no"] = self.page_no
        if self.page_size:
            out["page_size"] = self.page_size
        return out


@dataclass
class Option:
    """A selectable option keyed by its value."""

    value: int = 0
    key: str = ""
    label: str = ""


@dataclass
class OptionWithPy(Option):
    """An option carrying pinyin initials and full pinyin."""

    first_letter: str = ""
    pinyin_code: str = ""