"""Pagination envelope schemas: {data: [...], pagination: {...}}."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.application.dtos.pagination import PageResult

ItemT = TypeVar("ItemT")


class PageInfo(BaseModel):
    """Navigation metadata for one window."""

    has_next: bool = Field(..., description="More records after this window")
    has_previous: bool = Field(..., description="More records before this window")
    start_cursor: str | None = Field(default=None, description="Cursor of the first item")
    end_cursor: str | None = Field(default=None, description="Cursor of the last item")
    total_count: int = Field(..., description="Records matching the filter (all windows)")
    cursor_rejected: bool = Field(
        default=False,
        description="True when a supplied after/before cursor was ignored as invalid",
    )


class Page(BaseModel, Generic[ItemT]):
    """One page of items plus navigation metadata."""

    data: list[ItemT]
    pagination: PageInfo

    @classmethod
    def from_result(cls, result: PageResult, items: list[ItemT]) -> "Page[ItemT]":
        """Build from an application PageResult; items are already converted."""
        return cls(
            data=items,
            pagination=PageInfo(
                has_next=result.has_next,
                has_previous=result.has_previous,
                start_cursor=result.start_cursor,
                end_cursor=result.end_cursor,
                total_count=result.total_count,
                cursor_rejected=result.cursor_rejected,
            ),
        )
