import math
from typing import Callable, Sequence
from loguru import logger
from online.engine.models import Fund, TablePage, TableRow
from online.engine.risk_classifier import tier_for_category

"""
Engine - Table View Model.

Presents the eligible funds as a paginated grid with the columns
Name, Category, Risk and Yearly ROI (%). The view does not know how the funds
were filtered; it reads them from a source callable on every access.
"""

DEFAULT_PAGE_SIZE = 10


class FundTableView:
    """
    Page-windowed view over a list of funds.

    The stored page index is clamped on every read, so a shorter source list
    can never leave the view pointing past its last page. Owners must still call
    ``reset()`` when the source changes.
    """

    def __init__(self, source: Callable[[], Sequence[Fund]], page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.source = source
        self.page_size = page_size
        self._page_index = 0

    @property
    def page_index(self) -> int:
        return min(self._page_index, self.page_count() - 1)

    def page_count(self) -> int:
        """Number of pages, never less than 1 (an empty table is page 1 of 1)."""
        return max(1, math.ceil(len(self.source()) / self.page_size))

    def can_go_previous(self) -> bool:
        return self.page_index > 0

    def can_go_next(self) -> bool:
        return self.page_index < self.page_count() - 1

    def go_to_previous(self):
        if self.can_go_previous():
            self._page_index = self.page_index - 1
            logger.debug(f"Table moved to page {self._page_index}")

    def go_to_next(self):
        if self.can_go_next():
            self._page_index = self.page_index + 1
            logger.debug(f"Table moved to page {self._page_index}")

    def reset(self):
        self._page_index = 0

    def rows_for_current_page(self) -> list[TableRow]:
        funds = self.source()
        start = self.page_index * self.page_size
        end = min(len(funds), start + self.page_size)
        return [
            TableRow(
                name=fund.name,
                category=fund.category,
                risk=tier_for_category(fund.category).label,
                yearly_roi=fund.yearly_roi,
            )
            for fund in funds[start:end]
        ]

    def page(self) -> TablePage:
        return TablePage(
            rows=self.rows_for_current_page(),
            page_index=self.page_index,
            page_count=self.page_count(),
            can_prev=self.can_go_previous(),
            can_next=self.can_go_next(),
        )
