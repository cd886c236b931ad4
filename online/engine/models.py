from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

"""
Engine - Domain Models.

Immutable fund records that make up the static catalog, the closed
enumerations they are classified by, and the read-only projections the
presentation layer renders.
"""

class Category(str, Enum):
    LARGE_CAP = "Large Cap"
    MID_CAP = "Mid Cap"
    SMALL_CAP = "Small Cap"
    INDEX = "Index"
    DEBT = "Debt"
    ELSS = "ELSS"
    FLEXI_CAP = "Flexi Cap"


class RiskTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        """Display label shown in the risk dropdown and the table's Risk column."""
        return self.value.capitalize()


class Fund(BaseModel):
    """
    A single catalog entry.

    Attributes:
        name (str): Display identifier, assumed unique within the catalog.
        category (Category): Fund category used for risk filtering.
        yearly_roi (float): Yearly return in percent. Only ever used as a sort key.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    category: Category
    yearly_roi: float = Field(alias="yearlyROI", allow_inf_nan=False)


class TopPick(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int
    name: str
    category: Category
    yearly_roi: float
    allocation: float


class TableRow(BaseModel):
    # Field order is the column order: Name, Category, Risk, Yearly ROI (%)
    model_config = ConfigDict(frozen=True)

    name: str
    category: Category
    risk: str
    yearly_roi: float


class TablePage(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: list[TableRow]
    page_index: int
    page_count: int
    can_prev: bool
    can_next: bool


class SessionView(BaseModel):
    """Everything the presentation layer needs to draw one frame."""
    model_config = ConfigDict(frozen=True)

    amount: str | int | float | None
    risk_tier: RiskTier
    period_years: str | int | float | None
    results_visible: bool
    top_picks: list[TopPick]
    allocation: float
    table_page: TablePage
