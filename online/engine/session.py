from typing import Sequence
from loguru import logger
from online.core.config import get_settings
from online.engine.models import Fund, RiskTier, SessionView, TablePage, TopPick
from online.engine.recommender import Recommendation, RecommendationEngine
from online.engine.request_normalizer import is_present, parse_amount, parse_risk_tier
from online.engine.table_view import FundTableView

"""
Engine - Recommendation Session.

Holds the inputs of one user interaction and derives everything else from
them on demand. Nothing derived is cached: eligible funds, top picks,
allocation and the table page are recomputed on every read.

States:
    Editing (initial): inputs may change; results stay hidden until submit.
    Showing: entered by a submit with both amount and period present.
    clear() returns to Editing with every input reset to its default.
"""

class RecommendationSession:
    """
    Session-state container for the recommendation form.

    Attributes:
        amount: Raw amount as entered (str, number or None).
        risk_tier (RiskTier): Current risk selection.
        period_years: Raw horizon as entered. Required to submit, unused otherwise.
        results_visible (bool): True while in the Showing state.
        table (FundTableView): Paginated view over the eligible funds.
    """

    def __init__(self, catalog: Sequence[Fund], default_tier: RiskTier | None = None,
                 page_size: int | None = None, top_n: int | None = None):
        settings = get_settings()
        self.engine = RecommendationEngine(catalog, top_n=top_n if top_n is not None else settings.TOP_N)
        self.default_tier = default_tier or parse_risk_tier(settings.DEFAULT_RISK_TIER)

        self.amount = None
        self.risk_tier: RiskTier = self.default_tier
        self.period_years = None
        self.results_visible: bool = False

        self.table = FundTableView(
            self._eligible_source,
            page_size=page_size if page_size is not None else settings.PAGE_SIZE,
        )

    def _eligible_source(self) -> list[Fund]:
        return self.engine.eligible_funds(self.risk_tier)

    @property
    def state(self) -> str:
        return "Showing" if self.results_visible else "Editing"

    # --- Field edits ---

    def set_amount(self, amount):
        self.amount = amount
        logger.debug(f"Session amount updated to: {amount!r}")

    def set_period(self, period_years):
        self.period_years = period_years
        logger.debug(f"Session period_years updated to: {period_years!r}")

    def select_risk_tier(self, tier):
        """
        Changes the risk tier. The eligible list changes with it, so the table
        goes back to its first page.
        """
        new_tier = parse_risk_tier(tier)
        if new_tier == self.risk_tier:
            return
        self.risk_tier = new_tier
        self.table.reset()
        logger.info(f"Session risk_tier updated to: {new_tier.value} (table reset to page 1)")

    # --- Transitions ---

    def missing_fields(self) -> list[str]:
        """Names of the required inputs that are currently absent."""
        missing = []
        if not is_present(self.amount):
            missing.append("amount")
        if not is_present(self.period_years):
            missing.append("period_years")
        return missing

    def submit(self, amount, risk_tier, period_years) -> bool:
        """
        Records the form inputs and shows results if amount and period are present.

        Presence is the only gate: an amount that fails to parse still shows
        results, it just yields no top picks.

        Returns:
            bool: Whether results are visible after the call.
        """
        self.set_amount(amount)
        self.select_risk_tier(risk_tier)
        self.set_period(period_years)

        missing = self.missing_fields()
        if missing:
            logger.warning(f"Submit rejected. Missing fields: {missing}")
            return self.results_visible

        if not self.results_visible:
            logger.info("Session transition: Editing -> Showing")
        self.results_visible = True
        return True

    def clear(self):
        self.amount = None
        self.period_years = None
        self.risk_tier = self.default_tier
        self.results_visible = False
        self.table.reset()
        logger.info("Session cleared. State: Editing")

    def go_to_page(self, delta: int):
        """Moves the table one page back (-1) or forward (+1). No-op at the edges."""
        if delta == -1:
            self.table.go_to_previous()
        elif delta == 1:
            self.table.go_to_next()
        else:
            raise ValueError(f"Page delta must be -1 or +1, got {delta!r}")

    # --- Derived reads ---

    @property
    def eligible_funds(self) -> list[Fund]:
        return self._eligible_source()

    def recommendation(self) -> Recommendation:
        if not self.results_visible:
            return Recommendation(eligible=self.eligible_funds)
        return self.engine.recommend(self.risk_tier, parse_amount(self.amount))

    @property
    def top_picks(self) -> list[TopPick]:
        return self.recommendation().as_top_picks()

    @property
    def allocation_per_pick(self) -> float:
        return self.recommendation().allocation

    def table_page(self) -> TablePage:
        return self.table.page()

    def view(self) -> SessionView:
        recommendation = self.recommendation()
        return SessionView(
            amount=self.amount,
            risk_tier=self.risk_tier,
            period_years=self.period_years,
            results_visible=self.results_visible,
            top_picks=recommendation.as_top_picks(),
            allocation=recommendation.allocation,
            table_page=self.table_page(),
        )

    def __repr__(self):
        return (f"RecommendationSession(state={self.state}, amount={self.amount!r}, "
                f"risk={self.risk_tier.value}, period={self.period_years!r}, "
                f"page={self.table.page_index})")
