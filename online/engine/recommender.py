from dataclasses import dataclass, field
from typing import Sequence
from loguru import logger
from online.engine.models import Fund, RiskTier, TopPick
from online.engine.request_normalizer import AmountResult, ValidAmount
from online.engine.risk_classifier import categories_for

"""
Engine - Recommendation Engine.

Deterministic core of the recommendation flow. It filters the static catalog
down to the funds eligible for a risk tier, ranks them by yearly ROI, and
splits the investment amount equally across the top picks.

Filtering, ranking and allocation are separate pure functions so each can be
tested alone. The engine runs one filter pass per request and feeds both the
top picks and the full table from it, so the two views always agree.
"""

DEFAULT_TOP_N = 3


def filter_by_risk(catalog: Sequence[Fund], tier: RiskTier) -> list[Fund]:
    """
    Keeps the catalog entries whose category is eligible for ``tier``.

    Args:
        catalog (Sequence[Fund]): The static fund catalog. Not mutated.
        tier (RiskTier): The user's risk tier.

    Returns:
        list[Fund]: Eligible funds in catalog order.
    """
    allowed = set(categories_for(tier))
    eligible = [fund for fund in catalog if fund.category in allowed]
    logger.debug(f"{len(eligible)} of {len(catalog)} funds eligible for risk tier '{tier.value}'")
    return eligible


def rank_top(eligible: Sequence[Fund], n: int = DEFAULT_TOP_N) -> list[Fund]:
    """
    Returns the ``n`` highest-ROI funds, best first.

    The sort is stable, so funds with equal ROI keep their catalog order.
    Fewer than ``n`` funds come back when fewer are eligible.
    """
    ranked = sorted(eligible, key=lambda fund: fund.yearly_roi, reverse=True)
    return ranked[:max(n, 0)]


def allocate(amount: AmountResult, top_picks: Sequence[Fund]) -> float:
    """
    Equal-split allocation per pick.

    Args:
        amount (AmountResult): Parsed investment amount.
        top_picks (Sequence[Fund]): The ranked picks the amount is spread over.

    Returns:
        float: ``amount / len(top_picks)``, or 0.0 when the amount is invalid
            or there are no picks.
    """
    if not isinstance(amount, ValidAmount) or not top_picks:
        return 0.0
    return amount.value / len(top_picks)


@dataclass(frozen=True)
class Recommendation:
    eligible: list[Fund] = field(default_factory=list)
    top_picks: list[Fund] = field(default_factory=list)
    allocation: float = 0.0

    def as_top_picks(self) -> list[TopPick]:
        """Projects the ranked funds into rank-numbered summary cards."""
        return [
            TopPick(
                rank=idx + 1,
                name=fund.name,
                category=fund.category,
                yearly_roi=fund.yearly_roi,
                allocation=self.allocation,
            )
            for idx, fund in enumerate(self.top_picks)
        ]


class RecommendationEngine:
    """
    Binds the pure recommendation steps to a catalog.

    Attributes:
        catalog (tuple[Fund, ...]): Immutable copy of the fund catalog.
        top_n (int): Number of funds in the top-picks summary.
    """

    def __init__(self, catalog: Sequence[Fund], top_n: int = DEFAULT_TOP_N):
        self.catalog = tuple(catalog)
        self.top_n = top_n
        logger.info(f"RecommendationEngine initialized with {len(self.catalog)} funds (top_n={top_n})")

    def eligible_funds(self, tier: RiskTier) -> list[Fund]:
        return filter_by_risk(self.catalog, tier)

    def recommend(self, tier: RiskTier, amount: AmountResult) -> Recommendation:
        """
        Produces eligible funds, top picks and allocation from a single filter pass.

        Without a valid amount there is no recommendation: top picks are empty
        and allocation is 0, while the eligible list is still returned for the table.
        """
        eligible = self.eligible_funds(tier)

        if not isinstance(amount, ValidAmount):
            logger.debug(f"No recommendation: amount invalid ({amount.reason})")
            return Recommendation(eligible=eligible)

        top_picks = rank_top(eligible, self.top_n)
        allocation = allocate(amount, top_picks)
        logger.debug(
            f"Ranked top {len(top_picks)} for '{tier.value}': "
            f"{[f.name for f in top_picks]} | allocation={allocation}"
        )
        return Recommendation(eligible=eligible, top_picks=top_picks, allocation=allocation)
