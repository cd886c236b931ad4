from loguru import logger
from online.engine.models import Category, RiskTier

"""
Engine - Risk Classifier.

Maps a risk tier to the fund categories a user in that tier may be offered.
The mapping is total over RiskTier and returns categories in a fixed order.
"""

RISK_CATEGORY_MAP: dict[RiskTier, tuple[Category, ...]] = {
    RiskTier.LOW: (Category.LARGE_CAP, Category.INDEX, Category.DEBT),
    RiskTier.MEDIUM: (Category.MID_CAP, Category.ELSS, Category.FLEXI_CAP),
    RiskTier.HIGH: (Category.SMALL_CAP,),
}


def categories_for(tier: RiskTier) -> tuple[Category, ...]:
    """
    Returns the eligible categories for a risk tier.

    Args:
        tier (RiskTier): A validated risk tier.

    Returns:
        tuple[Category, ...]: Non-empty, deterministically ordered categories.

    Raises:
        KeyError: If ``tier`` is not a RiskTier member. Tiers are validated at
            the input boundary, so this only fires on a programming error.
    """
    categories = RISK_CATEGORY_MAP[tier]
    logger.debug(f"Categories for risk tier '{tier.value}': {[c.value for c in categories]}")
    return categories


def tier_for_category(category: Category) -> RiskTier:
    """Reverse lookup used to label the Risk column of the fund table."""
    for tier, categories in RISK_CATEGORY_MAP.items():
        if category in categories:
            return tier
    raise KeyError(f"Category '{category}' is not mapped to any risk tier")
