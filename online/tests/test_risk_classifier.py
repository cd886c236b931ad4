"""
Tests for online/engine/risk_classifier.py.

categories_for():
  - Every tier maps to a non-empty tuple of categories.
  - Repeated calls return the same ordered result.
  - The three tiers together cover every category exactly once.

tier_for_category():
  - Is the inverse of categories_for() for every category.
"""

import pytest

from online.engine.models import Category, RiskTier
from online.engine.risk_classifier import categories_for, tier_for_category


@pytest.mark.parametrize("tier", list(RiskTier))
def test_every_tier_has_categories(tier):
    categories = categories_for(tier)
    assert categories
    assert categories == categories_for(tier)


def test_low_tier_mapping():
    assert categories_for(RiskTier.LOW) == (Category.LARGE_CAP, Category.INDEX, Category.DEBT)


def test_medium_tier_mapping():
    assert categories_for(RiskTier.MEDIUM) == (Category.MID_CAP, Category.ELSS, Category.FLEXI_CAP)


def test_high_tier_mapping():
    assert categories_for(RiskTier.HIGH) == (Category.SMALL_CAP,)


def test_tiers_partition_categories():
    seen = [c for tier in RiskTier for c in categories_for(tier)]
    assert sorted(seen) == sorted(Category)
    assert len(seen) == len(set(seen))


@pytest.mark.parametrize("category", list(Category))
def test_tier_for_category_is_inverse(category):
    assert category in categories_for(tier_for_category(category))


def test_unknown_tier_is_a_contract_violation():
    with pytest.raises(KeyError):
        categories_for("extreme")
