"""
Shared pytest fixtures for the recommendation engine tests.

Provides:
  - ``sample_catalog``: the three-fund catalog used by the end-to-end scenarios.
  - ``make_funds``: factory for N funds of one category with distinct ROIs.
  - ``session``: a RecommendationSession over ``sample_catalog``.
"""

import pytest

from online.core.config import get_settings
from online.engine.models import Category, Fund
from online.engine.session import RecommendationSession


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep env/.env overrides from leaking into tests."""
    for var in ("PAGE_SIZE", "TOP_N", "DEFAULT_RISK_TIER", "CATALOG_PATH", "CURRENCY_SYMBOL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_catalog() -> tuple[Fund, ...]:
    return (
        Fund(name="A", category=Category.LARGE_CAP, yearly_roi=8),
        Fund(name="B", category=Category.SMALL_CAP, yearly_roi=15),
        Fund(name="C", category=Category.INDEX, yearly_roi=6),
    )


@pytest.fixture
def make_funds():
    def _make(n: int, category: Category = Category.SMALL_CAP, prefix: str = "Fund") -> list[Fund]:
        return [
            Fund(name=f"{prefix} {i:02d}", category=category, yearly_roi=float(i))
            for i in range(n)
        ]
    return _make


@pytest.fixture
def session(sample_catalog) -> RecommendationSession:
    return RecommendationSession(sample_catalog)
