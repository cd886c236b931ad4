import math
from dataclasses import dataclass
from loguru import logger
from online.engine.models import RiskTier

"""
Engine - Request Normalizer.

Turns raw user input (form text or numbers) into validated values.
Amounts come back as a tagged result so the engine's guard can branch on
type instead of checking for NaN wherever an amount is used.
"""

@dataclass(frozen=True)
class ValidAmount:
    value: float


@dataclass(frozen=True)
class InvalidAmount:
    raw: object
    reason: str


AmountResult = ValidAmount | InvalidAmount


def is_present(raw) -> bool:
    """
    Presence test for required form fields.

    None and blank strings are absent. Any other value, including 0, is present.
    """
    if raw is None:
        return False
    if isinstance(raw, str):
        return bool(raw.strip())
    return True


def _parse_number(raw) -> float | None:
    """Parses an int, float or numeric string. Returns None on failure."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        # float() accepts "1_000"; form input does not
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def parse_amount(raw) -> AmountResult:
    """
    Validates an investment amount.

    Args:
        raw: The value entered by the user (str, int, float or None).

    Returns:
        AmountResult: ValidAmount with the parsed value, or InvalidAmount
            carrying the raw input and a short reason.
    """
    if not is_present(raw):
        return InvalidAmount(raw=raw, reason="missing")

    value = _parse_number(raw)
    if value is None:
        logger.debug(f"Amount '{raw}' is not a number")
        return InvalidAmount(raw=raw, reason="not a number")

    return ValidAmount(value=value)


def parse_period(raw) -> float | None:
    """Parses the investment horizon in years. Informational only."""
    return _parse_number(raw)


def parse_risk_tier(raw) -> RiskTier:
    """
    Resolves a risk tier from a RiskTier, its value ("low") or its label ("Low").

    Raises:
        ValueError: If the input does not name a known tier.
    """
    if isinstance(raw, RiskTier):
        return raw
    if isinstance(raw, str):
        try:
            return RiskTier(raw.strip().lower())
        except ValueError:
            pass
    raise ValueError(f"Unknown risk tier: {raw!r}. Expected one of {[t.value for t in RiskTier]}")
