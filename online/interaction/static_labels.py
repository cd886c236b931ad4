from online.engine.models import RiskTier

"""
Interaction Layer - Static Labels.

Fixed text used by the presentation layer: form prompts, risk dropdown
options, table headers and empty-state messages.
"""

APP_TITLE = "Mutual Fund Generator"
TOP_PICKS_TITLE = "Top {n} Funds for You"
EMPTY_TABLE_TEXT = "No results."

# (field, header) in column order
TABLE_COLUMNS = (
    ("name", "Name"),
    ("category", "Category"),
    ("risk", "Risk"),
    ("yearly_roi", "Yearly ROI (%)"),
)

RISK_OPTIONS = tuple((tier.value, tier.label) for tier in RiskTier)


def get_prompt(field: str) -> str:
    """
    Returns the prompt shown when a required form field is missing.

    Args:
        field (str): Session field name.

    Returns:
        str: The prompt or a generic fallback.
    """
    mapping = {
        "amount": "Enter the amount you want to invest (e.g. 10000).",
        "period_years": "How long do you plan to invest for? (in years, e.g. 5)",
        "risk_tier": "What level of risk are you comfortable with? (low / medium / high)",
    }

    return mapping.get(field, "Please fill in all the fields to get recommendations.")


def get_top_picks_title(top_n: int) -> str:
    """Title of the top-picks panel for the configured number of picks."""
    return TOP_PICKS_TITLE.format(n=top_n)
