import pandas as pd
from online.core.config import get_settings
from online.engine.models import SessionView, TablePage, TopPick
from online.interaction.static_labels import (
    APP_TITLE,
    EMPTY_TABLE_TEXT,
    TABLE_COLUMNS,
    get_top_picks_title,
)

"""
Interaction Layer - Text Formatters.

Render the session view as plain multi-line strings for the terminal.
All formatters are pure: they take view models and return text.
"""

def format_amount(value: float) -> str:
    """
    Groups thousands and keeps at most 2 fraction digits.

    4500.0 -> "4,500", 3333.3333 -> "3,333.33"
    """
    text = f"{round(value, 2):,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_roi(value: float) -> str:
    return f"{value:g}"


def format_page_label(page: TablePage) -> str:
    return f"Page {page.page_index + 1} of {page.page_count}"


def format_top_pick(pick: TopPick, currency: str) -> str:
    lines = [
        f"{pick.rank}. {pick.name}",
        f"   Category: {pick.category.value}",
        f"   Yearly ROI: {format_roi(pick.yearly_roi)}%",
        f"   Your Allocation: {currency}{format_amount(pick.allocation)}",
    ]
    return "\n".join(lines)


def format_top_picks(picks: list[TopPick], currency: str | None = None, top_n: int | None = None) -> str:
    """Renders the top-picks panel. Returns an empty string when there are no picks."""
    if not picks:
        return ""
    settings = get_settings()
    currency = currency if currency is not None else settings.CURRENCY_SYMBOL
    title = get_top_picks_title(top_n if top_n is not None else settings.TOP_N)
    parts = [title, "-" * len(title)]
    parts.extend(format_top_pick(pick, currency) for pick in picks)
    return "\n".join(parts)


def format_table_page(page: TablePage) -> str:
    """Renders the current table page followed by the pager line."""
    headers = [header for _, header in TABLE_COLUMNS]

    if page.rows:
        df = pd.DataFrame([row.model_dump() for row in page.rows])
        df["category"] = df["category"].map(lambda c: c.value)
        df["yearly_roi"] = df["yearly_roi"].map(format_roi)
        df = df[[field for field, _ in TABLE_COLUMNS]]
        df.columns = headers
        body = df.to_string(index=False)
    else:
        body = " | ".join(headers) + "\n" + EMPTY_TABLE_TEXT

    prev_marker = "< Previous" if page.can_prev else "  (first) "
    next_marker = "Next >" if page.can_next else "(last)"
    pager = f"{prev_marker}   {format_page_label(page)}   {next_marker}"
    return f"{body}\n\n{pager}"


def format_view(view: SessionView, currency: str | None = None) -> str:
    """
    Renders a whole frame: title, top picks (only when results are visible)
    and the table page.
    """
    parts = [APP_TITLE, "=" * len(APP_TITLE)]
    if not view.results_visible:
        parts.append("Fill in amount, risk and period, then submit to see recommendations.")
        return "\n".join(parts)

    picks = format_top_picks(view.top_picks, currency)
    if picks:
        parts.extend([picks, ""])
    parts.append(format_table_page(view.table_page))
    return "\n".join(parts)
