from loguru import logger
from online.engine.session import RecommendationSession
from online.interaction.static_labels import get_prompt

"""
Engine - Orchestrator.

Input boundary between the presentation layer and the session. Each user
action is dispatched to the session, after which the current view is returned
for rendering. Unknown actions and tiers are contract violations and raise
ValueError here rather than deeper in the engine.
"""

ACTIONS = ("submit", "clear", "select_risk", "set_amount", "set_period", "page")


def handle_user_input(session: RecommendationSession, action: str, payload: dict | None = None) -> dict:
    """
    Applies one user action to the session.

    Args:
        session (RecommendationSession): The active session.
        action (str): One of ACTIONS.
        payload (dict | None): Action arguments, e.g. {"amount": "9000",
            "risk_tier": "low", "period_years": "5"} for submit or {"delta": 1} for page.

    Returns:
        dict: {"type": "question", ...} when a submit is missing inputs,
            otherwise {"type": "recommendation", "data": <SessionView dict>}.
    """
    payload = payload or {}
    logger.info(f"Handling action: {action}")

    if action == "submit":
        shown = session.submit(
            payload.get("amount"),
            payload.get("risk_tier", session.risk_tier),
            payload.get("period_years"),
        )
        if not shown:
            missing = session.missing_fields()
            return {
                "type": "question",
                "missing_fields": missing,
                "text": get_prompt(missing[0]),
            }
    elif action == "clear":
        session.clear()
    elif action == "select_risk":
        session.select_risk_tier(payload.get("risk_tier"))
    elif action == "set_amount":
        session.set_amount(payload.get("amount"))
    elif action == "set_period":
        session.set_period(payload.get("period_years"))
    elif action == "page":
        session.go_to_page(payload.get("delta"))
    else:
        raise ValueError(f"Unknown action: {action!r}. Expected one of {list(ACTIONS)}")

    return {
        "type": "recommendation",
        "data": session.view().model_dump(mode="json"),
    }
