"""Tests for online/engine/orchestrator.py."""

import pytest

from online.engine.orchestrator import handle_user_input


def test_submit_returns_recommendation(session):
    response = handle_user_input(session, "submit", {"amount": "9000", "risk_tier": "low", "period_years": "5"})

    assert response["type"] == "recommendation"
    data = response["data"]
    assert data["results_visible"] is True
    assert data["risk_tier"] == "low"
    assert [p["name"] for p in data["top_picks"]] == ["A", "C"]
    assert data["table_page"]["rows"][0] == {
        "name": "A",
        "category": "Large Cap",
        "risk": "Low",
        "yearly_roi": 8.0,
    }


def test_submit_missing_period_asks_question(session):
    response = handle_user_input(session, "submit", {"amount": "9000", "risk_tier": "low"})

    assert response["type"] == "question"
    assert response["missing_fields"] == ["period_years"]
    assert "years" in response["text"]


def test_submit_defaults_to_current_tier(session):
    handle_user_input(session, "select_risk", {"risk_tier": "high"})
    response = handle_user_input(session, "submit", {"amount": "100", "period_years": "1"})
    assert [p["name"] for p in response["data"]["top_picks"]] == ["B"]


def test_field_actions(session):
    handle_user_input(session, "set_amount", {"amount": "500"})
    response = handle_user_input(session, "set_period", {"period_years": "2"})

    assert response["data"]["amount"] == "500"
    assert response["data"]["period_years"] == "2"
    assert response["data"]["results_visible"] is False


def test_page_and_clear(session):
    handle_user_input(session, "submit", {"amount": "9000", "risk_tier": "low", "period_years": "5"})
    response = handle_user_input(session, "page", {"delta": 1})
    assert response["data"]["table_page"]["page_index"] == 0

    response = handle_user_input(session, "clear")
    assert response["data"]["results_visible"] is False
    assert response["data"]["risk_tier"] == "medium"
    assert response["data"]["top_picks"] == []


def test_unknown_action_raises(session):
    with pytest.raises(ValueError, match="Unknown action"):
        handle_user_input(session, "refresh")


def test_unknown_tier_raises(session):
    with pytest.raises(ValueError, match="Unknown risk tier"):
        handle_user_input(session, "select_risk", {"risk_tier": "reckless"})
