import argparse
import sys
from loguru import logger
from online.core.config import get_settings
from online.core.logging import configure_logging
from online.engine.catalog import load_catalog_csv
from online.engine.orchestrator import handle_user_input
from online.engine.session import RecommendationSession
from online.interaction.formatters import format_view


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="mf-generator", description=settings.APP_NAME)
    parser.add_argument("--amount", help="Investment amount (e.g. 10000)")
    parser.add_argument("--risk", default=settings.DEFAULT_RISK_TIER, help="Risk tier: low, medium or high")
    parser.add_argument("--period", help="Investment period in years (e.g. 5)")
    parser.add_argument("--page", type=int, default=1, help="Table page to show (1-based)")
    parser.add_argument("--catalog", default=settings.CATALOG_PATH, help="Path to a fund catalog CSV")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        catalog = load_catalog_csv(args.catalog)
        session = RecommendationSession(catalog)

        response = handle_user_input(session, "submit", {
            "amount": args.amount,
            "risk_tier": args.risk,
            "period_years": args.period,
        })
        if response["type"] == "question":
            print(response["text"])
            return 1

        for _ in range(max(args.page, 1) - 1):
            handle_user_input(session, "page", {"delta": 1})
    except ValueError as e:
        logger.error(f"{e}")
        return 2

    print(format_view(session.view()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
