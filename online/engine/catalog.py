from pathlib import Path
from typing import Iterable
import pandas as pd
from loguru import logger
from pydantic import ValidationError
from online.engine.models import Fund

"""
Engine - Fund Catalog.

Loads the static, ordered fund catalog the engine reads from. The catalog is
supplied once at startup, either from the bundled CSV, a user-supplied CSV, or
in-memory records, and is returned as an immutable tuple.
"""

BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "funds.csv"

REQUIRED_COLUMNS = ("name", "category", "yearly_roi")

# Accepted spellings of the ROI column after header normalization
_ROI_ALIASES = ("yearlyroi", "yearly_roi_(%)", "roi")


class CatalogError(ValueError):
    """Raised when a catalog source cannot be turned into Fund records."""


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    df.columns = (
        df.columns
        .str.strip()
        .str.lower()
        .str.replace(" ", "_")
    )
    for alias in _ROI_ALIASES:
        if alias in df.columns and "yearly_roi" not in df.columns:
            df = df.rename(columns={alias: "yearly_roi"})
    return df


def load_catalog_csv(csv_path: str | Path | None = None) -> tuple[Fund, ...]:
    """
    Reads a catalog CSV with columns name, category and yearly ROI.

    Args:
        csv_path: Path to the CSV. The bundled catalog is used when omitted.

    Returns:
        tuple[Fund, ...]: Funds in file order.

    Raises:
        CatalogError: If the file is missing, lacks a required column, has a
            blank name or category, or contains a row that is not a valid fund.
    """
    path = Path(csv_path) if csv_path else BUNDLED_CATALOG
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    # Fund names like "NA" or "None" are real names, not missing values
    df = _normalize_columns(pd.read_csv(path, dtype=str, keep_default_na=False))

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise CatalogError(f"Catalog {path.name} is missing columns: {missing}")

    df["name"] = df["name"].str.strip()
    df["category"] = df["category"].str.strip()

    blank = df[(df["name"] == "") | (df["category"] == "")]
    if not blank.empty:
        # +2: header line plus 1-based numbering
        lines = [int(idx) + 2 for idx in blank.index]
        raise CatalogError(f"Catalog {path.name} has blank name or category on lines {lines}")

    # Non-numeric ROI becomes NaN, which Fund validation rejects
    df["yearly_roi"] = pd.to_numeric(df["yearly_roi"], errors="coerce").astype(float)

    records = df[list(REQUIRED_COLUMNS)].to_dict(orient="records")
    catalog = load_catalog_records(records)
    logger.info(f"Loaded {len(catalog)} funds from {path}")
    return catalog


def load_catalog_records(records: Iterable[dict]) -> tuple[Fund, ...]:
    """
    Builds a catalog from dicts with name, category and yearlyROI/yearly_roi keys.

    Raises:
        CatalogError: On the first record that fails validation.
    """
    funds = []
    for idx, record in enumerate(records):
        try:
            funds.append(Fund.model_validate(record))
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog record #{idx}: {record} ({e.error_count()} errors)") from e

    _warn_duplicate_names(funds)
    return tuple(funds)


def _warn_duplicate_names(funds: list[Fund]):
    names = pd.Series([fund.name for fund in funds], dtype=object)
    duplicates = names[names.duplicated()].unique().tolist()
    if duplicates:
        logger.warning(f"Catalog contains duplicate fund names: {duplicates}")
