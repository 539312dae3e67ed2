"""
Tabular helpers for downloaded sales and finance reports.

Apple delivers reports as tab-separated text; these helpers load that text
into a DataFrame and compute the headline numbers an agent usually asks for.
"""

import io
from typing import Any, Dict

import pandas as pd

from .exceptions import DecodeError


def report_to_dataframe(text: str) -> pd.DataFrame:
    """
    Parse tab-separated report text.

    Args:
        text: Decompressed report text

    Returns:
        DataFrame with one row per report line (empty for blank input)
    """
    if not text or not text.strip():
        return pd.DataFrame()

    try:
        return pd.read_csv(io.StringIO(text), sep="\t", engine="python")
    except Exception as e:
        raise DecodeError(f"Failed to parse report data: {e}", stage="parse")


def summarize_report(df: pd.DataFrame) -> Dict[str, Any]:
    """
    Calculate summary metrics from a sales or finance DataFrame.

    Args:
        df: Report DataFrame

    Returns:
        Dictionary of summary metrics
    """
    if df.empty:
        return {
            "rows": 0,
            "total_units": 0,
            "total_proceeds": 0.0,
            "unique_apps": 0,
            "countries": 0,
        }

    metrics: Dict[str, Any] = {"rows": int(len(df))}

    units_column = "Units" if "Units" in df.columns else "Quantity"
    if units_column in df.columns:
        metrics["total_units"] = int(pd.to_numeric(df[units_column], errors="coerce").fillna(0).sum())

    for column in ("Developer Proceeds", "Extended Partner Share", "Proceeds"):
        if column in df.columns:
            proceeds = pd.to_numeric(df[column], errors="coerce").fillna(0)
            if units_column in df.columns and column == "Developer Proceeds":
                # Developer Proceeds is per unit in sales reports
                proceeds = proceeds * pd.to_numeric(df[units_column], errors="coerce").fillna(0)
            metrics["total_proceeds"] = round(float(proceeds.sum()), 2)
            break

    # App diversity
    for column in ("Apple Identifier", "App Apple ID"):
        if column in df.columns:
            metrics["unique_apps"] = int(df[column].nunique())
            break

    # Geographic diversity
    for column in ("Country Code", "Country Of Sale"):
        if column in df.columns:
            metrics["countries"] = int(df[column].nunique())
            break

    return metrics
