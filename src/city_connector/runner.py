"""Convenience helpers for running the City Connector end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import ConnectionPlanner, PlannerConfig, PlannerResult


def plan_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[PlannerConfig] = None,
) -> PlannerResult | None:
    """Solve every network listed in `input_path` and write the cost table."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or PlannerConfig()
    planner = ConnectionPlanner(config)
    try:
        return planner.plan(dataframe, output_path)
    except KeyError as exc:
        print(f"ERROR: {exc.args[0]} in '{input_path}'. Please check the column options.")
        return None
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str)
    raise ValueError("unsupported format")
