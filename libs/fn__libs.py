from __future__ import annotations

import calendar
import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Tuple

import numpy as np
import pandas as pd
import requests


DATASET_URL = (
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/global-temperature.json"
)

FRAME_COLUMNS = ["year", "month", "month_name", "variance", "temperature", "date"]


class DataLoadError(Exception):
    """The dataset could not be fetched, decoded or converted to records."""


@dataclass(frozen=True)
class MonthlyRecord:
    year: int
    month: int
    variance: float

    @property
    def date(self) -> datetime:
        return datetime(self.year, self.month, 1)

    def temperature(self, base_temperature: float) -> float:
        return base_temperature + self.variance


@dataclass(frozen=True)
class Dataset:
    base_temperature: float
    records: Tuple[MonthlyRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


# -----------------------------
# Loading
# -----------------------------
def f101__fetch_dataset(url: str = DATASET_URL, *, timeout: float = 60) -> Dataset:
    """
    Download the monthly variance JSON and convert it to a Dataset.

    Any network, HTTP or decoding failure is raised as DataLoadError.
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        payload = r.json()
    except requests.RequestException as exc:
        raise DataLoadError(f"Could not download dataset from {url}: {exc}") from exc
    except ValueError as exc:
        raise DataLoadError(f"Dataset at {url} is not valid JSON: {exc}") from exc
    return f102__parse_dataset(payload)


def f102__parse_dataset(payload: Dict[str, Any]) -> Dataset:
    """
    Build a Dataset from {baseTemperature, monthlyVariance: [{year, month, variance}]}.
    """
    try:
        base = float(payload["baseTemperature"])
        records = tuple(
            MonthlyRecord(year=int(row["year"]), month=int(row["month"]), variance=float(row["variance"]))
            for row in payload["monthlyVariance"]
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DataLoadError(f"Unexpected dataset shape: {exc!r}") from exc

    bad = [r for r in records if not 1 <= r.month <= 12]
    if bad:
        raise DataLoadError(f"Month out of range for year {bad[0].year}: {bad[0].month}")
    return Dataset(base_temperature=base, records=records)


def f103__load_dataset_file(path: Path) -> Dataset:
    """Read a local JSON snapshot saved by the download script."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DataLoadError(f"Could not read {path}: {exc}") from exc
    except ValueError as exc:
        raise DataLoadError(f"{path} is not valid JSON: {exc}") from exc
    return f102__parse_dataset(payload)


# -----------------------------
# Tables
# -----------------------------
def f104__dataset_to_frame(dataset: Dataset) -> pd.DataFrame:
    if dataset.is_empty:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    df = pd.DataFrame(
        [(r.year, r.month, r.variance) for r in dataset.records],
        columns=["year", "month", "variance"],
    )
    df["month_name"] = df["month"].apply(lambda m: calendar.month_name[int(m)])
    df["temperature"] = dataset.base_temperature + df["variance"]
    df["date"] = pd.to_datetime(df[["year", "month"]].assign(day=1))
    return df[FRAME_COLUMNS]


def f105__annual_summary(dataset: Dataset) -> pd.DataFrame:
    """
    Per-year means of variance and absolute temperature.

    Returns a DataFrame with columns: year, variance, temperature, months
    """
    df = f104__dataset_to_frame(dataset)
    if df.empty:
        return pd.DataFrame(columns=["year", "variance", "temperature", "months"])

    annual = (
        df.groupby("year", as_index=False)
        .agg(variance=("variance", "mean"), temperature=("temperature", "mean"), months=("month", "size"))
        .sort_values("year")
        .reset_index(drop=True)
    )
    annual["variance"] = annual["variance"].round(3)
    annual["temperature"] = annual["temperature"].round(3)
    return annual


def f106__dataset_summary(dataset: Dataset) -> dict:
    if dataset.is_empty:
        return {
            "records": 0,
            "first_year": None,
            "last_year": None,
            "base_temperature": dataset.base_temperature,
            "min_variance": None,
            "max_variance": None,
        }

    years = np.array([r.year for r in dataset.records])
    variances = np.array([r.variance for r in dataset.records])
    return {
        "records": len(dataset),
        "first_year": int(years.min()),
        "last_year": int(years.max()),
        "base_temperature": dataset.base_temperature,
        "min_variance": float(variances.min()),
        "max_variance": float(variances.max()),
    }
