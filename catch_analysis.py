# catch_analysis.py
# Per-fisher catch concentration (Pareto tables) and cohort comparison for the
# barramundi monitoring + competition datasets.
# - Pareto: tally fish per fisher, sort descending, running total and % of total.
# - Cohorts: the two dominant monitoring fishers vs. everyone else vs. competition.

from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd
from scipy.stats import skew

# =================== CONFIG ======================
# The two fishers that dominate the monitoring data
HPF_FISHERS = (1400, 1180)

# Cohort labels, in reporting order
COHORTS = ("hpfmonitoring", "generalmonitoring", "competition")
COHORT_COL = "dataset"

# Histogram breaks: length 300..1000 by 25, hour 1..23 by 1
# (hour 0 is left out; midnight entries are manual with unreliable times)
LENGTH_BINS = np.arange(300, 1001, 25)
HOUR_BINS = np.arange(1, 24, 1)

PARQUET_ENGINE = "pyarrow"
# =================================================

PARETO_COLUMNS = ["idfisher", "no_fish_caught", "cumtotal", "cumperc", "rownum"]


# ------------------- PARETO ----------------------
def _empty_pareto() -> pd.DataFrame:
    return pd.DataFrame({
        "idfisher": pd.Series(dtype="string"),
        "no_fish_caught": pd.Series(dtype="int64"),
        "cumtotal": pd.Series(dtype="int64"),
        "cumperc": pd.Series(dtype="float64"),
        "rownum": pd.Series(dtype="int64"),
    })


def fisher_pareto(df: pd.DataFrame, id_col="idfisher") -> pd.DataFrame:
    """
    Tally fish per fisher, most productive first, with the running total and
    running % of all fish in `df`.

    Fishers are labelled 'F<id>'; a missing id is its own group ('FNA').
    Equal tallies keep the order in which the fisher first appears in `df`.
    """
    total = len(df)
    if total == 0:
        return _empty_pareto()

    ids = df[id_col].astype("Int64")
    labels = ("F" + ids.astype("string")).fillna("FNA").rename("idfisher")
    counts = (
        labels.groupby(labels, sort=False).size()
              .sort_values(ascending=False, kind="stable")
    )

    out = counts.rename("no_fish_caught").rename_axis("idfisher").reset_index()
    out["idfisher"] = out["idfisher"].astype("string")
    out["no_fish_caught"] = out["no_fish_caught"].astype("int64")
    out["cumtotal"] = out["no_fish_caught"].cumsum()
    out["cumperc"] = out["cumtotal"] / total * 100
    out["rownum"] = np.arange(1, len(out) + 1, dtype="int64")
    return out[PARETO_COLUMNS]


# ------------------- COHORTS ---------------------
def split_monitoring(monitoring: pd.DataFrame, hpf_ids: Iterable = HPF_FISHERS,
                     id_col="idfisher") -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split monitoring rows into (high-productivity fishers, everyone else).
    Rows with a missing fisher id land in the general partition.
    """
    mask = monitoring[id_col].isin(list(hpf_ids)).fillna(False).astype(bool)
    return monitoring[mask].copy(), monitoring[~mask].copy()


def tag_cohort(df: pd.DataFrame, label: str) -> pd.DataFrame:
    if COHORT_COL in df.columns:
        raise ValueError(f"frame already has a '{COHORT_COL}' column")
    return df.assign(**{COHORT_COL: label})


def combine_cohorts(hpf: pd.DataFrame, general: pd.DataFrame, competition: pd.DataFrame) -> pd.DataFrame:
    """
    Tag the three frames with their cohort label and stack them
    (hpf, general, competition order). Columns must match by name.
    """
    frames = [hpf, general, competition]
    cols = set(hpf.columns)
    for label, f in zip(COHORTS, frames):
        if set(f.columns) != cols:
            diff = sorted(set(f.columns) ^ cols)
            raise ValueError(f"{label}: columns do not match the other cohorts (differ on {diff})")

    tagged = [tag_cohort(f, label) for label, f in zip(COHORTS, frames)]
    combined = pd.concat(tagged, ignore_index=True)
    return combined[list(hpf.columns) + [COHORT_COL]]


def build_combined(monitoring: pd.DataFrame, competition: pd.DataFrame,
                   hpf_ids: Iterable = HPF_FISHERS) -> pd.DataFrame:
    hpf, general = split_monitoring(monitoring, hpf_ids)
    if hpf.empty:
        print(f"⚠️  No monitoring rows for fishers {list(hpf_ids)}; hpfmonitoring cohort is empty.")
    return combine_cohorts(hpf, general, competition)


# ---------------- DESCRIPTIVES -------------------
def cohort_mean_length(combined: pd.DataFrame, value_col="length") -> pd.Series:
    """Mean length per cohort; an empty cohort reports NaN."""
    means = combined.groupby(COHORT_COL)[value_col].mean()
    return means.reindex(list(COHORTS)).astype("float64").rename(f"mean_{value_col}")


def dataset_summary(df: pd.DataFrame) -> pd.DataFrame:
    return df.describe(include="all")


def _describe_values(s: pd.Series) -> dict:
    s = pd.to_numeric(s, errors="coerce").dropna().astype("float64")
    if s.empty:
        return {"count": 0}
    q1, q3 = s.quantile([0.25, 0.75])
    return {
        "count": int(len(s)),
        "mean": s.mean(),
        "std": s.std(ddof=1),
        "min": s.min(),
        "25%": q1,
        "median": s.median(),
        "75%": q3,
        "max": s.max(),
        "skewness": float(skew(s)) if len(s) > 2 else np.nan,
    }


def cohort_length_summary(combined: pd.DataFrame, value_col="length") -> pd.DataFrame:
    """Sample descriptive statistics of `value_col`, one row per cohort."""
    rows = {
        label: _describe_values(combined.loc[combined[COHORT_COL] == label, value_col])
        for label in COHORTS
    }
    out = pd.DataFrame.from_dict(rows, orient="index")
    out.index.name = COHORT_COL
    out["count"] = out["count"].astype("int64")
    return out


def cohort_distribution(combined: pd.DataFrame, column: str, bins) -> pd.DataFrame:
    """
    Histogram of `column` per cohort over fixed `bins`.
    Values outside [bins[0], bins[-1]] are dropped; density integrates to 1
    per cohort (NaN for a cohort with no in-range values).
    """
    bins = np.asarray(bins, dtype="float64")
    widths = np.diff(bins)
    blocks = []
    for label in COHORTS:
        vals = pd.to_numeric(combined.loc[combined[COHORT_COL] == label, column], errors="coerce")
        vals = vals.dropna().to_numpy(dtype="float64")
        counts, _ = np.histogram(vals, bins=bins)
        n = counts.sum()
        density = counts / (n * widths) if n > 0 else np.full(len(counts), np.nan)
        blocks.append(pd.DataFrame({
            COHORT_COL: label,
            "bin_left": bins[:-1],
            "bin_right": bins[1:],
            "count": counts.astype("int64"),
            "density": density,
        }))
    return pd.concat(blocks, ignore_index=True)


# ----------------- PERSIST -----------------------
def save_combined(combined: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        combined.to_parquet(path, index=False, engine=PARQUET_ENGINE)
    except Exception as e:
        print(f"    ❌ Parquet write failed for {path.name}: {e}")
        print("    👉 Try: python3 -m pip install pyarrow")
        raise
    return path


def load_combined(path: Path) -> pd.DataFrame:
    return pd.read_parquet(path, engine=PARQUET_ENGINE)
