from pathlib import Path

import pandas as pd

# ---------- CONFIG ----------
DATA_DIR = Path("data")
MONITORING_CSV = "monitoring.csv"
COMPETITION_CSV = "competition.csv"
# ----------------------------

REQUIRED_COLUMNS = ["idfisher", "length", "hour_catch"]

# Timestamp columns we know how to turn into hour_catch (first match wins)
TIMESTAMP_COLUMNS = ["date_time_catch", "datetime_catch", "catch_time", "datetime", "date_time"]

# Dtypes / schema hints
CATCH_DTYPES = {
    "idfisher": "Int64",
    "length": "float64",
    "hour_catch": "Int64",
}


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Lowercase / strip column names; spaces and dots become underscores
    (R-style 'hour.catch' -> 'hour_catch').
    """
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_").replace(".", "_") for c in df.columns]
    return df


def _raise_on_coerced(before: pd.Series, after: pd.Series, name: str, col: str) -> None:
    """
    Fail if coercion turned any non-empty cell into <NA>.
    Row numbers are 1-based data rows (header excluded).
    """
    bad = before.notna() & after.isna()
    if bad.any():
        rows = [int(i) + 1 for i in before.index[bad.to_numpy()]]
        shown = rows[:10] + (["..."] if len(rows) > 10 else [])
        samples = before[bad].astype(str).head(3).tolist()
        raise ValueError(
            f"{name}: {len(rows):,} malformed value(s) in column '{col}' at row(s) {shown}; e.g. {samples}"
        )


def derive_hour(df: pd.DataFrame, name: str = "catches") -> pd.DataFrame:
    """
    If the frame has a catch timestamp but no hour_catch, derive the hour (0-23).
    Empty timestamps give <NA>; unparseable ones raise ValueError.
    """
    if "hour_catch" in df.columns:
        return df
    for col in TIMESTAMP_COLUMNS:
        if col in df.columns:
            df = df.copy()
            dt = pd.to_datetime(df[col], errors="coerce", format="mixed")
            _raise_on_coerced(df[col], dt, name, col)
            df["hour_catch"] = dt.dt.hour.astype("Int64")
            return df
    return df


def ensure_required_columns(df: pd.DataFrame, name: str) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"{name}: missing required column(s) {missing}; found {list(df.columns)}")


def load_catches(path: Path, name: str | None = None) -> pd.DataFrame:
    """
    Read one catch CSV (one row per fish) and coerce the core columns.
    """
    path = Path(path)
    name = name or path.stem
    if not path.exists():
        raise FileNotFoundError(f"{name}: catch file not found: {path}")

    df = pd.read_csv(path, low_memory=False)
    df = normalize_columns(df)
    df = derive_hour(df, name)
    ensure_required_columns(df, name)

    for col, dt in CATCH_DTYPES.items():
        coerced = pd.to_numeric(df[col], errors="coerce")
        _raise_on_coerced(df[col], coerced, name, col)
        df[col] = coerced.astype(dt)

    print(f"  {name}: {len(df):,} rows from {path}")
    return df


def load_datasets(data_dir: Path = DATA_DIR) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Return (monitoring, competition)."""
    data_dir = Path(data_dir)
    monitoring = load_catches(data_dir / MONITORING_CSV, "monitoring")
    competition = load_catches(data_dir / COMPETITION_CSV, "competition")
    return monitoring, competition


def main():
    print("RUNNING data_extract.py")
    print("DATA_DIR:", DATA_DIR)
    monitoring, competition = load_datasets(DATA_DIR)

    print("\n--- monitoring (head) ---")
    print(monitoring.head())
    print("\n--- competition (head) ---")
    print(competition.head())


if __name__ == "__main__":
    main()
