"""
Shared pytest fixtures: small synthetic monitoring / competition catch tables.

Usage:
    pytest tests/
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

# Add project root to path so tests can import the top-level modules
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def monitoring():
    """Fisher 1400: 4 fish, 1180: 3, 7: 2, 9: 1."""
    return pd.DataFrame(
        {
            "idfisher": pd.array([1400, 1180, 1400, 7, 1180, 1400, 9, 7, 1180, 1400], dtype="Int64"),
            "length": [620.0, 540.0, 700.0, 455.0, 610.0, 580.0, 330.0, 725.0, 690.0, 505.0],
            "hour_catch": pd.array([6, 7, 18, 6, 19, 5, 21, 17, 7, 6], dtype="Int64"),
        }
    )


@pytest.fixture
def competition():
    return pd.DataFrame(
        {
            "idfisher": pd.array([21, 22, 21, 23, 22], dtype="Int64"),
            "length": [650.0, 700.0, 760.0, 610.0, 805.0],
            "hour_catch": pd.array([22, 23, 2, 20, 3], dtype="Int64"),
        }
    )


@pytest.fixture
def data_dir(tmp_path):
    """A data/ folder with both CSVs in the raw (R-style) column layout."""
    d = tmp_path / "data"
    d.mkdir()
    (d / "monitoring.csv").write_text(
        "idfisher,length,hour.catch,tide\n"
        "1400,620,6,high\n"
        "1180,540,7,low\n"
        "1400,700,18,high\n"
        "7,455,6,low\n"
        "1180,610,19,high\n"
        "9,330,21,low\n"
    )
    (d / "competition.csv").write_text(
        "idfisher,length,hour.catch,tide\n"
        "21,650,22,high\n"
        "22,700,23,low\n"
        "21,760,2,high\n"
    )
    return d
