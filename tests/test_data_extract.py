"""Tests for catch CSV loading."""

import pandas as pd
import pytest

from data_extract import derive_hour, load_catches, load_datasets, normalize_columns


class TestNormalizeColumns:
    def test_r_style_names(self):
        df = pd.DataFrame(columns=[" IdFisher", "hour.catch", "Water Temp"])
        assert list(normalize_columns(df).columns) == ["idfisher", "hour_catch", "water_temp"]


class TestDeriveHour:
    def test_from_timestamp(self):
        df = pd.DataFrame({"date_time_catch": ["2018-03-01 05:40:00", "2018-03-01 23:05:00", None]})
        out = derive_hour(df)
        assert out["hour_catch"].tolist()[:2] == [5, 23]
        assert pd.isna(out["hour_catch"].iloc[2])

    def test_unparseable_timestamp_raises(self):
        df = pd.DataFrame({"date_time_catch": ["2018-03-01 05:40:00", "garbage"]})
        with pytest.raises(ValueError, match=r"competition: .*'date_time_catch' at row\(s\) \[2\]"):
            derive_hour(df, "competition")

    def test_existing_hour_untouched(self):
        df = pd.DataFrame({"hour_catch": [4], "date_time_catch": ["2018-03-01 05:40:00"]})
        assert derive_hour(df)["hour_catch"].tolist() == [4]


class TestLoadCatches:
    def test_load_valid_csv(self, data_dir):
        df = load_catches(data_dir / "monitoring.csv", "monitoring")
        assert len(df) == 6
        assert {"idfisher", "length", "hour_catch", "tide"} <= set(df.columns)
        assert str(df["idfisher"].dtype) == "Int64"
        assert df["length"].dtype == "float64"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            load_catches(tmp_path / "nope.csv")

    def test_missing_required_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("idfisher,hour.catch\n1,5\n")
        with pytest.raises(KeyError, match="length"):
            load_catches(path, "bad")

    def test_hour_derived_from_timestamp(self, tmp_path):
        path = tmp_path / "ts.csv"
        path.write_text("idfisher,length,date.time.catch\n1,500,2019-01-05 17:20\n")
        df = load_catches(path)
        assert df["hour_catch"].tolist() == [17]

    def test_malformed_length_raises(self, tmp_path):
        path = tmp_path / "monitoring.csv"
        path.write_text(
            "idfisher,length,hour.catch\n"
            "1400,620,6\n"
            "7,abc,7\n"
            "7,not-a-number,8\n"
        )
        with pytest.raises(ValueError, match=r"monitoring: 2 malformed value\(s\) in column 'length' at row\(s\) \[2, 3\]"):
            load_catches(path, "monitoring")

    def test_malformed_fisher_id_raises(self, tmp_path):
        path = tmp_path / "competition.csv"
        path.write_text("idfisher,length,hour.catch\nF21,650,22\n22,700,23\n")
        with pytest.raises(ValueError, match=r"'idfisher' at row\(s\) \[1\]"):
            load_catches(path, "competition")

    def test_empty_cells_stay_missing(self, tmp_path):
        path = tmp_path / "gaps.csv"
        path.write_text("idfisher,length,hour.catch\n,620,6\n7,,7\n")
        df = load_catches(path)
        assert pd.isna(df["idfisher"].iloc[0])
        assert pd.isna(df["length"].iloc[1])


def test_load_datasets(data_dir):
    monitoring, competition = load_datasets(data_dir)
    assert (len(monitoring), len(competition)) == (6, 3)
