"""Shared fixtures: small synthetic FARS accident files written with pandas."""

import pytest

from ._fixtures import write_accident_file


def _records(year: int, months: dict, state: int = 33) -> list:
    """One record per accident; *months* maps month -> count."""
    rows = []
    case = 1
    for month, count in months.items():
        for i in range(count):
            rows.append({
                "STATE": state,
                "ST_CASE": year * 10000 + case,
                "MONTH": month,
                "LATITUDE": 43.0 + 0.01 * i,
                "LONGITUD": -71.5 - 0.01 * i,
            })
            case += 1
    return rows


@pytest.fixture
def data_dir(tmp_path):
    """Directory with 2013, 2014 and 2015 files.

    2013: months 1-12, month m has m accidents (state 33)
          plus two state-1 records, one with sentinel coordinates
    2014: only January (3) and December (1)
    2015: one record per month, no accidents in June
    """
    rows_2013 = _records(2013, {m: m for m in range(1, 13)})
    rows_2013 += [
        {"STATE": 1, "ST_CASE": 99001, "MONTH": 5,
         "LATITUDE": 32.5, "LONGITUD": -86.9},
        {"STATE": 1, "ST_CASE": 99002, "MONTH": 5,
         "LATITUDE": 99.9999, "LONGITUD": 999.9999},
    ]
    write_accident_file(tmp_path, 2013, rows_2013)
    write_accident_file(tmp_path, 2014, _records(2014, {1: 3, 12: 1}))
    write_accident_file(
        tmp_path, 2015, _records(2015, {m: 1 for m in range(1, 13) if m != 6})
    )
    return tmp_path


@pytest.fixture
def in_data_dir(data_dir, monkeypatch):
    """Run the test with the data directory as the working directory."""
    monkeypatch.chdir(data_dir)
    return data_dir
