import logging

import pandas as pd
import pytest

from fars.cli import main

from ._fixtures import write_accident_file


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_summarize_prints_table(data_dir, capsys):
    main(["summarize", "--years", "2013", "2014", "--data-dir", str(data_dir)])
    out = capsys.readouterr().out
    assert "MONTH" in out
    assert "2013" in out and "2014" in out
    assert len(out.strip().splitlines()) == 13


def test_summarize_writes_csv(data_dir, tmp_path):
    out = tmp_path / "summary.csv"
    main([
        "summarize", "--years", "2013", "2014", "2015",
        "--data-dir", str(data_dir), "--output", str(out),
    ])
    table = pd.read_csv(out)
    assert table.shape == (12, 4)
    assert list(table.columns) == ["MONTH", "2013", "2014", "2015"]


def test_summarize_skipped_year_is_reported(data_dir, capsys):
    main(["summarize", "--years", "2013", "1999", "--data-dir", str(data_dir)])
    err = capsys.readouterr().err
    assert "invalid year: 1999" in err
    assert "skipped" in err


def test_summarize_no_data_exits(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["summarize", "--years", "1999", "--data-dir", str(tmp_path)])
    assert info.value.code == 1


def test_map_writes_default_file(in_data_dir, capsys):
    main(["map", "--state", "33", "--year", "2013"])
    assert (in_data_dir / "fars_map_33_2013.html").exists()
    assert "Map saved" in capsys.readouterr().out


def test_map_invalid_state_exits(data_dir, capsys):
    with pytest.raises(SystemExit) as info:
        main(["map", "--state", "99", "--year", "2013", "--data-dir", str(data_dir)])
    assert info.value.code == 1
    assert "invalid STATE number: 99" in capsys.readouterr().err


def test_map_missing_year_exits(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["map", "--state", "33", "--year", "1999", "--data-dir", str(tmp_path)])
    assert info.value.code == 1


def test_json_logs(data_dir, capsys):
    main([
        "--json-logs", "summarize", "--years", "2013", "1999",
        "--data-dir", str(data_dir),
    ])
    err = capsys.readouterr().err
    assert '"msg": "invalid year: 1999"' in err
    assert '"year": "1999"' in err


def test_summarize_empty_year_is_not_skipped(data_dir, capsys):
    write_accident_file(data_dir, 2017, [])
    main(["summarize", "--years", "2017", "--data-dir", str(data_dir)])
    captured = capsys.readouterr()
    assert "2017" in captured.out
    assert "skipped" not in captured.err


def test_map_corrupt_file_exits(tmp_path, capsys):
    (tmp_path / "accident_2013.csv.bz2").write_bytes(b"not a bz2 stream")
    with pytest.raises(SystemExit) as info:
        main(["map", "--state", "33", "--year", "2013", "--data-dir", str(tmp_path)])
    assert info.value.code == 1
    assert "Error" in capsys.readouterr().err


def test_map_missing_coordinate_columns_exits(tmp_path, capsys):
    write_accident_file(
        tmp_path, 2013, [{"STATE": 33, "MONTH": 1}], columns=["STATE", "MONTH"],
    )
    with pytest.raises(SystemExit) as info:
        main(["map", "--state", "33", "--year", "2013", "--data-dir", str(tmp_path)])
    assert info.value.code == 1
    assert "Missing required columns" in capsys.readouterr().err
