# tests/test_cli.py

import pytest

from caljal.cli import main


def test_to_jalali(capsys):
    assert main(["to-jalali", "2021-03-21"]) == 0
    assert capsys.readouterr().out.strip() == "1400-01-01"


def test_bare_date_shorthand(capsys):
    assert main(["2016-03-19"]) == 0
    assert capsys.readouterr().out.strip() == "1394-12-29"


def test_to_gregorian(capsys):
    assert main(["to-gregorian", "1399-12-30"]) == 0
    assert capsys.readouterr().out.strip() == "2021-03-20"


def test_invalid_jalali_date_exits_2(capsys):
    assert main(["to-gregorian", "1400-12-30"]) == 2
    err = capsys.readouterr().err
    assert "caljal: error:" in err
    assert "Day must be between 1 and 29" in err


def test_malformed_date_exits_2(capsys):
    assert main(["info", "2021/03/21"]) == 2
    assert "expected YYYY-MM-DD" in capsys.readouterr().err


def test_info(capsys):
    assert main(["info", "2021-03-21"]) == 0
    out = capsys.readouterr().out
    assert "1400-01-01" in out
    assert "Farvardin" in out
    assert "Nowruz" in out
    assert "Yekshanbe" in out


def test_info_from_jalali(capsys):
    assert main(["info", "--jalali", "1399-12-30"]) == 0
    out = capsys.readouterr().out
    assert "2021-03-20" in out
    assert "366" in out


def test_month(capsys):
    assert main(["month", "1400", "1"]) == 0
    out = capsys.readouterr().out
    assert "Farvardin 1400" in out
    assert "(2021-03-21 .. 2021-04-20)" in out
    assert " 1*" in out


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "1399", "--to-year", "1400"]) == 0
    out = capsys.readouterr().out
    assert "2020-03-20" in out
    assert "2021-03-21" in out


def test_diag_round_trip(capsys):
    rc = main(["diag", "round-trip", "--start", "2020-01-01", "--end", "2020-12-31", "--N", "300"])
    assert rc == 0
    assert "All round-trip tests passed" in capsys.readouterr().out


def test_diag_leap_years_text(capsys):
    assert main(["diag", "leap-years", "--start-year", "1375", "--end-year", "1407", "--text"]) == 0
    out = capsys.readouterr().out
    assert "Leap years 1375..1407: 8" in out


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        main(["bogus"])
