# tests/test_cli.py

import pytest

from calgreg.cli import main


def _run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("0", "1582-10-15 Fri"),
        ("+5", "1582-10-20 Wed"),
        ("141427", "1970-01-01 Thu"),
        ("3074323", "9999-12-31 Fri"),
        ("000152443", "2000-02-29 Tue"),
    ],
)
def test_offset_to_date(capsys, arg, expected):
    rc, out, err = _run(capsys, arg)
    assert rc == 0
    assert out == expected + "\n"
    assert err == ""


@pytest.mark.parametrize(
    "ymd, expected",
    [
        (("1582", "10", "15"), "0"),
        (("1970", "1", "1"), "141427"),
        (("2000", "02", "29"), "152443"),
        (("9999", "12", "31"), "3074323"),
    ],
)
def test_date_to_offset(capsys, ymd, expected):
    rc, out, err = _run(capsys, *ymd)
    assert rc == 0
    assert out == expected + "\n"
    assert err == ""


@pytest.mark.parametrize(
    "argv, msg",
    [
        ((), "Wrong number of parameters!"),
        (("1", "2"), "Wrong number of parameters!"),
        (("1", "2", "3", "4"), "Wrong number of parameters!"),
        (("abc",), "Could not parse parameter!"),
        (("",), "Could not parse parameter!"),
        (("1_0",), "Could not parse parameter!"),
        ((" 5",), "Could not parse parameter!"),
        (("2147483648",), "Could not parse parameter!"),
        (("2147483647",), "Day offset out of range!"),
        (("-1",), "Day offset out of range!"),
        (("3074324",), "Day offset out of range!"),
        (("x", "1", "1"), "Could not parse year!"),
        (("2000", "1.5", "1"), "Could not parse month!"),
        (("2000", "1", "d"), "Could not parse day!"),
        (("10000", "1", "1"), "Year is out of range!"),
        (("-1", "1", "1"), "Year is out of range!"),
        (("2000", "0", "1"), "Month is out of range!"),
        (("2000", "13", "1"), "Month is out of range!"),
        (("2000", "1", "0"), "Day is out of range!"),
        (("2000", "1", "32"), "Day is out of range!"),
        (("2023", "2", "29"), "Date is not valid!"),
        (("1900", "2", "29"), "Date is not valid!"),
        (("1582", "10", "14"), "Date is not valid!"),
        (("0", "1", "1"), "Date is not valid!"),
    ],
)
def test_errors(capsys, argv, msg):
    rc, out, err = _run(capsys, *argv)
    assert rc == 1
    assert out == ""
    assert err == f"calgreg: {msg}\n"


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "YEAR MONTH DAY" in capsys.readouterr().out
