import pytest

from dsadrills.cli import main


def test_minmax(capsys):
    assert main(["minmax", "3", "-7", "12", "5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "The maximum value in the array is:- 12",
        "The minimum value in the array is:- -7",
    ]


def test_minmax_single_value(capsys):
    assert main(["minmax", "4"]) == 0
    out = capsys.readouterr().out
    assert "maximum value in the array is:- 4" in out
    assert "minimum value in the array is:- 4" in out


def test_pair_sum_found(capsys):
    assert main(["pair-sum", "--sum", "16", "11", "15", "6", "8", "9", "10"]) == 0
    assert capsys.readouterr().out.strip() == "true"


def test_pair_sum_not_found(capsys):
    assert main(["pair-sum", "--sum", "45", "11", "15", "6", "8", "9", "10"]) == 0
    assert capsys.readouterr().out.strip() == "false"


def test_multiply(capsys):
    assert main(["multiply", "946", "84"]) == 0
    assert int(capsys.readouterr().out) == 946 * 84


def test_multiply_rejects_non_digits():
    with pytest.raises(SystemExit) as info:
        main(["multiply", "9x", "84"])
    assert info.value.code == 2


def test_duplicates(capsys):
    assert main(["duplicates", "test string"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "s, count is: 2",
        "t, count is: 3",
    ]


def test_duplicates_none(capsys):
    assert main(["duplicates", "abc"]) == 0
    assert capsys.readouterr().out == ""


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2