from philos.cli import main
from philos.parsing import USAGE


def test_wrong_argument_count_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_too_many_arguments_prints_usage(capsys):
    assert main(["1", "2", "3", "4", "5", "6"]) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_zero_philosophers_rejected(capsys):
    assert main(["0", "100", "10", "10"]) == 1
    assert "between 1 and 250 philosophers" in capsys.readouterr().out


def test_non_digit_rejected(capsys):
    assert main(["2", "abc", "10", "10"]) == 1
    assert "not a valid unsigned integer" in capsys.readouterr().out


def test_overflow_names_argument(capsys):
    assert main(["2", "99999999999", "10", "10"]) == 1
    assert "99999999999" in capsys.readouterr().out


def test_zero_meals_succeeds_silently(capsys):
    assert main(["3", "800", "20", "20", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_lone_philosopher_run(capsys):
    assert main(["1", "40", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 1 died")
    assert lines[0].endswith(" 1 has taken a fork")