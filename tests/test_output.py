import pytest

from philos.output import Status, debug_status_line, outcome_line, status_line


def test_status_line_pinned():
    assert status_line(200, 0, Status.EATING) == "200 1 is eating"


def test_debug_fork_line_pinned():
    line = debug_status_line(5, 2, Status.GOT_FORK_1, 3)
    assert line == "[         5]\t003\thas taken a fork: fork [3]"


def test_outcome_line_pinned():
    assert outcome_line(3, 5, 7) == "3/5 philosophers had at least 7 meals."


@pytest.mark.parametrize(
    "status, text",
    [
        (Status.DIED, "died"),
        (Status.EATING, "is eating"),
        (Status.SLEEPING, "is sleeping"),
        (Status.THINKING, "is thinking"),
        (Status.GOT_FORK_1, "has taken a fork"),
        (Status.GOT_FORK_2, "has taken a fork"),
    ],
)
def test_status_messages(status, text):
    assert status.message == text
    assert status_line(10, 4, status).endswith(" " + text)


def test_status_values_follow_source_order():
    assert [Status(value).message for value in range(6)] == [
        "died",
        "is eating",
        "is sleeping",
        "is thinking",
        "has taken a fork",
        "has taken a fork",
    ]


@pytest.mark.parametrize("philo_id", [0, 9, 249])
def test_status_line_is_one_based(philo_id):
    fields = status_line(77, philo_id, Status.THINKING).split(" ", 2)
    assert fields[0] == "77"
    assert int(fields[1]) == philo_id + 1
    assert fields[2] == Status.THINKING.message


def test_debug_line_without_fork_has_no_fork_suffix():
    line = debug_status_line(123, 0, Status.SLEEPING)
    assert "fork [" not in line
    assert line.endswith(Status.SLEEPING.message)


def test_debug_line_elapsed_field_is_right_aligned():
    line = debug_status_line(42, 0, Status.DIED)
    bracket = line.split("\t")[0]
    assert len(bracket) == 12
    assert bracket.strip("[]").strip() == "42"


def test_debug_fork_two_names_given_fork():
    line = debug_status_line(1, 0, Status.GOT_FORK_2, 17)
    assert line.endswith(": fork [17]")


@pytest.mark.parametrize("status", [Status.GOT_FORK_1, Status.GOT_FORK_2])
def test_debug_fork_line_requires_index(status):
    with pytest.raises(ValueError):
        debug_status_line(1, 0, status)