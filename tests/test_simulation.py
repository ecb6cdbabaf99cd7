import io
import threading

from philosophers.parsing import Settings
from philosophers.simulation import (
    check_deaths,
    check_meals,
    eat,
    main,
    sleep,
    start_dining,
    think,
)
from philosophers.table import Table


class FakeClock:
    def __init__(self, value=1000):
        self.value = value

    def __call__(self):
        return self.value


def _messages(output):
    return [line.split(" ", 2)[2] for line in output.getvalue().splitlines()]


def _make(settings, clock=None):
    out = io.StringIO()
    if clock is None:
        table = Table(settings, output=out)
    else:
        table = Table(settings, output=out, clock=clock)
    return table, out


def test_think_announces():
    table, out = _make(Settings(2, 200, 60, 60))
    table.reset_clock()
    think(table, table.philosophers[0])
    line = out.getvalue().strip()
    assert line.endswith("1 is thinking")


def test_sleep_after_stop_prints_nothing():
    table, out = _make(Settings(2, 200, 60, 60))
    table.stop()
    sleep(table, table.philosophers[1])
    assert out.getvalue() == ""


def test_eat_with_two_forks():
    clock = FakeClock()
    table, out = _make(Settings(2, 200, 10, 60), clock)
    table.reset_clock()
    philosopher = table.philosophers[1]
    assert eat(table, philosopher) is True
    assert table.meals_eaten(philosopher) == 1
    assert _messages(out) == ["has taken a fork", "has taken a fork", "is eating"]
    assert all(not fork.locked() for fork in table.forks)


def test_eat_alone_fails_and_releases_fork():
    table, out = _make(Settings(1, 10, 10, 60))
    table.reset_clock()
    philosopher = table.philosophers[0]
    assert eat(table, philosopher) is False
    assert table.meals_eaten(philosopher) == 0
    assert _messages(out) == ["has taken a fork"]
    assert not table.forks[0].locked()


def test_check_deaths_threshold():
    clock = FakeClock(1000)
    table, out = _make(Settings(2, 200, 60, 60), clock)
    table.reset_clock()
    clock.value = 1199
    assert check_deaths(table) is False
    assert not table.is_stopped()
    clock.value = 1200
    assert check_deaths(table) is True
    assert table.is_stopped()
    assert out.getvalue().strip() == "200 1 died"


def test_check_meals_without_limit():
    table, _ = _make(Settings(2, 200, 60, 60))
    table.reset_clock()
    assert check_meals(table) is False
    assert not table.is_stopped()


def test_check_meals_requires_everyone():
    table, _ = _make(Settings(2, 200, 60, 60, meals=1))
    table.reset_clock()
    table.record_meal(table.philosophers[0])
    assert check_meals(table) is False
    table.record_meal(table.philosophers[1])
    assert check_meals(table) is True
    assert table.is_stopped()


def test_start_dining_zero_meals_does_nothing():
    table, out = _make(Settings(3, 200, 60, 60, meals=0))
    start_dining(table)
    assert out.getvalue() == ""
    assert not table.is_stopped()


def test_single_philosopher_dies():
    table, out = _make(Settings(1, 100, 60, 60))
    runner = threading.Thread(target=start_dining, args=(table,))
    runner.start()
    runner.join(timeout=5)
    assert not runner.is_alive()
    messages = _messages(out)
    assert messages[-1] == "died"
    assert "has taken a fork" in messages
    assert "is eating" not in messages
    assert table.is_stopped()


def test_everyone_eats_required_meals():
    table, out = _make(Settings(3, 800, 60, 60, meals=2))
    runner = threading.Thread(target=start_dining, args=(table,))
    runner.start()
    runner.join(timeout=10)
    assert not runner.is_alive()
    lines = out.getvalue().splitlines()
    assert not any(line.endswith("died") for line in lines)
    for position in (1, 2, 3):
        eating = [line for line in lines if line.split(" ", 2)[1:] == [str(position), "is eating"]]
        assert len(eating) == 2
    assert all(p.meals_eaten == 2 for p in table.philosophers)
    assert table.is_stopped()


def test_timestamps_never_decrease():
    table, out = _make(Settings(2, 500, 60, 60, meals=1))
    start_dining(table)
    stamps = [int(line.split(" ")[0]) for line in out.getvalue().splitlines()]
    assert stamps
    assert stamps == sorted(stamps)


def test_main_wrong_argument_count(capsys):
    assert main(["4", "410", "200"]) == 1
    assert capsys.readouterr().out.strip() == "Number of args is not Correct"


def test_main_invalid_number(capsys):
    assert main(["2", "30", "60", "60"]) == 1
    assert capsys.readouterr().out.strip() == "Number is not Correct"


def test_main_runs_until_death(capsys):
    assert main(["1", "100", "60", "60"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1].endswith("1 died")