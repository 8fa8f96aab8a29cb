import pytest

from smart_home_sim.exceptions import InvalidInputError
from smart_home_sim.scheduling import (
    DelayedSchedule,
    OneTimeSchedule,
    PeriodicSchedule,
    create_strategy,
)


@pytest.mark.parametrize("interval", [1, 3, 7])
def test_periodic_fires_on_multiples_including_zero(interval):
    strategy = PeriodicSchedule(interval)

    fired = [t for t in range(0, 30) if strategy.should_trigger(t)]

    assert fired == [t for t in range(0, 30) if t % interval == 0]
    assert fired[0] == 0
    assert strategy.is_done() is False


def test_one_time_fires_exactly_once():
    strategy = OneTimeSchedule(5)

    assert [strategy.should_trigger(t) for t in range(5)] == [False] * 5
    assert strategy.should_trigger(5) is True
    assert strategy.should_trigger(5) is False
    assert strategy.should_trigger(6) is False
    assert strategy.is_done() is True


def test_delayed_fires_on_first_call_at_or_after_start():
    strategy = DelayedSchedule(4)

    assert strategy.should_trigger(2) is False
    assert strategy.is_done() is False
    assert strategy.should_trigger(9) is True
    assert strategy.is_done() is True
    assert strategy.should_trigger(10) is False
    assert strategy.should_trigger(4) is False


def test_delayed_state_is_per_instance():
    first = DelayedSchedule(0)
    second = DelayedSchedule(0)

    assert first.should_trigger(1) is True
    assert second.should_trigger(1) is True


@pytest.mark.parametrize(
    "keyword, cls",
    [("one-time", OneTimeSchedule), ("Periodic", PeriodicSchedule), ("DELAYED", DelayedSchedule)],
)
def test_create_strategy_keywords(keyword, cls):
    assert isinstance(create_strategy(keyword, "3"), cls)


@pytest.mark.parametrize(
    "keyword, seconds, message",
    [
        ("weekly", 3, "Unknown strategy"),
        ("periodic", 0, "greater than 0"),
        ("one-time", -1, "negative"),
        ("delayed", "soon", "integer"),
        ("delayed", None, "integer"),
        ("one-time", True, "integer"),
        ("periodic", False, "integer"),
    ],
)
def test_create_strategy_rejects_bad_input(keyword, seconds, message):
    with pytest.raises(InvalidInputError, match=message):
        create_strategy(keyword, seconds)
