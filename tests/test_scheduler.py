from smart_home_sim.components import Fan
from smart_home_sim.controllers import Scheduler
from smart_home_sim.scheduling import DelayedSchedule, OneTimeSchedule, PeriodicSchedule

from conftest import RecordingDevice, Registry


def test_periodic_task_applies_at_multiples():
    device = RecordingDevice("F1")
    scheduler = Scheduler(Registry(device).get_device)
    scheduler.add_task("F1", True, PeriodicSchedule(3))

    applied = [scheduler.update(t) for t in range(4)]

    assert applied == [1, 0, 0, 1]
    assert device.calls == [True, True]


def test_one_time_task_applies_once_and_completes():
    device = RecordingDevice("F1")
    scheduler = Scheduler(Registry(device).get_device)
    task = scheduler.add_task("F1", False, OneTimeSchedule(5))

    scheduler.update(5)
    assert task.completed is True
    scheduler.update(5)

    assert device.calls == [False]


def test_completed_tasks_stay_queued():
    scheduler = Scheduler(Registry(RecordingDevice("F1")).get_device)
    scheduler.add_task("F1", True, DelayedSchedule(1))
    scheduler.add_task("F1", True, PeriodicSchedule(2))

    scheduler.update(2)

    assert len(scheduler) == 2
    assert [task.completed for task in scheduler.tasks] == [True, False]
    assert len(scheduler.pending()) == 1


def test_unresolved_periodic_task_retries_until_device_exists(capsys):
    registry = Registry()
    scheduler = Scheduler(registry.get_device)
    task = scheduler.add_task("Late Fan", True, PeriodicSchedule(2))

    assert scheduler.update(2) == 0
    assert task.completed is False
    assert "Late Fan not found" in capsys.readouterr().out

    fan = Fan("Late Fan")
    registry.devices.append(fan)
    scheduler.update(3)
    assert fan.is_on() is False

    scheduler.update(4)
    assert fan.is_on() is True


def test_unresolved_delayed_task_is_not_retried():
    registry = Registry()
    scheduler = Scheduler(registry.get_device)
    task = scheduler.add_task("F1", True, DelayedSchedule(1))

    scheduler.update(1)
    device = RecordingDevice("F1")
    registry.devices.append(device)
    scheduler.update(2)

    assert task.completed is False
    assert device.calls == []


def test_later_task_wins_on_same_tick(events):
    fan = Fan("F1")
    fan.attach(events)
    scheduler = Scheduler(Registry(fan).get_device)
    scheduler.add_task("F1", True, OneTimeSchedule(1))
    scheduler.add_task("F1", False, OneTimeSchedule(1))

    scheduler.update(1)

    assert fan.is_on() is False
    assert events.received == [("F1", True), ("F1", False)]


def test_set_state_governs_notification(events):
    fan = Fan("F1")
    fan.attach(events)
    scheduler = Scheduler(Registry(fan).get_device)
    scheduler.add_task("F1", False, OneTimeSchedule(1))

    scheduler.update(1)

    assert events.received == []


def test_clear_tasks_then_update_does_nothing(capsys):
    device = RecordingDevice("F1")
    scheduler = Scheduler(Registry(device).get_device)
    scheduler.add_task("F1", True, PeriodicSchedule(1))
    scheduler.add_task("F1", True, DelayedSchedule(0))

    scheduler.clear_tasks()
    for t in range(5):
        assert scheduler.update(t) == 0

    assert device.calls == []
    assert len(scheduler) == 0
    assert "All scheduled tasks cleared." in capsys.readouterr().out


def test_task_description():
    scheduler = Scheduler(Registry().get_device)
    task = scheduler.add_task("Bedroom Fan", True, PeriodicSchedule(4))

    assert task.describe() == "Bedroom Fan -> ON (every 4s) [pending]"
