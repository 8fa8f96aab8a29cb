"""
Scheduler - evaluates scheduled device actions against simulated time.

Tasks reference devices by name; the name is resolved through the lookup
callable only when the task's strategy fires. A task whose device does not
resolve stays uncompleted, so periodic tasks retry on every matching tick.
Completed tasks remain in the queue and are skipped.
"""


class ScheduledTask:
    """Turn a named device ON or OFF when its strategy fires"""

    def __init__(self, device_name, turn_on, strategy):
        self.device_name = device_name
        self.turn_on = bool(turn_on)
        self.strategy = strategy
        self.completed = False

    def describe(self):
        action = "ON" if self.turn_on else "OFF"
        status = "done" if self.completed else "pending"
        return f"{self.device_name} -> {action} ({self.strategy.describe()}) [{status}]"

    def __repr__(self):
        return f"<ScheduledTask {self.describe()}>"


class Scheduler:
    """
    Holds scheduled tasks in insertion order.

    `device_lookup(name)` returns the device or None; the scheduler never owns
    devices.
    """

    def __init__(self, device_lookup):
        self._lookup = device_lookup
        self._tasks = []

    @property
    def tasks(self):
        return tuple(self._tasks)

    def pending(self):
        return [task for task in self._tasks if not task.completed]

    def add_task(self, device_name, turn_on, strategy):
        task = ScheduledTask(device_name, turn_on, strategy)
        self._tasks.append(task)
        return task

    def clear_tasks(self):
        self._tasks.clear()
        print("[SCHEDULER] All scheduled tasks cleared.")

    def update(self, current_time):
        """Run every task whose strategy fires at current_time. Returns the count applied."""
        applied = 0
        for task in list(self._tasks):
            if task.completed or not task.strategy.should_trigger(current_time):
                continue
            device = self._lookup(task.device_name)
            if device is None:
                print(f"[SCHEDULER] {task.device_name} not found at time {current_time}s, task deferred")
                continue
            device.set_state(task.turn_on)
            print(f"[SCHEDULER] {task.device_name} turned "
                  f"{'ON' if task.turn_on else 'OFF'} at time {current_time}s")
            task.completed = task.strategy.is_done()
            applied += 1
        return applied

    def __len__(self):
        return len(self._tasks)
