"""
Scheduling strategies - decide when a scheduled task fires.

  OneTimeSchedule(T)  - fires once, at exactly t == T
  PeriodicSchedule(k) - fires whenever t % k == 0, never finishes
  DelayedSchedule(S)  - fires on the first evaluation with t >= S

Each instance keeps its own fired flag; strategies are never shared between
tasks.
"""

from smart_home_sim.exceptions import InvalidInputError


class SchedulingStrategy:
    """Base class for trigger policies"""

    keyword = None

    def should_trigger(self, current_time):
        raise NotImplementedError("Subclasses must implement should_trigger()")

    def is_done(self):
        return True

    def describe(self):
        return self.keyword


class OneTimeSchedule(SchedulingStrategy):
    keyword = 'one-time'

    def __init__(self, trigger_time):
        self.trigger_time = trigger_time
        self._fired = False

    def should_trigger(self, current_time):
        if not self._fired and current_time == self.trigger_time:
            self._fired = True
            return True
        return False

    def is_done(self):
        return True

    def describe(self):
        return f"one-time at {self.trigger_time}s"


class PeriodicSchedule(SchedulingStrategy):
    keyword = 'periodic'

    def __init__(self, interval):
        if interval <= 0:
            raise InvalidInputError("Periodic interval must be greater than 0.")
        self.interval = interval

    def should_trigger(self, current_time):
        return current_time % self.interval == 0

    def is_done(self):
        return False

    def describe(self):
        return f"every {self.interval}s"


class DelayedSchedule(SchedulingStrategy):
    keyword = 'delayed'

    def __init__(self, start_time):
        self.start_time = start_time
        self._triggered = False

    def should_trigger(self, current_time):
        if not self._triggered and current_time >= self.start_time:
            self._triggered = True
            return True
        return False

    def is_done(self):
        return self._triggered

    def describe(self):
        return f"delayed from {self.start_time}s"


STRATEGIES = {
    OneTimeSchedule.keyword: OneTimeSchedule,
    PeriodicSchedule.keyword: PeriodicSchedule,
    DelayedSchedule.keyword: DelayedSchedule,
}


def create_strategy(keyword, seconds):
    """Build a strategy from a CLI keyword and its seconds argument"""
    strategy_cls = STRATEGIES.get(str(keyword).strip().lower())
    if strategy_cls is None:
        valid = ", ".join(STRATEGIES)
        raise InvalidInputError(f"Unknown strategy '{keyword}'. Valid strategies: {valid}")
    if isinstance(seconds, bool):
        raise InvalidInputError(f"Seconds must be an integer, got '{seconds}'")
    try:
        seconds = int(seconds)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Seconds must be an integer, got '{seconds}'") from None
    if seconds < 0:
        raise InvalidInputError("Seconds must not be negative.")
    return strategy_cls(seconds)
