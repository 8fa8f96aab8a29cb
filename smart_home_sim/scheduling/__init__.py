from smart_home_sim.scheduling.strategies import (
    SchedulingStrategy,
    OneTimeSchedule,
    PeriodicSchedule,
    DelayedSchedule,
    STRATEGIES,
    create_strategy,
)

__all__ = [
    'SchedulingStrategy',
    'OneTimeSchedule',
    'PeriodicSchedule',
    'DelayedSchedule',
    'STRATEGIES',
    'create_strategy',
]
