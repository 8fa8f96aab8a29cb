"""Simulated environment readings"""

import random


class TemperatureDrift:
    """
    Slow temperature drift, one step per reading.

    Walks a temperature inside [min, max] and returns it rounded to an
    integer reading for the environment sensor.
    """

    def __init__(self, settings=None):
        settings = settings or {}
        self.minimum = float(settings.get('min', 18.0))
        self.maximum = float(settings.get('max', 34.0))
        self.step = float(settings.get('step', 2.0))
        self._random = random.Random(settings.get('seed'))
        self.temperature = self._random.uniform(self.minimum, self.maximum)

    def next_reading(self):
        self.temperature += self._random.uniform(-self.step, self.step)
        self.temperature = max(self.minimum, min(self.maximum, self.temperature))
        return int(round(self.temperature))
