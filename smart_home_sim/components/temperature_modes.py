"""
Thermostat temperature modes.

A mode is a stateless setpoint regime. Applying it reports the regime taking
effect and returns that description.
"""

from smart_home_sim.exceptions import InvalidInputError


class TemperatureMode:
    """Base class for thermostat setpoint regimes"""

    key = None
    label = None
    setpoint_f = None
    purpose = None

    def describe(self):
        return f"{self.label}: Set to {self.setpoint_f}°F for {self.purpose}."

    def apply(self):
        description = self.describe()
        print(f"[THERMOSTAT] {description}")
        return description

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"<{type(self).__name__}>"


class EcoMode(TemperatureMode):
    key = 'eco'
    label = 'Eco Mode'
    setpoint_f = 68
    purpose = 'energy saving'


class ComfortMode(TemperatureMode):
    key = 'comfort'
    label = 'Comfort Mode'
    setpoint_f = 72
    purpose = 'comfort'


TEMPERATURE_MODES = {
    EcoMode.key: EcoMode,
    ComfortMode.key: ComfortMode,
}


def create_temperature_mode(keyword):
    """Build a mode from its keyword ('eco' or 'comfort')"""
    mode_cls = TEMPERATURE_MODES.get(str(keyword).strip().lower())
    if mode_cls is None:
        valid = ", ".join(TEMPERATURE_MODES)
        raise InvalidInputError(f"Unknown temperature mode '{keyword}'. Valid modes: {valid}")
    return mode_cls()
