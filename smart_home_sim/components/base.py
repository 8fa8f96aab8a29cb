"""Base device class shared by every simulated smart device"""

from enum import Enum

from smart_home_sim.observers.hub import NotificationHub


class DeviceType(Enum):
    """Closed set of supported device kinds"""

    LIGHT = 'Light'
    FAN = 'Fan'
    THERMOSTAT = 'Thermostat'

    @classmethod
    def parse(cls, value):
        """Look up a type by its display name (case-insensitive), or None"""
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        return None


class SmartDevice:
    """
    Base class for all simulated devices.

    Holds the name, type tag and on/off state, and owns the notification hub.
    Subclasses set `device_type` and override `react_to_sensor`.
    """

    device_type = None
    supports_temperature_mode = False

    # Sensor readings strictly above this count as hot
    HOT_THRESHOLD = 28

    def __init__(self, name):
        self.name = name
        self.state = False
        self.hub = NotificationHub()

    # ========== STATE ==========

    def toggle(self):
        """Flip the state; listeners are always notified"""
        self.state = not self.state
        self.notify()

    def set_state(self, on):
        """Set the state; listeners are notified only on an actual change"""
        on = bool(on)
        if on == self.state:
            return False
        self.state = on
        self.notify()
        return True

    def is_on(self):
        return self.state

    def state_label(self):
        return "ON" if self.state else "OFF"

    # ========== OBSERVERS ==========

    def attach(self, listener):
        self.hub.attach(listener)

    def notify(self):
        self.hub.notify(self)

    # ========== SENSOR ==========

    def react_to_sensor(self, value):
        raise NotImplementedError("Subclasses must implement react_to_sensor()")

    @property
    def type_name(self):
        return self.device_type.value

    def __repr__(self):
        return f"<{self.type_name} {self.name!r} {self.state_label()}>"
