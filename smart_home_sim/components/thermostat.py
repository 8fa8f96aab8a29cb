from smart_home_sim.components.base import DeviceType, SmartDevice
from smart_home_sim.components.temperature_modes import ComfortMode, EcoMode


class Thermostat(SmartDevice):
    """
    Thermostat - holds at most one temperature mode.

    Toggling into ON applies the held mode. A sensor reading only swaps the
    mode; it neither changes on/off state nor applies the new mode.
    """

    device_type = DeviceType.THERMOSTAT
    supports_temperature_mode = True

    def __init__(self, name, mode=None):
        super().__init__(name)
        self.mode = mode

    def set_temperature_mode(self, mode):
        self.mode = mode

    def apply_temperature_policy(self):
        if self.mode is None:
            return None
        return self.mode.apply()

    def toggle(self):
        super().toggle()
        if self.state:
            self.apply_temperature_policy()

    def react_to_sensor(self, value):
        if value > self.HOT_THRESHOLD:
            self.set_temperature_mode(ComfortMode())
        else:
            self.set_temperature_mode(EcoMode())
        print(f"[THERMOSTAT] {self.name} switched to {self.mode.label}")
