from smart_home_sim.components.base import DeviceType, SmartDevice


class Light(SmartDevice):
    """Light - ignores environmental readings"""

    device_type = DeviceType.LIGHT

    def react_to_sensor(self, value):
        print(f"[LIGHT] {self.name} received sensor reading {value} (no action)")
