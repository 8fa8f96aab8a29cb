from smart_home_sim.components.base import DeviceType, SmartDevice


class Fan(SmartDevice):
    """Fan - runs while the reading is above the hot threshold"""

    device_type = DeviceType.FAN

    def react_to_sensor(self, value):
        self.set_state(value > self.HOT_THRESHOLD)
