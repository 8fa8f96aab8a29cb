"""Environmental sensor - broadcasts readings to subscribed devices"""


class EnvironmentSensor:
    """
    Sensor broadcaster.

    Subscribers are devices; each reading is delivered synchronously to every
    subscriber in subscription order via `react_to_sensor`.
    """

    def __init__(self, code='ENV'):
        self.code = code
        self.subscribers = []
        self.last_value = None

    def subscribe(self, device):
        self.subscribers.append(device)

    def trigger(self, value):
        self.last_value = value
        print(f"[SENSOR] Environmental change: {value}")
        for device in list(self.subscribers):
            device.react_to_sensor(value)
