"""Activity log listener"""

from collections import deque


class DeviceLogger:
    """
    Records every state change of the devices it is attached to.

    One logger is typically attached to every device. History is bounded by
    `max_entries`; `echo` controls printing each entry as it arrives.
    """

    def __init__(self, max_entries=100, echo=True, clock=None):
        self.echo = echo
        self.history = deque(maxlen=max_entries)
        self._clock = clock

    def __call__(self, device):
        entry = {
            'time': self._clock() if self._clock else None,
            'type': device.type_name,
            'name': device.name,
            'state': device.state_label(),
        }
        self.history.append(entry)
        if self.echo:
            print(f"[LOGGER] {self.format_entry(entry)}")

    @staticmethod
    def format_entry(entry):
        text = f"{entry['type']} \"{entry['name']}\" is now {entry['state']}"
        if entry['time'] is not None:
            text = f"t={entry['time']}s {text}"
        return text

    def get_logs(self):
        return list(self.history)

    def clear(self):
        self.history.clear()
