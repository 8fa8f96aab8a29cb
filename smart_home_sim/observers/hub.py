"""Per-device notification hub"""


class NotificationHub:
    """
    Ordered list of state-change listeners.

    Listeners are callables taking the device that changed. They are appended
    as given (no de-duplication) and stay attached for the device lifetime.
    """

    def __init__(self):
        self._listeners = []

    def attach(self, listener):
        if not callable(listener):
            raise TypeError(f"Listener {listener!r} is not callable")
        self._listeners.append(listener)

    def notify(self, device):
        for listener in list(self._listeners):
            listener(device)

    def __len__(self):
        return len(self._listeners)
