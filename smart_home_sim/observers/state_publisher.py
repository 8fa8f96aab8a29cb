"""Forwards device state changes to the MQTT batch publisher"""


class StatePublisher:
    """
    Listener that enqueues one actuator payload per state change.

    `publisher` is anything with `enqueue(item)` and a `device_info` dict
    (normally MQTTBatchPublisher). `clock` returns the simulated time.
    """

    def __init__(self, publisher, clock=None):
        self._publisher = publisher
        self._clock = clock

    def __call__(self, device):
        if not self._publisher.enabled:
            return
        payload = {
            'device': self._publisher.device_info.get('id', 'UNKNOWN'),
            'source': 'actuator',
            'sensor': device.name,
            'type': device.type_name,
            'value': device.is_on(),
            'simulated': True,
            'tick': self._clock() if self._clock else None,
        }
        self._publisher.enqueue(payload)
