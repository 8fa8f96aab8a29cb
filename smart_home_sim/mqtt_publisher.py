"""
MQTT publishing of device events, batched per simulated tick.

Events are collected as they happen and sent as one message when the clock
advances (`flush(tick)`), when the batch reaches `max_batch`, or on `stop()`.
Publishing happens on the caller's thread; paho runs its own network loop.
"""

import json

import paho.mqtt.client as mqtt

from smart_home_sim.exceptions import ConfigurationError


class MQTTBatchPublisher:
    def __init__(self, config, device_info):
        self.config = config or {}
        self.device_info = device_info or {}
        self.enabled = bool(self.config.get("enabled", True))
        self.host = self.config.get("host", "localhost")
        self.topic = self.config.get("topic", "smarthome/devices")
        self.username = self.config.get("username")
        self.password = self.config.get("password")
        try:
            self.port = int(self.config.get("port", 1883))
            self.qos = int(self.config.get("qos", 1))
            self.max_batch = int(self.config.get("max_batch", 50))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid mqtt settings: {exc}") from None
        if self.max_batch < 1:
            raise ConfigurationError("mqtt.max_batch must be at least 1")

        self.batch = []
        self.published = 0
        self._client = None

    def is_connected(self):
        return self._client is not None

    def start(self):
        if not self.enabled or self._client is not None:
            return False

        client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
        if self.username:
            client.username_pw_set(self.username, self.password)

        try:
            client.connect(self.host, self.port, 60)
        except OSError as exc:
            print(f"[MQTT] Connection failed: {exc}")
            return False

        client.loop_start()
        self._client = client
        print(f"[MQTT] Publishing to {self.host}:{self.port} ({self.topic})")
        return True

    def enqueue(self, item):
        """Queue one event; dropped while not connected"""
        if not self.enabled or self._client is None:
            return
        self.batch.append(item)
        if len(self.batch) >= self.max_batch:
            self.flush()

    def flush(self, tick=None):
        """Publish the pending batch as one message. Returns the number of items sent."""
        if self._client is None or not self.batch:
            return 0
        items, self.batch = self.batch, []
        payload = json.dumps({
            "device": self.device_info.get("id"),
            "batch": True,
            "tick": tick,
            "items": items,
        })
        self._client.publish(self.topic, payload, qos=self.qos)
        self.published += 1
        return len(items)

    def stop(self, tick=None):
        if self._client is None:
            return
        self.flush(tick)
        client, self._client = self._client, None
        client.loop_stop()
        client.disconnect()
        print("[MQTT] Disconnected")
