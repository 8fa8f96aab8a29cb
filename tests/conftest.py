import copy

import pytest

from smart_home_sim.controllers import HomeController

BASE_SETTINGS = {
    "device": {"id": "TEST", "name": "Test Home"},
    "devices": [
        {"type": "Light", "name": "LivingRoom Light", "sensor": False},
        {"type": "Fan", "name": "Bedroom Fan", "sensor": True},
        {"type": "Thermostat", "name": "Hallway Thermostat", "sensor": True, "mode": "eco"},
    ],
    "sensor": {
        "apply_policy": True,
        "auto_subscribe": True,
        "default_mode": "eco",
        "simulate": {"min": 18, "max": 34, "step": 2.0, "seed": 7},
    },
    "logger": {"max_entries": 50, "echo": False},
    "mqtt": {"enabled": False},
}


class RecordingDevice:
    """Stand-in device that records every set_state call"""

    def __init__(self, name):
        self.name = name
        self.calls = []

    def set_state(self, on):
        self.calls.append(on)


class Registry:
    """Minimal name lookup used by scheduler tests"""

    def __init__(self, *devices):
        self.devices = list(devices)

    def get_device(self, name):
        for device in self.devices:
            if device.name == name:
                return device
        return None


@pytest.fixture
def settings():
    return copy.deepcopy(BASE_SETTINGS)


@pytest.fixture
def controller(settings):
    return HomeController(settings)


@pytest.fixture
def events():
    """Listener that records (name, state) for every notification"""
    received = []

    def listener(device):
        received.append((device.name, device.is_on()))

    listener.received = received
    return listener
