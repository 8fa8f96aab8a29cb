from smart_home_sim.components.base import DeviceType, SmartDevice
from smart_home_sim.components.light import Light
from smart_home_sim.components.fan import Fan
from smart_home_sim.components.thermostat import Thermostat
from smart_home_sim.components.temperature_modes import (
    TemperatureMode,
    EcoMode,
    ComfortMode,
    create_temperature_mode,
)
from smart_home_sim.components.sensor import EnvironmentSensor
from smart_home_sim.components.factory import create_device, DEVICE_CLASSES

__all__ = [
    'DeviceType',
    'SmartDevice',
    'Light',
    'Fan',
    'Thermostat',
    'TemperatureMode',
    'EcoMode',
    'ComfortMode',
    'create_temperature_mode',
    'EnvironmentSensor',
    'create_device',
    'DEVICE_CLASSES',
]
