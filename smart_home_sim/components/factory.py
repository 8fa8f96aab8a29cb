"""Device factory - builds a device from its type name"""

from smart_home_sim.components.base import DeviceType
from smart_home_sim.components.fan import Fan
from smart_home_sim.components.light import Light
from smart_home_sim.components.thermostat import Thermostat
from smart_home_sim.exceptions import InvalidInputError

DEVICE_CLASSES = {
    DeviceType.LIGHT: Light,
    DeviceType.FAN: Fan,
    DeviceType.THERMOSTAT: Thermostat,
}


def create_device(type_name, name):
    """Create a device in the OFF state. Raises InvalidInputError on bad input."""
    device_type = type_name if isinstance(type_name, DeviceType) else DeviceType.parse(type_name)
    if device_type is None:
        valid = ", ".join(t.value for t in DeviceType)
        raise InvalidInputError(f"Invalid device type '{type_name}'. Valid types: {valid}.")
    name = (name or "").strip()
    if not name:
        raise InvalidInputError("Device name must not be empty.")
    return DEVICE_CLASSES[device_type](name)
