"""Device registry - owns the devices and resolves them by name"""

from smart_home_sim.exceptions import DeviceNotFoundError

class DeviceController:
    """
    Ordered device registry.

    Names are unique by convention only; lookups scan in registration order
    and return the first match.
    """

    def __init__(self):
        self.devices = []

    def add_device(self, device):
        self.devices.append(device)
        return device

    def get_device(self, name):
        """Resolve a device by name, or None"""
        for device in self.devices:
            if device.name == name:
                return device
        return None

    def require_device(self, name):
        device = self.get_device(name)
        if device is None:
            raise DeviceNotFoundError(name)
        return device

    def __iter__(self):
        return iter(list(self.devices))

    def __len__(self):
        return len(self.devices)
