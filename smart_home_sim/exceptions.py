"""
Smart Home Simulator exceptions

Every failure is recoverable: the controller reports it and keeps running.
"""


class SmartHomeError(Exception):
    """Base exception for the simulator."""

    pass


class DeviceNotFoundError(SmartHomeError):
    """A device name does not resolve to a registered device."""

    def __init__(self, name):
        super().__init__(f'Device "{name}" not found!')
        self.name = name


class InvalidInputError(SmartHomeError):
    """Unrecognized device type, strategy keyword or malformed argument."""

    pass


class ConfigurationError(SmartHomeError):
    """Settings file is missing or invalid."""

    pass
