from smart_home_sim.observers.hub import NotificationHub
from smart_home_sim.observers.device_logger import DeviceLogger
from smart_home_sim.observers.state_publisher import StatePublisher

__all__ = [
    'NotificationHub',
    'DeviceLogger',
    'StatePublisher',
]
