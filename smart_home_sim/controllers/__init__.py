from smart_home_sim.controllers.device_controller import DeviceController
from smart_home_sim.controllers.scheduler import Scheduler, ScheduledTask
from smart_home_sim.controllers.home_controller import HomeController

__all__ = [
    'DeviceController',
    'Scheduler',
    'ScheduledTask',
    'HomeController',
]
