from smart_home_sim.simulators.sensor_simulators import TemperatureDrift

__all__ = ['TemperatureDrift']
