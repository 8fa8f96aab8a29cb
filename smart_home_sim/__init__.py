"""Smart Home Simulator - scheduled and sensor-driven device control"""

__version__ = "1.0.0"
