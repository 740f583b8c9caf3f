"""
Heat Pump Monitor
Scrapes heat pump listings into a CSV history and summarizes it
"""

__version__ = "1.0.0"

from .core.monitor import HeatPumpMonitor
from .core.config import MonitorConfig

__all__ = ["HeatPumpMonitor", "MonitorConfig"]
