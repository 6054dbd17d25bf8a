# Demo configuration and run records

from .config_manager import ConfigManager, DemoConfig
from .run_logger import RunLogger

__all__ = ['ConfigManager', 'DemoConfig', 'RunLogger']
