from .loader import load_settings
from .schema import IngestionConfig, LoggingConfig, Settings

__all__ = ["IngestionConfig", "LoggingConfig", "Settings", "load_settings"]
