# Settings package
from ordering.settings.app_settings import OrderingSettings, get_settings

__all__ = ["OrderingSettings", "get_settings"]
