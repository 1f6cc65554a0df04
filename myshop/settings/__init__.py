# Settings package
from myshop.settings.app_settings import AppSettings, get_app_settings
from myshop.settings.database_settings import DatabaseSettings

__all__ = ["AppSettings", "DatabaseSettings", "get_app_settings"]
