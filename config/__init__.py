from config.settings import get_settings, Settings
from config.database import Database

__all__ = ['get_settings', 'Settings', 'Database']
