from .settings import settings, get_settings
from .logging import setup_logging

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
]
