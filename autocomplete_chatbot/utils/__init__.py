# autocomplete_chatbot/utils/__init__.py
# ambient helpers: logging, config and metrics

from .logger_utils import Log
from .config_manager import Config
from .metrics_tracker import Metrics

__all__ = ["Log", "Config", "Metrics"]
