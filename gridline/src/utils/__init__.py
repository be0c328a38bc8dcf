from .logger import get_logger
from .config_loader import load_config, load_line_config, validate_line_config

__all__ = [
    "get_logger",
    "load_config",
    "load_line_config",
    "validate_line_config",
]
