from pricechain.core.config import AppConfig, load_config
from pricechain.core.logs import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "configure_logging",
    "get_logger",
    "load_config",
]
