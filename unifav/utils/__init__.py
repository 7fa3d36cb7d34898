"""Utils module -- config, logging."""

from unifav.utils.config import settings
from unifav.utils.logger import get_logger

__all__ = ["settings", "get_logger"]
