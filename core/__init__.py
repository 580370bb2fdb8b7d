"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .config import WalkConfig
from .logging import JsonFormatter, configure_logging, utc_now

__all__ = [
    "WalkConfig",
    "JsonFormatter",
    "configure_logging",
    "utc_now",
]
