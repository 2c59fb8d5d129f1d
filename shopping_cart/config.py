"""設定とロギングの初期化."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOGGER_NAME = "shopping_cart"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "WARNING"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """実行時設定."""

    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level!r}. Valid levels are {_VALID_LOG_LEVELS}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から設定を生成する.

        SHOPPING_CART_LOG_LEVEL:
            "DEBUG" / "INFO" / "WARNING" / "ERROR" / "CRITICAL"
            未設定      → WARNING（デフォルト）
        """
        log_level = os.environ.get("SHOPPING_CART_LOG_LEVEL")
        if not log_level:
            return cls()

        normalized = log_level.strip().upper()
        if normalized not in _VALID_LOG_LEVELS:
            logger.warning(
                "Unknown SHOPPING_CART_LOG_LEVEL=%s, falling back to %s", log_level, DEFAULT_LOG_LEVEL
            )
            return cls()
        return cls(log_level=normalized)


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """パッケージのロガーにコンソール出力を設定する.

    複数回呼び出してもハンドラは重複しない（レベルのみ更新される）。
    """
    settings = settings or Settings.from_env()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(settings.log_level)

    if package_logger.handlers:
        return package_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
