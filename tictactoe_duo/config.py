import logging
import os
from dataclasses import dataclass, field

LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Theme:
    """
    fixed light theme colors
    """
    primary: str = "#1976d2"        # X, title
    secondary: str = "#ffffff"      # window background
    accent: str = "#ff9800"         # O, winning cells
    grid_border: str = "#e0e0e0"
    empty_text: str = "#374151"
    win_background: str = "#fffbe8"
    muted_text: str = "#8e99a7"     # footer


@dataclass
class AppConfig:
    window_title: str = "Tic Tac Toe"
    log_level: str = DEFAULT_LOG_LEVEL
    theme: Theme = field(default_factory=Theme)

    @property
    def log_level_value(self):
        return logging.getLevelName(self.log_level)


def load_config(log_level=None, environ=None):
    """
    build AppConfig; explicit log_level beats env var beats default
    """
    env = os.environ if environ is None else environ
    level = (log_level or env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LEVEL_NAMES:
        raise ValueError(f"unknown log level: {level!r}")
    return AppConfig(log_level=level)
