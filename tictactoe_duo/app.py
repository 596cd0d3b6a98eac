import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from .config import LEVEL_NAMES, load_config
from .logging_setup import setup_logging
from .ui.main_window import TicTacToeWindow
from .ui.theme import apply_theme_palette

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=LEVEL_NAMES,
                        help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    return parser


def parse_args(argv=None, parser=None):
    parser = parser or build_parser()
    # qt gets whatever we don't recognise
    return parser.parse_known_args(argv)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args, qt_args = parse_args(argv, parser)
    try:
        config = load_config(log_level=args.log_level)
    except ValueError as exc:
        # bad TICTACTOE_LOG_LEVEL, exits with status 2
        parser.error(str(exc))
    setup_logging(config.log_level_value)

    app = QApplication([sys.argv[0], *qt_args])
    apply_theme_palette(app, config.theme)

    window = TicTacToeWindow(config)
    window.show()
    logger.info("window shown, starting event loop")
    return app.exec()
