# main.py
from __future__ import annotations
import sys
import logging

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import EngineConfig, load_config
from app.errors import ConfigError
from app.themes import theme_index
from services.session_controller import SessionController
from services.session_engine import SessionEngine
from ui.main_window import MainWindow
from utils.file_handler import load_paragraphs, make_paragraph_source


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("speedtype.log", encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        if QApplication.instance() is not None:
            QMessageBox.critical(None, "Application Error", f"{exctype.__name__}: {value}")
        sys.exit(1)

    sys.excepthook = excepthook


def build_controller(cfg: EngineConfig) -> SessionController:
    source = make_paragraph_source(load_paragraphs(cfg.paragraph_file))
    engine = SessionEngine(
        source,
        base_duration=cfg.base_duration,
        word_bonus=cfg.word_bonus,
        word_penalty=cfg.word_penalty,
    )
    return SessionController(engine, tick_ms=cfg.tick_ms)


def main() -> int:
    setup_logging()
    try:
        cfg = load_config()
    except ConfigError as e:
        logging.error("Invalid configuration: %s", e)
        return 2

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Speedtype")

    controller = build_controller(cfg)
    win = MainWindow(controller, theme_idx=theme_index(cfg.theme))
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
