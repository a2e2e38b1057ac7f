"""
Application Initialization
==========================
This module loads the content, builds the window and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Loads the static ContentModel (bundled JSON or a path from argv).
3. Passes the content into the MainWindow.
4. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from portfolio3d.config import DEFAULT_CONTENT_PATH, VISIBLE_APP_NAME
from portfolio3d.logging_config import default_log_path, setup_logging
from portfolio3d.model.content import ContentError
from portfolio3d.model.io import ContentIO
from portfolio3d.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="portfolio3d", description=VISIBLE_APP_NAME)
    parser.add_argument(
        "content", nargs="?", default=DEFAULT_CONTENT_PATH,
        help="Path to the portfolio content JSON (defaults to the bundled one)."
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument(
        "--log-file", nargs="?", const=default_log_path(), default=None,
        help="Also write logs to this file (without a value: ~/.portfolio3d/portfolio3d.log)."
    )
    parser.add_argument("--no-3d", action="store_true", help="Replace the 3D scene by a placeholder.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Load the static content
    try:
        content = ContentIO.load_content(args.content)
    except ContentError:
        logger.critical("Cannot start without portfolio content.")
        raise

    # 3. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 4. Initialize the Main Window, passing the content
    window = MainWindow(content, enable_3d=not args.no_3d)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
