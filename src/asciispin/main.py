"""
Application Initialization
==========================
This module builds the Qt application and the main window and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the wiring root of the window variant. It:
1. Sets up logging.
2. Creates the QApplication.
3. Creates the Main Window, optionally preloading an image from argv.
"""
import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from asciispin.config import VISIBLE_APP_NAME
from asciispin.logging_config import setup_logging
from asciispin.view.main_window import MainWindow

APP_ID = "asciispin"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main() -> None:
    # Use logging.DEBUG to see frame timings during development
    setup_logging(level=logging.INFO)

    app = create_app()

    window = MainWindow()
    window.show()

    # An image path on the command line is loaded right away
    args = app.arguments()[1:]
    if args:
        window.load_image(args[0])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
