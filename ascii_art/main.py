import logging
import sys
from PySide6 import QtWidgets

from ascii_art.config import LOG_FORMAT, LOG_LEVEL
from ascii_art.ui import MainWindow
from ascii_art.utils.theme import apply_theme


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("ASCII Art")
    apply_theme(app, "dark")

    win = MainWindow(theme="dark")
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
