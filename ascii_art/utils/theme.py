from typing import Dict

from PySide6 import QtGui, QtWidgets

_PALETTES: Dict[str, Dict[str, tuple]] = {
    "dark": {
        "window": (20, 20, 22), "alt": (28, 28, 32), "base": (16, 16, 18),
        "text": (230, 230, 235), "disabled": (150, 150, 160),
    },
    "light": {
        "window": (245, 245, 247), "alt": (232, 232, 236), "base": (255, 255, 255),
        "text": (24, 24, 27), "disabled": (140, 140, 150),
    },
}

_STYLES = {
    "dark": """
        QMainWindow { background: #141416; }
        QGroupBox { border: 1px solid #2B2B30; border-radius: 10px; margin-top: 10px; padding: 10px; }
        QGroupBox::title { subcontrol-origin: margin; left: 10px; padding: 0 6px; }
        QPushButton { background: #2A2A31; border: 1px solid #3A3A44; padding: 8px 10px; border-radius: 10px; }
        QPushButton:hover { background: #343440; }
        QPushButton:pressed { background: #202026; }
        QComboBox, QLineEdit { background: #1A1A1E; border: 1px solid #3A3A44; padding: 6px; border-radius: 10px; }
        QScrollArea { border: none; }
    """,
    "light": """
        QMainWindow { background: #F5F5F7; }
        QGroupBox { border: 1px solid #D4D4D8; border-radius: 10px; margin-top: 10px; padding: 10px; }
        QGroupBox::title { subcontrol-origin: margin; left: 10px; padding: 0 6px; }
        QPushButton { background: #E8E8EC; border: 1px solid #C8C8D0; padding: 8px 10px; border-radius: 10px; }
        QPushButton:hover { background: #DCDCE2; }
        QPushButton:pressed { background: #CFCFD6; }
        QComboBox, QLineEdit { background: #FFFFFF; border: 1px solid #C8C8D0; padding: 6px; border-radius: 10px; }
        QScrollArea { border: none; }
    """,
}


def apply_theme(app: QtWidgets.QApplication, name: str):
    if name not in _PALETTES:
        raise ValueError(f"Unknown theme {name!r}")
    c = {k: QtGui.QColor(*v) for k, v in _PALETTES[name].items()}

    palette = QtGui.QPalette()
    palette.setColor(QtGui.QPalette.Window, c["window"])
    palette.setColor(QtGui.QPalette.WindowText, c["text"])
    palette.setColor(QtGui.QPalette.Base, c["base"])
    palette.setColor(QtGui.QPalette.AlternateBase, c["alt"])
    palette.setColor(QtGui.QPalette.Text, c["text"])
    palette.setColor(QtGui.QPalette.Button, c["alt"])
    palette.setColor(QtGui.QPalette.ButtonText, c["text"])
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(72, 122, 255))
    palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(255, 255, 255))
    palette.setColor(QtGui.QPalette.Disabled, QtGui.QPalette.WindowText, c["disabled"])
    palette.setColor(QtGui.QPalette.Disabled, QtGui.QPalette.Text, c["disabled"])
    palette.setColor(QtGui.QPalette.Disabled, QtGui.QPalette.ButtonText, c["disabled"])
    app.setPalette(palette)
    app.setStyleSheet(_STYLES[name])


def next_theme(name: str) -> str:
    return "light" if name == "dark" else "dark"
