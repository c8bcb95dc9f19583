import logging
import threading
import time
import traceback
from dataclasses import dataclass
from typing import List, Optional

from PySide6 import QtCore, QtGui

from ascii_art.render.ascii import SourceImage, make_ascii_lines
from ascii_art.render.charsets import get_ramp
from ascii_art.render.color import display_color
from ascii_art.render.errors import ConversionCancelled
from ascii_art.render.rendering import pil_to_qimage, render_lines_to_rgba
from ascii_art.utils.fonts import load_mono_font

logger = logging.getLogger(__name__)

RENDER_FONT_SIZE = 12


def is_stale(request_id: int, last_applied_id: int) -> bool:
    """A newer request has already been shown; drop this one's outcome."""
    return request_id < last_applied_id


@dataclass
class ConvertParams:
    width: int
    height: int
    ramp_name: str
    color_name: str
    render_preview: bool = False


@dataclass
class ConvertResult:
    art: str
    lines: List[str]
    width: int
    height: int
    ramp_name: str
    color_name: str
    elapsed_s: float
    render_qimage: Optional[QtGui.QImage] = None


class WorkerSignals(QtCore.QObject):
    result = QtCore.Signal(int, object)
    error = QtCore.Signal(int, str)
    cancelled = QtCore.Signal(int)


class ConvertWorker(QtCore.QRunnable):
    def __init__(self, request_id: int, source: SourceImage, params: ConvertParams):
        super().__init__()
        self.request_id = request_id
        self.source = source
        self.params = params
        self.signals = WorkerSignals()
        self._cancel = threading.Event()

    def cancel(self):
        self._cancel.set()

    @QtCore.Slot()
    def run(self):
        t0 = time.perf_counter()
        try:
            ramp = get_ramp(self.params.ramp_name)
            lines = make_ascii_lines(
                self.source,
                self.params.width,
                self.params.height,
                ramp,
                should_cancel=self._cancel.is_set,
            )

            render_qimage = None
            if self.params.render_preview:
                font = load_mono_font(RENDER_FONT_SIZE)
                fg = display_color(self.params.color_name).text_rgb
                render_qimage = pil_to_qimage(render_lines_to_rgba(lines, font, fg))

            rr = ConvertResult(
                art="".join(line + "\n" for line in lines),
                lines=lines,
                width=self.params.width,
                height=self.params.height,
                ramp_name=self.params.ramp_name,
                color_name=self.params.color_name,
                elapsed_s=time.perf_counter() - t0,
                render_qimage=render_qimage,
            )
            self.signals.result.emit(self.request_id, rr)

        except ConversionCancelled:
            logger.debug("request %d cancelled", self.request_id)
            self.signals.cancelled.emit(self.request_id)
        except Exception:
            logger.exception("request %d failed", self.request_id)
            self.signals.error.emit(self.request_id, traceback.format_exc())
