import logging
import os
from typing import Dict, Optional

from PIL import Image
from PySide6 import QtCore, QtGui, QtWidgets

from ascii_art.config import DEFAULT_DISPLAY_COLOR, DEFAULT_EXPORT_NAME, DEFAULT_RAMP
from ascii_art.render.ascii import SourceImage
from ascii_art.render.charsets import RAMP_LABELS, ramp_names
from ascii_art.render.color import DISPLAY_COLORS, display_color, rgb_hex
from ascii_art.render.dimensions import DimensionState, Driver, ratio_label
from ascii_art.render.errors import ImageDecodeError
from ascii_art.render.export import save_png, save_svg, save_text, svg_text_export
from ascii_art.render.loading import OPEN_FILTER, load_source_image
from ascii_art.render.rendering import pil_to_qimage, render_lines_to_rgba
from ascii_art.utils.fonts import load_mono_font, measure_char_cell, preview_font_px
from ascii_art.utils.theme import apply_theme, next_theme
from ascii_art.worker import RENDER_FONT_SIZE, ConvertParams, ConvertResult, ConvertWorker, is_stale

logger = logging.getLogger(__name__)


class ImageView(QtWidgets.QLabel):
    def __init__(self):
        super().__init__()
        self.setAlignment(QtCore.Qt.AlignCenter)
        self.setMinimumSize(320, 220)
        self._pixmap: Optional[QtGui.QPixmap] = None
        self.setStyleSheet("QLabel { background: #0F0F12; border-radius: 10px; border: 1px solid #2B2B30; }")

    def set_image(self, qimage: Optional[QtGui.QImage]):
        self._pixmap = QtGui.QPixmap.fromImage(qimage) if qimage is not None else None
        self._update_scaled()

    def resizeEvent(self, event: QtGui.QResizeEvent):
        super().resizeEvent(event)
        self._update_scaled()

    def _update_scaled(self):
        if self._pixmap is None:
            self.setPixmap(QtGui.QPixmap())
            return
        scaled = self._pixmap.scaled(self.size(), QtCore.Qt.KeepAspectRatio, QtCore.Qt.SmoothTransformation)
        self.setPixmap(scaled)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, theme: str = "dark"):
        super().__init__()
        self.setWindowTitle("ASCII Art")
        self.resize(1400, 900)

        self.thread_pool = QtCore.QThreadPool.globalInstance()
        self._active_workers: Dict[int, ConvertWorker] = {}

        self.source: Optional[SourceImage] = None
        self.dims = DimensionState()
        self.last_result: Optional[ConvertResult] = None
        self.theme = theme

        self.request_id = 0
        self.last_applied_id = 0

        self._build_ui()
        self._sync_dimension_inputs()
        self.set_controls_enabled(False)

    # ----------------------------
    # Layout
    # ----------------------------
    def _build_ui(self):
        central = QtWidgets.QWidget()
        self.setCentralWidget(central)
        root = QtWidgets.QHBoxLayout(central)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(12)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Horizontal)
        root.addWidget(splitter)

        # LEFT controls
        left = QtWidgets.QWidget()
        controls = QtWidgets.QVBoxLayout(left)
        controls.setContentsMargins(0, 0, 0, 0)
        controls.setSpacing(10)

        g_img = QtWidgets.QGroupBox("Image")
        l_img = QtWidgets.QVBoxLayout(g_img)
        btn_open = QtWidgets.QPushButton("Open image…")
        btn_open.clicked.connect(self.open_image)
        l_img.addWidget(btn_open)
        self.image_view = ImageView()
        l_img.addWidget(self.image_view)
        controls.addWidget(g_img)

        g_set = QtWidgets.QGroupBox("Settings")
        form = QtWidgets.QFormLayout(g_set)

        self.cmb_ramp = QtWidgets.QComboBox()
        for name in ramp_names():
            self.cmb_ramp.addItem(RAMP_LABELS.get(name, name), name)
        self.cmb_ramp.setCurrentIndex(self.cmb_ramp.findData(DEFAULT_RAMP))
        form.addRow("Detail level", self.cmb_ramp)

        int_only = QtGui.QRegularExpressionValidator(QtCore.QRegularExpression(r"\d{0,4}"))
        self.edit_width = QtWidgets.QLineEdit()
        self.edit_width.setValidator(int_only)
        self.edit_width.editingFinished.connect(self.on_width_committed)
        self.edit_height = QtWidgets.QLineEdit()
        self.edit_height.setValidator(int_only)
        self.edit_height.editingFinished.connect(self.on_height_committed)
        form.addRow("Width (chars)", self.edit_width)
        form.addRow("Height (lines)", self.edit_height)

        self.chk_lock = QtWidgets.QCheckBox("Lock aspect ratio")
        self.chk_lock.setChecked(self.dims.locked)
        self.chk_lock.toggled.connect(self.on_lock_toggled)
        form.addRow(self.chk_lock)
        self.lbl_ratio = QtWidgets.QLabel(ratio_label(self.dims.ratio))
        form.addRow(self.lbl_ratio)

        self.cmb_color = QtWidgets.QComboBox()
        for name, c in DISPLAY_COLORS.items():
            self.cmb_color.addItem(c.label, name)
        self.cmb_color.setCurrentIndex(self.cmb_color.findData(DEFAULT_DISPLAY_COLOR))
        self.cmb_color.currentIndexChanged.connect(self._apply_output_style)
        form.addRow("Text color", self.cmb_color)
        controls.addWidget(g_set)

        self.btn_convert = QtWidgets.QPushButton("Convert to ASCII")
        self.btn_convert.clicked.connect(self.dispatch_convert)
        controls.addWidget(self.btn_convert)

        self.btn_theme = QtWidgets.QPushButton()
        self.btn_theme.clicked.connect(self.toggle_theme)
        controls.addWidget(self.btn_theme)
        self._update_theme_button()
        controls.addStretch(1)
        splitter.addWidget(left)

        # RIGHT output
        right = QtWidgets.QWidget()
        out_layout = QtWidgets.QVBoxLayout(right)
        out_layout.setContentsMargins(0, 0, 0, 0)

        row = QtWidgets.QHBoxLayout()
        self.lbl_badge = QtWidgets.QLabel("")
        row.addWidget(self.lbl_badge)
        row.addStretch(1)
        self.output_buttons = []
        for text, slot in (("Copy", self.copy_latest_text),
                           ("Save .txt", self.save_latest_txt),
                           ("Export PNG", self.export_png),
                           ("Export SVG", self.export_svg)):
            b = QtWidgets.QPushButton(text)
            b.clicked.connect(slot)
            row.addWidget(b)
            self.output_buttons.append(b)
        out_layout.addLayout(row)

        tabs = QtWidgets.QTabWidget()
        self.output_text = QtWidgets.QPlainTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setLineWrapMode(QtWidgets.QPlainTextEdit.NoWrap)
        self.render_view = ImageView()
        tabs.addTab(self.output_text, "Text")
        tabs.addTab(self.render_view, "Render Preview")
        out_layout.addWidget(tabs)
        splitter.addWidget(right)
        splitter.setSizes([460, 940])

        self.status = QtWidgets.QStatusBar()
        self.setStatusBar(self.status)
        self.status.showMessage("Open an image to begin.")
        self._apply_output_style()

    def set_controls_enabled(self, enabled: bool):
        self.btn_convert.setEnabled(enabled and self.source is not None)
        for b in self.output_buttons:
            b.setEnabled(enabled and self.last_result is not None)

    # ----------------------------
    # Dimensions
    # ----------------------------
    def _sync_dimension_inputs(self):
        self.edit_width.setText(str(self.dims.width))
        self.edit_height.setText(str(self.dims.height))

    def on_width_committed(self):
        self.dims = self.dims.edit(self.edit_width.text(), Driver.WIDTH)
        self._sync_dimension_inputs()

    def on_height_committed(self):
        self.dims = self.dims.edit(self.edit_height.text(), Driver.HEIGHT)
        self._sync_dimension_inputs()

    def on_lock_toggled(self, checked: bool):
        self.dims = self.dims.set_locked(checked)

    # ----------------------------
    # File operations
    # ----------------------------
    def open_image(self):
        path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Open Image", "", OPEN_FILTER)
        if not path:
            return
        try:
            source = load_source_image(path)
        except ImageDecodeError as e:
            QtWidgets.QMessageBox.critical(self, "Open error", str(e))
            self.status.showMessage("Could not read that image.")
            return

        self.source = source
        self.dims = self.dims.image_loaded(source.width, source.height)
        self.lbl_ratio.setText(ratio_label(self.dims.ratio))
        self._sync_dimension_inputs()

        preview = Image.fromarray(source.pixels)
        self.image_view.set_image(pil_to_qimage(preview))
        self.set_controls_enabled(True)
        self.status.showMessage(f"Loaded: {os.path.basename(path)} | {source.width}×{source.height}")

    def copy_latest_text(self):
        if not self.last_result:
            return
        QtWidgets.QApplication.clipboard().setText(self.last_result.art)
        self.status.showMessage("Copied to clipboard.")

    def save_latest_txt(self):
        if not self.last_result:
            return
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save .txt", DEFAULT_EXPORT_NAME, "Text (*.txt)")
        if not path:
            return
        try:
            path = save_text(self.last_result.art, path)
        except OSError as e:
            QtWidgets.QMessageBox.critical(self, "Save error", str(e))
            return
        self.status.showMessage(f"Saved: {os.path.basename(path)}")

    def _render_latest(self) -> Image.Image:
        font = load_mono_font(RENDER_FONT_SIZE)
        fg = display_color(self.current_color()).text_rgb
        return render_lines_to_rgba(self.last_result.lines, font, fg)

    def export_png(self):
        if not self.last_result:
            return
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export PNG", "ascii-art.png", "PNG (*.png)")
        if not path:
            return
        try:
            path = save_png(self._render_latest(), path)
        except OSError as e:
            QtWidgets.QMessageBox.critical(self, "Export error", str(e))
            return
        self.status.showMessage(f"Exported: {os.path.basename(path)}")

    def export_svg(self):
        if not self.last_result:
            return
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export SVG", "ascii-art.svg", "SVG (*.svg)")
        if not path:
            return
        char_w, line_h = measure_char_cell(load_mono_font(RENDER_FONT_SIZE))
        svg = svg_text_export(
            self.last_result.lines,
            fg_rgb=display_color(self.current_color()).text_rgb,
            font_size_px=RENDER_FONT_SIZE,
            char_w=char_w,
            line_h=line_h,
        )
        try:
            path = save_svg(svg, path)
        except OSError as e:
            QtWidgets.QMessageBox.critical(self, "Export error", str(e))
            return
        self.status.showMessage(f"Exported: {os.path.basename(path)}")

    # ----------------------------
    # Display
    # ----------------------------
    def current_ramp(self) -> str:
        return self.cmb_ramp.currentData() or DEFAULT_RAMP

    def current_color(self) -> str:
        return self.cmb_color.currentData() or DEFAULT_DISPLAY_COLOR

    def _apply_output_style(self):
        c = display_color(self.current_color())
        self.output_text.setStyleSheet(
            f"QPlainTextEdit {{ background: #000000; color: {rgb_hex(c.text_rgb)}; "
            f"border: 2px solid {rgb_hex(c.border_rgb)}; border-radius: 10px; }}"
        )
        width = self.last_result.width if self.last_result else self.dims.width
        font = QtGui.QFont("Consolas")
        font.setStyleHint(QtGui.QFont.Monospace)
        font.setPixelSize(max(1, int(round(preview_font_px(width)))))
        self.output_text.setFont(font)

    def toggle_theme(self):
        self.theme = next_theme(self.theme)
        apply_theme(QtWidgets.QApplication.instance(), self.theme)
        self._update_theme_button()

    def _update_theme_button(self):
        self.btn_theme.setText("Light theme" if self.theme == "dark" else "Dark theme")

    # ----------------------------
    # Scheduling
    # ----------------------------
    def dispatch_convert(self):
        if self.source is None:
            return
        # commit any half-typed value before reading dims
        if self.edit_width.hasFocus():
            self.on_width_committed()
        elif self.edit_height.hasFocus():
            self.on_height_committed()

        for w in self._active_workers.values():
            w.cancel()

        self.request_id += 1
        rid = self.request_id
        params = ConvertParams(
            width=self.dims.width,
            height=self.dims.height,
            ramp_name=self.current_ramp(),
            color_name=self.current_color(),
            render_preview=True,
        )
        worker = ConvertWorker(rid, self.source, params)
        worker.signals.result.connect(self.on_worker_result)
        worker.signals.error.connect(self.on_worker_error)
        worker.signals.cancelled.connect(self.on_worker_cancelled)
        self._active_workers[rid] = worker

        self.thread_pool.start(worker)
        self.btn_convert.setText("Converting…")
        self.btn_convert.setEnabled(False)
        self.status.showMessage("Converting…")

    def _worker_finished(self, rid: int):
        self._active_workers.pop(rid, None)
        if not self._active_workers:
            self.btn_convert.setText("Convert to ASCII")
            self.set_controls_enabled(True)

    @QtCore.Slot(int, object)
    def on_worker_result(self, rid: int, result: ConvertResult):
        if is_stale(rid, self.last_applied_id):
            self._worker_finished(rid)
            return
        self.last_applied_id = rid
        self.last_result = result
        self._worker_finished(rid)

        self.output_text.setPlainText(result.art)
        self._apply_output_style()
        self.render_view.set_image(result.render_qimage)
        self.lbl_badge.setText(f"{result.width} × {result.height} | {result.ramp_name}")
        self.status.showMessage(f"Converted in {result.elapsed_s * 1000:.0f} ms")

    @QtCore.Slot(int)
    def on_worker_cancelled(self, rid: int):
        self._worker_finished(rid)

    @QtCore.Slot(int, str)
    def on_worker_error(self, rid: int, msg: str):
        self._worker_finished(rid)
        if is_stale(rid, self.last_applied_id):
            return
        self.status.showMessage("Conversion error (see log).")
        QtWidgets.QMessageBox.critical(self, "Conversion error", msg.strip().splitlines()[-1])
