"""
Main Application Window
=======================
The GUI container: the control panel on top, the ASCII panel below.

Why is this file needed?
------------------------
1. Layout: It organizes the controls and the monospace output panel.
2. Routing: It connects the control signals to the render loop and drives
   one frame per timer tick (redraw-callback model).
"""
import logging
import os
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPlainTextEdit, QFileDialog, QMessageBox
)
from PySide6.QtCore import QTimer
from PySide6.QtGui import QFontDatabase

from asciispin.config import (
    WIDTH, HEIGHT, VISIBLE_APP_NAME, WINDOW_SIZE, IMAGE_FILTER, GUI_FRAME_INTERVAL_MS
)
from asciispin.controller.render_loop import RenderLoop
from asciispin.model.clock import ElapsedTimePolicy
from asciispin.model.errors import ImageLoadError
from asciispin.model.io import load_grid
from asciispin.model.quantizer import grid_to_text
from asciispin.model.state import Axis, RotationMode
from asciispin.view.control_panel import RotationControlPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        super().__init__()
        self.grid_width = width
        self.grid_height = height
        self.selected_file: Optional[str] = None
        self.loop: Optional[RenderLoop] = None
        self.axis: Axis = Axis.Z

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. CONTROLS ---
        self.controls = RotationControlPanel()
        self.controls.set_axis(self.axis.value)
        main_layout.addWidget(self.controls)

        # --- 2. ASCII PANEL ---
        self.ascii_view = QPlainTextEdit()
        self.ascii_view.setReadOnly(True)
        self.ascii_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.ascii_view.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        main_layout.addWidget(self.ascii_view, 1)

        # --- SIGNAL CONNECTIONS ---
        self.controls.select_image_requested.connect(self.on_select_image)
        self.controls.axis_selected.connect(self.on_axis_selected)
        self.controls.speed_changed.connect(self.on_speed_changed)

        # --- FRAME TIMER ---
        self.timer = QTimer(self)
        self.timer.setInterval(GUI_FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self.on_frame)

    # --- SLOTS ---

    def on_select_image(self) -> None:
        fname, _ = QFileDialog.getOpenFileName(self, "Select Image", "", IMAGE_FILTER)
        if fname:
            self.load_image(fname)

    def load_image(self, path: str) -> bool:
        """Build the grid for path; on failure the previous animation keeps running."""
        try:
            grid = load_grid(path, self.grid_width, self.grid_height)
        except ImageLoadError as e:
            logger.error(str(e))
            QMessageBox.critical(self, "Error", f"Could not open image:\n{e.reason}")
            return False

        self.selected_file = path
        self.controls.set_file(path)
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{os.path.basename(path)}]")

        if self.loop is None:
            self.loop = RenderLoop(
                grid,
                policy=ElapsedTimePolicy(),
                mode=RotationMode.THREE_AXIS,
                axis=self.axis,
                speed=self.controls.speed_spin.value(),
            )
        else:
            self.loop.set_base_grid(grid)

        if not self.timer.isActive():
            self.timer.start()
        return True

    def on_axis_selected(self, token: str) -> None:
        axis = Axis.parse(token)
        if axis is None:
            logger.warning(f"Ignoring unknown axis '{token}'.")
            return
        self.axis = axis
        self.controls.set_axis(axis.value)
        if self.loop is not None:
            self.loop.select_axis(axis)

    def on_speed_changed(self, value: float) -> None:
        if self.loop is not None:
            self.loop.set_speed(value)

    def on_frame(self) -> None:
        if self.loop is None:
            return
        grid = self.loop.step()
        self.ascii_view.setPlainText(grid_to_text(grid))

    def closeEvent(self, event, /) -> None:
        self.timer.stop()
        event.accept()
