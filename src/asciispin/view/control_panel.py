"""
Rotation Control Panel
"""
from __future__ import annotations

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QDoubleSpinBox, QGroupBox, QFormLayout
)
from PySide6.QtCore import Signal

from asciispin.config import DEFAULT_SPEED, SPEED_MIN, SPEED_MAX, SPEED_STEP
from asciispin.model.state import Axis


class RotationControlPanel(QWidget):
    # Emitted when the user asks to pick a new image
    select_image_requested = Signal()
    axis_selected = Signal(str)
    speed_changed = Signal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)

        # --- File row ---
        file_row = QHBoxLayout()
        self.btn_select = QPushButton("Select Image")
        self.btn_select.clicked.connect(self.select_image_requested.emit)
        file_row.addWidget(self.btn_select)

        self.lbl_file = QLabel("")
        file_row.addWidget(self.lbl_file, 1)
        layout.addLayout(file_row)

        # --- Axis Group ---
        grp = QGroupBox("Rotation")
        form = QFormLayout(grp)

        axis_row = QHBoxLayout()
        self.axis_buttons: dict[Axis, QPushButton] = {}
        for axis in Axis:
            btn = QPushButton(axis.value.upper())
            btn.clicked.connect(lambda _checked=False, a=axis: self.axis_selected.emit(a.value))
            axis_row.addWidget(btn)
            self.axis_buttons[axis] = btn
        form.addRow("Rotation Axis:", axis_row)

        self.lbl_axis = QLabel("")
        form.addRow(self.lbl_axis)

        self.speed_spin = QDoubleSpinBox()
        self.speed_spin.setRange(SPEED_MIN, SPEED_MAX)
        self.speed_spin.setSingleStep(SPEED_STEP)
        self.speed_spin.setDecimals(2)
        self.speed_spin.setValue(DEFAULT_SPEED)
        self.speed_spin.valueChanged.connect(self.speed_changed.emit)
        form.addRow("Rotation Speed:", self.speed_spin)

        layout.addWidget(grp)

    # --- STATUS ---

    def set_file(self, path: str) -> None:
        self.lbl_file.setText(f"File: {path}")

    def set_axis(self, axis: str) -> None:
        self.lbl_axis.setText(f"Current Rotation Axis: {axis}")
