from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QLineEdit, QPushButton, QSlider, QLabel,
                             QDoubleSpinBox, QCheckBox, QGroupBox, QComboBox, QFormLayout)
from PyQt6.QtCore import pyqtSignal, Qt

from hinge.gui.state import AppState
from hinge.core.persistence import PersistenceManager

class Sidebar(QWidget):
    """
    Control Room Sidebar.
    1. Opening angle
    2. Structure parameters
    3. Fillets
    4. Design Management (Save/Load)
    5. Sweep
    """

    # Signals to notify parent to re-evaluate or run a sweep
    params_changed = pyqtSignal()
    sweep_requested = pyqtSignal()
    save_requested = pyqtSignal(str)
    load_requested = pyqtSignal(str)

    def __init__(self, state: AppState, parent=None):
        super().__init__(parent)
        self.state = state
        self.layout = QVBoxLayout()
        self.setLayout(self.layout)

        self.pm = PersistenceManager(base_path=state.storage_path)
        self.spin_boxes = {}

        self.init_angle()
        self.init_structure()
        self.init_fillets()
        self.init_persistence()
        self.init_sweep()

        self.layout.addStretch()

    def init_angle(self):
        gb = QGroupBox("Opening Angle")
        form = QFormLayout()

        self.lbl_angle = QLabel(f"{self.state.params.angle:g}°")
        self.slider_angle = QSlider(Qt.Orientation.Horizontal)
        self.slider_angle.setRange(0, 180)
        self.slider_angle.setSingleStep(1)
        self.slider_angle.setValue(int(self.state.params.angle))
        self.slider_angle.valueChanged.connect(self.on_angle_change)
        form.addRow(self.lbl_angle, self.slider_angle)

        self.cb_trace = QCheckBox("Show Nose Trace")
        self.cb_trace.setChecked(self.state.params.show_trace)
        self.cb_trace.toggled.connect(lambda v: self.on_param_change("show_trace", v))
        form.addRow(self.cb_trace)

        gb.setLayout(form)
        self.layout.addWidget(gb)

    def _add_float(self, form, label, attr, min_v, max_v, step=0.1):
        sb = QDoubleSpinBox()
        sb.setDecimals(2)
        sb.setRange(min_v, max_v)
        sb.setSingleStep(step)
        sb.setValue(getattr(self.state.params, attr))
        sb.valueChanged.connect(lambda v: self.on_param_change(attr, v))
        form.addRow(label, sb)
        self.spin_boxes[attr] = sb

    def init_structure(self):
        gb = QGroupBox("Structure (mm)")
        form = QFormLayout()
        self._add_float(form, "LCD Thickness", "lcd_thickness", 0.0, 50.0)
        self._add_float(form, "System Thickness", "system_thickness", 0.0, 100.0)
        self._add_float(form, "Pivot Horizontal", "pivot_horizontal_offset", -100.0, 100.0)
        self._add_float(form, "Pivot Vertical", "pivot_vertical_offset", -100.0, 100.0)
        self._add_float(form, "Initial Gap", "initial_gap", 0.0, 20.0)
        gb.setLayout(form)
        self.layout.addWidget(gb)

    def init_fillets(self):
        gb = QGroupBox("Fillets (mm)")
        form = QFormLayout()
        self._add_float(form, "LCD Front-Bottom", "lcd_fillet", 0.0, 50.0)
        self._add_float(form, "System Front-Top", "system_top_fillet", 0.0, 50.0)
        self._add_float(form, "System Front-Bottom", "system_bottom_fillet", 0.0, 50.0)
        gb.setLayout(form)
        self.layout.addWidget(gb)

    def init_persistence(self):
        gb = QGroupBox("Design Management")
        form = QFormLayout()

        self.save_name = QLineEdit("New_Design")
        btn_save = QPushButton("Save Current")
        btn_save.clicked.connect(lambda: self.save_requested.emit(self.save_name.text()))
        form.addRow(self.save_name, btn_save)

        self.combo_load = QComboBox()
        self.refresh_load_list()
        btn_load = QPushButton("Load")
        btn_load.clicked.connect(self.load_design)
        form.addRow(self.combo_load, btn_load)

        gb.setLayout(form)
        self.layout.addWidget(gb)

    def init_sweep(self):
        self.btn_sweep = QPushButton("▶ RUN SWEEP (0-180°)")
        self.btn_sweep.setStyleSheet("background-color: #2e7d32; color: white; font-weight: bold; padding: 5px;")
        self.btn_sweep.clicked.connect(self.sweep_requested.emit)
        self.layout.addWidget(self.btn_sweep)

    def refresh_load_list(self):
        self.combo_load.clear()
        self.combo_load.addItems(self.pm.list_designs())

    def load_design(self):
        name = self.combo_load.currentText()
        if not name:
            return
        self.load_requested.emit(name)

    def on_angle_change(self, val):
        self.lbl_angle.setText(f"{val}°")
        self.on_param_change("angle", float(val))

    def on_param_change(self, attr, val):
        self.state.update_param(attr, val)
        self.params_changed.emit()

    def update_widgets_from_state(self):
        # Block signals so loading a design triggers a single re-evaluation
        p = self.state.params
        for attr, sb in self.spin_boxes.items():
            sb.blockSignals(True)
            sb.setValue(getattr(p, attr))
            sb.blockSignals(False)
        self.slider_angle.blockSignals(True)
        self.slider_angle.setValue(int(p.angle))
        self.slider_angle.blockSignals(False)
        self.lbl_angle.setText(f"{p.angle:g}°")
        self.cb_trace.blockSignals(True)
        self.cb_trace.setChecked(p.show_trace)
        self.cb_trace.blockSignals(False)
