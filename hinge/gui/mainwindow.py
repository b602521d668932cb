from PyQt6.QtWidgets import QMainWindow, QDockWidget, QLabel
from PyQt6.QtCore import Qt

from hinge.gui.state import AppState
from hinge.gui.viewport import ProfileViewport
from hinge.gui.sidebar import Sidebar
from hinge.gui.theme import Theme
from hinge.physics.engine import HingeKernel, SimulationResult
from hinge.simulation import SimulationRunner
from hinge.app.visualizer import gap_label, status_label

class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Hinge-Sim Desktop v1.0")
        self.resize(1280, 800)

        # 1. Init State (Defaults)
        self.state = AppState()
        self.kernel = HingeKernel(self.state.config)

        # 2. Central 2D View
        self.viewport = ProfileViewport(self.state, self)
        self.setCentralWidget(self.viewport)

        # 3. Create Docks
        self.create_docks()

        # 4. Status Bar (gap + status badge)
        self.lbl_gap = QLabel()
        self.lbl_status = QLabel()
        self.statusBar().addPermanentWidget(self.lbl_gap)
        self.statusBar().addPermanentWidget(self.lbl_status)
        self.statusBar().showMessage("Ready")

        self.refresh()

    def create_docks(self):
        dock_left = QDockWidget("Control Room", self)
        dock_left.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea)
        self.sidebar = Sidebar(self.state)
        dock_left.setWidget(self.sidebar)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, dock_left)

        # --- CONNECTIONS ---
        self.sidebar.params_changed.connect(self.refresh)
        self.sidebar.sweep_requested.connect(self.run_sweep)
        self.sidebar.save_requested.connect(self.on_save_requested)
        self.sidebar.load_requested.connect(self.on_load_requested)

    def refresh(self):
        # Full re-evaluation on every parameter change
        result = self.kernel.evaluate(self.state.params)
        self.state.trace.update(result, self.state.params.show_trace)
        self.viewport.update_scene(result)
        self.show_result(result)

    def show_result(self, result: SimulationResult):
        self.lbl_gap.setText(f"Min Gap: {gap_label(result)}")
        color = Theme.status_color(result.status)
        self.lbl_status.setText(status_label(result))
        self.lbl_status.setStyleSheet(
            f"background-color: {color}; color: white; font-weight: bold; padding: 2px 8px; border-radius: 8px;"
        )
        self.viewport.setBackground(Theme.status_background(result.status))

    def run_sweep(self):
        self.statusBar().showMessage("Sweeping 0-180°...")
        runner = SimulationRunner(self.state.config)
        self.state.sweep = runner.run_sweep(self.state.params)
        summary = runner.summarize(self.state.sweep)
        first = summary["first_collision_angle"]
        if first is None:
            self.statusBar().showMessage(
                f"Sweep Complete. Min clearance {summary['min_clearance']:.3f} mm, no collision.")
        else:
            self.statusBar().showMessage(
                f"Sweep Complete. {summary['collision_count']} collision samples, first at {first:g}°.")

    def on_save_requested(self, name):
        self.statusBar().showMessage(f"Saving to {name}...")
        try:
            clean = self.sidebar.pm.save_design(name, self.state.params, self.state.config, self.state.sweep)
            self.sidebar.refresh_load_list()
            self.statusBar().showMessage(f"Saved: {clean}")
        except (ValueError, OSError) as e:
            self.statusBar().showMessage(f"Save Failed: {e}")

    def on_load_requested(self, name):
        try:
            params, cfg, sweep = self.sidebar.pm.load_design(name)
        except (FileNotFoundError, ValueError) as e:
            self.statusBar().showMessage(f"Load Error: {e}")
            return
        self.state.params = params
        self.state.config = cfg
        self.state.sweep = sweep
        self.state.trace.clear()
        self.kernel = HingeKernel(cfg)
        self.sidebar.update_widgets_from_state()
        self.refresh()
        self.statusBar().showMessage(f"Loaded: {name}")
