import streamlit as st
import sys
import os

# --- PATH SETUP ---
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.append(project_root)

# --- MODULE IMPORTS ---
from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig
from hinge.core.trace import TraceHistory
from hinge.physics.engine import HingeKernel
from hinge.simulation import SimulationRunner
from hinge.analysis.envelope import EnvelopeMapper
from hinge.analysis.profile_audit import audit_profile
from hinge.app.visualizer import HingeVisualizer, gap_label, status_label
from hinge.gui.theme import Theme

# ==========================================
# 1. PAGE CONFIG
# ==========================================
st.set_page_config(page_title="Hinge-Sim", layout="wide", initial_sidebar_state="expanded")

cfg = ScenarioConfig()
defaults = HingeParameters()

if "trace" not in st.session_state:
    st.session_state["trace"] = TraceHistory(cfg.trace_limit)

# ==========================================
# 2. SIDEBAR CONTROL ROOM
# ==========================================
st.sidebar.title("Hinge Control Room")

angle = st.sidebar.slider("Opening Angle (deg)", 0, 180, int(defaults.angle), 1)

with st.sidebar.expander("Structure (mm)", expanded=True):
    lcd_thickness = st.number_input("LCD Thickness", value=defaults.lcd_thickness, step=0.1)
    system_thickness = st.number_input("System Thickness", value=defaults.system_thickness, step=0.1)
    axis_h = st.number_input("Pivot Horizontal Offset", value=defaults.pivot_horizontal_offset, step=0.1)
    axis_v = st.number_input("Pivot Vertical Offset", value=defaults.pivot_vertical_offset, step=0.1)
    initial_gap = st.number_input("Initial Gap", value=defaults.initial_gap, step=0.1)

with st.sidebar.expander("Fillets (mm)", expanded=True):
    lcd_fillet = st.number_input("LCD Front-Bottom", min_value=0.0, value=defaults.lcd_fillet, step=0.1)
    sys_top = st.number_input("System Front-Top", min_value=0.0, value=defaults.system_top_fillet, step=0.1)
    sys_bot = st.number_input("System Front-Bottom", min_value=0.0, value=defaults.system_bottom_fillet, step=0.1)

show_trace = st.sidebar.checkbox("Show Nose Trace", value=defaults.show_trace)

params = HingeParameters(
    lcd_thickness=lcd_thickness,
    system_thickness=system_thickness,
    pivot_horizontal_offset=axis_h,
    pivot_vertical_offset=axis_v,
    initial_gap=initial_gap,
    lcd_fillet=lcd_fillet,
    system_top_fillet=sys_top,
    system_bottom_fillet=sys_bot,
    angle=float(angle),
    show_trace=show_trace
)

# ==========================================
# 3. EVALUATION
# ==========================================
kernel = HingeKernel(cfg)
result = kernel.evaluate(params)

trace = st.session_state["trace"]
trace.update(result, params.show_trace)

# ==========================================
# 4. HEADER
# ==========================================
col_title, col_gap, col_status = st.columns([3, 1, 1])
with col_title:
    st.title("Laptop Hinge Interference Simulator")
    st.caption("Side view | Origin (0,0) = System front-top corner | 1 mm = "
               f"{cfg.scale:g} px")
with col_gap:
    st.metric("Min Gap", gap_label(result))
with col_status:
    color = Theme.status_color(result.status)
    st.markdown(
        f"<div style='background:{color}; color:white; padding:10px; border-radius:20px; "
        f"text-align:center; font-weight:bold;'>{status_label(result)}</div>",
        unsafe_allow_html=True
    )

for label, poly in (("System", result.system_poly), ("LCD", result.lcd_poly)):
    audit = audit_profile(poly)
    if not audit.is_simple:
        st.warning(f"{label} outline is not a simple polygon ({audit.reason}). Check the fillet radii.")

viz = HingeVisualizer()
st.plotly_chart(viz.render_scene(result, trace.points if params.show_trace else None),
                use_container_width=True)

# ==========================================
# 5. ANGLE SWEEP
# ==========================================
st.subheader("Angle Sweep (0-180 deg)")

if st.button("Run Sweep", type="primary"):
    runner = SimulationRunner(cfg)
    with st.spinner("Sweeping..."):
        st.session_state["sweep"] = runner.run_sweep(params)

sweep = st.session_state.get("sweep")
if sweep is None:
    st.info("Run a sweep to see the gap over the full opening range.")
    st.stop()

summary = SimulationRunner.summarize(sweep)
c1, c2, c3 = st.columns(3)
c1.metric("Min Clearance", f"{summary['min_clearance']:.3f} mm")
c2.metric("Collision Samples", summary["collision_count"])
first = summary["first_collision_angle"]
c3.metric("First Collision", "--" if first is None else f"{first:g} deg")

st.plotly_chart(viz.render_sweep(sweep), use_container_width=True)

envelope = EnvelopeMapper.build_envelope(sweep)
st.write("Collision intervals (deg):", envelope["collision_intervals"] or "none")
st.write("Warning intervals (deg):", envelope["warning_intervals"] or "none")
st.dataframe(sweep, use_container_width=True)
