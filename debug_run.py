from hinge.core.geometry import HingeParameters
from hinge.simulation import SimulationRunner
from hinge.analysis.profile_audit import audit_profile, exact_gap
from hinge.physics.engine import evaluate
import time

def test_sweep():
    print("Initializing Runner...")
    runner = SimulationRunner()
    params = HingeParameters()

    print("Auditing Profiles at 0 deg...")
    res = evaluate(params)
    for label, poly in (("System", res.system_poly), ("LCD", res.lcd_poly)):
        audit = audit_profile(poly)
        print(f"  {label}: simple={audit.is_simple} area={audit.area:.2f} mm2 {audit.reason}")
    print(f"  Vertex gap {res.min_gap:.4f} mm | Exact gap {exact_gap(res.lcd_poly, res.system_poly):.4f} mm")

    print("\nRunning Sweep (0-180 deg)...")
    start = time.time()
    df = runner.run_sweep(params)
    end = time.time()

    print(f"\nSweep Complete in {end-start:.2f}s")
    print(f"Result Shape: {df.shape}")
    print(df.head())

    summary = runner.summarize(df)
    print("\nSummary:")
    for k, v in summary.items():
        print(f"  {k}: {v}")

    clashes = df[df["collision"]]
    print(f"\nAngles in Collision: {len(clashes)}")
    if len(clashes) > 0:
        print(clashes.head())

if __name__ == "__main__":
    test_sweep()
