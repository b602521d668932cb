import unittest
import numpy as np
import pandas as pd
import sys
import os

sys.path.append(os.getcwd())

from hinge.core.geometry import HingeParameters
from hinge.core.config import ScenarioConfig
from hinge.physics.engine import classify_gap
from hinge.simulation import SimulationRunner, SWEEP_COLUMNS

class TestSweep(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.runner = SimulationRunner()
        cls.df = cls.runner.run_sweep(HingeParameters())

    def test_angle_grid(self):
        print("Testing Sweep Grid...")
        self.assertEqual(len(self.df), 181)
        self.assertEqual(list(self.df.columns), SWEEP_COLUMNS)
        self.assertEqual(self.df["angle"].iloc[0], 0.0)
        self.assertEqual(self.df["angle"].iloc[-1], 180.0)
        print("  -> OK")

    def test_custom_grid(self):
        np.testing.assert_allclose(self.runner.sweep_angles(0, 10, 2.5), [0, 2.5, 5, 7.5, 10])
        np.testing.assert_allclose(self.runner.sweep_angles(0, 1, 0.3), [0, 0.3, 0.6, 0.9])
        self.assertEqual(len(self.runner.sweep_angles(5, 0, 1)), 0)

    def test_config_grid(self):
        runner = SimulationRunner(ScenarioConfig(sweep_step=5.0, sweep_max_angle=90.0))
        self.assertEqual(len(runner.sweep_angles()), 19)

    def test_bad_step(self):
        with self.assertRaises(ValueError):
            self.runner.sweep_angles(0, 10, 0)
        with self.assertRaises(ValueError):
            self.runner.run_sweep(HingeParameters(), step=-1.0)

    def test_rows_match_classifier(self):
        for gap, status, collision in zip(self.df["min_gap"], self.df["status"], self.df["collision"]):
            self.assertEqual(status, classify_gap(gap).value)
            self.assertEqual(bool(collision), gap < 0)

    def test_closed_row(self):
        row = self.df.iloc[0]
        self.assertAlmostEqual(row["min_gap"], 0.5)
        self.assertEqual(row["status"], "WARNING")
        self.assertAlmostEqual(row["nose_x"], 0.0)
        self.assertAlmostEqual(row["nose_y"], -2.5)

    def test_opening_collides(self):
        self.assertTrue(self.df["collision"].any())
        row = self.df[self.df["angle"] == 90.0].iloc[0]
        self.assertEqual(row["min_gap"], -1)

    def test_gap_continuity(self):
        """Neighbouring clear samples one degree apart move by a bounded amount."""
        summary = self.runner.summarize(self.df)
        self.assertLessEqual(summary["max_step_jump"], 3.5)

class TestSummary(unittest.TestCase):
    def test_hand_built_table(self):
        print("Testing Sweep Summary...")
        df = pd.DataFrame({
            "angle": [0.0, 1.0, 2.0, 3.0, 4.0],
            "min_gap": [1.0, 0.5, -1.0, -1.0, 2.0],
            "status": ["SAFE", "WARNING", "COLLISION", "COLLISION", "SAFE"],
            "collision": [False, False, True, True, False],
            "nose_x": [0.0] * 5,
            "nose_y": [0.0] * 5
        })
        s = SimulationRunner.summarize(df)
        self.assertAlmostEqual(s["min_clearance"], 0.5)
        self.assertEqual(s["collision_count"], 2)
        self.assertEqual(s["warning_count"], 1)
        self.assertEqual(s["first_collision_angle"], 2.0)
        self.assertAlmostEqual(s["max_step_jump"], 0.5)
        print("  -> OK")

    def test_clear_table(self):
        df = pd.DataFrame({
            "angle": [0.0, 1.0],
            "min_gap": [3.0, 4.0],
            "status": ["SAFE", "SAFE"],
            "collision": [False, False],
            "nose_x": [0.0, 0.0],
            "nose_y": [0.0, 0.0]
        })
        s = SimulationRunner.summarize(df)
        self.assertIsNone(s["first_collision_angle"])
        self.assertEqual(s["collision_count"], 0)
        self.assertAlmostEqual(s["max_step_jump"], 1.0)

if __name__ == '__main__':
    unittest.main()
