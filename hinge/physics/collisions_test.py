import unittest
import numpy as np
import sys
import os

# Ensure project root is in path
sys.path.append(os.getcwd())

from hinge.physics.collisions import (is_point_in_polygon, dist_to_segment, segment_distances,
                                      get_min_distance, polygons_overlap, CollisionDetector,
                                      COLLISION_SENTINEL)

UNIT_SQUARE = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
# Concave outline with a notch at the top right
L_SHAPE = np.array([[0, 0], [4, 0], [4, 1], [1, 1], [1, 4], [0, 4]], dtype=float)

class TestContainment(unittest.TestCase):
    def test_centroid_inside(self):
        """Centroid of convex polygons is inside."""
        print("Testing Centroid Containment...")
        tri = np.array([[0.0, 0.0], [6.0, 0.0], [0.0, 3.0]])
        for poly in (UNIT_SQUARE, tri):
            self.assertTrue(is_point_in_polygon(poly.mean(axis=0), poly))
        print("  -> OK")

    def test_far_point_outside(self):
        for p in ([10.0, 10.0], [-5.0, 0.5], [0.5, -100.0], [1e6, 1e6]):
            self.assertFalse(is_point_in_polygon(np.array(p), UNIT_SQUARE))

    def test_concave_polygon(self):
        """Ray casting is exact for non-convex outlines."""
        self.assertFalse(is_point_in_polygon(np.array([3.0, 3.0]), L_SHAPE))
        self.assertTrue(is_point_in_polygon(np.array([0.5, 3.0]), L_SHAPE))
        self.assertTrue(is_point_in_polygon(np.array([3.0, 0.5]), L_SHAPE))

    def test_degenerate_polygon_contains_nothing(self):
        self.assertFalse(is_point_in_polygon(np.array([0.0, 0.0]), np.array([[0.0, 0.0]])))
        self.assertFalse(is_point_in_polygon(np.array([0.5, 0.0]), np.array([[0.0, 0.0], [1.0, 0.0]])))

    def test_boundary_classification(self):
        """
        Points exactly on the outline follow the raw crossing-number comparisons:
        left and top edges read as inside, right and bottom edges as outside.
        Pinned here so any change to the boundary behaviour is deliberate.
        """
        self.assertTrue(is_point_in_polygon(np.array([0.0, 0.5]), UNIT_SQUARE))
        self.assertFalse(is_point_in_polygon(np.array([1.0, 0.5]), UNIT_SQUARE))
        self.assertTrue(is_point_in_polygon(np.array([0.5, 0.0]), UNIT_SQUARE))
        self.assertFalse(is_point_in_polygon(np.array([0.5, 1.0]), UNIT_SQUARE))

    def test_repeated_vertex_is_harmless(self):
        poly = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
        self.assertTrue(is_point_in_polygon(np.array([0.5, 0.5]), poly))
        self.assertFalse(is_point_in_polygon(np.array([1.5, 0.5]), poly))

class TestSegmentDistance(unittest.TestCase):
    def test_perpendicular_foot(self):
        d = dist_to_segment(np.array([0.0, 1.0]), np.array([-1.0, 0.0]), np.array([1.0, 0.0]))
        self.assertAlmostEqual(d, 1.0)

    def test_clamped_to_end(self):
        d = dist_to_segment(np.array([3.0, 0.0]), np.array([-1.0, 0.0]), np.array([1.0, 0.0]))
        self.assertAlmostEqual(d, 2.0)
        d = dist_to_segment(np.array([-4.0, 4.0]), np.array([-1.0, 0.0]), np.array([1.0, 0.0]))
        self.assertAlmostEqual(d, 5.0)

    def test_zero_length_segment(self):
        d = dist_to_segment(np.array([3.0, 4.0]), np.array([0.0, 0.0]), np.array([0.0, 0.0]))
        self.assertAlmostEqual(d, 5.0)

    def test_matrix_matches_scalar(self):
        pts = np.array([[2.0, 0.5], [-1.0, -1.0], [0.5, 3.0]])
        mat = segment_distances(pts, UNIT_SQUARE)
        self.assertEqual(mat.shape, (3, 4))
        for m, p in enumerate(pts):
            for n in range(4):
                expected = dist_to_segment(p, UNIT_SQUARE[n], UNIT_SQUARE[(n + 1) % 4])
                self.assertAlmostEqual(mat[m, n], expected)

    def test_closing_edge_is_included(self):
        # Last column is the edge from the last vertex back to the first
        mat = segment_distances(np.array([[-1.0, 0.5]]), UNIT_SQUARE)
        self.assertAlmostEqual(mat[0, 3], 1.0)

class TestMinDistance(unittest.TestCase):
    def test_overlapping_squares_return_sentinel(self):
        """Any contained vertex gives exactly -1."""
        print("Testing Overlap Sentinel...")
        shifted = UNIT_SQUARE + np.array([0.5, 0.5])
        self.assertEqual(get_min_distance(UNIT_SQUARE, shifted), -1)
        self.assertEqual(get_min_distance(shifted, UNIT_SQUARE), COLLISION_SENTINEL)
        self.assertTrue(polygons_overlap(UNIT_SQUARE, shifted))
        print("  -> OK")

    def test_nested_polygons_overlap(self):
        big = UNIT_SQUARE * 10.0
        small = UNIT_SQUARE + np.array([4.0, 4.0])
        self.assertEqual(get_min_distance(big, small), -1)
        self.assertEqual(get_min_distance(small, big), -1)

    def test_separated_squares(self):
        other = UNIT_SQUARE + np.array([3.0, 0.0])
        self.assertAlmostEqual(get_min_distance(UNIT_SQUARE, other), 2.0)
        self.assertAlmostEqual(get_min_distance(other, UNIT_SQUARE), 2.0)

    def test_distance_through_closing_edge(self):
        """The only near edge is the implicit last -> first edge."""
        tri = np.array([[0.0, 0.0], [4.0, 0.0], [0.0, 4.0]])
        probe = np.array([[-1.0, 2.0]])
        self.assertAlmostEqual(get_min_distance(tri, probe), 1.0)

    def test_crossing_bodies_without_contained_vertex(self):
        """
        Two thin bars crossing like a plus sign intersect, but no vertex of
        either lies inside the other, so the vertex-to-edge gap is reported.
        This is the documented approximation, not an exact solver.
        """
        bar_x = np.array([[-5.0, -0.5], [5.0, -0.5], [5.0, 0.5], [-5.0, 0.5]])
        bar_y = np.array([[-0.5, -5.0], [0.5, -5.0], [0.5, 5.0], [-0.5, 5.0]])
        self.assertFalse(polygons_overlap(bar_x, bar_y))
        self.assertAlmostEqual(get_min_distance(bar_x, bar_y), 4.5)

    def test_detector_wrapper(self):
        det = CollisionDetector()
        other = UNIT_SQUARE + np.array([3.0, 0.0])
        self.assertFalse(det.overlaps(UNIT_SQUARE, other))
        self.assertAlmostEqual(det.min_gap(UNIT_SQUARE, other), 2.0)

if __name__ == '__main__':
    unittest.main()
