"""Tests for great-circle distance helpers."""

from __future__ import annotations

import math
import unittest

import numpy as np

from geokdbush import EARTH_RADIUS_KM, QueryPoint, distance, great_circle_distance, great_circle_distance_part


class DistanceTest(unittest.TestCase):
    """Check known distances, symmetry and numeric edge cases."""

    def test_reference_distance_kiev_to_santa_barbara(self) -> None:
        self.assertEqual(round(1e4 * distance(30.5, 50.5, -119.7, 34.4)) / 1e4, 10131.7396)

    def test_one_degree_along_equator(self) -> None:
        self.assertAlmostEqual(distance(0.0, 0.0, 1.0, 0.0), EARTH_RADIUS_KM * math.pi / 180, places=6)

    def test_symmetry(self) -> None:
        rng = np.random.default_rng(7)
        for _ in range(200):
            lng_a, lng_b = rng.uniform(-180.0, 180.0, size=2)
            lat_a, lat_b = rng.uniform(-90.0, 90.0, size=2)
            ab = distance(lng_a, lat_a, lng_b, lat_b)
            ba = distance(lng_b, lat_b, lng_a, lat_a)
            self.assertLessEqual(abs(ab - ba), 1e-9 * max(ab, 1.0))

    def test_identical_points_do_not_fail(self) -> None:
        for lng, lat in [(0.0, 0.0), (30.5, 50.5), (-119.7051, 34.4363), (179.999, -89.5)]:
            d = distance(lng, lat, lng, lat)
            self.assertFalse(math.isnan(d))
            self.assertLess(d, 1e-3)

    def test_antipodal_points_do_not_fail(self) -> None:
        d = distance(10.0, 20.0, -170.0, -20.0)
        self.assertAlmostEqual(d, math.pi * EARTH_RADIUS_KM, places=3)

    def test_distance_part_is_capped_at_one(self) -> None:
        self.assertLessEqual(great_circle_distance_part(45.0, 1.0, 1.0, 1.0), 1.0)

    def test_query_point_precomputes_trig(self) -> None:
        query = QueryPoint.at(30.5, 50.5)
        self.assertAlmostEqual(query.cos_lat, math.cos(math.radians(50.5)), places=12)
        self.assertAlmostEqual(query.sin_lat, math.sin(math.radians(50.5)), places=12)
        self.assertEqual(great_circle_distance(query, -119.7, 34.4), distance(30.5, 50.5, -119.7, 34.4))

    def test_out_of_range_coordinates_are_not_rejected(self) -> None:
        d = distance(400.0, 120.0, -500.0, -95.0)
        self.assertFalse(math.isnan(d))


if __name__ == "__main__":
    unittest.main()
