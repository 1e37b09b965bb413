from unittest import TestCase

import importlib

import numpy as np

from linkmath import scalar_math as sm
from linkmath.vectors import Vector2


class TestConstants(TestCase):

    def test_angles(self):

        self.assertAlmostEqual(sm.DEG_TO_RAD * 180, np.pi)
        self.assertAlmostEqual(sm.RAD_TO_DEG * np.pi, 180)
        self.assertEqual(sm.TAU, 2 * np.pi)
        self.assertAlmostEqual(sm.DEG_30_IN_RAD * 6, np.pi)
        self.assertAlmostEqual(sm.DEG_15_IN_RAD * 12, np.pi)

    def test_logs(self):

        self.assertAlmostEqual(sm.LOG10E, np.log10(np.e))
        self.assertAlmostEqual(sm.LOG2E, np.log2(np.e))

    def test_epsilon(self):

        finfo = np.finfo(np.float64)

        self.assertIn(sm.EPSILON, [float(finfo.smallest_normal), float(finfo.smallest_subnormal)])
        self.assertGreater(sm.EPSILON, 0)

    def test_epsilon_logged(self):

        with self.assertLogs('linkmath.scalar_math', level='DEBUG') as logs:
            importlib.reload(sm)

        self.assertTrue(any('EPSILON' in message for message in logs.output))


class TestIEEEDivide(TestCase):

    def test_ieee_divide(self):

        with np.errstate(all='raise'):
            self.assertEqual(sm.ieee_divide(1.0, 0.0), np.inf)
            self.assertEqual(sm.ieee_divide(-1.0, 0.0), -np.inf)
            self.assertTrue(np.isnan(sm.ieee_divide(0.0, 0.0)))

        self.assertEqual(sm.ieee_divide(3.0, 2.0), 1.5)

        np.testing.assert_array_equal(sm.ieee_divide([1.0, -1.0, 4.0], [0.0, 0.0, 2.0]), [np.inf, -np.inf, 2.0])


class TestInverseSqrtFast(TestCase):

    def test_inverse_sqrt_fast(self):

        values = np.array([0.25, 1.0, 2.0, 4.0, 100.0, 12345.0])

        for value in values:
            with self.subTest(value=value):
                np.testing.assert_allclose(sm.inverse_sqrt_fast(value), 1 / np.sqrt(value), rtol=2e-3)

        result = sm.inverse_sqrt_fast(values.reshape(2, 3))

        self.assertEqual(result.shape, (2, 3))
        np.testing.assert_allclose(result, 1 / np.sqrt(values.reshape(2, 3)), rtol=2e-3)

    def test_not_exact(self):

        self.assertNotEqual(sm.inverse_sqrt_fast(2.0), 1 / np.sqrt(2.0))

    def test_zero_is_finite(self):

        self.assertTrue(np.isfinite(sm.inverse_sqrt_fast(0.0)))


class TestAngles(TestCase):

    def test_to_radians_degrees(self):

        self.assertAlmostEqual(sm.to_radians(90), np.pi / 2)
        self.assertAlmostEqual(sm.to_degrees(np.pi / 4), 45)

        np.testing.assert_allclose(sm.to_degrees(sm.to_radians([10, -20, 370])), [10, -20, 370])

    def test_wrap_angle(self):

        self.assertEqual(sm.wrap_angle(0.5), 0.5)
        self.assertAlmostEqual(sm.wrap_angle(3 * np.pi), np.pi)
        self.assertAlmostEqual(sm.wrap_angle(-np.pi), np.pi)
        self.assertEqual(sm.wrap_angle(np.pi), np.pi)
        self.assertAlmostEqual(sm.wrap_angle(2 * np.pi + 0.25), 0.25)
        self.assertAlmostEqual(sm.wrap_angle(-2 * np.pi - 0.25), -0.25)

        wrapped = sm.wrap_angle(np.linspace(-20, 20, 101))

        self.assertTrue(np.all(wrapped > -np.pi))
        self.assertTrue(np.all(wrapped <= np.pi))

    def test_normalize_angle(self):

        self.assertEqual(sm.normalize_angle_in_degrees(-90.0), 270.0)
        self.assertEqual(sm.normalize_angle_in_degrees(720.0), 0.0)
        self.assertEqual(sm.normalize_angle_in_degrees(360.5), 0.5)
        self.assertEqual(sm.normalize_angle_in_degrees(45.0), 45.0)

        self.assertAlmostEqual(sm.normalize_angle_in_radians(-np.pi / 2), 3 * np.pi / 2)
        self.assertAlmostEqual(sm.normalize_angle_in_radians(5 * np.pi), np.pi)

        normalized = sm.normalize_angle_in_degrees(np.arange(-1000, 1000, 7.5))

        self.assertTrue(np.all(normalized >= 0))
        self.assertTrue(np.all(normalized < 360))

    def test_repeat(self):

        self.assertEqual(sm.repeat(5.5, 2.0), 1.5)
        self.assertEqual(sm.repeat(-0.5, 2.0), 1.5)
        self.assertEqual(sm.repeat(1.0, 2.0), 1.0)

        np.testing.assert_array_equal(sm.repeat([0.5, 2.5, -1.5], 2.0), [0.5, 0.5, 0.5])

    def test_ping_pong(self):

        self.assertEqual(sm.ping_pong(1.0, 2.0), 1.0)
        self.assertEqual(sm.ping_pong(3.0, 2.0), 1.0)
        self.assertEqual(sm.ping_pong(4.0, 2.0), 0.0)
        self.assertEqual(sm.ping_pong(5.0, 2.0), 1.0)

    def test_delta_angle(self):

        self.assertEqual(sm.delta_angle_in_degrees(0.0, 370.0), 10.0)
        self.assertEqual(sm.delta_angle_in_degrees(350.0, 10.0), 20.0)
        self.assertEqual(sm.delta_angle_in_degrees(10.0, 350.0), -20.0)
        self.assertEqual(sm.delta_angle_in_degrees(0.0, 180.0), 180.0)

        self.assertAlmostEqual(sm.delta_angle_in_radians(0.1, 2 * np.pi - 0.1), -0.2)

        np.testing.assert_allclose(sm.delta_angle_in_degrees([0, 350], [370, 10]), [10, 20])


class TestSigns(TestCase):

    def test_copy_sign(self):

        self.assertEqual(sm.copy_sign(3.0, -1.0), -3.0)
        self.assertEqual(sm.copy_sign(-3.0, 2.0), 3.0)
        self.assertEqual(sm.copy_sign(3.0, -0.0), -3.0)
        self.assertEqual(sm.copy_sign(-2.0, 0.0), 2.0)

        self.assertTrue(np.signbit(sm.copy_sign(0.0, -5.0)))
        self.assertTrue(np.signbit(sm.copy_sign(np.nan, -1.0)))
        self.assertFalse(np.signbit(sm.copy_sign(-np.inf, 1.0)))

        np.testing.assert_array_equal(sm.copy_sign([1.0, 2.0], -1.0), [-1.0, -2.0])

    def test_sign(self):

        self.assertEqual(sm.sign(2.5), 1.0)
        self.assertEqual(sm.sign(0.0), 1.0)
        self.assertEqual(sm.sign(-0.0), 1.0)
        self.assertEqual(sm.sign(-2.5), -1.0)
        self.assertEqual(sm.sign(np.nan), -1.0)


class TestClamp(TestCase):

    def test_clamp(self):

        self.assertEqual(sm.clamp(5.0, 0.0, 1.0), 1.0)
        self.assertEqual(sm.clamp(-5.0, 0.0, 1.0), 0.0)
        self.assertEqual(sm.clamp(0.5, 0.0, 1.0), 0.5)

    def test_clamp01(self):

        np.testing.assert_array_equal(sm.clamp01([-1.0, 0.25, 2.0]), [0.0, 0.25, 1.0])

        self.assertTrue(np.isnan(sm.clamp01(np.nan)))

    def test_approximately(self):

        self.assertTrue(sm.approximately(1.0, 1.0 + 1e-9))
        self.assertFalse(sm.approximately(1.0, 1.001))
        self.assertTrue(sm.approximately(0.0, 0.0))
        self.assertTrue(sm.approximately(1e10, 1e10 + 1))
        self.assertFalse(sm.approximately(np.nan, np.nan))


class TestMisc(TestCase):

    def test_barycentric(self):

        self.assertEqual(sm.barycentric(0.0, 10.0, 20.0, 0.5, 0.25), 10.0)
        self.assertEqual(sm.barycentric(1.0, 10.0, 20.0, 0.0, 0.0), 1.0)

    def test_distance(self):

        self.assertEqual(sm.distance(-2.0, 3.0), 5.0)

    def test_is_power_of_two(self):

        for value, expected in [(1, True), (2, True), (64, True), (1 << 40, True),
                                (0, False), (-4, False), (6, False), (100, False)]:
            with self.subTest(value=value):
                self.assertIs(sm.is_power_of_two(value), expected)

    def test_min_max_of(self):

        self.assertEqual(sm.min_of(), 0)
        self.assertEqual(sm.max_of(), 0)

        self.assertEqual(sm.min_of(3.0, 1.0, 2.0), 1.0)
        self.assertEqual(sm.max_of(3.0, 1.0, 2.0), 3.0)
        self.assertEqual(sm.min_of(-7.0), -7.0)

    def test_gamma(self):

        self.assertAlmostEqual(sm.gamma(0.5, 1.0, 2.0), 0.25)
        self.assertAlmostEqual(sm.gamma(-0.5, 1.0, 2.0), -0.25)
        self.assertEqual(sm.gamma(2.0, 1.0, 2.0), 2.0)
        self.assertEqual(sm.gamma(-3.0, 1.0, 2.0), -3.0)


class TestSmoothDamp(TestCase):

    def test_converges_without_overshoot(self):

        value, velocity = 0.0, 0.0

        previous = value

        for _ in range(600):

            value, velocity = sm.smooth_damp(value, 10.0, velocity, 0.3, 1 / 60)

            self.assertLessEqual(value, 10.0)
            self.assertGreaterEqual(value, previous)

            previous = value

        self.assertAlmostEqual(value, 10.0, places=6)

    def test_at_target(self):

        value, velocity = sm.smooth_damp(10.0, 10.0, 0.0, 0.3, 1 / 60)

        self.assertEqual(value, 10.0)
        self.assertEqual(velocity, 0.0)

    def test_overshoot_snaps(self):

        # a huge velocity towards the target would carry us past it
        value, velocity = sm.smooth_damp(0.0, 1.0, 1000.0, 0.3, 0.1)

        self.assertEqual(value, 1.0)
        self.assertEqual(velocity, 0.0)

    def test_zero_smooth_time(self):

        value, velocity = sm.smooth_damp(0.0, 10.0, 0.0, 0.0, 1 / 60)

        self.assertTrue(np.isfinite(value))
        self.assertTrue(np.isfinite(velocity))
        self.assertAlmostEqual(value, 10.0, places=2)

    def test_max_speed(self):

        value, _ = sm.smooth_damp(0.0, 100.0, 0.0, 1.0, 0.1, max_speed=1.0)

        self.assertGreater(value, 0.0)
        self.assertLess(value, 1.0)

    def test_vectorized(self):

        values, velocities = sm.smooth_damp(np.zeros(3), [1.0, -2.0, 0.0], np.zeros(3), 0.3, 0.1)

        self.assertEqual(values.shape, (3,))
        self.assertEqual(velocities.shape, (3,))

        self.assertGreater(values[0], 0)
        self.assertLess(values[1], 0)
        self.assertEqual(values[2], 0)

    def test_smooth_damp_angle(self):

        value, velocity = sm.smooth_damp_angle(350.0, 10.0, 0.0, 0.3, 1 / 60)

        self.assertGreater(value, 350.0)
        self.assertGreater(velocity, 0.0)

        for _ in range(600):
            value, velocity = sm.smooth_damp_angle(value, 10.0, velocity, 0.3, 1 / 60)

        self.assertAlmostEqual(sm.normalize_angle_in_degrees(value), 10.0, places=4)


class TestLineIntersection(TestCase):

    def test_line_intersection(self):

        np.testing.assert_allclose(sm.line_intersection((0, 0), (2, 2), (0, 2), (2, 0)), (1, 1))
        np.testing.assert_allclose(sm.line_intersection((0, 0), (1, 1), (3, 0), (4, -1)), (1.5, 1.5))

        self.assertIsNone(sm.line_intersection((0, 0), (1, 1), (0, 1), (1, 2)))

    def test_vector2_points(self):

        point = sm.line_intersection(Vector2(0, 0), Vector2(2, 0), Vector2(1, -1), Vector2(1, 1))

        np.testing.assert_allclose(point, (1, 0))

    def test_line_segment_intersection(self):

        np.testing.assert_allclose(sm.line_segment_intersection((0, 0), (2, 2), (0, 2), (2, 0)), (1, 1))

        self.assertIsNone(sm.line_segment_intersection((0, 0), (1, 1), (3, 0), (4, -1)))
        self.assertIsNone(sm.line_segment_intersection((0, 0), (1, 1), (0, 1), (1, 2)))

        # touching at an end point counts
        np.testing.assert_allclose(sm.line_segment_intersection((0, 0), (1, 0), (1, 0), (1, 1)), (1, 0))
