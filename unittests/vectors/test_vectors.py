from unittest import TestCase

import dataclasses

import numpy as np

from linkmath.vectors import Vector2, Vector3
from linkmath.rotations import Quaternion


class TestVector2(TestCase):

    def test_init(self):

        vector = Vector2(1, 2)

        self.assertIsInstance(vector.x, float)
        self.assertEqual(vector.x, 1.0)
        self.assertEqual(vector.y, 2.0)

        self.assertEqual(Vector2(), Vector2.ZERO)
        self.assertEqual(Vector2.from_scalar(3), Vector2(3, 3))
        self.assertEqual(Vector2.from_array(np.array([4.0, 5.0])), Vector2(4, 5))
        self.assertEqual(Vector2.create_with_x(2), Vector2(2, 0))
        self.assertEqual(Vector2.create_with_y(2), Vector2(0, 2))

        with self.assertRaises(ValueError):
            Vector2.from_array([1, 2, 3])

    def test_immutable(self):

        vector = Vector2(1, 2)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            vector.x = 5

    def test_constants(self):

        self.assertEqual(Vector2.RIGHT_UP, Vector2.ONE)
        self.assertEqual(Vector2.LEFT_DOWN, Vector2.NEGATIVE)
        self.assertEqual(Vector2.RIGHT_DOWN, Vector2(1, -1))
        self.assertEqual(Vector2.LEFT_UP, Vector2(-1, 1))
        self.assertEqual(Vector2.UNIT_X, Vector2.RIGHT)
        self.assertEqual(Vector2.UNIT_Y, Vector2.UP)
        self.assertEqual(Vector2.HALF * 4, Vector2.TWO)
        self.assertEqual(Vector2.POSITIVE_INFINITY.x, np.inf)
        self.assertEqual(Vector2.NEGATIVE_INFINITY.y, -np.inf)

    def test_arithmetic(self):

        a = Vector2(1, 2)
        b = Vector2(3, 5)

        self.assertEqual(a + b, Vector2(4, 7))
        self.assertEqual(b - a, Vector2(2, 3))
        self.assertEqual(a * b, Vector2(3, 10))
        self.assertEqual(a * 2, Vector2(2, 4))
        self.assertEqual(2 * a, Vector2(2, 4))
        self.assertEqual(np.float64(2) * a, Vector2(2, 4))
        self.assertEqual(b / a, Vector2(3, 2.5))
        self.assertEqual(a / 2, Vector2(0.5, 1))
        self.assertEqual(-a, Vector2(-1, -2))

        self.assertEqual(Vector2.add(a, b), a + b)
        self.assertEqual(Vector2.subtract(a, b), a - b)
        self.assertEqual(Vector2.multiply(a, b), a * b)
        self.assertEqual(Vector2.divide(a, b), a / b)
        self.assertEqual(Vector2.negate(a), -a)

        with self.assertRaises(TypeError):
            a + 1

    def test_divide_by_zero(self):

        with np.errstate(all='raise'):
            result = Vector2(1, 0) / 0

        self.assertEqual(result.x, np.inf)
        self.assertTrue(np.isnan(result.y))

        result = Vector2(-1, 1) / Vector2(0, 0)

        self.assertEqual(result, Vector2(-np.inf, np.inf))

    def test_equality(self):

        self.assertEqual(Vector2(1, 2), Vector2(1.0, 2.0))
        self.assertNotEqual(Vector2(1, 2), Vector2(1, 2 + 1e-12))
        self.assertNotEqual(Vector2(np.nan, 0), Vector2(np.nan, 0))
        self.assertNotEqual(Vector2(1, 2), Vector3(1, 2, 0))
        self.assertTrue(Vector2.equals(Vector2(1, 2), Vector2(1, 2)))

        self.assertEqual(hash(Vector2(1, 2)), hash(Vector2(1.0, 2.0)))
        self.assertEqual(len({Vector2(1, 2), Vector2(1, 2), Vector2(2, 1)}), 2)

    def test_conversions(self):

        vector = Vector2(1, 2)

        x, y = vector

        self.assertEqual((x, y), (1.0, 2.0))

        np.testing.assert_array_equal(np.asarray(vector), [1, 2])
        np.testing.assert_array_equal(vector.to_array(), [1, 2])

        self.assertEqual(vector.to_vector3(), Vector3(1, 2, 0))
        self.assertEqual(vector.to_vector3(5), Vector3(1, 2, 5))

        self.assertEqual(str(vector), '(1.0, 2.0)')

        target = [0.0] * 4
        vector.copy_to(target, 1)
        self.assertEqual(target, [0.0, 1.0, 2.0, 0.0])

    def test_components(self):

        vector = Vector2(1, 2)

        self.assertEqual(vector.component(0), 1)
        self.assertEqual(vector.component(1), 2)
        self.assertEqual(vector.component(2), 1)
        self.assertEqual(vector.component(-1), 2)

        self.assertEqual(vector.xy, vector)
        self.assertEqual(vector.yx, Vector2(2, 1))
        self.assertEqual(vector.with_x(7), Vector2(7, 2))
        self.assertEqual(vector.with_y(7), Vector2(1, 7))

    def test_lengths(self):

        vector = Vector2(3, 4)

        self.assertEqual(vector.length_squared(), 25)
        self.assertEqual(vector.length(), 5)
        self.assertAlmostEqual(vector.length_fast(), 5, delta=5 * 2e-3)

        np.testing.assert_allclose(np.asarray(vector.normalized()), [0.6, 0.8])
        np.testing.assert_allclose(np.asarray(vector.normalized_fast()), [0.6, 0.8], rtol=2e-3)

        self.assertTrue(np.all(np.isnan(np.asarray(Vector2.ZERO.normalized()))))
        self.assertEqual(Vector2.ZERO.normalized_fast(), Vector2.ZERO)

    def test_square_rooted(self):

        rooted = Vector2(4, -1).square_rooted()

        self.assertEqual(rooted.x, 2)
        self.assertTrue(np.isnan(rooted.y))

        np.testing.assert_allclose(np.asarray(Vector2(4, 9).square_rooted_fast()), [2, 3], rtol=2e-3)

    def test_products(self):

        self.assertEqual(Vector2(1, 2).dot(Vector2(3, 4)), 11)
        self.assertEqual(Vector2.dot(Vector2(1, 2), Vector2(3, 4)), 11)

        self.assertEqual(Vector2(1, 0).cross(Vector2(0, 1)), 1)
        self.assertEqual(Vector2(0, 1).cross(Vector2(1, 0)), -1)
        self.assertEqual(Vector2(2, 3).cross(Vector2(4, 6)), 0)

    def test_perpendicular(self):

        vector = Vector2(1, 0)

        self.assertEqual(vector.perpendicular_right(), Vector2(0, -1))
        self.assertEqual(vector.perpendicular_left(), Vector2(0, 1))

        self.assertEqual(Vector2(3, 4).dot(Vector2(3, 4).perpendicular_left()), 0)

    def test_reflect(self):

        self.assertEqual(Vector2(1, -1).reflect(Vector2.UP), Vector2(1, 1))
        self.assertEqual(Vector2(2, 3).reflect(Vector2.RIGHT), Vector2(-2, 3))

    def test_distances(self):

        a = Vector2(1, 1)
        b = Vector2(4, 5)

        self.assertEqual(a.vector_to(b), Vector2(3, 4))
        self.assertEqual(a.distance_to(b), 5)
        self.assertEqual(a.distance_squared_to(b), 25)
        self.assertAlmostEqual(a.distance_fast_to(b), 5, delta=0.03)

        np.testing.assert_allclose(np.asarray(a.direction_to(b)), [0.6, 0.8])
        np.testing.assert_allclose(np.asarray(a.direction_fast_to(b)), [0.6, 0.8], rtol=2e-3)

    def test_component_wise(self):

        a = Vector2(1, 5)
        b = Vector2(3, 2)

        self.assertEqual(a.min(b), Vector2(1, 2))
        self.assertEqual(a.max(b), Vector2(3, 5))
        self.assertEqual(Vector2(-1, 2).abs(), Vector2(1, 2))
        self.assertEqual(abs(Vector2(-1, -2)), Vector2(1, 2))

    def test_clamp(self):

        self.assertEqual(Vector2(-1, 3).clamp(Vector2.ZERO, Vector2.TWO), Vector2(0, 2))

        # the maximum wins when the bounds are inverted
        self.assertEqual(Vector2(3, 0).clamp(Vector2(5, 0), Vector2(1, 0)), Vector2(1, 0))
        self.assertEqual(Vector2(0, 0).clamp(Vector2(5, 0), Vector2(1, 0)), Vector2(1, 0))

    def test_lerp(self):

        a = Vector2(0, 10)
        b = Vector2(10, 20)

        self.assertEqual(a.lerp(b, 0.5), Vector2(5, 15))
        self.assertEqual(a.lerp(b, 2), Vector2(20, 30))
        self.assertEqual(a.lerp_clamped(b, 2), b)
        self.assertEqual(a.lerp_clamped(b, -1), a)

    def test_transform(self):

        vector = Vector2(1, 2)

        matrix_3x2 = np.array([[1, 0], [0, 1], [5, 6]])

        self.assertEqual(vector.transform(matrix_3x2), Vector2(6, 8))
        self.assertEqual(vector.transform_normal(matrix_3x2), Vector2(1, 2))

        matrix_4x4 = np.eye(4)
        matrix_4x4[3, :2] = [5, 6]

        self.assertEqual(vector.transform(matrix_4x4), Vector2(6, 8))
        self.assertEqual(vector.transform_normal(matrix_4x4), Vector2(1, 2))

        swap = np.array([[0, 1], [1, 0], [0, 0]])

        self.assertEqual(vector.transform(swap), Vector2(2, 1))

        with self.assertRaises(ValueError):
            vector.transform(np.eye(3))

        with self.assertRaises(ValueError):
            vector.transform(np.zeros((2, 4, 4)))

    def test_rotate(self):

        rotated = Vector2(1, 0).rotate(Quaternion.Z90)

        np.testing.assert_allclose(np.asarray(rotated), [0, 1], atol=1e-15)

        self.assertIsInstance(rotated, Vector2)


class TestVector3(TestCase):

    def test_init(self):

        self.assertEqual(Vector3(), Vector3.ZERO)
        self.assertEqual(Vector3.from_scalar(2), Vector3.TWO)
        self.assertEqual(Vector3.from_vector2(Vector2(1, 2), 3), Vector3(1, 2, 3))
        self.assertEqual(Vector3.from_vector2(Vector2(1, 2)), Vector3(1, 2, 0))
        self.assertEqual(Vector3.from_array([[1], [2], [3]]), Vector3(1, 2, 3))

        with self.assertRaises(ValueError):
            Vector3.from_array([1, 2])

    def test_create_with(self):

        self.assertEqual(Vector3.create_with_x(1), Vector3(1, 0, 0))
        self.assertEqual(Vector3.create_with_y(1), Vector3(0, 1, 0))
        self.assertEqual(Vector3.create_with_z(1), Vector3(0, 0, 1))
        self.assertEqual(Vector3.create_with_xy(1, 2), Vector3(1, 2, 0))
        self.assertEqual(Vector3.create_with_xz(Vector2(1, 2)), Vector3(1, 0, 2))
        self.assertEqual(Vector3.create_with_yz(1, 2), Vector3(0, 1, 2))

    def test_constants(self):

        self.assertEqual(Vector3.RIGHT_UP_FORWARD, Vector3.ONE)
        self.assertEqual(Vector3.LEFT_DOWN_BACKWARD, Vector3.NEGATIVE)
        self.assertEqual(Vector3.RIGHT_DOWN_BACKWARD, Vector3(1, -1, -1))
        self.assertEqual(Vector3.LEFT_UP_FORWARD, Vector3(-1, 1, 1))
        self.assertEqual(Vector3.FORWARD, Vector3.UNIT_Z)
        self.assertEqual(Vector3.BACKWARD, -Vector3.UNIT_Z)
        self.assertEqual(Vector3.UP, Vector3.UNIT_Y)
        self.assertEqual(Vector3.LEFT, -Vector3.UNIT_X)

    def test_arithmetic(self):

        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)

        self.assertEqual(a + b, Vector3(5, 7, 9))
        self.assertEqual(b - a, Vector3(3, 3, 3))
        self.assertEqual(a * b, Vector3(4, 10, 18))
        self.assertEqual(a * 0.5, Vector3(0.5, 1, 1.5))
        self.assertEqual(3 * a, Vector3(3, 6, 9))
        self.assertEqual(b / Vector3(4, 5, 6), Vector3.ONE)
        self.assertEqual(-a, Vector3(-1, -2, -3))

        with self.assertRaises(TypeError):
            a + Vector2(1, 2)

        with self.assertRaises(TypeError):
            a * 'a'

    def test_divide_by_zero(self):

        result = Vector3(1, 0, -1) / 0.0

        self.assertEqual(result.x, np.inf)
        self.assertTrue(np.isnan(result.y))
        self.assertEqual(result.z, -np.inf)

        self.assertTrue(np.all(np.isnan(np.asarray(Vector3.ZERO.normalized()))))

    def test_swizzles(self):

        vector = Vector3(1, 2, 3)

        self.assertEqual(vector.xy, Vector2(1, 2))
        self.assertEqual(vector.xz, Vector2(1, 3))
        self.assertEqual(vector.yx, Vector2(2, 1))
        self.assertEqual(vector.yz, Vector2(2, 3))
        self.assertEqual(vector.zx, Vector2(3, 1))
        self.assertEqual(vector.zy, Vector2(3, 2))

        self.assertEqual(vector.xzy, Vector3(1, 3, 2))
        self.assertEqual(vector.yxz, Vector3(2, 1, 3))
        self.assertEqual(vector.yzx, Vector3(2, 3, 1))
        self.assertEqual(vector.zxy, Vector3(3, 1, 2))
        self.assertEqual(vector.zyx, Vector3(3, 2, 1))

        self.assertEqual(vector.to_vector2(), Vector2(1, 2))

    def test_components(self):

        vector = Vector3(1, 2, 3)

        self.assertEqual([vector.component(index) for index in range(-1, 5)], [3, 1, 2, 3, 1, 2])

        self.assertEqual(vector.with_x(0), Vector3(0, 2, 3))
        self.assertEqual(vector.with_y(0), Vector3(1, 0, 3))
        self.assertEqual(vector.with_z(0), Vector3(1, 2, 0))
        self.assertEqual(vector.with_xy(7, 8), Vector3(7, 8, 3))
        self.assertEqual(vector.with_xy(Vector2(7, 8)), Vector3(7, 8, 3))
        self.assertEqual(vector.with_xz(Vector2(7, 8)), Vector3(7, 2, 8))
        self.assertEqual(vector.with_yz(7, 8), Vector3(1, 7, 8))

        with self.assertRaises(TypeError):
            vector.with_xy(Vector2(7, 8), 9)

        with self.assertRaises(TypeError):
            vector.with_yz(7)

        target = np.zeros(3)
        vector.copy_to(target)
        np.testing.assert_array_equal(target, [1, 2, 3])

        self.assertEqual(str(vector), '(1.0, 2.0, 3.0)')

    def test_products(self):

        self.assertEqual(Vector3.UNIT_X.cross(Vector3.UNIT_Y), Vector3.UNIT_Z)
        self.assertEqual(Vector3.cross(Vector3.UNIT_Y, Vector3.UNIT_X), -Vector3.UNIT_Z)

        a = Vector3(1, 2, 3)
        b = Vector3(-2, 0.5, 4)

        np.testing.assert_allclose(np.asarray(a.cross(b)), np.cross(np.asarray(a), np.asarray(b)))

        self.assertEqual(a.dot(b), 11)

    def test_lengths(self):

        vector = Vector3(2, 3, 6)

        self.assertEqual(vector.length(), 7)
        self.assertEqual(vector.length_squared(), 49)
        self.assertAlmostEqual(vector.length_fast(), 7, delta=7 * 2e-3)

        np.testing.assert_allclose(np.asarray(vector.normalized()), [2 / 7, 3 / 7, 6 / 7])
        np.testing.assert_allclose(np.asarray(vector.normalized_fast()), [2 / 7, 3 / 7, 6 / 7], rtol=2e-3)

        rooted = Vector3(4, 9, -1).square_rooted()

        self.assertEqual(rooted.xy, Vector2(2, 3))
        self.assertTrue(np.isnan(rooted.z))

        np.testing.assert_allclose(np.asarray(Vector3(4, 9, 16).square_rooted_fast()), [2, 3, 4], rtol=2e-3)

    def test_reflect(self):

        self.assertEqual(Vector3(1, -1, 2).reflect(Vector3.UP), Vector3(1, 1, 2))

    def test_distances(self):

        a = Vector3(1, 1, 1)
        b = Vector3(3, 4, 7)

        self.assertEqual(a.vector_to(b), Vector3(2, 3, 6))
        self.assertEqual(a.distance_to(b), 7)
        self.assertEqual(a.distance_squared_to(b), 49)
        self.assertAlmostEqual(a.distance_fast_to(b), 7, delta=0.03)

        np.testing.assert_allclose(np.asarray(a.direction_to(b)), [2 / 7, 3 / 7, 6 / 7])
        np.testing.assert_allclose(np.asarray(a.direction_fast_to(b)), [2 / 7, 3 / 7, 6 / 7], rtol=2e-3)

    def test_component_wise(self):

        a = Vector3(1, 5, -2)
        b = Vector3(3, 2, -4)

        self.assertEqual(a.min(b), Vector3(1, 2, -4))
        self.assertEqual(a.max(b), Vector3(3, 5, -2))
        self.assertEqual(a.abs(), Vector3(1, 5, 2))

        self.assertEqual(Vector3(-1, 0.5, 3).clamp(Vector3.ZERO, Vector3.ONE), Vector3(0, 0.5, 1))

        # the maximum wins when the bounds are inverted
        self.assertEqual(Vector3(3, 0, 0).clamp(Vector3(5, 0, 0), Vector3(1, 0, 0)).x, 1)

        self.assertEqual(Vector3.ZERO.lerp(Vector3(2, 4, 6), 0.5), Vector3(1, 2, 3))
        self.assertEqual(Vector3.ZERO.lerp_clamped(Vector3(2, 4, 6), 1.5), Vector3(2, 4, 6))

    def test_transform(self):

        vector = Vector3(1, 2, 3)

        matrix = np.eye(4)
        matrix[3, :3] = [10, 20, 30]

        self.assertEqual(vector.transform(matrix), Vector3(11, 22, 33))
        self.assertEqual(vector.transform_normal(matrix), Vector3(1, 2, 3))

        scale = np.diag([2.0, 3.0, 4.0, 1.0])

        self.assertEqual(vector.transform(scale), Vector3(2, 6, 12))

        with self.assertRaises(ValueError):
            vector.transform(np.eye(3))

    def test_transform_matches_rotate(self):

        rotation = Quaternion.from_euler_in_degrees((10, 20, 30))

        vector = Vector3(0.5, -2, 3)

        np.testing.assert_allclose(np.asarray(vector.transform(rotation.to_rotation_matrix())),
                                   np.asarray(vector.rotate(rotation)))

        np.testing.assert_allclose(np.asarray(vector.transform_normal(rotation.to_rotation_matrix())),
                                   np.asarray(rotation.rotate(vector)))

    def test_rotate(self):

        # a quarter turn about y takes forward to right
        rotation = Quaternion.create_from_axis_angle(Vector3(0, 1, 0), np.pi / 2)

        np.testing.assert_allclose(np.asarray(Vector3(0, 0, 1).rotate(rotation)), [1, 0, 0], atol=1e-15)

    def test_normalize_angles(self):

        self.assertEqual(Vector3(-90, 370, 45).normalize_angles_in_degrees(), Vector3(270, 10, 45))

        np.testing.assert_allclose(np.asarray(Vector3(-np.pi, 3 * np.pi, 1).normalize_angles_in_radians()),
                                   [np.pi, np.pi, 1])

    def test_to_quaternion(self):

        angles = Vector3(0.1, 0.2, 0.3)

        self.assertEqual(angles.to_quaternion_from_radians(), Quaternion.from_euler_in_radians(angles))
        self.assertEqual((angles * (180 / np.pi)).to_quaternion_from_degrees(),
                         Quaternion.from_euler_in_degrees(angles * (180 / np.pi)))

        self.assertEqual(Vector3.UNIT_Y.to_quaternion_from_axis_in_radians(0.5),
                         Quaternion.create_from_axis_angle(Vector3.UNIT_Y, 0.5))

        np.testing.assert_allclose(np.asarray(Vector3.UNIT_X.to_quaternion_from_axis_in_degrees(90)),
                                   np.asarray(Quaternion.X90))
