import unittest
import unittest
import numpy as np
import numpy as np
import numpy.testing as npt
import numpy.testing as npt
from sgrender.core.common_types import PhongValues
from sgrender.core.common_types import PhongValues
from sgrender.core.vector_math import direction, normalize, point, vector
from sgrender.core.vector_math import direction, normalize, point, vector
from sgrender.raytracing.phong import phong
from sgrender.raytracing.phong import phong

class TestPhong(unittest.TestCase):
    def setUp(self) -> None:
#   def setUp(self) -> None:
        self.red = vector(1.0, 0.0, 0.0, 1.0)
#       self.red = vector(1.0, 0.0, 0.0, 1.0)
        self.surface_point = point(0.0, 0.0, -4.0)
#       self.surface_point = point(0.0, 0.0, -4.0)
        self.normal = direction(0.0, 0.0, 1.0)
#       self.normal = direction(0.0, 0.0, 1.0)
        self.view_direction = direction(0.0, 0.0, 1.0)
#       self.view_direction = direction(0.0, 0.0, 1.0)
        self.phong_values: PhongValues = {"ambient": 0.1, "diffuse": 0.5, "specular": 0.2, "shininess": 10.0}
#       self.phong_values: PhongValues = {"ambient": 0.1, "diffuse": 0.5, "specular": 0.2, "shininess": 10.0}

    def test_head_on_light(self) -> None:
#   def test_head_on_light(self) -> None:
        color = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(0.0, 0.0, 0.0)], self.phong_values)
#       color = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(0.0, 0.0, 0.0)], self.phong_values)
        npt.assert_allclose(color, [0.8, 0.2, 0.2, 1.0])
#       npt.assert_allclose(color, [0.8, 0.2, 0.2, 1.0])

    def test_no_lights_is_ambient_only(self) -> None:
#   def test_no_lights_is_ambient_only(self) -> None:
        color = phong(self.red, self.surface_point, self.normal, self.view_direction, [], self.phong_values)
#       color = phong(self.red, self.surface_point, self.normal, self.view_direction, [], self.phong_values)
        npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])
#       npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])

    def test_light_behind_surface_adds_nothing(self) -> None:
#   def test_light_behind_surface_adds_nothing(self) -> None:
        color = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(0.0, 0.0, -10.0)], self.phong_values)
#       color = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(0.0, 0.0, -10.0)], self.phong_values)
        npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])
#       npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])

    def test_light_behind_surface_off_axis_adds_no_highlight(self) -> None:
#   def test_light_behind_surface_off_axis_adds_no_highlight(self) -> None:
        # Grazing view toward the mirror direction of a light just below the surface plane
#       # Grazing view toward the mirror direction of a light just below the surface plane
        origin = point(0.0, 0.0, 0.0)
#       origin = point(0.0, 0.0, 0.0)
        view_direction = normalize(direction(-1.0, 0.0, 0.1))
#       view_direction = normalize(direction(-1.0, 0.0, 0.1))
        color = phong(self.red, origin, self.normal, view_direction, [point(10.0, 0.0, -1.0)], self.phong_values)
#       color = phong(self.red, origin, self.normal, view_direction, [point(10.0, 0.0, -1.0)], self.phong_values)
        npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])
#       npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])

    def test_light_on_surface_is_skipped(self) -> None:
#   def test_light_on_surface_is_skipped(self) -> None:
        color = phong(self.red, self.surface_point, self.normal, self.view_direction, [self.surface_point.copy()], self.phong_values)
#       color = phong(self.red, self.surface_point, self.normal, self.view_direction, [self.surface_point.copy()], self.phong_values)
        npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])
#       npt.assert_allclose(color, [0.1, 0.0, 0.0, 1.0])

    def test_result_is_clamped(self) -> None:
#   def test_result_is_clamped(self) -> None:
        bright: PhongValues = {"ambient": 1.0, "diffuse": 1.0, "specular": 1.0, "shininess": 1.0}
#       bright: PhongValues = {"ambient": 1.0, "diffuse": 1.0, "specular": 1.0, "shininess": 1.0}
        lights = [point(0.0, 0.0, 0.0), point(0.0, 0.0, 1.0)]
#       lights = [point(0.0, 0.0, 0.0), point(0.0, 0.0, 1.0)]
        color = phong(vector(1.0, 1.0, 1.0, 1.0), self.surface_point, self.normal, self.view_direction, lights, bright)
#       color = phong(vector(1.0, 1.0, 1.0, 1.0), self.surface_point, self.normal, self.view_direction, lights, bright)
        npt.assert_allclose(color, [1.0, 1.0, 1.0, 1.0])
#       npt.assert_allclose(color, [1.0, 1.0, 1.0, 1.0])

    def test_specular_falls_off_with_angle(self) -> None:
#   def test_specular_falls_off_with_angle(self) -> None:
        values: PhongValues = {"ambient": 0.0, "diffuse": 0.0, "specular": 1.0, "shininess": 10.0}
#       values: PhongValues = {"ambient": 0.0, "diffuse": 0.0, "specular": 1.0, "shininess": 10.0}
        head_on = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(0.0, 0.0, 0.0)], values)
#       head_on = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(0.0, 0.0, 0.0)], values)
        oblique = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(2.0, 0.0, -2.0)], values)
#       oblique = phong(self.red, self.surface_point, self.normal, self.view_direction, [point(2.0, 0.0, -2.0)], values)
        self.assertGreater(head_on[1], oblique[1])
#       self.assertGreater(head_on[1], oblique[1])
        self.assertTrue(np.all(oblique[:3] >= 0.0))
#       self.assertTrue(np.all(oblique[:3] >= 0.0))
