import unittest
import unittest
import numpy as np
import numpy as np
import numpy.testing as npt
import numpy.testing as npt
from sgrender.core.common_types import RasterCamera, RayCamera
from sgrender.core.common_types import RasterCamera, RayCamera
from sgrender.core.settings import DEFAULT_RASTER_CAMERA
from sgrender.core.settings import DEFAULT_RASTER_CAMERA
from sgrender.core.vector_math import point
from sgrender.core.vector_math import point
from sgrender.scene.camera import camera_origin, make_ray, projection_matrix, view_matrix
from sgrender.scene.camera import camera_origin, make_ray, projection_matrix, view_matrix

class TestMakeRay(unittest.TestCase):
    def setUp(self) -> None:
#   def setUp(self) -> None:
        self.camera: RayCamera = {"origin": point(0.0, 0.0, 0.0), "width": 5, "height": 3, "alpha": np.pi / 3.0}
#       self.camera: RayCamera = {"origin": point(0.0, 0.0, 0.0), "width": 5, "height": 3, "alpha": np.pi / 3.0}

    def test_center_pixel_looks_down_negative_z(self) -> None:
#   def test_center_pixel_looks_down_negative_z(self) -> None:
        ray = make_ray(2, 1, self.camera)
#       ray = make_ray(2, 1, self.camera)
        npt.assert_allclose(ray.direction, [0.0, 0.0, -1.0, 0.0], atol=1e-12)
#       npt.assert_allclose(ray.direction, [0.0, 0.0, -1.0, 0.0], atol=1e-12)
        npt.assert_allclose(ray.origin, [0.0, 0.0, 0.0, 1.0])
#       npt.assert_allclose(ray.origin, [0.0, 0.0, 0.0, 1.0])

    def test_top_left_pixel(self) -> None:
#   def test_top_left_pixel(self) -> None:
        direction = make_ray(0, 0, self.camera).direction
#       direction = make_ray(0, 0, self.camera).direction
        self.assertLess(direction[0], 0.0)
#       self.assertLess(direction[0], 0.0)
        self.assertGreater(direction[1], 0.0)
#       self.assertGreater(direction[1], 0.0)
        self.assertAlmostEqual(float(np.linalg.norm(direction)), 1.0)
#       self.assertAlmostEqual(float(np.linalg.norm(direction)), 1.0)

    def test_image_edge_spans_half_field_of_view(self) -> None:
#   def test_image_edge_spans_half_field_of_view(self) -> None:
        direction = make_ray(-0.5, 1, self.camera).direction
#       direction = make_ray(-0.5, 1, self.camera).direction
        self.assertAlmostEqual(float(np.arctan2(-direction[0], -direction[2])), np.pi / 6.0)
#       self.assertAlmostEqual(float(np.arctan2(-direction[0], -direction[2])), np.pi / 6.0)

    def test_origin_is_carried_over(self) -> None:
#   def test_origin_is_carried_over(self) -> None:
        camera: RayCamera = {"origin": point(1.0, 2.0, 3.0), "width": 1, "height": 1, "alpha": np.pi / 4.0}
#       camera: RayCamera = {"origin": point(1.0, 2.0, 3.0), "width": 1, "height": 1, "alpha": np.pi / 4.0}
        npt.assert_allclose(make_ray(0, 0, camera).origin, [1.0, 2.0, 3.0, 1.0])
#       npt.assert_allclose(make_ray(0, 0, camera).origin, [1.0, 2.0, 3.0, 1.0])

class TestRasterCamera(unittest.TestCase):
    def test_camera_origin_uses_eye(self) -> None:
#   def test_camera_origin_uses_eye(self) -> None:
        npt.assert_allclose(camera_origin(DEFAULT_RASTER_CAMERA), [0.0, 0.0, 0.0, 1.0])
#       npt.assert_allclose(camera_origin(DEFAULT_RASTER_CAMERA), [0.0, 0.0, 0.0, 1.0])

    def test_default_view_is_identity(self) -> None:
#   def test_default_view_is_identity(self) -> None:
        npt.assert_allclose(np.asarray(view_matrix(DEFAULT_RASTER_CAMERA)), np.identity(4), atol=1e-6)
#       npt.assert_allclose(np.asarray(view_matrix(DEFAULT_RASTER_CAMERA)), np.identity(4), atol=1e-6)

    def test_view_moves_eye_to_origin(self) -> None:
#   def test_view_moves_eye_to_origin(self) -> None:
        camera: RasterCamera = dict(DEFAULT_RASTER_CAMERA) # type: ignore[assignment]
#       camera: RasterCamera = dict(DEFAULT_RASTER_CAMERA) # type: ignore[assignment]
        camera["eye"] = point(0.0, 0.0, 5.0)
#       camera["eye"] = point(0.0, 0.0, 5.0)
        camera["center"] = point(0.0, 0.0, 0.0)
#       camera["center"] = point(0.0, 0.0, 0.0)
        # pyrr matrices multiply row vectors from the left
#       # pyrr matrices multiply row vectors from the left
        eye_in_view = np.array([0.0, 0.0, 5.0, 1.0]) @ np.asarray(view_matrix(camera))
#       eye_in_view = np.array([0.0, 0.0, 5.0, 1.0]) @ np.asarray(view_matrix(camera))
        npt.assert_allclose(eye_in_view, [0.0, 0.0, 0.0, 1.0], atol=1e-5)
#       npt.assert_allclose(eye_in_view, [0.0, 0.0, 0.0, 1.0], atol=1e-5)

    def test_projection_is_perspective(self) -> None:
#   def test_projection_is_perspective(self) -> None:
        projection = np.asarray(projection_matrix(DEFAULT_RASTER_CAMERA))
#       projection = np.asarray(projection_matrix(DEFAULT_RASTER_CAMERA))
        self.assertEqual(projection.shape, (4, 4))
#       self.assertEqual(projection.shape, (4, 4))
        self.assertAlmostEqual(float(projection[2, 3]), -1.0)
#       self.assertAlmostEqual(float(projection[2, 3]), -1.0)
        self.assertAlmostEqual(float(projection[1, 1]), 1.0 / np.tan(np.radians(30.0)), places=5)
#       self.assertAlmostEqual(float(projection[1, 1]), 1.0 / np.tan(np.radians(30.0)), places=5)
