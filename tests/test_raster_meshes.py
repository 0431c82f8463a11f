import unittest
import unittest
import numpy as np
import numpy as np
import numpy.testing as npt
import numpy.testing as npt
from sgrender.core.vector_math import point
from sgrender.core.vector_math import point
from sgrender.renderer.raster_meshes import FLOATS_PER_VERTEX, box_mesh, custom_mesh, mesh_for, pyramid_mesh, sphere_mesh
from sgrender.renderer.raster_meshes import FLOATS_PER_VERTEX, box_mesh, custom_mesh, mesh_for, pyramid_mesh, sphere_mesh
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, PyramidNode, SphereNode, TextureBoxNode
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, PyramidNode, SphereNode, TextureBoxNode

def assert_unit_normals(mesh: np.ndarray) -> None:
    npt.assert_allclose(np.linalg.norm(mesh[:, 3:6], axis=1), 1.0, atol=1e-5)
#   npt.assert_allclose(np.linalg.norm(mesh[:, 3:6], axis=1), 1.0, atol=1e-5)

class TestRasterMeshes(unittest.TestCase):
    def test_box_has_twelve_triangles_within_bounds(self) -> None:
#   def test_box_has_twelve_triangles_within_bounds(self) -> None:
        mesh = box_mesh(point(-1.0, -2.0, -3.0), point(1.0, 2.0, 3.0))
#       mesh = box_mesh(point(-1.0, -2.0, -3.0), point(1.0, 2.0, 3.0))
        self.assertEqual(mesh.shape, (36, FLOATS_PER_VERTEX))
#       self.assertEqual(mesh.shape, (36, FLOATS_PER_VERTEX))
        self.assertEqual(mesh.dtype, np.float32)
#       self.assertEqual(mesh.dtype, np.float32)
        npt.assert_allclose(mesh[:, :3].min(axis=0), [-1.0, -2.0, -3.0])
#       npt.assert_allclose(mesh[:, :3].min(axis=0), [-1.0, -2.0, -3.0])
        npt.assert_allclose(mesh[:, :3].max(axis=0), [1.0, 2.0, 3.0])
#       npt.assert_allclose(mesh[:, :3].max(axis=0), [1.0, 2.0, 3.0])
        assert_unit_normals(mesh)
#       assert_unit_normals(mesh)

    def test_box_normals_point_outward(self) -> None:
#   def test_box_normals_point_outward(self) -> None:
        mesh = box_mesh(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))
#       mesh = box_mesh(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))
        # For a centred box every vertex lies on the outward side of its face normal
#       # For a centred box every vertex lies on the outward side of its face normal
        self.assertTrue(np.all(np.einsum("ij,ij->i", mesh[:, :3], mesh[:, 3:6]) > 0.0))
#       self.assertTrue(np.all(np.einsum("ij,ij->i", mesh[:, :3], mesh[:, 3:6]) > 0.0))

    def test_sphere_vertices_lie_on_surface(self) -> None:
#   def test_sphere_vertices_lie_on_surface(self) -> None:
        mesh = sphere_mesh(point(1.0, 0.0, -2.0), 0.5, ring_size=12)
#       mesh = sphere_mesh(point(1.0, 0.0, -2.0), 0.5, ring_size=12)
        self.assertEqual(mesh.shape, (11 * 12 * 6, FLOATS_PER_VERTEX))
#       self.assertEqual(mesh.shape, (11 * 12 * 6, FLOATS_PER_VERTEX))
        npt.assert_allclose(np.linalg.norm(mesh[:, :3] - np.array([1.0, 0.0, -2.0]), axis=1), 0.5, atol=1e-5)
#       npt.assert_allclose(np.linalg.norm(mesh[:, :3] - np.array([1.0, 0.0, -2.0]), axis=1), 0.5, atol=1e-5)
        assert_unit_normals(mesh)
#       assert_unit_normals(mesh)
        self.assertTrue(np.all((mesh[:, 6:8] >= 0.0) & (mesh[:, 6:8] <= 1.0)))
#       self.assertTrue(np.all((mesh[:, 6:8] >= 0.0) & (mesh[:, 6:8] <= 1.0)))

    def test_pyramid_has_six_triangles(self) -> None:
#   def test_pyramid_has_six_triangles(self) -> None:
        base = [point(-0.5, 0.0, -0.5), point(0.5, 0.0, -0.5), point(0.5, 0.0, 0.5), point(-0.5, 0.0, 0.5)]
#       base = [point(-0.5, 0.0, -0.5), point(0.5, 0.0, -0.5), point(0.5, 0.0, 0.5), point(-0.5, 0.0, 0.5)]
        mesh = pyramid_mesh(base, point(0.0, 1.0, 0.0))
#       mesh = pyramid_mesh(base, point(0.0, 1.0, 0.0))
        self.assertEqual(mesh.shape, (18, FLOATS_PER_VERTEX))
#       self.assertEqual(mesh.shape, (18, FLOATS_PER_VERTEX))
        assert_unit_normals(mesh)
#       assert_unit_normals(mesh)
        # Base triangles face down
#       # Base triangles face down
        npt.assert_allclose(mesh[12:, 3:6], np.tile([0.0, -1.0, 0.0], (6, 1)), atol=1e-6)
#       npt.assert_allclose(mesh[12:, 3:6], np.tile([0.0, -1.0, 0.0], (6, 1)), atol=1e-6)

    def test_custom_mesh_flat_normals(self) -> None:
#   def test_custom_mesh_flat_normals(self) -> None:
        mesh = custom_mesh([point(0.0, 0.0, 0.0), point(1.0, 0.0, 0.0), point(0.0, 1.0, 0.0)], [0, 1, 2])
#       mesh = custom_mesh([point(0.0, 0.0, 0.0), point(1.0, 0.0, 0.0), point(0.0, 1.0, 0.0)], [0, 1, 2])
        self.assertEqual(mesh.shape, (3, FLOATS_PER_VERTEX))
#       self.assertEqual(mesh.shape, (3, FLOATS_PER_VERTEX))
        npt.assert_allclose(mesh[:, 3:6], np.tile([0.0, 0.0, 1.0], (3, 1)))
#       npt.assert_allclose(mesh[:, 3:6], np.tile([0.0, 0.0, 1.0], (3, 1)))

    def test_mesh_for_every_geometry_kind(self) -> None:
#   def test_mesh_for_every_geometry_kind(self) -> None:
        nodes = [
#       nodes = [
            SphereNode(color=(1.0, 0.0, 0.0)),
#           SphereNode(color=(1.0, 0.0, 0.0)),
            AABoxNode(color=(1.0, 0.0, 0.0)),
#           AABoxNode(color=(1.0, 0.0, 0.0)),
            TextureBoxNode(texture="crate.png"),
#           TextureBoxNode(texture="crate.png"),
            PyramidNode(color=(1.0, 0.0, 0.0)),
#           PyramidNode(color=(1.0, 0.0, 0.0)),
            CustomShapeNode(vertices=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)], indices=[0, 1, 2], color=(1.0, 0.0, 0.0)),
#           CustomShapeNode(vertices=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)], indices=[0, 1, 2], color=(1.0, 0.0, 0.0)),
        ]
#       ]
        for node in nodes:
#       for node in nodes:
            mesh = mesh_for(node)
#           mesh = mesh_for(node)
            self.assertEqual(mesh.shape[1], FLOATS_PER_VERTEX)
#           self.assertEqual(mesh.shape[1], FLOATS_PER_VERTEX)
            self.assertEqual(mesh.shape[0] % 3, 0)
#           self.assertEqual(mesh.shape[0] % 3, 0)
