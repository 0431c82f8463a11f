import unittest
import unittest
import numpy as np
import numpy as np
import numpy.testing as npt
import numpy.testing as npt
from sgrender.core.transformation import SQT, Rotation, Scaling, Transformation, Translation
from sgrender.core.transformation import SQT, Rotation, Scaling, Transformation, Translation
from sgrender.core.vector_math import identity, quaternion_from_axis_angle
from sgrender.core.vector_math import identity, quaternion_from_axis_angle
from sgrender.scene.editing import compose_rotation, compose_scale, compose_translation
from sgrender.scene.editing import compose_rotation, compose_scale, compose_translation
from sgrender.scene.nodes import GroupNode, SceneGraphError, SphereNode
from sgrender.scene.nodes import GroupNode, SceneGraphError, SphereNode

def assert_round_trip(testcase: unittest.TestCase, transformation: Transformation) -> None:
    npt.assert_allclose(transformation.get_matrix() @ transformation.get_inverse_matrix(), identity(), atol=1e-9)
#   npt.assert_allclose(transformation.get_matrix() @ transformation.get_inverse_matrix(), identity(), atol=1e-9)
    npt.assert_allclose(transformation.get_inverse_matrix() @ transformation.get_matrix(), identity(), atol=1e-9)
#   npt.assert_allclose(transformation.get_inverse_matrix() @ transformation.get_matrix(), identity(), atol=1e-9)

class TestTransformations(unittest.TestCase):
    def test_translation_round_trip(self) -> None:
#   def test_translation_round_trip(self) -> None:
        assert_round_trip(self, Translation((1.0, -2.0, 3.5)))
#       assert_round_trip(self, Translation((1.0, -2.0, 3.5)))

    def test_rotation_round_trip(self) -> None:
#   def test_rotation_round_trip(self) -> None:
        assert_round_trip(self, Rotation((0.3, 1.0, -0.2), 1.1))
#       assert_round_trip(self, Rotation((0.3, 1.0, -0.2), 1.1))

    def test_scaling_round_trip(self) -> None:
#   def test_scaling_round_trip(self) -> None:
        assert_round_trip(self, Scaling((2.0, 0.5, -3.0)))
#       assert_round_trip(self, Scaling((2.0, 0.5, -3.0)))

    def test_sqt_round_trip(self) -> None:
#   def test_sqt_round_trip(self) -> None:
        rotation = quaternion_from_axis_angle(np.array([1.0, 1.0, 0.0]) / np.sqrt(2.0), 0.8)
#       rotation = quaternion_from_axis_angle(np.array([1.0, 1.0, 0.0]) / np.sqrt(2.0), 0.8)
        assert_round_trip(self, SQT(scale=(1.0, 2.0, 3.0), rotation=rotation, translation=(4.0, 5.0, 6.0)))
#       assert_round_trip(self, SQT(scale=(1.0, 2.0, 3.0), rotation=rotation, translation=(4.0, 5.0, 6.0)))

    def test_sqt_applies_scale_then_rotation_then_translation(self) -> None:
#   def test_sqt_applies_scale_then_rotation_then_translation(self) -> None:
        rotation = np.array([0.0, 0.0, np.sin(np.pi / 4.0), np.cos(np.pi / 4.0)])
#       rotation = np.array([0.0, 0.0, np.sin(np.pi / 4.0), np.cos(np.pi / 4.0)])
        sqt = SQT(scale=(2.0, 2.0, 2.0), rotation=rotation, translation=(0.0, 0.0, -5.0))
#       sqt = SQT(scale=(2.0, 2.0, 2.0), rotation=rotation, translation=(0.0, 0.0, -5.0))
        npt.assert_allclose(sqt.get_matrix() @ np.array([1.0, 0.0, 0.0, 1.0]), [0.0, 2.0, -5.0, 1.0], atol=1e-12)
#       npt.assert_allclose(sqt.get_matrix() @ np.array([1.0, 0.0, 0.0, 1.0]), [0.0, 2.0, -5.0, 1.0], atol=1e-12)

    def test_sqt_setter_rebuilds(self) -> None:
#   def test_sqt_setter_rebuilds(self) -> None:
        sqt = SQT(scale=(1.0, 1.0, 1.0), rotation=(0.0, 0.0, 0.0, 1.0), translation=(0.0, 0.0, 0.0))
#       sqt = SQT(scale=(1.0, 1.0, 1.0), rotation=(0.0, 0.0, 0.0, 1.0), translation=(0.0, 0.0, 0.0))
        sqt.translation = (1.0, 2.0, 3.0)
#       sqt.translation = (1.0, 2.0, 3.0)
        npt.assert_allclose(sqt.get_matrix()[:3, 3], [1.0, 2.0, 3.0])
#       npt.assert_allclose(sqt.get_matrix()[:3, 3], [1.0, 2.0, 3.0])
        assert_round_trip(self, sqt)
#       assert_round_trip(self, sqt)

    def test_invalid_parameters(self) -> None:
#   def test_invalid_parameters(self) -> None:
        with self.assertRaises(ValueError):
#       with self.assertRaises(ValueError):
            Scaling((1.0, 0.0, 1.0))
#           Scaling((1.0, 0.0, 1.0))
        with self.assertRaises(ValueError):
#       with self.assertRaises(ValueError):
            Rotation((0.0, 0.0, 0.0), 1.0)
#           Rotation((0.0, 0.0, 0.0), 1.0)
        with self.assertRaises(ValueError):
#       with self.assertRaises(ValueError):
            SQT(scale=(1.0, 1.0, 1.0), rotation=(0.0, 0.0, 0.0, 0.0), translation=(0.0, 0.0, 0.0))
#           SQT(scale=(1.0, 1.0, 1.0), rotation=(0.0, 0.0, 0.0, 0.0), translation=(0.0, 0.0, 0.0))

    def test_inverses_are_not_numeric(self) -> None:
#   def test_inverses_are_not_numeric(self) -> None:
        rotation = Rotation((0.0, 1.0, 0.0), 0.5)
#       rotation = Rotation((0.0, 1.0, 0.0), 0.5)
        npt.assert_array_equal(rotation.get_inverse_matrix(), rotation.get_matrix().T)
#       npt.assert_array_equal(rotation.get_inverse_matrix(), rotation.get_matrix().T)
        npt.assert_array_equal(Scaling((2.0, 4.0, 8.0)).get_inverse_matrix(), np.diag([0.5, 0.25, 0.125, 1.0]))
#       npt.assert_array_equal(Scaling((2.0, 4.0, 8.0)).get_inverse_matrix(), np.diag([0.5, 0.25, 0.125, 1.0]))

class TestPostCompose(unittest.TestCase):
    def test_matrix_and_inverse_order(self) -> None:
#   def test_matrix_and_inverse_order(self) -> None:
        old = Translation((1.0, 0.0, 0.0))
#       old = Translation((1.0, 0.0, 0.0))
        new = Scaling((2.0, 2.0, 2.0))
#       new = Scaling((2.0, 2.0, 2.0))
        composed = old.post_compose(new)
#       composed = old.post_compose(new)
        npt.assert_allclose(composed.get_matrix(), old.get_matrix() @ new.get_matrix())
#       npt.assert_allclose(composed.get_matrix(), old.get_matrix() @ new.get_matrix())
        npt.assert_allclose(composed.get_inverse_matrix(), new.get_inverse_matrix() @ old.get_inverse_matrix())
#       npt.assert_allclose(composed.get_inverse_matrix(), new.get_inverse_matrix() @ old.get_inverse_matrix())
        # The operands stay untouched
#       # The operands stay untouched
        npt.assert_allclose(new.get_matrix(), np.diag([2.0, 2.0, 2.0, 1.0]))
#       npt.assert_allclose(new.get_matrix(), np.diag([2.0, 2.0, 2.0, 1.0]))

    def test_chained_compositions_round_trip(self) -> None:
#   def test_chained_compositions_round_trip(self) -> None:
        transformation: Transformation = Translation((0.0, 0.0, -5.0))
#       transformation: Transformation = Translation((0.0, 0.0, -5.0))
        for step in [Rotation((1.0, 0.0, 0.0), 0.4), Scaling((1.1, 0.9, 1.0)), Translation((0.2, 0.0, 0.0)), Rotation((0.0, 0.0, 1.0), -1.2), Scaling((0.5, 0.5, 0.5))]:
#       for step in [Rotation((1.0, 0.0, 0.0), 0.4), Scaling((1.1, 0.9, 1.0)), Translation((0.2, 0.0, 0.0)), Rotation((0.0, 0.0, 1.0), -1.2), Scaling((0.5, 0.5, 0.5))]:
            transformation = transformation.post_compose(step)
#           transformation = transformation.post_compose(step)
            assert_round_trip(self, transformation)
#           assert_round_trip(self, transformation)

class TestComposeOnNodes(unittest.TestCase):
    def setUp(self) -> None:
#   def setUp(self) -> None:
        self.node = GroupNode(Translation((0.0, 0.0, -5.0)))
#       self.node = GroupNode(Translation((0.0, 0.0, -5.0)))

    def test_compose_translation_acts_in_local_space(self) -> None:
#   def test_compose_translation_acts_in_local_space(self) -> None:
        old_matrix = self.node.transform.get_matrix()
#       old_matrix = self.node.transform.get_matrix()
        compose_translation(self.node, (0.0, 0.2, 0.0))
#       compose_translation(self.node, (0.0, 0.2, 0.0))
        npt.assert_allclose(self.node.transform.get_matrix(), old_matrix @ Translation((0.0, 0.2, 0.0)).get_matrix())
#       npt.assert_allclose(self.node.transform.get_matrix(), old_matrix @ Translation((0.0, 0.2, 0.0)).get_matrix())

    def test_compose_rotation_takes_degrees(self) -> None:
#   def test_compose_rotation_takes_degrees(self) -> None:
        old_matrix = self.node.transform.get_matrix()
#       old_matrix = self.node.transform.get_matrix()
        compose_rotation(self.node, (0.0, 1.0, 0.0), 20.0)
#       compose_rotation(self.node, (0.0, 1.0, 0.0), 20.0)
        npt.assert_allclose(self.node.transform.get_matrix(), old_matrix @ Rotation((0.0, 1.0, 0.0), np.radians(20.0)).get_matrix())
#       npt.assert_allclose(self.node.transform.get_matrix(), old_matrix @ Rotation((0.0, 1.0, 0.0), np.radians(20.0)).get_matrix())

    def test_contract_holds_after_many_edits(self) -> None:
#   def test_contract_holds_after_many_edits(self) -> None:
        for _ in range(3):
#       for _ in range(3):
            compose_translation(self.node, (0.2, 0.0, 0.0))
#           compose_translation(self.node, (0.2, 0.0, 0.0))
            compose_rotation(self.node, (1.0, 0.0, 0.0), 20.0)
#           compose_rotation(self.node, (1.0, 0.0, 0.0), 20.0)
            compose_scale(self.node, (1.1, 1.0, 0.9))
#           compose_scale(self.node, (1.1, 1.0, 0.9))
            assert_round_trip(self, self.node.transform)
#           assert_round_trip(self, self.node.transform)

    def test_compose_on_leaf_raises(self) -> None:
#   def test_compose_on_leaf_raises(self) -> None:
        with self.assertRaises(SceneGraphError):
#       with self.assertRaises(SceneGraphError):
            compose_translation(SphereNode(color=(1.0, 0.0, 0.0)), (1.0, 0.0, 0.0)) # type: ignore[arg-type]
#           compose_translation(SphereNode(color=(1.0, 0.0, 0.0)), (1.0, 0.0, 0.0)) # type: ignore[arg-type]
