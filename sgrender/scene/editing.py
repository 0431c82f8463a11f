import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.transformation import Rotation, Scaling, Transformation, Translation
from sgrender.core.transformation import Rotation, Scaling, Transformation, Translation
from sgrender.scene.nodes import GroupNode, SceneGraphError
from sgrender.scene.nodes import GroupNode, SceneGraphError

def compose_transformation(node: GroupNode, transformation: Transformation) -> Transformation:
    """
    Post-composes transformation onto the node's current one and stores the result on the node.
#   Post-composes transformation onto the node's current one and stores the result on the node.
    The new transformation acts in the node's local space:
#   The new transformation acts in the node's local space:
    matrix = old @ new, inverse = new^-1 @ old^-1.
#   matrix = old @ new, inverse = new^-1 @ old^-1.
    """
    if not isinstance(node, GroupNode):
#   if not isinstance(node, GroupNode):
        raise SceneGraphError(f"Only group nodes carry a transformation, got {node!r}")
#       raise SceneGraphError(f"Only group nodes carry a transformation, got {node!r}")
    composed: Transformation = node.transform.post_compose(transformation)
#   composed: Transformation = node.transform.post_compose(transformation)
    node.replace_transform(composed)
#   node.replace_transform(composed)
    return composed
#   return composed

def compose_translation(node: GroupNode, delta: npt.ArrayLike) -> Transformation:
    return compose_transformation(node, Translation(delta))
#   return compose_transformation(node, Translation(delta))

def compose_rotation(node: GroupNode, axis: npt.ArrayLike, angle_degrees: float) -> Transformation:
    return compose_transformation(node, Rotation(axis, np.radians(angle_degrees)))
#   return compose_transformation(node, Rotation(axis, np.radians(angle_degrees)))

def compose_scale(node: GroupNode, scale: npt.ArrayLike) -> Transformation:
    return compose_transformation(node, Scaling(scale))
#   return compose_transformation(node, Scaling(scale))
