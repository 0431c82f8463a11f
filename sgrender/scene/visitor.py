import typing
import typing
from sgrender.core.common_types import Matrix
from sgrender.core.common_types import Matrix
from sgrender.core.vector_math import identity
from sgrender.core.vector_math import identity
from sgrender.scene.nodes import AABoxNode, CameraNode, CustomShapeNode, GeometryNode, GroupNode, LightNode, Node, NodeKind, PyramidNode, SphereNode, TextureBoxNode
from sgrender.scene.nodes import AABoxNode, CameraNode, CustomShapeNode, GeometryNode, GroupNode, LightNode, Node, NodeKind, PyramidNode, SphereNode, TextureBoxNode

class Visitor:
    """
    Double dispatch over the closed set of node kinds.
#   Double dispatch over the closed set of node kinds.
    visit() looks the node's kind up in a dispatch table of bound handlers, so subclasses
#   visit() looks the node's kind up in a dispatch table of bound handlers, so subclasses
    only override the handlers they care about. Geometry handlers funnel into
#   only override the handlers they care about. Geometry handlers funnel into
    visit_geometry_node by default.
#   visit_geometry_node by default.
    """
    def __init__(self) -> None:
#   def __init__(self) -> None:
        self.dispatch_table: dict[NodeKind, typing.Callable[[typing.Any], None]] = {
#       self.dispatch_table: dict[NodeKind, typing.Callable[[typing.Any], None]] = {
            NodeKind.GROUP: self.visit_group_node,
#           NodeKind.GROUP: self.visit_group_node,
            NodeKind.SPHERE: self.visit_sphere_node,
#           NodeKind.SPHERE: self.visit_sphere_node,
            NodeKind.AABOX: self.visit_aabox_node,
#           NodeKind.AABOX: self.visit_aabox_node,
            NodeKind.PYRAMID: self.visit_pyramid_node,
#           NodeKind.PYRAMID: self.visit_pyramid_node,
            NodeKind.TEXTURE_BOX: self.visit_texture_box_node,
#           NodeKind.TEXTURE_BOX: self.visit_texture_box_node,
            NodeKind.CUSTOM_SHAPE: self.visit_custom_shape_node,
#           NodeKind.CUSTOM_SHAPE: self.visit_custom_shape_node,
            NodeKind.CAMERA: self.visit_camera_node,
#           NodeKind.CAMERA: self.visit_camera_node,
            NodeKind.LIGHT: self.visit_light_node,
#           NodeKind.LIGHT: self.visit_light_node,
        }
#       }
        pass
#       pass

    def visit(self, node: Node) -> None:
#   def visit(self, node: Node) -> None:
        self.dispatch_table[node.kind](node)
#       self.dispatch_table[node.kind](node)

    def visit_group_node(self, node: GroupNode) -> None:
#   def visit_group_node(self, node: GroupNode) -> None:
        for child in node.children:
#       for child in node.children:
            self.visit(child)
#           self.visit(child)

    def visit_sphere_node(self, node: SphereNode) -> None:
#   def visit_sphere_node(self, node: SphereNode) -> None:
        self.visit_geometry_node(node)
#       self.visit_geometry_node(node)

    def visit_aabox_node(self, node: AABoxNode) -> None:
#   def visit_aabox_node(self, node: AABoxNode) -> None:
        self.visit_geometry_node(node)
#       self.visit_geometry_node(node)

    def visit_pyramid_node(self, node: PyramidNode) -> None:
#   def visit_pyramid_node(self, node: PyramidNode) -> None:
        self.visit_geometry_node(node)
#       self.visit_geometry_node(node)

    def visit_texture_box_node(self, node: TextureBoxNode) -> None:
#   def visit_texture_box_node(self, node: TextureBoxNode) -> None:
        self.visit_geometry_node(node)
#       self.visit_geometry_node(node)

    def visit_custom_shape_node(self, node: CustomShapeNode) -> None:
#   def visit_custom_shape_node(self, node: CustomShapeNode) -> None:
        self.visit_geometry_node(node)
#       self.visit_geometry_node(node)

    def visit_geometry_node(self, node: GeometryNode) -> None:
#   def visit_geometry_node(self, node: GeometryNode) -> None:
        pass
#       pass

    def visit_camera_node(self, node: CameraNode) -> None:
#   def visit_camera_node(self, node: CameraNode) -> None:
        pass
#       pass

    def visit_light_node(self, node: LightNode) -> None:
#   def visit_light_node(self, node: LightNode) -> None:
        pass
#       pass

class TransformStackVisitor(Visitor):
    """
    Keeps two parallel stacks while walking the tree: accumulated world matrices and their inverses.
#   Keeps two parallel stacks while walking the tree: accumulated world matrices and their inverses.
    A group pushes parent @ own on the way down and own^-1 @ parent^-1 alongside it,
#   A group pushes parent @ own on the way down and own^-1 @ parent^-1 alongside it,
    then pops both after its last child, so siblings never see each other's transforms.
#   then pops both after its last child, so siblings never see each other's transforms.
    """
    def __init__(self) -> None:
#   def __init__(self) -> None:
        super().__init__()
#       super().__init__()
        self.transformations: list[Matrix] = []
#       self.transformations: list[Matrix] = []
        self.inverse_transformations: list[Matrix] = []
#       self.inverse_transformations: list[Matrix] = []
        self.reset()
#       self.reset()
        pass
#       pass

    def reset(self) -> None:
#   def reset(self) -> None:
        # Called at the start of every traversal; the root sees identity on both stacks.
#       # Called at the start of every traversal; the root sees identity on both stacks.
        self.transformations = [identity()]
#       self.transformations = [identity()]
        self.inverse_transformations = [identity()]
#       self.inverse_transformations = [identity()]

    @property
#   @property
    def to_world(self) -> Matrix:
#   def to_world(self) -> Matrix:
        return self.transformations[-1]
#       return self.transformations[-1]

    @property
#   @property
    def from_world(self) -> Matrix:
#   def from_world(self) -> Matrix:
        return self.inverse_transformations[-1]
#       return self.inverse_transformations[-1]

    @property
#   @property
    def depth(self) -> int:
#   def depth(self) -> int:
        return len(self.transformations)
#       return len(self.transformations)

    def visit_group_node(self, node: GroupNode) -> None:
#   def visit_group_node(self, node: GroupNode) -> None:
        self.transformations.append(self.transformations[-1] @ node.transform.get_matrix())
#       self.transformations.append(self.transformations[-1] @ node.transform.get_matrix())
        self.inverse_transformations.append(node.transform.get_inverse_matrix() @ self.inverse_transformations[-1])
#       self.inverse_transformations.append(node.transform.get_inverse_matrix() @ self.inverse_transformations[-1])

        super().visit_group_node(node)
#       super().visit_group_node(node)

        self.transformations.pop()
#       self.transformations.pop()
        self.inverse_transformations.pop()
#       self.inverse_transformations.pop()
