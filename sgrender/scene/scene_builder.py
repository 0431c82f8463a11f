import typing
import typing
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import vec3f32
from sgrender.core.common_types import vec3f32
from sgrender.core.transformation import SQT, Translation
from sgrender.core.transformation import SQT, Translation
from sgrender.core.vector_math import quaternion_from_axis_angle
from sgrender.core.vector_math import quaternion_from_axis_angle
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, GeometryNode, GroupNode, Node, PyramidNode, SphereNode, TextureBoxNode, add_child, create_group
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, GeometryNode, GroupNode, Node, PyramidNode, SphereNode, TextureBoxNode, add_child, create_group

class SceneBuilder:
    """
    Places unit primitives in the scene, each under its own SQT group so it can be moved,
#   Places unit primitives in the scene, each under its own SQT group so it can be moved,
    rotated and scaled independently through the transform-update contract.
#   rotated and scaled independently through the transform-update contract.
    """
    def __init__(self, root: GroupNode | None = None) -> None:
#   def __init__(self, root: GroupNode | None = None) -> None:
        self.root: GroupNode = root if root is not None else create_group(Translation((0.0, 0.0, 0.0)), name="root")
#       self.root: GroupNode = root if root is not None else create_group(Translation((0.0, 0.0, 0.0)), name="root")
        self.groups: list[GroupNode] = []
#       self.groups: list[GroupNode] = []
        self.leaves: list[GeometryNode] = []
#       self.leaves: list[GeometryNode] = []
        pass
#       pass

    def place(self, leaf: GeometryNode, position: vec3f32, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
#   def place(self, leaf: GeometryNode, position: vec3f32, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
        rotation: npt.NDArray[np.float64] = quaternion_from_axis_angle(np.asarray(axis, dtype=np.float64), angle)
#       rotation: npt.NDArray[np.float64] = quaternion_from_axis_angle(np.asarray(axis, dtype=np.float64), angle)
        group: GroupNode = create_group(SQT(scale=scale, rotation=rotation, translation=position), name=f"{leaf.name or leaf.kind.value}-group")
#       group: GroupNode = create_group(SQT(scale=scale, rotation=rotation, translation=position), name=f"{leaf.name or leaf.kind.value}-group")
        add_child(group, leaf)
#       add_child(group, leaf)
        add_child(parent if parent is not None else self.root, group)
#       add_child(parent if parent is not None else self.root, group)
        self.groups.append(group)
#       self.groups.append(group)
        self.leaves.append(leaf)
#       self.leaves.append(leaf)
        return group
#       return group

    def add_box(self, position: vec3f32, color: vec3f32, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
#   def add_box(self, position: vec3f32, color: vec3f32, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
        return self.place(AABoxNode(color=color, name="box"), position, scale, axis, angle, parent)
#       return self.place(AABoxNode(color=color, name="box"), position, scale, axis, angle, parent)

    def add_texture_box(self, position: vec3f32, texture: str, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
#   def add_texture_box(self, position: vec3f32, texture: str, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
        return self.place(TextureBoxNode(texture=texture, name="texture-box"), position, scale, axis, angle, parent)
#       return self.place(TextureBoxNode(texture=texture, name="texture-box"), position, scale, axis, angle, parent)

    def add_sphere(self, position: vec3f32, color: vec3f32, radius: float = 0.5, parent: GroupNode | None = None) -> GroupNode:
#   def add_sphere(self, position: vec3f32, color: vec3f32, radius: float = 0.5, parent: GroupNode | None = None) -> GroupNode:
        return self.place(SphereNode(color=color, radius=radius, name="sphere"), position, parent=parent)
#       return self.place(SphereNode(color=color, radius=radius, name="sphere"), position, parent=parent)

    def add_pyramid(self, position: vec3f32, color: vec3f32, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
#   def add_pyramid(self, position: vec3f32, color: vec3f32, scale: vec3f32 = (1.0, 1.0, 1.0), axis: vec3f32 = (0.0, 1.0, 0.0), angle: float = 0.0, parent: GroupNode | None = None) -> GroupNode:
        return self.place(PyramidNode(color=color, name="pyramid"), position, scale, axis, angle, parent)
#       return self.place(PyramidNode(color=color, name="pyramid"), position, scale, axis, angle, parent)

    def add_custom_shape(self, position: vec3f32, vertices: typing.Sequence[vec3f32], indices: typing.Sequence[int], color: vec3f32, parent: GroupNode | None = None) -> GroupNode:
#   def add_custom_shape(self, position: vec3f32, vertices: typing.Sequence[vec3f32], indices: typing.Sequence[int], color: vec3f32, parent: GroupNode | None = None) -> GroupNode:
        return self.place(CustomShapeNode(vertices=vertices, indices=indices, color=color, name="custom-shape"), position, parent=parent)
#       return self.place(CustomShapeNode(vertices=vertices, indices=indices, color=color, name="custom-shape"), position, parent=parent)

class DefaultScene(typing.NamedTuple):
    root: GroupNode
#   root: GroupNode
    # Group the keyboard controls move, rotate and scale
#   # Group the keyboard controls move, rotate and scale
    editable: GroupNode
#   editable: GroupNode
    nodes: dict[str, Node]
#   nodes: dict[str, Node]

def build_default_scene() -> DefaultScene:
    #        root
#   #        root
    #         |
#   #         |
    #     editable T(0, 0, -5)
#   #     editable T(0, 0, -5)
    #    +----+-----+---------+
#   #    +----+-----+---------+
    #  box  sphere  pyramid  tetrahedron
#   #  box  sphere  pyramid  tetrahedron
    builder: SceneBuilder = SceneBuilder()
#   builder: SceneBuilder = SceneBuilder()
    editable: GroupNode = create_group(Translation((0.0, 0.0, -5.0)), name="editable")
#   editable: GroupNode = create_group(Translation((0.0, 0.0, -5.0)), name="editable")
    add_child(builder.root, editable)
#   add_child(builder.root, editable)

    builder.add_box(position=(0.0, 0.0, 0.0), color=(0.5, 0.0, 0.0), parent=editable)
#   builder.add_box(position=(0.0, 0.0, 0.0), color=(0.5, 0.0, 0.0), parent=editable)
    builder.add_sphere(position=(-1.5, 0.0, 0.0), color=(0.1, 0.4, 0.8), radius=0.5, parent=editable)
#   builder.add_sphere(position=(-1.5, 0.0, 0.0), color=(0.1, 0.4, 0.8), radius=0.5, parent=editable)
    builder.add_pyramid(position=(1.5, -0.5, 0.0), color=(0.2, 0.7, 0.2), axis=(0.0, 1.0, 0.0), angle=np.pi / 4.0, parent=editable)
#   builder.add_pyramid(position=(1.5, -0.5, 0.0), color=(0.2, 0.7, 0.2), axis=(0.0, 1.0, 0.0), angle=np.pi / 4.0, parent=editable)
    builder.add_custom_shape(
#   builder.add_custom_shape(
        position=(0.0, 1.2, 0.0),
#       position=(0.0, 1.2, 0.0),
        vertices=[(-0.4, -0.3, 0.3), (0.4, -0.3, 0.3), (0.0, -0.3, -0.4), (0.0, 0.4, 0.0)],
#       vertices=[(-0.4, -0.3, 0.3), (0.4, -0.3, 0.3), (0.0, -0.3, -0.4), (0.0, 0.4, 0.0)],
        indices=[0, 1, 3, 1, 2, 3, 2, 0, 3, 0, 2, 1],
#       indices=[0, 1, 3, 1, 2, 3, 2, 0, 3, 0, 2, 1],
        color=(0.8, 0.6, 0.1),
#       color=(0.8, 0.6, 0.1),
        parent=editable,
#       parent=editable,
    )
#   )

    nodes: dict[str, Node] = {leaf.name or leaf.kind.value: leaf for leaf in builder.leaves}
#   nodes: dict[str, Node] = {leaf.name or leaf.kind.value: leaf for leaf in builder.leaves}
    return DefaultScene(root=builder.root, editable=editable, nodes=nodes)
#   return DefaultScene(root=builder.root, editable=editable, nodes=nodes)
