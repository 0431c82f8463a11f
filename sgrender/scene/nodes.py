import enum
import enum
import typing
import typing
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import Vector
from sgrender.core.common_types import Vector
from sgrender.core.settings import DEFAULT_SURFACE_COLOR, EPSILON
from sgrender.core.settings import DEFAULT_SURFACE_COLOR, EPSILON
from sgrender.core.transformation import Transformation
from sgrender.core.transformation import Transformation
from sgrender.core.vector_math import as_vector, cross, dot, length, normalize
from sgrender.core.vector_math import as_vector, cross, dot, length, normalize

class NodeKind(enum.Enum):
    # Closed set of node variants. Visitors dispatch on this tag.
#   # Closed set of node variants. Visitors dispatch on this tag.
    GROUP = "group"
#   GROUP = "group"
    SPHERE = "sphere"
#   SPHERE = "sphere"
    AABOX = "aabox"
#   AABOX = "aabox"
    PYRAMID = "pyramid"
#   PYRAMID = "pyramid"
    TEXTURE_BOX = "texture_box"
#   TEXTURE_BOX = "texture_box"
    CUSTOM_SHAPE = "custom_shape"
#   CUSTOM_SHAPE = "custom_shape"
    CAMERA = "camera"
#   CAMERA = "camera"
    LIGHT = "light"
#   LIGHT = "light"

class SceneGraphError(Exception):
    # Malformed scene graph: raised while building, never while traversing.
#   # Malformed scene graph: raised while building, never while traversing.
    pass
#   pass

def as_color(color: npt.ArrayLike) -> Vector:
    # RGB inputs get an opaque alpha
#   # RGB inputs get an opaque alpha
    return as_vector(color, w=1.0)
#   return as_vector(color, w=1.0)

class Node:
    kind: typing.ClassVar[NodeKind]
#   kind: typing.ClassVar[NodeKind]

    def __init__(self, name: str | None = None) -> None:
#   def __init__(self, name: str | None = None) -> None:
        self.name: str | None = name
#       self.name: str | None = name
        self.parent: GroupNode | None = None
#       self.parent: GroupNode | None = None
        pass
#       pass

    def __repr__(self) -> str:
#   def __repr__(self) -> str:
        label: str = f" {self.name!r}" if self.name else ""
#       label: str = f" {self.name!r}" if self.name else ""
        return f"<{type(self).__name__}{label}>"
#       return f"<{type(self).__name__}{label}>"

class GroupNode(Node):
    """
    Composite node: one transformation applied to an ordered list of exclusively owned children.
#   Composite node: one transformation applied to an ordered list of exclusively owned children.
    """
    kind = NodeKind.GROUP
#   kind = NodeKind.GROUP

    def __init__(self, transform: Transformation, name: str | None = None) -> None:
#   def __init__(self, transform: Transformation, name: str | None = None) -> None:
        super().__init__(name=name)
#       super().__init__(name=name)
        if not isinstance(transform, Transformation):
#       if not isinstance(transform, Transformation):
            raise SceneGraphError(f"Group node requires a transformation, got {transform!r}")
#           raise SceneGraphError(f"Group node requires a transformation, got {transform!r}")
        self._transform: Transformation = transform
#       self._transform: Transformation = transform
        self._children: list[Node] = []
#       self._children: list[Node] = []
        pass
#       pass

    @property
#   @property
    def transform(self) -> Transformation:
#   def transform(self) -> Transformation:
        return self._transform
#       return self._transform

    @property
#   @property
    def children(self) -> tuple[Node, ...]:
#   def children(self) -> tuple[Node, ...]:
        return tuple(self._children)
#       return tuple(self._children)

    def replace_transform(self, transform: Transformation) -> None:
#   def replace_transform(self, transform: Transformation) -> None:
        if not isinstance(transform, Transformation):
#       if not isinstance(transform, Transformation):
            raise SceneGraphError(f"Group node requires a transformation, got {transform!r}")
#           raise SceneGraphError(f"Group node requires a transformation, got {transform!r}")
        self._transform = transform
#       self._transform = transform

    def add(self, child: Node) -> Node:
#   def add(self, child: Node) -> Node:
        if not isinstance(child, Node):
#       if not isinstance(child, Node):
            raise SceneGraphError(f"Only scene nodes can be added as children, got {child!r}")
#           raise SceneGraphError(f"Only scene nodes can be added as children, got {child!r}")
        if child.parent is not None:
#       if child.parent is not None:
            raise SceneGraphError(f"{child!r} already belongs to {child.parent!r}")
#           raise SceneGraphError(f"{child!r} already belongs to {child.parent!r}")

        # Adding an ancestor (or the node itself) would close a cycle
#       # Adding an ancestor (or the node itself) would close a cycle
        ancestor: Node | None = self
#       ancestor: Node | None = self
        while ancestor is not None:
#       while ancestor is not None:
            if ancestor is child:
#           if ancestor is child:
                raise SceneGraphError(f"Adding {child!r} to {self!r} would create a cycle")
#               raise SceneGraphError(f"Adding {child!r} to {self!r} would create a cycle")
            ancestor = ancestor.parent
#           ancestor = ancestor.parent

        child.parent = self
#       child.parent = self
        self._children.append(child)
#       self._children.append(child)
        return child
#       return child

class GeometryNode(Node):
    """
    Leaf with a surface colour. The colour is the only state the pick visitor mutates.
#   Leaf with a surface colour. The colour is the only state the pick visitor mutates.
    """
    texture_mapped: typing.ClassVar[bool] = False
#   texture_mapped: typing.ClassVar[bool] = False

    def __init__(self, color: npt.ArrayLike, name: str | None = None) -> None:
#   def __init__(self, color: npt.ArrayLike, name: str | None = None) -> None:
        super().__init__(name=name)
#       super().__init__(name=name)
        self._color: Vector = as_color(color)
#       self._color: Vector = as_color(color)
        pass
#       pass

    @property
#   @property
    def color(self) -> Vector:
#   def color(self) -> Vector:
        return self._color
#       return self._color

    def replace_color(self, color: npt.ArrayLike) -> None:
#   def replace_color(self, color: npt.ArrayLike) -> None:
        self._color = as_color(color)
#       self._color = as_color(color)

class SphereNode(GeometryNode):
    kind = NodeKind.SPHERE
#   kind = NodeKind.SPHERE

    def __init__(self, color: npt.ArrayLike, center: npt.ArrayLike = (0.0, 0.0, 0.0), radius: float = 1.0, name: str | None = None) -> None:
#   def __init__(self, color: npt.ArrayLike, center: npt.ArrayLike = (0.0, 0.0, 0.0), radius: float = 1.0, name: str | None = None) -> None:
        super().__init__(color=color, name=name)
#       super().__init__(color=color, name=name)
        if radius <= 0.0:
#       if radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
#           raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center: Vector = as_vector(center, w=1.0)
#       self.center: Vector = as_vector(center, w=1.0)
        self.radius: float = float(radius)
#       self.radius: float = float(radius)
        pass
#       pass

class AABoxNode(GeometryNode):
    kind = NodeKind.AABOX
#   kind = NodeKind.AABOX

    def __init__(self, color: npt.ArrayLike, min_point: npt.ArrayLike = (-0.5, -0.5, -0.5), max_point: npt.ArrayLike = (0.5, 0.5, 0.5), name: str | None = None) -> None:
#   def __init__(self, color: npt.ArrayLike, min_point: npt.ArrayLike = (-0.5, -0.5, -0.5), max_point: npt.ArrayLike = (0.5, 0.5, 0.5), name: str | None = None) -> None:
        super().__init__(color=color, name=name)
#       super().__init__(color=color, name=name)
        self.min_point: Vector = as_vector(min_point, w=1.0)
#       self.min_point: Vector = as_vector(min_point, w=1.0)
        self.max_point: Vector = as_vector(max_point, w=1.0)
#       self.max_point: Vector = as_vector(max_point, w=1.0)
        if np.any(self.min_point[:3] >= self.max_point[:3]):
#       if np.any(self.min_point[:3] >= self.max_point[:3]):
            raise ValueError(f"Box minimum {self.min_point[:3]} must be below maximum {self.max_point[:3]} on every axis")
#           raise ValueError(f"Box minimum {self.min_point[:3]} must be below maximum {self.max_point[:3]} on every axis")
        pass
#       pass

class TextureBoxNode(AABoxNode):
    """
    Box drawn with a texture by the rasterization backend.
#   Box drawn with a texture by the rasterization backend.
    The texture name is an opaque handle; the ray backend shades the box with its colour.
#   The texture name is an opaque handle; the ray backend shades the box with its colour.
    """
    kind = NodeKind.TEXTURE_BOX
#   kind = NodeKind.TEXTURE_BOX
    texture_mapped = True
#   texture_mapped = True

    def __init__(self, texture: str, min_point: npt.ArrayLike = (-0.5, -0.5, -0.5), max_point: npt.ArrayLike = (0.5, 0.5, 0.5), color: npt.ArrayLike = DEFAULT_SURFACE_COLOR, name: str | None = None) -> None:
#   def __init__(self, texture: str, min_point: npt.ArrayLike = (-0.5, -0.5, -0.5), max_point: npt.ArrayLike = (0.5, 0.5, 0.5), color: npt.ArrayLike = DEFAULT_SURFACE_COLOR, name: str | None = None) -> None:
        super().__init__(color=color, min_point=min_point, max_point=max_point, name=name)
#       super().__init__(color=color, min_point=min_point, max_point=max_point, name=name)
        if not texture:
#       if not texture:
            raise SceneGraphError("Texture box requires a texture name")
#           raise SceneGraphError("Texture box requires a texture name")
        self.texture: str = texture
#       self.texture: str = texture
        pass
#       pass

def convex_polygon_normal(corners: typing.Sequence[Vector]) -> Vector:
    """
    Unit normal of a planar, strictly convex polygon whose corners go around its perimeter.
#   Unit normal of a planar, strictly convex polygon whose corners go around its perimeter.
    The cross product of every pair of consecutive edges must point the same way as the normal
#   The cross product of every pair of consecutive edges must point the same way as the normal
    and every corner must lie in the plane; otherwise SceneGraphError is raised.
#   and every corner must lie in the plane; otherwise SceneGraphError is raised.
    """
    count: int = len(corners)
#   count: int = len(corners)
    edges: list[Vector] = [corners[(i + 1) % count] - corners[i] for i in range(count)]
#   edges: list[Vector] = [corners[(i + 1) % count] - corners[i] for i in range(count)]
    first_turn: Vector = cross(edges[0], edges[1])
#   first_turn: Vector = cross(edges[0], edges[1])
    if length(first_turn) < EPSILON:
#   if length(first_turn) < EPSILON:
        raise SceneGraphError("Polygon corners must not be repeated or collinear")
#       raise SceneGraphError("Polygon corners must not be repeated or collinear")
    normal: Vector = normalize(first_turn)
#   normal: Vector = normalize(first_turn)

    for i in range(count):
#   for i in range(count):
        if abs(dot(corners[i] - corners[0], normal)) > EPSILON:
#       if abs(dot(corners[i] - corners[0], normal)) > EPSILON:
            raise SceneGraphError(f"Polygon corner {corners[i][:3]} is not in the plane of the others")
#           raise SceneGraphError(f"Polygon corner {corners[i][:3]} is not in the plane of the others")
        if dot(cross(edges[i], edges[(i + 1) % count]), normal) < EPSILON:
#       if dot(cross(edges[i], edges[(i + 1) % count]), normal) < EPSILON:
            raise SceneGraphError("Polygon corners must go around a convex perimeter")
#           raise SceneGraphError("Polygon corners must go around a convex perimeter")
    return normal
#   return normal

class PyramidNode(GeometryNode):
    """
    Pyramid over a planar convex quad base. Base corners go around the perimeter in either direction;
#   Pyramid over a planar convex quad base. Base corners go around the perimeter in either direction;
    the default is the unit pyramid standing on y = 0 with its apex at (0, 1, 0).
#   the default is the unit pyramid standing on y = 0 with its apex at (0, 1, 0).
    """
    kind = NodeKind.PYRAMID
#   kind = NodeKind.PYRAMID

    DEFAULT_BASE: typing.ClassVar[tuple[tuple[float, float, float], ...]] = (
#   DEFAULT_BASE: typing.ClassVar[tuple[tuple[float, float, float], ...]] = (
        (-0.5, 0.0, -0.5),
#       (-0.5, 0.0, -0.5),
        ( 0.5, 0.0, -0.5),
#       ( 0.5, 0.0, -0.5),
        ( 0.5, 0.0,  0.5),
#       ( 0.5, 0.0,  0.5),
        (-0.5, 0.0,  0.5),
#       (-0.5, 0.0,  0.5),
    )
#   )

    def __init__(self, color: npt.ArrayLike, base: typing.Sequence[npt.ArrayLike] = DEFAULT_BASE, apex: npt.ArrayLike = (0.0, 1.0, 0.0), name: str | None = None) -> None:
#   def __init__(self, color: npt.ArrayLike, base: typing.Sequence[npt.ArrayLike] = DEFAULT_BASE, apex: npt.ArrayLike = (0.0, 1.0, 0.0), name: str | None = None) -> None:
        super().__init__(color=color, name=name)
#       super().__init__(color=color, name=name)
        if len(base) != 4:
#       if len(base) != 4:
            raise SceneGraphError(f"Pyramid base needs 4 corners, got {len(base)}")
#           raise SceneGraphError(f"Pyramid base needs 4 corners, got {len(base)}")
        corners: list[Vector] = [as_vector(corner, w=1.0) for corner in base]
#       corners: list[Vector] = [as_vector(corner, w=1.0) for corner in base]
        self.apex: Vector = as_vector(apex, w=1.0)
#       self.apex: Vector = as_vector(apex, w=1.0)

        normal: Vector = convex_polygon_normal(corners)
#       normal: Vector = convex_polygon_normal(corners)
        height: float = dot(self.apex - corners[0], normal)
#       height: float = dot(self.apex - corners[0], normal)
        if abs(height) < EPSILON:
#       if abs(height) < EPSILON:
            raise SceneGraphError(f"Pyramid apex {self.apex[:3]} lies in the plane of its base")
#           raise SceneGraphError(f"Pyramid apex {self.apex[:3]} lies in the plane of its base")
        # Stored base winding has its normal pointing away from the apex
#       # Stored base winding has its normal pointing away from the apex
        if height > 0.0:
#       if height > 0.0:
            corners.reverse()
#           corners.reverse()
        self.base: list[Vector] = corners
#       self.base: list[Vector] = corners
        pass
#       pass

class CustomShapeNode(GeometryNode):
    """
    Arbitrary triangle mesh: a vertex list plus a flat index list, three indices per triangle.
#   Arbitrary triangle mesh: a vertex list plus a flat index list, three indices per triangle.
    """
    kind = NodeKind.CUSTOM_SHAPE
#   kind = NodeKind.CUSTOM_SHAPE

    def __init__(self, vertices: typing.Sequence[npt.ArrayLike], indices: typing.Sequence[int], color: npt.ArrayLike, name: str | None = None) -> None:
#   def __init__(self, vertices: typing.Sequence[npt.ArrayLike], indices: typing.Sequence[int], color: npt.ArrayLike, name: str | None = None) -> None:
        super().__init__(color=color, name=name)
#       super().__init__(color=color, name=name)
        if len(indices) == 0 or len(indices) % 3 != 0:
#       if len(indices) == 0 or len(indices) % 3 != 0:
            raise SceneGraphError(f"Mesh index count must be a positive multiple of 3, got {len(indices)}")
#           raise SceneGraphError(f"Mesh index count must be a positive multiple of 3, got {len(indices)}")
        if min(indices) < 0 or max(indices) >= len(vertices):
#       if min(indices) < 0 or max(indices) >= len(vertices):
            raise SceneGraphError(f"Mesh indices must lie in [0, {len(vertices)})")
#           raise SceneGraphError(f"Mesh indices must lie in [0, {len(vertices)})")
        self.vertices: list[Vector] = [as_vector(vertex, w=1.0) for vertex in vertices]
#       self.vertices: list[Vector] = [as_vector(vertex, w=1.0) for vertex in vertices]
        self.indices: list[int] = [int(index) for index in indices]
#       self.indices: list[int] = [int(index) for index in indices]
        pass
#       pass

class CameraNode(Node):
    kind = NodeKind.CAMERA
#   kind = NodeKind.CAMERA

    def __init__(self, origin: npt.ArrayLike = (0.0, 0.0, 0.0), name: str | None = None) -> None:
#   def __init__(self, origin: npt.ArrayLike = (0.0, 0.0, 0.0), name: str | None = None) -> None:
        super().__init__(name=name)
#       super().__init__(name=name)
        self.origin: Vector = as_vector(origin, w=1.0)
#       self.origin: Vector = as_vector(origin, w=1.0)
        pass
#       pass

class LightNode(Node):
    kind = NodeKind.LIGHT
#   kind = NodeKind.LIGHT

    def __init__(self, position: npt.ArrayLike = (0.0, 0.0, 0.0), color: npt.ArrayLike = (1.0, 1.0, 1.0), name: str | None = None) -> None:
#   def __init__(self, position: npt.ArrayLike = (0.0, 0.0, 0.0), color: npt.ArrayLike = (1.0, 1.0, 1.0), name: str | None = None) -> None:
        super().__init__(name=name)
#       super().__init__(name=name)
        self.position: Vector = as_vector(position, w=1.0)
#       self.position: Vector = as_vector(position, w=1.0)
        self.color: Vector = as_color(color)
#       self.color: Vector = as_color(color)
        pass
#       pass

LEAF_TYPES: dict[NodeKind, type[Node]] = {
    NodeKind.SPHERE: SphereNode,
#   NodeKind.SPHERE: SphereNode,
    NodeKind.AABOX: AABoxNode,
#   NodeKind.AABOX: AABoxNode,
    NodeKind.PYRAMID: PyramidNode,
#   NodeKind.PYRAMID: PyramidNode,
    NodeKind.TEXTURE_BOX: TextureBoxNode,
#   NodeKind.TEXTURE_BOX: TextureBoxNode,
    NodeKind.CUSTOM_SHAPE: CustomShapeNode,
#   NodeKind.CUSTOM_SHAPE: CustomShapeNode,
    NodeKind.CAMERA: CameraNode,
#   NodeKind.CAMERA: CameraNode,
    NodeKind.LIGHT: LightNode,
#   NodeKind.LIGHT: LightNode,
}

def create_group(transform: Transformation, name: str | None = None) -> GroupNode:
    return GroupNode(transform=transform, name=name)
#   return GroupNode(transform=transform, name=name)

def create_leaf(kind: NodeKind, **params: typing.Any) -> Node:
    if kind not in LEAF_TYPES:
#   if kind not in LEAF_TYPES:
        raise SceneGraphError(f"{kind} is not a leaf node kind")
#       raise SceneGraphError(f"{kind} is not a leaf node kind")
    try:
#   try:
        return LEAF_TYPES[kind](**params)
#       return LEAF_TYPES[kind](**params)
    except TypeError as error:
#   except TypeError as error:
        raise SceneGraphError(f"Invalid parameters for {kind.value} node: {error}") from error
#       raise SceneGraphError(f"Invalid parameters for {kind.value} node: {error}") from error

def add_child(parent: GroupNode, child: Node) -> Node:
    if not isinstance(parent, GroupNode):
#   if not isinstance(parent, GroupNode):
        raise SceneGraphError(f"Children can only be added to group nodes, got {parent!r}")
#       raise SceneGraphError(f"Children can only be added to group nodes, got {parent!r}")
    return parent.add(child)
#   return parent.add(child)
