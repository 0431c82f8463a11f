from sgrender.core.common_types import Vector
from sgrender.core.common_types import Vector
from sgrender.core.ray import Intersection, Ray
from sgrender.core.ray import Intersection, Ray
from sgrender.core.settings import EPSILON
from sgrender.core.settings import EPSILON
from sgrender.core.vector_math import dot, length, normalize
from sgrender.core.vector_math import dot, length, normalize
from sgrender.raytracing.primitives import Primitive, primitive_for
from sgrender.raytracing.primitives import Primitive, primitive_for
from sgrender.scene.nodes import GeometryNode, Node
from sgrender.scene.nodes import GeometryNode, Node
from sgrender.scene.visitor import TransformStackVisitor
from sgrender.scene.visitor import TransformStackVisitor

class IntersectionVisitor(TransformStackVisitor):
    """
    Intersects one world-space ray with every geometry leaf of the graph.
#   Intersects one world-space ray with every geometry leaf of the graph.
    Each leaf is tested in its own object space: the ray goes through the accumulated inverse,
#   Each leaf is tested in its own object space: the ray goes through the accumulated inverse,
    the hit point and normal come back through the accumulated forward matrix.
#   the hit point and normal come back through the accumulated forward matrix.
    Normals are mapped by the forward matrix rather than its inverse-transpose,
#   Normals are mapped by the forward matrix rather than its inverse-transpose,
    which is only exact under uniform scaling.
#   which is only exact under uniform scaling.
    """
    def __init__(self) -> None:
#   def __init__(self) -> None:
        self.ray: Ray | None = None
#       self.ray: Ray | None = None
        self.intersection: Intersection | None = None
#       self.intersection: Intersection | None = None
        self.intersected_node: GeometryNode | None = None
#       self.intersected_node: GeometryNode | None = None
        # Object-space primitives are built once per node; geometry parameters never change
#       # Object-space primitives are built once per node; geometry parameters never change
        self.primitive_cache: dict[Node, Primitive] = {}
#       self.primitive_cache: dict[Node, Primitive] = {}
        super().__init__()
#       super().__init__()
        pass
#       pass

    def reset(self) -> None:
#   def reset(self) -> None:
        super().reset()
#       super().reset()
        self.intersection = None
#       self.intersection = None
        self.intersected_node = None
#       self.intersected_node = None

    def trace(self, root: Node, ray: Ray) -> Intersection | None:
#   def trace(self, root: Node, ray: Ray) -> Intersection | None:
        self.reset()
#       self.reset()
        self.ray = ray
#       self.ray = ray
        self.visit(root)
#       self.visit(root)
        return self.intersection
#       return self.intersection

    def primitive_for(self, node: GeometryNode) -> Primitive:
#   def primitive_for(self, node: GeometryNode) -> Primitive:
        primitive: Primitive | None = self.primitive_cache.get(node)
#       primitive: Primitive | None = self.primitive_cache.get(node)
        if primitive is None:
#       if primitive is None:
            primitive = primitive_for(node)
#           primitive = primitive_for(node)
            self.primitive_cache[node] = primitive
#           self.primitive_cache[node] = primitive
        return primitive
#       return primitive

    def visit_geometry_node(self, node: GeometryNode) -> None:
#   def visit_geometry_node(self, node: GeometryNode) -> None:
        if self.ray is None:
#       if self.ray is None:
            raise RuntimeError("IntersectionVisitor needs a ray; call trace() instead of visit()")
#           raise RuntimeError("IntersectionVisitor needs a ray; call trace() instead of visit()")
        to_world = self.transformations[-1]
#       to_world = self.transformations[-1]
        from_world = self.inverse_transformations[-1]
#       from_world = self.inverse_transformations[-1]

        object_ray: Ray = Ray(origin=from_world @ self.ray.origin, direction=from_world @ self.ray.direction)
#       object_ray: Ray = Ray(origin=from_world @ self.ray.origin, direction=from_world @ self.ray.direction)
        if object_ray.is_degenerate:
#       if object_ray.is_degenerate:
            return
#           return

        intersection: Intersection | None = self.primitive_for(node).intersect(object_ray)
#       intersection: Intersection | None = self.primitive_for(node).intersect(object_ray)
        if intersection is None:
#       if intersection is None:
            return
#           return

        point_world: Vector = to_world @ intersection.point
#       point_world: Vector = to_world @ intersection.point
        normal_world: Vector = to_world @ intersection.normal
#       normal_world: Vector = to_world @ intersection.normal
        if length(normal_world) < EPSILON:
#       if length(normal_world) < EPSILON:
            return
#           return
        # Distance along the world ray, so hits from differently scaled subtrees compare fairly
#       # Distance along the world ray, so hits from differently scaled subtrees compare fairly
        t_world: float = dot(point_world - self.ray.origin, self.ray.direction)
#       t_world: float = dot(point_world - self.ray.origin, self.ray.direction)
        if t_world < 0.0:
#       if t_world < 0.0:
            return
#           return

        self.record_intersection(Intersection(t=t_world, point=point_world, normal=normalize(normal_world)), object_ray, node)
#       self.record_intersection(Intersection(t=t_world, point=point_world, normal=normalize(normal_world)), object_ray, node)

    def record_intersection(self, intersection: Intersection, ray: Ray, node: GeometryNode) -> None:
#   def record_intersection(self, intersection: Intersection, ray: Ray, node: GeometryNode) -> None:
        if self.intersection is None or intersection.closer_than(self.intersection):
#       if self.intersection is None or intersection.closer_than(self.intersection):
            self.intersection = intersection
#           self.intersection = intersection
            self.intersected_node = node
#           self.intersected_node = node
