import typing
import typing
import numpy as np
import numpy as np
from sgrender.core.common_types import Vector
from sgrender.core.common_types import Vector
from sgrender.core.ray import Intersection, Ray
from sgrender.core.ray import Intersection, Ray
from sgrender.core.settings import EPSILON
from sgrender.core.settings import EPSILON
from sgrender.core.vector_math import cross, dot, length, normalize, point
from sgrender.core.vector_math import cross, dot, length, normalize, point
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, GeometryNode, NodeKind, PyramidNode, SphereNode
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, GeometryNode, NodeKind, PyramidNode, SphereNode

class Primitive(typing.Protocol):
    def intersect(self, ray: Ray) -> Intersection | None: ...
#   def intersect(self, ray: Ray) -> Intersection | None: ...

class Plane:
    """
    Plane through three points, oriented by their winding: normal = (b - a) x (c - a).
#   Plane through three points, oriented by their winding: normal = (b - a) x (c - a).
    """
    def __init__(self, a: Vector, b: Vector, c: Vector) -> None:
#   def __init__(self, a: Vector, b: Vector, c: Vector) -> None:
        self.point: Vector = a
#       self.point: Vector = a
        raw_normal: Vector = cross(b - a, c - a)
#       raw_normal: Vector = cross(b - a, c - a)
        # Collinear points span no plane
#       # Collinear points span no plane
        self.is_degenerate: bool = length(raw_normal) < EPSILON
#       self.is_degenerate: bool = length(raw_normal) < EPSILON
        self.normal: Vector = raw_normal if self.is_degenerate else normalize(raw_normal)
#       self.normal: Vector = raw_normal if self.is_degenerate else normalize(raw_normal)
        pass
#       pass

    def intersect(self, ray: Ray) -> Intersection | None:
#   def intersect(self, ray: Ray) -> Intersection | None:
        if self.is_degenerate or ray.is_degenerate:
#       if self.is_degenerate or ray.is_degenerate:
            return None
#           return None
        denominator: float = dot(self.normal, ray.direction)
#       denominator: float = dot(self.normal, ray.direction)
        # Parallel to the plane
#       # Parallel to the plane
        if abs(denominator) < EPSILON:
#       if abs(denominator) < EPSILON:
            return None
#           return None
        t: float = dot(self.normal, self.point - ray.origin) / denominator
#       t: float = dot(self.normal, self.point - ray.origin) / denominator
        # Behind the origin
#       # Behind the origin
        if t < 0.0:
#       if t < 0.0:
            return None
#           return None
        return Intersection(t=t, point=ray.at(t), normal=self.normal.copy())
#       return Intersection(t=t, point=ray.at(t), normal=self.normal.copy())

    def is_inside(self, vertices: typing.Sequence[Vector], p: Vector) -> bool:
#   def is_inside(self, vertices: typing.Sequence[Vector], p: Vector) -> bool:
        """
        True when p lies inside the convex polygon spanned by vertices (in winding order).
#       True when p lies inside the convex polygon spanned by vertices (in winding order).
        Each edge's cross product with the vector to p must agree with the plane normal;
#       Each edge's cross product with the vector to p must agree with the plane normal;
        points on an edge count as inside.
#       points on an edge count as inside.
        """
        count: int = len(vertices)
#       count: int = len(vertices)
        for i in range(count):
#       for i in range(count):
            edge: Vector = vertices[(i + 1) % count] - vertices[i]
#           edge: Vector = vertices[(i + 1) % count] - vertices[i]
            to_point: Vector = p - vertices[i]
#           to_point: Vector = p - vertices[i]
            if dot(cross(edge, to_point), self.normal) < -EPSILON:
#           if dot(cross(edge, to_point), self.normal) < -EPSILON:
                return False
#               return False
        return True
#       return True

class Face:
    # Convex planar polygon: a plane plus its bounding vertices.
#   # Convex planar polygon: a plane plus its bounding vertices.
    def __init__(self, vertices: typing.Sequence[Vector]) -> None:
#   def __init__(self, vertices: typing.Sequence[Vector]) -> None:
        self.vertices: list[Vector] = list(vertices)
#       self.vertices: list[Vector] = list(vertices)
        self.plane: Plane = Plane(self.vertices[0], self.vertices[1], self.vertices[2])
#       self.plane: Plane = Plane(self.vertices[0], self.vertices[1], self.vertices[2])
        pass
#       pass

    def intersect(self, ray: Ray) -> Intersection | None:
#   def intersect(self, ray: Ray) -> Intersection | None:
        intersection: Intersection | None = self.plane.intersect(ray)
#       intersection: Intersection | None = self.plane.intersect(ray)
        if intersection is None or not self.plane.is_inside(self.vertices, intersection.point):
#       if intersection is None or not self.plane.is_inside(self.vertices, intersection.point):
            return None
#           return None
        return intersection
#       return intersection

def intersect_faces(faces: typing.Sequence[Face], ray: Ray) -> Intersection | None:
    # Exhaustive scan, no early exit: the smallest t over all faces wins
#   # Exhaustive scan, no early exit: the smallest t over all faces wins
    intersection_min: Intersection | None = None
#   intersection_min: Intersection | None = None
    for face in faces:
#   for face in faces:
        intersection: Intersection | None = face.intersect(ray)
#       intersection: Intersection | None = face.intersect(ray)
        if intersection is not None and (intersection_min is None or intersection.closer_than(intersection_min)):
#       if intersection is not None and (intersection_min is None or intersection.closer_than(intersection_min)):
            intersection_min = intersection
#           intersection_min = intersection
    return intersection_min
#   return intersection_min

def triangle_faces(vertices: typing.Sequence[Vector], indices: typing.Sequence[int]) -> list[Face]:
    faces: list[Face] = []
#   faces: list[Face] = []
    for i in range(0, len(indices), 3):
#   for i in range(0, len(indices), 3):
        face: Face = Face([vertices[indices[i]], vertices[indices[i + 1]], vertices[indices[i + 2]]])
#       face: Face = Face([vertices[indices[i]], vertices[indices[i + 1]], vertices[indices[i + 2]]])
        # Degenerate triangles can never be hit
#       # Degenerate triangles can never be hit
        if not face.plane.is_degenerate:
#       if not face.plane.is_degenerate:
            faces.append(face)
#           faces.append(face)
    return faces
#   return faces

class Sphere:
    def __init__(self, center: Vector, radius: float) -> None:
#   def __init__(self, center: Vector, radius: float) -> None:
        self.center: Vector = center
#       self.center: Vector = center
        self.radius: float = radius
#       self.radius: float = radius
        pass
#       pass

    def intersect(self, ray: Ray) -> Intersection | None:
#   def intersect(self, ray: Ray) -> Intersection | None:
        # |O + tD - C|^2 = r^2  ->  a t^2 + b t + c = 0
#       # |O + tD - C|^2 = r^2  ->  a t^2 + b t + c = 0
        if ray.is_degenerate:
#       if ray.is_degenerate:
            return None
#           return None
        oc: Vector = ray.origin - self.center
#       oc: Vector = ray.origin - self.center
        a: float = dot(ray.direction, ray.direction)
#       a: float = dot(ray.direction, ray.direction)
        b: float = 2.0 * dot(oc, ray.direction)
#       b: float = 2.0 * dot(oc, ray.direction)
        c: float = dot(oc, oc) - self.radius * self.radius
#       c: float = dot(oc, oc) - self.radius * self.radius
        discriminant: float = b * b - 4.0 * a * c
#       discriminant: float = b * b - 4.0 * a * c
        if discriminant < 0.0:
#       if discriminant < 0.0:
            return None
#           return None

        root: float = float(np.sqrt(discriminant))
#       root: float = float(np.sqrt(discriminant))
        t0: float = (-b - root) / (2.0 * a)
#       t0: float = (-b - root) / (2.0 * a)
        t1: float = (-b + root) / (2.0 * a)
#       t1: float = (-b + root) / (2.0 * a)
        # Nearest non-negative root; t1 covers an origin inside the sphere
#       # Nearest non-negative root; t1 covers an origin inside the sphere
        t: float = t0 if t0 >= 0.0 else t1
#       t: float = t0 if t0 >= 0.0 else t1
        if t < 0.0:
#       if t < 0.0:
            return None
#           return None

        hit: Vector = ray.at(t)
#       hit: Vector = ray.at(t)
        return Intersection(t=t, point=hit, normal=normalize(hit - self.center))
#       return Intersection(t=t, point=hit, normal=normalize(hit - self.center))

class AABox:
    """
    Axis-aligned box as 8 corners and 12 outward-wound triangles.
#   Axis-aligned box as 8 corners and 12 outward-wound triangles.

      7----6
#     7----6
     /|   /|   6 = max corner
#    /|   /|   6 = max corner
    3----2 |   4 = min corner
#   3----2 |   4 = min corner
    | 4--|-5   looking down -z
#   | 4--|-5   looking down -z
    |/   |/
#   |/   |/
    0----1
#   0----1
    """
    INDICES: typing.ClassVar[tuple[int, ...]] = (
#   INDICES: typing.ClassVar[tuple[int, ...]] = (
        0, 1, 2, 0, 2, 3, # front
#       0, 1, 2, 0, 2, 3, # front
        1, 5, 6, 1, 6, 2, # right
#       1, 5, 6, 1, 6, 2, # right
        5, 4, 7, 5, 7, 6, # back
#       5, 4, 7, 5, 7, 6, # back
        4, 0, 3, 4, 3, 7, # left
#       4, 0, 3, 4, 3, 7, # left
        3, 2, 6, 3, 6, 7, # top
#       3, 2, 6, 3, 6, 7, # top
        4, 5, 1, 4, 1, 0, # bottom
#       4, 5, 1, 4, 1, 0, # bottom
    )
#   )

    def __init__(self, min_point: Vector, max_point: Vector) -> None:
#   def __init__(self, min_point: Vector, max_point: Vector) -> None:
        lo: Vector = min_point
#       lo: Vector = min_point
        hi: Vector = max_point
#       hi: Vector = max_point
        self.vertices: list[Vector] = [
#       self.vertices: list[Vector] = [
            point(lo[0], lo[1], hi[2]),
#           point(lo[0], lo[1], hi[2]),
            point(hi[0], lo[1], hi[2]),
#           point(hi[0], lo[1], hi[2]),
            point(hi[0], hi[1], hi[2]),
#           point(hi[0], hi[1], hi[2]),
            point(lo[0], hi[1], hi[2]),
#           point(lo[0], hi[1], hi[2]),
            point(lo[0], lo[1], lo[2]),
#           point(lo[0], lo[1], lo[2]),
            point(hi[0], lo[1], lo[2]),
#           point(hi[0], lo[1], lo[2]),
            point(hi[0], hi[1], lo[2]),
#           point(hi[0], hi[1], lo[2]),
            point(lo[0], hi[1], lo[2]),
#           point(lo[0], hi[1], lo[2]),
        ]
#       ]
        self.faces: list[Face] = triangle_faces(self.vertices, self.INDICES)
#       self.faces: list[Face] = triangle_faces(self.vertices, self.INDICES)
        pass
#       pass

    def intersect(self, ray: Ray) -> Intersection | None:
#   def intersect(self, ray: Ray) -> Intersection | None:
        return intersect_faces(self.faces, ray)
#       return intersect_faces(self.faces, ray)

class Pyramid:
    # Four triangular sides around the apex plus the quad base, all wound outward.
#   # Four triangular sides around the apex plus the quad base, all wound outward.
    def __init__(self, base: typing.Sequence[Vector], apex: Vector) -> None:
#   def __init__(self, base: typing.Sequence[Vector], apex: Vector) -> None:
        self.base: list[Vector] = list(base)
#       self.base: list[Vector] = list(base)
        self.apex: Vector = apex
#       self.apex: Vector = apex
        count: int = len(self.base)
#       count: int = len(self.base)
        self.faces: list[Face] = [Face([self.base[(i + 1) % count], self.base[i], self.apex]) for i in range(count)]
#       self.faces: list[Face] = [Face([self.base[(i + 1) % count], self.base[i], self.apex]) for i in range(count)]
        self.faces.append(Face(self.base))
#       self.faces.append(Face(self.base))
        pass
#       pass

    def intersect(self, ray: Ray) -> Intersection | None:
#   def intersect(self, ray: Ray) -> Intersection | None:
        return intersect_faces(self.faces, ray)
#       return intersect_faces(self.faces, ray)

class CustomShape:
    def __init__(self, vertices: typing.Sequence[Vector], indices: typing.Sequence[int]) -> None:
#   def __init__(self, vertices: typing.Sequence[Vector], indices: typing.Sequence[int]) -> None:
        self.vertices: list[Vector] = list(vertices)
#       self.vertices: list[Vector] = list(vertices)
        self.indices: list[int] = list(indices)
#       self.indices: list[int] = list(indices)
        self.faces: list[Face] = triangle_faces(self.vertices, self.indices)
#       self.faces: list[Face] = triangle_faces(self.vertices, self.indices)
        pass
#       pass

    def intersect(self, ray: Ray) -> Intersection | None:
#   def intersect(self, ray: Ray) -> Intersection | None:
        return intersect_faces(self.faces, ray)
#       return intersect_faces(self.faces, ray)

def sphere_for(node: SphereNode) -> Sphere:
    return Sphere(center=node.center, radius=node.radius)
#   return Sphere(center=node.center, radius=node.radius)

def aabox_for(node: AABoxNode) -> AABox:
    return AABox(min_point=node.min_point, max_point=node.max_point)
#   return AABox(min_point=node.min_point, max_point=node.max_point)

def pyramid_for(node: PyramidNode) -> Pyramid:
    return Pyramid(base=node.base, apex=node.apex)
#   return Pyramid(base=node.base, apex=node.apex)

def custom_shape_for(node: CustomShapeNode) -> CustomShape:
    return CustomShape(vertices=node.vertices, indices=node.indices)
#   return CustomShape(vertices=node.vertices, indices=node.indices)

PRIMITIVE_BUILDERS: dict[NodeKind, typing.Callable[[typing.Any], Primitive]] = {
    NodeKind.SPHERE: sphere_for,
#   NodeKind.SPHERE: sphere_for,
    NodeKind.AABOX: aabox_for,
#   NodeKind.AABOX: aabox_for,
    NodeKind.TEXTURE_BOX: aabox_for,
#   NodeKind.TEXTURE_BOX: aabox_for,
    NodeKind.PYRAMID: pyramid_for,
#   NodeKind.PYRAMID: pyramid_for,
    NodeKind.CUSTOM_SHAPE: custom_shape_for,
#   NodeKind.CUSTOM_SHAPE: custom_shape_for,
}

def primitive_for(node: GeometryNode) -> Primitive:
    # Object-space primitive for a geometry leaf
#   # Object-space primitive for a geometry leaf
    return PRIMITIVE_BUILDERS[node.kind](node)
#   return PRIMITIVE_BUILDERS[node.kind](node)
