import numpy as np
import numpy as np
from sgrender.core.common_types import BackendMode, PickMapping, RasterCamera, RayCamera, Vector
from sgrender.core.common_types import BackendMode, PickMapping, RasterCamera, RayCamera, Vector
from sgrender.core.ray import Intersection, Ray
from sgrender.core.ray import Intersection, Ray
from sgrender.core.settings import PICK_MAPPINGS
from sgrender.core.settings import PICK_MAPPINGS
from sgrender.core.vector_math import vector
from sgrender.core.vector_math import vector
from sgrender.raytracing.intersection_visitor import IntersectionVisitor
from sgrender.raytracing.intersection_visitor import IntersectionVisitor
from sgrender.scene.camera import camera_origin, make_ray
from sgrender.scene.camera import camera_origin, make_ray
from sgrender.scene.nodes import GeometryNode, Node
from sgrender.scene.nodes import GeometryNode, Node

class MouserayVisitor(IntersectionVisitor):
    """
    Resolves a click to the nearest geometry leaf under the cursor.
#   Resolves a click to the nearest geometry leaf under the cursor.
    Every hit along the click ray is collected, the list is sorted by t (stable, so equal t keeps
#   Every hit along the click ray is collected, the list is sorted by t (stable, so equal t keeps
    traversal order) and the first entry is picked. The picked leaf gets a random colour
#   traversal order) and the first entry is picked. The picked leaf gets a random colour
    as selection feedback unless it is texture-mapped.
#   as selection feedback unless it is texture-mapped.
    """
    def __init__(self, rng: np.random.Generator | None = None) -> None:
#   def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.object_intersections: list[tuple[Intersection, Ray, GeometryNode]] = []
#       self.object_intersections: list[tuple[Intersection, Ray, GeometryNode]] = []
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
#       self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
        super().__init__()
#       super().__init__()
        pass
#       pass

    def reset(self) -> None:
#   def reset(self) -> None:
        super().reset()
#       super().reset()
        self.object_intersections = []
#       self.object_intersections = []

    def record_intersection(self, intersection: Intersection, ray: Ray, node: GeometryNode) -> None:
#   def record_intersection(self, intersection: Intersection, ray: Ray, node: GeometryNode) -> None:
        super().record_intersection(intersection, ray, node)
#       super().record_intersection(intersection, ray, node)
        self.object_intersections.append((intersection, ray, node))
#       self.object_intersections.append((intersection, ray, node))

    def random_color(self) -> Vector:
#   def random_color(self) -> Vector:
        r, g, b = self.rng.random(3)
#       r, g, b = self.rng.random(3)
        return vector(r, g, b, 1.0)
#       return vector(r, g, b, 1.0)

    def click_ray(self, camera: RayCamera | RasterCamera, x: float, y: float, backend_mode: BackendMode) -> Ray:
#   def click_ray(self, camera: RayCamera | RasterCamera, x: float, y: float, backend_mode: BackendMode) -> Ray:
        mapping: PickMapping = PICK_MAPPINGS[backend_mode]
#       mapping: PickMapping = PICK_MAPPINGS[backend_mode]
        pick_camera: RayCamera = {
#       pick_camera: RayCamera = {
            "origin": camera_origin(camera),
#           "origin": camera_origin(camera),
            "width": mapping.width,
#           "width": mapping.width,
            "height": mapping.height,
#           "height": mapping.height,
            "alpha": mapping.alpha,
#           "alpha": mapping.alpha,
        }
#       }
        return make_ray(x / mapping.pixel_scale, y / mapping.pixel_scale, pick_camera)
#       return make_ray(x / mapping.pixel_scale, y / mapping.pixel_scale, pick_camera)

    def click(self, root: Node, camera: RayCamera | RasterCamera, x: float, y: float, backend_mode: BackendMode) -> GeometryNode | None:
#   def click(self, root: Node, camera: RayCamera | RasterCamera, x: float, y: float, backend_mode: BackendMode) -> GeometryNode | None:
        # trace() resets both stacks and the collected hits once per click
#       # trace() resets both stacks and the collected hits once per click
        self.trace(root, self.click_ray(camera, x, y, backend_mode))
#       self.trace(root, self.click_ray(camera, x, y, backend_mode))
        if not self.object_intersections:
#       if not self.object_intersections:
            return None
#           return None

        self.object_intersections = sorted(self.object_intersections, key=lambda entry: entry[0].t)
#       self.object_intersections = sorted(self.object_intersections, key=lambda entry: entry[0].t)
        picked: GeometryNode = self.object_intersections[0][2]
#       picked: GeometryNode = self.object_intersections[0][2]
        if not picked.texture_mapped:
#       if not picked.texture_mapped:
            picked.replace_color(self.random_color())
#           picked.replace_color(self.random_color())
        return picked
#       return picked

def pick(root: Node, camera: RayCamera | RasterCamera, x: float, y: float, backend_mode: BackendMode, rng: np.random.Generator | None = None) -> GeometryNode | None:
    return MouserayVisitor(rng=rng).click(root, camera, x, y, backend_mode)
#   return MouserayVisitor(rng=rng).click(root, camera, x, y, backend_mode)
