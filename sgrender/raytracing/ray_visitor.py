import typing
import typing
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import PhongValues, RayCamera, Vector
from sgrender.core.common_types import PhongValues, RayCamera, Vector
from sgrender.core.ray import Intersection, Ray
from sgrender.core.ray import Intersection, Ray
from sgrender.core.settings import BACKGROUND_COLOR
from sgrender.core.settings import BACKGROUND_COLOR
from sgrender.core.vector_math import color_to_rgba8, normalize
from sgrender.core.vector_math import color_to_rgba8, normalize
from sgrender.raytracing.intersection_visitor import IntersectionVisitor
from sgrender.raytracing.intersection_visitor import IntersectionVisitor
from sgrender.raytracing.phong import phong
from sgrender.raytracing.phong import phong
from sgrender.scene.camera import camera_origin, make_ray
from sgrender.scene.camera import camera_origin, make_ray
from sgrender.scene.nodes import Node
from sgrender.scene.nodes import Node

class RayVisitor(IntersectionVisitor):
    """
    Renders a scene graph by ray tracing: one full traversal per pixel, nearest hit shaded with Phong.
#   Renders a scene graph by ray tracing: one full traversal per pixel, nearest hit shaded with Phong.
    Brute force, O(pixels x leaves x faces).
#   Brute force, O(pixels x leaves x faces).
    """
    def __init__(self, background: Vector = BACKGROUND_COLOR) -> None:
#   def __init__(self, background: Vector = BACKGROUND_COLOR) -> None:
        super().__init__()
#       super().__init__()
        self.background: Vector = background
#       self.background: Vector = background
        pass
#       pass

    def shade(self, intersection: Intersection | None, camera: RayCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues) -> Vector:
#   def shade(self, intersection: Intersection | None, camera: RayCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues) -> Vector:
        if intersection is None or self.intersected_node is None:
#       if intersection is None or self.intersected_node is None:
            return self.background
#           return self.background
        view_direction: Vector = normalize(camera_origin(camera) - intersection.point)
#       view_direction: Vector = normalize(camera_origin(camera) - intersection.point)
        return phong(
#       return phong(
            surface_color=self.intersected_node.color,
#           surface_color=self.intersected_node.color,
            point=intersection.point,
#           point=intersection.point,
            normal=intersection.normal,
#           normal=intersection.normal,
            view_direction=view_direction,
#           view_direction=view_direction,
            light_positions=light_positions,
#           light_positions=light_positions,
            phong_values=phong_values,
#           phong_values=phong_values,
        )
#       )

    def render(self, root: Node, camera: RayCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues) -> npt.NDArray[np.uint8]:
#   def render(self, root: Node, camera: RayCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues) -> npt.NDArray[np.uint8]:
        """
        Returns an RGBA8 image of shape (height, width, 4); row 0 is the top of the image.
#       Returns an RGBA8 image of shape (height, width, 4); row 0 is the top of the image.
        """
        width: int = camera["width"]
#       width: int = camera["width"]
        height: int = camera["height"]
#       height: int = camera["height"]
        if width <= 0 or height <= 0:
#       if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
#           raise ValueError(f"Image size must be positive, got {width}x{height}")

        image: npt.NDArray[np.uint8] = np.zeros((height, width, 4), dtype=np.uint8)
#       image: npt.NDArray[np.uint8] = np.zeros((height, width, 4), dtype=np.uint8)
        for y in range(height):
#       for y in range(height):
            for x in range(width):
#           for x in range(width):
                ray: Ray = make_ray(x, y, camera)
#               ray: Ray = make_ray(x, y, camera)
                intersection: Intersection | None = self.trace(root, ray)
#               intersection: Intersection | None = self.trace(root, ray)
                image[y, x] = color_to_rgba8(self.shade(intersection, camera, light_positions, phong_values))
#               image[y, x] = color_to_rgba8(self.shade(intersection, camera, light_positions, phong_values))
        return image
#       return image

def render(root: Node, camera: RayCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues, width: int | None = None, height: int | None = None, background: Vector = BACKGROUND_COLOR) -> npt.NDArray[np.uint8]:
    # width and height override the camera image size
#   # width and height override the camera image size
    sized_camera: RayCamera = {
#   sized_camera: RayCamera = {
        "origin": camera["origin"],
#       "origin": camera["origin"],
        "width": camera["width"] if width is None else width,
#       "width": camera["width"] if width is None else width,
        "height": camera["height"] if height is None else height,
#       "height": camera["height"] if height is None else height,
        "alpha": camera["alpha"],
#       "alpha": camera["alpha"],
    }
#   }
    return RayVisitor(background=background).render(root, sized_camera, light_positions, phong_values)
#   return RayVisitor(background=background).render(root, sized_camera, light_positions, phong_values)
