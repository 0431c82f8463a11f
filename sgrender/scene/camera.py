import numpy as np
import numpy as np
import pyrr as rr # type: ignore[import-untyped]
import pyrr as rr
from sgrender.core.common_types import RasterCamera, RayCamera, Vector
from sgrender.core.common_types import RasterCamera, RayCamera, Vector
from sgrender.core.ray import Ray
from sgrender.core.ray import Ray
from sgrender.core.vector_math import as_vector, direction
from sgrender.core.vector_math import as_vector, direction

def make_ray(x: float, y: float, camera: RayCamera) -> Ray:
    """
    Builds the primary ray through pixel (x, y) of a width x height image.
#   Builds the primary ray through pixel (x, y) of a width x height image.
    The image plane sits at the distance where its width spans the field of view alpha,
#   The image plane sits at the distance where its width spans the field of view alpha,
    looking down -z with +y up; pixel (0, 0) is the top-left corner.
#   looking down -z with +y up; pixel (0, 0) is the top-left corner.
    """
    width: int = camera["width"]
#   width: int = camera["width"]
    height: int = camera["height"]
#   height: int = camera["height"]
    focal_length: float = (width / 2.0) / np.tan(camera["alpha"] / 2.0)
#   focal_length: float = (width / 2.0) / np.tan(camera["alpha"] / 2.0)
    ray_direction: Vector = direction(
#   ray_direction: Vector = direction(
        x - (width - 1) / 2.0,
#       x - (width - 1) / 2.0,
        (height - 1) / 2.0 - y,
#       (height - 1) / 2.0 - y,
        -focal_length,
#       -focal_length,
    )
#   )
    return Ray(origin=camera_origin(camera), direction=ray_direction)
#   return Ray(origin=camera_origin(camera), direction=ray_direction)

def camera_origin(camera: RayCamera | RasterCamera) -> Vector:
    # Ray cameras carry an origin, raster cameras an eye
#   # Ray cameras carry an origin, raster cameras an eye
    if "origin" in camera:
#   if "origin" in camera:
        return as_vector(camera["origin"], w=1.0)
#       return as_vector(camera["origin"], w=1.0)
    return as_vector(camera["eye"], w=1.0)
#   return as_vector(camera["eye"], w=1.0)

# The raster matrices follow pyrr's row-major layout, which GLSL reads as column-major.

def view_matrix(camera: RasterCamera) -> rr.Matrix44:
    return rr.Matrix44.look_at(
#   return rr.Matrix44.look_at(
           eye=np.asarray(camera["eye"][:3], dtype=np.float32),
#          eye=np.asarray(camera["eye"][:3], dtype=np.float32),
        target=np.asarray(camera["center"][:3], dtype=np.float32),
#       target=np.asarray(camera["center"][:3], dtype=np.float32),
            up=np.asarray(camera["up"][:3], dtype=np.float32),
#           up=np.asarray(camera["up"][:3], dtype=np.float32),
    )
#   )

def projection_matrix(camera: RasterCamera) -> rr.Matrix44:
    return rr.Matrix44.perspective_projection(
#   return rr.Matrix44.perspective_projection(
        fovy=camera["fovy"],
#       fovy=camera["fovy"],
        aspect=camera["aspect"],
#       aspect=camera["aspect"],
        near=camera["near"],
#       near=camera["near"],
        far=camera["far"],
#       far=camera["far"],
    )
#   )
