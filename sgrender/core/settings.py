import numpy as np
import numpy as np
from sgrender.core.common_types import BackendMode, PhongValues, PickMapping, RasterCamera, RayCamera, Vector
from sgrender.core.common_types import BackendMode, PhongValues, PickMapping, RasterCamera, RayCamera, Vector
from sgrender.core.vector_math import direction, point, vector
from sgrender.core.vector_math import direction, point, vector

# Tolerance for parallel rays, degenerate triangles and inside tests
EPSILON: float = 1.0e-6

BACKGROUND_COLOR: Vector = vector(0.0, 0.0, 0.0, 1.0)
DEFAULT_LIGHT_COLOR: Vector = vector(1.0, 1.0, 1.0, 1.0)
DEFAULT_SURFACE_COLOR: Vector = vector(1.0, 1.0, 1.0, 1.0)

DEFAULT_PHONG_VALUES: PhongValues = {
    "ambient": 0.8,
#   "ambient": 0.8,
    "diffuse": 0.5,
#   "diffuse": 0.5,
    "specular": 0.5,
#   "specular": 0.5,
    "shininess": 10.0,
#   "shininess": 10.0,
}

DEFAULT_LIGHT_POSITIONS: list[Vector] = [point(1.0, 1.0, -1.0)]

DEFAULT_RAY_CAMERA: RayCamera = {
    "origin": point(0.0, 0.0, 0.0),
#   "origin": point(0.0, 0.0, 0.0),
    "width": 100,
#   "width": 100,
    "height": 100,
#   "height": 100,
    "alpha": np.pi / 4.0,
#   "alpha": np.pi / 4.0,
}

DEFAULT_RASTER_CAMERA: RasterCamera = {
    "eye": point(0.0, 0.0, 0.0),
#   "eye": point(0.0, 0.0, 0.0),
    "center": point(0.0, 0.0, -1.0),
#   "center": point(0.0, 0.0, -1.0),
    "up": direction(0.0, 1.0, 0.0),
#   "up": direction(0.0, 1.0, 0.0),
    "fovy": 60.0,
#   "fovy": 60.0,
    "aspect": 1.0,
#   "aspect": 1.0,
    "near": 0.1,
#   "near": 0.1,
    "far": 100.0,
#   "far": 100.0,
}

# Clicks arrive on a 1000 x 1000 canvas; each backend scales them down to its virtual ray image.
PICK_CANVAS_SIZE: int = 1000

PICK_MAPPINGS: dict[BackendMode, PickMapping] = {
    BackendMode.RASTERIZATION: PickMapping(pixel_scale=2.0, width=500, height=500, alpha=np.radians(60.0)),
#   BackendMode.RASTERIZATION: PickMapping(pixel_scale=2.0, width=500, height=500, alpha=np.radians(60.0)),
    BackendMode.RAYTRACING: PickMapping(pixel_scale=10.0, width=100, height=100, alpha=np.pi / 4.0),
#   BackendMode.RAYTRACING: PickMapping(pixel_scale=10.0, width=100, height=100, alpha=np.pi / 4.0),
}
