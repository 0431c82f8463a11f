import enum
import enum
import typing
import typing
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt

vec2i32: typing.TypeAlias = tuple[int, int]
vec2f32: typing.TypeAlias = tuple[float, float]
vec3f32: typing.TypeAlias = tuple[float, float, float]

Vector: typing.TypeAlias = npt.NDArray[np.float64]
Matrix: typing.TypeAlias = npt.NDArray[np.float64]

class BackendMode(enum.Enum):
    # Which backend produced the click being resolved by the pick visitor.
#   # Which backend produced the click being resolved by the pick visitor.
    # The two backends map window pixels to rays with different constants.
#   # The two backends map window pixels to rays with different constants.
    RASTERIZATION = "rasterization"
#   RASTERIZATION = "rasterization"
    RAYTRACING = "raytracing"
#   RAYTRACING = "raytracing"

class PhongValues(typing.TypedDict):
    # Per-frame shading coefficients, shared by both backends.
#   # Per-frame shading coefficients, shared by both backends.
    # Mutated only by the host's input handlers between frames.
#   # Mutated only by the host's input handlers between frames.
    ambient: float
#   ambient: float
    diffuse: float
#   diffuse: float
    specular: float
#   specular: float
    shininess: float
#   shininess: float

class RayCamera(typing.TypedDict):
    # Pinhole camera for the ray backend: one ray per pixel of a width x height image.
#   # Pinhole camera for the ray backend: one ray per pixel of a width x height image.
    # alpha is the horizontal field of view in radians.
#   # alpha is the horizontal field of view in radians.
    origin: Vector
#   origin: Vector
    width: int
#   width: int
    height: int
#   height: int
    alpha: float
#   alpha: float

class RasterCamera(typing.TypedDict):
    # Look-at camera for the rasterization backend (fovy in degrees).
#   # Look-at camera for the rasterization backend (fovy in degrees).
    eye: Vector
#   eye: Vector
    center: Vector
#   center: Vector
    up: Vector
#   up: Vector
    fovy: float
#   fovy: float
    aspect: float
#   aspect: float
    near: float
#   near: float
    far: float
#   far: float

class PickMapping(typing.NamedTuple):
    # Maps a window click to a pixel of a virtual ray image.
#   # Maps a window click to a pixel of a virtual ray image.
    # The click coordinate is divided by pixel_scale before the ray is built.
#   # The click coordinate is divided by pixel_scale before the ray is built.
    pixel_scale: float
#   pixel_scale: float
    width: int
#   width: int
    height: int
#   height: int
    alpha: float
#   alpha: float
