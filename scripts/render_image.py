import sys
import sys
import pathlib as pl
import pathlib as pl
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
import cv2
import cv2
from sgrender.core.common_types import RayCamera
from sgrender.core.common_types import RayCamera
from sgrender.core.settings import DEFAULT_LIGHT_POSITIONS, DEFAULT_PHONG_VALUES, DEFAULT_RAY_CAMERA
from sgrender.core.settings import DEFAULT_LIGHT_POSITIONS, DEFAULT_PHONG_VALUES, DEFAULT_RAY_CAMERA
from sgrender.raytracing.ray_visitor import render
from sgrender.raytracing.ray_visitor import render
from sgrender.scene.scene_builder import build_default_scene
from sgrender.scene.scene_builder import build_default_scene

def render_to_file(path: pl.Path, size: int | None = None) -> npt.NDArray[np.uint8]:
    camera: RayCamera = DEFAULT_RAY_CAMERA
#   camera: RayCamera = DEFAULT_RAY_CAMERA
    image: npt.NDArray[np.uint8] = render(build_default_scene().root, camera, DEFAULT_LIGHT_POSITIONS, DEFAULT_PHONG_VALUES, width=size, height=size)
#   image: npt.NDArray[np.uint8] = render(build_default_scene().root, camera, DEFAULT_LIGHT_POSITIONS, DEFAULT_PHONG_VALUES, width=size, height=size)
    if not cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)):
#   if not cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)):
        raise RuntimeError(f"Failed to write image: {path}")
#       raise RuntimeError(f"Failed to write image: {path}")
    print(f"Wrote {image.shape[1]}x{image.shape[0]} image to {path}")
#   print(f"Wrote {image.shape[1]}x{image.shape[0]} image to {path}")
    return image
#   return image

if __name__ == "__main__":
    if len(sys.argv) < 2:
#   if len(sys.argv) < 2:
        print("Usage: python render_image.py <output.png> [size]")
#       print("Usage: python render_image.py <output.png> [size]")
    else:
#   else:
        render_to_file(pl.Path(sys.argv[1]), int(sys.argv[2]) if len(sys.argv) > 2 else None)
#       render_to_file(pl.Path(sys.argv[1]), int(sys.argv[2]) if len(sys.argv) > 2 else None)
