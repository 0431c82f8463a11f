import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
import pyrr as rr # type: ignore[import-untyped]
import pyrr as rr
from sgrender.core.common_types import Vector, Matrix
from sgrender.core.common_types import Vector, Matrix

def vector(x: float, y: float, z: float, w: float) -> Vector:
    return np.array([x, y, z, w], dtype=np.float64)
#   return np.array([x, y, z, w], dtype=np.float64)

def point(x: float, y: float, z: float) -> Vector:
    return vector(x, y, z, 1.0)
#   return vector(x, y, z, 1.0)

def direction(x: float, y: float, z: float) -> Vector:
    return vector(x, y, z, 0.0)
#   return vector(x, y, z, 0.0)

def as_vector(values: npt.ArrayLike, w: float = 0.0) -> Vector:
    """
    Converts a 3- or 4-component sequence into a homogeneous vector.
#   Converts a 3- or 4-component sequence into a homogeneous vector.
    A 3-component input gets the given w (0 for directions, 1 for points).
#   A 3-component input gets the given w (0 for directions, 1 for points).
    """
    array: Vector = np.asarray(values, dtype=np.float64)
#   array: Vector = np.asarray(values, dtype=np.float64)
    if array.shape == (4,):
#   if array.shape == (4,):
        return array.copy()
#       return array.copy()
    if array.shape == (3,):
#   if array.shape == (3,):
        return np.append(array, w)
#       return np.append(array, w)
    raise ValueError(f"Expected 3 or 4 components, got shape {array.shape}")
#   raise ValueError(f"Expected 3 or 4 components, got shape {array.shape}")

def length(v: Vector) -> float:
    return float(rr.vector.length(v[:3]))
#   return float(rr.vector.length(v[:3]))

def normalize(v: Vector) -> Vector:
    # Only xyz is scaled; w is carried over unchanged.
#   # Only xyz is scaled; w is carried over unchanged.
    # Zero-length input is undefined, callers check length() first.
#   # Zero-length input is undefined, callers check length() first.
    result: Vector = np.array(v, dtype=np.float64)
#   result: Vector = np.array(v, dtype=np.float64)
    result[:3] = rr.vector.normalize(result[:3])
#   result[:3] = rr.vector.normalize(result[:3])
    return result
#   return result

def dot(a: Vector, b: Vector) -> float:
    return float(rr.vector.dot(a[:3], b[:3]))
#   return float(rr.vector.dot(a[:3], b[:3]))

def cross(a: Vector, b: Vector) -> Vector:
    result: npt.NDArray[np.float64] = rr.vector3.cross(a[:3], b[:3])
#   result: npt.NDArray[np.float64] = rr.vector3.cross(a[:3], b[:3])
    return direction(result[0], result[1], result[2])
#   return direction(result[0], result[1], result[2])

def identity() -> Matrix:
    return np.identity(4, dtype=np.float64)
#   return np.identity(4, dtype=np.float64)

def multiply(a: Matrix, b: Matrix) -> Matrix:
    return a @ b
#   return a @ b

def transform(m: Matrix, v: Vector) -> Vector:
    return m @ v
#   return m @ v

def invert(m: Matrix) -> Matrix:
    """
    Numeric inverse, for tests and diagnostics.
#   Numeric inverse, for tests and diagnostics.
    Transformations carry algebraic inverses so the render path never calls this.
#   Transformations carry algebraic inverses so the render path never calls this.
    """
    return np.linalg.inv(m)
#   return np.linalg.inv(m)

# Matrices use the column-vector convention (M @ v, translation in the last column).
# pyrr builds row-vector matrices, hence the transposes below.

def translation_matrix(translation: Vector) -> Matrix:
    return rr.matrix44.create_from_translation(np.asarray(translation[:3], dtype=np.float64), dtype=np.float64).T.copy()
#   return rr.matrix44.create_from_translation(np.asarray(translation[:3], dtype=np.float64), dtype=np.float64).T.copy()

def scaling_matrix(scale: Vector) -> Matrix:
    return rr.matrix44.create_from_scale(np.asarray(scale[:3], dtype=np.float64), dtype=np.float64)
#   return rr.matrix44.create_from_scale(np.asarray(scale[:3], dtype=np.float64), dtype=np.float64)

def rotation_matrix(axis: Vector, angle: float) -> Matrix:
    return rr.matrix44.create_from_axis_rotation(rr.vector.normalize(np.asarray(axis[:3], dtype=np.float64)), angle, dtype=np.float64).T.copy()
#   return rr.matrix44.create_from_axis_rotation(rr.vector.normalize(np.asarray(axis[:3], dtype=np.float64)), angle, dtype=np.float64).T.copy()

def quaternion_from_axis_angle(axis: Vector, angle: float) -> npt.NDArray[np.float64]:
    # pyrr stores quaternions as [x, y, z, w].
#   # pyrr stores quaternions as [x, y, z, w].
    return rr.quaternion.create_from_axis_rotation(rr.vector.normalize(np.asarray(axis[:3], dtype=np.float64)), angle, dtype=np.float64)
#   return rr.quaternion.create_from_axis_rotation(rr.vector.normalize(np.asarray(axis[:3], dtype=np.float64)), angle, dtype=np.float64)

def quaternion_matrix(quaternion: npt.NDArray[np.float64]) -> Matrix:
    # Unlike the axis-angle builder, pyrr already returns this one in column-vector form.
#   # Unlike the axis-angle builder, pyrr already returns this one in column-vector form.
    return rr.matrix44.create_from_quaternion(rr.quaternion.normalize(np.asarray(quaternion, dtype=np.float64)), dtype=np.float64)
#   return rr.matrix44.create_from_quaternion(rr.quaternion.normalize(np.asarray(quaternion, dtype=np.float64)), dtype=np.float64)

def quaternion_slerp(q0: npt.NDArray[np.float64], q1: npt.NDArray[np.float64], t: float) -> npt.NDArray[np.float64]:
    """
    Spherical linear interpolation between two unit quaternions along the shortest arc.
#   Spherical linear interpolation between two unit quaternions along the shortest arc.
    pyrr does not flip q1 before its near-parallel lerp, so the flip is done here.
#   pyrr does not flip q1 before its near-parallel lerp, so the flip is done here.
    """
    q0 = np.asarray(q0, dtype=np.float64)
#   q0 = np.asarray(q0, dtype=np.float64)
    q1 = np.asarray(q1, dtype=np.float64)
#   q1 = np.asarray(q1, dtype=np.float64)
    if float(rr.quaternion.dot(q0, q1)) < 0.0:
#   if float(rr.quaternion.dot(q0, q1)) < 0.0:
        q1 = -q1
#       q1 = -q1
    return rr.quaternion.normalize(rr.quaternion.slerp(q0, q1, t))
#   return rr.quaternion.normalize(rr.quaternion.slerp(q0, q1, t))

def color_to_rgba8(color: Vector) -> npt.NDArray[np.uint8]:
    return np.clip(np.round(np.asarray(color, dtype=np.float64) * 255.0), 0.0, 255.0).astype(np.uint8)
#   return np.clip(np.round(np.asarray(color, dtype=np.float64) * 255.0), 0.0, 255.0).astype(np.uint8)
