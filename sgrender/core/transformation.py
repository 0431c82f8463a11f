import copy
import copy
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import Matrix, Vector
from sgrender.core.common_types import Matrix, Vector
from sgrender.core.vector_math import as_vector, identity, length, quaternion_matrix, rotation_matrix, scaling_matrix, translation_matrix
from sgrender.core.vector_math import as_vector, identity, length, quaternion_matrix, rotation_matrix, scaling_matrix, translation_matrix

class Transformation:
    """
    An affine transformation carrying its forward matrix and its exact algebraic inverse.
#   An affine transformation carrying its forward matrix and its exact algebraic inverse.
    The inverse is derived alongside the matrix, never by numeric inversion.
#   The inverse is derived alongside the matrix, never by numeric inversion.
    """
    def __init__(self, matrix: Matrix, inverse: Matrix) -> None:
#   def __init__(self, matrix: Matrix, inverse: Matrix) -> None:
        self.matrix: Matrix = matrix
#       self.matrix: Matrix = matrix
        self.inverse: Matrix = inverse
#       self.inverse: Matrix = inverse
        pass
#       pass

    def get_matrix(self) -> Matrix:
#   def get_matrix(self) -> Matrix:
        return self.matrix
#       return self.matrix

    def get_inverse_matrix(self) -> Matrix:
#   def get_inverse_matrix(self) -> Matrix:
        return self.inverse
#       return self.inverse

    def post_compose(self, other: "Transformation") -> "Transformation":
#   def post_compose(self, other: "Transformation") -> "Transformation":
        """
        Returns a transformation of other's kind that applies other first, then self.
#       Returns a transformation of other's kind that applies other first, then self.
        matrix = self @ other, inverse = other^-1 @ self^-1.
#       matrix = self @ other, inverse = other^-1 @ self^-1.
        """
        composed: Transformation = copy.copy(other)
#       composed: Transformation = copy.copy(other)
        composed.matrix = self.matrix @ other.matrix
#       composed.matrix = self.matrix @ other.matrix
        composed.inverse = other.inverse @ self.inverse
#       composed.inverse = other.inverse @ self.inverse
        return composed
#       return composed

class Translation(Transformation):
    def __init__(self, translation: npt.ArrayLike) -> None:
#   def __init__(self, translation: npt.ArrayLike) -> None:
        self.translation: Vector = as_vector(translation, w=0.0)
#       self.translation: Vector = as_vector(translation, w=0.0)
        super().__init__(
#       super().__init__(
               matrix=translation_matrix(self.translation),
#              matrix=translation_matrix(self.translation),
              inverse=translation_matrix(-self.translation),
#             inverse=translation_matrix(-self.translation),
        )
#       )
        pass
#       pass

class Rotation(Transformation):
    def __init__(self, axis: npt.ArrayLike, angle: float) -> None:
#   def __init__(self, axis: npt.ArrayLike, angle: float) -> None:
        # angle in radians, counter-clockwise around axis
#       # angle in radians, counter-clockwise around axis
        self.axis: Vector = as_vector(axis, w=0.0)
#       self.axis: Vector = as_vector(axis, w=0.0)
        self.angle: float = float(angle)
#       self.angle: float = float(angle)
        if length(self.axis) == 0.0:
#       if length(self.axis) == 0.0:
            raise ValueError("Rotation axis must be non-zero")
#           raise ValueError("Rotation axis must be non-zero")
        matrix: Matrix = rotation_matrix(self.axis, self.angle)
#       matrix: Matrix = rotation_matrix(self.axis, self.angle)
        # Orthonormal: the transpose is the exact inverse
#       # Orthonormal: the transpose is the exact inverse
        super().__init__(matrix=matrix, inverse=matrix.T.copy())
#       super().__init__(matrix=matrix, inverse=matrix.T.copy())
        pass
#       pass

class Scaling(Transformation):
    def __init__(self, scale: npt.ArrayLike) -> None:
#   def __init__(self, scale: npt.ArrayLike) -> None:
        self.scale: Vector = as_vector(scale, w=0.0)
#       self.scale: Vector = as_vector(scale, w=0.0)
        if np.any(np.abs(self.scale[:3]) == 0.0):
#       if np.any(np.abs(self.scale[:3]) == 0.0):
            raise ValueError(f"Scaling factors must be non-zero, got {self.scale[:3]}")
#           raise ValueError(f"Scaling factors must be non-zero, got {self.scale[:3]}")
        super().__init__(
#       super().__init__(
               matrix=scaling_matrix(self.scale),
#              matrix=scaling_matrix(self.scale),
              inverse=scaling_matrix(1.0 / self.scale[:3]),
#             inverse=scaling_matrix(1.0 / self.scale[:3]),
        )
#       )
        pass
#       pass

class SQT(Transformation):
    """
    Scale, then rotate by a quaternion [x, y, z, w], then translate.
#   Scale, then rotate by a quaternion [x, y, z, w], then translate.
    matrix = T @ R @ S, inverse = S^-1 @ R^T @ T^-1.
#   matrix = T @ R @ S, inverse = S^-1 @ R^T @ T^-1.
    Assigning scale, rotation or translation rebuilds both matrices from the components,
#   Assigning scale, rotation or translation rebuilds both matrices from the components,
    which discards anything composed onto this instance through post_compose.
#   which discards anything composed onto this instance through post_compose.
    """
    def __init__(self, scale: npt.ArrayLike, rotation: npt.ArrayLike, translation: npt.ArrayLike) -> None:
#   def __init__(self, scale: npt.ArrayLike, rotation: npt.ArrayLike, translation: npt.ArrayLike) -> None:
        self._scale: Vector = as_vector(scale, w=0.0)
#       self._scale: Vector = as_vector(scale, w=0.0)
        self._rotation: npt.NDArray[np.float64] = np.asarray(rotation, dtype=np.float64)
#       self._rotation: npt.NDArray[np.float64] = np.asarray(rotation, dtype=np.float64)
        self._translation: Vector = as_vector(translation, w=0.0)
#       self._translation: Vector = as_vector(translation, w=0.0)
        super().__init__(matrix=identity(), inverse=identity())
#       super().__init__(matrix=identity(), inverse=identity())
        self._rebuild()
#       self._rebuild()
        pass
#       pass

    def _rebuild(self) -> None:
#   def _rebuild(self) -> None:
        if np.any(self._scale[:3] == 0.0):
#       if np.any(self._scale[:3] == 0.0):
            raise ValueError(f"Scaling factors must be non-zero, got {self._scale[:3]}")
#           raise ValueError(f"Scaling factors must be non-zero, got {self._scale[:3]}")
        if np.linalg.norm(self._rotation) == 0.0:
#       if np.linalg.norm(self._rotation) == 0.0:
            raise ValueError("Rotation quaternion must be non-zero")
#           raise ValueError("Rotation quaternion must be non-zero")
        matrix_translation: Matrix = translation_matrix(self._translation)
#       matrix_translation: Matrix = translation_matrix(self._translation)
        matrix_rotation: Matrix = quaternion_matrix(self._rotation)
#       matrix_rotation: Matrix = quaternion_matrix(self._rotation)
        matrix_scale: Matrix = scaling_matrix(self._scale)
#       matrix_scale: Matrix = scaling_matrix(self._scale)
        self.matrix = matrix_translation @ matrix_rotation @ matrix_scale
#       self.matrix = matrix_translation @ matrix_rotation @ matrix_scale
        self.inverse = scaling_matrix(1.0 / self._scale[:3]) @ matrix_rotation.T @ translation_matrix(-self._translation)
#       self.inverse = scaling_matrix(1.0 / self._scale[:3]) @ matrix_rotation.T @ translation_matrix(-self._translation)
        pass
#       pass

    @property
#   @property
    def scale(self) -> Vector:
#   def scale(self) -> Vector:
        return self._scale
#       return self._scale

    @scale.setter
#   @scale.setter
    def scale(self, value: npt.ArrayLike) -> None:
#   def scale(self, value: npt.ArrayLike) -> None:
        self._scale = as_vector(value, w=0.0)
#       self._scale = as_vector(value, w=0.0)
        self._rebuild()
#       self._rebuild()

    @property
#   @property
    def rotation(self) -> npt.NDArray[np.float64]:
#   def rotation(self) -> npt.NDArray[np.float64]:
        return self._rotation
#       return self._rotation

    @rotation.setter
#   @rotation.setter
    def rotation(self, value: npt.ArrayLike) -> None:
#   def rotation(self, value: npt.ArrayLike) -> None:
        self._rotation = np.asarray(value, dtype=np.float64)
#       self._rotation = np.asarray(value, dtype=np.float64)
        self._rebuild()
#       self._rebuild()

    @property
#   @property
    def translation(self) -> Vector:
#   def translation(self) -> Vector:
        return self._translation
#       return self._translation

    @translation.setter
#   @translation.setter
    def translation(self, value: npt.ArrayLike) -> None:
#   def translation(self, value: npt.ArrayLike) -> None:
        self._translation = as_vector(value, w=0.0)
#       self._translation = as_vector(value, w=0.0)
        self._rebuild()
#       self._rebuild()

