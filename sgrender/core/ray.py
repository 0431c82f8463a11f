import dataclasses
import dataclasses
import numpy as np
import numpy as np
from sgrender.core.common_types import Vector
from sgrender.core.common_types import Vector
from sgrender.core.settings import EPSILON
from sgrender.core.settings import EPSILON
from sgrender.core.vector_math import length, normalize
from sgrender.core.vector_math import length, normalize

@dataclasses.dataclass(frozen=True, eq=False)
class Ray:
    """
    A half-line origin + t * direction, t >= 0.
#   A half-line origin + t * direction, t >= 0.
    The direction is normalized on construction; a zero-length direction leaves the ray degenerate
#   The direction is normalized on construction; a zero-length direction leaves the ray degenerate
    and every primitive reports no intersection for it.
#   and every primitive reports no intersection for it.
    """
    origin: Vector
#   origin: Vector
    direction: Vector
#   direction: Vector
    is_degenerate: bool = dataclasses.field(init=False, default=False)
#   is_degenerate: bool = dataclasses.field(init=False, default=False)

    def __post_init__(self) -> None:
#   def __post_init__(self) -> None:
        origin: Vector = np.array(self.origin, dtype=np.float64)
#       origin: Vector = np.array(self.origin, dtype=np.float64)
        origin[3] = 1.0
#       origin[3] = 1.0
        raw_direction: Vector = np.array(self.direction, dtype=np.float64)
#       raw_direction: Vector = np.array(self.direction, dtype=np.float64)
        raw_direction[3] = 0.0
#       raw_direction[3] = 0.0
        degenerate: bool = length(raw_direction) < EPSILON
#       degenerate: bool = length(raw_direction) < EPSILON
        object.__setattr__(self, "origin", origin)
#       object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", raw_direction if degenerate else normalize(raw_direction))
#       object.__setattr__(self, "direction", raw_direction if degenerate else normalize(raw_direction))
        object.__setattr__(self, "is_degenerate", degenerate)
#       object.__setattr__(self, "is_degenerate", degenerate)
        pass
#       pass

    def at(self, t: float) -> Vector:
#   def at(self, t: float) -> Vector:
        return self.origin + t * self.direction
#       return self.origin + t * self.direction

@dataclasses.dataclass(frozen=True, eq=False)
class Intersection:
    # t is the only ordering key between hits, across all primitives.
#   # t is the only ordering key between hits, across all primitives.
    t: float
#   t: float
    point: Vector
#   point: Vector
    normal: Vector
#   normal: Vector

    def closer_than(self, other: "Intersection") -> bool:
#   def closer_than(self, other: "Intersection") -> bool:
        return self.t < other.t
#       return self.t < other.t
