import dataclasses
import dataclasses
import enum
import enum
import typing
import typing
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import BackendMode, Vector
from sgrender.core.common_types import BackendMode, Vector
from sgrender.core.transformation import SQT
from sgrender.core.transformation import SQT
from sgrender.core.vector_math import as_vector, length, quaternion_slerp
from sgrender.core.vector_math import as_vector, length, quaternion_slerp
from sgrender.scene.editing import compose_rotation, compose_scale, compose_translation
from sgrender.scene.editing import compose_rotation, compose_scale, compose_translation
from sgrender.scene.nodes import GroupNode, SceneGraphError
from sgrender.scene.nodes import GroupNode, SceneGraphError

# Timestamps and deltas are in milliseconds; speeds are per millisecond.

class AnimationKind(enum.Enum):
    ROTATION = "rotation"
#   ROTATION = "rotation"
    SLERP = "slerp"
#   SLERP = "slerp"
    JUMPER = "jumper"
#   JUMPER = "jumper"
    SCALER = "scaler"
#   SCALER = "scaler"
    DRIVER = "driver"
#   DRIVER = "driver"

@dataclasses.dataclass(eq=False)
class RotationAnimation:
    # Spins the group around axis; each step turns by speed * angle * delta_t radians.
#   # Spins the group around axis; each step turns by speed * angle * delta_t radians.
    group_node: GroupNode
#   group_node: GroupNode
    axis: Vector
#   axis: Vector
    speed: float = 0.0001
#   speed: float = 0.0001
    angle: float = np.pi * 4.0
#   angle: float = np.pi * 4.0
    active: bool = False
#   active: bool = False
    kind: typing.ClassVar[AnimationKind] = AnimationKind.ROTATION
#   kind: typing.ClassVar[AnimationKind] = AnimationKind.ROTATION

    def __post_init__(self) -> None:
#   def __post_init__(self) -> None:
        self.axis = as_vector(self.axis, w=0.0)
#       self.axis = as_vector(self.axis, w=0.0)

@dataclasses.dataclass(eq=False)
class SlerpAnimation:
    # Swings an SQT group between two orientations, t advancing by 0.001 * delta_t.
#   # Swings an SQT group between two orientations, t advancing by 0.001 * delta_t.
    group_node: GroupNode
#   group_node: GroupNode
    rotation_from: npt.NDArray[np.float64]
#   rotation_from: npt.NDArray[np.float64]
    rotation_to: npt.NDArray[np.float64]
#   rotation_to: npt.NDArray[np.float64]
    t: float = 0.0
#   t: float = 0.0
    active: bool = False
#   active: bool = False
    kind: typing.ClassVar[AnimationKind] = AnimationKind.SLERP
#   kind: typing.ClassVar[AnimationKind] = AnimationKind.SLERP

    def __post_init__(self) -> None:
#   def __post_init__(self) -> None:
        if not isinstance(self.group_node.transform, SQT):
#       if not isinstance(self.group_node.transform, SQT):
            raise SceneGraphError(f"Slerp animation needs an SQT group, {self.group_node!r} has {type(self.group_node.transform).__name__}")
#           raise SceneGraphError(f"Slerp animation needs an SQT group, {self.group_node!r} has {type(self.group_node.transform).__name__}")
        self.rotation_from = np.asarray(self.rotation_from, dtype=np.float64)
#       self.rotation_from = np.asarray(self.rotation_from, dtype=np.float64)
        self.rotation_to = np.asarray(self.rotation_to, dtype=np.float64)
#       self.rotation_to = np.asarray(self.rotation_to, dtype=np.float64)

@dataclasses.dataclass(eq=False)
class JumperAnimation:
    # Moves along direction and back again; single stops after one round trip.
#   # Moves along direction and back again; single stops after one round trip.
    group_node: GroupNode
#   group_node: GroupNode
    direction: Vector
#   direction: Vector
    speed: float = 0.001
#   speed: float = 0.001
    single: bool = False
#   single: bool = False
    up: bool = True
#   up: bool = True
    distance_covered: float = 0.0
#   distance_covered: float = 0.0
    distance_to_goal: float = dataclasses.field(init=False, default=0.0)
#   distance_to_goal: float = dataclasses.field(init=False, default=0.0)
    active: bool = False
#   active: bool = False
    kind: typing.ClassVar[AnimationKind] = AnimationKind.JUMPER
#   kind: typing.ClassVar[AnimationKind] = AnimationKind.JUMPER

    def __post_init__(self) -> None:
#   def __post_init__(self) -> None:
        self.direction = as_vector(self.direction, w=0.0)
#       self.direction = as_vector(self.direction, w=0.0)
        self.distance_to_goal = length(self.direction)
#       self.distance_to_goal = length(self.direction)

@dataclasses.dataclass(eq=False)
class ScalerAnimation:
    # Grows towards scaling and shrinks back; single stops once the target is reached.
#   # Grows towards scaling and shrinks back; single stops once the target is reached.
    group_node: GroupNode
#   group_node: GroupNode
    scaling: Vector
#   scaling: Vector
    speed: float = 0.001
#   speed: float = 0.001
    single: bool = False
#   single: bool = False
    first_half: bool = True
#   first_half: bool = True
    distance_covered: float = 0.0
#   distance_covered: float = 0.0
    distance_to_goal: float = dataclasses.field(init=False, default=0.0)
#   distance_to_goal: float = dataclasses.field(init=False, default=0.0)
    active: bool = False
#   active: bool = False
    kind: typing.ClassVar[AnimationKind] = AnimationKind.SCALER
#   kind: typing.ClassVar[AnimationKind] = AnimationKind.SCALER

    def __post_init__(self) -> None:
#   def __post_init__(self) -> None:
        # Stored as the offset from the identity scale
#       # Stored as the offset from the identity scale
        self.scaling = as_vector(self.scaling, w=0.0) - as_vector((1.0, 1.0, 1.0), w=0.0)
#       self.scaling = as_vector(self.scaling, w=0.0) - as_vector((1.0, 1.0, 1.0), w=0.0)
        self.distance_to_goal = length(self.scaling)
#       self.distance_to_goal = length(self.scaling)

@dataclasses.dataclass(eq=False)
class DriverAnimation:
    # Moves along direction once, then switches itself off.
#   # Moves along direction once, then switches itself off.
    group_node: GroupNode
#   group_node: GroupNode
    direction: Vector
#   direction: Vector
    speed: float = 0.001
#   speed: float = 0.001
    distance_covered: float = 0.0
#   distance_covered: float = 0.0
    distance_to_goal: float = dataclasses.field(init=False, default=0.0)
#   distance_to_goal: float = dataclasses.field(init=False, default=0.0)
    active: bool = False
#   active: bool = False
    kind: typing.ClassVar[AnimationKind] = AnimationKind.DRIVER
#   kind: typing.ClassVar[AnimationKind] = AnimationKind.DRIVER

    def __post_init__(self) -> None:
#   def __post_init__(self) -> None:
        self.direction = as_vector(self.direction, w=0.0)
#       self.direction = as_vector(self.direction, w=0.0)
        self.distance_to_goal = length(self.direction)
#       self.distance_to_goal = length(self.direction)

Animation: typing.TypeAlias = RotationAnimation | SlerpAnimation | JumperAnimation | ScalerAnimation | DriverAnimation

def toggle_active(animation: Animation) -> None:
    animation.active = not animation.active
#   animation.active = not animation.active

def simulate_rotation(animation: RotationAnimation, delta_t: float) -> None:
    compose_rotation(animation.group_node, animation.axis, np.degrees(animation.speed * animation.angle * delta_t))
#   compose_rotation(animation.group_node, animation.axis, np.degrees(animation.speed * animation.angle * delta_t))

def simulate_slerp(animation: SlerpAnimation, delta_t: float) -> None:
    animation.t += 0.001 * delta_t
#   animation.t += 0.001 * delta_t
    rotation: npt.NDArray[np.float64] = quaternion_slerp(animation.rotation_from, animation.rotation_to, (np.sin(animation.t) + 1.0) / 2.0)
#   rotation: npt.NDArray[np.float64] = quaternion_slerp(animation.rotation_from, animation.rotation_to, (np.sin(animation.t) + 1.0) / 2.0)
    current: SQT = typing.cast(SQT, animation.group_node.transform)
#   current: SQT = typing.cast(SQT, animation.group_node.transform)
    animation.group_node.replace_transform(SQT(scale=current.scale, rotation=rotation, translation=current.translation))
#   animation.group_node.replace_transform(SQT(scale=current.scale, rotation=rotation, translation=current.translation))

def simulate_jumper(animation: JumperAnimation, delta_t: float) -> None:
    step: float = length(animation.direction) * animation.speed * delta_t
#   step: float = length(animation.direction) * animation.speed * delta_t
    if animation.up:
#   if animation.up:
        compose_translation(animation.group_node, animation.direction * animation.speed * delta_t)
#       compose_translation(animation.group_node, animation.direction * animation.speed * delta_t)
        animation.distance_covered += step
#       animation.distance_covered += step
        if animation.distance_covered >= animation.distance_to_goal:
#       if animation.distance_covered >= animation.distance_to_goal:
            animation.up = False
#           animation.up = False
    else:
#   else:
        compose_translation(animation.group_node, animation.direction * -animation.speed * delta_t)
#       compose_translation(animation.group_node, animation.direction * -animation.speed * delta_t)
        animation.distance_covered -= step
#       animation.distance_covered -= step
        if animation.distance_covered <= 0.0:
#       if animation.distance_covered <= 0.0:
            if animation.single:
#           if animation.single:
                animation.active = False
#               animation.active = False
            animation.up = True
#           animation.up = True

def simulate_scaler(animation: ScalerAnimation, delta_t: float) -> None:
    identity_scale: Vector = as_vector((1.0, 1.0, 1.0), w=0.0)
#   identity_scale: Vector = as_vector((1.0, 1.0, 1.0), w=0.0)
    offset: Vector = animation.scaling * animation.speed * delta_t
#   offset: Vector = animation.scaling * animation.speed * delta_t
    step: float = animation.distance_to_goal * animation.speed * delta_t
#   step: float = animation.distance_to_goal * animation.speed * delta_t
    if animation.first_half:
#   if animation.first_half:
        compose_scale(animation.group_node, identity_scale + offset)
#       compose_scale(animation.group_node, identity_scale + offset)
        animation.distance_covered += step
#       animation.distance_covered += step
        if animation.distance_covered >= animation.distance_to_goal:
#       if animation.distance_covered >= animation.distance_to_goal:
            if animation.single:
#           if animation.single:
                animation.active = False
#               animation.active = False
            animation.first_half = False
#           animation.first_half = False
    else:
#   else:
        compose_scale(animation.group_node, identity_scale - offset)
#       compose_scale(animation.group_node, identity_scale - offset)
        animation.distance_covered -= step
#       animation.distance_covered -= step
        if animation.distance_covered <= 0.0:
#       if animation.distance_covered <= 0.0:
            animation.first_half = True
#           animation.first_half = True

def simulate_driver(animation: DriverAnimation, delta_t: float) -> None:
    compose_translation(animation.group_node, animation.direction * animation.speed * delta_t)
#   compose_translation(animation.group_node, animation.direction * animation.speed * delta_t)
    animation.distance_covered += length(animation.direction) * animation.speed * delta_t
#   animation.distance_covered += length(animation.direction) * animation.speed * delta_t
    if animation.distance_covered >= animation.distance_to_goal:
#   if animation.distance_covered >= animation.distance_to_goal:
        animation.active = False
#       animation.active = False

SIMULATORS: dict[AnimationKind, typing.Callable[[typing.Any, float], None]] = {
    AnimationKind.ROTATION: simulate_rotation,
#   AnimationKind.ROTATION: simulate_rotation,
    AnimationKind.SLERP: simulate_slerp,
#   AnimationKind.SLERP: simulate_slerp,
    AnimationKind.JUMPER: simulate_jumper,
#   AnimationKind.JUMPER: simulate_jumper,
    AnimationKind.SCALER: simulate_scaler,
#   AnimationKind.SCALER: simulate_scaler,
    AnimationKind.DRIVER: simulate_driver,
#   AnimationKind.DRIVER: simulate_driver,
}

def simulate(animation: Animation, delta_t: float) -> None:
    # Inactive animations leave the scene untouched
#   # Inactive animations leave the scene untouched
    if animation.active:
#   if animation.active:
        SIMULATORS[animation.kind](animation, delta_t)
#       SIMULATORS[animation.kind](animation, delta_t)

@dataclasses.dataclass
class FrameState:
    """
    Per-session frame bookkeeping, passed explicitly into every frame update.
#   Per-session frame bookkeeping, passed explicitly into every frame update.
    last_timestamp is None until the first frame.
#   last_timestamp is None until the first frame.
    """
    last_timestamp: float | None = None
#   last_timestamp: float | None = None
    render_mode: BackendMode = BackendMode.RAYTRACING
#   render_mode: BackendMode = BackendMode.RAYTRACING

    def toggle_render_mode(self) -> BackendMode:
#   def toggle_render_mode(self) -> BackendMode:
        self.render_mode = BackendMode.RASTERIZATION if self.render_mode is BackendMode.RAYTRACING else BackendMode.RAYTRACING
#       self.render_mode = BackendMode.RASTERIZATION if self.render_mode is BackendMode.RAYTRACING else BackendMode.RAYTRACING
        return self.render_mode
#       return self.render_mode

def advance_frame(state: FrameState, timestamp: float, animations: typing.Iterable[Animation]) -> float:
    """
    Simulates every animation over the time since the previous frame and returns that delta.
#   Simulates every animation over the time since the previous frame and returns that delta.
    The first frame only records its timestamp.
#   The first frame only records its timestamp.
    """
    delta_t: float = 0.0 if state.last_timestamp is None else timestamp - state.last_timestamp
#   delta_t: float = 0.0 if state.last_timestamp is None else timestamp - state.last_timestamp
    for animation in animations:
#   for animation in animations:
        simulate(animation, delta_t)
#       simulate(animation, delta_t)
    state.last_timestamp = timestamp
#   state.last_timestamp = timestamp
    return delta_t
#   return delta_t
