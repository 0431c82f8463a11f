import pathlib as pl
import pathlib as pl
import typing
import typing
import moderngl as mgl
import moderngl as mgl
import moderngl_window as mglw
import moderngl_window as mglw
from moderngl_window.context.base import BaseKeys, KeyModifiers
from moderngl_window.context.base import BaseKeys, KeyModifiers
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import BackendMode, PhongValues, RasterCamera, RayCamera, Vector, vec2i32
from sgrender.core.common_types import BackendMode, PhongValues, RasterCamera, RayCamera, Vector, vec2i32
from sgrender.core.settings import DEFAULT_LIGHT_POSITIONS, DEFAULT_PHONG_VALUES, DEFAULT_RASTER_CAMERA, DEFAULT_RAY_CAMERA, PICK_CANVAS_SIZE
from sgrender.core.settings import DEFAULT_LIGHT_POSITIONS, DEFAULT_PHONG_VALUES, DEFAULT_RASTER_CAMERA, DEFAULT_RAY_CAMERA, PICK_CANVAS_SIZE
from sgrender.core.vector_math import quaternion_from_axis_angle
from sgrender.core.vector_math import quaternion_from_axis_angle
from sgrender.raytracing.mouseray_visitor import MouserayVisitor
from sgrender.raytracing.mouseray_visitor import MouserayVisitor
from sgrender.raytracing.ray_visitor import RayVisitor
from sgrender.raytracing.ray_visitor import RayVisitor
from sgrender.renderer.raster_visitor import RasterBatch, RasterSetupVisitor, RasterVisitor
from sgrender.renderer.raster_visitor import RasterBatch, RasterSetupVisitor, RasterVisitor
from sgrender.renderer.shader_compiler import load_program
from sgrender.renderer.shader_compiler import load_program
from sgrender.scene.animation import Animation, FrameState, RotationAnimation, SlerpAnimation, advance_frame, toggle_active
from sgrender.scene.animation import Animation, FrameState, RotationAnimation, SlerpAnimation, advance_frame, toggle_active
from sgrender.scene.editing import compose_rotation, compose_scale, compose_translation
from sgrender.scene.editing import compose_rotation, compose_scale, compose_translation
from sgrender.scene.nodes import GeometryNode, GroupNode
from sgrender.scene.nodes import GeometryNode, GroupNode
from sgrender.scene.scene_builder import DefaultScene, build_default_scene
from sgrender.scene.scene_builder import DefaultScene, build_default_scene

TRANSLATION_STEP: float = 0.2
ROTATION_STEP_DEGREES: float = 20.0
SCALE_STEP: float = 0.1
PHONG_STEPS: PhongValues = {
    "ambient": 0.1,
#   "ambient": 0.1,
    "diffuse": 0.1,
#   "diffuse": 0.1,
    "specular": 0.1,
#   "specular": 0.1,
    "shininess": 1.0,
#   "shininess": 1.0,
}

class SceneWindow(mglw.WindowConfig): # type: ignore[name-defined, misc]
    # Interactive host for one scene graph and two interchangeable backends:
#   # Interactive host for one scene graph and two interchangeable backends:
    # 1. Ray tracing: the CPU RayVisitor fills a pixel buffer, shown as a full-screen texture.
#   # 1. Ray tracing: the CPU RayVisitor fills a pixel buffer, shown as a full-screen texture.
    # 2. Rasterization: the RasterVisitor draws every leaf with the Phong or texture program.
#   # 2. Rasterization: the RasterVisitor draws every leaf with the Phong or texture program.
    # Keys edit the "editable" group and the Phong values; a mouse click picks a leaf.
#   # Keys edit the "editable" group and the Phong values; a mouse click picks a leaf.
    gl_version: vec2i32 = (3, 3)
#   gl_version: vec2i32 = (3, 3)
    title: str = "Scene Graph Renderer: Ray Tracing + Rasterization"
#   title: str = "Scene Graph Renderer: Ray Tracing + Rasterization"
    window_size: vec2i32 = (PICK_CANVAS_SIZE // 2, PICK_CANVAS_SIZE // 2)
#   window_size: vec2i32 = (PICK_CANVAS_SIZE // 2, PICK_CANVAS_SIZE // 2)
    aspect_ratio: float = window_size[0] / window_size[1]
#   aspect_ratio: float = window_size[0] / window_size[1]
    resizable: bool = False
#   resizable: bool = False
    resource_dir: pl.Path = pl.Path(__file__).parent.resolve(strict=False)
#   resource_dir: pl.Path = pl.Path(__file__).parent.resolve(strict=False)

    def __init__(self, **kwargs: dict[str, typing.Any]) -> None:
#   def __init__(self, **kwargs: dict[str, typing.Any]) -> None:
        super().__init__(**kwargs)
#       super().__init__(**kwargs)

        self.scene: DefaultScene = build_default_scene()
#       self.scene: DefaultScene = build_default_scene()
        self.editable: GroupNode = self.scene.editable
#       self.editable: GroupNode = self.scene.editable
        self.phong_values: PhongValues = typing.cast(PhongValues, dict(DEFAULT_PHONG_VALUES))
#       self.phong_values: PhongValues = typing.cast(PhongValues, dict(DEFAULT_PHONG_VALUES))
        self.light_positions: list[Vector] = list(DEFAULT_LIGHT_POSITIONS)
#       self.light_positions: list[Vector] = list(DEFAULT_LIGHT_POSITIONS)
        self.ray_camera: RayCamera = typing.cast(RayCamera, dict(DEFAULT_RAY_CAMERA))
#       self.ray_camera: RayCamera = typing.cast(RayCamera, dict(DEFAULT_RAY_CAMERA))
        self.raster_camera: RasterCamera = typing.cast(RasterCamera, dict(DEFAULT_RASTER_CAMERA))
#       self.raster_camera: RasterCamera = typing.cast(RasterCamera, dict(DEFAULT_RASTER_CAMERA))
        self.raster_camera["aspect"] = self.aspect_ratio
#       self.raster_camera["aspect"] = self.aspect_ratio
        self.frame_state: FrameState = FrameState()
#       self.frame_state: FrameState = FrameState()

        # Pyramid spins, box swings between two orientations; UP toggles both
#       # Pyramid spins, box swings between two orientations; UP toggles both
        pyramid_group: GroupNode = typing.cast(GroupNode, self.scene.nodes["pyramid"].parent)
#       pyramid_group: GroupNode = typing.cast(GroupNode, self.scene.nodes["pyramid"].parent)
        box_group: GroupNode = typing.cast(GroupNode, self.scene.nodes["box"].parent)
#       box_group: GroupNode = typing.cast(GroupNode, self.scene.nodes["box"].parent)
        self.animations: list[Animation] = [
#       self.animations: list[Animation] = [
            RotationAnimation(group_node=pyramid_group, axis=(0.0, 1.0, 0.0)),
#           RotationAnimation(group_node=pyramid_group, axis=(0.0, 1.0, 0.0)),
            SlerpAnimation(
#           SlerpAnimation(
                group_node=box_group,
#               group_node=box_group,
                rotation_from=quaternion_from_axis_angle(np.array([0.0, 1.0, 0.0]), 0.0),
#               rotation_from=quaternion_from_axis_angle(np.array([0.0, 1.0, 0.0]), 0.0),
                rotation_to=quaternion_from_axis_angle(np.array([0.0, 1.0, 0.0]), np.pi / 2.0),
#               rotation_to=quaternion_from_axis_angle(np.array([0.0, 1.0, 0.0]), np.pi / 2.0),
            ),
#           ),
        ]
#       ]

        # -----------------------------
#       # -----------------------------
        # 1. Ray tracing backend
#       # 1. Ray tracing backend
        # -----------------------------
#       # -----------------------------
        self.ray_visitor: RayVisitor = RayVisitor()
#       self.ray_visitor: RayVisitor = RayVisitor()
        self.mouseray_visitor: MouserayVisitor = MouserayVisitor()
#       self.mouseray_visitor: MouserayVisitor = MouserayVisitor()
        self.scene_dirty: bool = True
#       self.scene_dirty: bool = True

        self.texture_ray_image: mgl.Texture = self.ctx.texture(size=(self.ray_camera["width"], self.ray_camera["height"]), components=4)
#       self.texture_ray_image: mgl.Texture = self.ctx.texture(size=(self.ray_camera["width"], self.ray_camera["height"]), components=4)
        self.texture_ray_image.filter = (mgl.NEAREST, mgl.NEAREST)
#       self.texture_ray_image.filter = (mgl.NEAREST, mgl.NEAREST)

        self.program_screen: mgl.Program = load_program(self.ctx, "screen_vs.glsl", "screen_fs.glsl")
#       self.program_screen: mgl.Program = load_program(self.ctx, "screen_vs.glsl", "screen_fs.glsl")
        screen_data: npt.NDArray[np.float32] = np.array([
#       screen_data: npt.NDArray[np.float32] = np.array([
            -1.0, -1.0,  0.0,  0.0,
#           -1.0, -1.0,  0.0,  0.0,
             1.0, -1.0,  1.0,  0.0,
#            1.0, -1.0,  1.0,  0.0,
            -1.0,  1.0,  0.0,  1.0,
#           -1.0,  1.0,  0.0,  1.0,
             1.0,  1.0,  1.0,  1.0,
#            1.0,  1.0,  1.0,  1.0,
        ], dtype=np.float32)
#       ], dtype=np.float32)
        self.vbo_screen: mgl.Buffer = self.ctx.buffer(data=screen_data.tobytes())
#       self.vbo_screen: mgl.Buffer = self.ctx.buffer(data=screen_data.tobytes())
        self.vao_screen: mgl.VertexArray = self.ctx.vertex_array(
#       self.vao_screen: mgl.VertexArray = self.ctx.vertex_array(
            self.program_screen,
#           self.program_screen,
            [
#           [
                (self.vbo_screen, "2f 2f", "inScreenVertexPosition", "inScreenVertexUV"),
#               (self.vbo_screen, "2f 2f", "inScreenVertexPosition", "inScreenVertexUV"),
            ],
#           ],
        )
#       )

        # -----------------------------
#       # -----------------------------
        # 2. Rasterization backend
#       # 2. Rasterization backend
        # -----------------------------
#       # -----------------------------
        self.program_phong: mgl.Program = load_program(self.ctx, "phong_vs.glsl", "phong_fs.glsl")
#       self.program_phong: mgl.Program = load_program(self.ctx, "phong_vs.glsl", "phong_fs.glsl")
        self.program_texture: mgl.Program = load_program(self.ctx, "phong_vs.glsl", "texture_fs.glsl")
#       self.program_texture: mgl.Program = load_program(self.ctx, "phong_vs.glsl", "texture_fs.glsl")
        self.raster_setup_visitor: RasterSetupVisitor = RasterSetupVisitor(self.ctx, self.program_phong, self.program_texture)
#       self.raster_setup_visitor: RasterSetupVisitor = RasterSetupVisitor(self.ctx, self.program_phong, self.program_texture)
        self.raster_objects: dict[GeometryNode, RasterBatch] = self.raster_setup_visitor.setup(self.scene.root)
#       self.raster_objects: dict[GeometryNode, RasterBatch] = self.raster_setup_visitor.setup(self.scene.root)
        self.raster_visitor: RasterVisitor = RasterVisitor(self.ctx, self.raster_objects)
#       self.raster_visitor: RasterVisitor = RasterVisitor(self.ctx, self.raster_objects)

        print(f"[MODE] {self.frame_state.render_mode.value}")
#       print(f"[MODE] {self.frame_state.render_mode.value}")
        pass
#       pass

    def update_ray_image(self) -> None:
#   def update_ray_image(self) -> None:
        image: npt.NDArray[np.uint8] = self.ray_visitor.render(self.scene.root, self.ray_camera, self.light_positions, self.phong_values)
#       image: npt.NDArray[np.uint8] = self.ray_visitor.render(self.scene.root, self.ray_camera, self.light_positions, self.phong_values)
        # Ray image row 0 is the top, texture row 0 the bottom
#       # Ray image row 0 is the top, texture row 0 the bottom
        self.texture_ray_image.write(np.ascontiguousarray(np.flipud(image)).tobytes())
#       self.texture_ray_image.write(np.ascontiguousarray(np.flipud(image)).tobytes())
        self.scene_dirty = False
#       self.scene_dirty = False

    def on_render(self, time: float, frame_time: float) -> None:
#   def on_render(self, time: float, frame_time: float) -> None:
        advance_frame(self.frame_state, time * 1000.0, self.animations)
#       advance_frame(self.frame_state, time * 1000.0, self.animations)
        if any(animation.active for animation in self.animations):
#       if any(animation.active for animation in self.animations):
            self.scene_dirty = True
#           self.scene_dirty = True

        self.ctx.screen.use()
#       self.ctx.screen.use()
        if self.frame_state.render_mode is BackendMode.RASTERIZATION:
#       if self.frame_state.render_mode is BackendMode.RASTERIZATION:
            self.raster_visitor.render_with_phong(self.scene.root, self.raster_camera, self.light_positions, self.phong_values)
#           self.raster_visitor.render_with_phong(self.scene.root, self.raster_camera, self.light_positions, self.phong_values)
            return
#           return

        if self.scene_dirty:
#       if self.scene_dirty:
            self.update_ray_image()
#           self.update_ray_image()
        self.ctx.clear()
#       self.ctx.clear()
        self.texture_ray_image.use(location=0)
#       self.texture_ray_image.use(location=0)
        if "uImage" in self.program_screen:
#       if "uImage" in self.program_screen:
            self.program_screen["uImage"] = 0
#           self.program_screen["uImage"] = 0
        self.vao_screen.render(mode=mgl.TRIANGLE_STRIP)
#       self.vao_screen.render(mode=mgl.TRIANGLE_STRIP)
        pass
#       pass

    def adjust_phong_value(self, name: str, sign: float) -> None:
#   def adjust_phong_value(self, name: str, sign: float) -> None:
        value: float = max(0.0, self.phong_values[name] + sign * PHONG_STEPS[name]) # type: ignore[literal-required]
#       value: float = max(0.0, self.phong_values[name] + sign * PHONG_STEPS[name]) # type: ignore[literal-required]
        self.phong_values[name] = value # type: ignore[literal-required]
#       self.phong_values[name] = value # type: ignore[literal-required]
        print(f"[PHONG] {name} = {value:.2f}")
#       print(f"[PHONG] {name} = {value:.2f}")

    def key_actions(self, keys: BaseKeys) -> dict[typing.Any, typing.Callable[[], typing.Any]]:
#   def key_actions(self, keys: BaseKeys) -> dict[typing.Any, typing.Callable[[], typing.Any]]:
        step: float = TRANSLATION_STEP
#       step: float = TRANSLATION_STEP
        return {
#       return {
            keys.W: lambda: compose_translation(self.editable, (0.0, step, 0.0)),
#           keys.W: lambda: compose_translation(self.editable, (0.0, step, 0.0)),
            keys.S: lambda: compose_translation(self.editable, (0.0, -step, 0.0)),
#           keys.S: lambda: compose_translation(self.editable, (0.0, -step, 0.0)),
            keys.A: lambda: compose_translation(self.editable, (-step, 0.0, 0.0)),
#           keys.A: lambda: compose_translation(self.editable, (-step, 0.0, 0.0)),
            keys.D: lambda: compose_translation(self.editable, (step, 0.0, 0.0)),
#           keys.D: lambda: compose_translation(self.editable, (step, 0.0, 0.0)),
            keys.E: lambda: compose_translation(self.editable, (0.0, 0.0, step)),
#           keys.E: lambda: compose_translation(self.editable, (0.0, 0.0, step)),
            keys.Q: lambda: compose_translation(self.editable, (0.0, 0.0, -step)),
#           keys.Q: lambda: compose_translation(self.editable, (0.0, 0.0, -step)),
            keys.X: lambda: compose_rotation(self.editable, (1.0, 0.0, 0.0), ROTATION_STEP_DEGREES),
#           keys.X: lambda: compose_rotation(self.editable, (1.0, 0.0, 0.0), ROTATION_STEP_DEGREES),
            keys.Y: lambda: compose_rotation(self.editable, (0.0, 1.0, 0.0), ROTATION_STEP_DEGREES),
#           keys.Y: lambda: compose_rotation(self.editable, (0.0, 1.0, 0.0), ROTATION_STEP_DEGREES),
            keys.C: lambda: compose_rotation(self.editable, (0.0, 0.0, 1.0), ROTATION_STEP_DEGREES),
#           keys.C: lambda: compose_rotation(self.editable, (0.0, 0.0, 1.0), ROTATION_STEP_DEGREES),
            keys.R: lambda: compose_scale(self.editable, (1.0 + SCALE_STEP, 1.0, 1.0)),
#           keys.R: lambda: compose_scale(self.editable, (1.0 + SCALE_STEP, 1.0, 1.0)),
            keys.F: lambda: compose_scale(self.editable, (1.0, 1.0 + SCALE_STEP, 1.0)),
#           keys.F: lambda: compose_scale(self.editable, (1.0, 1.0 + SCALE_STEP, 1.0)),
            keys.V: lambda: compose_scale(self.editable, (1.0, 1.0, 1.0 + SCALE_STEP)),
#           keys.V: lambda: compose_scale(self.editable, (1.0, 1.0, 1.0 + SCALE_STEP)),
            keys.T: lambda: compose_scale(self.editable, (1.0 - SCALE_STEP, 1.0, 1.0)),
#           keys.T: lambda: compose_scale(self.editable, (1.0 - SCALE_STEP, 1.0, 1.0)),
            keys.G: lambda: compose_scale(self.editable, (1.0, 1.0 - SCALE_STEP, 1.0)),
#           keys.G: lambda: compose_scale(self.editable, (1.0, 1.0 - SCALE_STEP, 1.0)),
            keys.B: lambda: compose_scale(self.editable, (1.0, 1.0, 1.0 - SCALE_STEP)),
#           keys.B: lambda: compose_scale(self.editable, (1.0, 1.0, 1.0 - SCALE_STEP)),
            keys.NUMBER_1: lambda: self.adjust_phong_value("ambient", -1.0),
#           keys.NUMBER_1: lambda: self.adjust_phong_value("ambient", -1.0),
            keys.NUMBER_2: lambda: self.adjust_phong_value("ambient", 1.0),
#           keys.NUMBER_2: lambda: self.adjust_phong_value("ambient", 1.0),
            keys.NUMBER_3: lambda: self.adjust_phong_value("diffuse", -1.0),
#           keys.NUMBER_3: lambda: self.adjust_phong_value("diffuse", -1.0),
            keys.NUMBER_4: lambda: self.adjust_phong_value("diffuse", 1.0),
#           keys.NUMBER_4: lambda: self.adjust_phong_value("diffuse", 1.0),
            keys.NUMBER_5: lambda: self.adjust_phong_value("specular", -1.0),
#           keys.NUMBER_5: lambda: self.adjust_phong_value("specular", -1.0),
            keys.NUMBER_6: lambda: self.adjust_phong_value("specular", 1.0),
#           keys.NUMBER_6: lambda: self.adjust_phong_value("specular", 1.0),
            keys.NUMBER_7: lambda: self.adjust_phong_value("shininess", -1.0),
#           keys.NUMBER_7: lambda: self.adjust_phong_value("shininess", -1.0),
            keys.NUMBER_8: lambda: self.adjust_phong_value("shininess", 1.0),
#           keys.NUMBER_8: lambda: self.adjust_phong_value("shininess", 1.0),
        }
#       }

    def on_key_event(self, key: typing.Any, action: typing.Any, modifiers: KeyModifiers) -> None:
#   def on_key_event(self, key: typing.Any, action: typing.Any, modifiers: KeyModifiers) -> None:
        keys: BaseKeys = self.wnd.keys
#       keys: BaseKeys = self.wnd.keys
        if action != keys.ACTION_PRESS:
#       if action != keys.ACTION_PRESS:
            return
#           return

        if key == keys.M:
#       if key == keys.M:
            print(f"[MODE] {self.frame_state.toggle_render_mode().value}")
#           print(f"[MODE] {self.frame_state.toggle_render_mode().value}")
            self.scene_dirty = True
#           self.scene_dirty = True
        elif key == keys.UP:
#       elif key == keys.UP:
            for animation in self.animations:
#           for animation in self.animations:
                toggle_active(animation)
#               toggle_active(animation)
            print(f"[ANIMATION] active = {self.animations[0].active}")
#           print(f"[ANIMATION] active = {self.animations[0].active}")
        else:
#       else:
            action_for_key: typing.Callable[[], typing.Any] | None = self.key_actions(keys).get(key)
#           action_for_key: typing.Callable[[], typing.Any] | None = self.key_actions(keys).get(key)
            if action_for_key is not None:
#           if action_for_key is not None:
                action_for_key()
#               action_for_key()
                self.scene_dirty = True
#               self.scene_dirty = True
        pass
#       pass

    def on_mouse_press_event(self, x: int, y: int, button: int) -> None:
#   def on_mouse_press_event(self, x: int, y: int, button: int) -> None:
        # Clicks are rescaled to the fixed pick canvas before the backend mapping applies
#       # Clicks are rescaled to the fixed pick canvas before the backend mapping applies
        width, height = self.wnd.size
#       width, height = self.wnd.size
        canvas_x: float = x * PICK_CANVAS_SIZE / width
#       canvas_x: float = x * PICK_CANVAS_SIZE / width
        canvas_y: float = y * PICK_CANVAS_SIZE / height
#       canvas_y: float = y * PICK_CANVAS_SIZE / height
        camera: RayCamera | RasterCamera = self.raster_camera if self.frame_state.render_mode is BackendMode.RASTERIZATION else self.ray_camera
#       camera: RayCamera | RasterCamera = self.raster_camera if self.frame_state.render_mode is BackendMode.RASTERIZATION else self.ray_camera
        picked: GeometryNode | None = self.mouseray_visitor.click(self.scene.root, camera, canvas_x, canvas_y, self.frame_state.render_mode)
#       picked: GeometryNode | None = self.mouseray_visitor.click(self.scene.root, camera, canvas_x, canvas_y, self.frame_state.render_mode)
        print(f"[PICK] ({canvas_x:.0f}, {canvas_y:.0f}) -> {picked!r}")
#       print(f"[PICK] ({canvas_x:.0f}, {canvas_y:.0f}) -> {picked!r}")
        if picked is not None:
#       if picked is not None:
            self.scene_dirty = True
#           self.scene_dirty = True
        pass
#       pass

    def on_close(self) -> None:
#   def on_close(self) -> None:
        print(f"[CLOSE]")
#       print(f"[CLOSE]")
        self.raster_setup_visitor.release()
#       self.raster_setup_visitor.release()
        self.vao_screen.release()
#       self.vao_screen.release()
        self.vbo_screen.release()
#       self.vbo_screen.release()
        self.texture_ray_image.release()
#       self.texture_ray_image.release()
        pass
#       pass
