import pathlib as pl
import pathlib as pl
import typing
import typing
import moderngl as mgl
import moderngl as mgl
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
import cv2
import cv2
from sgrender.core.common_types import PhongValues, RasterCamera, Vector
from sgrender.core.common_types import PhongValues, RasterCamera, Vector
from sgrender.renderer.raster_meshes import VERTEX_ATTRIBUTES, VERTEX_FORMAT, FLOATS_PER_VERTEX, mesh_for
from sgrender.renderer.raster_meshes import VERTEX_ATTRIBUTES, VERTEX_FORMAT, FLOATS_PER_VERTEX, mesh_for
from sgrender.scene.camera import camera_origin, projection_matrix, view_matrix
from sgrender.scene.camera import camera_origin, projection_matrix, view_matrix
from sgrender.scene.nodes import GeometryNode, Node, TextureBoxNode
from sgrender.scene.nodes import GeometryNode, Node, TextureBoxNode
from sgrender.scene.visitor import TransformStackVisitor, Visitor
from sgrender.scene.visitor import TransformStackVisitor, Visitor

# Fixed-size light array in the fragment shader
MAX_LIGHTS: int = 8

class RasterBatch:
    def __init__(self, vbo: mgl.Buffer, vao: mgl.VertexArray, program: mgl.Program, vertex_count: int, texture: mgl.Texture | None = None) -> None:
#   def __init__(self, vbo: mgl.Buffer, vao: mgl.VertexArray, program: mgl.Program, vertex_count: int, texture: mgl.Texture | None = None) -> None:
        self.vbo: mgl.Buffer = vbo
#       self.vbo: mgl.Buffer = vbo
        self.vao: mgl.VertexArray = vao
#       self.vao: mgl.VertexArray = vao
        self.program: mgl.Program = program
#       self.program: mgl.Program = program
        self.vertex_count: int = vertex_count
#       self.vertex_count: int = vertex_count
        self.texture: mgl.Texture | None = texture
#       self.texture: mgl.Texture | None = texture
        pass
#       pass

    def release(self) -> None:
#   def release(self) -> None:
        self.vao.release()
#       self.vao.release()
        self.vbo.release()
#       self.vbo.release()
        if self.texture is not None:
#       if self.texture is not None:
            self.texture.release()
#           self.texture.release()

def read_texture_image(path: pl.Path) -> npt.NDArray[np.uint8] | None:
    """
    Reads an image file as RGBA8, flipped so row 0 is the bottom row as OpenGL expects.
#   Reads an image file as RGBA8, flipped so row 0 is the bottom row as OpenGL expects.
    Returns None (after a warning) when the file is missing or unreadable.
#   Returns None (after a warning) when the file is missing or unreadable.
    """
    if not path.exists():
#   if not path.exists():
        print(f"Warning: Texture not found: {path}")
#       print(f"Warning: Texture not found: {path}")
        return None
#       return None

    loaded_data = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
#   loaded_data = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if loaded_data is None:
#   if loaded_data is None:
        print(f"Warning: Failed to load texture: {path}")
#       print(f"Warning: Failed to load texture: {path}")
        return None
#       return None

    if len(loaded_data.shape) == 2:
#   if len(loaded_data.shape) == 2:
        loaded_data = cv2.cvtColor(loaded_data, cv2.COLOR_GRAY2RGBA)
#       loaded_data = cv2.cvtColor(loaded_data, cv2.COLOR_GRAY2RGBA)
    elif loaded_data.shape[2] == 3:
#   elif loaded_data.shape[2] == 3:
        loaded_data = cv2.cvtColor(loaded_data, cv2.COLOR_BGR2RGBA)
#       loaded_data = cv2.cvtColor(loaded_data, cv2.COLOR_BGR2RGBA)
    elif loaded_data.shape[2] == 4:
#   elif loaded_data.shape[2] == 4:
        loaded_data = cv2.cvtColor(loaded_data, cv2.COLOR_BGRA2RGBA)
#       loaded_data = cv2.cvtColor(loaded_data, cv2.COLOR_BGRA2RGBA)

    if loaded_data.dtype == np.uint16:
#   if loaded_data.dtype == np.uint16:
        loaded_data = (loaded_data // 257).astype(dtype=np.uint8)
#       loaded_data = (loaded_data // 257).astype(dtype=np.uint8)

    return np.ascontiguousarray(np.flipud(loaded_data))
#   return np.ascontiguousarray(np.flipud(loaded_data))

class RasterSetupVisitor(Visitor):
    """
    One-time GPU upload pass: a VBO and VAO for every geometry leaf, keyed by the node.
#   One-time GPU upload pass: a VBO and VAO for every geometry leaf, keyed by the node.
    Texture boxes whose image cannot be loaded fall back to the flat Phong program.
#   Texture boxes whose image cannot be loaded fall back to the flat Phong program.
    """
    def __init__(self, ctx: mgl.Context, program_phong: mgl.Program, program_texture: mgl.Program, texture_dir: pl.Path | None = None) -> None:
#   def __init__(self, ctx: mgl.Context, program_phong: mgl.Program, program_texture: mgl.Program, texture_dir: pl.Path | None = None) -> None:
        super().__init__()
#       super().__init__()
        self.ctx: mgl.Context = ctx
#       self.ctx: mgl.Context = ctx
        self.program_phong: mgl.Program = program_phong
#       self.program_phong: mgl.Program = program_phong
        self.program_texture: mgl.Program = program_texture
#       self.program_texture: mgl.Program = program_texture
        self.texture_dir: pl.Path = texture_dir if texture_dir is not None else pl.Path.cwd()
#       self.texture_dir: pl.Path = texture_dir if texture_dir is not None else pl.Path.cwd()
        self.objects: dict[GeometryNode, RasterBatch] = {}
#       self.objects: dict[GeometryNode, RasterBatch] = {}
        pass
#       pass

    def setup(self, root: Node) -> dict[GeometryNode, RasterBatch]:
#   def setup(self, root: Node) -> dict[GeometryNode, RasterBatch]:
        self.visit(root)
#       self.visit(root)
        return self.objects
#       return self.objects

    def load_texture(self, name: str) -> mgl.Texture | None:
#   def load_texture(self, name: str) -> mgl.Texture | None:
        path: pl.Path = pl.Path(name)
#       path: pl.Path = pl.Path(name)
        if not path.is_absolute():
#       if not path.is_absolute():
            path = self.texture_dir / path
#           path = self.texture_dir / path
        image: npt.NDArray[np.uint8] | None = read_texture_image(path)
#       image: npt.NDArray[np.uint8] | None = read_texture_image(path)
        if image is None:
#       if image is None:
            return None
#           return None
        h, w, _ = image.shape
#       h, w, _ = image.shape
        texture: mgl.Texture = self.ctx.texture((w, h), components=4, data=image.tobytes())
#       texture: mgl.Texture = self.ctx.texture((w, h), components=4, data=image.tobytes())
        texture.filter = (mgl.LINEAR_MIPMAP_LINEAR, mgl.LINEAR)
#       texture.filter = (mgl.LINEAR_MIPMAP_LINEAR, mgl.LINEAR)
        texture.build_mipmaps()
#       texture.build_mipmaps()
        return texture
#       return texture

    def visit_geometry_node(self, node: GeometryNode) -> None:
#   def visit_geometry_node(self, node: GeometryNode) -> None:
        if node in self.objects:
#       if node in self.objects:
            return
#           return
        vertices: npt.NDArray[np.float32] = mesh_for(node)
#       vertices: npt.NDArray[np.float32] = mesh_for(node)
        texture: mgl.Texture | None = self.load_texture(node.texture) if isinstance(node, TextureBoxNode) else None
#       texture: mgl.Texture | None = self.load_texture(node.texture) if isinstance(node, TextureBoxNode) else None
        program: mgl.Program = self.program_texture if texture is not None else self.program_phong
#       program: mgl.Program = self.program_texture if texture is not None else self.program_phong

        vbo: mgl.Buffer = self.ctx.buffer(data=vertices.astype(dtype=np.float32).tobytes())
#       vbo: mgl.Buffer = self.ctx.buffer(data=vertices.astype(dtype=np.float32).tobytes())
        vao: mgl.VertexArray = self.ctx.vertex_array(
#       vao: mgl.VertexArray = self.ctx.vertex_array(
            program,
#           program,
            [
#           [
                (vbo, VERTEX_FORMAT, *VERTEX_ATTRIBUTES),
#               (vbo, VERTEX_FORMAT, *VERTEX_ATTRIBUTES),
            ],
#           ],
            skip_errors=True, # The flat program never reads inUV
#           skip_errors=True, # The flat program never reads inUV
        )
#       )
        self.objects[node] = RasterBatch(vbo=vbo, vao=vao, program=program, vertex_count=vertices.size // FLOATS_PER_VERTEX, texture=texture)
#       self.objects[node] = RasterBatch(vbo=vbo, vao=vao, program=program, vertex_count=vertices.size // FLOATS_PER_VERTEX, texture=texture)

    def release(self) -> None:
#   def release(self) -> None:
        for batch in self.objects.values():
#       for batch in self.objects.values():
            batch.release()
#           batch.release()
        self.objects = {}
#       self.objects = {}

def write_uniform(program: mgl.Program, name: str, value: typing.Any) -> None:
    # Uniforms the compiler optimized away are skipped
#   # Uniforms the compiler optimized away are skipped
    if name not in program:
#   if name not in program:
        return
#       return
    if isinstance(value, bytes):
#   if isinstance(value, bytes):
        typing.cast(mgl.Uniform, program[name]).write(value)
#       typing.cast(mgl.Uniform, program[name]).write(value)
    else:
#   else:
        program[name] = value
#       program[name] = value

def light_position_data(light_positions: typing.Sequence[Vector]) -> npt.NDArray[np.float32]:
    data: npt.NDArray[np.float32] = np.zeros((MAX_LIGHTS, 3), dtype=np.float32)
#   data: npt.NDArray[np.float32] = np.zeros((MAX_LIGHTS, 3), dtype=np.float32)
    for index, position in enumerate(light_positions[:MAX_LIGHTS]):
#   for index, position in enumerate(light_positions[:MAX_LIGHTS]):
        data[index] = np.asarray(position[:3], dtype=np.float32)
#       data[index] = np.asarray(position[:3], dtype=np.float32)
    return data
#   return data

class RasterVisitor(TransformStackVisitor):
    """
    Draws the scene with the GPU: the same matrix stack walk as the ray backend,
#   Draws the scene with the GPU: the same matrix stack walk as the ray backend,
    one draw call per leaf with its accumulated model matrix.
#   one draw call per leaf with its accumulated model matrix.
    Needs the batches produced by RasterSetupVisitor for the same graph.
#   Needs the batches produced by RasterSetupVisitor for the same graph.
    """
    def __init__(self, ctx: mgl.Context, objects: dict[GeometryNode, RasterBatch]) -> None:
#   def __init__(self, ctx: mgl.Context, objects: dict[GeometryNode, RasterBatch]) -> None:
        super().__init__()
#       super().__init__()
        self.ctx: mgl.Context = ctx
#       self.ctx: mgl.Context = ctx
        self.objects: dict[GeometryNode, RasterBatch] = objects
#       self.objects: dict[GeometryNode, RasterBatch] = objects
        self.camera: RasterCamera | None = None
#       self.camera: RasterCamera | None = None
        self.light_positions: typing.Sequence[Vector] = []
#       self.light_positions: typing.Sequence[Vector] = []
        self.phong_values: PhongValues | None = None
#       self.phong_values: PhongValues | None = None
        pass
#       pass

    def render_with_phong(self, root: Node, camera: RasterCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues) -> None:
#   def render_with_phong(self, root: Node, camera: RasterCamera, light_positions: typing.Sequence[Vector], phong_values: PhongValues) -> None:
        self.reset()
#       self.reset()
        self.camera = camera
#       self.camera = camera
        self.light_positions = light_positions
#       self.light_positions = light_positions
        self.phong_values = phong_values
#       self.phong_values = phong_values

        self.ctx.enable(flags=mgl.DEPTH_TEST)
#       self.ctx.enable(flags=mgl.DEPTH_TEST)
        self.ctx.clear(0.0, 0.0, 0.0, 1.0)
#       self.ctx.clear(0.0, 0.0, 0.0, 1.0)
        self.visit(root)
#       self.visit(root)
        self.ctx.disable(flags=mgl.DEPTH_TEST)
#       self.ctx.disable(flags=mgl.DEPTH_TEST)

    def visit_geometry_node(self, node: GeometryNode) -> None:
#   def visit_geometry_node(self, node: GeometryNode) -> None:
        batch: RasterBatch | None = self.objects.get(node)
#       batch: RasterBatch | None = self.objects.get(node)
        if batch is None or self.camera is None or self.phong_values is None:
#       if batch is None or self.camera is None or self.phong_values is None:
            return
#           return
        program: mgl.Program = batch.program
#       program: mgl.Program = batch.program

        # Column-vector matrices go up transposed; pyrr matrices are already in GLSL order
#       # Column-vector matrices go up transposed; pyrr matrices are already in GLSL order
        write_uniform(program, "uModel", self.to_world.T.astype(dtype=np.float32).tobytes())
#       write_uniform(program, "uModel", self.to_world.T.astype(dtype=np.float32).tobytes())
        write_uniform(program, "uView", view_matrix(self.camera).astype(dtype=np.float32).tobytes())
#       write_uniform(program, "uView", view_matrix(self.camera).astype(dtype=np.float32).tobytes())
        write_uniform(program, "uProjection", projection_matrix(self.camera).astype(dtype=np.float32).tobytes())
#       write_uniform(program, "uProjection", projection_matrix(self.camera).astype(dtype=np.float32).tobytes())
        write_uniform(program, "uColor", tuple(float(value) for value in node.color))
#       write_uniform(program, "uColor", tuple(float(value) for value in node.color))
        write_uniform(program, "uCameraPosition", tuple(float(value) for value in camera_origin(self.camera)[:3]))
#       write_uniform(program, "uCameraPosition", tuple(float(value) for value in camera_origin(self.camera)[:3]))

        write_uniform(program, "uAmbient", float(self.phong_values["ambient"]))
#       write_uniform(program, "uAmbient", float(self.phong_values["ambient"]))
        write_uniform(program, "uDiffuse", float(self.phong_values["diffuse"]))
#       write_uniform(program, "uDiffuse", float(self.phong_values["diffuse"]))
        write_uniform(program, "uSpecular", float(self.phong_values["specular"]))
#       write_uniform(program, "uSpecular", float(self.phong_values["specular"]))
        write_uniform(program, "uShininess", float(self.phong_values["shininess"]))
#       write_uniform(program, "uShininess", float(self.phong_values["shininess"]))
        write_uniform(program, "uLightPositions", light_position_data(self.light_positions).tobytes())
#       write_uniform(program, "uLightPositions", light_position_data(self.light_positions).tobytes())
        write_uniform(program, "uLightCount", min(len(self.light_positions), MAX_LIGHTS))
#       write_uniform(program, "uLightCount", min(len(self.light_positions), MAX_LIGHTS))

        if batch.texture is not None:
#       if batch.texture is not None:
            batch.texture.use(location=0)
#           batch.texture.use(location=0)
            write_uniform(program, "uTexture", 0)
#           write_uniform(program, "uTexture", 0)

        batch.vao.render(mode=mgl.TRIANGLES, vertices=batch.vertex_count)
#       batch.vao.render(mode=mgl.TRIANGLES, vertices=batch.vertex_count)
