import typing
import typing
import numpy as np
import numpy as np
import numpy.typing as npt
import numpy.typing as npt
from sgrender.core.common_types import Vector, vec2f32, vec3f32
from sgrender.core.common_types import Vector, vec2f32, vec3f32
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, GeometryNode, NodeKind, PyramidNode, SphereNode
from sgrender.scene.nodes import AABoxNode, CustomShapeNode, GeometryNode, NodeKind, PyramidNode, SphereNode

# Interleaved vertex layout shared by every mesh: position, normal, uv ("3f 3f 2f").
VERTEX_FORMAT: str = "3f 3f 2f"
VERTEX_ATTRIBUTES: tuple[str, str, str] = ("inPosition", "inNormal", "inUV")
FLOATS_PER_VERTEX: int = 8

def face(vertex0: vec3f32, vertex1: vec3f32, vertex2: vec3f32, vertex3: vec3f32, face_normal: vec3f32, uv0: vec2f32 = (0.0, 0.0), uv1: vec2f32 = (1.0, 0.0), uv2: vec2f32 = (1.0, 1.0), uv3: vec2f32 = (0.0, 1.0)) -> npt.NDArray[np.float32]:
    # A quad as two triangles (0, 1, 2) and (2, 3, 0), sharing one flat normal.
#   # A quad as two triangles (0, 1, 2) and (2, 3, 0), sharing one flat normal.
    return np.array([
#   return np.array([
        *vertex0, *face_normal, *uv0,
#       *vertex0, *face_normal, *uv0,
        *vertex1, *face_normal, *uv1,
#       *vertex1, *face_normal, *uv1,
        *vertex2, *face_normal, *uv2,
#       *vertex2, *face_normal, *uv2,
        *vertex2, *face_normal, *uv2,
#       *vertex2, *face_normal, *uv2,
        *vertex3, *face_normal, *uv3,
#       *vertex3, *face_normal, *uv3,
        *vertex0, *face_normal, *uv0,
#       *vertex0, *face_normal, *uv0,
    ], dtype=np.float32)
#   ], dtype=np.float32)

def triangle(vertex0: npt.NDArray[np.float64], vertex1: npt.NDArray[np.float64], vertex2: npt.NDArray[np.float64]) -> npt.NDArray[np.float32]:
    normal: npt.NDArray[np.float64] = np.cross(vertex1 - vertex0, vertex2 - vertex0)
#   normal: npt.NDArray[np.float64] = np.cross(vertex1 - vertex0, vertex2 - vertex0)
    norm: float = float(np.linalg.norm(normal))
#   norm: float = float(np.linalg.norm(normal))
    if norm > 1e-6:
#   if norm > 1e-6:
        normal = normal / norm
#       normal = normal / norm
    return np.array([
#   return np.array([
        *vertex0, *normal, 0.0, 0.0,
#       *vertex0, *normal, 0.0, 0.0,
        *vertex1, *normal, 1.0, 0.0,
#       *vertex1, *normal, 1.0, 0.0,
        *vertex2, *normal, 0.5, 1.0,
#       *vertex2, *normal, 0.5, 1.0,
    ], dtype=np.float32)
#   ], dtype=np.float32)

def box_mesh(min_point: Vector, max_point: Vector) -> npt.NDArray[np.float32]:
    x0, y0, z0 = (float(value) for value in min_point[:3])
#   x0, y0, z0 = (float(value) for value in min_point[:3])
    x1, y1, z1 = (float(value) for value in max_point[:3])
#   x1, y1, z1 = (float(value) for value in max_point[:3])
    return np.concatenate([
#   return np.concatenate([
        face((x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1), ( 0.0,  0.0,  1.0)), # front
#       face((x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1), ( 0.0,  0.0,  1.0)), # front
        face((x1, y0, z1), (x1, y0, z0), (x1, y1, z0), (x1, y1, z1), ( 1.0,  0.0,  0.0)), # right
#       face((x1, y0, z1), (x1, y0, z0), (x1, y1, z0), (x1, y1, z1), ( 1.0,  0.0,  0.0)), # right
        face((x1, y0, z0), (x0, y0, z0), (x0, y1, z0), (x1, y1, z0), ( 0.0,  0.0, -1.0)), # back
#       face((x1, y0, z0), (x0, y0, z0), (x0, y1, z0), (x1, y1, z0), ( 0.0,  0.0, -1.0)), # back
        face((x0, y0, z0), (x0, y0, z1), (x0, y1, z1), (x0, y1, z0), (-1.0,  0.0,  0.0)), # left
#       face((x0, y0, z0), (x0, y0, z1), (x0, y1, z1), (x0, y1, z0), (-1.0,  0.0,  0.0)), # left
        face((x0, y1, z1), (x1, y1, z1), (x1, y1, z0), (x0, y1, z0), ( 0.0,  1.0,  0.0)), # top
#       face((x0, y1, z1), (x1, y1, z1), (x1, y1, z0), (x0, y1, z0), ( 0.0,  1.0,  0.0)), # top
        face((x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1), ( 0.0, -1.0,  0.0)), # bottom
#       face((x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1), ( 0.0, -1.0,  0.0)), # bottom
    ]).reshape((-1, FLOATS_PER_VERTEX))
#   ]).reshape((-1, FLOATS_PER_VERTEX))

def sphere_mesh(center: Vector, radius: float, ring_size: int = 30) -> npt.NDArray[np.float32]:
    """
    UV sphere of ring_size x ring_size samples, expanded to a plain triangle list.
#   UV sphere of ring_size x ring_size samples, expanded to a plain triangle list.
    Normals point away from the center.
#   Normals point away from the center.
    """
    theta: npt.NDArray[np.float64] = np.linspace(0.0, np.pi, ring_size)
#   theta: npt.NDArray[np.float64] = np.linspace(0.0, np.pi, ring_size)
    phi: npt.NDArray[np.float64] = np.linspace(0.0, 2.0 * np.pi, ring_size, endpoint=False)
#   phi: npt.NDArray[np.float64] = np.linspace(0.0, 2.0 * np.pi, ring_size, endpoint=False)
    theta_grid, phi_grid = np.meshgrid(theta, phi, indexing="ij")
#   theta_grid, phi_grid = np.meshgrid(theta, phi, indexing="ij")

    normals: npt.NDArray[np.float64] = np.stack([
#   normals: npt.NDArray[np.float64] = np.stack([
        np.sin(theta_grid) * np.cos(phi_grid),
#       np.sin(theta_grid) * np.cos(phi_grid),
        np.cos(theta_grid),
#       np.cos(theta_grid),
        np.sin(theta_grid) * np.sin(phi_grid),
#       np.sin(theta_grid) * np.sin(phi_grid),
    ], axis=-1).reshape((-1, 3))
#   ], axis=-1).reshape((-1, 3))
    positions: npt.NDArray[np.float64] = normals * radius + np.asarray(center[:3], dtype=np.float64)
#   positions: npt.NDArray[np.float64] = normals * radius + np.asarray(center[:3], dtype=np.float64)
    uvs: npt.NDArray[np.float64] = np.stack([phi_grid / (2.0 * np.pi), 1.0 - theta_grid / np.pi], axis=-1).reshape((-1, 2))
#   uvs: npt.NDArray[np.float64] = np.stack([phi_grid / (2.0 * np.pi), 1.0 - theta_grid / np.pi], axis=-1).reshape((-1, 2))

    indices: list[int] = []
#   indices: list[int] = []
    for ring in range(ring_size - 1):
#   for ring in range(ring_size - 1):
        for segment in range(ring_size):
#       for segment in range(ring_size):
            current: int = ring * ring_size + segment
#           current: int = ring * ring_size + segment
            below: int = (ring + 1) * ring_size + segment
#           below: int = (ring + 1) * ring_size + segment
            current_next: int = ring * ring_size + (segment + 1) % ring_size
#           current_next: int = ring * ring_size + (segment + 1) % ring_size
            below_next: int = (ring + 1) * ring_size + (segment + 1) % ring_size
#           below_next: int = (ring + 1) * ring_size + (segment + 1) % ring_size
            indices.extend([current, below, current_next])
#           indices.extend([current, below, current_next])
            indices.extend([current_next, below, below_next])
#           indices.extend([current_next, below, below_next])

    vertices: npt.NDArray[np.float64] = np.hstack([positions, normals, uvs])
#   vertices: npt.NDArray[np.float64] = np.hstack([positions, normals, uvs])
    return vertices[np.asarray(indices)].astype(dtype=np.float32)
#   return vertices[np.asarray(indices)].astype(dtype=np.float32)

def pyramid_mesh(base: typing.Sequence[Vector], apex: Vector) -> npt.NDArray[np.float32]:
    corners: list[npt.NDArray[np.float64]] = [np.asarray(corner[:3], dtype=np.float64) for corner in base]
#   corners: list[npt.NDArray[np.float64]] = [np.asarray(corner[:3], dtype=np.float64) for corner in base]
    top: npt.NDArray[np.float64] = np.asarray(apex[:3], dtype=np.float64)
#   top: npt.NDArray[np.float64] = np.asarray(apex[:3], dtype=np.float64)
    count: int = len(corners)
#   count: int = len(corners)
    sides: list[npt.NDArray[np.float32]] = [triangle(corners[(i + 1) % count], corners[i], top) for i in range(count)]
#   sides: list[npt.NDArray[np.float32]] = [triangle(corners[(i + 1) % count], corners[i], top) for i in range(count)]
    bottom: list[npt.NDArray[np.float32]] = [triangle(corners[0], corners[1], corners[2]), triangle(corners[2], corners[3], corners[0])]
#   bottom: list[npt.NDArray[np.float32]] = [triangle(corners[0], corners[1], corners[2]), triangle(corners[2], corners[3], corners[0])]
    return np.concatenate(sides + bottom).reshape((-1, FLOATS_PER_VERTEX))
#   return np.concatenate(sides + bottom).reshape((-1, FLOATS_PER_VERTEX))

def custom_mesh(vertices: typing.Sequence[Vector], indices: typing.Sequence[int]) -> npt.NDArray[np.float32]:
    points: list[npt.NDArray[np.float64]] = [np.asarray(vertex[:3], dtype=np.float64) for vertex in vertices]
#   points: list[npt.NDArray[np.float64]] = [np.asarray(vertex[:3], dtype=np.float64) for vertex in vertices]
    triangles: list[npt.NDArray[np.float32]] = [
#   triangles: list[npt.NDArray[np.float32]] = [
        triangle(points[indices[i]], points[indices[i + 1]], points[indices[i + 2]])
#       triangle(points[indices[i]], points[indices[i + 1]], points[indices[i + 2]])
        for i in range(0, len(indices), 3)
#       for i in range(0, len(indices), 3)
    ]
#   ]
    return np.concatenate(triangles).reshape((-1, FLOATS_PER_VERTEX))
#   return np.concatenate(triangles).reshape((-1, FLOATS_PER_VERTEX))

def sphere_mesh_for(node: SphereNode) -> npt.NDArray[np.float32]:
    return sphere_mesh(node.center, node.radius)
#   return sphere_mesh(node.center, node.radius)

def box_mesh_for(node: AABoxNode) -> npt.NDArray[np.float32]:
    return box_mesh(node.min_point, node.max_point)
#   return box_mesh(node.min_point, node.max_point)

def pyramid_mesh_for(node: PyramidNode) -> npt.NDArray[np.float32]:
    return pyramid_mesh(node.base, node.apex)
#   return pyramid_mesh(node.base, node.apex)

def custom_mesh_for(node: CustomShapeNode) -> npt.NDArray[np.float32]:
    return custom_mesh(node.vertices, node.indices)
#   return custom_mesh(node.vertices, node.indices)

MESH_BUILDERS: dict[NodeKind, typing.Callable[[typing.Any], npt.NDArray[np.float32]]] = {
    NodeKind.SPHERE: sphere_mesh_for,
#   NodeKind.SPHERE: sphere_mesh_for,
    NodeKind.AABOX: box_mesh_for,
#   NodeKind.AABOX: box_mesh_for,
    NodeKind.TEXTURE_BOX: box_mesh_for,
#   NodeKind.TEXTURE_BOX: box_mesh_for,
    NodeKind.PYRAMID: pyramid_mesh_for,
#   NodeKind.PYRAMID: pyramid_mesh_for,
    NodeKind.CUSTOM_SHAPE: custom_mesh_for,
#   NodeKind.CUSTOM_SHAPE: custom_mesh_for,
}

def mesh_for(node: GeometryNode) -> npt.NDArray[np.float32]:
    return MESH_BUILDERS[node.kind](node)
#   return MESH_BUILDERS[node.kind](node)
