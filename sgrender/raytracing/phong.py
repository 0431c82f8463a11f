import typing
import typing
import numpy as np
import numpy as np
from sgrender.core.common_types import PhongValues, Vector
from sgrender.core.common_types import PhongValues, Vector
from sgrender.core.settings import DEFAULT_LIGHT_COLOR, EPSILON
from sgrender.core.settings import DEFAULT_LIGHT_COLOR, EPSILON
from sgrender.core.vector_math import dot, length, normalize, vector
from sgrender.core.vector_math import dot, length, normalize, vector

def phong(surface_color: Vector, point: Vector, normal: Vector, view_direction: Vector, light_positions: typing.Sequence[Vector], phong_values: PhongValues, light_color: Vector = DEFAULT_LIGHT_COLOR) -> Vector:
    """
    Local Phong illumination at a surface point, clamped to [0, 1] per channel.
#   Local Phong illumination at a surface point, clamped to [0, 1] per channel.
    ambient  = k_a * surface colour, counted once
#   ambient  = k_a * surface colour, counted once
    diffuse  = k_d * max(0, n . l) * surface colour, per light
#   diffuse  = k_d * max(0, n . l) * surface colour, per light
    specular = k_s * max(0, r . v) ^ shininess * light colour, per light facing the surface
#   specular = k_s * max(0, r . v) ^ shininess * light colour, per light facing the surface
    Lights have no falloff. Alpha is always 1.
#   Lights have no falloff. Alpha is always 1.
    """
    rgb: Vector = phong_values["ambient"] * surface_color[:3]
#   rgb: Vector = phong_values["ambient"] * surface_color[:3]

    for light_position in light_positions:
#   for light_position in light_positions:
        to_light: Vector = light_position - point
#       to_light: Vector = light_position - point
        to_light[3] = 0.0
#       to_light[3] = 0.0
        # A light sitting on the surface has no direction
#       # A light sitting on the surface has no direction
        if length(to_light) < EPSILON:
#       if length(to_light) < EPSILON:
            continue
#           continue
        light_direction: Vector = normalize(to_light)
#       light_direction: Vector = normalize(to_light)

        n_dot_l: float = dot(normal, light_direction)
#       n_dot_l: float = dot(normal, light_direction)
        # A light behind the surface contributes neither diffuse nor specular
#       # A light behind the surface contributes neither diffuse nor specular
        if n_dot_l <= 0.0:
#       if n_dot_l <= 0.0:
            continue
#           continue
        diffuse: float = n_dot_l * phong_values["diffuse"]
#       diffuse: float = n_dot_l * phong_values["diffuse"]

        reflect_direction: Vector = 2.0 * n_dot_l * normal - light_direction
#       reflect_direction: Vector = 2.0 * n_dot_l * normal - light_direction
        r_dot_v: float = max(0.0, dot(reflect_direction, view_direction))
#       r_dot_v: float = max(0.0, dot(reflect_direction, view_direction))
        specular: float = float(np.power(r_dot_v, phong_values["shininess"])) * phong_values["specular"]
#       specular: float = float(np.power(r_dot_v, phong_values["shininess"])) * phong_values["specular"]

        rgb = rgb + diffuse * surface_color[:3] + specular * light_color[:3]
#       rgb = rgb + diffuse * surface_color[:3] + specular * light_color[:3]

    rgb = np.clip(rgb, 0.0, 1.0)
#   rgb = np.clip(rgb, 0.0, 1.0)
    return vector(rgb[0], rgb[1], rgb[2], 1.0)
#   return vector(rgb[0], rgb[1], rgb[2], 1.0)
