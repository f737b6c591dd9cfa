from .api.core import ScadNode, X, Y, Z
from .api.constants import Aim, Color, MAX, MAX2, MAX3, PI
from .api.values import real, from_int, from_float, v2, v3, cmul
from .api.primitives import (
    circle, square, rectangle, polygon, triangle,
    cube, cuboid, sphere, spheroid, cylinder, polyhedron,
    half_plane, half_space,
)
from .api.library import (
    beveled_box, beveled_cube_block, rounded_cube, truncated_octahedron, invert
)
from .api.compositors import Group, Compositor
from .api.operators import Operator
from .api.iteration import ShapeSequence, reduce_shapes, shape_sum, shape_product
from .api.io import save
