import numpy as np
from .core import ScadNode
from .compositors import Compositor
from .primitives import cube, cuboid, sphere
from .values import real, v3, as_vector

def beveled_box(size, bevel) -> ScadNode:
    """
    Creates a box with bevelled edges and its lower left corner at the origin.

    The box is the hull of three cuboids, each inset by `bevel` on the two
    axes it does not span fully.

    Args:
        size (tuple): The (x, y, z) extents of the box.
        bevel (float): Width of the bevel.
    """
    x, y, z = as_vector(size, 3)
    b = real(bevel)
    return Compositor([
        cuboid(x, y - b * 2, z - b * 2).translate((0, b, b)),
        cuboid(x - b * 2, y - b * 2, z).translate((b, b, 0)),
        cuboid(x - b * 2, y, z - b * 2).translate((b, 0, b)),
    ], op_type='hull')

def beveled_cube_block(dims, cube_side, bevel, gap) -> ScadNode:
    """
    Creates a block of (nx, ny, nz) bevelled cubes separated by `gap`,
    joined through a solid core so the block prints as one piece.
    """
    nx, ny, nz = (int(d) for d in dims)
    side, b, g = real(cube_side), real(bevel), real(gap)
    return beveled_box(v3(side - 2 * g, side - 2 * g, side - 2 * g), b) \
        .translate((g, g, g)) \
        .iter_translate((side, 0, 0), nx).union() \
        .iter_translate((0, side, 0), ny).union() \
        .iter_translate((0, 0, side), nz).union() \
        .add(cuboid(
            side * nx - 2 * (g + b),
            side * ny - 2 * (g + b),
            side * nz - 2 * (g + b),
        ).translate((g + b, g + b, g + b)))

def rounded_cube(side) -> ScadNode:
    """
    Creates a cube centered at the origin with its corners rounded off by a
    sphere of radius side/sqrt(3).
    """
    s = real(side)
    return cube(s) \
        .translate((-s * 0.5, -s * 0.5, -s * 0.5)) \
        .intersection(sphere(s * (real(1.0) / np.sqrt(real(3.0)))))

def truncated_octahedron(l_edge) -> ScadNode:
    """Creates a truncated octahedron with edge length `l_edge` centered at the origin."""
    l_edge = float(l_edge)
    r_square = 2.0 ** 0.5 * l_edge  # distance between opposite square faces
    return Compositor([
        cuboid(l_edge, l_edge, 2.0 * r_square)
            .translate((-l_edge / 2.0, -l_edge / 2.0, -r_square))
            .rotate((0, 0, 45)),
        cuboid(l_edge, 2.0 * r_square, l_edge)
            .translate((-l_edge / 2.0, -r_square, -l_edge / 2.0))
            .rotate((0, 45, 0)),
        cuboid(2.0 * r_square, l_edge, l_edge)
            .translate((-r_square, -l_edge / 2.0, -l_edge / 2.0))
            .rotate((45, 0, 0)),
    ], op_type='hull')

def invert(shape: ScadNode, l_edge) -> ScadNode:
    """Subtracts `shape` from a cube of edge `l_edge` centered at the origin."""
    shift = -float(l_edge) / 2.0
    return cube(l_edge).translate((shift, shift, shift)) - shape
