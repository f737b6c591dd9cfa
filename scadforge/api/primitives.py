from .core import ScadNode
from .constants import Aim, MAX2, MAX3
from .values import real, v2, v3, as_vector, format_real, format_vector, format_debug_real

# --- 2D Primitive Classes ---

class Primitive2D(ScadNode):
    dim = 2

class Circle(Primitive2D):
    def __init__(self, diameter: float = 1.0):
        super().__init__()
        self.diameter = real(diameter)
    def to_scad(self) -> str:
        return f"circle(d = {format_real(self.diameter)});"

def circle(diameter: float = 1.0) -> ScadNode:
    """
    Creates a circle centered at the origin.

    Args:
        diameter (float, optional): The diameter of the circle. Defaults to 1.0.
    """
    return Circle(diameter)

class Square(Primitive2D):
    def __init__(self, side: float = 1.0):
        super().__init__()
        self.side = real(side)
    def to_scad(self) -> str:
        return f"square(size = {format_real(self.side)});"

def square(side: float = 1.0) -> ScadNode:
    """
    Creates a square with its lower left corner at the origin.

    Args:
        side (float, optional): The side length. Defaults to 1.0.
    """
    return Square(side)

class Rectangle(Primitive2D):
    def __init__(self, size=(1.0, 1.0)):
        super().__init__()
        self.size = as_vector(size, 2)
    def to_scad(self) -> str:
        return f"square(size = {format_vector(self.size)});"

def rectangle(width: float = 1.0, height: float = 1.0) -> ScadNode:
    """
    Creates a rectangle with its lower left corner at the origin.

    Args:
        width (float): Extent along x.
        height (float): Extent along y.
    """
    return Rectangle(v2(width, height))

class Polygon(Primitive2D):
    def __init__(self, points):
        super().__init__()
        self.points = tuple(as_vector(p, 2) for p in points)
    def to_scad(self) -> str:
        pts = ", ".join(format_vector(p) for p in self.points)
        return f"polygon(points = [ {pts} ]);"

def polygon(points) -> ScadNode:
    """
    Creates a polygon from a sequence of 2D points.

    Args:
        points (iterable): Vertices as (x, y) pairs, in drawing order.
    """
    return Polygon(points)

def triangle(p0, p1, p2) -> ScadNode:
    """Creates a triangle from three 2D points."""
    return Polygon([p0, p1, p2])

# --- 3D Primitive Classes ---

class Primitive3D(ScadNode):
    dim = 3

class Cube(Primitive3D):
    def __init__(self, side: float = 1.0):
        super().__init__()
        self.side = real(side)
    def to_scad(self) -> str:
        return f"cube(size = {format_real(self.side)});"

def cube(side: float = 1.0) -> ScadNode:
    """
    Creates a cube with its lower left corner at the origin.

    Args:
        side (float, optional): The edge length. Defaults to 1.0.
    """
    return Cube(side)

class Cuboid(Primitive3D):
    def __init__(self, size=(1.0, 1.0, 1.0)):
        super().__init__()
        self.size = as_vector(size, 3)
    def to_scad(self) -> str:
        return f"cube(size = {format_vector(self.size)});"

def cuboid(x, y=None, z=None) -> ScadNode:
    """
    Creates a rectangular cuboid with its lower left corner at the origin.

    Args:
        x (float or tuple): Extent along x, or all three extents as a vector.
        y (float, optional): Extent along y.
        z (float, optional): Extent along z.
    """
    if y is None and z is None:
        return Cuboid(x)
    return Cuboid(v3(x, y, z))

class Sphere(Primitive3D):
    def __init__(self, radius: float = 1.0):
        super().__init__()
        self.radius = real(radius)
    def to_scad(self) -> str:
        return f"sphere(r = {format_real(self.radius)});"

def sphere(radius: float = 1.0) -> ScadNode:
    """
    Creates a sphere centered at the origin.

    Args:
        radius (float, optional): The radius of the sphere. Defaults to 1.0.
    """
    return Sphere(radius)

def spheroid(radii) -> ScadNode:
    """Creates a spheroid with radii (rx, ry, rz) centered at the origin."""
    return Sphere(1.0).scale_nonuniform(radii)

class Cylinder(Primitive3D):
    def __init__(self, height: float = 1.0, radius: float = 1.0):
        super().__init__()
        self.height = real(height)
        self.radius = real(radius)
    def to_scad(self) -> str:
        return f"cylinder(h = {format_real(self.height)}, r = {format_real(self.radius)});"

def cylinder(height: float = 1.0, radius: float = 1.0) -> ScadNode:
    """
    Creates a cylinder standing on the XY plane, centered on the Z axis.

    Args:
        height (float): Extent along z.
        radius (float): Radius of the base.
    """
    return Cylinder(height, radius)

class Polyhedron(Primitive3D):
    def __init__(self, points, faces):
        super().__init__()
        self.points = tuple(as_vector(p, 3) for p in points)
        self.faces = tuple(tuple(int(i) for i in face) for face in faces)
    def to_scad(self) -> str:
        pts = ", ".join("[" + ", ".join(format_debug_real(c) for c in p) + "]" for p in self.points)
        faces = ", ".join("[" + ", ".join(str(i) for i in f) + "]" for f in self.faces)
        return f"polyhedron(points = [{pts}], faces = [{faces}]);"

def polyhedron(points, faces=None) -> ScadNode:
    """
    Creates a polyhedron from vertices and faces.

    Face indices are passed through unchecked. Without `faces`, the first
    three vertices form the only face.
    """
    if faces is None:
        faces = [[0, 1, 2]]
    return Polyhedron(points, faces)

# --- Half planes and half spaces ---

def half_plane(aim) -> ScadNode:
    """
    Creates a huge square covering the half plane on the `aim` side of the origin.

    Up and Down are the same as North and South in 2D.
    """
    m = MAX2
    offsets = {
        Aim.N: (-m / 2, 0), Aim.U: (-m / 2, 0),
        Aim.S: (-m / 2, -m), Aim.D: (-m / 2, -m),
        Aim.E: (0, -m / 2),
        Aim.W: (-m, -m / 2),
    }
    return Square(m).translate(v2(*offsets[Aim(aim)]))

def half_space(aim) -> ScadNode:
    """Creates a huge cube covering the half space on the `aim` side of the origin."""
    m = MAX3
    offsets = {
        Aim.N: (-m / 2, 0, -m / 2),
        Aim.S: (-m / 2, -m, -m / 2),
        Aim.E: (0, -m / 2, -m / 2),
        Aim.W: (-m, -m / 2, -m / 2),
        Aim.U: (-m / 2, -m / 2, 0),
        Aim.D: (-m / 2, -m / 2, -m),
    }
    return Cube(m).translate(v3(*offsets[Aim(aim)]))
