from abc import ABC, abstractmethod
import numpy as np
from .values import v3

X, Y, Z = v3(1, 0, 0), v3(0, 1, 0), v3(0, 0, 1)

def indent(shape: 'ScadNode') -> str:
    """Renders a child so that it nests two spaces deeper than its parent."""
    return shape.to_scad().replace("\n", "\n  ")

def block(header: str, children) -> str:
    """Renders `header { ... }` with each child on its own indented line."""
    body = "\n  ".join(indent(c) for c in children)
    return f"{header} {{\n  {body}\n}}"


class ScadNode(ABC):
    """Abstract base class for every node of an OpenSCAD expression tree."""

    # 2 or 3 for concrete shapes; None for a combinator with no children.
    dim = None

    def __init__(self):
        super().__init__()
        if not hasattr(self, 'child'):
            self.child = None

    @abstractmethod
    def to_scad(self) -> str:
        """Returns the OpenSCAD source text for this node and its subtree."""
        raise NotImplementedError

    def __str__(self):
        return self.to_scad()

    def __repr__(self):
        return f"<{type(self).__name__} dim={self.dim}>"

    def __eq__(self, other):
        return isinstance(other, ScadNode) and self.to_scad() == other.to_scad()

    def __hash__(self):
        return hash(self.to_scad())

    def save(self, path, verbose=True):
        """Writes the rendered script to `path`."""
        from .io import save as save_func
        save_func(self, path, verbose=verbose)

    # --- Combinators ---

    def union(self, *others) -> 'ScadNode':
        from .compositors import Compositor
        return Compositor.extend(self, 'union', others)

    def add(self, other) -> 'ScadNode':
        return self.union(other)

    def intersection(self, *others) -> 'ScadNode':
        from .compositors import Compositor
        return Compositor.extend(self, 'intersection', others)

    def minkowski(self, *others) -> 'ScadNode':
        from .compositors import Compositor
        return Compositor.extend(self, 'minkowski', others)

    def difference(self, other) -> 'ScadNode':
        from .compositors import Compositor
        return Compositor([self, other], op_type='difference')

    def subtract(self, other) -> 'ScadNode':
        return self.difference(other)

    def and_(self, other) -> 'ScadNode':
        return self.intersection(other)

    def hull(self) -> 'ScadNode':
        """Wraps this shape in a hull; a union hands its children to the hull."""
        from .compositors import Compositor
        if isinstance(self, Compositor) and self.op_type == 'union':
            return Compositor(self.children, op_type='hull')
        return Compositor([self], op_type='hull')

    def __add__(self, other): return self.union(other)
    def __or__(self, other): return self.union(other)
    def __and__(self, other): return self.intersection(other)
    def __sub__(self, other): return self.difference(other)

    def add_map(self, func) -> 'ScadNode':
        """Unions this shape with `func` applied to it."""
        return self.add(func(self))

    def map(self, func) -> 'ScadNode':
        return func(self)

    def invert(self, l_edge) -> 'ScadNode':
        """Subtracts this shape from a cube of edge `l_edge` centered at the origin."""
        from .library import invert
        return invert(self, l_edge)

    # --- Transforms ---

    def translate(self, offset) -> 'ScadNode':
        from .operators import Operator
        off = self._vector(offset)
        if self._is_op('translate'):
            return Operator(self.child, 'transform', 'translate', [self.params[0] + off])
        return Operator(self, 'transform', 'translate', [off])

    def rotate(self, angle) -> 'ScadNode':
        """
        Rotates by an angle in degrees, or by a vector of angles about x, y, z.

        Rotating a rotate node adds the angles into that node.
        """
        from .operators import Operator
        from .values import is_vector, real
        a = self._vector(angle) if is_vector(angle) else real(angle)
        if self._is_op('rotate') and np.shape(self.params[0]) == np.shape(a):
            return Operator(self.child, 'transform', 'rotate', [self.params[0] + a])
        return Operator(self, 'transform', 'rotate', [a])

    def scale(self, factor) -> 'ScadNode':
        from .operators import Operator
        from .values import is_vector, real
        if is_vector(factor):
            return self.scale_nonuniform(factor)
        return Operator(self, 'transform', 'scale', [real(factor)])

    def scale_nonuniform(self, factors) -> 'ScadNode':
        from .operators import Operator
        return Operator(self, 'transform', 'scale', [self._vector(factors)])

    def mirror(self, normal) -> 'ScadNode':
        from .operators import Operator
        return Operator(self, 'transform', 'mirror', [self._vector(normal)])

    def color(self, tag) -> 'ScadNode':
        from .operators import Operator
        from .constants import Color
        return Operator(self, 'color', 'color', [Color(tag)])

    def linear_extrude(self, height) -> 'ScadNode':
        from .operators import Operator
        from .values import real
        return Operator(self, 'extrude', 'linear_extrude', [real(height)])

    def rotate_extrude(self, angle) -> 'ScadNode':
        from .operators import Operator
        from .values import real
        return Operator(self, 'extrude', 'rotate_extrude', [real(angle)])

    # --- Iteration ---

    def iter_translate(self, step, n: int):
        """Lazily yields `n` copies translated by 0, step, 2*step, ..."""
        from .iteration import ShapeSequence
        s = self._vector(step)
        return ShapeSequence(n, lambda i: self.translate(s * np.float32(i)))

    def iter_rotate(self, step, n: int):
        """Lazily yields `n` copies rotated by 0, step, 2*step, ..."""
        from .iteration import ShapeSequence
        from .values import is_vector, real
        s = self._vector(step) if is_vector(step) else real(step)
        return ShapeSequence(n, lambda i: self.rotate(s * np.float32(i)))

    def iter_rotate_equal(self, n: int):
        """Lazily yields `n` copies spaced evenly around a full turn."""
        from .iteration import ShapeSequence
        return ShapeSequence(n, lambda i: self.rotate(360.0 / n * i))

    def iter_square_edge(self, distance):
        """Lazily yields four copies shifted by `distance` along +x, +y, -x, -y."""
        from .iteration import ShapeSequence
        from .values import real
        d = real(distance)
        shifts = [(d, 0), (0, d), (-d, 0), (0, -d)]
        return ShapeSequence(4, lambda i: self.translate(shifts[i]))

    def translate_vec(self, step, n: int) -> list:
        return list(self.iter_translate(step, n))

    iterate = iter_translate
    iterate_rotate = iter_rotate
    iterate_equal_angle = iter_rotate_equal

    # --- Helpers ---

    def _is_op(self, func_name: str) -> bool:
        from .operators import Operator
        return isinstance(self, Operator) and self.func_name == func_name

    def _vector(self, value) -> np.ndarray:
        from .values import as_vector
        return as_vector(value, self.dim)
