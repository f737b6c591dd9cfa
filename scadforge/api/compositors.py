from .core import ScadNode, block

class Compositor(ScadNode):
    """
    A generic node for combining multiple shapes.
    Unifies Boolean operations (Union, Intersection, Difference), Hulls and Minkowski sums.
    """

    _SCAD_OPS = ('union', 'intersection', 'difference', 'hull', 'minkowski')

    def __init__(self, children, op_type: str = 'union'):
        super().__init__()
        self.children = tuple(children)
        self.op_type = op_type.lower()

        if self.op_type not in self._SCAD_OPS:
            raise ValueError(f"Unknown operation type: {self.op_type}")
        if self.op_type == 'difference' and len(self.children) != 2:
            raise ValueError("A difference takes exactly two shapes: (minuend, subtrahend).")

        dims = {c.dim for c in self.children if c.dim is not None}
        if len(dims) > 1:
            raise TypeError(f"Cannot combine 2D and 3D shapes in a {self.op_type}.")
        self.dim = dims.pop() if dims else None

    @classmethod
    def extend(cls, base: ScadNode, op_type: str, others) -> 'Compositor':
        """
        Combines `base` with `others`, appending to `base` when it already is
        a combinator of the same kind instead of nesting a new one.
        """
        if isinstance(base, cls) and base.op_type == op_type:
            return cls(base.children + tuple(others), op_type=op_type)
        return cls((base,) + tuple(others), op_type=op_type)

    def to_scad(self) -> str:
        return block(f"{self.op_type}()", self.children)


def Group(*children):
    """
    Creates a union of multiple shapes.
    Acts as a helper factory for Compositor.
    """
    return Compositor(children, op_type='union')
