from .compositors import Compositor

class ShapeSequence:
    """
    A lazy, finite and restartable sequence of shapes.

    Each element is built on demand by `factory(i)` for i in 0..n-1, so
    iterating twice yields the same shapes twice.
    """
    def __init__(self, n: int, factory):
        self.n = int(n)
        self.factory = factory

    def __iter__(self):
        return (self.factory(i) for i in range(self.n))

    def __len__(self):
        return self.n

    def __getitem__(self, i: int):
        if not -self.n <= i < self.n:
            raise IndexError(i)
        return self.factory(i % self.n)

    def map(self, func) -> 'ShapeSequence':
        """Lazily applies `func` to every element."""
        factory = self.factory
        return ShapeSequence(self.n, lambda i: func(factory(i)))

    def reduce(self, kind: str = 'union'):
        return reduce_shapes(self, kind)

    def union(self): return reduce_shapes(self, 'union')
    def intersection(self): return reduce_shapes(self, 'intersection')
    def hull(self): return reduce_shapes(self, 'hull')
    def minkowski(self): return reduce_shapes(self, 'minkowski')
    def sum(self): return shape_sum(self)
    def product(self): return shape_product(self)


def reduce_shapes(shapes, kind: str = 'union') -> Compositor:
    """
    Folds any iterable of shapes into a single combinator node.

    The children keep the iteration order and are never merged, so a union
    element stays nested inside a union reduction. An empty iterable gives a
    combinator without children.

    Args:
        shapes (iterable): The shapes to combine.
        kind (str): One of 'union', 'intersection', 'hull', 'minkowski'.
    """
    if kind == 'difference':
        raise ValueError("A difference cannot be reduced from a sequence.")
    return Compositor(list(shapes), op_type=kind)

def shape_sum(shapes) -> Compositor:
    return reduce_shapes(shapes, 'union')

def shape_product(shapes) -> Compositor:
    return reduce_shapes(shapes, 'intersection')
