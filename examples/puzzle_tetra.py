import sys
from scadforge import beveled_box, cuboid

def frame(e=10.0, s=50.0):
    """Twelve bevelled bars along the edges of a cube of side `s`."""
    return beveled_box((e, e, s), 1.0) \
        .translate((s / 2 - e, s / 2 - e, -s / 2)) \
        .iter_rotate((0, 0, 90), 4).union() \
        .iter_rotate((0, 90, 0), 2).union() \
        .iter_rotate((90, 0, 0), 2).union()

def tetra(e=10.0, s=50.0):
    """A thin tetrahedron spanning the frame opening, built as the hull of two crossed rods."""
    sqrt2 = 2.0 ** 0.5
    t_edge = (s - 2 * e) * sqrt2
    return cuboid(t_edge, 0.01, 0.01) \
        .translate((-t_edge / 2, 0, t_edge / 2 / sqrt2)) \
        .add_map(lambda x: x.rotate((180, 0, 90))) \
        .hull()

def puzzle_piece(e=10.0, s=50.0):
    return frame(e, s).add(tetra(e, s).translate((s, 0, 0)))

def main():
    shape = puzzle_piece()
    if len(sys.argv) > 1:
        shape.save(sys.argv[1])
    else:
        print(shape)

if __name__ == "__main__":
    main()
