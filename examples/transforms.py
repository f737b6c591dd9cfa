import sys
from scadforge import square, circle, cube, spheroid, Color

def translation_example():
    """A square and its translated copy, joined by a union."""
    s = square(4)
    return s + s.translate((6, 0))

def rotation_example():
    """A bar rotated about all three axes."""
    return cube(1).scale((4, 1, 1)).rotate((30, 45, 60))

def mirror_example():
    return circle(3).translate((5, 0)).add_map(lambda x: x.mirror((1, 0)))

def color_example():
    return (cube(9) - spheroid((5, 4, 3))).color(Color.RED)

def extrude_example():
    """A star of rotated squares, extruded into a prism."""
    return square(9).iter_rotate_equal(6).union().linear_extrude(10)

def lathe_example():
    """A circle swept around the Z axis into half a torus."""
    return circle(4).translate((10, 0)).rotate_extrude(180)

def main():
    print("--- scadforge Transform Examples ---")
    examples = {
        "translation": translation_example, "rotation": rotation_example,
        "mirror": mirror_example, "color": color_example,
        "extrude": extrude_example, "lathe": lathe_example,
    }

    if len(sys.argv) < 2:
        print("Available examples:", ", ".join(examples.keys()))
        return

    func = examples.get(sys.argv[1])
    if func:
        print(func())
    else: print(f"Example '{sys.argv[1]}' not found.")

if __name__ == "__main__":
    main()
