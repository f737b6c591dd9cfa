import sys
from scadforge import square, circle, cube, sphere, Group

def union_example(): return square(9) + circle(5)
def difference_example(): return square(9) - circle(5)
def intersection_example(): return cube(9) & sphere(6)
def hull_example(): return (circle(4) + circle(4).translate((10, 0))).hull()
def minkowski_example(): return square(9).minkowski(circle(2))

def rosette_example():
    """Four rotated squares, mirrored and joined into one flat union."""
    return square(9).iter_rotate(20, 4).union().add_map(lambda x: x.mirror((1, 0)))

def group_example():
    return Group(cube(3), sphere(2).translate((5, 0, 0)), cube(1).translate((0, 5, 0)))

def main():
    print("--- scadforge Composition Examples ---")
    examples = {
        "union": union_example, "difference": difference_example,
        "intersection": intersection_example, "hull": hull_example,
        "minkowski": minkowski_example, "rosette": rosette_example,
        "group": group_example,
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
