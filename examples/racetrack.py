import sys
from scadforge import circle, PI

def racetrack(r=25.0):
    """Two circles on either side of the origin, hulled into a stadium outline."""
    return circle(0.5 * r) \
        .translate((0, r * PI / 4)) \
        .iter_rotate_equal(2) \
        .hull()

def main():
    r = float(sys.argv[1]) if len(sys.argv) > 1 else 25.0
    print(racetrack(r))

if __name__ == "__main__":
    main()
