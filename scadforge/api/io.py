import sys
from pathlib import Path

def save(shape, path, verbose=True):
    """
    Renders `shape` and writes the script to `path`.

    Args:
        shape (ScadNode): The root of the tree to render.
        path (str or Path): Destination file, normally ending in `.scad`.
        verbose (bool): Report progress on stderr.
    """
    path = Path(path)
    if verbose and path.suffix.lower() != '.scad':
        print(f"WARNING: '{path.name}' does not end in '.scad'; OpenSCAD may not open it.", file=sys.stderr)

    script = shape.to_scad()
    with open(path, 'w') as f:
        f.write(script)
        f.write("\n")

    if verbose:
        print(f"SUCCESS: Script exported to '{path}'.", file=sys.stderr)
