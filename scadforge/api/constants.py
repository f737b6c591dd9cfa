from enum import Enum
import numpy as np

# Kept three orders of magnitude below float32 max so that huge clipping
# shapes can still be translated or rotated without overflowing.
MAX = np.float32(np.finfo(np.float32).max / np.float32(1000.0))
MAX2 = MAX
MAX3 = MAX

PI = np.float32(np.pi)

class Aim(Enum):
    """Axis-aligned direction of a half plane or half space."""
    N = 'north'
    S = 'south'
    E = 'east'
    W = 'west'
    U = 'up'
    D = 'down'

class Color(Enum):
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'

    def to_scad(self) -> str:
        return f'"{self.value}"'
