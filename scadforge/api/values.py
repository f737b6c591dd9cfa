import numpy as np

# All geometry is carried in single precision.
REAL = np.float32

def real(value) -> np.float32:
    """Narrows an int or float to a single-precision scalar."""
    return REAL(value)

def from_int(value: int) -> np.float32:
    return REAL(int(value))

def from_float(value: float) -> np.float32:
    return REAL(float(value))

def v2(x, y) -> np.ndarray:
    """Creates a 2D single-precision vector."""
    return np.array([x, y], dtype=REAL)

def v3(x, y, z) -> np.ndarray:
    """Creates a 3D single-precision vector."""
    return np.array([x, y, z], dtype=REAL)

def as_vector(value, size: int = None) -> np.ndarray:
    """
    Coerces a tuple, list or array into a single-precision vector.

    A 2D vector is promoted to 3D with a zero z component when `size` is 3.
    """
    vec = np.array(value, dtype=REAL).flatten()
    if size == 3 and vec.shape[0] == 2:
        vec = np.append(vec, REAL(0.0))
    if size is not None and vec.shape[0] != size:
        raise ValueError(f"Expected a vector of length {size}, got {vec.shape[0]}")
    return vec

def is_vector(value) -> bool:
    return isinstance(value, (list, tuple, np.ndarray)) and np.ndim(value) > 0

def cmul(a, b) -> np.ndarray:
    """Multiplies two 2D vectors as complex numbers, composing their rotations."""
    a, b = as_vector(a, 2), as_vector(b, 2)
    return v2(a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0])

def format_real(value) -> str:
    """
    Formats a scalar for injection into an OpenSCAD script.

    Uses the shortest decimal that round-trips to the single-precision value,
    positional notation, and no fractional part for integral values.
    """
    value = REAL(value)
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, unique=True, trim='-')

def format_vector(vec) -> str:
    return "[" + ", ".join(format_real(v) for v in vec) + "]"

def format_debug_real(value) -> str:
    """Like `format_real`, but integral finite values keep a trailing `.0`."""
    text = format_real(value)
    if np.isfinite(REAL(value)) and '.' not in text:
        text += ".0"
    return text
