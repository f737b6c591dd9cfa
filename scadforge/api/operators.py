import numpy as np
from .core import ScadNode, block
from .values import format_real, format_vector

class Operator(ScadNode):
    """
    A generic node wrapping exactly one child.
    Unifies Transform, Color and Extrude logic.
    """

    # Keyword under which the single parameter is rendered; None renders it bare.
    _SCAD_ARGS = {
        'translate': 'v',
        'mirror': 'v',
        'scale': 'v',
        'rotate': None,
        'color': None,
        'linear_extrude': 'height',
        'rotate_extrude': 'angle',
    }

    _OP_TYPES = {
        'transform': {'translate', 'rotate', 'scale', 'mirror'},
        'color': {'color'},
        'extrude': {'linear_extrude', 'rotate_extrude'},
    }

    def __init__(self, child: ScadNode, op_type: str, func_name: str, params: list):
        super().__init__()
        self.child = child
        self.op_type = op_type
        self.func_name = func_name
        self.params = tuple(params)

        if func_name not in self._OP_TYPES.get(op_type, ()):
            raise ValueError(f"Unknown operation: {op_type}/{func_name}")

        if op_type == 'extrude':
            if child.dim == 3:
                raise TypeError(f"Cannot {func_name} a 3D shape.")
            self.dim = 3
        else:
            self.dim = child.dim

    def _format_param(self, value) -> str:
        if hasattr(value, 'to_scad'):
            return value.to_scad()
        if isinstance(value, np.ndarray):
            return format_vector(value)
        return format_real(value)

    def to_scad(self) -> str:
        arg = self._format_param(self.params[0])
        name = self._SCAD_ARGS[self.func_name]
        args = f"{name} = {arg}" if name else arg
        return block(f"{self.func_name}({args})", [self.child])
