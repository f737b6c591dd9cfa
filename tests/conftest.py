import pytest
from scadforge import circle, square, cube, sphere


@pytest.fixture
def c5():
    return circle(5)

@pytest.fixture
def s9():
    return square(9.0)

@pytest.fixture
def cube3():
    return cube(3)

@pytest.fixture
def sphere5():
    return sphere(5)

@pytest.fixture
def wrap():
    """Builds the expected text of `<header> { child; child; ... }` from rendered children."""
    def _wrap(header: str, *children: str) -> str:
        body = "\n  ".join(c.replace("\n", "\n  ") for c in children)
        return f"{header} {{\n  {body}\n}}"
    return _wrap
