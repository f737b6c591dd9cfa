import pytest
import numpy as np
from scadforge import (
    circle, square, rectangle, polygon, triangle,
    cube, cuboid, sphere, spheroid, cylinder, polyhedron,
    half_plane, half_space, Aim, MAX, v2, v3,
)
from scadforge.api.values import format_real

def test_circle(c5):
    assert c5.to_scad() == "circle(d = 5);"
    assert c5.dim == 2

def test_square(s9):
    assert s9.to_scad() == "square(size = 9);"

def test_rectangle():
    assert rectangle(3, 4.5).to_scad() == "square(size = [3, 4.5]);"

def test_cube():
    assert cube(9).to_scad() == "cube(size = 9);"
    assert cube(9).dim == 3

def test_cuboid():
    assert cuboid(1, 2, 3).to_scad() == "cube(size = [1, 2, 3]);"
    assert cuboid((1, 2, 3)).to_scad() == "cube(size = [1, 2, 3]);"

def test_sphere(sphere5):
    assert sphere5.to_scad() == "sphere(r = 5);"

def test_cylinder():
    assert cylinder(10.0, 5).to_scad() == "cylinder(h = 10, r = 5);"

def test_spheroid():
    assert spheroid((5, 4, 3)).to_scad() == "scale(v = [5, 4, 3]) {\n  sphere(r = 1);\n}"

def test_triangle():
    expected = "polygon(points = [ [0, 0], [1, 0], [0, 1] ]);"
    assert triangle(v2(0., 0.), v2(1., 0.), v2(0., 1.)).to_scad() == expected
    assert triangle((0, 0), v2(1., 0.), (0, 1.)).to_scad() == expected

def test_polygon():
    expected = "polygon(points = [ [0, 0], [1, 0], [0, 1] ]);"
    assert polygon([v2(0., 0.), v2(1., 0.), v2(0., 1.)]).to_scad() == expected
    assert polygon([(0., 0.), (1., 0.), (0., 1.)]).to_scad() == expected
    assert polygon([(0, 0), (1, 0), (0, 1)]).to_scad() == expected

def test_polyhedron_default_face():
    points = [
        v3(0, 0, 0), v3(10, 0, 0), v3(10, 7, 0), v3(0, 7, 0),
        v3(0, 0, 5), v3(10, 0, 5), v3(10, 7, 5), v3(0, 7, 5),
    ]
    assert polyhedron(points).to_scad() == (
        "polyhedron(points = [[0.0, 0.0, 0.0], [10.0, 0.0, 0.0], [10.0, 7.0, 0.0], "
        "[0.0, 7.0, 0.0], [0.0, 0.0, 5.0], [10.0, 0.0, 5.0], [10.0, 7.0, 5.0], "
        "[0.0, 7.0, 5.0]], faces = [[0, 1, 2]]);"
    )

def test_polyhedron_faces_pass_through_unchecked():
    p = polyhedron([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1.5)], [[0, 1, 2], [0, 1, 3], [7, 8, 9, 10]])
    assert p.to_scad() == (
        "polyhedron(points = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.5]], "
        "faces = [[0, 1, 2], [0, 1, 3], [7, 8, 9, 10]]);"
    )

def test_negative_and_empty_inputs_are_rendered_verbatim():
    assert circle(-3).to_scad() == "circle(d = -3);"
    assert cube(-1.5).to_scad() == "cube(size = -1.5);"
    assert polygon([]).to_scad() == "polygon(points = [  ]);"

def test_primitives_store_single_precision():
    assert circle(5).diameter.dtype == np.float32
    assert circle(0.1).to_scad() == "circle(d = 0.1);"

@pytest.mark.parametrize("aim, offset", [
    (Aim.N, (-MAX / 2, 0)),
    (Aim.S, (-MAX / 2, -MAX)),
    (Aim.E, (0, -MAX / 2)),
    (Aim.W, (-MAX, -MAX / 2)),
    (Aim.U, (-MAX / 2, 0)),
    (Aim.D, (-MAX / 2, -MAX)),
])
def test_half_plane(aim, offset):
    hp = half_plane(aim)
    assert hp.func_name == 'translate'
    assert np.array_equal(hp.params[0], v2(*offset))
    assert hp.child.to_scad() == f"square(size = {format_real(MAX)});"
    assert hp.dim == 2

@pytest.mark.parametrize("aim, offset", [
    (Aim.N, (-MAX / 2, 0, -MAX / 2)),
    (Aim.S, (-MAX / 2, -MAX, -MAX / 2)),
    (Aim.E, (0, -MAX / 2, -MAX / 2)),
    (Aim.W, (-MAX, -MAX / 2, -MAX / 2)),
    (Aim.U, (-MAX / 2, -MAX / 2, 0)),
    (Aim.D, (-MAX / 2, -MAX / 2, -MAX)),
])
def test_half_space(aim, offset):
    hs = half_space(aim)
    assert hs.func_name == 'translate'
    assert np.array_equal(hs.params[0], v3(*offset))
    assert hs.child.to_scad() == f"cube(size = {format_real(MAX)});"
    assert hs.dim == 3

def test_half_plane_accepts_direction_names():
    assert half_plane('east') == half_plane(Aim.E)
    with pytest.raises(ValueError):
        half_plane('sideways')

def test_half_plane_text_has_no_exponent():
    text = half_plane(Aim.W).to_scad()
    assert "e" not in text.replace("translate", "").replace("square", "").replace("size", "")
