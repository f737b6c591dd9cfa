import pytest
import os
from scadforge import square, circle, save

def test_save_creates_file(tmp_path, capsys):
    s = square(9) - circle(5)
    output_file = tmp_path / "test_shape.scad"

    s.save(str(output_file))

    assert os.path.exists(output_file)
    with open(output_file, 'r') as f:
        content = f.read()
        assert content == s.to_scad() + "\n"
    err = capsys.readouterr().err
    assert "SUCCESS: Script exported to" in err
    assert "WARNING" not in err

def test_save_function_and_quiet_mode(tmp_path, capsys):
    output_file = tmp_path / "quiet.scad"
    save(circle(5), output_file, verbose=False)
    assert output_file.read_text() == "circle(d = 5);\n"
    assert capsys.readouterr().err == ""

def test_save_warns_on_unexpected_suffix(tmp_path, capsys):
    output_file = tmp_path / "shape.txt"
    circle(5).save(output_file)
    assert output_file.exists()
    assert "WARNING:" in capsys.readouterr().err

def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        circle(5).save(tmp_path / "missing" / "shape.scad", verbose=False)
