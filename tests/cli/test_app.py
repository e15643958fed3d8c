"""Tests for the command line interface."""

import pytest

from solid_samples.cli import ExitCode, main
from solid_samples.cli.app import parse_shape_spec
from solid_samples.core.domain import Rectangle
from solid_samples.core.exceptions import InvalidArgumentError
from solid_samples.plugins import default_registry


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    for key in ("SOLID_STRICT", "SOLID_VERBOSE", "SOLID_PRECISION"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestParseShapeSpec:
    """Tests for parse_shape_spec."""
    
    def test_with_dimensions(self):
        assert parse_shape_spec("rectangle:3,4") == ("rectangle", [3.0, 4.0])
    
    def test_without_dimensions(self):
        assert parse_shape_spec("base") == ("base", [])
    
    def test_not_a_number(self):
        with pytest.raises(InvalidArgumentError):
            parse_shape_spec("circle:two")


class TestMain:
    """Tests for main()."""
    
    def test_area(self, capsys):
        assert main(["area", "rectangle", "3", "4"]) == ExitCode.SUCCESS
        
        assert "rectangle area: 12.0000" in capsys.readouterr().out
    
    def test_area_precision(self, capsys):
        assert main(["--precision", "9", "area", "circle", "2"]) == ExitCode.SUCCESS
        
        assert "circle area: 12.566370614" in capsys.readouterr().out
    
    def test_negative_dimension_permissive(self, capsys):
        assert main(["area", "rectangle", "-3", "4"]) == ExitCode.SUCCESS
        
        assert "-12.0000" in capsys.readouterr().out
    
    def test_strict_flag(self, capsys):
        assert main(["area", "rectangle", "-3", "4", "--strict"]) == ExitCode.INVALID_ARGUMENT
        
        assert "width must be non-negative" in capsys.readouterr().out
    
    def test_strict_from_environment(self, monkeypatch):
        monkeypatch.setenv("SOLID_STRICT", "true")
        
        assert main(["area", "circle", "-1"]) == ExitCode.INVALID_ARGUMENT
    
    def test_wrong_arity(self):
        assert main(["area", "circle", "1", "2"]) == ExitCode.INVALID_ARGUMENT
    
    def test_unknown_shape(self, capsys):
        assert main(["area", "hexagon", "1"]) == ExitCode.UNKNOWN_SHAPE
        
        assert "Unknown shape kind: 'hexagon'" in capsys.readouterr().out
    
    def test_config_error(self, capsys):
        assert main(["--precision", "-2", "kinds"]) == ExitCode.CONFIG_ERROR
        
        assert "SOLID_PRECISION" in capsys.readouterr().out
    
    def test_strict_lists_each_problem(self, capsys):
        code = main(["area", "rectangle", "-3", "-4", "--strict"])
        
        lines = capsys.readouterr().out.splitlines()
        assert code == ExitCode.INVALID_ARGUMENT
        assert lines == [
            "  ✗ 2 invalid dimension(s):",
            "    width must be non-negative, got -3.0",
            "    height must be non-negative, got -4.0",
        ]
    
    def test_precision_word_is_config_error(self, monkeypatch, capsys):
        monkeypatch.setenv("SOLID_PRECISION", "true")
        
        assert main(["area", "rectangle", "3", "4"]) == ExitCode.CONFIG_ERROR
        
        assert "SOLID_PRECISION must be an integer" in capsys.readouterr().out
    
    def test_total(self, capsys):
        code = main(["--precision", "2", "total", "rectangle:3,4", "rectangle:1,1", "base"])
        
        out = capsys.readouterr().out
        assert code == ExitCode.SUCCESS
        assert "Total area of 3 shape(s): 13.00" in out
        assert "rectangle" in out
    
    def test_kinds(self, capsys):
        assert main(["kinds"]) == ExitCode.SUCCESS
        
        out = capsys.readouterr().out
        for kind in ("base", "circle", "rectangle"):
            assert kind in out
    
    def test_custom_registry(self, capsys):
        registry = default_registry()
        
        @registry.shape("square", arity=1)
        def square(side):
            return Rectangle(side, side)
        
        assert main(["area", "square", "5"], registry=registry) == ExitCode.SUCCESS
        
        assert "rectangle area: 25.0000" in capsys.readouterr().out
    
    def test_user_data(self, capsys):
        assert main(["user-data", "alice"]) == ExitCode.SUCCESS
        
        assert "User data: alice" in capsys.readouterr().out
    
    def test_requires_command(self):
        with pytest.raises(SystemExit):
            main([])
