"""End-to-end tests of the command line interface."""

from typer.testing import CliRunner

from polyshaper import __version__
from polyshaper.cli.app import app

runner = CliRunner()

SQUARE = "0,0 1,0 1,1 0,1"
FAR_SQUARE = "3,0 4,0 4,1 3,1"
STRIP = "0,0 10,0 10,2 0,2"


class TestCli:
    """Invoke each command and check its console report."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_rectangle(self):
        result = runner.invoke(app, ["rectangle", "--area", "12", "--ratio", "3"])
        assert result.exit_code == 0
        assert "12.0000" in result.output
        assert "CCW" in result.output

    def test_shape(self):
        result = runner.invoke(app, ["shape", "L", "--size-x", "10", "--size-y", "10", "-w", "2"])
        assert result.exit_code == 0
        assert "36.0000" in result.output

    def test_shape_lowercase(self):
        result = runner.invoke(app, ["shape", "h"])
        assert result.exit_code == 0
        assert "52.0000" in result.output

    def test_unknown_shape(self):
        result = runner.invoke(app, ["shape", "Q"])
        assert result.exit_code == 1
        assert "Unknown shape" in result.output

    def test_invalid_shape_parameters(self):
        result = runner.invoke(app, ["shape", "C", "-w", "4"])
        assert result.exit_code == 1
        assert "Invalid parameters" in result.output

    def test_combine(self):
        result = runner.invoke(app, ["combine", "-s", SQUARE, "-c", FAR_SQUARE, "-m", "union"])
        assert result.exit_code == 0
        assert "2 fragments" in result.output

    def test_combine_empty_result(self):
        result = runner.invoke(
            app, ["combine", "-s", SQUARE, "-c", FAR_SQUARE, "-m", "intersection"]
        )
        assert result.exit_code == 0
        assert "no geometry" in result.output

    def test_malformed_polygon(self):
        result = runner.invoke(app, ["combine", "-s", "0,0 1", "-c", SQUARE])
        assert result.exit_code == 2

    def test_self_intersecting_polygon(self):
        result = runner.invoke(app, ["combine", "-s", "0,0 1,1 1,0 0,1", "-c", SQUARE])
        assert result.exit_code == 2

    def test_merge(self):
        result = runner.invoke(app, ["merge", "-p", SQUARE, "-p", "1,0 2,0 2,1 1,1"])
        assert result.exit_code == 0
        assert "1 fragments" in result.output
        assert "2.0000" in result.output

    def test_difference_largest(self):
        result = runner.invoke(app, ["difference", STRIP, "-x", "3,-1 4,-1 4,3 3,3"])
        assert result.exit_code == 0
        assert "12.0000" in result.output
        assert "6.0000" not in result.output

    def test_difference_all(self):
        result = runner.invoke(app, ["difference", STRIP, "-x", "3,-1 4,-1 4,3 3,3", "--all"])
        assert result.exit_code == 0
        assert "12.0000" in result.output
        assert "6.0000" in result.output

    def test_verbose_lists_vertices(self):
        result = runner.invoke(app, ["-v", "rectangle", "--area", "4"])
        assert result.exit_code == 0
        assert "(2, 2)" in result.output

    def test_quiet(self):
        result = runner.invoke(app, ["-q", "rectangle", "--area", "4"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "polyshaper.log"
        result = runner.invoke(app, ["--log-file", str(log_file), "rectangle", "--area", "4"])
        assert result.exit_code == 0
        assert "Operation complete" in log_file.read_text(encoding="utf-8")

    def test_seeded_ratio_replays(self):
        args = ["--seed", "11", "rectangle", "--area", "4", "--ratio", "0.5", "--max-ratio", "2"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == 0
        assert "Drew ratio" in first.output
        assert first.output == second.output

    def test_inverted_ratio_range(self):
        result = runner.invoke(app, ["rectangle", "--area", "4", "--ratio", "3", "--max-ratio", "1"])
        assert result.exit_code == 2
