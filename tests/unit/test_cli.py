"""Unit tests for the command line wrapper (cli.py, ip/cli.py)"""
import pytest
from click.testing import CliRunner

from ipcalc.cli import main
from ipcalc.config import CalcConfig, set_config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.unit
class TestOverlapCommand:

    def test_overlapping_networks(self, runner):
        result = runner.invoke(main, ["ip", "overlap", "10.10.20.0/21", "10.10.20.0/24"])
        assert result.exit_code == 0
        assert "overlap" in result.output
        assert "10.10.20.0/24" in result.output

    def test_disjoint_networks(self, runner):
        result = runner.invoke(main, ["ip", "overlap", "10.0.0.0/24", "10.0.1.0/24"])
        assert result.exit_code == 0
        assert "do not overlap" in result.output

    def test_address_mask_form(self, runner):
        result = runner.invoke(main, ["ip", "overlap", "10.0.0.0 255.0.0.0", "10.1.0.0/16"])
        assert result.exit_code == 0
        assert "10.1.0.0/16" in result.output

    def test_malformed_network(self, runner):
        result = runner.invoke(main, ["ip", "overlap", "10.0.0/24", "10.0.1.0/24"])
        assert result.exit_code == 1
        assert "Error:" in result.output


@pytest.mark.unit
class TestSummarizeCommand:

    def test_summarize(self, runner):
        result = runner.invoke(main, ["ip", "summarize", "0.0.0.1", "0.0.0.3"])
        assert result.exit_code == 0
        assert "Blocks: 2" in result.output
        assert "0.0.0.1/32" in result.output
        assert "0.0.0.2/31" in result.output

    def test_reversed_range(self, runner):
        result = runner.invoke(main, ["ip", "summarize", "0.0.0.5", "0.0.0.3"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_output_truncated_to_max_display(self, runner):
        set_config(CalcConfig(max_display=2))
        result = runner.invoke(main, ["ip", "summarize", "0.0.0.1", "0.0.0.6"])
        assert result.exit_code == 0
        assert "0.0.0.2/31" in result.output
        assert "0.0.0.4/31" not in result.output
        assert "and 2 more" in result.output


@pytest.mark.unit
class TestCalcCommand:

    def test_calc(self, runner):
        result = runner.invoke(main, ["ip", "calc", "10.244.170.8/28"])
        assert result.exit_code == 0
        assert "10.244.170.0" in result.output
        assert "10.244.170.15" in result.output
        assert "255.255.255.240" in result.output
        assert "/28" in result.output

    def test_calc_discontiguous(self, runner):
        result = runner.invoke(main, ["ip", "calc", "10.0.0.0 255.0.255.0"])
        assert result.exit_code == 0
        assert "Discontiguous mask" in result.output
        assert "10.255.0.255" in result.output


@pytest.mark.unit
class TestContainsCommand:

    def test_contained(self, runner):
        result = runner.invoke(main, ["ip", "contains", "10.244.170.0/24", "10.244.170.8/28"])
        assert result.exit_code == 0
        assert "is within" in result.output

    def test_not_contained(self, runner):
        result = runner.invoke(main, ["ip", "contains", "10.244.170.8/28", "10.244.170.0/24"])
        assert result.exit_code == 0
        assert "is not within" in result.output


@pytest.mark.unit
class TestMainGroup:

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "ipcalc" in result.output

    def test_log_file_option(self, runner, tmp_path):
        log_file = tmp_path / "ipcalc.log"
        result = runner.invoke(
            main, ["--debug", "--log-file", str(log_file), "ip", "summarize", "0.0.0.1", "0.0.0.3"]
        )
        assert result.exit_code == 0
        assert "Summarizing 1 to 3" in log_file.read_text()
