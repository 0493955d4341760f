"""Integration tests for the texfig command line."""

import pytest
from typer.testing import CliRunner

from texfig import __version__
from texfig.cli import app

runner = CliRunner()


@pytest.mark.integration
def test_no_arguments_prints_usage(workdir, fake_env):
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Usage: texfig" in result.output
    for name in ["gnuplot", "tikz", "latex", "clean"]:
        assert name in result.output


@pytest.mark.integration
def test_unknown_command(workdir, fake_env):
    result = runner.invoke(app, ["plot", "a.gp", "a.pdf"])

    assert result.exit_code == 1
    assert "Unknown command: plot" in result.output
    assert "gnuplot\ntikz\nlatex\nclean" in result.output


@pytest.mark.integration
def test_wrong_arity(workdir, fake_env):
    result = runner.invoke(app, ["gnuplot", "sine.gp"])

    assert result.exit_code == 1
    assert "Usage: texfig gnuplot <script.gp> <output.pdf>" in result.output


@pytest.mark.integration
def test_tikz_end_to_end(workdir, fake_env, tikz_source, leftover_temps):
    result = runner.invoke(app, ["tikz", "diagram.tikz", "diagram.pdf"])

    assert result.exit_code == 0, result.output
    assert (workdir / "diagram.pdf").exists()
    assert leftover_temps(workdir) == []


@pytest.mark.integration
def test_gnuplot_with_crop_flag(workdir, fake_env, sine_script, leftover_temps):
    result = runner.invoke(app, ["gnuplot", "sine.gp", "sine.pdf", "--crop"])

    assert result.exit_code == 0, result.output
    assert (workdir / "sine.pdf").read_text().endswith("%cropped\n")
    assert leftover_temps(workdir) == []


@pytest.mark.integration
def test_rejected_script_then_clean(workdir, fake_env, leftover_temps):
    (workdir / "bad.gp").write_text("set terminal cairolatex\nset output 'bad.tex'\nplot x\n")
    (workdir / "texfig-tmp-stale.tex").write_text("")

    result = runner.invoke(app, ["gnuplot", "bad.gp", "bad.pdf"])
    assert result.exit_code == 1
    assert not (workdir / "bad.pdf").exists()

    assert runner.invoke(app, ["clean"]).exit_code == 0
    assert leftover_temps(workdir) == []

    second = runner.invoke(app, ["clean"])
    assert second.exit_code == 0
    assert "Nothing to clean" in second.output


@pytest.mark.integration
def test_prefix_from_environment(workdir, fake_env, tikz_source, monkeypatch, leftover_temps):
    monkeypatch.setenv("TEXFIG_TMP_PREFIX", "fig-scratch-")

    result = runner.invoke(app, ["tikz", "diagram.tikz", "diagram.pdf", "--keep-temps"])

    assert result.exit_code == 0, result.output
    assert leftover_temps(workdir, "fig-scratch-")
    assert leftover_temps(workdir, "texfig-tmp-") == []


@pytest.mark.integration
def test_invalid_configuration(workdir, fake_env, monkeypatch):
    monkeypatch.setenv("TEXFIG_TMP_PREFIX", "")

    result = runner.invoke(app, ["clean"])

    assert result.exit_code == 1
    assert "prefix must not be empty" in result.output


@pytest.mark.integration
def test_log_file(workdir, fake_env, tikz_source, monkeypatch, tmp_path):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("TEXFIG_LOG_DIR", str(log_dir))

    result = runner.invoke(app, ["tikz", "diagram.tikz", "diagram.pdf"])

    assert result.exit_code == 0, result.output
    log_text = (log_dir / "texfig.log").read_text()
    assert "Typesetter:" in log_text
    assert "[figure] tikz: wrote diagram.pdf" in log_text


@pytest.mark.integration
def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
