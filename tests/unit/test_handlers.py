"""Unit tests for the figure command helpers."""

import shutil

import pytest

from texfig.config import Settings
from texfig.contexts.figures.handlers import GnuplotCommand, finalize
from texfig.contexts.rendering import ProcessRunner, TempFileSet
from texfig.exceptions import TexfigError


@pytest.mark.unit
def test_finalize_moves_pdf(tmp_path):
    pdf_file = tmp_path / "texfig-tmp-abc.pdf"
    pdf_file.write_text("%PDF")

    assert finalize(pdf_file, tmp_path / "figure.pdf") == tmp_path / "figure.pdf"
    assert (tmp_path / "figure.pdf").read_text() == "%PDF"
    assert not pdf_file.exists()


@pytest.mark.unit
def test_finalize_rejects_directory_output(tmp_path):
    pdf_file = tmp_path / "texfig-tmp-abc.pdf"
    pdf_file.write_text("%PDF")
    (tmp_path / "figures").mkdir()

    with pytest.raises(TexfigError, match="is a directory"):
        finalize(pdf_file, tmp_path / "figures")

    assert pdf_file.exists()


@pytest.mark.unit
def test_finalize_reports_move_failure(tmp_path, monkeypatch):
    pdf_file = tmp_path / "texfig-tmp-abc.pdf"
    pdf_file.write_text("%PDF")

    def _fail(source, destination):
        raise OSError("No space left on device")

    monkeypatch.setattr(shutil, "move", _fail)

    with pytest.raises(TexfigError, match="No space left on device"):
        finalize(pdf_file, tmp_path / "figure.pdf")


@pytest.mark.unit
def test_unreadable_gnuplot_script(tmp_path):
    """Read errors surface as TexfigError before gnuplot is started."""
    runner = ProcessRunner(Settings(gnuplot="gnuplot-that-must-not-run"), cwd=tmp_path)

    with TempFileSet("texfig-tmp-", tmp_path) as temps:
        with pytest.raises(TexfigError, match="Cannot read"):
            GnuplotCommand().prepare_content(tmp_path / "missing.gp", temps, runner)

    assert list(tmp_path.iterdir()) == []
