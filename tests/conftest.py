"""Shared fixtures: a scratch working directory and stand-ins for the external tools."""

import shlex
import sys
from pathlib import Path

import pytest
from loguru import logger

from texfig.config import Settings

FAKE_LATEX = r'''
import re
import sys
from pathlib import Path

tex_file = Path(sys.argv[-1])
text = tex_file.read_text()

for name in re.findall(r"\\input\{([^}]*)\}", text):
    target = Path(name)
    if not target.exists():
        print(f"! LaTeX Error: File `{name}' not found.")
        sys.exit(1)
    if "\\fakeerror" in target.read_text():
        print("! Undefined control sequence.")
        sys.exit(1)

stem = tex_file.with_suffix("")
Path(f"{stem}.aux").write_text("")
Path(f"{stem}.log").write_text("fake log\n")
Path(f"{stem}.pdf").write_text("%PDF-1.4 fake\n" + text)
'''

FAKE_GNUPLOT = r'''
import re
import sys
from pathlib import Path

raw = sys.stdin.buffer.read()
script = raw.decode("latin-1")
if "fakeerror" in script:
    print("gnuplot: undefined variable: fakeerror", file=sys.stderr)
    sys.exit(1)

output = re.match(r'set output "([^"]*)"', script).group(1)
stem = Path(output).with_suffix("")
Path(f"{stem}.stdin").write_bytes(raw)
Path(f"{stem}.pdf").write_text("%PDF-1.4 graphic\n")
Path(output).write_text("\\begin{picture}(0,0)\\includegraphics{%s}\\end{picture}\n" % stem.name)
'''

FAKE_PDFCROP = r'''
import sys
from pathlib import Path

Path(sys.argv[2]).write_text(Path(sys.argv[1]).read_text() + "%cropped\n")
'''

SINE_SCRIPT = """set terminal cairolatex pdf size 8cm,5cm
set xlabel '$x$'
plot sin(x) title '$\\sin x$'
"""

TIKZ_SOURCE = r"""\begin{tikzpicture}
  \draw (0,0) -- (1,1);
\end{tikzpicture}
"""


def _python_command(script: Path) -> str:
    return f"{shlex.quote(sys.executable)} {shlex.quote(str(script))}"


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop handlers bound to streams captured by a finished test."""
    yield
    logger.remove()


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Empty working directory the test runs in."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def fake_settings(tmp_path) -> Settings:
    """Settings pointing at Python stand-ins for pdflatex, gnuplot and pdfcrop."""
    tools = tmp_path / "tools"
    tools.mkdir()
    for name, source in [
        ("fake_latex.py", FAKE_LATEX),
        ("fake_gnuplot.py", FAKE_GNUPLOT),
        ("fake_pdfcrop.py", FAKE_PDFCROP),
    ]:
        (tools / name).write_text(source)

    return Settings(
        latex=_python_command(tools / "fake_latex.py"),
        gnuplot=_python_command(tools / "fake_gnuplot.py"),
        pdfcrop=_python_command(tools / "fake_pdfcrop.py"),
        tmp_prefix="texfig-tmp-",
        font_size="10pt",
    )


@pytest.fixture
def fake_env(fake_settings, monkeypatch) -> Settings:
    """Expose the stand-in tools through TEXFIG_* variables, for CLI tests."""
    monkeypatch.setenv("TEXFIG_LATEX", fake_settings.latex)
    monkeypatch.setenv("TEXFIG_GNUPLOT", fake_settings.gnuplot)
    monkeypatch.setenv("TEXFIG_PDFCROP", fake_settings.pdfcrop)
    monkeypatch.setenv("TEXFIG_TMP_PREFIX", fake_settings.tmp_prefix)
    monkeypatch.delenv("TEXFIG_FONT_SIZE", raising=False)
    monkeypatch.delenv("TEXFIG_LOG_DIR", raising=False)
    return fake_settings


@pytest.fixture
def sine_script(workdir) -> Path:
    path = workdir / "sine.gp"
    path.write_text(SINE_SCRIPT)
    return path


@pytest.fixture
def tikz_source(workdir) -> Path:
    path = workdir / "diagram.tikz"
    path.write_text(TIKZ_SOURCE)
    return path


@pytest.fixture
def leftover_temps():
    """Callable listing the prefixed files left in a directory."""

    def _leftover(directory: Path, prefix: str = "texfig-tmp-"):
        return sorted(path.name for path in directory.iterdir() if path.name.startswith(prefix))

    return _leftover
