"""
Gnuplot script sanity checks.

Gnuplot accepts any unambiguous abbreviation of a keyword, so the patterns
below match "set term", "set termin", "set out", "set o" and so on.
Lines are only matched at their start; commented-out lines are ignored.
"""

import re
from pathlib import Path
from typing import Optional

from texfig.exceptions import SourceContractError


class GnuplotPatterns:
    """Regex patterns for the two directives texfig cares about."""

    # set t[erminal] cairolatex ...
    TERMINAL_CAIROLATEX = re.compile(
        r"^[ \t]*set[ \t]+t(?:e(?:r(?:m(?:i(?:n(?:a(?:l)?)?)?)?)?)?)?[ \t]+cairolatex\b",
        re.MULTILINE,
    )

    # set o[utput] ...
    OUTPUT = re.compile(
        r"^[ \t]*set[ \t]+o(?:u(?:t(?:p(?:u(?:t)?)?)?)?)?(?:\s|$)",
        re.MULTILINE,
    )


def find_terminal_line(script: str) -> Optional[str]:
    """Return the first cairolatex terminal line, or None."""
    match = GnuplotPatterns.TERMINAL_CAIROLATEX.search(script)
    return match.group(0) if match else None


def find_output_line(script: str) -> Optional[str]:
    """Return the first full line that sets the output file, or None."""
    match = GnuplotPatterns.OUTPUT.search(script)
    if match is None:
        return None
    end = script.find("\n", match.start())
    return script[match.start() : end if end != -1 else len(script)]


def check_gnuplot_script(script: str, source_path: Path) -> None:
    """
    Validate a gnuplot script before running it.

    texfig writes its own `set output` line in front of the script, so the
    script must select the cairolatex terminal and must not set an output.

    Raises:
        SourceContractError: If either condition is violated
    """
    if find_terminal_line(script) is None:
        raise SourceContractError(
            "script does not select the cairolatex terminal "
            "(expected a line such as 'set terminal cairolatex pdf')",
            source_path,
        )

    output_line = find_output_line(script)
    if output_line is not None:
        raise SourceContractError(
            "script must not set an output file; texfig sets it", source_path, line=output_line
        )


def output_directive(fragment_name: str) -> str:
    """The `set output` line texfig puts in front of the user script."""
    escaped = fragment_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'set output "{escaped}"\n'
