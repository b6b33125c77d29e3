"""Reporter emitting GitHub Actions workflow commands.

Each issue becomes one line on stdout, e.g.:

    ::warning file=src/Foo.kt,line=12::Detekt: Long line, rule: MaxLineLength

which the Actions runner turns into an inline annotation on the PR diff.
"""

from typing import Callable

import click

LEVELS = ("notice", "warning", "error")


def escape_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(text: str) -> str:
    return escape_data(text).replace(":", "%3A").replace(",", "%2C")


class GitHubReporter:
    """Print one ``::<level> file=..,line=..::message`` command per issue."""

    def __init__(self, level: str = "warning", echo: Callable[[str], None] = click.echo) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown annotation level '{level}'. Expected one of: {', '.join(LEVELS)}")
        self.level = level
        self._echo = echo

    def __call__(self, message: str, file_path: str, line: int) -> None:
        props = [f"file={escape_property(file_path)}"]
        # line 0 means "unknown"; without it GitHub annotates the whole file
        if line > 0:
            props.append(f"line={line}")
        self._echo(f"::{self.level} {','.join(props)}::{escape_data(message)}")
