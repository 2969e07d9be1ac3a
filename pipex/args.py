"""Validation of the command line and lookup of commands on the search path."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from pipex.libft.text import split

HERE_DOC = "here_doc"

ARGC_ERROR = "Error with the number of arguments"
INFILE_ERROR = "Error: infile not exist or don't have read permision"
OUTFILE_ERROR = "Error: can't create or write in the outfile"
VOID_ERROR = "Error: Command can't be empty or with only spaces"
INVALID_COMMAND_ERROR = "Error: command is empty or invalid"
PATH_ERROR = "Error path not found for commands"
COMMAND_NOT_FOUND_ERROR = "Error: command not found"

_BLANK = frozenset(" \t\n\v\f\r")


class PipexError(Exception):
    """A failure that ends the pipeline with an error message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class PipelineSpec:
    """Everything needed to run a pipeline of commands."""

    commands: tuple[tuple[str, ...], ...]
    outfile: str
    infile: Optional[str] = None
    limiter: Optional[str] = None
    env: Mapping[str, str] = field(default_factory=dict)

    @property
    def here_doc(self) -> bool:
        """True when input comes from a here-document rather than a file."""
        return self.limiter is not None


def is_blank(text: Optional[str]) -> bool:
    """True if ``text`` is None, empty, or made only of whitespace."""
    return text is None or all(char in _BLANK for char in text)


def search_paths(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in the PATH of ``env``."""
    if "PATH" not in env:
        raise PipexError(PATH_ERROR)
    return split(env["PATH"], ":")


def find_command(name: str, env: Mapping[str, str]) -> str:
    """Return the first executable ``<dir>/<name>`` among the PATH directories."""
    for directory in search_paths(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    raise PipexError(f"{COMMAND_NOT_FOUND_ERROR}: {name}")


def _prepare_outfile(path: str, append: bool) -> None:
    try:
        with open(path, "a" if append else "w"):
            pass
    except OSError as exc:
        raise PipexError(OUTFILE_ERROR) from exc


def parse_args(
    argv: Sequence[str], env: Optional[Mapping[str, str]] = None
) -> PipelineSpec:
    """Validate the arguments (without the program name) and build a spec.

    The forms accepted are ``infile cmd1 cmd2 ... outfile`` and
    ``here_doc LIMITER cmd1 cmd2 ... outfile``. The output file is created
    (truncated, or opened for appending with a here-document) as a side effect.
    """
    args = list(argv)
    environment = dict(os.environ if env is None else env)
    here_doc = bool(args) and args[0].startswith(HERE_DOC)
    if len(args) < 4 or (here_doc and len(args) < 5):
        raise PipexError(ARGC_ERROR)

    outfile = args[-1]
    infile: Optional[str] = None
    limiter: Optional[str] = None
    if here_doc:
        limiter = args[1]
        _prepare_outfile(outfile, append=True)
        if is_blank(limiter) or is_blank(args[2]):
            raise PipexError(VOID_ERROR)
        raw_commands = args[2:-1]
    else:
        infile = args[0]
        if not os.access(infile, os.R_OK):
            raise PipexError(INFILE_ERROR)
        _prepare_outfile(outfile, append=False)
        raw_commands = args[1:-1]

    commands = tuple(tuple(split(raw, " ")) for raw in raw_commands)
    if any(not words or is_blank(words[0]) for words in commands):
        raise PipexError(INVALID_COMMAND_ERROR)
    search_paths(environment)
    return PipelineSpec(
        commands=commands,
        outfile=outfile,
        infile=infile,
        limiter=limiter,
        env=environment,
    )