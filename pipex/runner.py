"""Running a pipeline of commands between an input source and an output file."""

from __future__ import annotations

import subprocess
import sys
from contextlib import ExitStack
from typing import IO, Optional, TextIO, Union

from pipex.args import OUTFILE_ERROR, PipelineSpec, PipexError, find_command, search_paths
from pipex.heredoc import collect_here_doc

INFILE_OPEN_ERROR = "Error: can't open infile"
EXEC_ERROR = "Error executing command"

_FAILURE = 1

_Input = Union[int, IO[bytes], None]


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _open_outfile(spec: PipelineSpec) -> IO[bytes]:
    try:
        return open(spec.outfile, "ab" if spec.here_doc else "wb")
    except OSError as exc:
        raise PipexError(OUTFILE_ERROR) from exc


def _open_infile(spec: PipelineSpec) -> IO[bytes]:
    if spec.infile is None:
        raise PipexError(INFILE_OPEN_ERROR)
    try:
        return open(spec.infile, "rb")
    except OSError as exc:
        raise PipexError(INFILE_OPEN_ERROR) from exc


def _spawn(
    words: tuple[str, ...], spec: PipelineSpec, stdin: _Input, stdout: _Input
) -> Optional[subprocess.Popen]:
    """Start one stage, or report why it could not start and return None."""
    try:
        path = find_command(words[0], spec.env)
    except PipexError as exc:
        _report(exc.message)
        return None
    try:
        return subprocess.Popen(
            list(words),
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=dict(spec.env),
        )
    except OSError as exc:
        _report(f"{EXEC_ERROR}: {exc}")
        return None


def run_pipeline(spec: PipelineSpec, stdin: Optional[TextIO] = None) -> list[int]:
    """Run the commands of ``spec`` connected by pipes.

    The first command reads the input file, or the here-document collected
    from ``stdin`` (standard input by default); the last writes the output
    file, appending with a here-document and truncating otherwise. A stage
    whose command cannot be found or started is reported on standard error
    and the rest of the pipeline still runs, its successor reading nothing.
    Returns the exit status of every stage in order, failed stages giving 1.
    """
    search_paths(spec.env)
    processes: list[Optional[subprocess.Popen]] = []
    here_doc_data: Optional[bytes] = None

    with ExitStack() as stack:
        if spec.here_doc:
            source = sys.stdin if stdin is None else stdin
            here_doc_data = collect_here_doc(source, spec.limiter or "").encode()
            upstream: _Input = subprocess.PIPE
        else:
            upstream = stack.enter_context(_open_infile(spec))
        outfile = stack.enter_context(_open_outfile(spec))

        last_index = len(spec.commands) - 1
        for index, words in enumerate(spec.commands):
            is_last = index == last_index
            stdout: _Input = outfile if is_last else subprocess.PIPE
            process = _spawn(words, spec, upstream, stdout)
            processes.append(process)
            if index > 0 and upstream not in (subprocess.PIPE, subprocess.DEVNULL):
                # The parent's copy of the previous pipe end is no longer needed.
                upstream.close()  # type: ignore[union-attr]
            if process is None:
                upstream = subprocess.DEVNULL
            else:
                upstream = process.stdout

        if here_doc_data is not None and processes and processes[0] is not None:
            feed = processes[0].stdin
            if feed is not None:
                try:
                    feed.write(here_doc_data)
                except BrokenPipeError:
                    pass
                finally:
                    try:
                        feed.close()
                    except BrokenPipeError:
                        pass

        return [_FAILURE if process is None else process.wait() for process in processes]