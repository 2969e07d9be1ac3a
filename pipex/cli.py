"""Command-line entry point: ``pipex infile cmd1 ... cmdN outfile``."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pipex.args import PipexError, parse_args
from pipex.runner import run_pipeline

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the pipeline and return the exit status.

    Accepts ``infile cmd1 cmd2 ... outfile`` or
    ``here_doc LIMITER cmd1 cmd2 ... outfile``. Errors are written to
    standard error and give status 1; the exit statuses of the commands
    themselves do not change the result.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        spec = parse_args(args)
        run_pipeline(spec, sys.stdin)
    except PipexError as exc:
        print(exc.message, file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())