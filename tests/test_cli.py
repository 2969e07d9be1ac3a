import io
import sys

from pipex.args import ARGC_ERROR, INFILE_ERROR, VOID_ERROR
from pipex.cli import EXIT_FAILURE, EXIT_SUCCESS, main
from pipex.heredoc import collect_here_doc


def test_runs_pipeline_into_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("alpha\nbeta\n")
    status = main([str(infile), "cat", "cat", str(outfile)])
    assert status == EXIT_SUCCESS
    assert outfile.read_text() == "alpha\nbeta\n"


def test_too_few_arguments(capsys):
    status = main(["only", "three", "args"])
    assert status == EXIT_FAILURE
    assert ARGC_ERROR in capsys.readouterr().err


def test_here_doc_needs_an_extra_argument(tmp_path, capsys):
    status = main(["here_doc", "END", "cat", str(tmp_path / "out.txt")])
    assert status == EXIT_FAILURE
    assert ARGC_ERROR in capsys.readouterr().err


def test_unreadable_infile(tmp_path, capsys):
    status = main([str(tmp_path / "absent"), "cat", "cat", str(tmp_path / "out.txt")])
    assert status == EXIT_FAILURE
    assert INFILE_ERROR in capsys.readouterr().err


def test_blank_command_in_here_doc(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("END\n"))
    status = main(["here_doc", "END", "   ", "cat", str(tmp_path / "out.txt")])
    assert status == EXIT_FAILURE
    assert VOID_ERROR in capsys.readouterr().err


def test_here_doc_reads_standard_input(tmp_path, monkeypatch):
    feed = "hello\nworld\nEND\nignored\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(feed))
    outfile = tmp_path / "out.txt"
    status = main(["here_doc", "END", "cat", "cat", str(outfile)])
    assert status == EXIT_SUCCESS
    assert outfile.read_text() == collect_here_doc(io.StringIO(feed), "END")


def test_missing_command_still_succeeds(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    status = main([str(infile), "cat", "no-such-command-pipex-cli", str(outfile)])
    assert status == EXIT_SUCCESS
    assert "no-such-command-pipex-cli" in capsys.readouterr().err
    assert outfile.read_text() == ""