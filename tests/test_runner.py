import io
import os

import pytest

from pipex.args import PipelineSpec, PipexError, PATH_ERROR
from pipex.heredoc import collect_here_doc
from pipex.runner import INFILE_OPEN_ERROR, run_pipeline


def _env():
    return dict(os.environ)


def _spec(tmp_path, commands, infile=None, limiter=None, env=None):
    return PipelineSpec(
        commands=tuple(tuple(cmd.split()) for cmd in commands),
        outfile=str(tmp_path / "out.txt"),
        infile=infile,
        limiter=limiter,
        env=_env() if env is None else env,
    )


def _write_infile(tmp_path, text):
    path = tmp_path / "in.txt"
    path.write_text(text)
    return str(path)


def test_two_cats_copy_infile(tmp_path):
    text = "first line\nsecond line\n"
    spec = _spec(tmp_path, ["cat", "cat"], infile=_write_infile(tmp_path, text))
    codes = run_pipeline(spec)
    assert codes == [0, 0]
    assert (tmp_path / "out.txt").read_text() == text


def test_three_stage_pipeline_sorts(tmp_path):
    lines = ["pear\n", "apple\n", "fig\n"]
    spec = _spec(
        tmp_path, ["cat", "sort", "cat"], infile=_write_infile(tmp_path, "".join(lines))
    )
    codes = run_pipeline(spec)
    assert len(codes) == 3
    assert all(code == 0 for code in codes)
    assert (tmp_path / "out.txt").read_text() == "".join(sorted(lines))


def test_outfile_is_truncated_without_here_doc(tmp_path):
    (tmp_path / "out.txt").write_text("old contents that must vanish\n")
    spec = _spec(tmp_path, ["cat", "cat"], infile=_write_infile(tmp_path, "new\n"))
    run_pipeline(spec)
    assert (tmp_path / "out.txt").read_text() == "new\n"


def test_here_doc_appends_collected_text(tmp_path):
    (tmp_path / "out.txt").write_text("start\n")
    feed = "one\ntwo\nEOF\nleft over\n"
    spec = _spec(tmp_path, ["cat", "cat"], limiter="EOF")
    codes = run_pipeline(spec, io.StringIO(feed))
    assert codes == [0, 0]
    expected = "start\n" + collect_here_doc(io.StringIO(feed), "EOF")
    assert (tmp_path / "out.txt").read_text() == expected


def test_missing_command_is_reported_and_rest_runs(tmp_path, capsys):
    spec = _spec(
        tmp_path,
        ["no-such-command-pipex-test", "cat"],
        infile=_write_infile(tmp_path, "data\n"),
    )
    codes = run_pipeline(spec)
    assert codes[0] == 1
    assert codes[1] == 0
    assert "no-such-command-pipex-test" in capsys.readouterr().err
    assert (tmp_path / "out.txt").read_text() == ""


def test_exit_status_of_last_stage_is_returned(tmp_path):
    spec = _spec(tmp_path, ["cat", "false"], infile=_write_infile(tmp_path, "x\n"))
    codes = run_pipeline(spec)
    assert codes == [0, 1]


def test_missing_infile_raises(tmp_path):
    spec = _spec(tmp_path, ["cat", "cat"], infile=str(tmp_path / "absent.txt"))
    with pytest.raises(PipexError) as info:
        run_pipeline(spec)
    assert info.value.message == INFILE_OPEN_ERROR


def test_environment_without_path_raises(tmp_path):
    env = {key: value for key, value in _env().items() if key != "PATH"}
    spec = _spec(tmp_path, ["cat", "cat"], infile=_write_infile(tmp_path, "x\n"), env=env)
    with pytest.raises(PipexError) as info:
        run_pipeline(spec)
    assert info.value.message == PATH_ERROR