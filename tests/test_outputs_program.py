import shlex

from falcosink.outputs import Message, OutputConfig
from falcosink.outputs_program import ProgramOutput


def _output(path, keep_alive=None, buffered=True):
    options = {"program": "cat >> " + shlex.quote(str(path))}
    if keep_alive is not None:
        options["keep_alive"] = keep_alive
    return ProgramOutput(OutputConfig("program", options), buffered)


def test_each_message_runs_program(tmp_path):
    path = tmp_path / "out.txt"
    out = _output(path)
    out.output(Message(msg="alpha"))
    assert not out.is_open
    out.output(Message(msg="beta"))
    assert path.read_text() == "alpha\nbeta\n"


def test_keep_alive_keeps_program_running(tmp_path):
    path = tmp_path / "out.txt"
    out = _output(path, keep_alive="true", buffered=False)
    out.output(Message(msg="one"))
    out.output(Message(msg="two"))
    assert out.is_open
    out.cleanup()
    assert not out.is_open
    assert path.read_text() == "one\ntwo\n"


def test_reopen_starts_program(tmp_path):
    path = tmp_path / "out.txt"
    out = _output(path, keep_alive="true")
    out.reopen()
    assert out.is_open
    out.output(Message(msg="after reopen"))
    out.cleanup()
    assert path.read_text() == "after reopen\n"


def test_context_manager_closes_program(tmp_path):
    path = tmp_path / "out.txt"
    with _output(path, keep_alive="true") as out:
        out.output(Message(msg="ctx"))
    assert not out.is_open
    assert path.read_text() == "ctx\n"