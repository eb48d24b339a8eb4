import io

from falcosink.outputs import Message, OutputConfig
from falcosink.outputs_stdout import StdoutOutput


class _FlushCounting(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_writes_to_sys_stdout(capsys):
    out = StdoutOutput(OutputConfig("stdout"))
    out.output(Message(msg="hello"))
    out.cleanup()
    assert capsys.readouterr().out == "hello\n"


def test_writes_to_given_stream():
    stream = io.StringIO()
    out = StdoutOutput(OutputConfig("stdout"), stream=stream)
    out.output(Message(msg="a"))
    out.output(Message(msg="b"))
    assert stream.getvalue() == "a\nb\n"


def test_unbuffered_flushes_each_message():
    stream = _FlushCounting()
    out = StdoutOutput(OutputConfig("stdout"), False, stream=stream)
    out.output(Message(msg="x"))
    out.output(Message(msg="y"))
    assert stream.flushes == 2


def test_buffered_flushes_only_on_cleanup():
    stream = _FlushCounting()
    out = StdoutOutput(OutputConfig("stdout"), True, stream=stream)
    out.output(Message(msg="x"))
    assert stream.flushes == 0
    out.cleanup()
    assert stream.flushes == 1