"""Input and output collaborators used by the interpreter for ',' and '.'."""

import sys
from typing import BinaryIO, List, Optional, TextIO, Union


class StreamInput:
    """Reads one byte at a time from a stream (stdin by default).

    Text streams backed by a binary buffer are read through that buffer, so
    bytes that are not valid in the stream's encoding still come through.
    Pure text streams such as io.StringIO yield one character per read.
    """

    def __init__(self, stream: Optional[Union[TextIO, BinaryIO]] = None):
        self.stream = stream

    def read_char(self) -> Optional[int]:
        stream = self.stream if self.stream is not None else sys.stdin
        source = getattr(stream, "buffer", stream)
        data = source.read(1)
        if not data:
            return None
        if isinstance(data, bytes):
            return data[0]
        return ord(data) % 256


class BufferInput:
    """Serves input from an in-memory string or bytes value."""

    def __init__(self, data: Union[str, bytes] = ""):
        if isinstance(data, str):
            data = [ord(c) % 256 for c in data]
        self.data = bytes(data)
        self.index = 0

    def read_char(self) -> Optional[int]:
        if self.index >= len(self.data):
            return None
        value = self.data[self.index]
        self.index += 1
        return value


class StreamOutput:
    """Writes to a text stream (stdout by default), flushing after each character."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _target(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def write_char(self, value: int) -> None:
        target = self._target()
        target.write(chr(value))
        target.flush()

    def write_text(self, text: str) -> None:
        target = self._target()
        target.write(text)
        target.flush()


class BufferOutput:
    """Collects output in memory."""

    def __init__(self):
        self.output: List[str] = []

    def write_char(self, value: int) -> None:
        self.output.append(chr(value))

    def write_text(self, text: str) -> None:
        self.output.append(text)

    def getvalue(self) -> str:
        return ''.join(self.output)
