"""Fixtures for console_output unit tests."""

import io
import os
from collections.abc import Iterator
from pathlib import Path
from typing import IO

import pytest

from console_output.base import Output
from console_output.verbosity import Verbosity


class RecordingStream(io.BytesIO):
    """BytesIO that records each write call and counts flushes."""

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[bytes] = []
        self.flushes = 0

    def write(self, data) -> int:
        self.chunks.append(bytes(data))
        return super().write(data)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class ShortWriteStream(io.RawIOBase):
    """Raw stream that accepts only part of every write."""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        return max(len(data) - 1, 0)


class ListOutput(Output):
    """Output that collects lines in memory."""

    def __init__(self, verbosity=Verbosity.NORMAL, decorated=False, formatter=None):
        super().__init__(verbosity, decorated, formatter)
        self.lines: list[str] = []

    def do_write(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture
def recording_stream() -> RecordingStream:
    """In-memory stream recording write calls.

    Returns
    -------
    RecordingStream
        Fresh recording stream
    """
    return RecordingStream()


@pytest.fixture
def log_file(tmp_path: Path) -> Iterator[IO[bytes]]:
    """Binary file opened for appending, i.e. redirected output.

    Parameters
    ----------
    tmp_path : Path
        Pytest tmp_path fixture

    Yields
    ------
    IO[bytes]
        Open file handle
    """
    with (tmp_path / "output.log").open("ab") as f:
        yield f


@pytest.fixture
def pipe() -> Iterator[tuple[IO[bytes], IO[bytes]]]:
    """OS pipe as a (reader, writer) pair of unbuffered binary files.

    Yields
    ------
    tuple[IO[bytes], IO[bytes]]
        Read end and write end
    """
    read_fd, write_fd = os.pipe()
    reader = open(read_fd, "rb", buffering=0)  # noqa: SIM115
    writer = open(write_fd, "wb", buffering=0)  # noqa: SIM115
    try:
        yield reader, writer
    finally:
        for end in (reader, writer):
            if not end.closed:
                end.close()


@pytest.fixture
def terminal() -> Iterator[IO[bytes]]:
    """Pseudo-terminal slave opened for writing.

    Yields
    ------
    IO[bytes]
        Write handle on the terminal side of a pty
    """
    if not hasattr(os, "openpty"):
        pytest.skip("pseudo-terminals not available on this platform")
    master_fd, slave_fd = os.openpty()
    slave = open(slave_fd, "wb", buffering=0)  # noqa: SIM115
    try:
        yield slave
    finally:
        slave.close()
        os.close(master_fd)


@pytest.fixture
def short_write_stream() -> ShortWriteStream:
    """Raw stream that reports short writes.

    Returns
    -------
    ShortWriteStream
        Fresh short-writing stream
    """
    return ShortWriteStream()


@pytest.fixture
def list_output() -> type[ListOutput]:
    """Concrete in-memory Output class.

    Returns
    -------
    type[ListOutput]
        Class to instantiate with the Output constructor arguments
    """
    return ListOutput
