"""
Line reader for lexicon files.

Reads a UTF-8 text file line by line and reports the end of the file,
read failures and overlong lines as distinct statuses, so the loader can
decide what is fatal.
"""

from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from lkchecker import settings
from lkchecker.errors import InvalidFile, InvalidString


class ReadStatus(Enum):
    OK = "ok"
    EOF = "eof"
    READ_ERROR = "read_error"
    LINE_TOO_LONG = "line_too_long"


class LineReader:
    """
    Sequential reader of text lines.

    CR, LF and CR LF are line terminators and are never returned. Empty
    lines are skipped but still counted in line_number. Reading past the
    end keeps returning EOF with an empty line.

    Usage:
        with LineReader(path) as reader:
            status, line = reader.read_line()
    """

    def __init__(self, path: Optional[Union[str, Path]] = None,
                 max_line_length: int = settings.MAX_LINE_LENGTH):
        """
        Open a file for reading.

        Args:
            path: File to read. Falls back to the LK_DICTIONARY environment
                variable when omitted.
            max_line_length: Longest accepted line in bytes.

        Raises:
            InvalidFile: If no path is available or the file cannot be opened.
        """
        if path is None:
            path = settings.DICTIONARY_PATH
        if path is None:
            raise InvalidFile("no file given and LK_DICTIONARY is not set")

        self.path = Path(path)
        self.max_line_length = max_line_length
        self.line_number = 0
        self._breaks = 0
        self._prev = b''
        try:
            self._fh: Optional[BinaryIO] = open(self.path, 'rb')
        except OSError as e:
            raise InvalidFile(f"cannot open {self.path}: {e}") from e

    def __enter__(self) -> 'LineReader':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def _read_byte(self) -> bytes:
        return self._fh.read(1)

    def _next_byte(self) -> bytes:
        byte = self._read_byte()
        # CR LF is one break; a lone CR or LF is one break too
        if byte == b'\r' or (byte == b'\n' and self._prev != b'\r'):
            self._breaks += 1
        self._prev = byte
        return byte

    def read_line(self) -> Tuple[ReadStatus, str]:
        """
        Read the next non-empty line.

        line_number is set to the physical line the returned line starts
        on, counting the empty lines that were skipped.

        Returns:
            (status, line). line is empty unless status is OK.

        Raises:
            InvalidFile: If the reader was closed.
            InvalidString: If the line is not valid UTF-8.
        """
        if self._fh is None:
            raise InvalidFile(f"{self.path} is closed")

        buf = bytearray()
        try:
            while True:
                byte = self._next_byte()
                if not byte:
                    break
                if byte in (b'\r', b'\n'):
                    if buf:
                        break
                    continue
                if not buf:
                    self.line_number = self._breaks + 1
                buf += byte
                if len(buf) > self.max_line_length:
                    self._skip_rest_of_line()
                    return ReadStatus.LINE_TOO_LONG, ''
        except OSError:
            return ReadStatus.READ_ERROR, ''

        if not buf:
            return ReadStatus.EOF, ''

        try:
            return ReadStatus.OK, buf.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidString(f"{self.path}:{self.line_number}: not UTF-8") from e

    def _skip_rest_of_line(self) -> None:
        while True:
            byte = self._next_byte()
            if not byte or byte in (b'\r', b'\n'):
                return
