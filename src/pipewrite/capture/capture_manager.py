"""
Capture Manager for copying standard input into a file.

This module reads the whole of an input stream into memory, writes it to the
target path (creating or truncating the file) and reports the resulting size.
Each step raises a CaptureError subclass on failure; reporting is left to the
caller.
"""

import logging
from pathlib import Path
from typing import IO, Optional, Union

from pipewrite.capture.exceptions import InputReadError, OutputWriteError
from pipewrite.capture.schemas import CaptureResult

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class CaptureManager:
    """
    Read-all, write-all copier from a text stream to a file.

    No retries and no rollback: if a write fails part way, whatever reached
    the disk stays there.
    """

    @staticmethod
    def read_input(stream: Optional[IO], encoding: str = DEFAULT_ENCODING) -> str:
        """
        Read the entire stream as text.

        Streams backed by a binary buffer (such as sys.stdin) are read as raw
        bytes and decoded strictly, so invalid input is rejected regardless of
        the interpreter's locale error handler.

        Raises:
            InputReadError: if reading or decoding fails
        """
        if stream is None:
            # sys.stdin is None when the process was started with fd 0 closed
            raise InputReadError(OSError("standard input is not available"))

        raw = getattr(stream, "buffer", None)
        try:
            if raw is None:
                text = stream.read()
            else:
                text = raw.read().decode(encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(e) from e

        logger.debug("Read %d characters from input", len(text))
        return text

    @staticmethod
    def write_output(
        path: Union[str, Path], text: str, encoding: str = DEFAULT_ENCODING
    ) -> CaptureResult:
        """
        Write text to path, replacing any existing content, and measure it.

        Newlines are written untranslated so the file holds exactly what was read.

        Raises:
            OutputWriteError: if the file cannot be opened, written or stat'ed
        """
        target = Path(path)
        try:
            with target.open("w", encoding=encoding, newline="") as f:
                f.write(text)
            byte_count = target.stat().st_size
        except (OSError, UnicodeEncodeError) as e:
            raise OutputWriteError(e) from e

        logger.info("Wrote %d bytes to %s", byte_count, target)
        return CaptureResult(path=str(path), byte_count=byte_count)

    @classmethod
    def capture(
        cls, path: Union[str, Path], stream: IO, encoding: str = DEFAULT_ENCODING
    ) -> CaptureResult:
        """Read all of stream, then write it to path. The file is untouched if the read fails."""
        text = cls.read_input(stream, encoding)
        return cls.write_output(path, text, encoding)
