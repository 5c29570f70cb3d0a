"""File persistence for documents.

Reads split text into lines and writes replace the destination atomically:
the text goes to a temporary file in the same directory, is flushed to
disk, and is then renamed over the target.
"""

import logging
import os
import re
import tempfile

logger = logging.getLogger(__name__)

_LINE_TERMINATOR = re.compile(r'\r\n|\r|\n')


def split_lines(text: str) -> list[str]:
    """Split text on line terminators, discarding them.

    Recognizes ``\\n``, ``\\r\\n`` and ``\\r``. A trailing terminator does
    not produce an extra empty line.
    """
    lines = _LINE_TERMINATOR.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_lines(filename: str) -> list[str]:
    """Read a document from disk.

    Args:
        filename: Path to the document.

    Returns:
        The document's lines without terminators.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
    """
    with open(filename, 'r', encoding='utf-8', newline='') as f:
        content = f.read()
    logger.debug("Read %d characters from %s", len(content), filename)
    return split_lines(content)


def write_text(filename: str, content: str) -> int:
    """Write ``content`` to ``filename`` atomically.

    Args:
        filename: Destination path.
        content: Text to store.

    Returns:
        Number of bytes written.

    Raises:
        OSError: If the temporary file cannot be written or renamed. The
            destination is left untouched in that case.
    """
    data = content.encode('utf-8')
    dir_name = os.path.dirname(filename) or '.'
    suffix = os.path.splitext(filename)[1]
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='wb', dir=dir_name, suffix=suffix,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(data)
            temp_file.flush()
            os.fsync(temp_file.fileno())  # Ensure data is written to disk

        # Atomic on POSIX; overwrites the target on Windows too
        os.replace(temp_filename, filename)
    except OSError as e:
        logger.warning("Could not save %s: %s", filename, e)
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                pass
        raise

    logger.info("Wrote %d bytes to %s", len(data), filename)
    return len(data)
