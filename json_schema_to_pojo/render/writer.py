"""
Atomic writer for generated Java sources.

A source file is replaced only once its new content is complete and looks
like a Java type declaration.
"""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path

from ..errors import GenerationError

logger = logging.getLogger(__name__)

_TYPE_DECLARATION = re.compile(r"^(public )?(final )?(abstract )?(class|enum|interface) \w+", re.MULTILINE)
_LITERALS_AND_COMMENTS = re.compile(r"""/\*.*?\*/|//[^\n]*|"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'""", re.DOTALL)


class AtomicWriter:
    """
    Writes through a temporary sibling file renamed over the target.

    Args:
        validate: Check rendered sources before they replace the target
    """

    def __init__(self, validate: bool = True):
        self.validate = validate

    def write(self, path: Path, content: str) -> bool:
        """
        Write ``content`` to ``path`` unless it already holds exactly that.

        Returns:
            True when the file was (re)written

        Raises:
            GenerationError: If validation rejects the content
            OSError: If file operations fail
        """
        if self.validate:
            validate_java(content, path)
        if path.is_file() and path.read_text(encoding="utf-8") == content:
            logger.debug("Unchanged %s", path)
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True)
        temp_path = Path(temp_name)
        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise
        return True


def validate_java(content: str, path: Path | None = None) -> None:
    """Structural sanity checks on a rendered source file."""
    where = f" for {path}" if path is not None else ""
    if not _TYPE_DECLARATION.search(content):
        raise GenerationError(f"Rendered source{where} has no type declaration")
    code = _LITERALS_AND_COMMENTS.sub(" ", content)
    opened = code.count("{")
    closed = code.count("}")
    if opened != closed:
        raise GenerationError(f"Rendered source{where} has unbalanced braces: {opened} open, {closed} close")
