"""
Generated file model — produced by every generation operation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

FileType = Literal["typescript", "markdown", "test", "json", "yaml"]


class GeneratedFile(BaseModel):
    """A file proposed by the generator.

    The generator never writes it; persisting is up to the caller
    (see ``codegen_write.write_generated_files``).

    Attributes:
        path:     Relative path the file is proposed for.
        content:  Full file content.
        type:     Kind of file, used for per-type statistics.
        size:     Content size in UTF-8 bytes.
        lines:    Number of ``\\n``-separated lines.
        checksum: MD5 hex digest of the content.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    type: FileType
    size: int
    lines: int
    checksum: str

    def with_path(self, path: str) -> GeneratedFile:
        """Copy of this file proposed under another path."""
        return self.model_copy(update={"path": path})
