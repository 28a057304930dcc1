"""Input schema for a statement upload."""

from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field


class StatementFile(BaseModel):
    """A statement file as received from the user: its name and raw bytes."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Original file name, including extension")
    content: bytes = Field(..., description="Raw file content")

    @property
    def extension(self) -> str:
        """Lower-cased text after the last dot of the name ("" if none)."""
        _, dot, extension = self.name.rpartition(".")
        return extension.lower() if dot else ""

    def read_bytes(self) -> bytes:
        return self.content

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.content.decode(encoding)

    @classmethod
    def from_path(cls, path: str | Path) -> "StatementFile":
        """Load a statement from disk. I/O errors propagate."""
        path = Path(path)
        return cls(name=path.name, content=path.read_bytes())

    @classmethod
    def from_fileobj(cls, fileobj: BinaryIO, name: str | None = None) -> "StatementFile":
        """Wrap an open binary file (or any object with ``read()`` and ``name``)."""
        file_name = name or Path(str(getattr(fileobj, "name", ""))).name
        return cls(name=file_name, content=fileobj.read())
