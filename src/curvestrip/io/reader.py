"""Document reader for JSON and TOML curve descriptions.

This module provides the DocumentReader class for parsing curve documents
into domain models.
"""

import json
import tomllib
from enum import Enum
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError

from curvestrip.domain import Document
from curvestrip.exceptions import DocumentError
from curvestrip.io.converter import DocumentModel, document_model_to_domain


class InputFormat(str, Enum):
    """Supported document formats."""

    JSON = "json"
    TOML = "toml"


class DocumentReader:
    """Parses curve documents and converts them to domain models.

    Example:
        reader = DocumentReader(InputFormat.TOML)
        document = reader.read_path(Path("drawing.toml"))
        for curve in document.curves:
            print(curve.shape.kind)
    """

    def __init__(self, input_format: InputFormat) -> None:
        """Initialize the reader.

        Args:
            input_format: Format of the documents to read
        """
        self._format = input_format

    @property
    def format(self) -> InputFormat:
        """Return the document format."""
        return self._format

    def _decode(self, text: str) -> Any:
        try:
            if self._format is InputFormat.JSON:
                return json.loads(text)
            return tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise DocumentError(f"cannot parse {self._format.value}: {e}") from e

    def read(self, text: str | bytes) -> Document:
        """Parse a document from text.

        Args:
            text: Document contents

        Returns:
            Parsed document

        Raises:
            DocumentError: If the text cannot be parsed or has the wrong structure
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DocumentError(f"document is not valid UTF-8: {e}") from e

        data = self._decode(text)

        try:
            model = DocumentModel.model_validate(data)
        except ValidationError as e:
            raise DocumentError(str(e)) from e

        return document_model_to_domain(model)

    def read_stream(self, stream: IO[str] | IO[bytes]) -> Document:
        """Parse a document from an open stream (e.g. stdin)."""
        return self.read(stream.read())

    def read_path(self, path: Path) -> Document:
        """Parse a document from a file.

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentError: If the file cannot be parsed
        """
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        return self.read(path.read_bytes())
