# Input acquisition: read tool output as text, lines or an XML element tree.

import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from analysis_model.errors import ParsingException

logger = logging.getLogger(__name__)


class ReaderFactory(ABC):
    """
    Gives parsers access to one input in the form they need.

    Text is decoded with the configured encoding; undecodable bytes are
    replaced rather than rejected. XML is parsed from the raw bytes so the
    document's own encoding declaration applies.
    """

    def __init__(self, file_name: str, encoding: str = "utf-8") -> None:
        self.file_name = file_name
        self.encoding = encoding

    @abstractmethod
    def read_bytes(self) -> bytes:
        """Return the raw input. Raises ParsingException if it cannot be read."""
        ...

    def read_string(self) -> str:
        return self.read_bytes().decode(self.encoding, errors="replace")

    def read_lines(self) -> List[str]:
        """Return the input split into lines, without line terminators."""
        return self.read_string().splitlines()

    def read_document(self) -> ET.Element:
        """
        Parse the input as XML and return the root element.

        Raises:
            ParsingException: the input is not well-formed XML.
        """
        source = self.read_bytes()
        try:
            root = ET.fromstring(source)
        except ET.ParseError as e:
            logger.warning("Failed to parse XML document %s: %s", self.file_name, e)
            raise ParsingException(f"Can't parse XML document {self.file_name}: {e}") from e
        logger.debug("Parsed XML document %s: root=%s", self.file_name, root.tag)
        return root


class FileReaderFactory(ReaderFactory):
    """Reads the input from a file on disk."""

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        super().__init__(str(path), encoding)
        self.path = path

    def read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as e:
            logger.error("Failed to read file %s: %s", self.path, e)
            raise ParsingException(f"Can't read file {self.path}: {e}") from e


class StringReaderFactory(ReaderFactory):
    """Serves input that is already in memory (e.g. captured tool output)."""

    def __init__(self, content: str, file_name: str = "<string>", encoding: str = "utf-8") -> None:
        super().__init__(file_name, encoding)
        self.content = content

    def read_bytes(self) -> bytes:
        return self.content.encode(self.encoding, errors="replace")

    def read_string(self) -> str:
        return self.content
