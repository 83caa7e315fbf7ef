import logging
from pathlib import Path
from typing import List, NamedTuple, Sequence

from ..exceptions import FileDecodeError
from ..snippet.model import Document


class FileInfo(NamedTuple):
    """Information about a detected documentation file."""
    path: str
    relative_path: str
    size: int


class DocumentLoader:
    """Deterministic discovery of the markdown files of a book."""

    logger = logging.getLogger("snippet_checker")

    DEFAULT_EXTENSIONS: Sequence[str] = (".md",)

    def __init__(self, extensions: Sequence[str] | None = None):
        """Initialize the loader.

        Args:
            extensions: File suffixes to include (default: ``.md``)
        """
        self.extensions = tuple(extensions) if extensions else tuple(self.DEFAULT_EXTENSIONS)

    def detect_files(self, root: str | Path) -> List[FileInfo]:
        """Detect documentation files below ``root``.

        Files are ordered by their path components so the walk visits each
        directory's entries by name, the same order on every platform.

        Raises:
            FileNotFoundError: If root doesn't exist
            NotADirectoryError: If root is not a directory
        """
        root_path = Path(root)

        if not root_path.exists():
            raise FileNotFoundError(f"Book directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Book path is not a directory: {root}")

        matches = [
            path for path in root_path.rglob("*")
            if path.suffix in self.extensions and path.is_file()
        ]
        matches.sort(key=lambda path: path.relative_to(root_path).parts)

        return [
            FileInfo(
                path=str(path),
                relative_path=path.relative_to(root_path).as_posix(),
                size=path.stat().st_size,
            )
            for path in matches
        ]

    def load_documents(self, root: str | Path) -> List[Document]:
        """Detect and read every documentation file.

        Read errors are not skipped; an unreadable document aborts the run.
        """
        documents = []
        for file_info in self.detect_files(root):
            try:
                with open(file_info.path, 'r', encoding='utf-8') as f:
                    text = f.read()
            except UnicodeDecodeError as exc:
                raise FileDecodeError.from_unicode_error(exc, file_info.relative_path) from exc
            documents.append(Document(
                path=file_info.path,
                relative_path=file_info.relative_path,
                text=text,
            ))

        self.logger.info("Loaded %d documents from %s", len(documents), root)
        return documents
