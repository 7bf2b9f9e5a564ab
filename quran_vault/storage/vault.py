"""Folder-backed note store for generated documents."""

import logging
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Normalize a vault-relative path.

    Backslashes become forward slashes, repeated and surrounding
    slashes are removed, and ``.`` segments are dropped.

    Raises:
        ValueError: If the path is empty or escapes the vault root.
    """
    parts = [p for p in path.replace("\\", "/").split("/") if p and p != "."]
    if not parts:
        raise ValueError("Empty vault path")
    if ".." in parts:
        raise ValueError(f"Path escapes the vault: {path}")
    return str(PurePosixPath(*parts))


class VaultStore:
    """Stores notes as UTF-8 markdown files under a root directory.

    Notes are only ever created; existing files are never updated or
    removed by this class.

    Args:
        root: Directory that holds the vault. Created on first write.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / normalize_path(path)

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def create_folder(self, path: str) -> None:
        """Create a folder (and parents); an existing folder is left alone."""
        target = self._resolve(path)
        target.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured folder %s", target)

    def create(self, path: str, content: str) -> None:
        """Create a new note with the given content.

        Args:
            path: Vault-relative note path.
            content: Full markdown text.

        Raises:
            FileExistsError: If a note already exists at ``path``.
        """
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "x", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Created %s", target)

    def read(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def list_files(self, folder: str) -> list[str]:
        """Return vault-relative paths of the files directly in ``folder``, sorted."""
        directory = self._resolve(folder)
        if not directory.is_dir():
            return []
        return sorted(
            str(PurePosixPath(normalize_path(folder)) / child.name)
            for child in directory.iterdir()
            if child.is_file()
        )
