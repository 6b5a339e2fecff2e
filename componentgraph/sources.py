"""Local source loader - collects component source files from a checkout.

Applies the same filters the remote retrieval step uses: script extensions
only, no hidden entries, no dependency/build/test directories, and hard caps
on file count and directory depth. Traversal is sorted so a fixed tree
always yields the same ordered input.
"""

from pathlib import Path
from typing import Any

from componentgraph.config_runtime import DEFAULTS
from componentgraph.exceptions import SourceLoadError
from componentgraph.graph.types import SourceFile
from componentgraph.utils.logging import logger


class SourceCollector:
    """Walk a directory tree and read matching files as SourceFile records."""

    def __init__(self, root: str | Path, config: dict[str, Any] | None = None):
        section = (config or DEFAULTS)["sources"]
        self.root = Path(root).resolve()
        self.extensions = {ext.lower() for ext in section["extensions"]}
        self.ignore_dirs = set(section["ignore_dirs"])
        self.max_files = section["max_files"]
        self.max_depth = section["max_depth"]
        self.files: list[SourceFile] = []

    def should_skip(self, path: Path) -> bool:
        return path.name.startswith(".") or path.name in self.ignore_dirs

    def collect(self) -> list[SourceFile]:
        if not self.root.is_dir():
            raise SourceLoadError(f"Not a directory: {self.root}", root=str(self.root))

        self.files = []
        self._walk(self.root, 0)
        logger.info(f"Collected {len(self.files)} source files from {self.root}")
        return self.files

    def _walk(self, directory: Path, depth: int) -> None:
        if depth >= self.max_depth or len(self.files) >= self.max_files:
            return

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return

        for entry in entries:
            if len(self.files) >= self.max_files:
                logger.warning(f"File limit reached ({self.max_files}), stopping collection")
                return
            if self.should_skip(entry):
                continue
            if entry.is_dir():
                self._walk(entry, depth + 1)
            elif entry.is_file() and entry.suffix.lower() in self.extensions:
                self._read(entry)

    def _read(self, path: Path) -> None:
        rel_path = path.relative_to(self.root).as_posix()
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning(f"Skipping {rel_path}: not valid UTF-8")
            return
        except OSError as e:
            logger.warning(f"Skipping {rel_path}: {e}")
            return

        if not content:
            logger.debug(f"Skipping empty file {rel_path}")
            return
        self.files.append(SourceFile(path=rel_path, name=path.name, raw_text=content))


def load_source_files(root: str | Path, config: dict[str, Any] | None = None) -> list[SourceFile]:
    """Collect source files under root using the ``sources`` config section."""
    return SourceCollector(root, config).collect()
