"""Pattern resolution for asset paths."""
from __future__ import annotations

import asyncio
import glob
import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def parse_patterns(pattern: str) -> Tuple[List[str], List[str]]:
    """
    Split a multi-line pattern into include and exclude patterns.

    Blank lines and ``#`` comments are skipped; ``!`` marks an exclusion.
    """
    includes: List[str] = []
    excludes: List[str] = []
    for raw_line in pattern.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("!"):
            excluded = line[1:].strip()
            if excluded:
                excludes.append(excluded)
            continue
        includes.append(line)
    return includes, excludes


class GlobMatcher:
    """
    Resolves glob patterns to existing files.

    Implements IFileMatcher protocol. ``**`` crosses directories and a
    matched directory contributes every file beneath it. Hidden files and
    directories match like any other. Results are absolute, unique, in
    pattern order and sorted within each pattern.
    """

    def __init__(self, root: Optional[Path] = None):
        self._root = root

    async def glob(self, pattern: str) -> List[str]:
        return await asyncio.to_thread(self._resolve, pattern)

    def _resolve(self, pattern: str) -> List[str]:
        includes, excludes = parse_patterns(pattern)

        excluded = set()
        for exclude in excludes:
            excluded.update(self._expand(exclude))

        seen = set()
        files: List[str] = []
        for include in includes:
            for path in self._expand(include):
                if path in seen or path in excluded:
                    continue
                seen.add(path)
                files.append(path)

        logger.debug("Pattern %r matched %d files", pattern, len(files))
        return files

    def _expand(self, pattern: str) -> List[str]:
        pattern = os.path.expanduser(pattern)
        if not os.path.isabs(pattern):
            base = self._root if self._root is not None else Path.cwd()
            pattern = os.path.join(str(base), pattern)

        files: List[str] = []
        for match in sorted(glob.glob(pattern, recursive=True, include_hidden=True)):
            path = Path(match)
            if path.is_dir():
                files.extend(sorted(str(item) for item in path.rglob("*") if item.is_file()))
            elif path.is_file():
                files.append(str(path))
        return [os.path.abspath(item) for item in files]
