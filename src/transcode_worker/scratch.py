"""
Local scratch files for one conversion run.

Paths are derived from the work item key: {scratch_dir}/{basename(source_key)}
for the download and {scratch_dir}/{basename(target_key)} for the ffmpeg output.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import CleanupWarning
from .keys import derive_target_key

logger = logging.getLogger(__name__)


def remove_scratch_files(*paths: str | Path) -> None:
    """
    Delete each path if present. Missing files are ignored; any other OSError
    is logged as a CleanupWarning and the remaining paths are still attempted.
    """
    for path in paths:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("cleanup: %s: could not remove %s: %s", CleanupWarning.__name__, path, e)


@dataclass(frozen=True)
class ScratchFiles:
    """Source and target scratch paths owned by the orchestrator for one run."""

    source_path: Path
    target_path: Path

    @classmethod
    def for_key(cls, source_key: str, scratch_dir: str | Path) -> ScratchFiles:
        """Derive both paths from the source key inside scratch_dir."""
        scratch_dir = Path(scratch_dir)
        target_key = derive_target_key(source_key)
        return cls(
            source_path=scratch_dir / os.path.basename(source_key),
            target_path=scratch_dir / os.path.basename(target_key),
        )

    def cleanup(self) -> None:
        """Remove both files. Safe to call repeatedly."""
        remove_scratch_files(self.source_path, self.target_path)
