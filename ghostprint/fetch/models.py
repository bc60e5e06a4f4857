from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FetchedDocument:
    """Downloaded document owned by the current run."""

    local_path: Path
