from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Centralized configuration for the Alibeby record store and stats engine."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("ALIBEBY_DATA_ROOT") or data_root_default
        ).expanduser()
        # Used to resolve "today" when a caller does not pass a day explicitly.
        self.timezone: str = os.environ.get("ALIBEBY_TIMEZONE") or "UTC"


settings = Settings()
