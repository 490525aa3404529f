# File: reclist/core/config/settings.py

import os
from pathlib import Path


def default_data_dir(base_dir: Path) -> Path:
    """
    RECLIST_DATA_DIR if set, <checkout>/data when running from a source
    tree, otherwise ./data under the working directory.
    """
    configured = os.getenv("RECLIST_DATA_DIR")
    if configured:
        return Path(configured)
    if (base_dir / "pyproject.toml").exists():
        return base_dir / "data"
    return Path.cwd() / "data"


class Settings:
    # --- Paths ---
    # reclist/core/config/settings.py -> reclist/core/config -> reclist/core -> reclist -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = default_data_dir(BASE_DIR)

    # --- Database ---
    DB_PATH: Path = Path(os.getenv("DB_PATH", str(DATA_DIR / "reclist.db")))

    @property
    def DATABASE_URL(self) -> str:
        # An explicit URL wins (tests, shared servers).
        # Otherwise, fall back to the local SQLite catalogue file.
        url = os.getenv("RECLIST_DATABASE_URL")
        if url:
            return url
        return f"sqlite:///{self.DB_PATH}"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("RECLIST_LOG_LEVEL", "WARNING").upper()

    # --- Listing / Indexing ---
    AUDIO_EXTENSION: str = ".wav"
    INDEX_BATCH_SIZE: int = int(os.getenv("RECLIST_INDEX_BATCH_SIZE", "1000"))

    def ensure_dirs(self):
        """Creates the data directory and the SQLite file's parent if missing."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        if self.DATABASE_URL.startswith("sqlite:///"):
            self.DB_PATH.parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
