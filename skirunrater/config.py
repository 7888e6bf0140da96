import os
from pathlib import Path

DATA_DIR = Path(os.getenv("SKIRUNRATER_HOME", Path.home() / ".skirunrater"))
DATA_FILE = Path(os.getenv("SKIRUNRATER_DATA_FILE", DATA_DIR / "SkiRuns.xml"))
LOG_LEVEL = os.getenv("SKIRUNRATER_LOG_LEVEL", "WARNING").upper()


def data_file() -> Path:
    """Resolve the data file from the current environment, falling back to DATA_FILE."""
    override = os.getenv("SKIRUNRATER_DATA_FILE")
    if override:
        return Path(override)
    home = os.getenv("SKIRUNRATER_HOME")
    if home:
        return Path(home) / "SkiRuns.xml"
    return DATA_FILE
