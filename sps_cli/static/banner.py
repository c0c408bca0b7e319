"""Title banner shown before a match and by --version."""

from pathlib import Path

TITLE = "Stone Paper Scissors"

# banner.txt ships next to this module as package data
BANNER_FILE = Path(__file__).parent / "banner.txt"


def load_banner(path: Path = BANNER_FILE) -> str:
    """Read the ASCII title, falling back to the plain title if the file is missing."""
    try:
        return path.read_text(encoding="utf-8").rstrip("\n")
    except OSError:
        return TITLE


banner_ascii = load_banner()
