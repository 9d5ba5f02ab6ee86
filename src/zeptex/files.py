import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def load_lines(path: Path) -> list[str]:
    lines: list[str] = []

    try:
        with path.open(newline="", errors="surrogateescape") as f:
            for line in f:
                lines.append(line.removesuffix("\n"))
    except FileNotFoundError:
        logger.info("%s does not exist, starting with an empty buffer", path)
    except OSError as e:
        logger.warning("could not read %s: %s", path, e)
        return []
    else:
        logger.info("loaded %d lines from %s", len(lines), path)

    return lines


def save_lines(path: Path, lines: Iterable[str]) -> bool:
    try:
        with path.open("w", newline="", errors="surrogateescape") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except OSError as e:
        logger.warning("could not write %s: %s", path, e)
        return False

    logger.info("wrote %s", path)
    return True
