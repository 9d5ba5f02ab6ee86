import argparse
from pathlib import Path
from typing import cast

from .config import get_config, load_config
from .editor import edit
from .log import setup_logging

parser = argparse.ArgumentParser(prog="zeptex")
parser.add_argument("--config", type=Path, help="config file to use")
parser.add_argument("path", type=Path, nargs="?", help="file to edit")


def main() -> int:
    args = parser.parse_args()
    config_path = cast(Path | None, args.config)
    path = cast(Path | None, args.path)

    if config_path is None:
        config = get_config()
    else:
        config = load_config(config_path)

    setup_logging(config.logging)

    try:
        edit(path, config)
    except KeyboardInterrupt:
        return 130

    return 0
