import logging

from .config import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> None:
    # stdout belongs to the screen, so records either go to a file or nowhere
    root = logging.getLogger("zeptex")
    root.setLevel(config.level)

    for old_handler in list(root.handlers):
        root.removeHandler(old_handler)
        old_handler.close()

    handler: logging.Handler
    if config.file is None:
        handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(config.file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.propagate = False
