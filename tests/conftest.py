import os
import tempfile
from collections.abc import Iterator
from contextlib import ExitStack
from pathlib import Path
from unittest.mock import patch

import pytest

from zeptex.config import Config, get_config

from .utils import DirFactory, DirSpec, write_spec

# Always use default config in tests


@pytest.fixture(autouse=True)
def config() -> Iterator[Config]:
    with tempfile.TemporaryDirectory() as config_home:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": config_home}):
            get_config.cache_clear()
            yield get_config()
    get_config.cache_clear()


@pytest.fixture
def temp_dir_factory() -> Iterator[DirFactory]:
    stack = ExitStack()

    def temp_dir_factory(dir_spec: DirSpec) -> Path:
        root = Path(stack.enter_context(tempfile.TemporaryDirectory()))
        write_spec(root, dir_spec)
        return root

    with stack:
        yield temp_dir_factory
