import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture(autouse=True)
def _restore_root_log_level() -> Iterator[None]:
    # cli.obfuscator.run applies --log-level to the root logger.
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
