from __future__ import annotations

import logging

import pytest


@pytest.fixture
def param_file(tmp_path):
    path = tmp_path / "ball.txt"
    path.write_text(
        "# vertical throw\n"
        "v0 = 5.3\n"
        "g = 9.81\n"
        "\n"
        "t = [0.0, 0.15, 0.3, 0.45]\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("paramtable")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
