import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import ROOT, open_file  # isort:skip


@pytest.fixture(scope="session")
def countdown_program() -> str:
    return open_file("data/valid/countdown.frog")


@pytest.fixture(scope="session")
def hello_program() -> str:
    return open_file("data/valid/hello.frog")


def files() -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT)
        for file in glob(os.path.join(ROOT, "data", "**", "*.frog"), recursive=True)
    )


def valid_files() -> List[str]:
    return [file for file in files() if file.startswith(os.path.join("data", "valid"))]


def invalid_files() -> List[str]:
    return [
        file for file in files() if file.startswith(os.path.join("data", "invalid"))
    ]


@pytest.fixture(scope="session", params=files())
def file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=invalid_files())
def invalid_file(request) -> str:
    return request.param
