"""Shared fixtures for the DataVision test suite."""

import pytest

from level3_dataset.assembler import assemble_dataset
from level3_dataset.samples import load_sample_dataset


@pytest.fixture
def write_file(tmp_path):
    """Factory writing text or bytes to a file under tmp_path."""

    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sales_dataset():
    return load_sample_dataset("sales")


@pytest.fixture
def website_dataset():
    return load_sample_dataset("website")


@pytest.fixture
def small_dataset():
    raw = [
        ["region", "units", "label"],
        ["North", 10, "a"],
        ["South", 5, "b"],
        ["North", 7, "c"],
        ["East", None, "d"],
    ]
    return assemble_dataset(raw, "small.csv")
