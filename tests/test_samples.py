"""Canonical sample components format to themselves."""

import pytest

from .conftest import sample_files


@pytest.mark.parametrize("path", sample_files(), ids=lambda path: path.stem)
def test_sample_is_canonical(formatter, path):
    source = path.read_text(encoding="utf-8")
    assert formatter.format(source) == source


def test_samples_present():
    assert len(sample_files()) >= 5
