"""Shared fixtures.

Settings read BDKFFI_BINDGEN_* variables, .env and bdkffi-bindgen.yaml from
the working directory, so every test runs with those cleared and inside its
own temporary directory.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name.upper().startswith("BDKFFI_BINDGEN_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
