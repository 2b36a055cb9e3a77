"""Shared pytest fixtures for zsetproto tests."""

import pytest

from tests.fakes import RecordingCaller
from zsetproto import client as client_module


@pytest.fixture(autouse=True)
def _isolated_client():
    """Each test starts and ends with no collaborator installed."""
    client_module.Release()
    yield
    client_module.Release()


@pytest.fixture
def caller():
    recorder = RecordingCaller(reply=1)
    client_module.Use(recorder)
    return recorder
