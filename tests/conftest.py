"""Test fixtures for module-tasks tests."""

import json
import pytest
from pathlib import Path

from module_tasks.models import TaskModule


DEFAULT_TEST_METADATA = {
    "description": "A fake task used for testing",
    "spec_version": "1.0.0",
    "supports_noop": False,
    "input": ["stdin", "environment"],
    "input_format": "json",
    "output_format": "plaintext",
    "additional_parameters": True,
    "required_parameters": [],
    "parameters": {},
    "output": "A test message",
}


@pytest.fixture
def module_path(tmp_path):
    """Root directory of a module named 'mymod'."""
    path = tmp_path / "modules" / "mymod"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def mymod(module_path):
    """The 'mymod' module."""
    return TaskModule(name="mymod", path=str(module_path))


@pytest.fixture
def tasks_path(mymod):
    """The 'mymod' tasks directory (created)."""
    path = mymod.tasks_directory
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def create_task(tasks_path):
    """
    Create a task on disk.

    Writes <name>.json from the default metadata merged with overrides
    (skipped when metadata is None) and touches the executable.
    """
    def _create(name, metadata=None, executable=None, write_metadata=True):
        if write_metadata:
            data = dict(DEFAULT_TEST_METADATA)
            data.update(metadata or {})
            (tasks_path / f"{name}.json").write_text(json.dumps(data))

        exe_path = tasks_path / (executable or name)
        exe_path.touch()
        return exe_path

    return _create
