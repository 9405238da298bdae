"""
Task name and filename rules.

Decides which files in a module's tasks directory belong to a task at all,
and whether a task file is metadata (``.json``) or an executable.
"""

import os
import re
from pathlib import Path
from typing import Union


TASK_NAME_REGEX = re.compile(r"^[a-z][a-z0-9_]*$")

# Filenames ending in these are never part of a task, even with a legal stem
FORBIDDEN_EXTENSIONS = (".conf", ".md")

METADATA_EXTENSION = ".json"

# Reserved fragment whose public name is the bare module name
INIT_TASK = "init"

PathLike = Union[str, Path]


def is_task_name(name: str) -> bool:
    """
    Check whether a string is a legal task name fragment.

    Args:
        name: Candidate fragment (no module prefix)

    Returns:
        True if name matches ^[a-z][a-z0-9_]*$
    """
    # fullmatch so a trailing newline is not accepted
    return TASK_NAME_REGEX.fullmatch(name) is not None


def task_name_from_path(path: PathLike) -> str:
    """Return the basename of path with its final extension removed."""
    return os.path.splitext(os.path.basename(str(path)))[0]


def is_tasks_filename(path: PathLike) -> bool:
    """
    Determine whether a file is legal as a task's executable or metadata file.

    The stem must be a valid task name and the full filename must not end
    in a forbidden extension.

    Args:
        path: File path (absolute or bare filename)

    Returns:
        True if the file can be part of a task
    """
    if not is_task_name(task_name_from_path(path)):
        return False

    return not str(path).endswith(FORBIDDEN_EXTENSIONS)


def is_tasks_metadata_filename(path: PathLike) -> bool:
    """Eligible task file ending in .json."""
    return is_tasks_filename(path) and str(path).endswith(METADATA_EXTENSION)


def is_tasks_executable_filename(path: PathLike) -> bool:
    """Eligible task file that is not metadata."""
    return is_tasks_filename(path) and not str(path).endswith(METADATA_EXTENSION)


def split_task_name(name: str) -> tuple:
    """
    Split a public task name into (module_name, fragment).

    ``mymod::deploy`` -> ("mymod", "deploy"); a bare ``mymod`` names the
    module's init task -> ("mymod", "init").
    """
    if "::" in name:
        module_name, fragment = name.split("::", 1)
        return module_name, fragment
    return name, INIT_TASK


def public_task_name(module_name: str, fragment: str) -> str:
    """Namespaced name for a task fragment within a module."""
    if fragment == INIT_TASK:
        return module_name
    return f"{module_name}::{fragment}"
