"""
Task value object.

A task is one or more executable files sharing a name stem inside a module's
tasks directory, plus an optional JSON metadata file that is loaded lazily.
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence

from module_tasks.models import Strictness, TaskModule, TaskSummary
from module_tasks.naming import TASK_NAME_REGEX, PathLike, is_task_name, public_task_name


logger = logging.getLogger(__name__)


class TaskError(Exception):
    """Base class for task errors."""


class InvalidName(TaskError):
    """Task name fragment does not match the task name pattern."""


class InvalidFile(TaskError):
    """A task file lies outside the module's tasks directory."""


class FaultyMetadata(TaskError):
    """Task metadata file is not a valid JSON object."""


class MetadataState(str, Enum):
    """Lifecycle of the metadata cache."""
    UNEVALUATED = "unevaluated"     # Never attempted
    LOADED = "loaded"               # Parsed from the metadata file
    EMPTY = "empty"                 # No file, unreadable, or tolerated parse failure


class Task:
    """
    A task discovered in (or declared for) a module.

    Attributes:
        module: Owning module (read only)
        short_name: Name fragment, e.g. ``deploy``
        name: Public name, ``<module>::<fragment>`` or the bare module name for ``init``
        files: Executable files in discovery order
        metadata_file: Sidecar metadata file, or None
        strictness: Handling of malformed metadata
    """

    def __init__(
        self,
        module: TaskModule,
        name: str,
        files: Sequence[PathLike],
        metadata_file: Optional[PathLike] = None,
        strictness: Strictness = Strictness.WARNING,
    ):
        """
        Create a task, validating its name and file locations.

        Args:
            module: Owning module
            name: Task name fragment (without module prefix)
            files: Executable file paths
            metadata_file: Optional metadata file path
            strictness: Handling of malformed metadata on first access

        Raises:
            InvalidName: If name does not match the task name pattern
            InvalidFile: If any file is not under the module's tasks directory
        """
        if not is_task_name(name):
            raise InvalidName(f"Task names must match the pattern {TASK_NAME_REGEX.pattern}")

        files = [Path(f) for f in files]
        metadata_file = Path(metadata_file) if metadata_file is not None else None

        all_files = files if metadata_file is None else files + [metadata_file]
        tasks_directory = Path(os.path.normpath(module.tasks_directory))
        for f in all_files:
            # Whole path components only, so tasks_evil/ is not inside tasks/
            if not Path(os.path.normpath(f)).is_relative_to(tasks_directory):
                raise InvalidFile(
                    f"The file '{f}' is not located in the {module.name} module's tasks directory"
                )

        self.module = module
        self.short_name = name
        self.name = public_task_name(module.name, name)
        self.files: List[Path] = files
        self.metadata_file: Optional[Path] = metadata_file
        self.strictness = Strictness(strictness)

        self._metadata_state = MetadataState.UNEVALUATED
        self._metadata: Mapping[str, Any] = MappingProxyType({})

    @property
    def metadata_state(self) -> MetadataState:
        """Current state of the metadata cache."""
        return self._metadata_state

    def metadata(self, strictness: Optional[Strictness] = None) -> Mapping[str, Any]:
        """
        Return the task's metadata, reading the metadata file on first call.

        A missing or unreadable file yields an empty mapping at any strictness.
        Content that is not a JSON object is logged and treated as empty under
        ``warning``, and raises under ``error`` without caching anything.

        Args:
            strictness: Overrides the task's strictness for this call

        Returns:
            Read-only metadata mapping (cached after the first successful evaluation)

        Raises:
            FaultyMetadata: If the file is malformed and strictness is ``error``
        """
        if self._metadata_state is not MetadataState.UNEVALUATED:
            return self._metadata

        if self.metadata_file is None:
            return self._cache_empty()

        try:
            text = self._read_metadata_file()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"[{self.name}] Could not read {self.metadata_file}: {e}")
            return self._cache_empty()

        try:
            data = json.loads(text)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        except (ValueError, RecursionError) as e:
            level = Strictness(strictness) if strictness is not None else self.strictness
            message = f"Task metadata for task {self.name} does not contain valid JSON: {self.metadata_file}: {e}"

            if level is Strictness.ERROR:
                raise FaultyMetadata(message) from e

            logger.warning(message)
            return self._cache_empty()

        self._metadata = MappingProxyType(data)
        self._metadata_state = MetadataState.LOADED
        return self._metadata

    def _read_metadata_file(self) -> str:
        """Read the full metadata file as UTF-8 text."""
        return self.metadata_file.read_text(encoding="utf-8")

    def _cache_empty(self) -> Mapping[str, Any]:
        self._metadata = MappingProxyType({})
        self._metadata_state = MetadataState.EMPTY
        return self._metadata

    def summary(self, include_metadata: bool = False) -> TaskSummary:
        """
        Build a printable summary of this task.

        Args:
            include_metadata: Load metadata to fill in the description

        Returns:
            TaskSummary
        """
        description = None
        if include_metadata:
            value = self.metadata().get("description")
            description = value if isinstance(value, str) else None

        return TaskSummary(
            name=self.name,
            module=self.module.name,
            files=[str(f) for f in self.files],
            metadata_file=str(self.metadata_file) if self.metadata_file else None,
            description=description,
        )

    def _identity(self) -> tuple:
        return (self.module.name, self.name, tuple(self.files), self.metadata_file)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return f"Task(name={self.name!r}, files={[f.name for f in self.files]!r})"
