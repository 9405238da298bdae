"""
Task scanner.

Discovers tasks in a module's tasks directory by grouping eligible files on
their name stem.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from module_tasks.models import Strictness, TaskModule
from module_tasks.naming import (
    is_tasks_filename,
    is_tasks_metadata_filename,
    split_task_name,
    task_name_from_path,
)
from module_tasks.task import Task


logger = logging.getLogger(__name__)


class TaskScanner:
    """
    Scans modules for task files.

    Files are grouped by name stem; each group becomes one Task whose
    ``.json`` file (if any) is its metadata and whose other files are its
    executables. Task order follows the first appearance of each stem in
    the directory listing.
    """

    def __init__(self, strictness: Strictness = Strictness.WARNING):
        """
        Initialize task scanner.

        Args:
            strictness: Strictness handed to every discovered Task
        """
        self.strictness = Strictness(strictness)

    def tasks_in_module(self, module: TaskModule) -> List[Task]:
        """
        Scan a single module for tasks.

        Args:
            module: Module to scan

        Returns:
            List of tasks in order of first appearance in the listing
        """
        groups: Dict[str, List[str]] = {}

        for entry in self._list_entries(module.tasks_directory):
            if not is_tasks_filename(entry):
                continue
            # dicts keep insertion order, so groups stay in first-seen order
            groups.setdefault(task_name_from_path(entry), []).append(entry)

        return [
            self._create_task(module, name, entries)
            for name, entries in groups.items()
        ]

    def scan_modules(self, modules: List[TaskModule]) -> List[Task]:
        """
        Scan multiple modules for tasks.

        Args:
            modules: Modules to scan, in order

        Returns:
            Tasks from all modules, grouped by module
        """
        discovered = []

        for module in modules:
            if not module.tasks_directory.is_dir():
                logger.debug(f"Module '{module.name}' has no tasks directory: {module.tasks_directory}")
                continue
            discovered.extend(self.tasks_in_module(module))

        return discovered

    def find_task(self, modules: List[TaskModule], name: str) -> Optional[Task]:
        """
        Look up a task by its public name.

        Args:
            modules: Modules to search
            name: ``<module>::<task>`` or a bare module name for its init task

        Returns:
            The matching Task or None if not found
        """
        module_name, fragment = split_task_name(name)

        for module in modules:
            if module.name != module_name:
                continue
            for task in self.tasks_in_module(module):
                if task.short_name == fragment:
                    return task

        return None

    def _list_entries(self, tasks_directory: Path) -> List[str]:
        """
        List direct entries of a tasks directory.

        Order is whatever the filesystem yields; it is not sorted.

        Args:
            tasks_directory: Directory to list

        Returns:
            List of entry paths
        """
        if not tasks_directory.is_dir():
            return []

        return [str(p) for p in tasks_directory.glob("*")]

    def _create_task(self, module: TaskModule, name: str, entries: List[str]) -> Task:
        """
        Create a Task from the entries sharing one stem.

        Args:
            module: Owning module
            name: Shared name stem
            entries: Entry paths in listing order

        Returns:
            Task with its metadata and executable files split out
        """
        files = [module.tasks_directory / Path(entry).name for entry in entries]

        metadata_files = [f for f in files if is_tasks_metadata_filename(f)]
        exe_files = [f for f in files if not is_tasks_metadata_filename(f)]

        # Only the first metadata file counts
        metadata_file = metadata_files[0] if metadata_files else None

        return Task(module, name, exe_files, metadata_file, strictness=self.strictness)


def tasks_in_module(module: TaskModule, strictness: Strictness = Strictness.WARNING) -> List[Task]:
    """Scan one module with a default scanner."""
    return TaskScanner(strictness).tasks_in_module(module)
