"""Tests for module_tasks.naming."""

import pytest

from module_tasks.naming import (
    is_task_name,
    is_tasks_filename,
    is_tasks_metadata_filename,
    is_tasks_executable_filename,
    task_name_from_path,
    split_task_name,
    public_task_name,
)


class TestIsTaskName:
    """Tests for is_task_name."""

    @pytest.mark.parametrize("name", ["task", "task_1", "xx_t_a_s_k_2_xx", "a", "init", "realtask"])
    def test_valid_names(self, name):
        """Test names matching the task name pattern."""
        assert is_task_name(name) is True

    @pytest.mark.parametrize("name", [
        "", "iLegal", "_task", "2task2furious", "def_a_task_PSYCH",
        "Fake_task", "not-a-task", "!runme", ".wat", "task name", "tâche",
    ])
    def test_invalid_names(self, name):
        """Test names that do not match the task name pattern."""
        assert is_task_name(name) is False

    def test_trailing_newline_rejected(self):
        """Test that a trailing newline does not sneak through the anchor."""
        assert is_task_name("task\n") is False


class TestTaskNameFromPath:
    """Tests for task_name_from_path."""

    def test_strips_final_extension(self):
        """Test the final extension is removed."""
        assert task_name_from_path("/m/tasks/deploy.sh") == "deploy"

    def test_only_final_extension(self):
        """Test only the last extension is removed."""
        assert task_name_from_path("/m/tasks/deploy.tar.gz") == "deploy.tar"

    def test_no_extension(self):
        """Test a file without extension keeps its name."""
        assert task_name_from_path("/m/tasks/deploy") == "deploy"

    def test_dotfile(self):
        """Test a dotfile is its own stem."""
        assert task_name_from_path(".wat") == ".wat"


class TestIsTasksFilename:
    """Tests for filename classification."""

    @pytest.mark.parametrize("path", ["task", "task.sh", "task.exe", "task.ps1", "task.elf", "task.json", "/abs/tasks/task.rb"])
    def test_eligible(self, path):
        """Test legal stems with allowed extensions."""
        assert is_tasks_filename(path) is True

    @pytest.mark.parametrize("path", ["task.conf", "readme.md", "other_task.md", "/abs/tasks/thing.conf"])
    def test_forbidden_extensions(self, path):
        """Test .conf and .md files are never task files."""
        assert is_tasks_filename(path) is False

    @pytest.mark.parametrize("path", [".nottask.exe", ".wat", "!runme", "_task", "2task2furious", "Fake_task", "not-a-task"])
    def test_illegal_stems(self, path):
        """Test files with illegal stems are not task files."""
        assert is_tasks_filename(path) is False

    def test_metadata_file(self):
        """Test .json files are metadata."""
        assert is_tasks_metadata_filename("task.json") is True
        assert is_tasks_executable_filename("task.json") is False

    def test_executable_file(self):
        """Test non-.json files are executables."""
        assert is_tasks_executable_filename("task.sh") is True
        assert is_tasks_metadata_filename("task.sh") is False

    def test_ineligible_is_neither(self):
        """Test an ineligible file is neither metadata nor executable."""
        assert is_tasks_metadata_filename("Bad.json") is False
        assert is_tasks_executable_filename("task.md") is False


class TestTaskNames:
    """Tests for public task names."""

    def test_public_name(self):
        """Test fragments are namespaced by module."""
        assert public_task_name("mymod", "deploy") == "mymod::deploy"

    def test_init_public_name(self):
        """Test the init task is named after its module."""
        assert public_task_name("mymod", "init") == "mymod"

    def test_split_namespaced(self):
        """Test splitting a namespaced name."""
        assert split_task_name("mymod::deploy") == ("mymod", "deploy")

    def test_split_bare(self):
        """Test a bare module name refers to its init task."""
        assert split_task_name("mymod") == ("mymod", "init")
