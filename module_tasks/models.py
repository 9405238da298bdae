"""
Data models for the task catalog.

Defines Pydantic models for modules, metadata strictness and task summaries.
"""

from enum import Enum
from pathlib import Path
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


TASKS_DIRNAME = "tasks"


class Strictness(str, Enum):
    """How malformed task metadata is reported."""
    WARNING = "warning"     # Log and treat as empty
    ERROR = "error"         # Raise FaultyMetadata


class TaskModule(BaseModel):
    """
    A module whose tasks directory is scanned for tasks.

    The module name is taken as given; only the path is normalized.
    """

    name: str = Field(..., description="Module name, used as the task namespace")
    path: str = Field(..., description="Path to the module root directory")
    description: str = Field(default="", description="Description of this module")

    # Metadata
    added_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Make the module path absolute without touching the filesystem."""
        return str(Path(v).expanduser().absolute())

    @property
    def tasks_directory(self) -> Path:
        """The flat directory holding this module's task files."""
        return Path(self.path) / TASKS_DIRNAME


class TaskSummary(BaseModel):
    """Printable view of a discovered task."""

    name: str
    module: str
    files: List[str] = Field(default_factory=list)
    metadata_file: Optional[str] = None
    description: Optional[str] = None
