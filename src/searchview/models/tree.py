# src/searchview/models/tree.py
"""File tree models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from searchview.models.ranges import Range


class FileTreeFileType(str, Enum):
    DIR = "dir"
    FILE = "file"


class FileTreeNode(BaseModel):
    """One entry of a file tree.

    ``children`` is always empty when mapped; it is filled when the user
    expands the directory.
    """

    model_config = ConfigDict(frozen=True)

    type: FileTreeFileType
    path: str
    name: str
    lang: str | None = None
    children: list["FileTreeNode"] = Field(default_factory=list)
    selected: bool = False

    @property
    def is_dir(self) -> bool:
        return self.type is FileTreeFileType.DIR


class DirectoryView(BaseModel):
    """A directory listing ready for the tree pane."""

    model_config = ConfigDict(frozen=True)

    name: str
    relative_path: str
    repo_ref: str
    entries: list[FileTreeNode] = Field(default_factory=list)


class FileView(BaseModel):
    """A file's contents plus its sibling tree."""

    model_config = ConfigDict(frozen=True)

    language: str | None = None
    repo_path: str
    relative_path: str
    code: str = ""
    repo_name: str
    hoverable_ranges: list[Range] = Field(default_factory=list)
    file_tree: list[FileTreeNode] = Field(default_factory=list)
