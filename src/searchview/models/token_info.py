# src/searchview/models/token_info.py
"""Token info (references/definitions) models."""

from pydantic import BaseModel, ConfigDict, Field

from searchview.models.raw import TokenInfoFile


class TokenInfoGroup(BaseModel):
    """Hits grouped by file, split into references and definitions."""

    model_config = ConfigDict(frozen=True)

    references: list[TokenInfoFile] = Field(default_factory=list)
    definitions: list[TokenInfoFile] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.references and not self.definitions
