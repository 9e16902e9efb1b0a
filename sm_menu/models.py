"""Menu file records."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MenuItem(BaseModel):
    """One entry of a menu file: a leaf with a command or a branch of items.

    Children are stored under the ``item`` key in JSON and YAML files.
    """

    name: str = Field(description="Display label")
    command: str | None = Field(default=None, description="Shell command for leaves")
    children: list["MenuItem"] | None = Field(
        default=None, alias="item", description="Sub-entries for branches"
    )

    model_config = {"extra": "ignore", "populate_by_name": True, "frozen": True}

    @property
    def is_branch(self) -> bool:
        # A record carrying both a command and children is a branch.
        return bool(self.children)


MenuItem.model_rebuild()
