"""Runtime settings for the launcher."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from sm_common.config.env import parse_bool_env, parse_str_env
from sm_common.errors import ConfigurationError

DEFAULT_SHELL = "bash"
DEFAULT_PROFILE = "~/.bash_profile"


class LauncherSettings(BaseModel):
    """How menu commands are wrapped and how navigation behaves."""

    shell: str = Field(default=DEFAULT_SHELL, description="Shell used for wrapped commands")
    profile: str = Field(
        default=DEFAULT_PROFILE,
        description="Profile sourced before wrapped commands; empty disables sourcing",
    )
    back_exits_at_root: bool = Field(
        default=False, description="Back key on the root menu exits the launcher"
    )

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("shell")
    @classmethod
    def _validate_shell(cls, value: str) -> str:
        shell = value.strip()
        if not shell:
            raise ValueError("shell must not be empty")
        return shell

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LauncherSettings":
        """Build settings from ``SM_SHELL``, ``SM_PROFILE`` and ``SM_BACK_EXITS``."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        shell = parse_str_env(env.get("SM_SHELL"))
        if shell:
            data["shell"] = shell
        profile = parse_str_env(env.get("SM_PROFILE"))
        if profile is not None:
            data["profile"] = profile
        back_exits = parse_bool_env(env.get("SM_BACK_EXITS"))
        if back_exits is not None:
            data["back_exits_at_root"] = back_exits
        return cls.build(data)

    @classmethod
    def build(cls, data: Mapping[str, Any]) -> "LauncherSettings":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid launcher settings", context={"errors": exc.errors()}, cause=exc
            ) from exc

    def with_overrides(self, **overrides: Any) -> "LauncherSettings":
        """Return a copy with the non-None overrides applied and re-validated."""
        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        return self.build({**self.model_dump(), **update})
