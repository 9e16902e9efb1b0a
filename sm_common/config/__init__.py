"""Configuration helpers shared across shellmenu packages."""

from sm_common.config.env import parse_bool_env, parse_str_env

__all__ = ["parse_bool_env", "parse_str_env"]
