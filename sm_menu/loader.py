"""Load menu files (JSON or YAML) into MenuItem trees."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import ValidationError

from sm_common.errors import MenuFileError, UnsupportedFormatError
from sm_menu.models import MenuItem

logger = logging.getLogger(__name__)


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


_PARSERS: dict[str, Callable[[str], Any]] = {
    ".json": _parse_json,
    ".yaml": _parse_yaml,
}

SUPPORTED_EXTENSIONS = tuple(_PARSERS)


def parse_menu_data(data: Any, *, source: str = "<memory>") -> MenuItem:
    """Validate already-decoded data into the root MenuItem."""
    if not isinstance(data, dict):
        raise MenuFileError(
            "Menu file must contain a mapping at the top level.",
            context={"path": source, "found": type(data).__name__},
        )
    try:
        return MenuItem.model_validate(data)
    except ValidationError as exc:
        raise MenuFileError(
            f"Invalid menu file {source}: {exc.error_count()} error(s)",
            context={"path": source, "errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc


def load_menu_file(path: str | Path) -> MenuItem:
    """Read ``path`` and return its root MenuItem.

    The format is chosen by extension; anything other than ``.json`` or
    ``.yaml`` raises UnsupportedFormatError.
    """
    menu_path = Path(path)
    ext = menu_path.suffix
    parser = _PARSERS.get(ext)
    if parser is None:
        raise UnsupportedFormatError(
            f"wrong extension: {ext or '(none)'}",
            context={"path": str(menu_path), "supported": list(SUPPORTED_EXTENSIONS)},
        )

    try:
        text = menu_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MenuFileError(
            f"Failed to read menu file: {exc}", context={"path": str(menu_path)}, cause=exc
        ) from exc

    try:
        data = parser(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise MenuFileError(
            f"Failed to parse menu file {menu_path}: {exc}",
            context={"path": str(menu_path), "format": ext.lstrip(".")},
            cause=exc,
        ) from exc

    root = parse_menu_data(data, source=str(menu_path))
    logger.debug("Loaded menu file %s (root=%r)", menu_path, root.name)
    return root
