"""Window settings model and file loader."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .windows import Windows

CLONE_FUNCS: Dict[str, Optional[Callable[[Any], Any]]] = {
    "none": None,
    "shallow": copy.copy,
    "deep": copy.deepcopy,
}


class WindowConfig(BaseModel):
    """Settings for building a :class:`~windowed_iterator.windows.Windows` adapter."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    window_size: int = Field(ge=0)
    copy_mode: Literal["none", "shallow", "deep"] = Field(default="none", alias="copy")
    split: Literal["whitespace", "lines"] = "whitespace"

    def clone_func(self) -> Optional[Callable[[Any], Any]]:
        return CLONE_FUNCS[self.copy_mode]

    def apply(self, iterable: Iterable[Any]) -> Windows[Any]:
        return Windows(iterable, self.window_size, clone=self.clone_func())

    def tokenize(self, text: str) -> list[str]:
        if self.split == "lines":
            return [line for line in text.splitlines() if line.strip()]
        return text.split()


def load_window_config(path: str | Path) -> WindowConfig:
    """Load window settings from a YAML or JSON file.

    JSON is a subset of YAML, so both go through ``yaml.safe_load``; files with a
    ``.json`` suffix are parsed with the stricter :mod:`json` module instead.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping/object")
    return WindowConfig.model_validate(data)
