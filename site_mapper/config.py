# === FILE: site_mapper/config.py ===
"""
Loading and validation of the site_mapper crawl configuration.
The schema is described with Pydantic; keys may be given in snake_case
or in camelCase (``checkHost``, ``blackList``, ...).
"""
from __future__ import annotations

import json
import os
import errno
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class CrawlerConfig(BaseModel):
    """Configuration of one crawl run."""
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    check_host: str = Field(..., description="Origin prefix that is crawled, used verbatim, e.g. http://127.0.0.1:3000.")
    output_host: Optional[str] = Field(None, description="Prefix written into sitemap <loc>; defaults to check_host.")
    paths: List[str] = Field(..., min_length=1, description="Seed paths or absolute URLs.")
    black_list: List[str] = Field(default_factory=list, description="URLs never written to the sitemap.")
    check_external_links: bool = Field(False, description="Fetch cross-origin links to verify they are alive.")
    sitemap_path: Optional[Path] = Field(None, description="Where to write sitemap.xml; nothing is written if unset.")
    timeout: float = Field(10.0, gt=0, description="Per-page navigation timeout (seconds).")
    settle_delay: float = Field(0.5, ge=0, description="Pause after each navigation (seconds).")
    user_agent: str = Field("SiteMapperBot/1.0", min_length=1, description="User-Agent header.")

    @field_validator("check_host")
    def _check_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("check_host must start with http:// or https://")
        return v

    @model_validator(mode="before")
    @classmethod
    def _default_output_host(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if data.get("output_host") is None and data.get("outputHost") is None:
            data = dict(data)
            data.pop("outputHost", None)
            data["output_host"] = data.get("check_host", data.get("checkHost"))
        return data


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Read a YAML or JSON file and return a validated CrawlerConfig.
    Raises FileNotFoundError when the file is missing.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config", "ValidationError"]
