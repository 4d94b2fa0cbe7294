from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, validator

from bibxmp.utils import expand_pdf_paths

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Inputs(BaseModel):
    path: Union[str, list[str]]

    def get_files(self) -> list[Path]:
        paths = [self.path] if isinstance(self.path, str) else self.path
        return expand_pdf_paths(paths)


class XmpPreferences(BaseModel):
    keyword_separator: str = ","
    default_password: str = ""  # tried when the PDF is encrypted

    @validator("keyword_separator")
    def check_keyword_separator(cls, v):
        if not v:
            raise ValueError("keyword_separator must not be empty")
        return v


class BibXmpConfig(BaseModel):
    inputs: Optional[Inputs] = None
    xmp: XmpPreferences = XmpPreferences()
    log_level: str = "INFO"
    output_format: Literal["bibtex", "json"] = "bibtex"

    @validator("log_level")
    def check_log_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(LOG_LEVELS)}")
        return level


def load_config(path: Union[str, Path]) -> BibXmpConfig:
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return BibXmpConfig(**(raw.get("bibxmp") or {}))  # unpack
