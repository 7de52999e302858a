"""Parser settings, optionally loaded from a YAML file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gql_doc_catalog.errors import SettingsError

DEFAULT_ENDPOINTS = {
    "us": "https://api.superops.ai/msp",
    "eu": "https://euapi.superops.ai/msp",
}

DEFAULT_SECTION_TITLES = {
    "queries": "Queries",
    "mutations": "Mutations",
    "types": "Types",
}


class ParserSettings(BaseModel):
    """Knobs for adapting the parser to a revision of the reference page."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    section_titles: dict[str, str] = DEFAULT_SECTION_TITLES
    default_endpoints: dict[str, str] = DEFAULT_ENDPOINTS

    @field_validator("section_titles")
    @classmethod
    def merge_titles(cls, titles: dict[str, str]) -> dict[str, str]:
        unknown = set(titles) - set(DEFAULT_SECTION_TITLES)
        if unknown:
            raise ValueError(f"unknown sections: {', '.join(sorted(unknown))}")
        return {**DEFAULT_SECTION_TITLES, **titles}


def load_settings(path: Path | None = None) -> ParserSettings:
    """Load settings from a YAML file, or return defaults when *path* is None.

    A file may override a single section title; the others keep their defaults.
    """
    if path is None:
        return ParserSettings()

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Cannot read settings from {path}: {e}") from e

    if data is None:
        return ParserSettings()
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")

    try:
        return ParserSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {path}: {e}") from e
