"""Settings from environment variables, optionally loaded from a .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

import phonenumbers
from dotenv import load_dotenv

DEFAULT_REGION_ENV = "EGPHONE_DEFAULT_REGION"


@dataclass(frozen=True)
class Settings:
    """
    default_region: region assumed for input without a leading +.
    None means only international (E.164-style) input is parsed.
    """

    default_region: str | None = None

    def __post_init__(self):
        if self.default_region is None:
            return
        region = self.default_region.strip().upper()
        if not region:
            object.__setattr__(self, "default_region", None)
            return
        if region not in phonenumbers.SUPPORTED_REGIONS:
            raise ValueError(f"Unknown default region: {self.default_region!r}")
        object.__setattr__(self, "default_region", region)


def load_settings(env_file: Path | None = None) -> Settings:
    """Read settings from the environment. Loads env_file (or ./.env) first if it exists.

    Variables already set in the environment win over the file. Nothing calls this
    implicitly; pass the result to build_validator to opt in.
    """
    path = env_file if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)
    return Settings(default_region=os.environ.get(DEFAULT_REGION_ENV, "").strip() or None)
