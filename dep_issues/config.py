"""Configuration loading and validation.

Usage:
    config = load("dep-issues.yaml")          # raises ConfigError on bad config
    client = GitHubClient(config.url, config.token, config.timeout)

The file is optional: with no file at the default path, the GitHub settings
come from the environment (GITHUB_API_URL, GITHUB_TOKEN / GITHUB_OAUTH) or
fall back to the public API without a token.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from dep_issues.client import DEFAULT_API_URL

DEFAULT_CONFIG_PATH = "dep-issues.yaml"
DEFAULT_TIMEOUT = 30


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass
class Config:
    url: str = DEFAULT_API_URL
    token: str | None = None
    timeout: int = DEFAULT_TIMEOUT


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """Load configuration from a YAML file, then apply environment overrides.

    A missing file is only an error when *config_path* was chosen explicitly
    (i.e. differs from the default).

    Raises:
        ConfigError: if the file is missing (non-default path), malformed,
                     or holds an invalid timeout.
    """
    path = Path(config_path)
    raw: dict = {}

    if path.exists():
        try:
            with path.open(encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")
    elif config_path != DEFAULT_CONFIG_PATH:
        raise ConfigError(f"Config file not found: '{config_path}'")

    github = raw.get("github") or {}
    if not isinstance(github, dict):
        raise ConfigError("'github' must be a mapping.")

    url = os.environ.get("GITHUB_API_URL") or github.get("url") or DEFAULT_API_URL
    token = (
        os.environ.get("GITHUB_TOKEN")
        or os.environ.get("GITHUB_OAUTH")
        or github.get("token")
    )

    config = Config(
        url=str(url).strip(),
        token=str(token).strip() if token else None,
        timeout=_parse_timeout(github.get("timeout", DEFAULT_TIMEOUT)),
    )
    return config


def _parse_timeout(value) -> int:
    try:
        timeout = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'github.timeout' must be an integer, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"'github.timeout' must be positive, got {timeout}")
    return timeout
