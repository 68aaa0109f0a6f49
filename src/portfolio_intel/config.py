"""Client configuration: API base URLs, timeout and curated projects."""

import os
from pathlib import Path

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: pip install pyyaml"
    ) from e
from pydantic import BaseModel, Field

from portfolio_intel.models.site import Project

DEFAULT_API_BASE = "http://localhost:8080"
ENV_API_BASE = "PORTFOLIO_API_BASE"
ENV_API_TIMEOUT = "PORTFOLIO_API_TIMEOUT"


class ClientConfig(BaseModel):
    """Settings for talking to the portfolio backend."""

    api_bases: list[str] = Field(default_factory=list, description="Tried after explicit/env bases")
    timeout: float = Field(default=20.0, gt=0)
    featured_projects: list[Project] = Field(default_factory=list)

    def candidate_bases(self, base_url: str | None = None) -> list[str]:
        """
        Base URLs in the order they are tried, without duplicates:
        explicit base_url, PORTFOLIO_API_BASE, configured api_bases, localhost default.
        """
        ordered = [base_url, os.environ.get(ENV_API_BASE), *self.api_bases, DEFAULT_API_BASE]
        bases: list[str] = []
        for base in ordered:
            base = (base or "").strip().rstrip("/")
            if base and base not in bases:
                bases.append(base)
        return bases

    def with_env(self) -> "ClientConfig":
        """Apply PORTFOLIO_API_TIMEOUT on top of this config."""
        env_timeout = (os.environ.get(ENV_API_TIMEOUT) or "").strip()
        if not env_timeout:
            return self
        try:
            timeout = float(env_timeout)
        except ValueError:
            raise ValueError(f"Invalid {ENV_API_TIMEOUT}: {env_timeout!r}")
        return self.model_copy(update={"timeout": timeout})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """Load config from YAML. Supports a nested `api:` section or flat keys."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        api = data.get("api", {}) or {}

        def _get(key: str, default=None):
            return api.get(key, data.get(key, default))

        flat: dict = {}
        bases = _get("bases") or _get("api_bases") or _get("base_url") or []
        flat["api_bases"] = [str(b) for b in ([bases] if isinstance(bases, str) else bases)]
        timeout = _get("timeout")
        if timeout is not None:
            flat["timeout"] = timeout
        flat["featured_projects"] = data.get("featured_projects") or []
        return cls.model_validate(flat)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "ClientConfig":
        """YAML file when given, defaults otherwise; environment applied last."""
        config = cls.from_yaml(path) if path else cls()
        return config.with_env()
