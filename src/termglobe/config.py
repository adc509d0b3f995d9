"""Runtime settings: defaults, overridden by environment, overridden by flags."""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .location import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from .worldmap import DEFAULT_RESOLUTION

DEFAULT_TICK_RATE = 0.25  # seconds

ENV_ENDPOINT = "TERMGLOBE_ENDPOINT"
ENV_TIMEOUT = "TERMGLOBE_TIMEOUT"
ENV_STRICT = "TERMGLOBE_STRICT"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GlobeConfig:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    tick_rate: float = DEFAULT_TICK_RATE
    resolution: str = DEFAULT_RESOLUTION
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GlobeConfig":
        env = os.environ if environ is None else environ
        config = cls()
        if env.get(ENV_ENDPOINT):
            config = replace(config, endpoint=env[ENV_ENDPOINT])
        if env.get(ENV_TIMEOUT):
            try:
                timeout = float(env[ENV_TIMEOUT])
            except ValueError as exc:
                raise ValueError(f"{ENV_TIMEOUT} must be a number, got {env[ENV_TIMEOUT]!r}") from exc
            if timeout <= 0:
                raise ValueError(f"{ENV_TIMEOUT} must be positive, got {env[ENV_TIMEOUT]!r}")
            config = replace(config, timeout=timeout)
        if env.get(ENV_STRICT, "").strip().lower() in TRUTHY:
            config = replace(config, strict=True)
        return config

    def with_overrides(self, **overrides) -> "GlobeConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
