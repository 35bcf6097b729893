"""Advisor endpoint configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ADVISOR_URL = "https://api.siliconflow.com/v1/chess/analyze"

ENV_API_KEY = "ROOKIE_ADVISOR_API_KEY"
ENV_URL = "ROOKIE_ADVISOR_URL"
ENV_DEPTH = "ROOKIE_ADVISOR_DEPTH"
ENV_TIMEOUT = "ROOKIE_ADVISOR_TIMEOUT"


@dataclass(slots=True, frozen=True)
class AdvisorConfig:
    """Connection settings for the remote move advisor.

    Args:
        api_key: Bearer token sent with every request.
        base_url: Analysis endpoint receiving ``{"fen", "depth"}``.
        depth: Analysis depth requested; kept shallow for fast replies.
        timeout: Per-request timeout in seconds.
        max_retries: Retries on 5xx responses.
    """

    api_key: str
    base_url: str = DEFAULT_ADVISOR_URL
    depth: int = 3
    timeout: float = 10.0
    max_retries: int = 2

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> AdvisorConfig:
        """Build settings from ``ROOKIE_ADVISOR_*`` environment variables."""
        env = os.environ if environ is None else environ
        api_key = env.get(ENV_API_KEY, "").strip()
        if not api_key:
            raise ValueError(f"{ENV_API_KEY} is not set")
        try:
            depth = int(env.get(ENV_DEPTH, "3"))
            timeout = float(env.get(ENV_TIMEOUT, "10"))
        except ValueError as exc:
            raise ValueError(f"Invalid advisor setting: {exc}") from None
        return cls(
            api_key=api_key,
            base_url=env.get(ENV_URL, DEFAULT_ADVISOR_URL),
            depth=depth,
            timeout=timeout,
        )
