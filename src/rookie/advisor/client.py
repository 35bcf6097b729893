"""HTTP client for the remote move advisor."""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from rookie.advisor.config import AdvisorConfig

_LOGGER = logging.getLogger(__name__)


class AdvisorError(Exception):
    """The advisor could not produce a usable reply."""


class AdvisorClient:
    """Asks the advisor endpoint for a move in a given position text."""

    def __init__(
        self,
        config: AdvisorConfig,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        if session is None:
            session = requests.Session()
            retry_strategy = Retry(
                total=config.max_retries,
                backoff_factor=0.5,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=None,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def best_move(self, fen: str) -> str:
        """Return the advisor's raw move text for *fen*.

        Raises:
            AdvisorError: on transport failure, non-2xx status, a body that is
                not JSON, or a reply without a ``best_move`` string.
        """
        try:
            response = self.session.post(
                self.config.base_url,
                json={"fen": fen, "depth": self.config.depth},
                headers={"Authorization": f"Bearer {self.config.api_key}"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise AdvisorError(f"Advisor request failed: {exc}") from exc

        if not response.ok:
            raise AdvisorError(f"Advisor request failed: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise AdvisorError("Advisor reply is not JSON") from exc

        best_move = data.get("best_move") if isinstance(data, dict) else None
        if not isinstance(best_move, str):
            raise AdvisorError("Advisor reply has no best_move")

        _LOGGER.debug(
            "Advisor suggested %s (score %s) for %s", best_move, data.get("score"), fen
        )
        return best_move

    def close(self) -> None:
        self.session.close()
