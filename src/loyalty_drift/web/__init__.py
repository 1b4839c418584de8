"""Loyalty Drift dashboard server."""

import logging
import os
from dataclasses import dataclass

import uvicorn

logger = logging.getLogger(__name__)

APP_PATH = "loyalty_drift.web.app:app"


@dataclass(frozen=True)
class WebSettings:
    """Where and how the dashboard is served."""

    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "WebSettings":
        """Read LOYALTY_DRIFT_WEB_* variables.

        Raises:
            ValueError: If the port is not an integer in 1-65535.
        """
        env = os.environ if environ is None else environ
        raw_port = env.get("LOYALTY_DRIFT_WEB_PORT", str(cls.port))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(
                f"LOYALTY_DRIFT_WEB_PORT must be an integer, got {raw_port!r}"
            ) from None
        if not 0 < port < 65536:
            raise ValueError(f"LOYALTY_DRIFT_WEB_PORT out of range: {port}")

        return cls(
            host=env.get("LOYALTY_DRIFT_WEB_HOST", cls.host),
            port=port,
            reload=env.get("LOYALTY_DRIFT_WEB_RELOAD", "").lower() == "true",
        )


def main():
    """Entry point for loyalty-drift-web command."""
    settings = WebSettings.from_env()
    logger.info("Serving dashboard on http://%s:%d", settings.host, settings.port)
    uvicorn.run(APP_PATH, host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    main()
