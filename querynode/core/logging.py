# ------------------------------------------------------------
# Module: querynode/core/logging.py
# Purpose: Centralized configuration for unified logging across the query node.
# ------------------------------------------------------------

"""Configure unified, stdout-based logging for the query node.

Responsibilities
----------------
- Initialize a single consistent logging setup at startup (API or CLI).
- Respect toggles from `settings` (log level, mute, access logs).
- Align Uvicorn's loggers with the app-level configuration.

Notes
-----
- `basicConfig` is idempotent unless `force=True`.
- Use `settings.MUTE_ALL_LOGS` to silence all logs for CI or benchmarks.
"""

import logging
import sys

from querynode.core.config import Settings, settings as default_settings


def configure_logging(cfg: Settings | None = None, stream=None) -> None:
    """Initialize global logging once at startup.

    Notes
    -----
    - Hard-mutes all logs if `MUTE_ALL_LOGS` is set.
    - Keeps Uvicorn loggers aligned with app-level log level.
    - The CLI passes `stream=sys.stderr` so stdout stays pure JSON.
    """
    cfg = cfg or default_settings

    # Hard mute: disables ALL logging below CRITICAL globally.
    if cfg.MUTE_ALL_LOGS:
        logging.disable(logging.CRITICAL)
        return

    logging.basicConfig(
        level=cfg.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=stream or sys.stdout,
    )
    logging.getLogger("querynode").setLevel(cfg.LOG_LEVEL)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(cfg.LOG_LEVEL)

    if not cfg.ACCESS_LOG:
        logging.getLogger("uvicorn.access").disabled = True
