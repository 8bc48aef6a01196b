"""Host entry point: environment, logging and match setup in one call."""

from __future__ import annotations

import logging

from broadside.game.app.match import Match, create_match
from broadside.game.infra.config import load_default_env_files, load_match_config
from broadside.game.infra.logging import setup_logging
from broadside.runtime.events import EventBus

logger = logging.getLogger(__name__)


def bootstrap_match(*, events: EventBus | None = None, configure_logs: bool = True) -> Match:
    """Load env files, configure logging and return a started match."""
    load_default_env_files()
    if configure_logs:
        setup_logging()
    config = load_match_config()
    match = create_match(config, events=events)
    match.start()
    logger.info("match_started phase=%s", match.phase)
    return match
