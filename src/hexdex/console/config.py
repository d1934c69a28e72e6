"""Configuration for the console buffer and its readers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from hexdex.console.colors import DEFAULT_FOREGROUND, DEFAULT_HIGHLIGHT, Color

logger = logging.getLogger(__name__)


@dataclass
class ConsoleConfig:
    """Console settings.

    ``escape_timeout`` is how long (seconds) a lone ESC byte waits for the
    rest of an escape sequence before it is reported as the Escape key.
    """

    prompt: str = "> "
    default_color: Color = DEFAULT_FOREGROUND
    default_highlight: Color = DEFAULT_HIGHLIGHT
    escape_timeout: float = 0.05
    write_log_path: str = ""

    @classmethod
    def from_env(cls) -> ConsoleConfig:
        config = cls()
        prompt = os.environ.get("HEXDEX_PROMPT")
        if prompt is not None:
            config.prompt = prompt
        timeout = os.environ.get("HEXDEX_ESCAPE_TIMEOUT")
        if timeout:
            try:
                config.escape_timeout = float(timeout)
            except ValueError:
                logger.warning(
                    "Ignoring invalid HEXDEX_ESCAPE_TIMEOUT %r; using %s",
                    timeout,
                    config.escape_timeout,
                )
        config.write_log_path = os.environ.get("HEXDEX_WRITE_LOG", "")
        return config
