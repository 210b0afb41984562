"""Statusline configuration.

Values are fixed at build time in DEFAULTS. Overrides can only be supplied
programmatically, which is how the tests exercise both autocompact modes.
"""

import logging
from typing import Any, Mapping, Optional

from claude_statusline.types.usage import ScalerConfig

logger = logging.getLogger(__name__)

# Default values
DEFAULTS: dict[str, Any] = {
    # Set to True when the host shows an "Autocompact buffer" line in /context
    "context/autocompactEnabled": True,
    # Measured divergence between API-reported usage and the host's /context breakdown
    "context/autocompactScaleFactor": 0.83,
    # Share of the window the host reserves for autocompaction
    "context/autocompactBufferRatio": 0.225,
    "context/defaultWindowSize": 200_000,
    "git/timeout": 3.0,
    "advanced/debugLogging": False,
}


class ConfigManager:
    """Typed access to statusline settings with fallback to DEFAULTS."""

    def __init__(self, overrides: Optional[Mapping[str, Any]] = None):
        self._settings: dict[str, Any] = dict(DEFAULTS)
        if overrides:
            unknown = set(overrides) - set(DEFAULTS)
            if unknown:
                raise KeyError(f"Unknown config keys: {', '.join(sorted(unknown))}")
            self._settings.update(overrides)

    def get_int(self, key: str) -> int:
        val = self._settings.get(key, DEFAULTS.get(key, 0))
        try:
            return int(val)
        except (ValueError, TypeError):
            logger.debug("Invalid int for %s: %r", key, val)
            return DEFAULTS.get(key, 0)

    def get_float(self, key: str) -> float:
        val = self._settings.get(key, DEFAULTS.get(key, 0.0))
        try:
            return float(val)
        except (ValueError, TypeError):
            logger.debug("Invalid float for %s: %r", key, val)
            return DEFAULTS.get(key, 0.0)

    def get_bool(self, key: str) -> bool:
        val = self._settings.get(key, DEFAULTS.get(key, False))
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            return val.lower() in ("true", "1", "yes")
        return bool(val)

    def scaler_config(self) -> ScalerConfig:
        return ScalerConfig(
            autocompact_enabled=self.get_bool("context/autocompactEnabled"),
            autocompact_scale_factor=self.get_float("context/autocompactScaleFactor"),
            autocompact_buffer_ratio=self.get_float("context/autocompactBufferRatio"),
        )
