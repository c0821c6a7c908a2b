"""Config fingerprinting for reproducibility checks."""

from __future__ import annotations

import hashlib
import json

from sutrachain.config.model import SutraChainConfig


def config_fingerprint(config: SutraChainConfig) -> str:
    """Return a stable hash fingerprint of the resolved config."""
    payload = {
        "default_strategy": config.default_strategy,
        "confidence_step": config.confidence_step,
        "families": sorted((family, family_config.strategy) for family, family_config in config.families.items()),
        "disabled_rules": sorted(config.disabled_rules),
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()
