import logging
import os
import yaml

from settings_schema import EngineThresholds, validate_settings

APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


class YamlConfig:
    """Load and save threshold overrides in a YAML file."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path or os.environ.get("ANALYTICS_CONFIG", "thresholds.yaml")

    def load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must contain a mapping")
        return data

    def save(self, data: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(dict(data), f, sort_keys=True)

    def load_thresholds(self) -> EngineThresholds:
        """Return defaults merged with any overrides found in the file."""
        data = self.load()
        thresholds = validate_settings(data)
        logger.debug("loaded thresholds from %s (%d sections overridden)", self.path, len(data))
        return thresholds

    def save_thresholds(self, thresholds: EngineThresholds) -> None:
        self.save(thresholds.model_dump(mode="json"))


def load_thresholds(path: str | None = None) -> EngineThresholds:
    return YamlConfig(path).load_thresholds()
