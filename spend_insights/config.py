"""Configuration management for Spend Insights."""
import os
from typing import Any, Dict
import yaml
from dotenv import load_dotenv
from spend_insights.utils.errors import ConfigurationError
from spend_insights.utils.logging import setup_logging
from spend_insights.utils.paths import resolve_config_path
import logging

logger = logging.getLogger(__name__)


class Config:
    """Application configuration."""

    REQUIRED_SECTIONS = ('app', 'prediction')

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = resolve_config_path(config_path)
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        load_dotenv()

        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            self._config = yaml.safe_load(f)

        if not self._config:
            raise ConfigurationError(f"Empty configuration file: {self.config_path}")

        self._validate()

        log_config = self._config.get('logging', {})
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'INFO')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'json'),
            enabled=log_config.get('enabled', True)
        )

        logger.info("Configuration loaded successfully")

    def _validate(self) -> None:
        """Validate required configuration sections."""
        for section in self.REQUIRED_SECTIONS:
            if section not in self._config:
                raise ConfigurationError(f"Missing required config section: {section}")

        if not isinstance(self._config['prediction'], dict):
            raise ConfigurationError("prediction section must be a mapping")

        if 'base_url' not in self._config['prediction']:
            raise ConfigurationError("Missing prediction.base_url in config")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "prediction.base_url")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def require_env(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key)
        if value is None:
            raise ConfigurationError(f"Required environment variable not set: {key}")
        return value

    @property
    def app_name(self) -> str:
        """Get application name."""
        return self.get('app.name', 'Spend Insights')

    @property
    def app_version(self) -> str:
        """Get application version."""
        return self.get('app.version', '0.1.0')

    @property
    def debug(self) -> bool:
        """Get debug mode."""
        return self.get('app.debug', False)

    @property
    def prediction(self) -> Dict[str, Any]:
        """Raw prediction section."""
        return dict(self._config['prediction'])
