"""
Configuration Loader

Handles loading and validation of configuration.
"""

import logging
from typing import Optional, Dict, Any

from .settings import Settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages library configuration."""

    _settings: Optional[Settings] = None

    @classmethod
    def load_config(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> Settings:
        """
        Load configuration from environment and files.

        Args:
            env_file: Path to .env file
            overrides: Dictionary of setting overrides (field name -> value)

        Returns:
            Loaded settings
        """
        if cls._settings is not None:
            return cls._settings

        try:
            kwargs: Dict[str, Any] = dict(overrides or {})
            if env_file:
                kwargs["_env_file"] = env_file

            cls._settings = Settings(**kwargs)

            logger.info(
                f"Configuration loaded successfully "
                f"(debug={cls._settings.debug})"
            )

            # Log non-sensitive config info
            cls._log_config_info()

            return cls._settings

        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

    @classmethod
    def get_settings(cls) -> Settings:
        """
        Get current settings instance.

        Returns:
            Current settings

        Raises:
            RuntimeError: If config not loaded
        """
        if cls._settings is None:
            raise RuntimeError(
                "Configuration not loaded. Call load_config() first."
            )
        return cls._settings

    @classmethod
    def reload_config(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> Settings:
        """
        Reload configuration.

        Args:
            env_file: Path to .env file
            overrides: Dictionary of setting overrides

        Returns:
            Reloaded settings
        """
        cls._settings = None
        return cls.load_config(env_file, overrides)

    @classmethod
    def reset(cls) -> None:
        """Forget any loaded settings."""
        cls._settings = None

    @classmethod
    def _log_config_info(cls) -> None:
        """Log non-sensitive configuration information."""
        if not cls._settings:
            return

        logger.info(f"User-Agent: {cls._settings.user_agent}")
        logger.info(f"Chat proxy: {cls._settings.chat_proxy_did}")
        logger.info(f"Timeout: {cls._settings.timeout}s")

    @classmethod
    def validate_config(cls) -> bool:
        """
        Validate current configuration.

        Returns:
            True if config is valid
        """
        if not cls._settings:
            logger.error("No configuration loaded")
            return False

        if not cls._settings.user_agent.strip():
            logger.error("Missing required config: User-Agent")
            return False

        if not cls._settings.chat_proxy_did.startswith("did:"):
            logger.error(f"Invalid chat proxy DID: {cls._settings.chat_proxy_did}")
            return False

        return True


# Convenience function
def get_settings() -> Settings:
    """Get current settings instance."""
    return ConfigLoader.get_settings()
