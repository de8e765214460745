"""
Unified Configuration System for the portfolio site

This module provides a centralized configuration system that consolidates all application settings,
supports environment-based overrides, and provides type-safe configuration access.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List
import streamlit as st
import os
from pathlib import Path


DEFAULT_DATA_DIR = str(Path(__file__).resolve().parent.parent / "data")


@dataclass
class ContentConfig:
    """Content files location and display limits"""
    data_dir: str = DEFAULT_DATA_DIR
    max_goals: int = 3
    max_certifications: int = 5
    max_projects: int = 6
    max_gallery_images: int = 8

    @classmethod
    def from_secrets(cls) -> 'ContentConfig':
        """Load content config from Streamlit secrets"""
        # In test environment, prefer environment variables
        if os.getenv("PYTEST_CURRENT_TEST") is not None:
            return cls(data_dir=os.getenv("PORTFOLIO_DATA_DIR", DEFAULT_DATA_DIR))

        try:
            return cls(data_dir=st.secrets.get("PORTFOLIO_DATA_DIR", DEFAULT_DATA_DIR))
        except Exception:
            # Fallback to environment variables if secrets not available
            return cls(data_dir=os.getenv("PORTFOLIO_DATA_DIR", DEFAULT_DATA_DIR))

    def limits(self) -> Dict[str, int]:
        """Display limits keyed by section"""
        return {
            "goals": self.max_goals,
            "certifications": self.max_certifications,
            "projects": self.max_projects,
            "gallery": self.max_gallery_images,
        }


@dataclass
class ChatConfig:
    """Chat widget configuration"""
    reply_delay_seconds: float = 1.0
    tooltip: str = "Any questions?"
    empty_state_text: str = "Start a conversation! Send a message below."
    input_placeholder: str = "Type a message..."
    status_label: str = "Online"


@dataclass
class ValidationConfig:
    """Contact form field length rules"""
    name_min_length: int = 2
    name_max_length: int = 100
    message_min_length: int = 10
    message_max_length: int = 1000


@dataclass
class UIConfig:
    """User interface configuration"""
    app_title: str = "Portfolio"
    page_icon: str = "💼"
    layout: str = "wide"
    footer_text: str = "Built with Streamlit"


@dataclass
class LoggingConfig:
    """Logging and monitoring configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    enable_file_logging: bool = False
    log_file: str = "logs/app.log"


@dataclass
class AppConfig:
    """Main application configuration"""
    content: ContentConfig = field(default_factory=ContentConfig)
    chat: ChatConfig = field(default_factory=ChatConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Environment settings
    environment: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    @classmethod
    def load(cls) -> 'AppConfig':
        """Build this configuration class with content location from secrets"""
        config = cls()
        config.content = ContentConfig.from_secrets()
        return config

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not Path(self.content.data_dir).is_dir():
            errors.append(f"Content directory not found: {self.content.data_dir}")

        for section, limit in self.content.limits().items():
            if limit < 0:
                errors.append(f"Display limit for '{section}' must not be negative")

        if self.chat.reply_delay_seconds < 0:
            errors.append("Chat reply delay must not be negative")

        rules = self.validation
        if rules.name_min_length > rules.name_max_length:
            errors.append("Name length bounds are inverted")
        if rules.message_min_length > rules.message_max_length:
            errors.append("Message length bounds are inverted")

        if self.logging.enable_file_logging:
            log_dir = Path(self.logging.log_file).parent
            if not log_dir.exists():
                log_dir.mkdir(parents=True, exist_ok=True)

        return errors


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance"""
    global _config
    if _config is None:
        from config.environments import get_environment_config
        _config = get_environment_config()

        # Validate configuration
        errors = _config.validate()
        if errors:
            import warnings
            for error in errors:
                warnings.warn(f"Configuration error: {error}")

    return _config


def reload_config() -> AppConfig:
    """Reload configuration (useful for testing)"""
    global _config
    _config = None
    return get_config()
