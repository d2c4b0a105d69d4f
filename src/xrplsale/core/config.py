"""
Configuration management for XRPL.Sale SDK
Includes auto API key detection from .env files
"""

import os
from enum import Enum
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import ConfigurationError

VERSION = "1.0.0"

PRODUCTION_BASE_URL = "https://api.xrpl.sale/v1"
TESTNET_BASE_URL = "https://api-testnet.xrpl.sale/v1"

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_WAIT_TIME = 1.0
DEFAULT_RETRY_MAX_WAIT_TIME = 10.0
DEFAULT_USER_AGENT = f"XRPL.Sale-Python-SDK/{VERSION}"


class Environment(str, Enum):
    """API environments"""
    PRODUCTION = "production"
    TESTNET = "testnet"


BASE_URLS = {
    Environment.PRODUCTION: PRODUCTION_BASE_URL,
    Environment.TESTNET: TESTNET_BASE_URL,
}


def parse_environment(value) -> Environment:
    """Coerce a string or enum to an Environment; empty means production"""
    if value is None or value == "":
        return Environment.PRODUCTION
    if isinstance(value, Environment):
        return value
    try:
        return Environment(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown environment '{value}'. Expected one of: production, testnet"
        )


@dataclass(frozen=True)
class RetryConfig:
    """Retry configuration for HTTP requests"""
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_RETRY_WAIT_TIME
    max_delay: float = DEFAULT_RETRY_MAX_WAIT_TIME
    exponential_base: float = 2.0


class ClientConfig(BaseModel):
    """Client configuration

    Fields left as ``None`` receive the SDK defaults during validation, and
    ``base_url`` is derived from ``environment`` unless given explicitly.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field("", description="Static API key sent as X-API-Key")
    environment: Environment = Field(Environment.PRODUCTION, description="API environment")
    base_url: str = Field(PRODUCTION_BASE_URL, description="API base URL")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Per-attempt timeout in seconds")
    max_retries: int = Field(DEFAULT_MAX_RETRIES, ge=0, description="Retries after the first attempt")
    retry_wait_time: float = Field(DEFAULT_RETRY_WAIT_TIME, ge=0, description="Base wait between retries")
    retry_max_wait_time: float = Field(DEFAULT_RETRY_MAX_WAIT_TIME, ge=0, description="Ceiling on the wait between retries")
    webhook_secret: Optional[str] = Field(None, description="Shared secret for webhook signatures")
    debug: bool = Field(False, description="Log every request and response")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User agent string")

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, data):
        """Fill unset fields and derive base_url from the environment"""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        defaults = {
            "api_key": "",
            "timeout": DEFAULT_TIMEOUT,
            "max_retries": DEFAULT_MAX_RETRIES,
            "retry_wait_time": DEFAULT_RETRY_WAIT_TIME,
            "retry_max_wait_time": DEFAULT_RETRY_MAX_WAIT_TIME,
        }
        for name, value in defaults.items():
            if data.get(name) is None:
                data[name] = value

        environment = parse_environment(data.get("environment"))
        data["environment"] = environment

        base_url = (data.get("base_url") or "").strip()
        data["base_url"] = (base_url or BASE_URLS[environment]).rstrip("/")
        return data

    def with_overrides(self, **overrides) -> "ClientConfig":
        """Copy of this config with the non-None overrides applied

        A derived base_url follows a changed environment; a custom one is kept.
        """
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self

        values = self.model_dump()
        if (
            "environment" in updates
            and "base_url" not in updates
            and self.base_url == BASE_URLS[self.environment]
        ):
            values.pop("base_url")
        values.update(updates)
        return ClientConfig(**values)

    @property
    def retry_config(self) -> RetryConfig:
        """Retry policy derived from the flat retry fields"""
        return RetryConfig(
            max_retries=self.max_retries,
            base_delay=self.retry_wait_time,
            max_delay=max(self.retry_max_wait_time, self.retry_wait_time),
        )


class ConfigManager:
    """Environment manager with auto API key detection"""

    def __init__(self):
        self._load_env_vars()

    def _load_env_vars(self) -> None:
        """Load environment variables from the first .env file found"""
        current_dir = Path.cwd()
        env_files = [
            current_dir / ".env",
            current_dir / ".env.local",
            Path.home() / ".xrplsale" / ".env",
        ]

        for env_file in env_files:
            if env_file.exists():
                load_dotenv(env_file)
                break

    def get_api_key(self) -> Optional[str]:
        """Get API key with auto-detection priority"""
        sources = [
            "XRPLSALE_API_KEY",
            "XRPL_SALE_API_KEY",
        ]

        for env_var in sources:
            api_key = os.getenv(env_var)
            if api_key:
                return api_key

        return None

    def get_environment(self) -> Optional[str]:
        return os.getenv("XRPLSALE_ENVIRONMENT") or None

    def get_base_url(self) -> Optional[str]:
        return os.getenv("XRPLSALE_BASE_URL") or None

    def get_timeout(self) -> Optional[float]:
        """Get timeout with environment override"""
        value = os.getenv("XRPLSALE_TIMEOUT")
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            raise ConfigurationError(f"XRPLSALE_TIMEOUT must be a number, got '{value}'")

    def get_webhook_secret(self) -> Optional[str]:
        return os.getenv("XRPLSALE_WEBHOOK_SECRET") or None

    def get_debug(self) -> bool:
        return os.getenv("XRPLSALE_DEBUG", "").lower() in ("1", "true", "yes", "on")

    def get_config(self, **overrides) -> ClientConfig:
        """Build a config from the environment; explicit overrides win"""
        values = {
            "api_key": self.get_api_key() or "",
            "environment": self.get_environment(),
            "base_url": self.get_base_url(),
            "timeout": self.get_timeout(),
            "webhook_secret": self.get_webhook_secret(),
            "debug": self.get_debug(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ClientConfig(**values)


# Global configuration manager instance
config_manager = ConfigManager()


def get_default_config(**overrides) -> ClientConfig:
    """Get default configuration with environment overrides"""
    return config_manager.get_config(**overrides)


def get_api_key() -> Optional[str]:
    """Get API key with auto-detection"""
    return config_manager.get_api_key()
