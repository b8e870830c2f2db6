"""Configuration management using environment variables.

This module provides centralized configuration management using python-decouple
to read from .env files and environment variables.
"""

from dataclasses import dataclass
from typing import Optional

from decouple import config
from sqlalchemy.engine import URL

PLACEHOLDER = "Pass me from docker-compose.yaml"


class Config:
    """Base configuration class."""

    # Database
    DB_HOST: str = config('DB_HOST', default=PLACEHOLDER)
    DB_USER: str = config('DB_USER', default=PLACEHOLDER)
    DB_PASSWORD: str = config('DB_PASSWORD', default=PLACEHOLDER)
    DB_NAME: str = config('DB_NAME', default=PLACEHOLDER)
    DB_PORT: int = config('DB_PORT', default=3306, cast=int)
    DB_DRIVER: str = config('DB_DRIVER', default='mysql+pymysql')
    # Full URL override, takes precedence over the DB_* parts
    DATABASE_URL: str = config('DATABASE_URL', default='')
    DB_CONNECT_RETRIES: int = config('DB_CONNECT_RETRIES', default=10, cast=int)
    DB_RETRY_DELAY: float = config('DB_RETRY_DELAY', default=3.0, cast=float)

    # Server
    HOST: str = config('HOST', default='0.0.0.0')
    PORT: int = config('PORT', default=9000, cast=int)

    # Environment
    DEBUG: bool = config('DEBUG', default=False, cast=bool)
    ENVIRONMENT: str = config('ENVIRONMENT', default='development')

    # Logging
    LOG_LEVEL: str = config('LOG_LEVEL', default='INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = 'WARNING'


class TestingConfig(Config):
    """Testing configuration."""
    DATABASE_URL = 'sqlite:///test.db'
    DB_CONNECT_RETRIES = 1
    DB_RETRY_DELAY = 0.0
    DEBUG = True


def get_config() -> Config:
    """Get configuration based on environment."""
    env = config('ENVIRONMENT', default='development')

    if env == 'production':
        return ProductionConfig()
    elif env == 'testing':
        return TestingConfig()
    else:
        return DevelopmentConfig()


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters handed to the connector.

    Built once at startup from the application config.
    """

    host: str
    user: str
    password: str
    name: str
    port: int = 3306
    driver: str = 'mysql+pymysql'
    url: Optional[str] = None
    retries: int = 10
    retry_delay: float = 3.0

    @classmethod
    def from_mapping(cls, mapping) -> "DatabaseSettings":
        return cls(
            host=mapping['DB_HOST'],
            user=mapping['DB_USER'],
            password=mapping['DB_PASSWORD'],
            name=mapping['DB_NAME'],
            port=int(mapping['DB_PORT']),
            driver=mapping['DB_DRIVER'],
            url=mapping.get('DATABASE_URL') or None,
            retries=int(mapping['DB_CONNECT_RETRIES']),
            retry_delay=float(mapping['DB_RETRY_DELAY']),
        )

    @property
    def database_url(self):
        """SQLAlchemy URL for the target database."""
        if self.url:
            return self.url
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
        )


# Global config instance
settings = get_config()
