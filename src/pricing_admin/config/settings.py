"""
Centralized settings and path configuration for the pricing admin tool.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


ENV_PREFIX = 'PRICING_ADMIN_'


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def get_package_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    return value if value else default


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Seed document loaded into the store at startup
    seed_path: Path

    # Logging
    log_level: str = 'INFO'
    log_file: Optional[Path] = None

    # API
    api_title: str = 'Pricing Admin API'
    cors_origins: list[str] = field(default_factory=lambda: ['*'])

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        seed_path = _env('SEED_PATH')
        log_file = _env('LOG_FILE')
        origins = _env('CORS_ORIGINS', '*')

        return cls(
            project_root=root,
            seed_path=Path(seed_path) if seed_path else get_package_root() / 'data' / 'seed.json',
            log_level=_env('LOG_LEVEL', 'INFO').upper(),
            log_file=Path(log_file) if log_file else None,
            cors_origins=[o.strip() for o in origins.split(',') if o.strip()],
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
