"""
Centralized settings for the custom pricing API.

Values come from the process environment, with an optional .env file at the
project root loaded first.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


DEFAULT_ORIGIN_PATTERNS = (
    r'^https://[a-z0-9-]+\.myshopify\.com$',
    r'^https://(www\.)?circusconcepts\.com$',
    r'^https://[a-z0-9-]+\.shopifypreview\.com$',
)

VARIANT_POLICIES = ('fixed', 'round_robin')


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _split_list(raw: Optional[str]) -> tuple:
    """Split a comma-separated env value, dropping blanks."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(',') if part.strip())


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == '':
        return default
    value = raw.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError(f"Invalid boolean value: {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Application settings, built once at startup and passed around."""

    # Shopify Admin API
    shop: str = ''
    admin_token: str = ''
    api_version: str = '2024-10'
    upstream_timeout: float = 15.0

    # Variant selection
    variant_id: Optional[str] = None
    variant_pool: tuple = ()
    variant_policy: str = 'fixed'

    # Server
    host: str = '0.0.0.0'
    port: int = 3000

    # Cross-origin gating
    origin_patterns: tuple = DEFAULT_ORIGIN_PATTERNS
    cors_strict: bool = True

    log_level: str = 'INFO'

    def __post_init__(self):
        if self.variant_policy not in VARIANT_POLICIES:
            raise ValueError(
                f"Unknown variant policy {self.variant_policy!r}; "
                f"expected one of {', '.join(VARIANT_POLICIES)}"
            )

    @property
    def variant_endpoint_base(self) -> str:
        """Base URL for the Admin API variants resource."""
        return f"https://{self.shop}/admin/api/{self.api_version}/variants"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> 'Settings':
        """Build settings from an environment mapping."""
        variant_id = (env.get('CUSTOM_VARIANT_ID') or '').strip() or None
        variant_pool = _split_list(env.get('CUSTOM_VARIANT_IDS'))

        # Fixed variant superseded the pool; only fall back to the pool
        # when no single id is configured.
        policy = (env.get('VARIANT_POLICY') or '').strip().lower()
        if not policy:
            policy = 'fixed' if variant_id else 'round_robin'

        origin_patterns = _split_list(env.get('CORS_ORIGIN_PATTERNS')) or DEFAULT_ORIGIN_PATTERNS

        return cls(
            shop=(env.get('SHOPIFY_SHOP') or '').strip(),
            admin_token=(env.get('SHOPIFY_ADMIN_TOKEN') or '').strip(),
            api_version=(env.get('SHOPIFY_API_VERSION') or '2024-10').strip(),
            upstream_timeout=float(env.get('SHOPIFY_TIMEOUT') or 15.0),
            variant_id=variant_id,
            variant_pool=variant_pool,
            variant_policy=policy,
            host=(env.get('HOST') or '0.0.0.0').strip(),
            port=int(env.get('PORT') or 3000),
            origin_patterns=origin_patterns,
            cors_strict=_parse_bool(env.get('CORS_STRICT'), True),
            log_level=(env.get('LOG_LEVEL') or 'INFO').strip().upper(),
        )

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from .env (if present) and the process environment."""
        root = project_root or get_project_root()
        dotenv_path = root / '.env'
        if dotenv_path.exists():
            load_dotenv(dotenv_path=dotenv_path, override=False)
        return cls.from_env(os.environ)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
