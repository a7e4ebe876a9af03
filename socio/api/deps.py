import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from socio.components.sanitize import SanitizationPolicy
from socio.components.site_meta import SiteMetadataPort
from socio.rules.loader import load_rules
from socio.rules.models import SocioRules

DEFAULT_RULES_FILE = "socio_rules.yaml"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        env_path = os.environ.get("SOCIO_RULES_PATH")
        self.rules_path = Path(env_path) if env_path else self.base_dir / DEFAULT_RULES_FILE


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> SocioRules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> SocioRules:
    return _load_rules_cached(settings.rules_path)


# --- Ports ---
def get_site(rules: SocioRules = Depends(get_rules)) -> SiteMetadataPort:
    return rules.site.to_site_metadata()


def get_policy(rules: SocioRules = Depends(get_rules)) -> SanitizationPolicy:
    return rules.sanitization.to_policy()
