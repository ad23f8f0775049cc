import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.site_clock import SiteClock, create_site_clock
from src.adapters.sqlite.repos import SQLiteOptionStore
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("CHAT_BUTTON_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "chat_button.db")
        self.rules_path = Path(
            os.environ.get("CHAT_BUTTON_RULES", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Adapters ---
def get_option_store(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> SQLiteOptionStore:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return SQLiteOptionStore(settings.db_path, rules.site.option_key)


def get_clock(rules: Rules = Depends(get_rules)) -> SiteClock:
    return create_site_clock(rules.site.timezone)
