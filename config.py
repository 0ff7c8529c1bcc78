"""
config.py — Konfiguracja konwerterów przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks SEMTEXT_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # UrlMapper (prefiksowy): puste prefiksy = id zapisywane jako "12345"
    entity_prefix: str = ""
    concept_prefix: str = ""

    # DisiUrlMapper (adresy klienta indeksującego)
    disi_base_url: str = "http://localhost"

    # Disambiguator: minimalna przewaga najlepszego kandydata nad drugim
    disambiguation_margin: float = 1.0 / 6.0

    model_config = SettingsConfigDict(env_prefix="SEMTEXT_", env_file=".env", extra="ignore")
