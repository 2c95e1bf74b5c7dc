"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (SQLite par défaut, toute URL SQLAlchemy est acceptée)
    DATABASE_URL: str = "sqlite:///./school.db"

    # Initialisation du schéma au démarrage
    INIT_DB_ON_STARTUP: bool = True
    RESET_DB_ON_STARTUP: bool = False  # destructif : DROP + CREATE de toutes les tables

    # Document de paramètres (JSON opaque, hors base)
    SETTINGS_FILE: str = "./settings.json"

    # Interface d'administration statique
    STATIC_DIR: str = "./public"

    # Environnement
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
