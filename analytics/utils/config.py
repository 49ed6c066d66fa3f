# analytics/utils/config.py
from typing import List, Literal
from pydantic import BaseModel
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file before defining settings (a missing file is fine)
load_dotenv()

CredentialsSource = Literal["file", "env", "default"]


class StoreConfig(BaseModel):
    """Explicit connection settings for the document store."""
    credentials_source: CredentialsSource = "default"
    credentials_file: str | None = None  # used when credentials_source == "file"
    credentials_json: str | None = None  # used when credentials_source == "env"
    project_id: str | None = None
    database: str | None = None


class Settings(BaseSettings):
    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # --- Firestore ---
    credentials_source: CredentialsSource = "default"
    google_application_credentials: str | None = None
    firestore_credentials_json: str | None = None
    firestore_project_id: str | None = None
    firestore_database: str | None = None

    # --- CORS ---
    cors_allow_origins: List[str] = [
        "http://localhost:3000",
        "https://mirutabi.com",
        "https://tabista.vercel.app",
    ]

    def store_config(self) -> StoreConfig:
        return StoreConfig(
            credentials_source=self.credentials_source,
            credentials_file=self.google_application_credentials,
            credentials_json=self.firestore_credentials_json,
            project_id=self.firestore_project_id,
            database=self.firestore_database,
        )


settings = Settings()
