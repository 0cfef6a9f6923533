from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from repo root for local development and scripts.
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=ENV_PATH)


class SnapshotPaths(BaseModel):
    holdings: str
    timeline: str


class AnalyticsConfig(BaseModel):
    snapshot_paths: SnapshotPaths


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)
    holdings_snapshot_path: str = Field(default="./data/holding.json", alias="HOLDINGS_SNAPSHOT_PATH")
    timeline_snapshot_path: str = Field(default="./data/performance-timeline.json", alias="TIMELINE_SNAPSHOT_PATH")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8080, alias="PORT")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    def analytics_config(self) -> AnalyticsConfig:
        return AnalyticsConfig(
            snapshot_paths=SnapshotPaths(
                holdings=self.holdings_snapshot_path,
                timeline=self.timeline_snapshot_path,
            )
        )

    def cors_origin_list(self) -> list[str]:
        return [part.strip() for part in self.cors_origins.split(",") if part.strip()]

settings = Settings()
