"""Aurora PostgreSQL client: engine and session management."""

import json

import boto3
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session, sessionmaker

from core.config import Config
from core.errors import ItineraryError


class AuroraClient:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.aurora_secret_arn:
            if self._secret_cache is None:
                client = boto3.client("secretsmanager", region_name=self._config.aws_region)
                secret = client.get_secret_value(SecretId=self._config.aurora_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.aurora_host,
            "port": str(self._config.aurora_port),
            "dbname": self._config.aurora_database,
            "user": self._config.aurora_user,
            "password": self._config.aurora_password,
        }

    def database_url(self) -> str | URL:
        if self._config.database_url:
            return self._config.database_url

        creds = self._get_credentials()
        return URL.create(
            "postgresql+psycopg",
            host=creds.get("host", self._config.aurora_host),
            port=int(creds.get("port", self._config.aurora_port)),
            database=creds.get("dbname", self._config.aurora_database),
            username=creds.get("username", creds.get("user", self._config.aurora_user)),
            password=creds.get("password", self._config.aurora_password),
        )

    def connect(self) -> None:
        self._engine = create_engine(self.database_url(), pool_pre_ping=True)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise ItineraryError("AuroraClient is not connected. Call connect() first.")
        return self._engine

    def session(self) -> Session:
        """Open a new session; use it as a context manager."""
        if self._session_factory is None:
            raise ItineraryError("AuroraClient is not connected. Call connect() first.")
        return self._session_factory()

    def health_check(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def __enter__(self) -> "AuroraClient":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
