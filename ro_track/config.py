"""Configuration management for ro-track."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ro_track.exceptions import ConfigurationError

STORAGE_BACKENDS = ("local", "postgres")


@dataclass
class StorageConfig:
    """Which store backs the session and where local data lives."""

    backend: str = "local"
    data_file: Path = field(default_factory=lambda: Path("ro-track-data.json"))

    def __post_init__(self) -> None:
        if self.backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend {self.backend!r}; expected one of {STORAGE_BACKENDS}"
            )


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "rotrack"
    user: str = "postgres"
    password: str = "postgres"
    max_retries: int = 3

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class KafkaConfig:
    """Kafka producer configuration for reminder delivery."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    reminder_topic: str = "ro-track.reminders"

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ScheduleConfig:
    """Payment schedule horizon."""

    years_ahead: int = 5


@dataclass
class RoTrackConfig:
    """Main configuration for ro-track."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "RoTrackConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            backend=os.getenv("RO_TRACK_BACKEND", "local").lower(),
            data_file=Path(os.getenv("RO_TRACK_DATA_FILE", "ro-track-data.json")),
        )

        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "rotrack"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            max_retries=int(os.getenv("POSTGRES_MAX_RETRIES", "3")),
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            reminder_topic=os.getenv("REMINDER_TOPIC", "ro-track.reminders"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        years_ahead = int(os.getenv("SCHEDULE_YEARS_AHEAD", "5"))
        if years_ahead < 0:
            raise ConfigurationError("SCHEDULE_YEARS_AHEAD must not be negative")

        return cls(
            storage=storage,
            postgres=postgres,
            kafka=kafka,
            output=output,
            schedule=ScheduleConfig(years_ahead=years_ahead),
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
