"""Kafka sink for publishing reminders to a delivery topic."""

import json
import logging
import time
from dataclasses import dataclass, is_dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from ro_track.config import KafkaConfig
from ro_track.exceptions import SinkError
from ro_track.sinks.serialization import to_dict

logger = logging.getLogger(__name__)

DEFAULT_KEY_FIELD = "customer_id"


@dataclass
class ProducerStats:
    """Delivery statistics for one sink."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0

    @property
    def throughput(self) -> float:
        """Calculate messages per second achieved."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        duration = self.end_time - self.start_time
        return self.sent / duration if duration > 0 else 0.0


class KafkaSink:
    """Publish records as JSON, keyed so one customer's reminders stay ordered."""

    def __init__(self, config: KafkaConfig | str, key_field: str = DEFAULT_KEY_FIELD) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        key_field : str
            Record attribute used as the message key.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.key_field = key_field
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def _get_key(self, record: Any) -> str | None:
        """Extract message key from record."""
        if is_dataclass(record):
            return getattr(record, self.key_field, None)
        elif isinstance(record, dict):
            return record.get(self.key_field)
        return None

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single record to a Kafka topic."""
        value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(record)

        try:
            self.producer.produce(
                topic=topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as e:
            raise SinkError(f"Failed to produce to {topic}: {e}") from e
        self.stats.sent += 1
        self.producer.poll(0)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to a Kafka topic."""
        logger.info("Writing batch to %s: %d records", topic, len(records))

        if self.stats.start_time is None:
            self.stats.start_time = time.time()
        for record in records:
            self.send(topic, record)

        self.flush()
        self.stats.end_time = time.time()
        logger.info(
            "Batch complete: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        remaining = self.producer.flush(timeout)
        if remaining:
            logger.warning("%d messages still queued after flush", remaining)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
