from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any

from boto3 import client
from botocore.config import Config
from fastapi import BackgroundTasks

from items_svc.core.config import get_settings


LOG = logging.getLogger(__name__)
settings = get_settings()

LATENCY_METRIC_NAME = "DatabaseQueryLatency"
SERVICE_NAME = "items-svc"
SERVICE_DIMENSION = "ServiceName"
QUERY_TYPE_DIMENSION = "QueryType"


class MetricsEmitter:
    """Best-effort reporter of store latency to CloudWatch."""

    def __init__(self, cloudwatch_client: Any | None = None):
        self._client = cloudwatch_client
        self._lock = threading.Lock()

    @property
    def cloudwatch(self) -> Any:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = client(
                        "cloudwatch",
                        region_name=settings.AWS_REGION,
                        config=Config(
                            connect_timeout=settings.METRICS_TIMEOUT,
                            read_timeout=settings.METRICS_TIMEOUT,
                            retries={"max_attempts": 0},
                        ),
                    )
        return self._client

    def put_latency(self, query_type: str, latency_ms: float) -> None:
        """Submit one latency datum tagged with the query type.

        Never raises: a failed submission is logged and dropped.
        """
        try:
            self.cloudwatch.put_metric_data(
                Namespace=settings.METRICS_NAMESPACE,
                MetricData=[
                    {
                        "MetricName": LATENCY_METRIC_NAME,
                        "Value": latency_ms,
                        "Unit": "Milliseconds",
                        "Dimensions": [
                            {"Name": SERVICE_DIMENSION, "Value": SERVICE_NAME},
                            {"Name": QUERY_TYPE_DIMENSION, "Value": query_type},
                        ],
                    }
                ],
            )
        except Exception as exc:  # noqa: BLE001
            LOG.error("failed to send metric to CloudWatch query_type=%s err=%s", query_type, exc)


_emitter = MetricsEmitter()


def get_metrics_emitter() -> MetricsEmitter:
    """FastAPI dependency returning the process-wide emitter."""
    return _emitter


async def record_latency(
    emitter: MetricsEmitter,
    background_tasks: BackgroundTasks,
    query_type: str,
    latency_ms: float,
) -> None:
    """Dispatch a latency sample according to METRICS_ENABLED / METRICS_INLINE.

    Inline mode holds the response until CloudWatch answers; otherwise the
    submission runs as a background task after the response is sent.
    """
    if not settings.METRICS_ENABLED:
        return
    if settings.METRICS_INLINE:
        await asyncio.to_thread(emitter.put_latency, query_type, latency_ms)
    else:
        background_tasks.add_task(emitter.put_latency, query_type, latency_ms)
