"""Shared fixtures.

The service is pointed at a throwaway SQLite file before any ``items_svc``
module is imported, since settings and the engine are built at import time.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="items-svc-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'items.db')}"
os.environ["AWS_REGION"] = "us-east-1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from items_svc.db.init_db import init_db  # noqa: E402
from items_svc.main import app  # noqa: E402
from items_svc.services.metrics import MetricsEmitter, get_metrics_emitter  # noqa: E402


class RecordingEmitter(MetricsEmitter):
    """Emitter that keeps samples in memory instead of calling CloudWatch."""

    def __init__(self):
        super().__init__(cloudwatch_client=object())
        self.samples: list[tuple[str, float]] = []

    def put_latency(self, query_type: str, latency_ms: float) -> None:
        self.samples.append((query_type, latency_ms))

    @property
    def query_types(self) -> list[str]:
        return [query_type for query_type, _ in self.samples]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def recorder() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
async def client(anyio_backend, recorder: RecordingEmitter):
    """HTTP client against a freshly bootstrapped, empty items table."""
    await init_db()
    app.dependency_overrides[get_metrics_emitter] = lambda: recorder
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
