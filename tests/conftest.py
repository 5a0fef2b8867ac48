"""
Pytest configuration and fixtures
"""
import socket
import sys
import threading
import time
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from uvicorn import Config, Server

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from student_directory_api.app.core.logging_config import uvicorn_log_config  # noqa: E402
from student_directory_api.app.main import create_app  # noqa: E402
from student_directory_api.app.services.student_service import StudentService  # noqa: E402


def _find_free_port():
    """Return a TCP port that is currently free on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def service():
    """A fresh, empty store."""
    return StudentService()


@pytest.fixture
def app(service):
    """Application bound to the per-test store."""
    return create_app(service)


@pytest.fixture
def client(app):
    """In-process test client"""
    return TestClient(app)


@pytest.fixture
def unused_port():
    """A port with nothing listening on it."""
    return _find_free_port()


@pytest.fixture
def live_server():
    """Serve a fresh application with uvicorn on a free port.

    Yields the base URL; the server is stopped after the test.
    """
    port = _find_free_port()
    config = Config(app=create_app(), host="127.0.0.1", port=port, log_config=uvicorn_log_config("WARNING"))
    server = Server(config)
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            raise RuntimeError("uvicorn did not start")
        time.sleep(0.01)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=10)
