from typing import Generator
from uuid import uuid4
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture
from testcontainers.redis import RedisContainer  # type: ignore

from tasklist.config import Settings, get_settings
from tasklist.main import app as main_app


@pytest.fixture(scope="session")
def redis_container() -> Generator[RedisContainer, None, None]:
    container = RedisContainer(image="redis:7-alpine")
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Docker is not available: {e}")
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture
def test_settings(redis_container: RedisContainer) -> Settings:
    return Settings(
        REDIS_URL=f"redis://{redis_container.get_container_host_ip()}:{redis_container.get_exposed_port(6379)}",
        TASK_STORE_NAMESPACE=f"test-tasks-{uuid4().hex}",
        OTEL_ENABLED=False,
        STATIC_ENABLED=False,
    )


@pytest.fixture
def test_app(
    test_settings: Settings, mocker: MockerFixture
) -> Generator[FastAPI, None, None]:
    mocker.patch("tasklist.main.settings", test_settings)

    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
