"""Тесты DockerEnvironment вместе со стратегией остановки."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pytest
from docker.errors import APIError

from compose_testkit.connections.models import Connection
from compose_testkit.docker_api.client import DockerClientWrapper
from compose_testkit.docker_api.exceptions import DockerExecutionError
from compose_testkit.environments.base import Environment
from compose_testkit.environments.docker import DockerEnvironment
from compose_testkit.shutdown.aggressive import AggressiveShutdownStrategy


class FakeContainer:
    def __init__(self, name: str) -> None:
        self.name = name
        self.labels: Dict[str, str] = {}


class FlakyRawClient:
    """Клиент, у которого удаление падает заданное число раз."""

    def __init__(self, names: List[str], failing_attempts: int, message: str) -> None:
        self.names = names
        self.failing_attempts = failing_attempts
        self.message = message
        self.remove_calls: List[str] = []
        self.list_calls = 0

        class Containers:
            def __init__(self, outer: FlakyRawClient) -> None:
                self.outer = outer

            def list(self, filters: Optional[Dict[str, str]] = None) -> List[FakeContainer]:
                self.outer.list_calls += 1
                return [FakeContainer(name) for name in self.outer.names]

        class API:
            def __init__(self, outer: FlakyRawClient) -> None:
                self.outer = outer

            def remove_container(self, container: str, force: bool = False) -> None:
                self.outer.remove_calls.append(container)
                if self.outer.failing_attempts > 0:
                    self.outer.failing_attempts -= 1
                    raise APIError(self.outer.message)

        self.containers = Containers(self)
        self.api = API(self)


def make_environment(raw: FlakyRawClient, project: str = "demo") -> DockerEnvironment:
    connection = Connection(identifier="local", name="Local", socket="unix:///var/run/docker.sock")
    return DockerEnvironment(DockerClientWrapper(connection, raw_client=raw), project)


def test_docker_environment_satisfies_protocol() -> None:
    environment = make_environment(FlakyRawClient([], 0, ""))
    assert isinstance(environment, Environment)
    assert repr(environment) == "DockerEnvironment(project_name='demo')"


def test_empty_project_name_rejected() -> None:
    with pytest.raises(ValueError):
        make_environment(FlakyRawClient([], 0, ""), project="")


def test_remove_with_empty_names_is_noop() -> None:
    raw = FlakyRawClient([], 0, "")
    make_environment(raw).remove_containers([])
    assert raw.remove_calls == []


def test_aggressive_shutdown_retries_btrfs_failure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    raw = FlakyRawClient(["demo_db_1"], 1, "Driver btrfs failed to remove root filesystem")

    AggressiveShutdownStrategy().shutdown(make_environment(raw))

    assert raw.list_calls == 1
    assert raw.remove_calls == ["demo_db_1", "demo_db_1"]
    assert "Shutting down ['db_1']" in caplog.text


def test_aggressive_shutdown_propagates_missing_container() -> None:
    raw = FlakyRawClient(["demo_db_1"], 1, "No such container: demo_db_1")

    with pytest.raises(DockerExecutionError, match="No such container"):
        AggressiveShutdownStrategy().shutdown(make_environment(raw))

    assert raw.remove_calls == ["demo_db_1"]
