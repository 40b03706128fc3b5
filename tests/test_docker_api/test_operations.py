"""Тесты функций docker_api (client/containers)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from docker.errors import APIError, DockerException, NotFound
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import ReadTimeout

from compose_testkit.connections.models import Connection
from compose_testkit.docker_api import client as client_module
from compose_testkit.docker_api import containers
from compose_testkit.docker_api.client import DockerClientWrapper
from compose_testkit.docker_api.exceptions import (
    DockerAPIError,
    DockerCancellationError,
    DockerExecutionError,
)


class FakeContainer:
    def __init__(self, name: str, labels: Optional[Dict[str, str]] = None) -> None:
        self.name = name
        self.labels = labels or {}


class FakeRawClient:
    def __init__(
        self,
        running: Optional[List[FakeContainer]] = None,
        remove_errors: Optional[Dict[str, Exception]] = None,
        list_error: Optional[Exception] = None,
    ) -> None:
        self.running = running or []
        self.remove_errors = remove_errors or {}
        self.list_error = list_error
        self.list_filters: List[Dict[str, Any]] = []
        self.removed: List[str] = []
        self.pinged = False

        class Containers:
            def __init__(self, outer: FakeRawClient) -> None:
                self.outer = outer

            def list(self, filters: Optional[Dict[str, Any]] = None) -> List[FakeContainer]:
                self.outer.list_filters.append(filters or {})
                if self.outer.list_error is not None:
                    raise self.outer.list_error
                return list(self.outer.running)

        class API:
            def __init__(self, outer: FakeRawClient) -> None:
                self.outer = outer

            def remove_container(self, container: str, force: bool = False) -> None:
                assert force is True
                error = self.outer.remove_errors.get(container)
                if error is not None:
                    raise error
                self.outer.removed.append(container)

        self.containers = Containers(self)
        self.api = API(self)

    def ping(self) -> bool:
        self.pinged = True
        return True


def make_wrapper(raw_client: FakeRawClient) -> DockerClientWrapper:
    connection = Connection(identifier="local", name="Local", socket="unix:///var/run/docker.sock")
    return DockerClientWrapper(connection, raw_client=raw_client)


def test_list_running_containers_filters_by_project() -> None:
    raw = FakeRawClient(
        running=[
            FakeContainer(
                "demo-db-1",
                {"com.docker.compose.service": "db", "com.docker.compose.container-number": "1"},
            ),
            FakeContainer("demo_web_2"),
        ]
    )
    names = containers.list_running_containers(make_wrapper(raw), "demo")

    assert raw.list_filters == [{"label": "com.docker.compose.project=demo"}]
    assert [name.raw_name for name in names] == ["demo-db-1", "demo_web_2"]
    assert [name.semantic_name for name in names] == ["db_1", "web_2"]


def test_list_running_containers_wraps_api_error() -> None:
    raw = FakeRawClient(list_error=APIError("server exploded"))
    with pytest.raises(DockerExecutionError, match="server exploded"):
        containers.list_running_containers(make_wrapper(raw), "demo")


def test_list_running_containers_timeout_is_cancellation() -> None:
    raw = FakeRawClient(list_error=ReadTimeout("Read timed out"))
    with pytest.raises(DockerCancellationError):
        containers.list_running_containers(make_wrapper(raw), "demo")


def test_list_running_containers_connection_error_propagates() -> None:
    raw = FakeRawClient(list_error=RequestsConnectionError("connection refused"))
    with pytest.raises(OSError):
        containers.list_running_containers(make_wrapper(raw), "demo")


def test_remove_containers_removes_every_name() -> None:
    raw = FakeRawClient()
    containers.remove_containers(make_wrapper(raw), ["a", "b"])
    assert raw.removed == ["a", "b"]


def test_remove_containers_aggregates_failures_after_processing_all() -> None:
    raw = FakeRawClient(
        remove_errors={
            "a": NotFound("No such container: a"),
            "c": APIError("Driver btrfs failed to remove root filesystem c"),
        }
    )
    with pytest.raises(DockerExecutionError) as excinfo:
        containers.remove_containers(make_wrapper(raw), ["a", "b", "c"])

    assert raw.removed == ["b"]
    assert excinfo.value.message.splitlines() == [
        "No such container: a",
        "Driver btrfs failed to remove root filesystem c",
    ]
    assert excinfo.value.operation == "rm"
    assert excinfo.value.targets == ["a", "b", "c"]


def test_remove_containers_timeout_is_cancellation() -> None:
    raw = FakeRawClient(remove_errors={"a": ReadTimeout("Read timed out")})
    with pytest.raises(DockerCancellationError) as excinfo:
        containers.remove_containers(make_wrapper(raw), ["a", "b"])
    assert not isinstance(excinfo.value, DockerExecutionError)
    assert raw.removed == []


def test_ping_uses_raw_client() -> None:
    raw = FakeRawClient()
    assert make_wrapper(raw).ping() is True
    assert raw.pinged


def test_client_created_from_normalized_socket(monkeypatch: pytest.MonkeyPatch) -> None:
    created: Dict[str, Any] = {}

    def fake_docker_client(base_url: str, timeout: int) -> FakeRawClient:
        created.update(base_url=base_url, timeout=timeout)
        return FakeRawClient()

    monkeypatch.setattr(client_module.docker, "DockerClient", fake_docker_client)
    connection = Connection(identifier="local", name="Local", socket="/var/run/docker.sock", timeout_seconds=15)

    wrapper = DockerClientWrapper(connection)

    assert created == {"base_url": "unix:///var/run/docker.sock", "timeout": 15}
    assert isinstance(wrapper.get_raw_client(), FakeRawClient)


def test_client_init_failure_raises_docker_api_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_from_env(timeout: int) -> None:
        raise DockerException("Error while fetching server API version")

    monkeypatch.setattr(client_module.docker, "from_env", broken_from_env)
    connection = Connection(identifier="env", name="Env")

    with pytest.raises(DockerAPIError, match="server API version"):
        DockerClientWrapper(connection)


def test_list_running_containers_strips_hyphenated_project() -> None:
    raw = FakeRawClient(running=[FakeContainer("my-proj-web-1")])
    names = containers.list_running_containers(make_wrapper(raw), "my-proj")
    assert [name.semantic_name for name in names] == ["web_1"]
