"""Tests for endpoint loading and validation."""

import pytest

from aero_sdk.config import DatabaseEndpoint
from aero_sdk.exceptions import MissingRequiredConfig

PREFIX = "AEROSPIKE_PASSIVE_"


class TestValidate:
    def test_valid(self) -> None:
        DatabaseEndpoint(hosts=("db1",), port=3000).validate()

    def test_empty_hosts(self, sink) -> None:
        with pytest.raises(MissingRequiredConfig):
            DatabaseEndpoint(hosts=(), port=3000).validate(sink)
        assert sink.records[0][:2] == ("err", "config")

    def test_zero_port(self, sink) -> None:
        with pytest.raises(MissingRequiredConfig):
            DatabaseEndpoint(hosts=("db1",), port=0).validate(sink)
        assert "Port cannot be 0" in sink.levels("err")[0]

    def test_empty_hosts_and_zero_port(self) -> None:
        with pytest.raises(MissingRequiredConfig):
            DatabaseEndpoint(hosts=(), port=0).validate()


class TestConstruction:
    def test_defaults(self) -> None:
        endpoint = DatabaseEndpoint(hosts=("db1",))
        assert endpoint.port == 3000
        assert endpoint.connect_timeout_ms == 5000
        assert endpoint.read_timeout_ms == 5000
        assert endpoint.cluster_name is None

    def test_hosts_list_stored_as_tuple(self) -> None:
        endpoint = DatabaseEndpoint(hosts=["db1", "db2"])  # type: ignore[arg-type]
        assert endpoint.hosts == ("db1", "db2")
        hash(endpoint)

    def test_addresses_in_order(self) -> None:
        endpoint = DatabaseEndpoint(hosts=("b", "a", "b"), port=3100)
        assert list(endpoint.addresses()) == [("b", 3100), ("a", 3100), ("b", 3100)]


class TestFromEnvironment:
    def test_full(self) -> None:
        env = {
            f"{PREFIX}HOSTS": " h1, h2 ,,h3 ",
            f"{PREFIX}PORT": "3100",
            f"{PREFIX}CONNECT_TIMEOUT_MS": "250",
            f"{PREFIX}READ_TIMEOUT_MS": "750",
            f"{PREFIX}CLUSTER_NAME": "dr-east",
        }
        endpoint = DatabaseEndpoint.from_environment(PREFIX, environ=env)

        assert endpoint == DatabaseEndpoint(
            hosts=("h1", "h2", "h3"),
            port=3100,
            connect_timeout_ms=250,
            read_timeout_ms=750,
            cluster_name="dr-east",
        )

    def test_defaults_when_only_hosts(self) -> None:
        endpoint = DatabaseEndpoint.from_environment(PREFIX, environ={f"{PREFIX}HOSTS": "db1"})
        assert endpoint.port == 3000
        assert endpoint.connect_timeout_ms == 5000
        assert endpoint.read_timeout_ms == 5000

    @pytest.mark.parametrize("port", ["abc", "", "70000", "-1"])
    def test_unparseable_port_falls_back(self, port: str) -> None:
        env = {f"{PREFIX}HOSTS": "db1", f"{PREFIX}PORT": port}
        assert DatabaseEndpoint.from_environment(PREFIX, environ=env).port == 3000

    def test_unparseable_timeouts_fall_back(self) -> None:
        env = {
            f"{PREFIX}HOSTS": "db1",
            f"{PREFIX}CONNECT_TIMEOUT_MS": "soon",
            f"{PREFIX}READ_TIMEOUT_MS": "1.5",
        }
        endpoint = DatabaseEndpoint.from_environment(PREFIX, environ=env)
        assert endpoint.connect_timeout_ms == 5000
        assert endpoint.read_timeout_ms == 5000

    def test_missing_hosts(self, sink) -> None:
        with pytest.raises(MissingRequiredConfig):
            DatabaseEndpoint.from_environment(PREFIX, sink, {})
        assert sink.levels("err")

    def test_blank_hosts(self) -> None:
        with pytest.raises(MissingRequiredConfig):
            DatabaseEndpoint.from_environment(PREFIX, environ={f"{PREFIX}HOSTS": " , "})

    def test_explicit_zero_port(self) -> None:
        env = {f"{PREFIX}HOSTS": "db1", f"{PREFIX}PORT": "0"}
        with pytest.raises(MissingRequiredConfig):
            DatabaseEndpoint.from_environment(PREFIX, environ=env)

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(f"{PREFIX}HOSTS", "db9")
        assert DatabaseEndpoint.from_environment(PREFIX).hosts == ("db9",)
