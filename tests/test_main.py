import pytest

from userapp import main as entry
from userapp.di.container import peek_container
from userapp.domain.services.user_service import UserService


@pytest.fixture
def fake_uvicorn(monkeypatch):
    """Replace uvicorn.run with a recorder that returns immediately (a clean stop)."""
    calls = []

    def run(app, **kwargs):
        container = peek_container()
        calls.append({
            "app": app,
            "kwargs": kwargs,
            "running": container is not None and container.is_running,
            "user_service": container.get(UserService) if container else None,
        })

    monkeypatch.setattr(entry.uvicorn, "run", run)
    return calls


def test_main_serves_with_a_running_container(mongo_env, fake_mongo, fake_uvicorn):
    exit_code = entry.main([])

    assert exit_code == 0
    assert len(fake_uvicorn) == 1
    call = fake_uvicorn[0]
    assert call["running"]
    assert call["user_service"] is not None
    assert call["app"].state.container.get(UserService) is call["user_service"]
    assert call["kwargs"]["host"] == "0.0.0.0"
    assert call["kwargs"]["port"] == 8080
    assert call["kwargs"]["log_level"] == "info"


def test_main_passes_cli_overrides(mongo_env, fake_mongo, fake_uvicorn):
    exit_code = entry.main(["--host", "127.0.0.1", "--port", "9000", "--log-level", "debug"])

    assert exit_code == 0
    kwargs = fake_uvicorn[0]["kwargs"]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9000
    assert kwargs["log_level"] == "debug"


def test_main_releases_resources_on_exit(mongo_env, fake_mongo, fake_uvicorn):
    entry.main([])

    assert peek_container() is None
    assert fake_mongo.clients
    assert fake_mongo.open_clients == []


def test_main_releases_resources_when_server_crashes(mongo_env, fake_mongo, monkeypatch):
    def crash(app, **kwargs):
        raise RuntimeError("listener died")

    monkeypatch.setattr(entry.uvicorn, "run", crash)

    with pytest.raises(RuntimeError):
        entry.main([])

    assert peek_container() is None
    assert fake_mongo.open_clients == []


def test_unreachable_store_exits_non_zero_before_serving(mongo_env, fake_mongo, fake_uvicorn, capsys):
    fake_mongo.reachable = False

    exit_code = entry.main([])

    assert exit_code == 1
    assert fake_uvicorn == []
    assert peek_container() is None
    assert fake_mongo.open_clients == []
    assert "Startup failed" in capsys.readouterr().err


def test_missing_configuration_exits_non_zero(monkeypatch, fake_mongo, fake_uvicorn):
    monkeypatch.delenv("MONGO_URI", raising=False)

    assert entry.main([]) == 1
    assert fake_uvicorn == []
    assert fake_mongo.clients == []


def test_unknown_option_is_a_usage_error(mongo_env, fake_mongo, fake_uvicorn):
    assert entry.main(["--no-such-flag"]) == 2
    assert fake_uvicorn == []
    assert fake_mongo.clients == []


def test_run_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(entry, "main", lambda: 1)
    with pytest.raises(SystemExit) as exc_info:
        entry.run()
    assert exc_info.value.code == 1


def test_invalid_log_level_in_environment_fails_before_connecting(mongo_env, fake_mongo, fake_uvicorn, monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    exit_code = entry.main([])

    assert exit_code == 1
    assert fake_uvicorn == []
    assert fake_mongo.clients == []
    assert "LOG_LEVEL" in capsys.readouterr().err


def test_invalid_log_level_option_is_a_usage_error(mongo_env, fake_mongo, fake_uvicorn):
    assert entry.main(["--log-level", "verbose"]) == 2
    assert fake_uvicorn == []
    assert fake_mongo.clients == []


def test_log_level_option_is_case_insensitive(mongo_env, fake_mongo, fake_uvicorn):
    assert entry.main(["--log-level", "WARNING"]) == 0
    assert fake_uvicorn[0]["kwargs"]["log_level"] == "warning"


def test_missing_env_file_fails_before_connecting(mongo_env, fake_mongo, fake_uvicorn, tmp_path, capsys):
    missing = tmp_path / "absent.env"

    exit_code = entry.main(["--env-file", str(missing)])

    assert exit_code == 1
    assert fake_uvicorn == []
    assert fake_mongo.clients == []
    assert "env file not found" in capsys.readouterr().err
