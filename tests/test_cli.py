import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from reqprep.cli import app
from tests.testenv import API_KEY

runner = CliRunner()


def _write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data))
    return path


@pytest.fixture(name="request_file")
def request_file_fixture(tmp_path: Path) -> Path:
    return _write_json(
        tmp_path / "request.json",
        {
            "method": "GET",
            "url": f"https://example.com/?key={API_KEY}",
            "headers": {"Authorization": f"Bearer {API_KEY}", "X-Host": "example.com"},
            "auth": {"user": "ada", "password": "pw"},
        },
    )


def test_sanitize(tmp_path: Path, request_file: Path) -> None:
    credentials_file = _write_json(
        tmp_path / "credentials.json",
        {"apiKey": API_KEY, "host": "example.com"},
    )
    properties_file = _write_json(
        tmp_path / "properties.json",
        [
            {"name": "apiKey", "typeOptions": {"password": True}},
            {"name": "host"},
        ],
    )
    auth_keys_file = _write_json(tmp_path / "auth_keys.json", {"auth": ["password"]})

    result = runner.invoke(
        app,
        [
            "sanitize",
            str(request_file),
            "--credentials",
            str(credentials_file),
            "--properties",
            str(properties_file),
            "--auth-keys",
            str(auth_keys_file),
        ],
    )

    assert result.exit_code == 0, result.output
    sanitized = json.loads(result.output)
    assert sanitized["url"] == "https://example.com/?key=**hidden**"
    assert sanitized["headers"] == {
        "Authorization": "**hidden**",
        "X-Host": "example.com",
    }
    assert sanitized["auth"] == {"user": "ada", "password": "**hidden**"}


def test_sanitize__missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["sanitize", str(tmp_path / "missing.json")])

    assert result.exit_code == 1


def test_sanitize__invalid_properties(tmp_path: Path, request_file: Path) -> None:
    properties_file = _write_json(tmp_path / "properties.json", [{"display": "x"}])

    result = runner.invoke(
        app,
        ["sanitize", str(request_file), "--properties", str(properties_file)],
    )

    assert result.exit_code == 1


def test_build_body__json(tmp_path: Path) -> None:
    parameters_file = _write_json(
        tmp_path / "parameters.json",
        [{"name": "a.b", "value": "1"}, {"name": "a.b", "value": "2"}],
    )

    result = runner.invoke(app, ["build-body", str(parameters_file)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"a": {"b": "2"}}


def test_build_body__multipart(tmp_path: Path) -> None:
    parameters_file = _write_json(
        tmp_path / "parameters.json",
        [{"name": "x", "value": "1"}, {"name": "y", "value": "2"}],
    )

    result = runner.invoke(
        app,
        [
            "build-body",
            str(parameters_file),
            "--body-type",
            "multipart-form-data",
            "--version",
            "4.2",
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"name": "x", "value": "1"},
        {"name": "y", "value": "2"},
    ]


def test_build_body__legacy_version(tmp_path: Path) -> None:
    parameters_file = _write_json(
        tmp_path / "parameters.json",
        [{"name": "a.b", "value": "1"}],
    )

    result = runner.invoke(
        app,
        ["build-body", str(parameters_file), "--version", "3"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"a.b": "1"}


def test_build_body__invalid_parameters(tmp_path: Path) -> None:
    parameters_file = _write_json(tmp_path / "parameters.json", [{"value": "1"}])

    result = runner.invoke(app, ["build-body", str(parameters_file)])

    assert result.exit_code == 1


@pytest.mark.parametrize(
    argnames="auth_keys",
    argvalues=[{"auth": None}, {"auth": "password"}, ["password"]],
    ids=["null key set", "string key set", "not a mapping"],
)
def test_sanitize__invalid_auth_keys(
    tmp_path: Path,
    request_file: Path,
    auth_keys: Any,
) -> None:
    auth_keys_file = _write_json(tmp_path / "auth_keys.json", auth_keys)

    result = runner.invoke(
        app,
        ["sanitize", str(request_file), "--auth-keys", str(auth_keys_file)],
    )

    assert result.exit_code == 1
