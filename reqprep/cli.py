import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import pydantic
import typer

from .body import FormData, prepare_request_body
from .credentials import PropertyDeclaration, get_secrets
from .logs import sanitize_ui_message
from .parameters import BodyParameter, identity_resolver

LOG_LEVEL_ENV_VAR = "REQPREP_LOG_LEVEL"

app = typer.Typer()

_properties_adapter = pydantic.TypeAdapter(list[PropertyDeclaration])
_parameters_adapter = pydantic.TypeAdapter(list[BodyParameter])
_auth_keys_adapter = pydantic.TypeAdapter(dict[str, list[str]])


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", envvar=LOG_LEVEL_ENV_VAR),
) -> None:
    logging.basicConfig(level=log_level.upper())


def load_json(path: Path) -> Any:
    try:
        with path.open() as file:
            return json.load(file)
    except (OSError, json.JSONDecodeError) as error:
        typer.echo(f"Could not read {path}: {error}", err=True)
        raise typer.Exit(code=1) from error


def echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=4, default=_json_default))


def _json_default(value: Any) -> Any:
    if isinstance(value, FormData):
        return [
            {"name": form_field.name, "value": form_field.value}
            for form_field in value.fields
        ]

    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"

    return str(value)


@app.command()
def sanitize(
    request_file: Path,
    credentials_file: Path | None = typer.Option(None, "--credentials"),
    properties_file: Path | None = typer.Option(None, "--properties"),
    auth_keys_file: Path | None = typer.Option(None, "--auth-keys"),
) -> None:
    """Print a request description with credentials and secrets masked."""
    request = load_json(request_file)
    credentials = load_json(credentials_file) if credentials_file else {}

    try:
        auth_data_keys = (
            _auth_keys_adapter.validate_python(load_json(auth_keys_file))
            if auth_keys_file
            else {}
        )
    except pydantic.ValidationError as error:
        typer.echo(f"Invalid auth keys: {error}", err=True)
        raise typer.Exit(code=1) from error

    try:
        properties = (
            _properties_adapter.validate_python(load_json(properties_file))
            if properties_file
            else []
        )
    except pydantic.ValidationError as error:
        typer.echo(f"Invalid property declarations: {error}", err=True)
        raise typer.Exit(code=1) from error

    secrets = get_secrets(properties, credentials)
    echo_json(sanitize_ui_message(request, auth_data_keys, secrets))


@app.command()
def build_body(
    parameters_file: Path,
    body_type: str = typer.Option("json"),
    version: float = typer.Option(4.2),
) -> None:
    """Print the request body built from a list of body parameters."""
    try:
        parameters = _parameters_adapter.validate_python(load_json(parameters_file))
    except pydantic.ValidationError as error:
        typer.echo(f"Invalid body parameters: {error}", err=True)
        raise typer.Exit(code=1) from error

    body = asyncio.run(
        prepare_request_body(parameters, body_type, version, identity_resolver),
    )
    echo_json(body)


if __name__ == "__main__":
    app()
