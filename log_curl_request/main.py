"""CLI interface for log-curl-request.

Builds cURL commands from command-line arguments or from request
description files.
"""

import json
import sys
from pathlib import Path
from typing import Optional, List, Dict, Any

import click
import yaml
from rich.markup import escape

from log_curl_request import __version__
from log_curl_request.core.builder import create
from log_curl_request.core.config import apply_config, parse_curl_options
from log_curl_request.core.exceptions import ConfigurationError, InvalidArgumentError
from log_curl_request.core.models import FileField
from log_curl_request.core.options import CurlOptions
from log_curl_request.utils.logging import setup_logging, get_logger, console


logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="log-curl")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with default settings"
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    help="Also write log records to this file"
)
@click.option("--json-logs", is_flag=True, help="Render log records as JSON")
def cli(
    config_path: Optional[str],
    debug: bool,
    log_file: Optional[str],
    json_logs: bool,
):
    """log-curl: turn HTTP request descriptions into cURL commands."""
    setup_logging(
        level="DEBUG" if debug else "WARNING",
        json_output=json_logs,
        log_file=log_file,
    )

    if config_path:
        try:
            apply_config(config_path)
        except ConfigurationError as e:
            console.print(f"[error]Configuration error:[/error] {escape(str(e))}")
            sys.exit(2)


@cli.command()
@click.argument("method")
@click.argument("url")
@click.option(
    "--header", "-H",
    multiple=True,
    help="Header (e.g., -H 'Content-Type: application/json')"
)
@click.option(
    "--param", "-q",
    multiple=True,
    help="Query parameter (e.g., -q userId=1)"
)
@click.option(
    "--cookie", "-b",
    multiple=True,
    help="Cookie (e.g., -b session=abc)"
)
@click.option("--data", "-d", type=str, help="Raw request body")
@click.option("--json", "json_body", type=str, help="JSON object request body")
@click.option(
    "--form", "-F",
    multiple=True,
    help="Multipart field (e.g., -F name=value or -F file=@path)"
)
@click.option("--insecure", is_flag=True, help="Add --insecure")
@click.option("--compressed", is_flag=True, help="Add --compressed")
@click.option("--curl-verbose", is_flag=True, help="Add --verbose")
@click.option("--location", is_flag=True, help="Add --location")
@click.option("--max-time", type=int, default=None, help="Add --max-time N")
@click.option("--opt", multiple=True, help="Extra cURL flag passed through verbatim")
@click.option("--mask/--no-mask", default=None, help="Mask sensitive header values")
@click.option("--pretty/--compact", default=None, help="Split the command over several lines")
def build(
    method: str,
    url: str,
    header: tuple,
    param: tuple,
    cookie: tuple,
    data: Optional[str],
    json_body: Optional[str],
    form: tuple,
    insecure: bool,
    compressed: bool,
    curl_verbose: bool,
    location: bool,
    max_time: Optional[int],
    opt: tuple,
    mask: Optional[bool],
    pretty: Optional[bool],
):
    """Print the cURL command for METHOD and URL.

    Examples:

      log-curl build GET https://api.example.com/posts -q userId=1

      log-curl build POST https://api.example.com/posts --json '{"title": "foo"}'
    """
    if data is not None and json_body is not None:
        raise click.UsageError("--data and --json are mutually exclusive")

    body: Any = data
    if json_body is not None:
        try:
            body = json.loads(json_body)
        except ValueError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--json")

    options = None
    if insecure or compressed or curl_verbose or location or max_time is not None or opt:
        options = CurlOptions(
            insecure=insecure,
            compressed=compressed,
            verbose=curl_verbose,
            location=location,
            max_time=max_time,
            custom_options=opt,
        )

    try:
        command = create(
            method.upper(),
            url,
            parameters=_parse_pairs(param, "="),
            data=body,
            headers=_parse_pairs(header, ":"),
            cookies=_parse_pairs(cookie, "="),
            form_data=_parse_form(form),
            curl_options=options,
            mask_sensitive=mask,
            format_output=pretty,
            show_debug_output=False,
        )
    except InvalidArgumentError as e:
        console.print(f"[error]Error:[/error] {escape(str(e))}")
        sys.exit(1)

    logger.debug("command_built", method=method.upper(), url=url)
    click.echo(command)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--mask/--no-mask", default=None, help="Mask sensitive header values")
@click.option("--pretty/--compact", default=None, help="Split commands over several lines")
def convert(path: str, mask: Optional[bool], pretty: Optional[bool]):
    """Print cURL commands for the requests described in PATH.

    PATH is a YAML or JSON file holding one request or a list of requests
    with the keys method, url, headers, params, cookies, body, form and
    options.
    """
    try:
        requests = _load_requests(Path(path))
    except ConfigurationError as e:
        console.print(f"[error]Invalid request file:[/error] {escape(str(e))}")
        sys.exit(2)

    exit_code = 0
    for index, request in enumerate(requests):
        try:
            command = _create_from_description(request, mask, pretty)
        except ConfigurationError as e:
            console.print(f"[error]Request {index + 1}:[/error] {escape(str(e))}")
            exit_code = 2
            continue
        except InvalidArgumentError as e:
            console.print(f"[error]Request {index + 1}:[/error] {escape(str(e))}")
            exit_code = max(exit_code, 1)
            continue
        click.echo(command)

    sys.exit(exit_code)


def _parse_pairs(items: tuple, separator: str) -> Dict[str, str]:
    """Parse 'key<sep>value' strings into an ordered dict."""
    pairs = {}
    for item in items:
        if separator not in item:
            raise click.BadParameter(f"expected 'name{separator}value', got '{item}'")
        key, value = item.split(separator, 1)
        pairs[key.strip()] = value.strip()
    return pairs


def _parse_form(items: tuple) -> Dict[str, Any]:
    fields = {}
    for name, value in _parse_pairs(items, "=").items():
        fields[name] = FileField(value[1:]) if value.startswith("@") else value
    return fields


# Request file sections that hold name/value pairs
MAPPING_KEYS = ("params", "headers", "cookies", "form")


def _load_requests(path: Path) -> List[Dict[str, Any]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError([f"Invalid YAML in {path}: {e}"]) from e

    if isinstance(loaded, dict):
        loaded = [loaded]
    if not isinstance(loaded, list) or not all(isinstance(r, dict) for r in loaded):
        raise ConfigurationError(["Expected a request mapping or a list of them"])
    return loaded


def _create_from_description(
    request: Dict[str, Any],
    mask: Optional[bool],
    pretty: Optional[bool],
) -> str:
    errors: List[str] = []
    options = parse_curl_options(request.get("options"), errors)

    for key in MAPPING_KEYS:
        value = request.get(key)
        if value is not None and not isinstance(value, dict):
            errors.append(f"{key} must be a mapping")

    if errors:
        raise ConfigurationError(errors)

    form = {
        name: FileField(value[1:]) if isinstance(value, str) and value.startswith("@") else value
        for name, value in (request.get("form") or {}).items()
    }

    return create(
        str(request.get("method", "GET")).upper(),
        str(request.get("url", "")),
        parameters=request.get("params"),
        data=request.get("body"),
        headers=request.get("headers"),
        cookies=request.get("cookies"),
        form_data=form,
        curl_options=options,
        mask_sensitive=mask,
        format_output=pretty,
        show_debug_output=False,
    )


if __name__ == "__main__":
    cli()
