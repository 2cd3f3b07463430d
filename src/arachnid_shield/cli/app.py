# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

import typer

from ..client import ArachnidShield
from ..config import DEFAULT_BASE_URL
from ..domain.errors import ConfigurationError
from ..domain.results import Ok, ShieldResponse
from ..logging_config import quiet_http_loggers, setup_logging

setup_logging()

app = typer.Typer(help="Arachnid Shield CLI - scan media and PDQ hashes for known CSAM")

logger = logging.getLogger(__name__)

USERNAME_OPTION = typer.Option(
    ..., "--username", envvar="ARACHNID_SHIELD_USERNAME", help="API username"
)
PASSWORD_OPTION = typer.Option(
    ...,
    "--password",
    envvar="ARACHNID_SHIELD_PASSWORD",
    help="API password",
    show_default=False,
)
BASE_URL_OPTION = typer.Option(
    DEFAULT_BASE_URL, "--base-url", envvar="ARACHNID_SHIELD_BASE_URL", help="API base URL"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", help="Enable verbose logging")


def _wire(username: str, password: str, base_url: str) -> ArachnidShield:
    """Composition root: default filesystem + MIME adapters, per-call httpx clients."""
    try:
        return ArachnidShield(username, password, base_url)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e))


def _run(
    shield: ArachnidShield,
    call: Callable[[ArachnidShield], Awaitable[ShieldResponse]],
) -> ShieldResponse:
    async def _go() -> ShieldResponse:
        return await call(shield)

    return asyncio.run(_go())


def _emit(result: ShieldResponse) -> None:
    if isinstance(result, Ok):
        typer.echo(json.dumps(result.data.model_dump(mode="json"), indent=2))
        return
    typer.echo(f"Error: {result.data}", err=True)
    raise typer.Exit(code=1)


def _verbose(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        quiet_http_loggers(logging.DEBUG)
        logger.debug("Verbose logging enabled")


@app.command("file")
def scan_file(
    path: Path = typer.Argument(..., help="Media file to scan"),
    username: str = USERNAME_OPTION,
    password: str = PASSWORD_OPTION,
    base_url: str = BASE_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Scan an image or video file.
    """
    _verbose(verbose)
    shield = _wire(username, password, base_url)
    _emit(_run(shield, lambda s: s.scan_media_from_file(path)))


@app.command("bytes")
def scan_bytes(
    path: str = typer.Argument(..., help="File to upload as-is, or '-' for stdin"),
    mime_type: Optional[str] = typer.Option(
        None, "--mime-type", help="Content-Type to send (default: application/octet-stream)"
    ),
    username: str = USERNAME_OPTION,
    password: str = PASSWORD_OPTION,
    base_url: str = BASE_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Scan raw media bytes. No MIME detection is done; pass --mime-type.
    """
    _verbose(verbose)
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    shield = _wire(username, password, base_url)
    _emit(_run(shield, lambda s: s.scan_media_from_bytes(data, mime_type, len(data))))


@app.command("url")
def scan_url(
    url: str = typer.Argument(..., help="URL the API should fetch the media from"),
    username: str = USERNAME_OPTION,
    password: str = PASSWORD_OPTION,
    base_url: str = BASE_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Scan media hosted at a URL.
    """
    _verbose(verbose)
    shield = _wire(username, password, base_url)
    _emit(_run(shield, lambda s: s.scan_media_from_url(url)))


@app.command("pdq")
def scan_pdq(
    hashes: List[str] = typer.Argument(..., help="Base64-encoded PDQ hashes"),
    username: str = USERNAME_OPTION,
    password: str = PASSWORD_OPTION,
    base_url: str = BASE_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Look up PDQ hashes.
    """
    _verbose(verbose)
    shield = _wire(username, password, base_url)
    _emit(_run(shield, lambda s: s.scan_pdq_hashes(hashes)))
