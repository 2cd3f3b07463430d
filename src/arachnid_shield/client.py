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

import json
import logging
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from .adapters.local_fs import LocalFilesystem
from .adapters.mime import ExtensionMimeResolver
from .config import MEDIA_PATH, PDQ_PATH, URL_PATH, ShieldConfig
from .domain.media import (
    DEFAULT_MIME_TYPE,
    Blob,
    MediaContents,
    payload_bytes,
    resolve_mime_type,
)
from .domain.models import (
    ScanMediaFromUrl,
    ScanPdqHashesRequest,
    ScannedMedia,
    ScannedPdqHashes,
)
from .domain.results import Err, Ok, ShieldResponse
from .ports.filesystem import FilesystemPort
from .ports.mime import MimeResolverPort

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

M = TypeVar("M", bound=BaseModel)


async def _single_chunk(data: bytes) -> AsyncIterator[bytes]:
    # streamed so httpx doesn't add a Content-Length of its own
    yield data


def _error_text(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Return the `detail` field of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if not detail:
        return None
    if isinstance(detail, str):
        return detail
    return json.dumps(detail)


class ArachnidShield:
    """
    Async client for the Arachnid Shield API: scans media (images, videos)
    or PDQ hashes for CSAM and other material harmful to children.

    Every scan method returns `Ok(data)` or `Err(message)` and never raises.

    Example:
        shield = ArachnidShield("user", "pass")
        result = await shield.scan_media_from_file("photo.jpg")
        if result.ok and result.data.is_match:
            ...
    """

    def __init__(
        self,
        username: str,
        password: str,
        base_url: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
        filesystem: Optional[FilesystemPort] = None,
        mime_resolver: Optional[MimeResolverPort] = None,
    ) -> None:
        """
        Args:
            username: API username.
            password: API password.
            base_url: API root (default: the production endpoint).
            http_client: Pre-configured httpx client shared by all calls; the
                caller owns it and closes it. Without one, every call opens
                and closes its own client.
            transport: httpx transport for the per-call clients.
            timeout: Timeout in seconds for the per-call clients (default: none).
            filesystem: File access used by `scan_media_from_file`.
            mime_resolver: MIME lookup used by `scan_media_from_file`.
        """
        if base_url:
            self.configuration = ShieldConfig(username, password, base_url)
        else:
            self.configuration = ShieldConfig(username, password)
        self.headers: Dict[str, str] = {"Authorization": self.configuration.auth_header}
        self.timeout = timeout
        self._fs = filesystem or LocalFilesystem()
        self._mime = mime_resolver or ExtensionMimeResolver()
        self._http_client = http_client
        self._transport = transport

    async def _send(self, url: str, headers: Dict[str, str], **kwargs: Any) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(url, headers=headers, **kwargs)
        # a fresh client per call: nothing bound to an earlier event loop
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            return await client.post(url, headers=headers, **kwargs)

    async def _post(
        self,
        path: str,
        model: Type[M],
        *,
        headers: Dict[str, str],
        **kwargs: Any,
    ) -> ShieldResponse[M]:
        url = self.configuration.endpoint(path)
        logger.debug("POST %s", url)
        try:
            response = await self._send(url, headers, **kwargs)
            response.raise_for_status()
            data = model.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            logger.warning(
                "POST %s failed with HTTP %s: %s",
                url,
                e.response.status_code,
                detail or e,
            )
            return Err(detail or _error_text(e), error=e)
        except Exception as e:
            logger.warning("POST %s failed: %s", url, e)
            return Err(_error_text(e), error=e)
        return Ok(data)

    async def scan_media_from_bytes(
        self,
        contents: MediaContents,
        mime_type: Optional[str] = None,
        size_in_bytes: Optional[int] = None,
    ) -> ShieldResponse[ScannedMedia]:
        """
        Scan a media (image or video) given its raw contents.

        Args:
            contents: Raw bytes, or a `Blob` that carries its own MIME type.
            mime_type: MIME type of the media; overrides the Blob's type.
            size_in_bytes: Size of the media. Content-Length is only sent when given.

        Returns:
            `Ok[ScannedMedia]` with `is_match` filled in, or `Err`.
        """
        headers = {
            **self.headers,
            "Content-Type": resolve_mime_type(contents, mime_type),
        }
        try:
            body = payload_bytes(contents)
            if size_in_bytes is not None:
                headers["Content-Length"] = str(int(size_in_bytes))
        except (TypeError, ValueError) as e:
            return Err(_error_text(e), error=e)

        result = await self._post(
            MEDIA_PATH, ScannedMedia, headers=headers, content=_single_chunk(body)
        )
        if isinstance(result, Ok):
            result.data.compute_is_match()
        return result

    async def scan_media_from_url(
        self, url: Union[str, httpx.URL]
    ) -> ShieldResponse[ScannedMedia]:
        """
        Scan a media (image or video) that the API fetches from `url`.

        Returns:
            `Ok[ScannedMedia]` with `is_match` filled in, or `Err`.
        """
        request = ScanMediaFromUrl(url=str(url))
        headers = {**self.headers, "Content-Type": JSON_CONTENT_TYPE}

        result = await self._post(
            URL_PATH, ScannedMedia, headers=headers, json=request.model_dump()
        )
        if isinstance(result, Ok):
            result.data.compute_is_match()
        return result

    async def scan_media_from_file(
        self, filepath: Union[str, Path]
    ) -> ShieldResponse[ScannedMedia]:
        """
        Scan the media stored at `filepath`.

        The MIME type comes from the file extension (application/octet-stream
        if unknown). If the file size can't be read the upload goes out
        without a Content-Length. A failed read returns `Err` without
        contacting the API.
        """
        try:
            mime_type = self._mime.guess(filepath) or DEFAULT_MIME_TYPE
        except Exception as e:
            logger.debug("MIME lookup failed for %s: %s", filepath, e)
            mime_type = DEFAULT_MIME_TYPE

        size: Optional[int]
        try:
            size = self._fs.size(filepath)
        except Exception as e:
            logger.debug("Size lookup failed for %s: %s", filepath, e)
            size = None

        try:
            data = await self._fs.read_bytes(filepath)
        except Exception as e:
            logger.warning("Reading %s failed: %s", filepath, e)
            return Err(_error_text(e), error=e)

        return await self.scan_media_from_bytes(
            Blob(data, mime_type), mime_type, size
        )

    async def scan_pdq_hashes(
        self, pdq_hashes: List[str]
    ) -> ShieldResponse[ScannedPdqHashes]:
        """
        Scan base64-encoded PDQ hashes for matches against known media.

        The mapping is returned as sent by the API; no `is_match` is derived.
        """
        if isinstance(pdq_hashes, (str, bytes)):
            return Err("pdq_hashes must be a list of hash strings, not a single string")
        try:
            request = ScanPdqHashesRequest(hashes=list(pdq_hashes))
        except Exception as e:
            return Err(_error_text(e), error=e)
        headers = {**self.headers, "Content-Type": JSON_CONTENT_TYPE}

        return await self._post(
            PDQ_PATH, ScannedPdqHashes, headers=headers, json=request.model_dump()
        )
