"""Upload attachments to the anonymous file host.

The host answers a multipart POST with the public URL of the file as plain
text. Failures are reported once; nothing is retried.
"""

import logging
from typing import Optional

import requests

from ..config.media_host import MediaHostConfig, get_media_host_config
from ..models.event import MediaItem

logger = logging.getLogger(__name__)

class UploadFailed(Exception):
    """Raised when a file could not be transferred to the media host."""
    pass

def upload_file(
    name: str,
    mime_type: str,
    payload: bytes,
    config: Optional[MediaHostConfig] = None
) -> str:
    """
    Upload a file and return its public URL.

    Args:
        name: File name sent to the host
        mime_type: MIME type of the content
        payload: File content
        config: Host settings (defaults to the environment configuration)

    Returns:
        str: URL the file can be fetched from

    Raises:
        UploadFailed: On network errors, error responses or an unusable reply
    """
    config = config or get_media_host_config()
    files = {config.field_name: (name, payload, mime_type or 'application/octet-stream')}

    try:
        response = requests.post(config.upload_url, files=files, timeout=config.timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Upload of {name} failed: {e}")
        raise UploadFailed(f"Failed to upload file {name}: {e}") from e

    url = response.text.strip()
    if not url.startswith(('http://', 'https://')):
        logger.error(f"Media host returned an unexpected reply for {name}: {url[:100]!r}")
        raise UploadFailed(f"Failed to upload file {name}: host did not return a URL")

    logger.info(f"Uploaded {name} ({len(payload)} bytes) to {url}")
    return url

def media_item_for_upload(
    name: str,
    mime_type: str,
    payload: bytes,
    config: Optional[MediaHostConfig] = None
) -> MediaItem:
    """Upload a file and describe it as a media item referencing the URL."""
    url = upload_file(name, mime_type, payload, config)
    return MediaItem(type=mime_type or 'application/octet-stream', name=name, url=url)
