"""Media router module."""

from fastapi import APIRouter, Depends, File, UploadFile

from ...media import media_item_for_upload
from ...models.event import MediaItem, ValidationFailed
from ..dependencies import require_editor

router = APIRouter(tags=["media"], dependencies=[Depends(require_editor)])

@router.post("/media")
def upload_media(file: UploadFile = File(...), inline: bool = False):
    """
    Turn an uploaded file into a media item.

    By default the file is pushed to the remote media host and the item
    references its URL; with ``inline=true`` the content is embedded as a
    data URL instead.
    """
    payload = file.file.read()
    if not payload:
        raise ValidationFailed("Uploaded file is empty", ['file'])
    name = file.filename or 'upload'
    mime_type = file.content_type or 'application/octet-stream'
    if inline:
        item = MediaItem.from_bytes(name, mime_type, payload)
    else:
        item = media_item_for_upload(name, mime_type, payload)
    return {**item.to_dict(), "kind": item.kind}
