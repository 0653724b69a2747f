"""Media attachment helpers."""

from .upload import UploadFailed, upload_file, media_item_for_upload

__all__ = ['UploadFailed', 'upload_file', 'media_item_for_upload']
