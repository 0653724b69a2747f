"""Remote media host configuration."""

import os
from typing import Dict, Any
from dataclasses import dataclass

@dataclass
class MediaHostConfig:
    """Anonymous file host settings used for media uploads."""

    upload_url: str = ""
    timeout: float = 0.0
    field_name: str = 'file'

    def __post_init__(self):
        """Load settings from environment if not provided."""
        if not self.upload_url:
            self.upload_url = os.environ.get('MEDIA_HOST_URL', 'https://0x0.st')
        if not self.timeout:
            self.timeout = float(os.environ.get('MEDIA_HOST_TIMEOUT', '30'))

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            'upload_url': self.upload_url,
            'timeout': self.timeout,
            'field_name': self.field_name
        }

    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.upload_url.startswith(('http://', 'https://')):
            raise ValueError("MEDIA_HOST_URL must be an http(s) URL")
        if self.timeout <= 0:
            raise ValueError("MEDIA_HOST_TIMEOUT must be positive")
        return True

def get_media_host_config() -> MediaHostConfig:
    """Get media host configuration with validation."""
    config = MediaHostConfig()
    config.validate()
    return config
