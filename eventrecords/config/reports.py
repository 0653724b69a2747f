"""PDF report configuration."""

import os
from pathlib import Path
from dataclasses import dataclass, field

DEFAULT_INSTITUTION_NAME = "SDM College of Engineering & Technology"
DEFAULT_OUTPUT_DIR = Path(__file__).parent.parent.parent / 'data' / 'reports'

@dataclass
class ReportConfig:
    """
    Settings for generated event reports.

    Fields:
        institution_name: Header printed at the top of every report page
        output_dir: Directory where report files are written by scripts
        currency_prefix: Prefix for monetary amounts
    """
    institution_name: str = ""
    output_dir: Path = field(default_factory=lambda: DEFAULT_OUTPUT_DIR)  # REPORT_OUTPUT_DIR overrides the default
    currency_prefix: str = "Rs. "

    def __post_init__(self):
        """Load settings from environment if not provided."""
        if not self.institution_name:
            self.institution_name = os.environ.get('REPORT_INSTITUTION_NAME', DEFAULT_INSTITUTION_NAME)
        env_dir = os.environ.get('REPORT_OUTPUT_DIR')
        if env_dir and Path(self.output_dir) == DEFAULT_OUTPUT_DIR:
            self.output_dir = Path(env_dir)
        self.output_dir = Path(self.output_dir)
