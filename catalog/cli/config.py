"""
Configuration management for the catalog CLI.
Loads settings from environment variables, optionally via a .env file.
"""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..writers import WRITERS, XmlLabels

@dataclass
class Config:
    """Configuration settings for the catalog CLI."""

    # Database settings
    database_url: str

    # Logging settings
    log_level: str = 'INFO'
    log_dir: Optional[Path] = None

    # Report settings
    output_format: str = 'text'
    report_header: str = 'PRODUCTS:'
    xml_root_tag: str = 'Products'
    xml_item_tag: str = 'Product'
    xml_name_attr: str = 'Name'
    xml_summary_tag: str = 'Summary'

    # Import settings
    batch_size: int = 100
    error_limit: int = 1000

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'Config':
        """Create configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            Config: Configuration instance

        Raises:
            ValueError: If required environment variables are missing
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        database_url = os.getenv('DATABASE_URL')
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")

        return cls(
            database_url=database_url,
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            log_dir=Path(os.getenv('LOG_DIR')) if os.getenv('LOG_DIR') else None,
            output_format=os.getenv('OUTPUT_FORMAT', 'text'),
            report_header=os.getenv('REPORT_HEADER', 'PRODUCTS:'),
            xml_root_tag=os.getenv('XML_ROOT_TAG', 'Products'),
            xml_item_tag=os.getenv('XML_ITEM_TAG', 'Product'),
            xml_name_attr=os.getenv('XML_NAME_ATTR', 'Name'),
            xml_summary_tag=os.getenv('XML_SUMMARY_TAG', 'Summary'),
            batch_size=int(os.getenv('BATCH_SIZE', '100')),
            error_limit=int(os.getenv('ERROR_LIMIT', '1000'))
        )

    def validate(self) -> bool:
        """Validate configuration settings.

        Raises:
            ValueError: On an unknown output format or non-positive sizes
        """
        if self.output_format not in WRITERS:
            raise ValueError(f"output_format must be one of: {', '.join(WRITERS)}")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.error_limit <= 0:
            raise ValueError("error_limit must be positive")
        return True

    @property
    def xml_labels(self) -> XmlLabels:
        return XmlLabels(
            root_tag=self.xml_root_tag,
            item_tag=self.xml_item_tag,
            name_attr=self.xml_name_attr,
            summary_tag=self.xml_summary_tag
        )

    def writer_options(self, output_format: str) -> dict:
        """Constructor options for the writer of the given format."""
        if output_format == 'text':
            return {'header': self.report_header}
        if output_format == 'xml':
            return {'labels': self.xml_labels}
        return {}
