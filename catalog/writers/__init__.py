"""Report writers for catalog products."""

from .base import ProductWriter
from .csv_writer import CsvProductWriter
from .json_writer import JsonProductWriter
from .text_writer import TextProductWriter
from .xml_writer import XmlLabels, XmlProductWriter

WRITERS = {
    'text': TextProductWriter,
    'xml': XmlProductWriter,
    'json': JsonProductWriter,
    'csv': CsvProductWriter
}


def get_writer(output_format: str, **options) -> ProductWriter:
    """Create a writer for the named output format.

    Args:
        output_format: One of ``text``, ``xml``, ``json``, ``csv``
        **options: Passed to the writer's constructor

    Raises:
        ValueError: If the format is unknown
    """
    try:
        writer_class = WRITERS[output_format]
    except KeyError:
        raise ValueError(f"output_format must be one of: {', '.join(WRITERS)}")
    return writer_class(**options)


__all__ = [
    'ProductWriter',
    'TextProductWriter',
    'XmlProductWriter',
    'XmlLabels',
    'JsonProductWriter',
    'CsvProductWriter',
    'WRITERS',
    'get_writer'
]
