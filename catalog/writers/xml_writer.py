"""XML report writer."""

from dataclasses import dataclass
from typing import Optional
import xml.etree.ElementTree as ET

from .base import ProductWriter


@dataclass
class XmlLabels:
    """Element and attribute names used in the XML report."""

    root_tag: str = 'Products'
    item_tag: str = 'Product'
    name_attr: str = 'Name'
    summary_tag: str = 'Summary'


class XmlProductWriter(ProductWriter):
    """Renders a UTF-8 document with one element per product.

    Titles and summaries are escaped by ElementTree, so markup characters in
    product data cannot break the document.
    """

    def __init__(self, labels: Optional[XmlLabels] = None):
        super().__init__()
        self.labels = labels or XmlLabels()

    def write(self) -> str:
        root = ET.Element(self.labels.root_tag)
        for product in self.products:
            item = ET.SubElement(root, self.labels.item_tag, {self.labels.name_attr: product.get_title()})
            summary = ET.SubElement(item, self.labels.summary_tag)
            summary.text = product.get_summary_line()
        return ET.tostring(root, encoding='utf-8', xml_declaration=True).decode('utf-8')
