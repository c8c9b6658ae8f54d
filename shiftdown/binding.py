"""
XML Binding
===========

Maps the `<settings>` document onto a `Settings` instance and back.

Element values are handed to `Settings` under their XML names (the model's
aliases), so a loaded file passes through exactly the same clamping and
trimming as direct assignment. Unknown elements are ignored, missing ones
keep their defaults, and a repeated element keeps its last value.
"""

import re
import xml.etree.ElementTree as ET
from typing import IO, Dict, Optional, Union

from pydantic import ValidationError

from shiftdown.errors import BindingError
from shiftdown.settings import Settings

ROOT_TAG = "settings"

_INTEGER = re.compile(r"^[+-]?[0-9]+$")

# XML element name -> model field name
ELEMENT_FIELDS: Dict[str, str] = {
    field.alias: name for name, field in Settings.model_fields.items()
}


def parse_document(stream: IO[bytes]) -> ET.Element:
    return ET.parse(stream).getroot()


def _element_value(element: ET.Element, field_name: str) -> Optional[Union[str, int]]:
    if len(element):
        raise BindingError(f"<{element.tag}> must contain text only, found child elements.")
    text = element.text
    if Settings.model_fields[field_name].annotation is int:
        # <workers> 7 </workers> is a valid integer, <workers/> and <workers>7.0</workers> are not
        text = (text or "").strip()
        if not _INTEGER.match(text):
            raise BindingError(f"<{element.tag}> must be an integer, got '{text}'.")
        return int(text)
    return text


def bind(root: ET.Element) -> Settings:
    if root.tag != ROOT_TAG:
        raise BindingError(
            f"<{root.tag}> was not expected, the document root must be <{ROOT_TAG}>."
        )

    values = {}
    for element in root:
        field_name = ELEMENT_FIELDS.get(element.tag)
        if field_name is None:
            continue
        values[element.tag] = _element_value(element, field_name)

    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise BindingError(f"There is an error in the <{ROOT_TAG}> document.") from e


def to_xml(settings: Settings) -> str:
    """Serialize settings into the document format `bind` reads."""
    root = ET.Element(ROOT_TAG)
    for name, field in Settings.model_fields.items():
        ET.SubElement(root, field.alias).text = str(getattr(settings, name))
    ET.indent(root)
    return ET.tostring(root, encoding="unicode")
