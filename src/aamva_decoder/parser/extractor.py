"""
Field Extraction
================

Locates the raw value of a data element in a payload.

A value starts right after the first occurrence of the element code and
runs up to the next segment terminator (data element separator, record
separator, segment terminator or group separator). Trailing non-word
characters are dropped so the value ends on a word boundary.
"""

import re
from typing import Dict, Mapping, Optional

from ..core.elements import Element, WireKeywords

_TERMINATOR_PATTERN = re.compile(
    '[' + re.escape(''.join(sorted(WireKeywords.TERMINATORS))) + ']'
)
_TRAILING_NON_WORD = re.compile(r'\W+$')


class FieldExtractor:
    """
    Raw value lookup over one payload with one field table.

    Lookups are memoised by code, so extracting the same element twice
    returns the same value without rescanning. An extractor belongs to a
    single decode call and is not shared.
    """

    def __init__(self, text: str, fields: Mapping[Element, str]):
        """
        Args:
            text: Decoded barcode payload
            fields: Element -> code table of the payload's version
        """
        self.text = text
        self.fields = fields
        self._cache: Dict[str, Optional[str]] = {}

    def extract(self, element: Element) -> Optional[str]:
        """
        Get the raw value of an element.

        Returns:
            The raw value, or None when the element is not in the field
            table, its code does not occur in the text, or the value is empty
        """
        code = self.fields.get(element)
        if code is None:
            return None

        if code not in self._cache:
            self._cache[code] = self._scan(code)
        return self._cache[code]

    def _scan(self, code: str) -> Optional[str]:
        start = self.text.find(code)
        if start == -1:
            return None

        start += len(code)
        match = _TERMINATOR_PATTERN.search(self.text, start)
        end = match.start() if match else len(self.text)

        value = _TRAILING_NON_WORD.sub('', self.text[start:end])
        return value or None

    def raw_fields(self) -> Dict[Element, str]:
        """All elements of the field table that have a value in the text."""
        found = {}
        for element in self.fields:
            value = self.extract(element)
            if value is not None:
                found[element] = value
        return found
