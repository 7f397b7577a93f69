"""
Shared fixtures for the AAMVA decoder tests.

Payloads are built the way a PDF417 reader hands them over: compliance
indicator and separators, the ``ANSI`` file header, one ``DL`` subfile
designator and a ``DL`` subfile of code + value lines.
"""

from typing import Dict, Optional

import pytest

from aamva_decoder.config import reset_config
from aamva_decoder.core.elements import WireKeywords as K

# Element values used across tests. None of them contains a substring that
# looks like another element code.
STANDARD_FIELDS: Dict[str, str] = {
    'DAQ': 'T12345678',
    'DCA': 'C',
    'DCB': 'NONE',
    'DCD': 'NONE',
    'DBA': '01012030',
    'DCS': 'PUBLIC',
    'DAC': 'JOHN',
    'DAD': 'QUINCY',
    'DBD': '06152020',
    'DBB': '07041990',
    'DBC': '1',
    'DAY': 'BRO',
    'DAU': '070 IN',
    'DAG': '123 MAIN ST',
    'DAI': 'ANYTOWN',
    'DAJ': 'VA',
    'DAK': '123456789',
    'DCF': '0123456789012345',
    'DCG': 'USA',
    'DDE': 'N',
    'DDF': 'N',
    'DDG': 'U',
    'DAZ': 'BLK',
    'DAW': '180',
    'DCU': 'JR',
    'DDK': '1',
    'DDL': '0',
}


def build_payload(
    fields: Dict[str, str],
    version: int = 9,
    issuer_id: str = '636000',
    jurisdiction_version: Optional[int] = 0,
    entries: int = 1,
) -> str:
    """Assemble a payload from element code -> value pairs."""
    header = (
        K.COMPLIANCE_INDICATOR + K.DATA_ELEMENT_SEPARATOR + K.RECORD_SEPARATOR
        + K.SEGMENT_TERMINATOR + K.FILE_TYPE + issuer_id + f'{version:02d}'
    )
    if jurisdiction_version is not None and version != 1:
        header += f'{jurisdiction_version:02d}'
    header += f'{entries:02d}'

    lines = K.DATA_ELEMENT_SEPARATOR.join(code + value for code, value in fields.items())
    subfile = 'DL' + lines + K.SEGMENT_TERMINATOR
    return header + 'DL00410278' + subfile


@pytest.fixture
def standard_fields() -> Dict[str, str]:
    """A copy of the standard element values, safe to mutate."""
    return dict(STANDARD_FIELDS)


@pytest.fixture
def standard_payload() -> str:
    """Version 9 payload carrying the standard element values."""
    return build_payload(STANDARD_FIELDS)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from AAMVA_* environment and the global config."""
    for key in ('AAMVA_DEFAULT_COUNTRY', 'AAMVA_MINOR_AGE', 'AAMVA_LOG_LEVEL', 'AAMVA_LOG_FILE'):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
