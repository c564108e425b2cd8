"""Reading and writing peak-list text files.

Reader: line-classifying streaming parser with explicit ``ParserState``.
Writer: fixed-order (TITLE, PEPMASS, CHARGE) or full-header serialization.
"""

from .reader import (
    ParserState,
    consume_line,
    parse_records,
    open_source,
    read_hcd_records,
    read_etd_records,
)

from .writer import (
    format_value,
    format_record,
    open_destination,
    write_records,
)

__all__ = [
    # Reading
    'ParserState',
    'consume_line',
    'parse_records',
    'open_source',
    'read_hcd_records',
    'read_etd_records',

    # Writing
    'format_value',
    'format_record',
    'open_destination',
    'write_records',
]
