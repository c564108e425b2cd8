"""Exceptions raised by the scan pairing engine."""


class KrunchError(Exception):
    """Base class for all katikrunch errors."""


class FormatError(KrunchError, ValueError):
    """A peak-list record could not be parsed.

    Raised for non-numeric peak tokens, header lines without a key,
    records left open at end of stream and missing required headers.
    """

    def __init__(self, message, source=None, line_number=None):
        self.source = source
        self.line_number = line_number
        location = ""
        if source is not None:
            location = f"{source}"
            if line_number is not None:
                location += f":{line_number}"
            location += ": "
        super().__init__(f"{location}{message}")


class PairingError(KrunchError, ValueError):
    """An ETD record has no HCD partner one scan number lower."""

    def __init__(self, message, etd_scan=None):
        self.etd_scan = etd_scan
        super().__init__(message)


class EmptyTargetSetError(KrunchError, ValueError):
    """Ion filtering requested without target m/z values or a tolerance."""
