from typing import Optional


class ScraperError(RuntimeError):
    kind = "scraper"


class StructuralMismatchError(ScraperError):
    """A required element is missing from a fetched page."""

    kind = "structural_mismatch"

    def __init__(self, selector: str, url: Optional[str] = None):
        self.selector = selector
        self.url = url
        where = f" on {url}" if url else ""
        super().__init__(f"Expected element {selector!r} not found{where}")


class DateParseError(ScraperError):
    kind = "date_parse"

    def __init__(self, text: str, date_format: str):
        self.text = text
        self.date_format = date_format
        super().__init__(f"Could not parse date {text!r} with format {date_format!r}")


class TransportError(ScraperError):
    kind = "transport"

    def __init__(self, url: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.url = url
        self.status = status
        if status is not None:
            msg = f"HTTP {status} while fetching {url}"
        else:
            msg = f"Network error while fetching {url}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class PipelineAbortedError(ScraperError):
    """Raised by the orchestrator when a card cannot be processed; carries the card context."""

    kind = "aborted"

    def __init__(self, cause: ScraperError, url: Optional[str] = None, card_title: Optional[str] = None):
        self.cause = cause
        self.url = url
        self.card_title = card_title
        super().__init__(f"Aborted on card {card_title!r} ({url}): [{cause.kind}] {cause}")
