# galleryfeed/domain/errors.py
from __future__ import annotations


class RetrievalError(RuntimeError):
    """
    The backing store (or one of its remote procedures) failed, or returned
    rows we could not validate. Always surfaced as a server error; never
    turned into an empty page.
    """


class MissingParameterError(ValueError):
    """A request lacked a parameter the endpoint cannot work without."""
