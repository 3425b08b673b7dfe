"""CleanPath exceptions."""


class CleanPathError(Exception):
    """Base class for CleanPath errors."""

    pass


class RedirectTargetError(CleanPathError):
    """Raised when a canonical path cannot be turned into a redirect target.

    This happens when the request carried characters that are not allowed in
    a URI reference, e.g. whitespace, control characters or raw non-ASCII
    bytes. Upstream request parsing should have rejected such input, so the
    error is not recoverable.
    """

    def __init__(self, target: str) -> None:
        super().__init__(f"Invalid redirect target: {target!r}")
        self.target = target
