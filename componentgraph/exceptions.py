"""Custom exceptions for componentgraph.

The analysis core never raises for unrecognised source text; these cover
the edges around it where a caller has to decide what a failure means.
"""


class SourceLoadError(Exception):
    """Raised when the local source loader cannot read the project root."""

    def __init__(self, message: str, root: str | None = None):
        super().__init__(message)
        self.root = root


class EmptyGraphError(Exception):
    """Raised by callers that treat "no recognisable declarations" as fatal.

    Attributes:
        file_count: Number of files that were analyzed
    """

    def __init__(self, message: str, file_count: int = 0):
        super().__init__(message)
        self.file_count = file_count
