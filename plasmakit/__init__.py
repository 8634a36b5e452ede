"""Building blocks for plasma simulation codes: tags, errors, logging, contexts, containers, index ranges and scaling."""

__version__ = "0.1.0"

__all__ = [
    "blas",
    "buffer",
    "context",
    "errors",
    "log",
    "mathutil",
    "matrix",
    "ranges",
    "tags",
    "vector",
]