from __future__ import annotations


class CanimergeError(RuntimeError):
    """Base for every error the CLI reports before exiting."""


class RetrievalError(CanimergeError):
    pass


class DecodeError(CanimergeError):
    pass


class BranchResolutionError(CanimergeError):
    pass
