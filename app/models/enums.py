"""Enum types mirroring the database check constraints and error categories."""

from enum import Enum


class MatchRole(str, Enum):
    """Role a user holds on a problem (``problem_matches.role``)."""
    SOLVER = "SOLVER"
    AFFECTED = "AFFECTED"


class ErrorKind(str, Enum):
    """Category of a failed service operation."""
    validation = "validation"
    auth = "auth"
    not_found = "not_found"
    store = "store"
