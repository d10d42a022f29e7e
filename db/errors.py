"""
db/errors.py
------------
Failure type raised by the database layer.
"""


class StoreFailure(Exception):
    """
    Any failure reported by the store: lost connectivity, a malformed
    statement or a constraint violation. The driver exception is chained
    as ``__cause__``.
    """
