"""Product domain exceptions.

Raised by the Validator, the Service Layer and the repository.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import List


class InvalidProductId(Exception):
    """The identifier in the request path is not an integer literal."""


class ProductValidationFailed(Exception):
    """One or more field rules were violated.

    ``errors`` keeps the fixed field order: name, price, color, description.
    """

    def __init__(self, errors: List[str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = list(errors)


class ProductNotFound(Exception):
    """No product row exists for a well-formed id."""


class ProductStorageError(Exception):
    """The database reported an error.

    The original ``DatabaseError`` is chained as ``__cause__`` and logged;
    it is never exposed to API clients.
    """
