"""The logged-in customer of the running application.

There is exactly one interactive user per process.  Authentication itself
happens elsewhere; this only remembers who passed it.
"""

from __future__ import annotations


class CustomerSession:

    def __init__(self) -> None:
        self._customer_id: int | None = None

    @property
    def customer_id(self) -> int | None:
        return self._customer_id

    def login(self, customer_id: int) -> None:
        self._customer_id = customer_id

    def logout(self) -> None:
        self._customer_id = None

    def is_authenticated(self, customer_id: int | None = None) -> bool:
        """True if someone is logged in (and is *customer_id*, when given)."""
        if self._customer_id is None:
            return False
        return customer_id is None or customer_id == self._customer_id
