"""Address validation for runtime input.

Addresses typed on the command line are checked with btx_lib_mail before a
message is built, raising the domain's InvalidAddressError rather than
library-specific exceptions. Addresses built in code are trusted.
"""

from __future__ import annotations

from collections.abc import Iterable

from btx_lib_mail import validate_email_address

from mailtrap_transport.domain.errors import InvalidAddressError
from mailtrap_transport.domain.message import Address


def validate_address(value: str) -> Address:
    """Parse and validate a single ``"Name <email>"`` or bare address.

    Raises:
        InvalidAddressError: When the address is empty or malformed.

    Example:
        >>> validate_address("Jane <jane@example.com>")
        Address(email='jane@example.com', name='Jane')
        >>> validate_address("invalid")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidAddressError: Invalid address: invalid
    """
    address = Address.create(value)
    try:
        validate_email_address(address.email)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid address: {value}") from e
    return address


def validate_addresses(values: Iterable[str]) -> tuple[Address, ...]:
    """Validate every address, preserving order.

    Example:
        >>> [a.email for a in validate_addresses(["a@example.com", "b@example.com"])]
        ['a@example.com', 'b@example.com']
    """
    return tuple(validate_address(value) for value in values)


__all__ = ["validate_address", "validate_addresses"]
