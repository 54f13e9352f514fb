"""Track which of a fixed set of expected arguments have been read."""

from __future__ import annotations

from .exceptions import ArgumentError

MAX_CHECKS = 32


class BitChecker:
    """Bit set of the arguments seen so far.

    Example:
        checker = BitChecker(3)
        for i in range(3):
            checker.check_argument(i)
        assert checker.is_good()
    """

    def __init__(self, num_arguments: int):
        if num_arguments == 0:
            raise ArgumentError("There must be at least one thing you read.\n")
        if num_arguments > MAX_CHECKS:
            raise ArgumentError(f"You can only have up to {MAX_CHECKS} checks.\n")
        self._good = (1 << num_arguments) - 1
        self._checksum = 0

    def check_argument(self, arg: int) -> None:
        self._checksum |= 1 << arg

    def is_good(self) -> bool:
        return self._checksum == self._good
