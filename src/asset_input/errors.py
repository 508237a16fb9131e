"""User-facing validation error kinds."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class AmountError(str, Enum):
    """Advisory amount validation failures, returned as values."""

    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_BALANCE = "insufficient_balance"

    @property
    def translation_key(self) -> str:
        return _TRANSLATION_KEYS[self]

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_TRANSLATION_KEYS = {
    AmountError.INVALID_AMOUNT: "assetInput.error.invalidAmount",
    AmountError.INSUFFICIENT_BALANCE: "assetInput.error.insufficientBalance",
}

_DEFAULT_MESSAGES = {
    AmountError.INVALID_AMOUNT: "Invalid amount",
    AmountError.INSUFFICIENT_BALANCE: "Insufficient balance",
}


def error_message(
    error: AmountError | None,
    translate: Callable[[str], str | None] | None = None,
) -> str | None:
    """Resolve the message shown for ``error``.

    Args:
        error: The validation result, or None when there is nothing to show
        translate: Optional lookup from translation key to localized text.
            A missing or empty translation falls back to the English default.

    Returns:
        The message to display, or None when ``error`` is None
    """
    if error is None:
        return None
    if translate is not None:
        translated = translate(error.translation_key)
        if translated:
            return translated
    return error.default_message
