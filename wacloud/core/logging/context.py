"""
Request context management using contextvars for automatic propagation.

The phone number ID (which business number is sending) and the recipient
are set once per operation and picked up by every logger created through
``get_logger``.
"""

from contextvars import ContextVar

_phone_number_id_context: ContextVar[str | None] = ContextVar(
    "phone_number_id", default=None
)
_recipient_context: ContextVar[str | None] = ContextVar("recipient", default=None)


def set_request_context(
    phone_number_id: str | None = None,
    recipient: str | None = None,
) -> None:
    """
    Set the request context for the current async context.

    Args:
        phone_number_id: Business phone number ID the operation runs for
        recipient: WhatsApp ID or phone number of the other party
    """
    if phone_number_id is not None:
        _phone_number_id_context.set(phone_number_id)
    if recipient is not None:
        _recipient_context.set(recipient)


def get_current_phone_number_id() -> str | None:
    """Get the current business phone number ID, or None if not set."""
    return _phone_number_id_context.get()


def get_current_recipient() -> str | None:
    """Get the current recipient, or None if not set."""
    return _recipient_context.get()


def clear_request_context() -> None:
    """
    Clear the request context.

    Context is isolated per task already; this is mostly useful for tests.
    """
    _phone_number_id_context.set(None)
    _recipient_context.set(None)
