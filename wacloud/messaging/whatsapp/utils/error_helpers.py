"""
WhatsApp error handling utilities.

Centralizes logging of failed Graph API operations, including detection of
expired or invalid access tokens. Callers re-raise after logging.
"""

from typing import Any

from wacloud.core.exceptions import WhatsAppApiError

# Graph API OAuthException code for invalid or expired access tokens
ERROR_CODE_ACCESS_TOKEN = 190


def is_authentication_error(error: Exception) -> bool:
    """Check if an exception indicates an authentication failure.

    Args:
        error: The exception to check

    Returns:
        True for HTTP 401 responses and OAuthException code 190
    """
    if isinstance(error, WhatsAppApiError):
        return error.status == 401 or error.code == ERROR_CODE_ACCESS_TOKEN

    error_str = str(error)
    return "401" in error_str or "Unauthorized" in error_str


def log_whatsapp_error(
    error: Exception,
    operation: str,
    target: str,
    phone_number_id: str,
    logger: Any,
    extra_context: str | None = None,
) -> None:
    """Log a failed WhatsApp operation with consistent formatting.

    Args:
        error: The exception that occurred
        operation: Description of the operation (e.g., "send text message")
        target: Recipient, message ID or template the operation was for
        phone_number_id: Business phone number ID for logging context
        logger: Logger instance for error logging
        extra_context: Optional additional context to include in error log
    """
    if is_authentication_error(error):
        logger.error(f"CRITICAL: WhatsApp Authentication Failed - Cannot {operation}!")
        logger.error(f"Check WhatsApp access token for phone_id {phone_number_id}")

    error_message = f"Failed to {operation} ({target}): {error}"
    if extra_context:
        error_message = f"{error_message} - {extra_context}"

    # Unexpected failures get a traceback; API errors are already descriptive
    logger.error(error_message, exc_info=not isinstance(error, WhatsAppApiError))
