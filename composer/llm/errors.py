"""
LLM Error Classes

Exception hierarchy for the LLM providers used by the script planner.

Error Hierarchy:
    LLMError (base)
    ├── ConfigurationError (invalid/missing configuration)
    └── ProviderError (provider operation failures)
        ├── RateLimitError (transient)
        ├── ProviderNotAvailableError (overloaded or down, transient)
        ├── TimeoutError (transient)
        ├── NetworkError (transient)
        ├── AuthenticationError (permanent)
        └── InvalidRequestError (permanent)

Transient errors are retried with exponential backoff (see retry.py);
permanent errors are raised immediately.
"""

import re
from typing import Optional


# Gemini: "Please retry in 12.5s", OpenAI: "Please try again in 20s"
_RETRY_AFTER = re.compile(r"(?:retry|try again) in (\d+(?:\.\d+)?)\s*s", re.IGNORECASE)


class LLMError(Exception):
    """Base exception for all LLM errors."""
    pass


class ConfigurationError(LLMError):
    """Raised when LLM configuration is invalid or missing.

    The message should say how to fix it, e.g.:
        "Gemini API key not configured. Set GEMINI_API_KEY or pass api_key."
    """
    pass


class ProviderError(LLMError):
    """Raised when a provider call fails."""
    pass


class ProviderNotAvailableError(ProviderError):
    """Model overloaded or service down (HTTP 503). Transient."""
    pass


class RateLimitError(ProviderError):
    """Provider rate limit or quota exceeded. Transient.

    Attributes:
        retry_after: Seconds the provider asked us to wait, if it said so
    """

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class AuthenticationError(ProviderError):
    """Credentials are invalid, expired or missing. Permanent."""
    pass


class InvalidRequestError(ProviderError):
    """Request parameters are malformed or unsupported. Permanent."""
    pass


class TimeoutError(ProviderError):
    """Request exceeded the configured timeout. Transient."""
    pass


class NetworkError(ProviderError):
    """Connectivity problem (DNS, refused connection, TLS). Transient."""
    pass


def classify_provider_error(provider_name: str, error: Exception) -> ProviderError:
    """Map an SDK exception to the ProviderError subclass that drives retries.

    Args:
        provider_name: Human-readable provider name for the message
        error: Exception raised by the provider SDK

    Returns:
        ProviderError subclass instance (not raised)
    """
    message = str(error)
    lowered = message.lower()
    if "rate limit" in lowered or "rate_limit" in lowered or "429" in lowered or "quota" in lowered or "resource_exhausted" in lowered:
        match = _RETRY_AFTER.search(message)
        return RateLimitError(
            f"{provider_name} rate limit exceeded: {message}",
            retry_after=float(match.group(1)) if match else None,
        )
    if "503" in lowered or "overloaded" in lowered or "unavailable" in lowered:
        return ProviderNotAvailableError(f"{provider_name} is unavailable: {message}")
    if "auth" in lowered or "api_key" in lowered or "api key" in lowered or "401" in lowered or "403" in lowered:
        return AuthenticationError(f"{provider_name} authentication failed: {message}")
    if "timeout" in lowered or "timed out" in lowered:
        return TimeoutError(f"{provider_name} request timed out: {message}")
    if "network" in lowered or "connection" in lowered:
        return NetworkError(f"Network error connecting to {provider_name}: {message}")
    if "invalid" in lowered or "400" in lowered:
        return InvalidRequestError(f"Invalid {provider_name} request: {message}")
    return ProviderError(f"{provider_name} API call failed: {message}")
