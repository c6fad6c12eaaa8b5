"""
Retry policy for external lookups.
"""

from .backoff import RetryOutcome, RetryResult, backoff_delay, is_transient, retry_async

__all__ = [
    'RetryOutcome',
    'RetryResult',
    'backoff_delay',
    'is_transient',
    'retry_async'
]
