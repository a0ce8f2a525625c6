import time
from dataclasses import dataclass, field
from typing import Any, Callable


def is_rate_limited(error: BaseException) -> bool:
    """True for quota errors: HTTP 429 or a RESOURCE_EXHAUSTED status."""
    if getattr(error, "code", None) == 429 or getattr(error, "status_code", None) == 429:
        return True
    message = str(error)
    return "429" in message or "RESOURCE_EXHAUSTED" in message


@dataclass
class RetryPolicy:
    max_attempts: int = 2
    delay_seconds: float = 2.0
    retry_on: Callable[[BaseException], bool] = is_rate_limited
    sleep: Callable[[float], Any] = field(default=time.sleep, repr=False)


def call_with_retry(policy: RetryPolicy, func: Callable[..., Any], *args, **kwargs) -> Any:
    """Call func, retrying errors accepted by policy.retry_on.

    Waits policy.delay_seconds between attempts and re-raises the last error
    once policy.max_attempts calls have failed. Errors the policy does not
    retry are raised immediately.
    """
    attempts = max(1, policy.max_attempts)
    for attempt in range(1, attempts + 1):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if attempt >= attempts or not policy.retry_on(e):
                raise
            print(f"Retryable error on attempt {attempt}/{attempts}: {e}. Retrying in {policy.delay_seconds}s...")
            policy.sleep(policy.delay_seconds)
