# Retry policy for outbound calls
import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RetryPolicy:
    """Bounded exponential backoff around a single async operation.

    ``max_attempts`` counts the initial call, so the default of 3 means one
    call plus two retries. Any exception triggers a retry; once the attempts
    are used up the last exception is re-raised unchanged.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 8.0,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None
    ):
        if max_attempts < 1:
            raise ValueError('max_attempts must be at least 1')
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self._sleep = sleep or asyncio.sleep

    def delay_for(self, attempt: int) -> float:
        """Delay before retry number ``attempt`` (1-based)"""
        return min(self.base_delay * (2 ** (attempt - 1)), self.max_delay)

    async def run(self, operation: Callable[[], Awaitable[T]], description: str = 'operation') -> T:
        attempt = 0
        while True:
            attempt += 1
            try:
                return await operation()
            except Exception as e:
                if attempt >= self.max_attempts:
                    logger.error(f'{description} failed after {attempt} attempts: {e}')
                    raise
                delay = self.delay_for(attempt)
                logger.warning(
                    f'{description} failed (attempt {attempt}/{self.max_attempts}): {e}. '
                    f'Retrying in {delay:.1f}s'
                )
                await self._sleep(delay)
