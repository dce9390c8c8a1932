# =============================================
# jobtracker/views/base.py
# =============================================
"""
Shared state handling for the view layer.

Views fetch through ``ApiClient`` and never raise on a failed call: the
failure is logged and a user-facing message is stored on ``error`` until
``dismiss_error()`` clears it.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from jobtracker.client.api import ApiClient, ApiError

logger = logging.getLogger(__name__)


class ViewState:
    def __init__(self, client: ApiClient):
        self.client = client
        self.loading = False
        self.error: Optional[str] = None
        self.failure: Optional[Exception] = None

    def dismiss_error(self) -> None:
        self.error = None
        self.failure = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @asynccontextmanager
    async def guard(self, failure_message: str) -> AsyncIterator[None]:
        """Run one fetch, recording any failure instead of propagating it"""
        self.loading = True
        self.dismiss_error()
        try:
            yield
        except ApiError as e:
            logger.warning(f"{type(self).__name__}: {e.message} (status {e.status_code})")
            self.error = failure_message
            self.failure = e
        except Exception as e:
            logger.exception(f"{type(self).__name__}: unexpected error: {e}")
            self.error = failure_message
            self.failure = e
        finally:
            self.loading = False
