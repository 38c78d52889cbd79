"""Session refresh loop.

Keeps the access-token cookie alive while an admin page is open by calling
the refresh endpoint on a fixed interval. Best effort: a missed or failed
tick is simply retried on the next one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from jan_admin.config import ADMIN_PREFIX
from jan_admin.services.base import ServiceError
from jan_admin.services.session import SessionService

log = logging.getLogger("jan-admin.refresher")

# 12 minutes, inside the 15 minute access-token lifetime
DEFAULT_REFRESH_SECONDS = 12 * 60


class SessionRefresher:
    """Repeating refresh task tied to the current page and its visibility."""

    def __init__(
        self,
        session: SessionService,
        current_path: Callable[[], str],
        *,
        interval: float = DEFAULT_REFRESH_SECONDS,
        is_visible: Optional[Callable[[], bool]] = None,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.session = session
        self.current_path = current_path
        self.interval = interval
        self.is_visible = is_visible
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def should_refresh(self) -> bool:
        if not self.current_path().startswith(ADMIN_PREFIX):
            return False
        if self.is_visible is not None and not self.is_visible():
            return False
        return True

    async def tick(self) -> bool:
        """Run one refresh if the page calls for it. Returns True on success."""
        if not self.should_refresh():
            return False
        try:
            await self.session.refresh()
        except ServiceError as e:
            log.debug("Session refresh failed (%s), will retry next tick", e.message)
            return False
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.tick()
            except Exception as e:
                log.debug("Session refresh tick crashed (%r), will retry next tick", e)

    def start(self) -> None:
        """Start the loop on the running event loop; no-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def __aenter__(self) -> "SessionRefresher":
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()
