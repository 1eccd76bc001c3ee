"""
Cooperative frame scheduler.

Games request "run this on the next frame" and the main loop fires the
queued callbacks once per frame. This replaces self-rescheduling frame
callbacks with an explicit object that tests can step deterministically.

Usage:
    scheduler = FrameScheduler()
    handle = scheduler.schedule(game_tick)

    # In game loop:
    scheduler.run_pending()

    # Stop: the queued callback will not fire
    scheduler.cancel(handle)
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from dodgekit.logging import get_logger

log = get_logger('scheduler')


@dataclass
class FrameHandle:
    """Handle for a callback queued for the next frame."""
    handle_id: int
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class FrameScheduler:
    """
    Queue of one-shot callbacks fired on the next frame.

    Callbacks scheduled while a frame is running are deferred to the
    following frame, so a callback that reschedules itself runs exactly
    once per frame. Cancelling a handle guarantees its callback never
    fires, even if it is already queued for the current frame.
    """

    def __init__(self):
        self._scheduled: List[FrameHandle] = []
        self._next_id = 1
        self._frame_number = 0

    @property
    def frame_number(self) -> int:
        """Number of frames run so far."""
        return self._frame_number

    @property
    def pending(self) -> int:
        """Number of live callbacks waiting for the next frame."""
        return sum(1 for h in self._scheduled if h.active)

    def schedule(self, callback: Callable[[], None]) -> FrameHandle:
        """Queue callback for the next frame and return its handle."""
        handle = FrameHandle(self._next_id, callback)
        self._next_id += 1
        self._scheduled.append(handle)
        log.trace("scheduled #%d for frame %d", handle.handle_id, self._frame_number + 1)
        return handle

    def cancel(self, handle: Optional[FrameHandle]) -> None:
        """Invalidate a handle. Safe to call with None or a spent handle."""
        if handle is None:
            return
        handle.cancelled = True
        if handle in self._scheduled:
            self._scheduled.remove(handle)

    def run_pending(self) -> int:
        """Run one frame: fire every callback queued before this call.

        Returns:
            Number of callbacks fired
        """
        batch = self._scheduled
        self._scheduled = []
        self._frame_number += 1

        fired = 0
        for handle in batch:
            # A callback earlier in the batch may cancel a later one
            if handle.cancelled:
                continue
            handle.fired = True
            handle.callback()
            fired += 1
        return fired

    def advance(self, frames: int) -> int:
        """Run `frames` frames back to back. Returns total callbacks fired."""
        total = 0
        for _ in range(frames):
            total += self.run_pending()
        return total
