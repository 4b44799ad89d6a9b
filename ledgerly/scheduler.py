"""Reminder scheduler.

Each reminder gets its own one-shot daemon timer. A reminder whose due
instant has already passed fires immediately. Delivery is best effort:
a failing notifier is logged, never retried.
"""

import enum
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from ledgerly.domain.records import Reminder

logger = logging.getLogger(__name__)

console = Console()

# Longer delays are re-armed in steps so far-future reminders never overflow
# the timer's wait
MAX_TIMER_DELAY = 24 * 60 * 60.0

Notifier = Callable[[Reminder], None]
Clock = Callable[[], datetime]


class ReminderState(enum.Enum):
    SCHEDULED = "scheduled"
    FIRED = "fired"


def print_reminder(reminder: Reminder) -> None:
    """Default notifier: print the reminder to the console."""
    console.print(f"\n[bold yellow]🔔 Reminder: {escape(reminder.task)} is due now![/bold yellow]")


class ScheduledReminder:
    """A reminder registered with the scheduler.

    Moves from SCHEDULED to FIRED exactly once.
    """

    def __init__(self, reminder: Reminder, notify: Notifier) -> None:
        self.reminder = reminder
        self._notify = notify
        self._lock = threading.Lock()
        self._fired = threading.Event()
        self._state = ReminderState.SCHEDULED

    @property
    def state(self) -> ReminderState:
        return self._state

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the reminder has fired.

        Returns:
            True if it fired within the timeout.
        """
        return self._fired.wait(timeout)

    def fire(self) -> None:
        with self._lock:
            if self._state is ReminderState.FIRED:
                return
            self._state = ReminderState.FIRED

        logger.debug("Reminder fired: %s", self.reminder.task)
        try:
            self._notify(self.reminder)
        except Exception:
            logger.exception("Reminder notification failed: %s", self.reminder.task)
        finally:
            self._fired.set()


class ReminderScheduler:
    """Fires reminder notifications at or after their due instant."""

    def __init__(self, notify: Notifier | None = None, clock: Clock = datetime.now) -> None:
        self._notify = notify or print_reminder
        self._clock = clock

    def delay_for(self, reminder: Reminder) -> float:
        """Seconds until the reminder is due, never negative."""
        return max(0.0, (reminder.due_at - self._clock()).total_seconds())

    def schedule(self, reminder: Reminder) -> ScheduledReminder:
        """Arrange for a reminder to fire on a background timer.

        Args:
            reminder: Reminder to deliver.

        Returns:
            Handle for the scheduled reminder.
        """
        scheduled = ScheduledReminder(reminder, self._notify)
        delay = self._arm(scheduled)
        logger.info("Reminder scheduled: %s in %.0fs", reminder.task, delay)
        return scheduled

    def _arm(self, scheduled: ScheduledReminder) -> float:
        delay = self.delay_for(scheduled.reminder)
        if delay > MAX_TIMER_DELAY:
            timer = threading.Timer(MAX_TIMER_DELAY, self._arm, args=(scheduled,))
        else:
            timer = threading.Timer(delay, scheduled.fire)
        timer.daemon = True
        timer.start()
        return delay
