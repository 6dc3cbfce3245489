"""Readiness state tracking for Kubernetes probes.

The database client reports connectivity into a `ReadinessTracker`; the
`/ready` endpoint reads it. States move as follows:

```
STARTING ──connect ok──▶ READY ──connection lost──▶ NOT_READY
                           ▲                            │
                           └────────reconnected─────────┘
```

A failed initial connect moves STARTING straight to NOT_READY. The tracker is
only written from the event loop thread (request handlers and pymongo's async
monitor tasks), so it holds no lock.
"""

import enum
import logging

import attrs

logger = logging.getLogger("foundation.readiness")


class ReadinessState(enum.Enum):
    """Readiness of the service to handle database-backed requests."""

    STARTING = "starting"
    READY = "ready"
    NOT_READY = "not_ready"


@attrs.define(slots=True)
class ReadinessTracker:
    """Mutable readiness state with logged transitions.

    Attributes:
        name: Name of the dependency being tracked (used in log records).
        state: Current readiness state.
        reason: Human-readable reason for the last NOT_READY transition.
    """

    name: str = "database"
    state: ReadinessState = ReadinessState.STARTING
    reason: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.state is ReadinessState.READY

    def mark_connected(self) -> None:
        """Record a successful connection, heartbeat, or ping."""
        self._transition(ReadinessState.READY, None)

    def mark_disconnected(self, reason: str) -> None:
        """Record a lost or failed connection.

        Args:
            reason: Why the dependency is considered unavailable.
        """
        self._transition(ReadinessState.NOT_READY, reason)

    def _transition(self, new_state: ReadinessState, reason: str | None) -> None:
        old_state = self.state
        self.reason = reason
        if old_state is new_state:
            return
        self.state = new_state

        log = logger.info if new_state is ReadinessState.READY else logger.warning
        log(
            "Readiness state changed",
            extra={
                "dependency": self.name,
                "old_state": old_state.value,
                "new_state": new_state.value,
                "reason": reason,
            },
        )
