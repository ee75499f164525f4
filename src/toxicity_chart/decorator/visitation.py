"""Track which resources of an analysis run have already been decorated."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional, Set

from ..models import Resource

logger = logging.getLogger(__name__)


class TrackerState(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    DISABLED = "disabled"


class ResourceVisitationTracker:
    """Record the run's project key and the resources visited so far.

    The project key is written once; later calls only read it. Writes happen
    under a lock so decoration threads see a consistent state.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._project_key: Optional[str] = None
        self._state = TrackerState.UNCONFIGURED
        self._visited: Set[str] = set()

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def project_key(self) -> Optional[str]:
        return self._project_key

    @property
    def enabled(self) -> bool:
        return self._state is TrackerState.CONFIGURED

    def should_process_project(self, project: Resource) -> bool:
        """Record ``project``'s key and report whether the run should proceed."""

        with self._lock:
            if not project.key:
                if self._state is TrackerState.UNCONFIGURED:
                    logger.info("Project has no key; toxicity decoration disabled for this run")
                    self._state = TrackerState.DISABLED
                return False

            if self._state is TrackerState.DISABLED:
                return False
            if self._state is TrackerState.CONFIGURED:
                return True

            self._project_key = project.key
            self._state = TrackerState.CONFIGURED
            return True

    def already_processed(self, resource: Resource) -> bool:
        """Return ``True`` when ``resource`` is the project root of the run.

        An explicit root flag from the host wins; otherwise the resource key and
        long name are compared against the recorded project key.
        """

        if resource.is_root is not None:
            return resource.is_root

        project_key = self._project_key
        if not project_key:
            return False
        return project_key in (resource.key, resource.long_name)

    def mark_visited(self, resource: Resource) -> bool:
        """Record ``resource``; return ``False`` if it was recorded before."""

        identity = resource.identity
        with self._lock:
            if identity in self._visited:
                return False
            self._visited.add(identity)
            return True
