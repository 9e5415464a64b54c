"""In-memory session store tracking the questions already asked per session."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
import os
import time

logger = logging.getLogger(__name__)

# Idle sessions older than this are dropped on the next request
DEFAULT_MAX_SESSION_AGE_SECONDS = 3600.0


@dataclass
class Session:
    session_id: str
    questions: List[str] = field(default_factory=list)
    timestamp: float = field(default_factory=time.time)


class SessionStore:
    """
    Process-wide mapping of session id -> Session.

    Sessions are only removed by age, and only when prune() is called.
    There is no locking: two requests for the same session id may interleave
    their read-modify-write, in which case the last timestamp wins.
    """

    def __init__(self, max_age: Optional[float] = None):
        if max_age is None:
            max_age = float(os.getenv("SESSION_MAX_AGE_SECONDS", DEFAULT_MAX_SESSION_AGE_SECONDS))
        self.max_age = max_age
        self._sessions: Dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str) -> Session:
        """Return the session for session_id, creating an empty one if unseen."""
        session = self._sessions.get(session_id)
        if session is None:
            session = Session(session_id=session_id)
            self._sessions[session_id] = session
        return session

    def record(self, session_id: str, question_text: str, now: Optional[float] = None) -> Session:
        """
        Append a newly issued question to the session and refresh its timestamp.

        Args:
            session_id (str): Client-generated session identifier
            question_text (str): Text of the question just sent to the client
            now (float, optional): Current time in seconds; defaults to time.time()

        Returns:
            Session: The updated session record
        """
        session = self.get_or_create(session_id)
        session.questions.append(question_text)
        session.timestamp = time.time() if now is None else now
        return session

    def prune(self, now: Optional[float] = None, max_age: Optional[float] = None) -> int:
        """
        Remove every session idle for longer than max_age seconds.

        Returns:
            int: Number of sessions removed
        """
        now = time.time() if now is None else now
        max_age = self.max_age if max_age is None else max_age
        expired = [sid for sid, s in self._sessions.items() if now - s.timestamp > max_age]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Pruned %d expired session(s)", len(expired))
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()
