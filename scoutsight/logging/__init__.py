"""Session logging."""

from scoutsight.logging.session_log import SessionLog, SessionLogEntry, SessionLogStats

__all__ = ["SessionLog", "SessionLogEntry", "SessionLogStats"]
