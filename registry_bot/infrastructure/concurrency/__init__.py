from .session_lock import SessionLockManager

__all__ = ["SessionLockManager"]
