"""
In-memory credential store

Maps username -> UserRecord for the lifetime of the application that owns it.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from auth.models import UserRecord


class CredentialStore:
    def __init__(self):
        self._users: Dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> Optional[UserRecord]:
        return self._users.get(username)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """
        First record (in insertion order) whose email matches exactly.

        Emails are not unique, so with duplicates the earliest registration wins.
        """
        for record in list(self._users.values()):
            if record.email == email:
                return record
        return None

    def insert(self, username: str, record: UserRecord) -> None:
        """Unconditional insert; the caller has already checked the username is free."""
        with self._lock:
            self._users[username] = record

    def insert_if_absent(self, username: str, record: UserRecord) -> bool:
        """Atomically insert unless ``username`` is taken. Returns True on insert."""
        with self._lock:
            if username in self._users:
                return False
            self._users[username] = record
            return True

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)
