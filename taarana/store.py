"""
Profile and record store.
Records live in one flat key-value namespace, keyed by prefix:
  progress:{user_id}:{date}
  reminder:{user_id}:{reminder_id}
MemoryStore keeps everything in process; supabase_backend.SupabaseStore
talks to the hosted tables.
"""

import copy
import logging
from datetime import datetime

from .errors import NotFoundError

logger = logging.getLogger(__name__)


def progress_key(user_id, date):
    return f"progress:{user_id}:{date}"


def reminder_key(user_id, reminder_id):
    return f"reminder:{user_id}:{reminder_id}"


def user_prefix(kind, user_id):
    return f"{kind}:{user_id}:"


class RecordStore:
    """Interface shared by the store backends."""

    def put_record(self, key, value):
        raise NotImplementedError

    def get_record(self, key):
        raise NotImplementedError

    def get_records_by_prefix(self, prefix):
        raise NotImplementedError

    def create_profile(self, user_id, fields):
        raise NotImplementedError

    def get_profile(self, user_id):
        raise NotImplementedError

    def update_profile(self, user_id, fields):
        raise NotImplementedError


class MemoryStore(RecordStore):
    def __init__(self):
        self.records = {}    # key -> JSON value
        self.profiles = {}   # user_id -> profile dict

    # ── Records ───────────────────────────────
    def put_record(self, key, value):
        self.records[key] = copy.deepcopy(value)
        logger.debug("Stored record %s", key)

    def get_record(self, key):
        if key not in self.records:
            raise NotFoundError(f"Record not found: {key}")
        return copy.deepcopy(self.records[key])

    def get_records_by_prefix(self, prefix):
        return [copy.deepcopy(self.records[key]) for key in sorted(self.records) if key.startswith(prefix)]

    # ── Profiles ──────────────────────────────
    def create_profile(self, user_id, fields):
        profile = dict(fields)
        profile["user_id"] = user_id
        profile.setdefault("created_at", datetime.now().isoformat())
        self.profiles[user_id] = copy.deepcopy(profile)
        logger.info("Created profile for user %s", user_id)
        return user_id

    def get_profile(self, user_id):
        if user_id not in self.profiles:
            raise NotFoundError("Profile not found")
        return copy.deepcopy(self.profiles[user_id])

    def update_profile(self, user_id, fields):
        if user_id not in self.profiles:
            raise NotFoundError("Profile not found")
        self.profiles[user_id].update(copy.deepcopy(fields))
        return copy.deepcopy(self.profiles[user_id])
