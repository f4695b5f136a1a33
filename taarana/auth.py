"""
Identity and session handling.

Sign-up input is validated here before any provider call. The provider
itself is pluggable: MemoryIdentityProvider keeps users in process, and
supabase_backend.SupabaseIdentityProvider delegates to Supabase Auth.
Both hand back a Session carrying the bearer token used by the API.
"""

import logging
import re
import secrets
import uuid
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlencode

from werkzeug.security import check_password_hash, generate_password_hash

from .errors import AuthError, UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
OTP_LENGTH = 6
OTP_TTL = timedelta(minutes=10)
OUTBOX_SIZE = 100
OTP_CHANNELS = ("phone", "email")
OAUTH_PROVIDERS = ("google",)
GENDERS = ("male", "female", "other")

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass
class Session:
    user_id: str
    email: Optional[str]
    name: str
    access_token: str
    expires_at: datetime

    def is_expired(self, now=None):
        return (now or _utcnow()) >= self.expires_at

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "access_token": self.access_token,
            "token_type": "bearer",
            "expires_at": self.expires_at.isoformat(),
        }


# ─────────────────────────────────────────────
# VALIDATION
# ─────────────────────────────────────────────
def text_field(data, key, strip=True):
    """A string field from a JSON payload; missing or null reads as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value.strip() if strip else value


def validate_signup(data):
    """Check sign-up fields; returns the cleaned account fields."""
    name = text_field(data, "name")
    email = text_field(data, "email").lower()
    phone = text_field(data, "phone")
    password = text_field(data, "password", strip=False)

    if not name or not email or not phone:
        raise ValidationError("Please fill in all required fields")
    if not EMAIL_RE.match(email):
        raise ValidationError("Please enter a valid email address")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password != data.get("confirm_password"):
        raise ValidationError("Passwords do not match")

    fields = {"name": name, "email": email, "phone": phone, "password": password}

    # Personal details are optional as a step, but complete when present.
    if "age" in data or "gender" in data:
        age, gender = data.get("age"), data.get("gender")
        if age in (None, "") or not gender:
            raise ValidationError("Please fill in all required fields")
        try:
            age = int(age)
        except (TypeError, ValueError):
            raise ValidationError("Age must be a number")
        if age <= 0:
            raise ValidationError("Age must be a positive number")
        if gender not in GENDERS:
            raise ValidationError(f"Gender must be one of: {', '.join(GENDERS)}")
        fields["age"] = age
        fields["gender"] = gender
    return fields


def validate_otp_channel(channel):
    if channel not in OTP_CHANNELS:
        raise ValidationError("OTP can be sent by phone or email only")
    return channel


def validate_otp(code):
    code = str(code or "").strip()
    if len(code) != OTP_LENGTH or not code.isdigit():
        raise ValidationError("Invalid OTP")
    return code


def bearer_token(header):
    """Pull the token out of an 'Authorization: Bearer <token>' header."""
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


# ─────────────────────────────────────────────
# PROVIDERS
# ─────────────────────────────────────────────
class IdentityProvider:
    """Contract for the hosted identity service."""

    def __init__(self):
        self._listeners = []

    def on_session_change(self, callback):
        """Register callback(event, session); returns a function that unsubscribes it."""
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def _notify(self, event, session):
        for callback in list(self._listeners):
            callback(event, session)

    def sign_up(self, email, password, name, phone=None):
        raise NotImplementedError

    def sign_in_with_password(self, email, password):
        raise NotImplementedError

    def send_otp(self, channel, address):
        raise NotImplementedError

    def verify_otp(self, channel, address, code):
        raise NotImplementedError

    def oauth_url(self, provider, redirect_to):
        raise NotImplementedError

    def get_session(self, token):
        raise NotImplementedError

    def sign_out(self, token):
        raise NotImplementedError

    def require_session(self, token):
        session = self.get_session(token) if token else None
        if session is None:
            raise UnauthorizedError()
        return session


class MemoryIdentityProvider(IdentityProvider):
    """In-process users, sessions and one-time codes."""

    def __init__(self, session_ttl=3600, oauth_base_url="https://accounts.google.com/o/oauth2/v2/auth"):
        super().__init__()
        self.session_ttl = timedelta(seconds=session_ttl)
        self.oauth_base_url = oauth_base_url
        self.users = {}      # user_id -> {email, phone, name, password_hash, created_at}
        self.sessions = {}   # token -> Session
        self.otps = {}       # (channel, address) -> (code, expires_at)
        # Live codes awaiting delivery, one per address.
        self.outbox = deque(maxlen=OUTBOX_SIZE)

    def _find_user(self, field, value):
        for uid, user in self.users.items():
            if user.get(field) == value:
                return uid, user
        return None, None

    def _start_session(self, user_id):
        user = self.users[user_id]
        session = Session(
            user_id=user_id,
            email=user.get("email"),
            name=user.get("name") or "User",
            access_token=secrets.token_urlsafe(32),
            expires_at=_utcnow() + self.session_ttl,
        )
        self.sessions[session.access_token] = session
        logger.info("User %s signed in", user_id)
        self._notify(SIGNED_IN, session)
        return session

    def sign_up(self, email, password, name, phone=None):
        email = email.strip().lower()
        if self._find_user("email", email)[0]:
            raise AuthError("User already registered")
        if phone and self._find_user("phone", phone)[0]:
            raise AuthError("Phone number already registered")

        user_id = str(uuid.uuid4())
        self.users[user_id] = {
            "email": email,
            "phone": phone,
            "name": name,
            "password_hash": generate_password_hash(password),
            "created_at": datetime.now().isoformat(),
        }
        logger.info("Registered user %s", user_id)
        return user_id

    def sign_in_with_password(self, email, password):
        uid, user = self._find_user("email", (email or "").strip().lower())
        if not user or not user["password_hash"] or not check_password_hash(user["password_hash"], password or ""):
            logger.warning("Rejected password sign-in")
            raise AuthError("Invalid login credentials", status_code=401)
        return self._start_session(uid)

    def _forget_otp(self, key):
        self.otps.pop(key, None)
        for message in [m for m in self.outbox if (m["channel"], m["address"]) == key]:
            self.outbox.remove(message)

    def _purge_expired_otps(self):
        now = _utcnow()
        for key in [key for key, (_, expires_at) in self.otps.items() if expires_at <= now]:
            self._forget_otp(key)

    def send_otp(self, channel, address):
        validate_otp_channel(channel)
        if not address:
            raise ValidationError(f"Please enter your {channel}")
        self._purge_expired_otps()
        # A new code replaces any earlier one for the same address.
        self._forget_otp((channel, address))
        code = f"{secrets.randbelow(10 ** OTP_LENGTH):0{OTP_LENGTH}d}"
        self.otps[(channel, address)] = (code, _utcnow() + OTP_TTL)
        self.outbox.append({"channel": channel, "address": address, "code": code})
        logger.info("Sent OTP by %s", channel)
        logger.debug("OTP for %s: %s", address, code)

    def verify_otp(self, channel, address, code):
        validate_otp_channel(channel)
        code = validate_otp(code)
        self._purge_expired_otps()
        expected = self.otps.get((channel, address))
        if expected is None or not secrets.compare_digest(expected[0], code):
            logger.warning("Rejected OTP for %s sign-in", channel)
            raise AuthError("Token has expired or is invalid", status_code=401)
        self._forget_otp((channel, address))

        uid, _ = self._find_user(channel, address)
        if uid is None:
            # First sign-in with a one-time code creates the account.
            uid = str(uuid.uuid4())
            self.users[uid] = {
                "email": address if channel == "email" else None,
                "phone": address if channel == "phone" else None,
                "name": "User",
                "password_hash": None,
                "created_at": datetime.now().isoformat(),
            }
        return self._start_session(uid)

    def oauth_url(self, provider, redirect_to):
        if provider not in OAUTH_PROVIDERS:
            raise ValidationError(f"Unsupported sign-in provider: {provider}")
        query = urlencode({"redirect_uri": redirect_to, "response_type": "code", "scope": "openid email profile"})
        return f"{self.oauth_base_url}?{query}"

    def get_session(self, token):
        session = self.sessions.get(token)
        if session is None:
            return None
        if session.is_expired():
            del self.sessions[token]
            self._notify(SIGNED_OUT, session)
            return None
        return session

    def sign_out(self, token):
        session = self.sessions.pop(token, None)
        if session is not None:
            logger.info("User %s signed out", session.user_id)
            self._notify(SIGNED_OUT, session)
