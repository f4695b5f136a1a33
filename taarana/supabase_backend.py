"""
Supabase-backed identity provider and record store.
Used when TAARANA_BACKEND=supabase. Every call is a single attempt; the
provider's error message is passed through to the caller.
"""

import logging
from datetime import datetime, timezone

import jwt
from supabase import AuthError as SupabaseAuthError
from supabase import create_client

from .auth import (
    OAUTH_PROVIDERS,
    SIGNED_IN,
    SIGNED_OUT,
    IdentityProvider,
    Session,
    validate_otp,
    validate_otp_channel,
)
from .errors import AuthError, NotFoundError, ValidationError
from .store import RecordStore

logger = logging.getLogger(__name__)

PROFILE_TABLE = "user_profiles"
KV_TABLE = "kv_store"

OTP_TYPES = {"phone": "sms", "email": "email"}


def make_client(url, key):
    return create_client(url, key)


def _token_expiry(token):
    # get_user() has already checked the signature; only the expiry is read here.
    claims = jwt.decode(token, options={"verify_signature": False})
    return datetime.fromtimestamp(claims["exp"], tz=timezone.utc)


def _to_session(user, access_token, expires_at=None):
    metadata = getattr(user, "user_metadata", None) or {}
    if expires_at is None:
        expires_at = _token_expiry(access_token)
    elif not isinstance(expires_at, datetime):
        expires_at = datetime.fromtimestamp(expires_at, tz=timezone.utc)
    return Session(
        user_id=user.id,
        email=getattr(user, "email", None),
        name=metadata.get("name") or "User",
        access_token=access_token,
        expires_at=expires_at,
    )


class SupabaseIdentityProvider(IdentityProvider):
    def __init__(self, client):
        super().__init__()
        self.client = client

    def _session_from_response(self, response):
        if response.session is None or response.user is None:
            raise AuthError("Sign-in did not return a session", status_code=401)
        session = _to_session(response.user, response.session.access_token, response.session.expires_at)
        logger.info("User %s signed in", session.user_id)
        self._notify(SIGNED_IN, session)
        return session

    def sign_up(self, email, password, name, phone=None):
        attributes = {
            "email": email,
            "password": password,
            "user_metadata": {"name": name},
            # No mail server is configured, so accounts start confirmed.
            "email_confirm": True,
        }
        if phone:
            attributes["phone"] = phone
        try:
            response = self.client.auth.admin.create_user(attributes)
        except SupabaseAuthError as e:
            logger.warning("Signup rejected: %s", e.message)
            raise AuthError(e.message)
        logger.info("Registered user %s", response.user.id)
        return response.user.id

    def sign_in_with_password(self, email, password):
        try:
            response = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except SupabaseAuthError as e:
            logger.warning("Rejected password sign-in: %s", e.message)
            raise AuthError(e.message, status_code=401)
        return self._session_from_response(response)

    def send_otp(self, channel, address):
        validate_otp_channel(channel)
        if not address:
            raise ValidationError(f"Please enter your {channel}")
        try:
            self.client.auth.sign_in_with_otp({channel: address})
        except SupabaseAuthError as e:
            raise AuthError(e.message)
        logger.info("Sent OTP by %s", channel)

    def verify_otp(self, channel, address, code):
        validate_otp_channel(channel)
        code = validate_otp(code)
        try:
            response = self.client.auth.verify_otp({channel: address, "token": code, "type": OTP_TYPES[channel]})
        except SupabaseAuthError as e:
            logger.warning("Rejected OTP for %s sign-in: %s", channel, e.message)
            raise AuthError(e.message, status_code=401)
        return self._session_from_response(response)

    def oauth_url(self, provider, redirect_to):
        if provider not in OAUTH_PROVIDERS:
            raise ValidationError(f"Unsupported sign-in provider: {provider}")
        try:
            response = self.client.auth.sign_in_with_oauth(
                {"provider": provider, "options": {"redirect_to": redirect_to}}
            )
        except SupabaseAuthError as e:
            raise AuthError(e.message)
        return response.url

    def get_session(self, token):
        try:
            response = self.client.auth.get_user(token)
        except SupabaseAuthError:
            return None
        if response is None or response.user is None:
            return None
        return _to_session(response.user, token)

    def sign_out(self, token):
        session = self.get_session(token)
        try:
            self.client.auth.admin.sign_out(token)
        except SupabaseAuthError as e:
            raise AuthError(e.message)
        if session is not None:
            logger.info("User %s signed out", session.user_id)
            self._notify(SIGNED_OUT, session)


class SupabaseStore(RecordStore):
    def __init__(self, client, profile_table=PROFILE_TABLE, kv_table=KV_TABLE):
        self.client = client
        self.profile_table = profile_table
        self.kv_table = kv_table

    def put_record(self, key, value):
        self.client.table(self.kv_table).upsert({"key": key, "value": value}).execute()
        logger.debug("Stored record %s", key)

    def get_record(self, key):
        response = self.client.table(self.kv_table).select("value").eq("key", key).execute()
        if not response.data:
            raise NotFoundError(f"Record not found: {key}")
        return response.data[0]["value"]

    def get_records_by_prefix(self, prefix):
        response = (
            self.client.table(self.kv_table)
            .select("key, value")
            .like("key", f"{prefix}%")
            .order("key")
            .execute()
        )
        return [row["value"] for row in response.data]

    def create_profile(self, user_id, fields):
        row = dict(fields)
        row["user_id"] = user_id
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self.client.table(self.profile_table).insert(row).execute()
        logger.info("Created profile for user %s", user_id)
        return user_id

    def get_profile(self, user_id):
        response = self.client.table(self.profile_table).select("*").eq("user_id", user_id).execute()
        if not response.data:
            raise NotFoundError("Profile not found")
        return response.data[0]

    def update_profile(self, user_id, fields):
        response = self.client.table(self.profile_table).update(fields).eq("user_id", user_id).execute()
        if not response.data:
            raise NotFoundError("Profile not found")
        return response.data[0]
