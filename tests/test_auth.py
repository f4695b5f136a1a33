from datetime import timedelta

import pytest

from taarana.auth import (
    OUTBOX_SIZE,
    SIGNED_IN,
    SIGNED_OUT,
    MemoryIdentityProvider,
    bearer_token,
    validate_otp,
    validate_signup,
)
from taarana.errors import AuthError, UnauthorizedError, ValidationError

VALID = {
    "name": "Asha",
    "email": "Asha@Example.com ",
    "phone": "+919800000001",
    "password": "secret123",
    "confirm_password": "secret123",
}


def test_validate_signup_cleans_fields():
    fields = validate_signup(VALID)
    assert fields["email"] == "asha@example.com"
    assert "age" not in fields


@pytest.mark.parametrize("changes, message", [
    ({"phone": ""}, "Please fill in all required fields"),
    ({"email": "not-an-email"}, "Please enter a valid email address"),
    ({"password": "12345", "confirm_password": "12345"}, "Password must be at least 6 characters"),
    ({"confirm_password": "secret124"}, "Passwords do not match"),
    ({"age": 30}, "Please fill in all required fields"),
    ({"age": "abc", "gender": "female"}, "Age must be a number"),
    ({"age": 0, "gender": "female"}, "Age must be a positive number"),
    ({"age": 30, "gender": "robot"}, "Gender must be one of"),
    ({"name": 123}, "name must be a string"),
    ({"email": ["asha@example.com"]}, "email must be a string"),
    ({"password": 12345678}, "password must be a string"),
])
def test_validate_signup_errors(changes, message):
    with pytest.raises(ValidationError, match=message):
        validate_signup({**VALID, **changes})


def test_validate_signup_with_profile_step():
    fields = validate_signup({**VALID, "age": "30", "gender": "female"})
    assert fields["age"] == 30
    assert fields["gender"] == "female"


@pytest.mark.parametrize("code", ["12345", "1234567", "12a456", "", None])
def test_invalid_otp(code):
    with pytest.raises(ValidationError, match="Invalid OTP"):
        validate_otp(code)


def test_bearer_token():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("bearer abc") == "abc"
    assert bearer_token("Basic abc") is None
    assert bearer_token("") is None
    assert bearer_token(None) is None


@pytest.fixture
def provider():
    p = MemoryIdentityProvider()
    p.sign_up("asha@example.com", "secret123", "Asha", phone="+919800000001")
    return p


def test_duplicate_signup(provider):
    with pytest.raises(AuthError, match="User already registered"):
        provider.sign_up("ASHA@example.com", "another1", "Asha 2")
    with pytest.raises(AuthError, match="Phone number already registered"):
        provider.sign_up("other@example.com", "another1", "Other", phone="+919800000001")


def test_password_is_hashed(provider):
    user = next(iter(provider.users.values()))
    assert user["password_hash"] != "secret123"


def test_password_sign_in(provider):
    session = provider.sign_in_with_password("asha@example.com", "secret123")
    assert session.name == "Asha"
    assert provider.get_session(session.access_token) == session


def test_wrong_password(provider):
    with pytest.raises(AuthError, match="Invalid login credentials") as exc:
        provider.sign_in_with_password("asha@example.com", "wrong-password")
    assert exc.value.status_code == 401


def test_otp_sign_in_is_single_use(provider):
    provider.send_otp("phone", "+919800000001")
    code = provider.outbox[-1]["code"]
    session = provider.verify_otp("phone", "+919800000001", code)
    assert session.email == "asha@example.com"
    with pytest.raises(AuthError, match="Token has expired or is invalid"):
        provider.verify_otp("phone", "+919800000001", code)


def test_otp_wrong_code(provider):
    provider.send_otp("email", "asha@example.com")
    code = provider.outbox[-1]["code"]
    wrong = "000000" if code != "000000" else "111111"
    with pytest.raises(AuthError):
        provider.verify_otp("email", "asha@example.com", wrong)


def test_expired_otp(provider):
    provider.send_otp("email", "asha@example.com")
    code, expires_at = provider.otps[("email", "asha@example.com")]
    provider.otps[("email", "asha@example.com")] = (code, expires_at - timedelta(minutes=11))
    with pytest.raises(AuthError):
        provider.verify_otp("email", "asha@example.com", code)


def test_otp_for_new_address_creates_user(provider):
    provider.send_otp("phone", "+919800000002")
    session = provider.verify_otp("phone", "+919800000002", provider.outbox[-1]["code"])
    assert session.user_id in provider.users
    assert len(provider.users) == 2
    assert provider.users[session.user_id]["password_hash"] is None


def test_otp_channel_must_be_phone_or_email(provider):
    with pytest.raises(ValidationError):
        provider.send_otp("pigeon", "coop")


def test_oauth_url(provider):
    url = provider.oauth_url("google", "http://localhost:10000/home")
    assert "redirect_uri=http%3A%2F%2Flocalhost%3A10000%2Fhome" in url
    with pytest.raises(ValidationError):
        provider.oauth_url("myspace", "http://localhost")


def test_expired_session_is_dropped(provider):
    session = provider.sign_in_with_password("asha@example.com", "secret123")
    session.expires_at -= timedelta(hours=2)
    assert provider.get_session(session.access_token) is None
    assert session.access_token not in provider.sessions


def test_require_session(provider):
    with pytest.raises(UnauthorizedError):
        provider.require_session(None)
    with pytest.raises(UnauthorizedError):
        provider.require_session("bogus")


def test_session_change_events(provider):
    events = []
    unsubscribe = provider.on_session_change(lambda event, session: events.append(event))
    session = provider.sign_in_with_password("asha@example.com", "secret123")
    provider.sign_out(session.access_token)
    assert events == [SIGNED_IN, SIGNED_OUT]
    assert provider.get_session(session.access_token) is None

    unsubscribe()
    provider.sign_in_with_password("asha@example.com", "secret123")
    assert events == [SIGNED_IN, SIGNED_OUT]


def test_resending_otp_keeps_only_the_latest_code(provider):
    for _ in range(3):
        provider.send_otp("email", "asha@example.com")
    assert len(provider.outbox) == 1
    latest = provider.outbox[-1]["code"]
    assert provider.otps[("email", "asha@example.com")][0] == latest

    provider.verify_otp("email", "asha@example.com", latest)
    assert len(provider.outbox) == 0
    assert provider.otps == {}


def test_expired_otps_are_purged(provider):
    provider.send_otp("email", "asha@example.com")
    code, expires_at = provider.otps[("email", "asha@example.com")]
    provider.otps[("email", "asha@example.com")] = (code, expires_at - timedelta(minutes=11))

    provider.send_otp("phone", "+919800000001")
    assert list(provider.otps) == [("phone", "+919800000001")]
    assert [m["channel"] for m in provider.outbox] == ["phone"]


def test_outbox_is_capped(provider):
    for n in range(OUTBOX_SIZE + 5):
        provider.send_otp("phone", f"+9198{n:08d}")
    assert len(provider.outbox) == OUTBOX_SIZE
