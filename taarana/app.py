"""
Taarana Backend: Flask REST API
Symptom-based recommendations, cycle tracking, wellness chatbot and the
yoga / Ayurveda / diet catalogs, in English and Hindi.
"""

import logging
import uuid
from datetime import datetime
from functools import wraps

from flask import Blueprint, Flask, current_app, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .auth import MemoryIdentityProvider, bearer_token, text_field, validate_signup
from .catalogs import (
    REMINDER_CATEGORIES,
    default_reminders,
    diet_guidelines,
    get_remedy,
    get_yoga_pose,
    list_remedies,
    list_yoga_poses,
)
from .chatbot import get_chatbot_response, greeting
from .config import Config
from .cycle import calculate_cycle, parse_cycle_data
from .errors import NotFoundError, TaaranaError, ValidationError
from .i18n import resolve_language
from .recommender import build_recommendations, profile_symptoms
from .rules import SYMPTOM_IDS, SYMPTOMS, validate_rules
from .store import MemoryStore, progress_key, reminder_key, user_prefix

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")

PROFILE_LISTS = ("health_goals", "diseases", "symptoms")


def build_backends(config):
    """Identity provider and record store for the configured backend."""
    if config.backend == "supabase":
        from .supabase_backend import SupabaseIdentityProvider, SupabaseStore, make_client

        client = make_client(config.supabase_url, config.supabase_key)
        return SupabaseIdentityProvider(client), SupabaseStore(client)
    return MemoryIdentityProvider(session_ttl=config.session_ttl), MemoryStore()


def create_app(config=None, identity=None, store=None):
    if config is None:
        config = Config.from_env()
    else:
        config.validate()
    validate_rules()

    if identity is None or store is None:
        default_identity, default_store = build_backends(config)
        identity = identity or default_identity
        store = store or default_store

    app = Flask(__name__)
    app.config["TESTING"] = config.testing
    app.json.ensure_ascii = False
    app.extensions["taarana"] = {"config": config, "identity": identity, "store": store}

    origins = config.cors_origins
    if origins != "*":
        origins = [origin.strip() for origin in origins.split(",") if origin.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins}})

    app.register_blueprint(api)
    app.register_error_handler(TaaranaError, handle_taarana_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)

    logger.info("Taarana API ready (%s backend)", config.backend)
    return app


# ─────────────────────────────────────────────
# ERROR HANDLERS
# ─────────────────────────────────────────────
def handle_taarana_error(error):
    if error.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.path, error.message)
    else:
        logger.warning("%s %s -> %d: %s", request.method, request.path, error.status_code, error.message)
    return jsonify({"status": "error", "message": error.message}), error.status_code


def handle_http_error(error):
    return jsonify({"status": "error", "message": error.description}), error.code


def handle_unexpected_error(error):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"status": "error", "message": "Internal server error"}), 500


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────
def _identity():
    return current_app.extensions["taarana"]["identity"]


def _store():
    return current_app.extensions["taarana"]["store"]


def _config():
    return current_app.extensions["taarana"]["config"]


def _json():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _language(data=None):
    return resolve_language((data or {}).get("language") or request.args.get("lang"))


def _current_session():
    token = bearer_token(request.headers.get("Authorization"))
    return _identity().get_session(token) if token else None


def require_session(view):
    @wraps(view)
    def decorated(*args, **kwargs):
        token = bearer_token(request.headers.get("Authorization"))
        g.session = _identity().require_session(token)
        return view(*args, **kwargs)
    return decorated


def _seed_user(user_id, profile):
    store = _store()
    store.create_profile(user_id, profile)
    for reminder in default_reminders():
        store.put_record(reminder_key(user_id, reminder["id"]), reminder)


def _profile(session, **fields):
    """The signed-in user's profile, created with defaults on first use."""
    try:
        return _store().get_profile(session.user_id)
    except NotFoundError:
        # Accounts from OAuth or OTP sign-in, or a sign-up whose profile write failed.
        profile = {"name": session.name, "email": session.email, **fields}
        for key in PROFILE_LISTS:
            profile.setdefault(key, [])
        _seed_user(session.user_id, profile)
        logger.info("Created missing profile for user %s", session.user_id)
        return _store().get_profile(session.user_id)


def _check_reminder(reminder):
    title, time = reminder.get("title"), reminder.get("time")
    if not isinstance(title, str) or not title.strip() or not isinstance(time, str) or not time.strip():
        raise ValidationError("title and time are required")
    if reminder.get("category") not in REMINDER_CATEGORIES:
        raise ValidationError(f"category must be one of: {', '.join(REMINDER_CATEGORIES)}")


def _cycle_status(profile):
    cycle = profile.get("cycle")
    if not cycle:
        return None
    return calculate_cycle(*parse_cycle_data(cycle))


# ─────────────────────────────────────────────
# API ROUTES
# ─────────────────────────────────────────────
@api.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "timestamp": datetime.now().isoformat()})


# ── Auth ──────────────────────────────────────
@api.route("/signup", methods=["POST"])
def signup():
    data = _json()
    fields = validate_signup(data)

    user_id = _identity().sign_up(fields["email"], fields["password"], fields["name"], fields["phone"])

    profile = {key: value for key, value in fields.items() if key != "password"}
    for key in PROFILE_LISTS:
        profile[key] = list(data.get(key) or [])
    profile["other_conditions"] = data.get("other_conditions") or ""
    profile["female_health"] = data.get("female_health") or {}
    _seed_user(user_id, profile)

    return jsonify({
        "status": "success",
        "message": "User registered successfully",
        "user_id": user_id,
        "name": fields["name"],
        "email": fields["email"],
    }), 201


@api.route("/login", methods=["POST"])
def login():
    data = _json()
    email = text_field(data, "email")
    password = text_field(data, "password", strip=False)
    if not email or not password:
        raise ValidationError("Email and password are required")

    session = _identity().sign_in_with_password(email, password)
    return jsonify({"status": "success", "message": "Login successful", "session": session.to_dict()})


@api.route("/otp/send", methods=["POST"])
def send_otp():
    data = _json()
    channel = data.get("channel")
    _identity().send_otp(channel, text_field(data, "address"))
    return jsonify({"status": "success", "message": f"OTP sent to your {channel}"})


@api.route("/otp/verify", methods=["POST"])
def verify_otp():
    data = _json()
    channel = data.get("channel")
    address = text_field(data, "address")
    session = _identity().verify_otp(channel, address, data.get("otp"))
    _profile(session, **({"phone": address} if channel == "phone" else {}))

    return jsonify({"status": "success", "message": "Login successful", "session": session.to_dict()})


@api.route("/oauth/<provider>", methods=["GET"])
def oauth(provider):
    redirect_to = request.args.get("redirect_to") or _config().oauth_redirect
    url = _identity().oauth_url(provider, redirect_to)
    return jsonify({"status": "success", "provider": provider, "url": url})


@api.route("/session", methods=["GET"])
@require_session
def current_session():
    return jsonify({"status": "success", "session": g.session.to_dict()})


@api.route("/logout", methods=["POST"])
@require_session
def logout():
    _identity().sign_out(g.session.access_token)
    return jsonify({"status": "success", "message": "Signed out"})


@api.route("/profile", methods=["GET"])
@require_session
def get_profile():
    return jsonify({"status": "success", "profile": _profile(g.session)})


# ── Recommendations ───────────────────────────
@api.route("/symptoms", methods=["GET"])
def symptoms():
    language = _language()
    return jsonify({"status": "success", "symptoms": [s.to_dict(language) for s in SYMPTOMS]})


@api.route("/recommendations", methods=["POST"])
def recommendations():
    data = _json()
    language = _language(data)
    selected = data.get("symptoms")
    if not isinstance(selected, list) or not all(isinstance(s, str) for s in selected):
        raise ValidationError("symptoms must be a list of symptom ids")

    unknown = sorted(set(selected) - SYMPTOM_IDS)
    if unknown:
        raise ValidationError(f"Unknown symptoms: {', '.join(unknown)}")

    bundle = build_recommendations(selected, language)
    return jsonify({"status": "success", "recommendations": bundle.to_dict()})


@api.route("/recommendations/profile", methods=["GET"])
@require_session
def profile_recommendations():
    selected = profile_symptoms(_profile(g.session))
    if not selected:
        raise ValidationError("Add symptoms or health conditions to your profile to get recommendations")
    bundle = build_recommendations(selected, _language())
    return jsonify({"status": "success", "recommendations": bundle.to_dict()})


# ── Cycle Data ────────────────────────────────
@api.route("/cycle", methods=["POST"])
@require_session
def store_cycle():
    data = _json()
    language = _language(data)
    last_period, cycle_length = parse_cycle_data(data)
    status = calculate_cycle(last_period, cycle_length)

    _profile(g.session)
    _store().update_profile(g.session.user_id, {
        "cycle": {"last_period_date": last_period.isoformat(), "cycle_length": cycle_length},
    })
    logger.info("Stored cycle data for user %s", g.session.user_id)
    return jsonify({
        "status": "success",
        "message": "Cycle data stored successfully",
        "cycle": status.to_dict(language),
    })


@api.route("/cycle", methods=["GET"])
@require_session
def get_cycle():
    status = _cycle_status(_profile(g.session))
    if status is None:
        raise NotFoundError("No cycle data found")
    return jsonify({"status": "success", "cycle": status.to_dict(_language())})


# ── Catalogs ──────────────────────────────────
@api.route("/yoga", methods=["GET"])
def yoga():
    language = _language()
    poses = list_yoga_poses(request.args.get("category"))
    return jsonify({"status": "success", "poses": [pose.to_dict(language) for pose in poses]})


@api.route("/yoga/<pose_id>", methods=["GET"])
def yoga_pose(pose_id):
    return jsonify({"status": "success", "pose": get_yoga_pose(pose_id).to_dict(_language())})


@api.route("/remedies", methods=["GET"])
def remedies():
    language = _language()
    found = list_remedies(request.args.get("condition"))
    return jsonify({"status": "success", "remedies": [remedy.to_dict(language) for remedy in found]})


@api.route("/remedies/<remedy_id>", methods=["GET"])
def remedy(remedy_id):
    return jsonify({"status": "success", "remedy": get_remedy(remedy_id).to_dict(_language())})


@api.route("/diet", methods=["GET"])
def diet():
    return jsonify({"status": "success", "diet": diet_guidelines(_language())})


# ── Progress ──────────────────────────────────
@api.route("/progress", methods=["POST"])
@require_session
def save_progress():
    data = _json()
    day = data.get("date")
    if not day:
        raise ValidationError("date is required")
    try:
        datetime.strptime(str(day), "%Y-%m-%d")
    except ValueError:
        raise ValidationError("date must be formatted YYYY-MM-DD")

    user_id = g.session.user_id
    record = dict(data)
    record.pop("language", None)
    record["user_id"] = user_id
    record["updated_at"] = datetime.now().isoformat()
    _store().put_record(progress_key(user_id, day), record)
    logger.info("Saved progress for user %s on %s", user_id, day)
    return jsonify({"status": "success", "message": "Progress saved", "progress": record})


@api.route("/progress", methods=["GET"])
@require_session
def list_progress():
    entries = _store().get_records_by_prefix(user_prefix("progress", g.session.user_id))
    return jsonify({"status": "success", "progress": entries})


# ── Reminders ─────────────────────────────────
@api.route("/reminders", methods=["POST"])
@require_session
def create_reminder():
    data = _json()
    title = text_field(data, "title")
    description = text_field(data, "description")
    reminder = {
        "id": uuid.uuid4().hex,
        "time": text_field(data, "time"),
        "category": data.get("category", "lifestyle"),
        "title": title,
        "title_hi": data.get("title_hi") or title,
        "description": description,
        "description_hi": data.get("description_hi") or description,
        "completed": False,
        "created_at": datetime.now().isoformat(),
    }
    _check_reminder(reminder)
    _store().put_record(reminder_key(g.session.user_id, reminder["id"]), reminder)
    return jsonify({"status": "success", "message": "Reminder created", "reminder": reminder}), 201


@api.route("/reminders", methods=["GET"])
@require_session
def list_reminders():
    entries = _store().get_records_by_prefix(user_prefix("reminder", g.session.user_id))
    entries.sort(key=lambda r: r.get("time", ""))
    return jsonify({"status": "success", "reminders": entries})


@api.route("/reminders/<reminder_id>", methods=["PUT"])
@require_session
def update_reminder(reminder_id):
    data = _json()
    key = reminder_key(g.session.user_id, reminder_id)
    try:
        reminder = _store().get_record(key)
    except NotFoundError:
        raise NotFoundError("Reminder not found")

    reminder.update({k: v for k, v in data.items() if k != "id"})
    _check_reminder(reminder)
    reminder["updated_at"] = datetime.now().isoformat()
    _store().put_record(key, reminder)
    return jsonify({"status": "success", "message": "Reminder updated", "reminder": reminder})


# ── Chatbot ───────────────────────────────────
@api.route("/chat", methods=["GET"])
def chat_greeting():
    return jsonify({"status": "success", **greeting(_language())})


@api.route("/chat", methods=["POST"])
def chat():
    data = _json()
    language = _language(data)
    message = data.get("message", "")
    if not isinstance(message, str):
        raise ValidationError("Message cannot be empty")

    # Personalize with cycle data if signed in
    cycle_status = None
    session = _current_session()
    if session is not None:
        try:
            cycle_status = _cycle_status(_store().get_profile(session.user_id))
        except NotFoundError:
            cycle_status = None

    reply = get_chatbot_response(message, language, cycle_status)
    return jsonify({"status": "success", **reply.to_dict()})
