from datetime import date

import pytest

from taarana.chatbot import CHATBOT_RULES, get_chatbot_response, greeting
from taarana.cycle import calculate_cycle
from taarana.errors import ValidationError


@pytest.mark.parametrize("message, rule", [
    ("What yoga poses help with back pain?", "yoga_back_pain"),
    ("Any yoga for stress?", "yoga_stress"),
    ("Remedies for better sleep", "ayurveda_sleep"),
    ("Ayurvedic herbs for digestion", "ayurveda_digestion"),
    ("Diet plan for weight loss", "diet_weight_loss"),
    ("Symptoms of PCOS", "pcos"),
    ("I keep feeling tired", "symptom_fatigue"),
])
def test_keyword_rules(message, rule):
    assert get_chatbot_response(message).rule_id == rule


def test_matching_ignores_case():
    assert get_chatbot_response("YOGA for BACK ache").rule_id == "yoga_back_pain"


def test_first_matching_rule_wins():
    reply = get_chatbot_response("yoga pose for back pain and stress")
    assert reply.rule_id == "yoga_back_pain"
    assert reply.emoji == "🧘"


def test_unmatched_message_gets_fallback():
    reply = get_chatbot_response("hello there")
    assert reply.rule_id is None
    assert reply.emoji == "💡"
    assert reply.text.startswith("I can help you with")


def test_hindi_reply():
    reply = get_chatbot_response("yoga for back pain", language="hi")
    assert reply.text.startswith("पीठ दर्द के लिए")


@pytest.mark.parametrize("message", ["", "   ", None])
def test_empty_message_is_rejected(message):
    with pytest.raises(ValidationError, match="Message cannot be empty"):
        get_chatbot_response(message)


def test_cycle_note_is_appended():
    status = calculate_cycle(date(2024, 1, 1), 28, today=date(2024, 1, 9))
    reply = get_chatbot_response("hello", cycle_status=status)
    assert reply.text.endswith("you're currently in your **Follicular Phase** (Day 9 of 28).")


def test_rule_ids_are_unique():
    ids = [rule.id for rule in CHATBOT_RULES]
    assert len(ids) == len(set(ids))


def test_greeting():
    data = greeting("hi")
    assert data["response"].startswith("नमस्ते")
    assert len(data["suggestions"]) == 5
