import pytest

from taarana.errors import RuleConfigError, ValidationError
from taarana.recommender import (
    EmptySelectionError,
    accumulate_advice,
    build_recommendations,
    detect_conditions,
    profile_symptoms,
)
from taarana.rules import (
    CONDITION_RULES,
    SYMPTOM_IDS,
    AdviceRule,
    ConditionRule,
    validate_rules,
)
from taarana.i18n import Text

BASELINE = ["Maintain consistent meal times", "Reduce stress through hobbies"]


def condition_ids(selected):
    return [rule.id for rule in detect_conditions(selected)]


def test_four_pcos_symptoms_detect_pcos_but_not_migraine():
    ids = condition_ids({"irregular_periods", "weight_gain", "acne", "hair_loss"})
    assert "pcos" in ids
    assert "migraine" not in ids


def test_threshold_is_inclusive():
    assert "pcos" in condition_ids({"irregular_periods", "weight_gain", "acne"})
    assert "pcos" not in condition_ids({"irregular_periods", "weight_gain"})


def test_conditions_keep_catalog_order():
    ids = condition_ids({"fatigue", "weight_gain", "headache", "joint_pain", "digestive"})
    catalog = [rule.id for rule in CONDITION_RULES]
    assert ids == sorted(ids, key=catalog.index)
    assert ids == ["diabetes", "migraine", "arthritis", "anxiety_disorder", "digestive_disorder"]


def test_back_pain_only():
    bundle = build_recommendations({"back_pain"})
    assert bundle.yoga == ["Bhujangasana (Cobra Pose) - 5 minutes", "Balasana (Child Pose) - 3 minutes"]
    assert bundle.ayurveda == []
    assert bundle.diet == []
    assert bundle.lifestyle == BASELINE
    assert bundle.conditions == []


def test_empty_selection_is_rejected():
    with pytest.raises(EmptySelectionError) as exc:
        build_recommendations(set())
    assert isinstance(exc.value, ValidationError)
    assert exc.value.message == "Select at least one symptom"


def test_anxiety_and_insomnia():
    bundle = build_recommendations({"anxiety", "insomnia"})
    assert bundle.yoga == ["Pranayama (Anulom Vilom) - 10 minutes", "Shavasana - 5 minutes"]
    assert bundle.lifestyle == [
        "Maintain regular sleep schedule (10 PM - 6 AM)",
        "Avoid screens 1 hour before bed",
    ] + BASELINE
    assert [rule.id for rule in bundle.conditions] == ["anxiety_disorder"]


def test_adding_a_symptom_never_removes_a_condition():
    base = {"fatigue", "acne"}
    before = set(condition_ids(base))
    for symptom in SYMPTOM_IDS:
        assert before <= set(condition_ids(base | {symptom}))


def test_language_changes_text_not_shape():
    selected = {"weight_gain", "digestive", "irregular_periods"}
    en = build_recommendations(selected, "en").to_dict()
    hi = build_recommendations(selected, "hi").to_dict()
    for key in ("yoga", "ayurveda", "diet", "lifestyle"):
        assert len(en[key]) == len(hi[key])
    assert [c["id"] for c in en["conditions"]] == [c["id"] for c in hi["conditions"]]
    assert en["diet"][0] != hi["diet"][0]
    assert hi["lifestyle"][-1] == "शौक के माध्यम से तनाव कम करें"


def test_same_input_same_bundle():
    selected = ["fatigue", "insomnia", "acne"]
    assert build_recommendations(selected).to_dict() == build_recommendations(selected).to_dict()


def test_to_dict_lists_matched_symptoms_sorted():
    bundle = build_recommendations({"weight_gain", "fatigue", "back_pain"})
    conditions = {c["id"]: c for c in bundle.to_dict()["conditions"]}
    assert conditions["diabetes"]["matched_symptoms"] == ["fatigue", "weight_gain"]
    assert conditions["arthritis"]["matched_symptoms"] == ["back_pain", "fatigue"]
    assert bundle.to_dict()["disclaimer"].startswith("Disclaimer")


def test_rules_fire_independently_and_may_repeat():
    rules = [
        AdviceRule("a", ("fatigue",), "diet", (Text("Water", "पानी"),)),
        AdviceRule("b", ("acne",), "diet", (Text("Water", "पानी"),)),
    ]
    advice = accumulate_advice({"fatigue", "acne"}, rules=rules)
    assert advice["diet"] == ["Water", "Water"]
    assert advice["yoga"] == []
    assert advice["lifestyle"] == BASELINE


def test_custom_condition_rules():
    rules = [ConditionRule("x", Text("X", "X"), frozenset({"acne"}), 1)]
    assert detect_conditions({"acne"}, rules=rules) == rules
    assert detect_conditions({"fatigue"}, rules=rules) == []


def test_profile_symptoms_maps_diseases_and_aliases():
    profile = {"symptoms": ["digestive_issues", "not_a_symptom"], "diseases": ["arthritis", "asthma"]}
    assert profile_symptoms(profile) == frozenset({"digestive", "joint_pain"})
    assert profile_symptoms({}) == frozenset()


def test_builtin_rule_tables_are_valid():
    validate_rules()


@pytest.mark.parametrize("rule", [
    ConditionRule("never", Text("N", "N"), frozenset({"acne"}), 2),
    ConditionRule("always", Text("A", "A"), frozenset({"acne"}), 0),
])
def test_unreachable_condition_thresholds_are_rejected(rule):
    with pytest.raises(RuleConfigError):
        validate_rules(condition_rules=[rule], advice_rules=[])


def test_duplicate_rule_ids_are_rejected():
    rule = ConditionRule("dup", Text("D", "D"), frozenset({"acne"}), 1)
    with pytest.raises(RuleConfigError, match="Duplicate"):
        validate_rules(condition_rules=[rule, rule], advice_rules=[])


def test_bad_advice_rules_are_rejected():
    with pytest.raises(RuleConfigError, match="unknown category"):
        validate_rules([], [AdviceRule("a", ("acne",), "astrology", ())])
    with pytest.raises(RuleConfigError, match="no symptoms"):
        validate_rules([], [AdviceRule("b", (), "diet", ())])
