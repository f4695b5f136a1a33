"""
Rule-matching recommendation engine.
Maps a set of selected symptoms to possible conditions and to yoga,
Ayurveda, diet and lifestyle advice. Pure functions, no state between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .errors import ValidationError
from .i18n import DEFAULT_LANGUAGE, DISCLAIMER, localize
from .rules import ADVICE_RULES, BASELINE_LIFESTYLE, CATEGORIES, CONDITION_RULES, SYMPTOM_IDS, ConditionRule

logger = logging.getLogger(__name__)


class EmptySelectionError(ValidationError):
    def __init__(self):
        super().__init__("Select at least one symptom")


@dataclass
class RecommendationBundle:
    conditions: List[ConditionRule]
    yoga: List[str] = field(default_factory=list)
    ayurveda: List[str] = field(default_factory=list)
    diet: List[str] = field(default_factory=list)
    lifestyle: List[str] = field(default_factory=list)
    language: str = DEFAULT_LANGUAGE
    selected: frozenset = frozenset()

    def to_dict(self):
        return {
            "conditions": [
                {
                    "id": rule.id,
                    "name": rule.name.get(self.language),
                    "matched_symptoms": sorted(rule.required_symptoms & self.selected),
                }
                for rule in self.conditions
            ],
            "yoga": list(self.yoga),
            "ayurveda": list(self.ayurveda),
            "diet": list(self.diet),
            "lifestyle": list(self.lifestyle),
            "disclaimer": DISCLAIMER.get(self.language),
        }


def detect_conditions(selected, rules=None) -> List[ConditionRule]:
    """Return the rules whose symptom overlap reaches their threshold, in catalog order."""
    if rules is None:
        rules = CONDITION_RULES
    selected = frozenset(selected)
    return [rule for rule in rules if len(selected & rule.required_symptoms) >= rule.threshold]


def accumulate_advice(selected, rules=None, language=DEFAULT_LANGUAGE) -> Dict[str, List[str]]:
    """
    Collect advice from every matching rule into its category.

    Rules fire independently and their strings are concatenated in rule
    order, so the same advice may appear twice. The baseline lifestyle
    advice is always appended last.
    """
    if rules is None:
        rules = ADVICE_RULES
    selected = frozenset(selected)

    advice = {category: [] for category in CATEGORIES}
    for rule in rules:
        if rule.matches(selected):
            advice[rule.category].extend(localize(rule.advice, language))

    advice["lifestyle"].extend(localize(BASELINE_LIFESTYLE, language))
    return advice


def build_recommendations(selected, language=DEFAULT_LANGUAGE) -> RecommendationBundle:
    """Assemble the full recommendation bundle for a non-empty symptom selection."""
    selected = frozenset(selected)
    if not selected:
        raise EmptySelectionError()

    conditions = detect_conditions(selected)
    advice = accumulate_advice(selected, language=language)

    logger.debug(
        "Recommendations for %s: %d condition(s) detected",
        ", ".join(sorted(selected)), len(conditions),
    )
    return RecommendationBundle(
        conditions=conditions,
        yoga=advice["yoga"],
        ayurveda=advice["ayurveda"],
        diet=advice["diet"],
        lifestyle=advice["lifestyle"],
        language=language,
        selected=selected,
    )


# ─────────────────────────────────────────────
# PROFILE
# ─────────────────────────────────────────────
# Sign-up lists diseases separately from symptoms; each disease stands in
# for the symptoms it usually presents with.
DISEASE_SYMPTOMS = {
    "diabetes": ("fatigue", "weight_gain"),
    "obesity": ("weight_gain",),
    "back_pain": ("back_pain",),
    "migraine": ("headache",),
    "hypertension": ("headache", "anxiety"),
    "arthritis": ("joint_pain",),
    "anxiety": ("anxiety",),
}

SYMPTOM_ALIASES = {"digestive_issues": "digestive"}


def profile_symptoms(profile):
    """Symptom ids implied by a stored profile's symptoms and diseases."""
    selected = set()
    for symptom in profile.get("symptoms") or []:
        symptom = SYMPTOM_ALIASES.get(symptom, symptom)
        if symptom in SYMPTOM_IDS:
            selected.add(symptom)
    for disease in profile.get("diseases") or []:
        selected.update(DISEASE_SYMPTOMS.get(disease, ()))
    return frozenset(selected)
