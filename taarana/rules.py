"""
Symptom catalog and the rule tables behind the recommendation engine.
Rules are plain data; recommender.py evaluates them in the order listed here.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .errors import RuleConfigError
from .i18n import Text

CATEGORIES = ("yoga", "ayurveda", "diet", "lifestyle")


@dataclass(frozen=True)
class Symptom:
    id: str
    label: Text
    category: str

    def to_dict(self, language="en"):
        return {"id": self.id, "label": self.label.get(language), "category": self.category}


@dataclass(frozen=True)
class ConditionRule:
    id: str
    name: Text
    required_symptoms: FrozenSet[str]
    threshold: int


@dataclass(frozen=True)
class AdviceRule:
    id: str
    any_of: Tuple[str, ...]
    category: str
    advice: Tuple[Text, ...]

    def matches(self, selected):
        return any(symptom in selected for symptom in self.any_of)


SYMPTOMS = [
    Symptom("fatigue", Text("Fatigue / Tiredness", "थकान / थकावट"), "general"),
    Symptom("headache", Text("Headache / Migraine", "सिरदर्द / माइग्रेन"), "neurological"),
    Symptom("back_pain", Text("Back Pain", "पीठ दर्द"), "musculoskeletal"),
    Symptom("joint_pain", Text("Joint Pain", "जोड़ों का दर्द"), "musculoskeletal"),
    Symptom("insomnia", Text("Insomnia / Sleep Issues", "अनिद्रा / नींद की समस्या"), "general"),
    Symptom("anxiety", Text("Anxiety / Stress", "चिंता / तनाव"), "mental"),
    Symptom("weight_gain", Text("Weight Gain", "वजन बढ़ना"), "metabolic"),
    Symptom("digestive", Text("Digestive Issues", "पाचन संबंधी समस्याएं"), "digestive"),
    Symptom("irregular_periods", Text("Irregular Periods", "अनियमित माहवारी"), "hormonal"),
    Symptom("mood_swings", Text("Mood Swings", "मूड स्विंग"), "hormonal"),
    Symptom("acne", Text("Acne / Skin Issues", "मुंहासे / त्वचा समस्याएं"), "hormonal"),
    Symptom("hair_loss", Text("Hair Loss", "बाल झड़ना"), "hormonal"),
]

SYMPTOM_IDS = frozenset(s.id for s in SYMPTOMS)


CONDITION_RULES = [
    ConditionRule(
        "pcos",
        Text("PCOS (Polycystic Ovary Syndrome)", "पीसीओएस (पॉलीसिस्टिक ओवरी सिंड्रोम)"),
        frozenset({"irregular_periods", "weight_gain", "acne", "hair_loss", "mood_swings"}),
        3,
    ),
    ConditionRule(
        "diabetes",
        Text("Pre-Diabetes / Metabolic Issues", "प्री-डायबिटीज / चयापचय संबंधी समस्याएं"),
        frozenset({"fatigue", "weight_gain"}),
        2,
    ),
    ConditionRule(
        "migraine",
        Text("Migraine / Chronic Headaches", "माइग्रेन / पुरानी सिरदर्द"),
        frozenset({"headache", "fatigue", "mood_swings"}),
        2,
    ),
    ConditionRule(
        "arthritis",
        Text("Arthritis / Joint Disorders", "गठिया / जोड़ों के विकार"),
        frozenset({"joint_pain", "back_pain", "fatigue"}),
        2,
    ),
    ConditionRule(
        "anxiety_disorder",
        Text("Anxiety / Stress Disorder", "चिंता / तनाव विकार"),
        frozenset({"anxiety", "insomnia", "headache", "digestive"}),
        2,
    ),
    ConditionRule(
        "digestive_disorder",
        Text("Digestive Disorder", "पाचन विकार"),
        frozenset({"digestive", "fatigue", "mood_swings"}),
        2,
    ),
]


ADVICE_RULES = [
    # Yoga
    AdviceRule("yoga_back_joint", ("back_pain", "joint_pain"), "yoga", (
        Text("Bhujangasana (Cobra Pose) - 5 minutes", "भुजंगासन (कोबरा पोज) - 5 मिनट"),
        Text("Balasana (Child Pose) - 3 minutes", "बालासन (बाल मुद्रा) - 3 मिनट"),
    )),
    AdviceRule("yoga_anxiety_sleep", ("anxiety", "insomnia"), "yoga", (
        Text("Pranayama (Anulom Vilom) - 10 minutes", "प्राणायाम (अनुलोम विलोम) - 10 मिनट"),
        Text("Shavasana - 5 minutes", "शवासन - 5 मिनट"),
    )),
    AdviceRule("yoga_weight", ("weight_gain",), "yoga", (
        Text("Surya Namaskar - 12 rounds", "सूर्य नमस्कार - 12 चक्र"),
        Text("Navasana (Boat Pose) - 3 sets", "नौकासन (बोट पोज) - 3 सेट"),
    )),
    AdviceRule("yoga_digestive", ("digestive",), "yoga", (
        Text("Pawanmuktasana (Wind Relief Pose)", "पवनमुक्तासन"),
        Text("Ardha Matsyendrasana (Spinal Twist)", "अर्ध मत्स्येन्द्रासन"),
    )),
    AdviceRule("yoga_cycle", ("irregular_periods", "mood_swings"), "yoga", (
        Text("Baddha Konasana (Butterfly Pose)", "बद्ध कोणासन (तितली मुद्रा)"),
        Text("Supta Baddha Konasana", "सुप्त बद्ध कोणासन"),
    )),

    # Ayurveda
    AdviceRule("ayurveda_fatigue", ("fatigue",), "ayurveda", (
        Text("Ashwagandha - 1 tsp with warm milk at night", "अश्वगंधा - रात में गर्म दूध के साथ 1 चम्मच"),
        Text("Chyawanprash - 1 tsp daily", "च्यवनप्राश - दैनिक 1 चम्मच"),
    )),
    AdviceRule("ayurveda_digestive", ("digestive",), "ayurveda", (
        Text("Triphala powder - Before bed", "त्रिफला चूर्ण - सोने से पहले"),
        Text("Ginger-Honey mix - Before meals", "अदरक-शहद मिश्रण - भोजन से पहले"),
    )),
    AdviceRule("ayurveda_sleep", ("insomnia",), "ayurveda", (
        Text("Brahmi tea - Evening", "ब्राह्मी चाय - शाम"),
        Text("Warm milk with nutmeg", "जायफल के साथ गर्म दूध"),
    )),
    AdviceRule("ayurveda_hormonal", ("irregular_periods", "acne"), "ayurveda", (
        Text("Shatavari - For hormonal balance", "शतावरी - हार्मोनल संतुलन के लिए"),
        Text("Tulsi tea - Daily", "तुलसी चाय - दैनिक"),
    )),

    # Diet
    AdviceRule("diet_weight", ("weight_gain",), "diet", (
        Text("Increase fiber intake (vegetables, whole grains)", "फाइबर का सेवन बढ़ाएं (सब्जियां, साबुत अनाज)"),
        Text("Reduce sugar and processed foods", "चीनी और प्रसंस्कृत खाद्य पदार्थों को कम करें"),
        Text("Drink green tea daily", "दैनिक ग्रीन टी पिएं"),
    )),
    AdviceRule("diet_digestive", ("digestive",), "diet", (
        Text("Eat probiotic foods (yogurt, buttermilk)", "प्रोबायोटिक खाद्य पदार्थ खाएं (दही, छाछ)"),
        Text("Avoid spicy and oily foods", "मसालेदार और तैलीय भोजन से बचें"),
    )),
    AdviceRule("diet_fatigue", ("fatigue",), "diet", (
        Text("Iron-rich foods (spinach, dates, jaggery)", "आयरन युक्त खाद्य पदार्थ (पालक, खजूर, गुड़)"),
        Text("Vitamin B12 sources", "विटामिन बी12 स्रोत"),
    )),
    AdviceRule("diet_cycle", ("irregular_periods",), "diet", (
        Text("Omega-3 fatty acids (flaxseeds, walnuts)", "ओमेगा-3 फैटी एसिड (अलसी के बीज, अखरोट)"),
        Text("Low glycemic index foods", "कम ग्लाइसेमिक इंडेक्स खाद्य पदार्थ"),
    )),

    # Lifestyle
    AdviceRule("lifestyle_sleep", ("insomnia", "anxiety"), "lifestyle", (
        Text("Maintain regular sleep schedule (10 PM - 6 AM)", "नियमित नींद कार्यक्रम बनाए रखें (रात 10 - सुबह 6)"),
        Text("Avoid screens 1 hour before bed", "सोने से 1 घंटे पहले स्क्रीन से बचें"),
    )),
    AdviceRule("lifestyle_weight", ("weight_gain",), "lifestyle", (
        Text("Walk 30 minutes daily", "दैनिक 30 मिनट चलें"),
        Text("Drink 8-10 glasses of water", "8-10 गिलास पानी पिएं"),
    )),
]

# Appended to every lifestyle list, whatever was selected.
BASELINE_LIFESTYLE = (
    Text("Maintain consistent meal times", "भोजन का समय निरंतर बनाए रखें"),
    Text("Reduce stress through hobbies", "शौक के माध्यम से तनाव कम करें"),
)


def validate_rules(condition_rules=None, advice_rules=None):
    """Raise RuleConfigError for a rule table that cannot work as written."""
    if condition_rules is None:
        condition_rules = CONDITION_RULES
    if advice_rules is None:
        advice_rules = ADVICE_RULES

    seen = set()
    for rule in condition_rules:
        if rule.id in seen:
            raise RuleConfigError(f"Duplicate condition rule id: {rule.id}")
        seen.add(rule.id)
        if rule.threshold < 1:
            raise RuleConfigError(f"Condition {rule.id}: threshold must be at least 1")
        if rule.threshold > len(rule.required_symptoms):
            raise RuleConfigError(
                f"Condition {rule.id}: threshold {rule.threshold} exceeds "
                f"its {len(rule.required_symptoms)} symptoms and can never match"
            )

    seen = set()
    for rule in advice_rules:
        if rule.id in seen:
            raise RuleConfigError(f"Duplicate advice rule id: {rule.id}")
        seen.add(rule.id)
        if rule.category not in CATEGORIES:
            raise RuleConfigError(f"Advice {rule.id}: unknown category {rule.category!r}")
        if not rule.any_of:
            raise RuleConfigError(f"Advice {rule.id}: no symptoms to match")
