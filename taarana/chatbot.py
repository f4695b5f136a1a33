"""
Wellness assistant: keyword-matched canned answers in English and Hindi.
Rules are checked top to bottom and the first match wins.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ValidationError
from .i18n import Text


@dataclass(frozen=True)
class ChatRule:
    id: str
    # Every group needs at least one keyword present in the message.
    keyword_groups: Tuple[Tuple[str, ...], ...]
    response: Text
    emoji: str = "🙏"

    def matches(self, message):
        return all(any(keyword in message for keyword in group) for group in self.keyword_groups)


@dataclass(frozen=True)
class ChatReply:
    rule_id: Optional[str]
    text: str
    emoji: str

    def to_dict(self):
        return {"rule": self.rule_id, "response": self.text, "emoji": self.emoji}


YOGA_WORDS = ("yoga", "asana", "pose")
AYURVEDA_WORDS = ("ayurved", "remed", "herb")
DIET_WORDS = ("diet", "food", "eat")


# ─────────────────────────────────────────────
# RULES
# ─────────────────────────────────────────────
CHATBOT_RULES = [
    ChatRule(
        "yoga_back_pain",
        (YOGA_WORDS, ("back", "pain")),
        Text(
            "For back pain, I recommend:\n\n1. **Bhujangasana (Cobra Pose)** - Strengthens spine\n2. **Balasana (Child's Pose)** - Gentle stretch\n3. **Marjaryasana-Bitilasana (Cat-Cow)** - Improves flexibility\n\nWould you like detailed steps for any of these?",
            "पीठ दर्द के लिए, मैं सुझाव देता हूं:\n\n1. **भुजंगासन (कोबरा पोज)** - रीढ़ को मजबूत करता है\n2. **बालासन (बाल मुद्रा)** - सौम्य खिंचाव\n3. **मार्जरीआसन-बितिलासन (बिल्ली-गाय)** - लचीलापन बढ़ाता है\n\nक्या आप इनमें से किसी के लिए विस्तृत चरण चाहेंगे?",
        ),
        emoji="🧘",
    ),
    ChatRule(
        "yoga_stress",
        (YOGA_WORDS, ("stress", "anxiety")),
        Text(
            "For stress relief, try:\n\n1. **Pranayama (Breath Work)** - Anulom Vilom, Bhramari\n2. **Shavasana** - Deep relaxation\n3. **Meditation** - 10 minutes daily\n\nThese practices calm the nervous system and reduce cortisol levels.",
            "तनाव से राहत के लिए, प्रयास करें:\n\n1. **प्राणायाम** - अनुलोम विलोम, भ्रामरी\n2. **शवासन** - गहरी विश्राम\n3. **ध्यान** - दैनिक 10 मिनट\n\nये अभ्यास तंत्रिका तंत्र को शांत करते हैं और कोर्टिसोल के स्तर को कम करते हैं।",
        ),
        emoji="🧘",
    ),
    ChatRule(
        "ayurveda_sleep",
        (AYURVEDA_WORDS, ("sleep", "insomnia")),
        Text(
            "For better sleep, Ayurveda recommends:\n\n1. **Ashwagandha** - Take 1 tsp with warm milk before bed\n2. **Brahmi** - Calms the mind\n3. **Warm milk with nutmeg** - Natural sedative\n\nAlso maintain regular sleep schedule and avoid screens 1 hour before bed.",
            "बेहतर नींद के लिए, आयुर्वेद सिफारिश करता है:\n\n1. **अश्वगंधा** - सोने से पहले गर्म दूध के साथ 1 चम्मच लें\n2. **ब्राह्मी** - मन को शांत करता है\n3. **जायफल के साथ गर्म दूध** - प्राकृतिक शामक\n\nनियमित नींद कार्यक्रम बनाए रखें और सोने से 1 घंटे पहले स्क्रीन से बचें।",
        ),
        emoji="🌿",
    ),
    ChatRule(
        "ayurveda_digestion",
        (AYURVEDA_WORDS, ("digestion", "stomach")),
        Text(
            "For digestive health:\n\n1. **Triphala** - Take at night with warm water\n2. **Ginger-Honey Mix** - Before meals\n3. **Cumin Water** - Drink on empty stomach\n\nEat mindfully and avoid cold water with meals.",
            "पाचन स्वास्थ्य के लिए:\n\n1. **त्रिफला** - रात में गर्म पानी के साथ लें\n2. **अदरक-शहद मिश्रण** - भोजन से पहले\n3. **जीरा पानी** - खाली पेट पिएं\n\nध्यानपूर्वक खाएं और भोजन के साथ ठंडे पानी से बचें।",
        ),
        emoji="🌿",
    ),
    ChatRule(
        "diet_weight_loss",
        (DIET_WORDS, ("weight", "loss")),
        Text(
            "Healthy weight loss diet tips:\n\n1. **Breakfast**: Oats with fruits, green tea\n2. **Lunch**: Brown rice, dal, vegetables\n3. **Dinner**: Light soup, salad, grilled protein\n\nAvoid: Processed foods, sugar, late-night eating\nDrink: 8-10 glasses of water daily",
            "स्वस्थ वजन घटाने के आहार सुझाव:\n\n1. **नाश्ता**: फलों के साथ ओट्स, ग्रीन टी\n2. **दोपहर का भोजन**: ब्राउन राइस, दाल, सब्जियां\n3. **रात का खाना**: हल्का सूप, सलाद, ग्रिल्ड प्रोटीन\n\nबचें: प्रसंस्कृत खाद्य पदार्थ, चीनी, देर रात खाना\nपिएं: रोजाना 8-10 गिलास पानी",
        ),
        emoji="🥗",
    ),
    ChatRule(
        "pcos",
        (("pcos", "pcod", "hormonal"),),
        Text(
            "PCOS Management Tips:\n\n**Yoga**: Butterfly pose, Surya Namaskar, Pranayama\n**Diet**: Low glycemic index foods, fiber-rich meals\n**Herbs**: Shatavari, Ashwagandha\n**Lifestyle**: Regular exercise, stress management, adequate sleep\n\nConsult a healthcare provider for personalized treatment.",
            "पीसीओएस प्रबंधन सुझाव:\n\n**योग**: तितली मुद्रा, सूर्य नमस्कार, प्राणायाम\n**आहार**: कम ग्लाइसेमिक इंडेक्स खाद्य पदार्थ, फाइबर युक्त भोजन\n**जड़ी बूटियां**: शतावरी, अश्वगंधा\n**जीवनशैली**: नियमित व्यायाम, तनाव प्रबंधन, पर्याप्त नींद\n\nव्यक्तिगत उपचार के लिए स्वास्थ्य सेवा प्रदाता से परामर्श करें।",
        ),
        emoji="🌸",
    ),
    ChatRule(
        "symptom_fatigue",
        (("symptom", "feeling"), ("tired", "fatigue")),
        Text(
            "Fatigue can be due to:\n- Poor sleep quality\n- Nutritional deficiencies (Iron, B12)\n- Dehydration\n- Stress\n\n**Quick fixes**:\n1. Drink water\n2. Take a short walk\n3. Practice deep breathing\n4. Ensure 7-8 hours sleep\n\nIf persistent, consult a doctor.",
            "थकान के कारण हो सकते हैं:\n- खराब नींद की गुणवत्ता\n- पोषण की कमी (आयरन, बी12)\n- निर्जलीकरण\n- तनाव\n\n**त्वरित सुधार**:\n1. पानी पिएं\n2. छोटी सैर करें\n3. गहरी सांस लेने का अभ्यास करें\n4. 7-8 घंटे की नींद सुनिश्चित करें\n\nयदि लगातार है, तो डॉक्टर से परामर्श करें।",
        ),
        emoji="😴",
    ),
]

FALLBACK_RESPONSE = Text(
    "I can help you with:\n\n• Yoga recommendations for specific conditions\n• Ayurvedic remedies and herbs\n• Diet and nutrition advice\n• Symptom analysis\n• Menstrual health guidance\n\nPlease ask a specific question, and I'll provide detailed information!",
    "मैं आपकी मदद कर सकता हूं:\n\n• विशिष्ट स्थितियों के लिए योग सिफारिशें\n• आयुर्वेदिक उपचार और जड़ी बूटियां\n• आहार और पोषण सलाह\n• लक्षण विश्लेषण\n• मासिक स्वास्थ्य मार्गदर्शन\n\nकृपया एक विशिष्ट प्रश्न पूछें, और मैं विस्तृत जानकारी प्रदान करूंगा!",
)

GREETING = Text(
    "Namaste! 🙏 I'm your wellness assistant. I can help you with yoga recommendations, Ayurvedic remedies, diet plans, and answer your health questions. How can I assist you today?",
    "नमस्ते! 🙏 मैं आपका स्वास्थ्य सहायक हूं। मैं योग सिफारिशों, आयुर्वेदिक उपचार, आहार योजनाओं में मदद कर सकता हूं और आपके स्वास्थ्य प्रश्नों का उत्तर दे सकता हूं। मैं आज आपकी कैसे मदद कर सकता हूं?",
)

QUICK_SUGGESTIONS = {
    "en": [
        "What yoga poses help with back pain?",
        "Remedies for better sleep",
        "Diet plan for weight loss",
        "Symptoms of PCOS",
        "How to reduce stress?",
    ],
    "hi": [
        "पीठ दर्द के लिए कौन से योग आसन मदद करते हैं?",
        "बेहतर नींद के लिए उपाय",
        "वजन घटाने के लिए आहार योजना",
        "पीसीओएस के लक्षण",
        "तनाव कैसे कम करें?",
    ],
}

CYCLE_NOTE = Text(
    "📅 Based on your cycle data, you're currently in your **{phase}** (Day {day} of {length}).",
    "📅 आपके चक्र डेटा के अनुसार, आप अभी **{phase}** में हैं (दिन {day} / {length})।",
)


def get_chatbot_response(message, language="en", cycle_status=None, rules=None):
    """Answer a message with the first matching rule, or the fallback text."""
    if rules is None:
        rules = CHATBOT_RULES
    if not message or not message.strip():
        raise ValidationError("Message cannot be empty")

    message_lower = message.lower().strip()
    match = next((rule for rule in rules if rule.matches(message_lower)), None)

    if match:
        reply = ChatReply(match.id, match.response.get(language), match.emoji)
    else:
        reply = ChatReply(None, FALLBACK_RESPONSE.get(language), "💡")

    if cycle_status is not None:
        note = CYCLE_NOTE.get(language).format(
            phase=cycle_status.phase.name.get(language),
            day=cycle_status.cycle_day,
            length=cycle_status.cycle_length,
        )
        reply = ChatReply(reply.rule_id, f"{reply.text}\n\n{note}", reply.emoji)
    return reply


def greeting(language="en"):
    return {"response": GREETING.get(language), "suggestions": list(QUICK_SUGGESTIONS[language])}
