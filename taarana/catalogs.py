"""
Static content catalogs: yoga poses, Ayurvedic remedies, diet guidelines
and the default daily reminders given to new users.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import NotFoundError, ValidationError
from .i18n import Text, localize

YOGA_CATEGORIES = ("disease", "menstrual", "general")


@dataclass(frozen=True)
class YogaPose:
    id: str
    name: Text
    emoji: str
    category: str
    benefits: Text
    duration: str
    precautions: Text
    steps: Tuple[Text, ...]
    condition: Optional[Text] = None
    phase: Optional[Text] = None

    def to_dict(self, language="en"):
        return {
            "id": self.id,
            "name": self.name.get(language),
            "emoji": self.emoji,
            "category": self.category,
            "condition": self.condition.get(language) if self.condition else None,
            "phase": self.phase.get(language) if self.phase else None,
            "benefits": self.benefits.get(language),
            "duration": self.duration,
            "precautions": self.precautions.get(language),
            "steps": localize(self.steps, language),
        }


@dataclass(frozen=True)
class AyurvedicRemedy:
    id: str
    name: Text
    emoji: str
    condition: Text
    ingredients: Tuple[Text, ...]
    preparation: Tuple[Text, ...]
    dosage: Text
    timing: Text
    warnings: Text
    color: str

    def to_dict(self, language="en"):
        return {
            "id": self.id,
            "name": self.name.get(language),
            "emoji": self.emoji,
            "condition": self.condition.get(language),
            "ingredients": localize(self.ingredients, language),
            "preparation": localize(self.preparation, language),
            "dosage": self.dosage.get(language),
            "timing": self.timing.get(language),
            "warnings": self.warnings.get(language),
            "color": self.color,
        }


# ─────────────────────────────────────────────
# YOGA
# ─────────────────────────────────────────────
YOGA_POSES = [
    YogaPose(
        id="bhujangasana",
        name=Text("Bhujangasana (Cobra Pose)", "भुजंगासन (कोबरा पोज)"),
        emoji="🐍",
        category="disease",
        condition=Text("Back Pain", "पीठ दर्द"),
        benefits=Text("Strengthens the spine and relieves lower back stiffness", "रीढ़ को मजबूत करता है और कमर की जकड़न से राहत देता है"),
        duration="5 minutes",
        precautions=Text("Avoid during pregnancy or after recent abdominal surgery", "गर्भावस्था में या हाल की पेट की सर्जरी के बाद न करें"),
        steps=(
            Text("Lie on your stomach with palms under the shoulders", "पेट के बल लेटें, हथेलियां कंधों के नीचे रखें"),
            Text("Inhale and slowly lift your chest off the floor", "सांस लें और धीरे-धीरे छाती को ऊपर उठाएं"),
            Text("Keep elbows slightly bent and shoulders relaxed", "कोहनियां थोड़ी मुड़ी और कंधे ढीले रखें"),
            Text("Hold for 15-30 seconds, exhale and lower down", "15-30 सेकंड रुकें, सांस छोड़ते हुए नीचे आएं"),
        ),
    ),
    YogaPose(
        id="surya_namaskar",
        name=Text("Surya Namaskar (Sun Salutation)", "सूर्य नमस्कार"),
        emoji="☀️",
        category="disease",
        condition=Text("Diabetes / Weight Management", "मधुमेह / वजन प्रबंधन"),
        benefits=Text("Improves metabolism, circulation and insulin sensitivity", "चयापचय, रक्त संचार और इंसुलिन संवेदनशीलता में सुधार"),
        duration="12 rounds",
        precautions=Text("Go slowly if you have high blood pressure or knee problems", "उच्च रक्तचाप या घुटने की समस्या हो तो धीरे करें"),
        steps=(
            Text("Stand tall with palms joined at the chest", "छाती के सामने हाथ जोड़कर सीधे खड़े हों"),
            Text("Inhale, raise the arms and arch back gently", "सांस लेते हुए हाथ ऊपर उठाएं और हल्का पीछे झुकें"),
            Text("Exhale and fold forward, hands beside the feet", "सांस छोड़ते हुए आगे झुकें, हाथ पैरों के पास रखें"),
            Text("Flow through the twelve positions in rhythm with the breath", "सांस की लय के साथ बारह स्थितियों को पूरा करें"),
        ),
    ),
    YogaPose(
        id="anulom_vilom",
        name=Text("Pranayama (Anulom Vilom)", "प्राणायाम (अनुलोम विलोम)"),
        emoji="🌬️",
        category="disease",
        condition=Text("Anxiety / Stress", "चिंता / तनाव"),
        benefits=Text("Calms the nervous system and lowers stress", "तंत्रिका तंत्र को शांत करता है और तनाव घटाता है"),
        duration="10 minutes",
        precautions=Text("Breathe gently, never force the breath", "धीरे सांस लें, सांस पर जोर न डालें"),
        steps=(
            Text("Sit comfortably with a straight spine", "रीढ़ सीधी रखकर आराम से बैठें"),
            Text("Close the right nostril and inhale through the left", "दाहिनी नासिका बंद कर बाईं से सांस लें"),
            Text("Close the left nostril and exhale through the right", "बाईं नासिका बंद कर दाहिनी से सांस छोड़ें"),
            Text("Alternate sides for the full session", "पूरे सत्र में बारी-बारी से दोहराएं"),
        ),
    ),
    YogaPose(
        id="baddha_konasana",
        name=Text("Baddha Konasana (Butterfly Pose)", "बद्ध कोणासन (तितली मुद्रा)"),
        emoji="🦋",
        category="menstrual",
        phase=Text("Menstrual / Follicular", "मासिक धर्म / फॉलिक्युलर"),
        benefits=Text("Opens the hips and eases menstrual discomfort", "कूल्हों को खोलता है और मासिक असुविधा कम करता है"),
        duration="3-5 minutes",
        precautions=Text("Support the knees with cushions if the groin feels strained", "जांघों में खिंचाव हो तो घुटनों के नीचे तकिया रखें"),
        steps=(
            Text("Sit with the soles of the feet together", "पैरों के तलवों को मिलाकर बैठें"),
            Text("Hold the feet and draw the heels toward you", "पैरों को पकड़ें और एड़ियों को अपनी ओर खींचें"),
            Text("Gently move the knees up and down", "घुटनों को धीरे-धीरे ऊपर नीचे करें"),
        ),
    ),
    YogaPose(
        id="supta_baddha_konasana",
        name=Text("Supta Baddha Konasana", "सुप्त बद्ध कोणासन"),
        emoji="🌙",
        category="menstrual",
        phase=Text("Menstrual", "मासिक धर्म"),
        benefits=Text("Relaxes the pelvis and relieves cramps", "श्रोणि को आराम देता है और ऐंठन कम करता है"),
        duration="5 minutes",
        precautions=Text("Use a bolster under the back if lying flat is uncomfortable", "सीधा लेटना असहज हो तो पीठ के नीचे सहारा रखें"),
        steps=(
            Text("Lie on your back and bring the soles together", "पीठ के बल लेटें और तलवों को मिलाएं"),
            Text("Let the knees fall open to the sides", "घुटनों को दोनों ओर खुलने दें"),
            Text("Rest the hands on the belly and breathe deeply", "हाथ पेट पर रखें और गहरी सांस लें"),
        ),
    ),
    YogaPose(
        id="balasana",
        name=Text("Balasana (Child Pose)", "बालासन (बाल मुद्रा)"),
        emoji="🧒",
        category="menstrual",
        phase=Text("Luteal / Menstrual", "ल्यूटियल / मासिक धर्म"),
        benefits=Text("Gently stretches the back and calms the mind", "पीठ में सौम्य खिंचाव और मन को शांति"),
        duration="3 minutes",
        precautions=Text("Avoid with knee injuries", "घुटने की चोट में न करें"),
        steps=(
            Text("Kneel and sit back on your heels", "घुटनों के बल बैठें और एड़ियों पर टिकें"),
            Text("Fold forward and rest the forehead on the floor", "आगे झुकें और माथा जमीन पर टिकाएं"),
            Text("Stretch the arms forward or rest them beside you", "हाथ आगे फैलाएं या शरीर के पास रखें"),
        ),
    ),
    YogaPose(
        id="tadasana",
        name=Text("Tadasana (Mountain Pose)", "ताड़ासन (पर्वत मुद्रा)"),
        emoji="🏔️",
        category="general",
        benefits=Text("Improves posture and balance", "मुद्रा और संतुलन में सुधार"),
        duration="1-2 minutes",
        precautions=Text("Skip the heel raise if you feel dizzy", "चक्कर आए तो एड़ी उठाना छोड़ दें"),
        steps=(
            Text("Stand with feet together and arms by your sides", "पैर मिलाकर खड़े हों, हाथ बगल में"),
            Text("Inhale and stretch the arms overhead", "सांस लेते हुए हाथ सिर के ऊपर फैलाएं"),
            Text("Rise onto the toes and hold", "पंजों पर उठें और रुकें"),
        ),
    ),
    YogaPose(
        id="shavasana",
        name=Text("Shavasana (Corpse Pose)", "शवासन"),
        emoji="😌",
        category="general",
        benefits=Text("Deep relaxation and better sleep", "गहरा विश्राम और बेहतर नींद"),
        duration="5 minutes",
        precautions=Text("Keep the room warm and avoid falling asleep", "कमरा गर्म रखें और सोएं नहीं"),
        steps=(
            Text("Lie on your back with arms and legs relaxed", "पीठ के बल लेटें, हाथ पैर ढीले छोड़ें"),
            Text("Close the eyes and breathe naturally", "आंखें बंद करें और स्वाभाविक सांस लें"),
            Text("Release tension from each part of the body", "शरीर के हर हिस्से का तनाव छोड़ें"),
        ),
    ),
]


# ─────────────────────────────────────────────
# AYURVEDA
# ─────────────────────────────────────────────
REMEDIES = [
    AyurvedicRemedy(
        id="golden_milk",
        name=Text("Turmeric Golden Milk", "हल्दी गोल्डन मिल्क"),
        emoji="🥛",
        condition=Text("Joint Pain / Immunity", "जोड़ों का दर्द / प्रतिरक्षा"),
        ingredients=(
            Text("1 cup milk", "1 कप दूध"),
            Text("1/2 tsp turmeric powder", "1/2 चम्मच हल्दी पाउडर"),
            Text("A pinch of black pepper", "एक चुटकी काली मिर्च"),
            Text("1 tsp honey", "1 चम्मच शहद"),
        ),
        preparation=(
            Text("Warm the milk on low heat", "दूध को धीमी आंच पर गर्म करें"),
            Text("Stir in turmeric and black pepper", "हल्दी और काली मिर्च मिलाएं"),
            Text("Simmer for 3 minutes, cool slightly and add honey", "3 मिनट उबालें, थोड़ा ठंडा कर शहद मिलाएं"),
        ),
        dosage=Text("1 cup daily", "दैनिक 1 कप"),
        timing=Text("Before bed", "सोने से पहले"),
        warnings=Text("Consult a doctor if you take blood thinners", "रक्त पतला करने वाली दवा लेते हों तो डॉक्टर से सलाह लें"),
        color="amber",
    ),
    AyurvedicRemedy(
        id="ashwagandha_milk",
        name=Text("Ashwagandha Milk", "अश्वगंधा दूध"),
        emoji="🌿",
        condition=Text("Fatigue / Stress", "थकान / तनाव"),
        ingredients=(
            Text("1 tsp ashwagandha powder", "1 चम्मच अश्वगंधा पाउडर"),
            Text("1 cup warm milk", "1 कप गर्म दूध"),
        ),
        preparation=(
            Text("Mix the powder into warm milk", "पाउडर को गर्म दूध में मिलाएं"),
            Text("Stir well and drink warm", "अच्छी तरह हिलाएं और गर्म पिएं"),
        ),
        dosage=Text("1 tsp once a day", "दिन में एक बार 1 चम्मच"),
        timing=Text("At night", "रात में"),
        warnings=Text("Avoid during pregnancy and with thyroid medication unless advised", "गर्भावस्था में और थायरॉइड की दवा के साथ बिना सलाह न लें"),
        color="green",
    ),
    AyurvedicRemedy(
        id="triphala",
        name=Text("Triphala Churna", "त्रिफला चूर्ण"),
        emoji="🍵",
        condition=Text("Digestive Issues", "पाचन संबंधी समस्याएं"),
        ingredients=(
            Text("1 tsp triphala powder", "1 चम्मच त्रिफला चूर्ण"),
            Text("1 glass warm water", "1 गिलास गर्म पानी"),
        ),
        preparation=(
            Text("Stir the powder into warm water", "चूर्ण को गर्म पानी में मिलाएं"),
            Text("Let it rest for 2 minutes before drinking", "पीने से पहले 2 मिनट रखें"),
        ),
        dosage=Text("1 tsp daily", "दैनिक 1 चम्मच"),
        timing=Text("Before bed", "सोने से पहले"),
        warnings=Text("May loosen stools; reduce the dose if needed", "दस्त हो सकते हैं; जरूरत हो तो मात्रा घटाएं"),
        color="teal",
    ),
    AyurvedicRemedy(
        id="ginger_honey",
        name=Text("Ginger-Honey Mix", "अदरक-शहद मिश्रण"),
        emoji="🫚",
        condition=Text("Indigestion / Cold", "अपच / सर्दी"),
        ingredients=(
            Text("1 tsp fresh ginger juice", "1 चम्मच ताजा अदरक का रस"),
            Text("1 tsp honey", "1 चम्मच शहद"),
        ),
        preparation=(
            Text("Grate ginger and squeeze out the juice", "अदरक कद्दूकस कर रस निकालें"),
            Text("Mix with honey", "शहद के साथ मिलाएं"),
        ),
        dosage=Text("1 tsp twice a day", "दिन में दो बार 1 चम्मच"),
        timing=Text("Before meals", "भोजन से पहले"),
        warnings=Text("Avoid with acidity or stomach ulcers", "एसिडिटी या पेट के अल्सर में न लें"),
        color="orange",
    ),
    AyurvedicRemedy(
        id="shatavari",
        name=Text("Shatavari Kalpa", "शतावरी कल्प"),
        emoji="🌸",
        condition=Text("Hormonal Balance / PCOS", "हार्मोनल संतुलन / पीसीओएस"),
        ingredients=(
            Text("1 tsp shatavari powder", "1 चम्मच शतावरी पाउडर"),
            Text("1 cup warm milk or water", "1 कप गर्म दूध या पानी"),
        ),
        preparation=(
            Text("Mix the powder into warm milk or water", "पाउडर को गर्म दूध या पानी में मिलाएं"),
            Text("Drink slowly", "धीरे-धीरे पिएं"),
        ),
        dosage=Text("1 tsp twice a day", "दिन में दो बार 1 चम्मच"),
        timing=Text("Morning and evening", "सुबह और शाम"),
        warnings=Text("Consult a doctor if you have hormone-sensitive conditions", "हार्मोन संबंधी स्थिति हो तो डॉक्टर से सलाह लें"),
        color="pink",
    ),
    AyurvedicRemedy(
        id="tulsi_tea",
        name=Text("Tulsi Tea", "तुलसी चाय"),
        emoji="🍃",
        condition=Text("Stress / Immunity", "तनाव / प्रतिरक्षा"),
        ingredients=(
            Text("8-10 fresh tulsi leaves", "8-10 ताजी तुलसी की पत्तियां"),
            Text("1 cup water", "1 कप पानी"),
            Text("Honey to taste", "स्वादानुसार शहद"),
        ),
        preparation=(
            Text("Boil the leaves in water for 5 minutes", "पत्तियों को पानी में 5 मिनट उबालें"),
            Text("Strain and add honey", "छानें और शहद मिलाएं"),
        ),
        dosage=Text("1-2 cups daily", "दैनिक 1-2 कप"),
        timing=Text("Morning", "सुबह"),
        warnings=Text("Limit intake if you are trying to conceive", "गर्भधारण की कोशिश कर रहे हों तो सेवन सीमित करें"),
        color="emerald",
    ),
]


# ─────────────────────────────────────────────
# DIET
# ─────────────────────────────────────────────
DAILY_MEALS = [
    {
        "time": Text("Breakfast", "नाश्ता"),
        "emoji": "🌅",
        "items": [
            (Text("Oatmeal with fruits and nuts", "फलों और मेवों के साथ ओटमील"), "350 kcal", Text("High fiber, sustained energy", "उच्च फाइबर, निरंतर ऊर्जा")),
            (Text("Herbal tea or warm water", "हर्बल चाय या गर्म पानी"), "0 kcal", Text("Hydration, aids digestion", "हाइड्रेशन, पाचन में सहायक")),
        ],
    },
    {
        "time": Text("Mid-Morning Snack", "मध्य-सुबह का नाश्ता"),
        "emoji": "🥤",
        "items": [
            (Text("Fresh fruit or fruit juice", "ताजे फल या फलों का रस"), "100 kcal", Text("Vitamins, natural sugars", "विटामिन, प्राकृतिक शर्करा")),
        ],
    },
    {
        "time": Text("Lunch", "दोपहर का भोजन"),
        "emoji": "☀️",
        "items": [
            (Text("Dal (lentils), rice, roti", "दाल, चावल, रोटी"), "500 kcal", Text("Complete protein, complex carbs", "पूर्ण प्रोटीन, जटिल कार्ब्स")),
            (Text("Mixed vegetable curry", "मिश्रित सब्जी करी"), "150 kcal", Text("Vitamins, minerals, fiber", "विटामिन, खनिज, फाइबर")),
            (Text("Curd/yogurt", "दही"), "80 kcal", Text("Probiotics, cooling effect", "प्रोबायोटिक्स, ठंडक प्रभाव")),
        ],
    },
    {
        "time": Text("Evening Snack", "शाम का नाश्ता"),
        "emoji": "🌆",
        "items": [
            (Text("Green tea with light snacks", "ग्रीन टी के साथ हल्का नाश्ता"), "150 kcal", Text("Antioxidants, metabolism boost", "एंटीऑक्सीडेंट, चयापचय बढ़ावा")),
        ],
    },
    {
        "time": Text("Dinner", "रात का खाना"),
        "emoji": "🌙",
        "items": [
            (Text("Light vegetable soup", "हल्का सब्जी का सूप"), "200 kcal", Text("Easy to digest, nutrient-rich", "पचाने में आसान, पोषक तत्वों से भरपूर")),
            (Text("Salad with olive oil", "जैतून के तेल के साथ सलाद"), "150 kcal", Text("Raw nutrients, healthy fats", "कच्चे पोषक तत्व, स्वस्थ वसा")),
        ],
    },
]

FOODS_TO_EAT = [
    (Text("Whole grains (brown rice, quinoa)", "साबुत अनाज (ब्राउन राइस, क्विनोआ)"), "Grains"),
    (Text("Fresh vegetables (spinach, carrots, broccoli)", "ताजी सब्जियां (पालक, गाजर, ब्रोकली)"), "Vegetables"),
    (Text("Lentils and beans", "दाल और बीन्स"), "Protein"),
    (Text("Fresh fruits (apples, berries, pomegranate)", "ताजे फल (सेब, बेरी, अनार)"), "Fruits"),
    (Text("Nuts and seeds (almonds, walnuts, flaxseeds)", "मेवे और बीज (बादाम, अखरोट, अलसी)"), "Healthy Fats"),
    (Text("Herbal teas (tulsi, ginger, chamomile)", "हर्बल चाय (तुलसी, अदरक, कैमोमाइल)"), "Beverages"),
    (Text("Ghee (clarified butter)", "घी"), "Healthy Fats"),
    (Text("Spices (turmeric, cumin, coriander)", "मसाले (हल्दी, जीरा, धनिया)"), "Spices"),
]

FOODS_TO_AVOID = [
    Text("Processed foods and packaged snacks", "प्रसंस्कृत खाद्य पदार्थ और पैकेज्ड स्नैक्स"),
    Text("Refined sugar and artificial sweeteners", "परिष्कृत चीनी और कृत्रिम मिठास"),
    Text("Deep fried foods", "तली हुई चीजें"),
    Text("Excessive red meat", "अत्यधिक लाल मांस"),
    Text("Carbonated drinks and sodas", "कार्बोनेटेड पेय और सोडा"),
    Text("Excessive caffeine", "अत्यधिक कैफीन"),
    Text("Cold foods from refrigerator", "रेफ्रिजरेटर से ठंडा खाना"),
    Text("Heavy meals late at night", "देर रात भारी भोजन"),
]

AYURVEDIC_TIPS = [
    (Text("Eat mindfully", "ध्यानपूर्वक खाएं"),
     Text("Focus on your food without distractions. Chew thoroughly.", "ध्यान भटकाए बिना अपने भोजन पर ध्यान दें। अच्छी तरह चबाएं।")),
    (Text("Warm over cold", "ठंडे के बजाय गर्म"),
     Text("Prefer warm, freshly cooked meals. Avoid cold leftovers.", "गर्म, ताजा पका भोजन पसंद करें। ठंडे बचे हुए खाने से बचें।")),
    (Text("Largest meal at lunch", "दोपहर का भोजन सबसे बड़ा"),
     Text("Digestive fire (Agni) is strongest at midday.", "पाचन अग्नि दोपहर में सबसे मजबूत होती है।")),
    (Text("Include all six tastes", "सभी छह स्वाद शामिल करें"),
     Text("Sweet, sour, salty, pungent, bitter, and astringent.", "मीठा, खट्टा, नमकीन, तीखा, कड़वा, और कसैला।")),
]


# ─────────────────────────────────────────────
# REMINDERS
# ─────────────────────────────────────────────
DEFAULT_REMINDERS = [
    ("morning_yoga", "06:00", "yoga", Text("Morning Yoga Practice", "सुबह की योग साधना"), Text("Surya Namaskar - 15 minutes", "सूर्य नमस्कार - 15 मिनट")),
    ("morning_water", "08:00", "hydration", Text("Drink Water", "पानी पीएं"), Text("Target: 2 cups", "लक्ष्य: 2 कप")),
    ("turmeric_milk", "09:00", "remedies", Text("Take Turmeric Milk", "हल्दी का दूध लें"), Text("Turmeric Golden Milk", "हल्दी गोल्डन मिल्क")),
    ("healthy_lunch", "13:00", "diet", Text("Healthy Lunch", "स्वस्थ दोपहर का भोजन"), Text("Dal, rice, vegetables", "दाल, चावल, सब्जियां")),
    ("afternoon_water", "15:00", "hydration", Text("Afternoon Water Break", "दोपहर का पानी विराम"), Text("Target: 2 cups", "लक्ष्य: 2 कप")),
    ("evening_yoga", "18:00", "yoga", Text("Evening Yoga - Gentle Stretch", "शाम का योग - सौम्य खिंचाव"), Text("Relaxing poses - 10 minutes", "आरामदायक आसन - 10 मिनट")),
    ("ashwagandha_tea", "19:00", "remedies", Text("Ashwagandha Tea", "अश्वगंधा चाय"), Text("For stress relief", "तनाव राहत के लिए")),
    ("bedtime", "22:00", "lifestyle", Text("Bedtime Routine", "सोने का समय दिनचर्या"), Text("Meditation & sleep preparation", "ध्यान और नींद की तैयारी")),
]

REMINDER_CATEGORIES = ("yoga", "remedies", "hydration", "diet", "lifestyle")


def list_yoga_poses(category=None):
    if category is None:
        return list(YOGA_POSES)
    if category not in YOGA_CATEGORIES:
        raise ValidationError(f"Unknown yoga category: {category}")
    return [pose for pose in YOGA_POSES if pose.category == category]


def get_yoga_pose(pose_id):
    for pose in YOGA_POSES:
        if pose.id == pose_id:
            return pose
    raise NotFoundError("Yoga pose not found")


def list_remedies(condition=None):
    if not condition:
        return list(REMEDIES)
    needle = condition.lower()
    return [r for r in REMEDIES if needle in r.condition.en.lower() or needle in r.condition.hi]


def get_remedy(remedy_id):
    for remedy in REMEDIES:
        if remedy.id == remedy_id:
            return remedy
    raise NotFoundError("Remedy not found")


def diet_guidelines(language="en"):
    return {
        "daily_plan": [
            {
                "time": meal["time"].get(language),
                "emoji": meal["emoji"],
                "items": [
                    {"name": name.get(language), "calories": calories, "benefits": benefits.get(language)}
                    for name, calories, benefits in meal["items"]
                ],
            }
            for meal in DAILY_MEALS
        ],
        "foods_to_eat": [
            {"name": name.get(language), "category": category} for name, category in FOODS_TO_EAT
        ],
        "foods_to_avoid": localize(FOODS_TO_AVOID, language),
        "ayurvedic_tips": [
            {"title": title.get(language), "description": description.get(language)}
            for title, description in AYURVEDIC_TIPS
        ],
    }


def default_reminders():
    """Reminder records for a new user; stored with both language variants."""
    return [
        {
            "id": reminder_id,
            "time": time,
            "category": category,
            "title": title.en,
            "title_hi": title.hi,
            "description": description.en,
            "description_hi": description.hi,
            "completed": False,
        }
        for reminder_id, time, category, title, description in DEFAULT_REMINDERS
    ]
