"""
Menstrual cycle calculator.
Works out the cycle day, the current phase and the expected next period
from the last period start date and the average cycle length.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import ValidationError
from .i18n import Text

MIN_CYCLE_LENGTH = 21
MAX_CYCLE_LENGTH = 35
DEFAULT_CYCLE_LENGTH = 28


class CycleDataError(ValidationError):
    pass


@dataclass(frozen=True)
class Phase:
    id: str
    name: Text
    emoji: str
    day_start: int
    day_end: int
    description: Text
    yoga: Text
    ayurveda: Text
    diet: Text
    lifestyle: Text

    def contains(self, day):
        return self.day_start <= day <= self.day_end

    def to_dict(self, language="en"):
        return {
            "id": self.id,
            "name": self.name.get(language),
            "emoji": self.emoji,
            "day_range": [self.day_start, self.day_end],
            "description": self.description.get(language),
            "recommendations": {
                "yoga": self.yoga.get(language),
                "ayurveda": self.ayurveda.get(language),
                "diet": self.diet.get(language),
                "lifestyle": self.lifestyle.get(language),
            },
        }


# ─────────────────────────────────────────────
# PHASES
# ─────────────────────────────────────────────
PHASES = [
    Phase(
        id="menstrual",
        name=Text("Menstrual Phase", "मासिक धर्म चरण"),
        emoji="🌙",
        day_start=1,
        day_end=5,
        description=Text("Period days - Time for rest and self-care", "माहवारी के दिन - आराम और आत्म-देखभाल का समय"),
        yoga=Text("Gentle poses: Balasana, Supta Baddha Konasana", "सौम्य आसन: बालासन, सुप्त बद्ध कोणासन"),
        ayurveda=Text("Warm herbal teas, light warming foods", "गर्म हर्बल चाय, हल्के गर्म खाद्य पदार्थ"),
        diet=Text("Iron-rich foods, dates, leafy greens", "आयरन युक्त खाद्य पदार्थ, खजूर, हरी सब्जियां"),
        lifestyle=Text("Rest, avoid intense workouts, stay warm", "आराम करें, तीव्र कसरत से बचें, गर्म रहें"),
    ),
    Phase(
        id="follicular",
        name=Text("Follicular Phase", "फॉलिक्युलर चरण"),
        emoji="🌸",
        day_start=6,
        day_end=13,
        description=Text("Energy building - Great time to start new projects", "ऊर्जा निर्माण - नई परियोजनाएं शुरू करने का अच्छा समय"),
        yoga=Text("Dynamic flows: Surya Namaskar, Warrior poses", "गतिशील प्रवाह: सूर्य नमस्कार, योद्धा आसन"),
        ayurveda=Text("Shatavari, cooling herbs", "शतावरी, ठंडी जड़ी बूटियां"),
        diet=Text("Fresh vegetables, lean proteins, whole grains", "ताजी सब्जियां, लीन प्रोटीन, साबुत अनाज"),
        lifestyle=Text("High-energy workouts, socialize, creative activities", "उच्च ऊर्जा कसरत, सामाजिककरण, रचनात्मक गतिविधियां"),
    ),
    Phase(
        id="ovulation",
        name=Text("Ovulation Phase", "ओव्यूलेशन चरण"),
        emoji="🌟",
        day_start=14,
        day_end=16,
        description=Text("Peak energy - Most fertile time", "चरम ऊर्जा - सबसे उपजाऊ समय"),
        yoga=Text("Strength poses: Plank, Boat pose, Power yoga", "शक्ति आसन: प्लैंक, नौकासन, पावर योग"),
        ayurveda=Text("Cooling foods, coconut water, aloe vera", "ठंडे खाद्य पदार्थ, नारियल पानी, एलोवेरा"),
        diet=Text("Fiber-rich, antioxidant foods, berries", "फाइबर युक्त, एंटीऑक्सीडेंट खाद्य पदार्थ, बेरी"),
        lifestyle=Text("High-intensity workouts, public speaking, connect with others", "उच्च तीव्रता कसरत, सार्वजनिक बोलना, दूसरों से जुड़ना"),
    ),
    Phase(
        id="luteal",
        name=Text("Luteal Phase", "ल्यूटियल चरण"),
        emoji="🍂",
        day_start=17,
        day_end=28,
        description=Text("Winding down - Time to slow down and reflect", "धीमा होना - धीमा होने और प्रतिबिंबित करने का समय"),
        yoga=Text("Restorative: Yin yoga, gentle stretches", "पुनर्स्थापना: यिन योग, सौम्य खिंचाव"),
        ayurveda=Text("Ashwagandha for mood, magnesium-rich foods", "मूड के लिए अश्वगंधा, मैग्नीशियम युक्त खाद्य पदार्थ"),
        diet=Text("Complex carbs, healthy fats, dark chocolate", "जटिल कार्ब्स, स्वस्थ वसा, डार्क चॉकलेट"),
        lifestyle=Text("Moderate exercise, journaling, self-care", "मध्यम व्यायाम, जर्नलिंग, आत्म-देखभाल"),
    ),
]


@dataclass(frozen=True)
class CycleStatus:
    last_period_start: date
    cycle_length: int
    today: date
    cycle_day: int
    phase: Phase
    next_period_date: date
    days_until_next: int

    @property
    def is_overdue(self):
        return self.days_until_next < 0

    @property
    def progress(self):
        return round(self.cycle_day / self.cycle_length * 100, 1)

    def to_dict(self, language="en"):
        return {
            "last_period_date": self.last_period_start.isoformat(),
            "cycle_length": self.cycle_length,
            "day_of_cycle": self.cycle_day,
            "progress": self.progress,
            "phase": self.phase.to_dict(language),
            "next_period": self.next_period_date.isoformat(),
            "days_until_period": self.days_until_next,
            "is_overdue": self.is_overdue,
        }


def phase_for_day(cycle_day, phases=None):
    """First phase whose day range holds cycle_day; the last phase otherwise."""
    if phases is None:
        phases = PHASES
    for phase in phases:
        if phase.contains(cycle_day):
            return phase
    return phases[-1]


def _check_cycle_length(cycle_length):
    if isinstance(cycle_length, str) and cycle_length.strip().isdigit():
        cycle_length = int(cycle_length)
    elif isinstance(cycle_length, float) and cycle_length.is_integer():
        cycle_length = int(cycle_length)
    elif isinstance(cycle_length, bool) or not isinstance(cycle_length, int):
        raise CycleDataError("Cycle length must be a whole number of days")
    if not MIN_CYCLE_LENGTH <= cycle_length <= MAX_CYCLE_LENGTH:
        raise CycleDataError(
            f"Cycle length must be between {MIN_CYCLE_LENGTH} and {MAX_CYCLE_LENGTH} days"
        )
    return cycle_length


def calculate_cycle(last_period_start, cycle_length=DEFAULT_CYCLE_LENGTH, today=None):
    """Cycle day, phase and next expected period for the given cycle data."""
    cycle_length = _check_cycle_length(cycle_length)
    if today is None:
        today = date.today()
    if last_period_start > today:
        raise CycleDataError("Last period start date cannot be in the future")

    days_since_start = (today - last_period_start).days
    cycle_day = days_since_start % cycle_length + 1

    next_period = last_period_start + timedelta(days=cycle_length)

    return CycleStatus(
        last_period_start=last_period_start,
        cycle_length=cycle_length,
        today=today,
        cycle_day=cycle_day,
        phase=phase_for_day(cycle_day),
        next_period_date=next_period,
        days_until_next=(next_period - today).days,
    )


def parse_cycle_data(data):
    """Read (last_period_start, cycle_length) from a JSON payload."""
    raw_date = (data or {}).get("last_period_date")
    if not raw_date:
        raise CycleDataError("last_period_date is required")
    try:
        last_period = datetime.strptime(str(raw_date), "%Y-%m-%d").date()
    except ValueError:
        raise CycleDataError("last_period_date must be formatted YYYY-MM-DD")

    cycle_length = _check_cycle_length(data.get("cycle_length", DEFAULT_CYCLE_LENGTH))
    return last_period, cycle_length
