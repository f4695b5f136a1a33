import pytest

from taarana.catalogs import (
    REMINDER_CATEGORIES,
    YOGA_POSES,
    default_reminders,
    diet_guidelines,
    get_remedy,
    get_yoga_pose,
    list_remedies,
    list_yoga_poses,
)
from taarana.errors import NotFoundError, ValidationError


def test_yoga_by_category():
    assert len(list_yoga_poses()) == len(YOGA_POSES) == 8
    assert [p.id for p in list_yoga_poses("menstrual")] == [
        "baddha_konasana", "supta_baddha_konasana", "balasana",
    ]


def test_unknown_yoga_category():
    with pytest.raises(ValidationError):
        list_yoga_poses("aerial")


def test_yoga_pose_lookup():
    pose = get_yoga_pose("bhujangasana").to_dict("hi")
    assert pose["name"] == "भुजंगासन (कोबरा पोज)"
    assert pose["condition"] == "पीठ दर्द"
    assert pose["steps"]
    with pytest.raises(NotFoundError, match="Yoga pose not found"):
        get_yoga_pose("headstand")


def test_general_poses_have_no_condition():
    for pose in list_yoga_poses("general"):
        assert pose.to_dict()["condition"] is None


def test_remedies_filter_by_condition():
    assert [r.id for r in list_remedies("stress")] == ["ashwagandha_milk", "tulsi_tea"]
    assert [r.id for r in list_remedies("Immunity")] == ["golden_milk", "tulsi_tea"]
    assert len(list_remedies()) == 6


def test_remedy_lookup():
    assert get_remedy("triphala").to_dict()["name"] == "Triphala Churna"
    with pytest.raises(NotFoundError, match="Remedy not found"):
        get_remedy("snake_oil")


def test_diet_guidelines():
    diet = diet_guidelines("en")
    assert [meal["time"] for meal in diet["daily_plan"]][0] == "Breakfast"
    assert diet["foods_to_eat"] and diet["foods_to_avoid"] and diet["ayurvedic_tips"]
    assert diet_guidelines("hi")["daily_plan"][0]["time"] == "नाश्ता"


def test_default_reminders():
    reminders = default_reminders()
    assert len(reminders) == 8
    assert len({r["id"] for r in reminders}) == 8
    assert all(r["category"] in REMINDER_CATEGORIES for r in reminders)
    assert not any(r["completed"] for r in reminders)
    assert reminders[0]["title_hi"] == "सुबह की योग साधना"
