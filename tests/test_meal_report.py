"""Tests for MealReport merging and attribute conversion."""
from backend.models.meal_report import MealReport


def test_from_values_ignores_unknown_keys_and_empty_values():
    report = MealReport.from_values({"meal": "lunch", "food": "", "color": "blue", "place": None})

    assert report.meal == "lunch"
    assert report.food is None
    assert report.place is None
    assert report.to_attributes() == {"meal": "lunch"}


def test_from_values_accepts_none():
    assert MealReport.from_values(None) == MealReport()


def test_merge_supplied_value_overwrites_stored():
    stored = MealReport(meal="breakfast", place="home")
    merged = stored.merge(MealReport(meal="dinner"))

    assert merged.meal == "dinner"
    assert merged.place == "home"


def test_merge_omitted_value_never_clears_stored():
    stored = MealReport(person="ann", meal="lunch", food="rice", place="home", time="noon")
    merged = stored.merge(MealReport())

    assert merged == stored


def test_merge_does_not_mutate_either_side():
    stored = MealReport(meal="lunch")
    supplied = MealReport(place="restaurant")
    stored.merge(supplied)

    assert stored.place is None
    assert supplied.meal is None


def test_values_are_taken_verbatim():
    report = MealReport.from_values({"food": "  Pad Thai!! "})

    assert report.food == "  Pad Thai!! "
