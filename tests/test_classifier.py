import pytest

from backend.inference.classifier import Analysis, build_rules, classify


@pytest.mark.parametrize(
    "text",
    [
        "I want to die",
        "I'm so happy today but honestly I want to die",
        "Everything is great, I just think about suicide sometimes",
        "SOMETIMES I FEEL LIKE ENDING MY LIFE",
    ],
)
def test_crisis_takes_precedence(text):
    result = classify(text)
    assert result.category == "crisis"
    assert result.mood == "crisis"
    assert result.risk_level == "high"


@pytest.mark.parametrize(
    "text,category,mood,risk",
    [
        ("I'm feeling really anxious about my presentation", "anxiety", "anxious", "medium"),
        ("I feel hopeless lately", "depression", "depressed", "medium"),
        ("I'm totally swamped this week", "stress", "stressed", "medium"),
        ("Today was a wonderful day", "positive", "positive", "low"),
        ("hi", "greeting", "neutral", "low"),
        ("I need some advice on how to handle my workload", "help_seeking", "neutral", "low"),
    ],
)
def test_category_table(text, category, mood, risk):
    assert classify(text) == Analysis(category, mood, risk)


def test_anxiety_beats_depression_and_stress():
    # worried (anxiety), sad (depression) and overwhelmed (stress) all match
    assert classify("I'm worried, sad and overwhelmed").category == "anxiety"


def test_depression_beats_stress():
    assert classify("I'm exhausted and lonely").category == "depression"


def test_positive_beats_greeting():
    assert classify("hey, feeling great").category == "positive"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "The quarterly report is due on Friday",
        "hello, I wanted to ask about the new parking policy at work",
    ],
)
def test_unrecognised_text_is_general(text):
    assert classify(text) == Analysis("general", "neutral", "low")


def test_greeting_needs_short_message():
    assert classify("hello there").category == "greeting"
    long_text = "hello " + "x" * 30
    assert classify(long_text).category == "general"


def test_greeting_ceiling_is_configurable():
    rules = build_rules(greeting_max_length=100)
    long_text = "hello, I wanted to ask about the new parking policy at work"
    assert classify(long_text, rules).category == "greeting"


def test_substring_matching_fires_inside_words():
    # "this" contains "hi"; plain substring matching is kept on purpose
    assert classify("this is whatever").category == "greeting"


def test_classification_is_repeatable():
    text = "I'm stressed about deadlines"
    assert classify(text) == classify(text)
    assert classify(text) is classify(text)


def test_greeting_length_boundary():
    just_under = "hello" + "." * 24
    at_limit = "hello" + "." * 25
    assert len(just_under) == 29 and len(at_limit) == 30
    assert classify(just_under).category == "greeting"
    assert classify(at_limit).category == "general"
