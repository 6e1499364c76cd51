"""Static trigger phrases, response pools and resource bundles.

Everything here is loaded once at import time and is read-only for the life
of the process, so the classifier and responder can share it across threads
without locking.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

LEXICON_VERSION = "2024.1"

CRISIS = "crisis"
ANXIETY = "anxiety"
DEPRESSION = "depression"
STRESS = "stress"
POSITIVE = "positive"
GREETING = "greeting"
HELP_SEEKING = "help_seeking"
GENERAL = "general"

NEGATIVE_CATEGORIES = frozenset({CRISIS, ANXIETY, DEPRESSION, STRESS})


@dataclass(frozen=True)
class ResourceItem:
    name: str
    contact: str


@dataclass(frozen=True)
class ResourceBundle:
    title: str
    items: Tuple[ResourceItem, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "items": [{"name": i.name, "contact": i.contact} for i in self.items],
        }


TRIGGERS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    CRISIS: ("suicide", "kill myself", "end it all", "not worth living",
             "better off dead", "want to die", "ending my life"),
    ANXIETY: ("anxious", "worried", "panic", "nervous", "scared", "afraid",
              "fear", "terror", "dread", "catastrophic"),
    DEPRESSION: ("depressed", "sad", "hopeless", "empty", "worthless", "lonely",
                 "numb", "lifeless", "meaningless"),
    STRESS: ("stressed", "overwhelmed", "pressure", "exhausted", "burned out",
             "swamped", "frazzled"),
    POSITIVE: ("happy", "good", "great", "excited", "grateful", "better",
               "wonderful", "amazing", "fantastic", "joy"),
    GREETING: ("hello", "hi", "hey", "good morning", "good afternoon", "good evening"),
    HELP_SEEKING: ("help", "support", "advice", "guidance", "don't know what to do"),
})

RESPONSES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    GREETING: (
        "Hello! I'm here to support your mental wellness. How are you feeling today?",
        "Hi there! I'm your mental health support companion. What's on your mind?",
        "Welcome! I'm here to listen and help with your mental wellbeing. How can I assist you today?",
        "Good to see you! I'm here to provide a safe space for you to share your thoughts and "
        "feelings. What would you like to talk about?",
    ),
    POSITIVE: (
        "That's wonderful to hear! It's great that you're feeling positive. What's been "
        "contributing to these good feelings?",
        "I'm so glad you're doing well! Keep up the positive energy. Can you tell me more about "
        "what's been going right for you?",
        "That sounds fantastic! Positive feelings are so important for our wellbeing. What's been "
        "the highlight of your day or week?",
        "It's beautiful to hear such positivity from you! Sometimes it helps to acknowledge and "
        "celebrate these good moments. What made today special?",
    ),
    GENERAL: (
        "I hear you, and I want you to know that your feelings are completely valid. Can you tell "
        "me a bit more about what you're experiencing?",
        "Thank you for sharing that with me. It takes courage to open up. I'm here to listen - "
        "would you like to explore these feelings together?",
        "I'm here to listen and support you through this. Sometimes just talking about what we're "
        "going through can help. What's been weighing on your mind?",
        "Your feelings matter, and I'm glad you felt comfortable sharing with me. What's the most "
        "challenging part of what you're dealing with right now?",
    ),
    STRESS: (
        "Stress can feel overwhelming, and it's completely understandable that you're feeling this "
        "way. What's been the main source of stress for you lately?",
        "It sounds like you're dealing with a lot right now. Remember, it's okay to take breaks and "
        "prioritize your wellbeing. What's been putting the most pressure on you?",
        "Stress is a normal response to challenging situations, but we can find ways to manage it "
        "better. Can you help me understand what's been stressing you out?",
        "I can hear that you're feeling stressed, and that must be really difficult. Sometimes "
        "breaking down what's causing stress can help us address it. What's been on your mind?",
    ),
    ANXIETY: (
        "Anxiety can feel very intense and overwhelming. You're brave for reaching out. What does "
        "anxiety feel like for you, and when do you notice it most?",
        "I understand anxiety can be frightening and exhausting. You're not alone in this. Can you "
        "describe what situations or thoughts tend to trigger your anxiety?",
        "Anxiety affects many people, and it's treatable and manageable. What's been making you "
        "feel most anxious lately? Sometimes naming our fears can help reduce their power.",
        "Thank you for trusting me with your anxiety. It takes strength to acknowledge these "
        "feelings. What physical sensations or thoughts do you notice when you're anxious?",
    ),
    DEPRESSION: (
        "Depression can make everything feel heavy and exhausting. I want you to know that small "
        "steps count, and I'm here with you. How long have you been feeling this way?",
        "Thank you for trusting me with how you're feeling. Every day you're here matters, and I'm "
        "glad you reached out. What does depression feel like for you day-to-day?",
        "Depression affects many people, and you've taken a positive step by reaching out. It can "
        "feel isolating, but you're not alone. What's been the hardest part for you?",
        "I hear the pain in what you're sharing, and I want you to know that these feelings, while "
        "very real and difficult, can improve with support. What's been going through your mind "
        "lately?",
    ),
})

FOLLOW_UPS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    STRESS: (
        "What time of day do you usually feel most stressed?",
        "Have you noticed any patterns in what triggers your stress?",
        "What normally helps you feel calmer during stressful times?",
        "Are there any upcoming situations that are particularly worrying you?",
    ),
    ANXIETY: (
        "What physical sensations do you notice when you're anxious?",
        "Are there specific situations that make your anxiety worse?",
        "Have you found anything that helps calm your anxiety, even a little?",
        "What thoughts tend to go through your mind when you're feeling anxious?",
    ),
    DEPRESSION: (
        "What activities used to bring you joy that feel difficult now?",
        "How has your sleep and energy been lately?",
        "Do you have people in your life you feel comfortable talking to?",
        "What's one small thing that might make today a tiny bit easier?",
    ),
})

COPING_STRATEGIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    STRESS: (
        "Try the 4-7-8 breathing technique: Inhale for 4, hold for 7, exhale for 8. This activates "
        "your body's relaxation response.",
        "Take a 5-10 minute walk or do some light stretching. Movement can help release physical "
        "tension from stress.",
        "Practice the 'body scan' technique: Start from your toes and mentally check each part of "
        "your body, releasing tension as you go.",
        "Write down three things you're grateful for today, no matter how small. This can help "
        "shift your focus to positive aspects of your day.",
    ),
    ANXIETY: (
        "Use the 5-4-3-2-1 grounding technique: Name 5 things you see, 4 you can touch, 3 you hear, "
        "2 you smell, 1 you taste. This brings you back to the present moment.",
        "Try box breathing: Inhale for 4 counts, hold for 4, exhale for 4, hold for 4. Repeat this "
        "cycle to calm your nervous system.",
        "Challenge anxious thoughts by asking: 'Is this thought helpful? Is it realistic? What would "
        "I tell a friend having this thought?'",
        "Practice the 'STOP' technique: Stop what you're doing, Take a breath, Observe your "
        "thoughts and feelings, Proceed with intention.",
    ),
    DEPRESSION: (
        "Set one very small, achievable goal for today - even something as simple as making your "
        "bed or drinking a glass of water.",
        "Try to spend 10-15 minutes outside if possible. Natural light and fresh air can have a "
        "positive impact on mood.",
        "Reach out to one person - even a simple text to a friend or family member can help combat "
        "isolation.",
        "Do one small act of self-care, like taking a warm shower, listening to a favorite song, or "
        "drinking a cup of tea mindfully.",
    ),
})

CRISIS_RESOURCES = ResourceBundle(
    title="Immediate Crisis Support",
    items=(
        ResourceItem("National Suicide Prevention Lifeline", "988 (US)"),
        ResourceItem("Crisis Text Line", "Text HOME to 741741"),
        ResourceItem("Emergency Services", "911"),
        ResourceItem("National Alliance on Mental Illness", "1-800-950-NAMI (6264)"),
    ),
)

PROFESSIONAL_RESOURCES = ResourceBundle(
    title="Professional Mental Health Support",
    items=(
        ResourceItem("Employee Assistance Program (EAP)", "Contact HR for confidential support"),
        ResourceItem("Psychology Today Therapist Finder", "psychologytoday.com"),
        ResourceItem("BetterHelp Online Therapy", "betterhelp.com"),
        ResourceItem("Talkspace Online Therapy", "talkspace.com"),
    ),
)

WELLNESS_RESOURCES = ResourceBundle(
    title="Mental Wellness Resources",
    items=(
        ResourceItem("Headspace - Meditation & Mindfulness", "headspace.com"),
        ResourceItem("Calm - Sleep & Meditation", "calm.com"),
        ResourceItem("NAMI - Mental Health Education", "nami.org"),
        ResourceItem("Anxiety and Depression Association", "adaa.org"),
    ),
)

CRISIS_MESSAGE = (
    "I'm very concerned about what you've shared, and I want you to know that your life has value "
    "and meaning. You deserve support and care. Please reach out to a crisis helpline immediately - "
    "they have trained professionals who can help you through this difficult time."
)
HELP_SEEKING_MESSAGE = (
    "I'm here to help and support you. Thank you for reaching out - that takes courage. Can you "
    "tell me more about what you're going through? Sometimes it helps to start with how you're "
    "feeling right now, and we can work through it together."
)
ANXIETY_ESCALATION = (
    "I notice we've been talking about anxiety for a while. Sometimes when anxiety persists, it can "
    "help to talk to a professional who specializes in anxiety disorders."
)
DEPRESSION_ESCALATION = (
    "I'm noticing this has been a particularly difficult time for you. Depression can feel "
    "overwhelming, but professional support can make a real difference."
)
CONTEXTUAL_FOLLOW_UP = (
    "I notice this is something that's been on your mind. What feels most important to talk about "
    "right now?"
)
FALLBACK_MESSAGE = "I'm here with you and I'm listening. Would you like to tell me more?"

SAFETY_QUESTION = "Before we continue, on a scale of 1-10, how safe do you feel right now?"
WELLBEING_QUESTION = "On a scale of 1-10, how would you rate your current emotional wellbeing?"

WELCOME_MESSAGE = (
    "Hello! I'm your mental health support assistant. How are you feeling today? I'm here to "
    "listen and help you through whatever you're experiencing."
)

# (upper bound inclusive, text) checked in order
MOOD_ACKNOWLEDGMENTS: Tuple[Tuple[int, str], ...] = (
    (3, "I can see you're going through a difficult time. Remember that these feelings are "
        "temporary and you're not alone. Would you like to talk about what's making you feel "
        "this way?"),
    (6, "It sounds like you're having a mixed day. That's completely normal. Is there anything "
        "specific that's been on your mind?"),
    (10, "I'm glad to hear you're feeling relatively positive today! What's been going well for "
         "you?"),
)


@dataclass(frozen=True)
class Lexicon:
    """Bundle of every text pool the responder draws from.

    Tests can build a smaller lexicon (or one with empty pools) and hand it to
    the responder without touching the module-level data.
    """

    responses: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: RESPONSES)
    coping: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: COPING_STRATEGIES)
    follow_ups: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: FOLLOW_UPS)
    crisis_resources: ResourceBundle = CRISIS_RESOURCES
    professional_resources: ResourceBundle = PROFESSIONAL_RESOURCES
    wellness_resources: ResourceBundle = WELLNESS_RESOURCES
    version: str = LEXICON_VERSION


DEFAULT_LEXICON = Lexicon()
