"""Narrative fragments used by the composer.

Keys are reduced values (1-9 plus master numbers 11/22/33), ``ElementTag`` or
``ChakraTag`` members. The text is persisted and compared downstream, so edits
here change stored readings.
"""

from __future__ import annotations

from reading_engine.models import ChakraTag, ElementTag

NARRATIVE_KEYS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 22, 33)

MARKER_TITLES: dict[int, str] = {
    1: "Marker 1 – New Beginnings",
    2: "Marker 2 – Receptive Flow",
    3: "Marker 3 – Stabilized Momentum",
    4: "Marker 4 – Foundation Building",
    5: "Marker 5 – Dynamic Change",
    6: "Marker 6 – Harmonic Balance",
    7: "Marker 7 – Seeking Clarity",
    8: "Marker 8 – Material Mastery",
    9: "Marker 9 – Completion Cycle",
    11: "Marker 11 – Gateway Awakening",
    22: "Marker 22 – Master Builder",
    33: "Marker 33 – Universal Teacher",
}
MARKER_TITLE_FALLBACK = "Marker {reduced}"

CORE_EQUATIONS: dict[int, str] = {
    1: "Initiation × Clarity = Aligned Action",
    2: "Receptivity × Balance = Harmonic Flow",
    3: "Expression × Structure = Embodied Expansion",
    4: "Foundation × Stability = Grounded Growth",
    5: "Change × Freedom = Transformative Motion",
    6: "Love × Responsibility = Compassionate Service",
    7: "Wisdom × Reflection = Inner Knowing",
    8: "Power × Material = Abundant Manifestation",
    9: "Completion × Release = Transcendent Closure",
    11: "Intuition × Illumination = Awakened Vision",
    22: "Mastery × Structure = Monumental Creation",
    33: "Love × Teaching = Universal Healing",
}
CORE_EQUATION_FALLBACK = "Energy × Form = Embodied Frequency"

# Sparse: missing element/value pairs use the fallbacks below.
ESSENCE_TEMPLATES: dict[ElementTag, dict[int, str]] = {
    ElementTag.FIRE: {
        1: "You are standing at the threshold of initiation. The fire within calls for bold action.",
        3: "Creative power flows through you. Express your truth with courage and clarity.",
        9: "The cycle completes in flames of transformation. Release what no longer serves.",
    },
    ElementTag.AIR: {
        1: "A fresh wind carries new perspectives. Clarity emerges from mental stillness.",
        7: "Wisdom arrives through quiet contemplation. Trust the insights that surface.",
    },
    ElementTag.EARTH: {
        2: "Root deeply into receptive stillness. The earth supports your becoming.",
        4: "Build your foundation stone by stone. Patience and presence create lasting structures.",
        8: "Material mastery aligns with spiritual purpose. Abundance flows through grounded action.",
    },
    ElementTag.WATER: {
        2: "Emotional currents guide you toward balance. Flow with what is.",
        6: "Love becomes the organizing principle. Lead with compassion and care.",
        9: "Deep waters cleanse and renew. Surrender to the cycle of completion.",
    },
}
MASTER_ESSENCES: dict[int, str] = {
    11: "You stand at a gateway of awakening. Intuition and illumination merge into vision.",
    22: "You are a master builder. Your vision has the power to reshape reality.",
    33: "Universal healing flows through you. You are called to teach and serve.",
}
ESSENCE_FALLBACK = "The frequency of {reduced} activates within you. Patterns align, and purpose clarifies."

INTENTION_TEMPLATES: dict[ChakraTag, str] = {
    ChakraTag.ROOT: "Ground into safety. Trust the foundation beneath you.",
    ChakraTag.SACRAL: "Honor your creative power. Allow pleasure and play.",
    ChakraTag.SOLAR_PLEXUS: "Claim your will. Direct your energy with confidence.",
    ChakraTag.HEART: "Open to love. Balance giving and receiving.",
    ChakraTag.THROAT: "Speak your truth. Express authentically.",
    ChakraTag.THIRD_EYE: "Trust your inner vision. Wisdom lives within.",
    ChakraTag.CROWN: "Connect to source. Remember your divine nature.",
}

REFLECTION_KEYS: dict[int, str] = {
    1: "What wants to begin through you?",
    2: "Where are you being called to receive?",
    3: "How can you express your truth more fully?",
    4: "What foundation requires your attention?",
    5: "What transformation is underway?",
    6: "Where can you bring more balance and love?",
    7: "What wisdom is seeking to emerge?",
    8: "How can you embody abundance?",
    9: "What is complete? What must be released?",
    11: "What awakening is calling you forward?",
    22: "What monumental work are you here to build?",
    33: "How are you being called to serve and heal?",
}
REFLECTION_KEY_FALLBACK = "What is this moment asking of you?"

CHAKRA_RESONANCE_PARAGRAPHS: dict[ChakraTag, str] = {
    ChakraTag.ROOT: (
        "Your Root chakra activates, calling you to ground deeply into safety and stability. "
        "This is a time to tend to your foundation—physical health, material security, and basic needs."
    ),
    ChakraTag.SACRAL: (
        "Your Sacral chakra glows with creative and emotional energy. "
        "Honor your desires, embrace pleasure, and allow your creative power to flow freely."
    ),
    ChakraTag.SOLAR_PLEXUS: (
        "Your Solar Plexus ignites with willpower and direction. "
        "This is your moment to claim your power, set clear intentions, and move forward with confidence."
    ),
    ChakraTag.HEART: (
        "Your Heart chakra opens, inviting love, compassion, and connection. "
        "Balance giving and receiving, and lead with heart-centered wisdom."
    ),
    ChakraTag.THROAT: (
        "Your Throat chakra activates, urging authentic expression. "
        "Speak your truth, communicate clearly, and let your voice be heard."
    ),
    ChakraTag.THIRD_EYE: (
        "Your Third Eye awakens, enhancing intuition and inner vision. "
        "Trust the insights that arise and see beyond surface appearances."
    ),
    ChakraTag.CROWN: (
        "Your Crown chakra illuminates, connecting you to divine consciousness and universal wisdom. "
        "You are remembering your spiritual nature."
    ),
}
CHAKRA_RESONANCE_NEUTRAL = "Your energy centers are in a state of neutral equilibrium."
CHAKRA_RESONANCE_MULTIPLE = (
    "Multiple energy centers activate: {chakras}. "
    "This creates a complex energetic signature that invites integration across different levels of being. "
    "Notice how these frequencies interact within you."
)
