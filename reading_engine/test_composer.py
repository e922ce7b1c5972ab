import unittest

from reading_engine.composer import (
    COMPOSER_VERSION,
    compose_reading,
    generate_chakra_resonance,
    generate_essence,
    generate_intention,
    join_chakra_names,
)
from reading_engine.engine import build_reading
from reading_engine.models import ChakraTag, ElementTag, FullSumResult, NumberToken, ReadingData
from reading_engine.templates import (
    CHAKRA_RESONANCE_NEUTRAL,
    CHAKRA_RESONANCE_PARAGRAPHS,
    INTENTION_TEMPLATES,
    MASTER_ESSENCES,
)


def _reading(reduced: int, elements=(), chakras=(), master=None) -> ReadingData:
    return ReadingData(
        tokens=(NumberToken(value=reduced, raw=str(reduced), index=0),),
        sums=FullSumResult(full_sum=reduced, reduced=reduced, master=master),
        elements=tuple(elements),
        chakras=tuple(chakras),
    )


class TestComposeReading(unittest.TestCase):
    def test_air_three_falls_back_to_generic_essence(self):
        data = _reading(3, elements=[ElementTag.AIR], chakras=[ChakraTag.SOLAR_PLEXUS])

        composed = compose_reading(data)

        self.assertEqual(
            composed.essence,
            "The frequency of 3 activates within you. Patterns align, and purpose clarifies.",
        )
        self.assertEqual(composed.marker_title, "Marker 3 – Stabilized Momentum")

    def test_bare_element_name_is_accepted(self):
        data = _reading(3, elements=["Air"])

        self.assertEqual(data.elements, (ElementTag.AIR,))
        self.assertTrue(compose_reading(data).essence.startswith("The frequency of 3"))

    def test_table_hit_for_element_and_value(self):
        data = _reading(4, elements=[ElementTag.EARTH], chakras=[ChakraTag.ROOT])

        composed = compose_reading(data)

        self.assertEqual(
            composed.essence,
            "Build your foundation stone by stone. Patience and presence create lasting structures.",
        )
        self.assertEqual(composed.core_equation_tone, "Foundation × Stability = Grounded Growth")
        self.assertEqual(composed.reflection_key, "What foundation requires your attention?")
        self.assertEqual(composed.intention, "Ground into safety. Trust the foundation beneath you.")

    def test_master_numbers_use_master_essence(self):
        for master in (11, 22, 33):
            data = _reading(master, elements=[ElementTag.FIRE], chakras=[ChakraTag.CROWN], master=master)
            composed = compose_reading(data)
            self.assertEqual(composed.essence, MASTER_ESSENCES[master])
            self.assertTrue(composed.marker_title.startswith(f"Marker {master} – "))

    def test_reduced_zero_uses_every_fallback(self):
        composed = compose_reading(_reading(0))

        self.assertEqual(composed.marker_title, "Marker 0")
        self.assertEqual(composed.core_equation_tone, "Energy × Form = Embodied Frequency")
        self.assertEqual(composed.reflection_key, "What is this moment asking of you?")
        self.assertEqual(composed.intention, INTENTION_TEMPLATES[ChakraTag.HEART])
        self.assertEqual(composed.chakra_resonance, CHAKRA_RESONANCE_NEUTRAL)
        self.assertEqual(
            composed.essence,
            "The frequency of 0 activates within you. Patterns align, and purpose clarifies.",
        )
        self.assertEqual(composed.elemental_alignment, ())
        self.assertEqual(composed.chakra_focus, ())

    def test_primary_tags_drive_lookup(self):
        data = _reading(9, elements=[ElementTag.WATER, ElementTag.FIRE], chakras=[ChakraTag.THROAT, ChakraTag.HEART])

        self.assertEqual(generate_essence(data), "Deep waters cleanse and renew. Surrender to the cycle of completion.")
        self.assertEqual(generate_intention(data), "Speak your truth. Express authentically.")

    def test_single_chakra_resonance_paragraph(self):
        for chakra in ChakraTag:
            data = _reading(5, chakras=[chakra])
            self.assertEqual(generate_chakra_resonance(data), CHAKRA_RESONANCE_PARAGRAPHS[chakra])

    def test_multiple_chakra_resonance(self):
        data = _reading(4, chakras=[ChakraTag.ROOT, ChakraTag.HEART, ChakraTag.CROWN])

        resonance = generate_chakra_resonance(data)

        self.assertTrue(resonance.startswith("Multiple energy centers activate: Root, Heart and Crown. "))
        self.assertTrue(resonance.endswith("Notice how these frequencies interact within you."))

    def test_join_chakra_names(self):
        self.assertEqual(join_chakra_names((ChakraTag.ROOT, ChakraTag.CROWN)), "Root and Crown")
        self.assertEqual(join_chakra_names((ChakraTag.THIRD_EYE,)), "Third Eye")
        self.assertEqual(join_chakra_names(()), "")

    def test_pass_through_and_meta(self):
        data = build_reading({"sourceType": "text", "rawText": "11:11"})

        composed = compose_reading(data)

        self.assertEqual(composed.elemental_alignment, data.elements)
        self.assertEqual(composed.chakra_focus, data.chakras)
        self.assertEqual(composed.meta.engine, data)
        self.assertEqual(composed.meta.version, COMPOSER_VERSION)
        self.assertEqual(composed.chakra_resonance.split(".")[0], "Multiple energy centers activate: Root and Crown")

    def test_serialized_shape(self):
        payload = compose_reading(build_reading({"sourceType": "text", "rawText": "9 2"})).to_dict()

        self.assertEqual(
            list(payload.keys()),
            [
                "markerTitle",
                "coreEquationTone",
                "elementalAlignment",
                "chakraFocus",
                "chakraResonance",
                "essence",
                "intention",
                "reflectionKey",
                "meta",
            ],
        )
        self.assertEqual(payload["markerTitle"], "Marker 11 – Gateway Awakening")
        self.assertEqual(payload["elementalAlignment"], ["🜂 Fire", "🜄 Water"])
        self.assertEqual(payload["chakraFocus"], ["Crown"])
        self.assertEqual(payload["meta"]["version"], "2.0.0")
        self.assertEqual(payload["meta"]["engine"]["sums"], {"fullSum": 11, "reduced": 11, "master": 11})

    def test_referentially_transparent(self):
        data = build_reading({"sourceType": "text", "rawText": "10:24 • 67% • 144 likes"})
        clone = ReadingData.model_validate(data.to_dict())

        first = compose_reading(data).model_dump_json(by_alias=True)
        second = compose_reading(clone).model_dump_json(by_alias=True)

        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
