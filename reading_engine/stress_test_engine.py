"""
ENGINE VALIDATION GATE
Must pass before production deployment.
If this script exits with code 1, release must be blocked.
"""

from __future__ import annotations

import argparse
import random
from collections import Counter
from typing import Any

from reading_engine.composer import compose_reading
from reading_engine.engine import build_reading
from reading_engine.errors import NoDataFoundError
from reading_engine.models import REDUCED_VALUES, ReadingInput

SEPARATORS = [":", " • ", "% ", " ", ", ", " likes ", " views ", "."]
CONTEXT_POOL = [
    "",
    "Instagram screenshot",
    "morning clarity and deep emotion",
    "money and practical foundation",
    "spiritual awakening",
    "creative passion with a loving heart",
    "speak your truth with confidence",
]


def generate_random_input(seed: int) -> ReadingInput:
    rng = random.Random(seed)
    parts: list[str] = []
    for _ in range(rng.randint(0, 6)):
        number = str(rng.randint(0, 9999))
        if rng.random() < 0.2:
            number += f".{rng.randint(0, 99)}"
        parts.append(number)
        parts.append(rng.choice(SEPARATORS))
    source_type = rng.choice(["text", "image"])
    text = "".join(parts) or "no numbers here"
    payload: dict[str, Any] = {
        "sourceType": source_type,
        "rawText" if source_type == "text" else "ocrText": text,
        "metadata": {"context": rng.choice(CONTEXT_POOL)},
    }
    return ReadingInput.model_validate(payload)


def check_single_input(reading_input: ReadingInput, failures: list[str], stats: Counter) -> None:
    try:
        first = build_reading(reading_input)
    except NoDataFoundError:
        stats["no_data"] += 1
        return

    second = build_reading(reading_input)
    if first.to_dict() != second.to_dict():
        failures.append(f"engine output not deterministic for {reading_input.source_text!r}")

    if first.sums.reduced not in REDUCED_VALUES:
        failures.append(f"reduced out of range: {first.sums.reduced}")

    if [token.index for token in first.tokens] != list(range(len(first.tokens))):
        failures.append(f"token indexes not contiguous for {reading_input.source_text!r}")

    if len(set(first.elements)) != len(first.elements) or len(set(first.chakras)) != len(first.chakras):
        failures.append(f"duplicate tags for {reading_input.source_text!r}")

    composed_a = compose_reading(first).model_dump_json(by_alias=True)
    composed_b = compose_reading(second).model_dump_json(by_alias=True)
    if composed_a != composed_b:
        failures.append(f"composer output not deterministic for {reading_input.source_text!r}")

    stats[f"reduced_{first.sums.reduced}"] += 1
    if not first.elements:
        stats["empty_elements"] += 1
    if not first.chakras:
        stats["empty_chakras"] += 1


def run_stress_test(iterations: int = 500) -> None:
    from reading_engine.engine_integrity import validate_engine_integrity

    validate_engine_integrity()

    failures: list[str] = []
    stats: Counter = Counter()
    for i in range(iterations):
        check_single_input(generate_random_input(seed=i), failures, stats)

    print("\n===== ENGINE STRESS TEST SUMMARY =====")
    for key in sorted(stats):
        print(f"{key}: {stats[key]}")

    if failures:
        print("\nFAIL STRESS TEST")
        for failure in failures:
            print(" -", failure)
        raise SystemExit(1)

    print("\nPASS STRESS TEST")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--iterations",
        type=int,
        default=500,
        help="Number of seeded random inputs to check",
    )
    args = parser.parse_args()
    run_stress_test(iterations=args.iterations)
