"""Day 15: the HASH algorithm and the lens boxes it arranges."""

from __future__ import annotations

import re

_UINT = re.compile(r"\+?[0-9]+")
_BOXES = 256


def hash_label(label: str) -> int:
    """HASH value of a string: a number from 0 to 255."""
    value = 0
    for char in label:
        value = (value + ord(char)) * 17 % 256
    return value


def _steps(text: str) -> list[str]:
    return [step.strip() for step in text.strip().split(",")]


def part1(text: str) -> int:
    """Sum of the HASH values of every step."""
    return sum(hash_label(step) for step in _steps(text))


def part2(text: str) -> int:
    """Focusing power of the lenses once every step is applied."""
    boxes: list[dict[str, int]] = [{} for _ in range(_BOXES)]
    for step in _steps(text):
        if "-" in step:
            label = step.partition("-")[0]
            boxes[hash_label(label)].pop(label, None)
            continue
        label, sep, focal = step.partition("=")
        if not sep:
            raise ValueError(f"unsupported operation: {step!r}")
        if not _UINT.fullmatch(focal):
            raise ValueError(f"focal length is not a number: {focal!r}")
        boxes[hash_label(label)][label] = int(focal)
    return sum(
        box_number * slot * focal
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )