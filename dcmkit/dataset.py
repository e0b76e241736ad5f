"""DICOM datasets: ordered collections of elements, possibly nested in sequences."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from dcmkit.element import Element, ValueType, format_tag


class ElementNotFoundError(LookupError):
    """Raised when a requested element is not in the dataset."""

    def __init__(self, message: str = "element not found") -> None:
        super().__init__(message)


def _walk(elements: list[Element], level: int) -> Iterator[tuple[Element, int]]:
    for elem in elements:
        yield elem, level
        if elem.value.value_type == ValueType.SEQUENCES:
            for item in elem.value.value:
                yield from _walk(item.elements, level + 1)


@dataclass(eq=True)
class Dataset:
    """A DICOM dataset: an ordered list of top-level elements."""

    elements: list[Element] = field(default_factory=list)

    def find_element_by_tag(self, tag: tuple[int, int]) -> Element:
        """Return the first top-level element with ``tag``; sequences are not searched."""
        for elem in self.elements:
            if elem.tag == tag:
                return elem
        raise ElementNotFoundError()

    def find_element_by_tag_nested(self, tag: tuple[int, int]) -> Element:
        """Return the first element with ``tag``, searching inside sequences too."""
        for elem in self.flat_iter():
            if elem.tag == tag:
                return elem
        raise ElementNotFoundError()

    def flat_iter(self) -> Iterator[Element]:
        """Yield every element, including those nested in sequences.

        A sequence element is yielded before the elements of its items.
        """
        for elem, _ in _walk(self.elements, 0):
            yield elem

    def __iter__(self) -> Iterator[Element]:
        return self.flat_iter()

    def __str__(self) -> str:
        parts = []
        for elem, level in _walk(self.elements, 0):
            tabs = "\t" * level
            parts.append(
                f"{tabs}[\n"
                f"{tabs}  Tag: {format_tag(elem.tag)}\n"
                f"{tabs}  Tag Name: \n"
                f"{tabs}  VR: {elem.value_representation}\n"
                f"{tabs}  VR Raw: {elem.raw_value_representation}\n"
                f"{tabs}  VL: {elem.value_length}\n"
                f"{tabs}  Value: {elem.value}\n"
                f"{tabs}]\n\n"
            )
        return "".join(parts)

    def _json_data(self) -> Any:
        return {"elements": [e._json_data() for e in self.elements]}

    def to_json(self) -> str:
        """Serialise this dataset as compact JSON."""
        return json.dumps(self._json_data(), separators=(",", ":"), ensure_ascii=False)