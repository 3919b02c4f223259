"""Decoder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderConfig:
    """Options for a single decode call.

    ``decode_list_elements`` is off by default: sequence outputs are committed
    empty without visiting the list's elements. Turn it on to decode each
    element into the sequence's element shape.
    """

    root_name: str = "root"
    decode_list_elements: bool = False
