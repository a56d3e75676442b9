from __future__ import annotations


class AngleParseError(ValueError):
    """Text does not match the angle grammar."""

    def __init__(self, text: str):
        super().__init__(f"the string {text!r} does not represent a valid angle")
        self.text = text
