"""Cell colors and the cyclic relative-color difference. No engine imports."""

from __future__ import annotations

import enum


class Color(enum.IntEnum):
    """Cyclically ordered white → black → gray → white."""

    WHITE = 1
    BLACK = 2
    GRAY = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: object) -> Color | None:
        """Map "white"/"black"/"gray" to a Color. Any other value means uncolored."""
        if not isinstance(name, str):
            return None
        return _BY_LABEL.get(name)


_BY_LABEL: dict[str, Color] = {c.label: c for c in Color}


def rel_diff(a: int, b: int) -> int:
    """Steps from color ``a`` forward to color ``b`` around the cycle, in {0, 1, 2}.

    rel_diff(c, c) == 0, and rel_diff(a, b) + rel_diff(b, a) == 3 for a != b.
    """
    return ((b - 1) - (a - 1) + 3) % 3
