"""
Model scales.

A scale is identified by its name: two scales with the same name compare
equal even if ratio or gauge differ. Only H0 and N are known when parsing
documents; other scales can be built directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from railists.contracts.errors import BlankValueError, InvalidValueError
from railists.domain.enums import TrackGauge


@dataclass(frozen=True)
class Scale:
    """
    A model railway scale.

    Attributes:
        name: Scale name, the identity of the scale (e.g., "H0")
        ratio: Denominator of the scale ratio (87 for 1:87)
        gauge_mm: Distance between the rails in millimeters
        track_gauge: Gauge classification of the modelled prototype
    """

    name: str
    ratio: Decimal = field(compare=False)
    gauge_mm: Decimal | None = field(default=None, compare=False)
    track_gauge: TrackGauge = field(default=TrackGauge.STANDARD, compare=False)

    @classmethod
    def h0(cls) -> Scale:
        """H0 scale (1:87, 16.5 mm gauge)."""
        return cls("H0", Decimal("87"), Decimal("16.5"), TrackGauge.STANDARD)

    @classmethod
    def n(cls) -> Scale:
        """N scale (1:160, 9 mm gauge)."""
        return cls("N", Decimal("160"), Decimal("9"), TrackGauge.STANDARD)

    @classmethod
    def from_name(cls, name: str) -> Scale:
        """
        Look up a known scale by name.

        Raises:
            BlankValueError: If the name is empty
            InvalidValueError: If the scale is not known
        """
        if not name or not name.strip():
            raise BlankValueError(
                "Scale cannot be blank", field_name="scale", actual_value=name
            )

        factory = _KNOWN_SCALES.get(name)
        if factory is None:
            raise InvalidValueError(
                f"Unknown scale [allowed values are {', '.join(_KNOWN_SCALES)}]",
                field_name="scale",
                actual_value=name,
            )
        return factory()

    def __str__(self) -> str:
        return f"{self.name} (1:{self.ratio})"


_KNOWN_SCALES = {
    "H0": Scale.h0,
    "N": Scale.n,
}
