class InvalidUnitError(ValueError):
    pass


class MissingMetricError(ValueError):
    pass


class UnitNormalizer:
    """
    Converts metric values into the canonical unit the band tables expect.
    Rates (win rate, Kelly): percent 0-100. Durations: hours.
    """
    RATE_UNITS = ("percent", "fraction")
    DURATION_UNITS = ("minutes", "hours", "days")

    @staticmethod
    def _clean(unit, allowed: tuple, kind: str) -> str:
        if not isinstance(unit, str):
            raise InvalidUnitError(f"Invalid {kind} unit: {unit!r}")
        u = unit.strip().lower()
        if u not in allowed:
            raise InvalidUnitError(
                f"Unknown {kind} unit: {unit!r} (expected one of {', '.join(allowed)})"
            )
        return u

    @staticmethod
    def to_percent(value: float, unit: str = "percent") -> float:
        """0.65 fraction -> 65.0 percent."""
        u = UnitNormalizer._clean(unit, UnitNormalizer.RATE_UNITS, "rate")
        if u == "fraction":
            return value * 100
        return value

    @staticmethod
    def to_hours(value: float, unit: str = "hours") -> float:
        """90 minutes -> 1.5 hours, 2 days -> 48 hours."""
        u = UnitNormalizer._clean(unit, UnitNormalizer.DURATION_UNITS, "duration")
        if u == "minutes":
            # 120 minutes -> exactly 2.0
            return value / 60
        if u == "days":
            return value * 24
        return value
