from dataclasses import dataclass


def _fmt(value):
    # 255.0 -> "255", 127.5 -> "127.5"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


@dataclass(frozen=True)
class Color:
    """RGBA value. Channels are never clamped; a fade may pass through
    fractional or out-of-range values and they are kept as-is."""
    r: float
    g: float
    b: float
    a: float = 1

    @classmethod
    def from_tuple(cls, rgb):
        return cls(*rgb)

    def as_tuple(self):
        return (self.r, self.g, self.b, self.a)

    @staticmethod
    def at(start, end, step):
        """Color between start and end at the given fraction of the transition.

        step=0 gives start and step=1 gives end. Steps outside [0, 1]
        extrapolate linearly.
        """
        return Color(
            start.r + (end.r - start.r) * step,
            start.g + (end.g - start.g) * step,
            start.b + (end.b - start.b) * step,
            start.a + (end.a - start.a) * step,
        )

    @staticmethod
    def gradient(start, end, steps):
        """Evenly spaced colors from start to end, both included."""
        if steps <= 0:
            return []
        if steps == 1:
            return [start]
        return [Color.at(start, end, i / (steps - 1)) for i in range(steps)]

    def to_display_string(self, include_alpha=False):
        if include_alpha:
            return f"rgba({_fmt(self.r)}, {_fmt(self.g)}, {_fmt(self.b)}, {_fmt(self.a)})"
        return f"rgb({_fmt(self.r)}, {_fmt(self.g)}, {_fmt(self.b)})"

    def __str__(self):
        return self.to_display_string()
