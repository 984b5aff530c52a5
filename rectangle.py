from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box: origin (x, y) plus width/height."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def contains_point(self, x, y):
        # strict: edge pixels belong to no key, so neighbours never double-hit
        return self.x < x < self.right and self.y < y < self.bottom
