# color.py

from constants import BLACK, DEFAULT_PALETTE


class InvalidConfiguration(ValueError):
    """Raised when painter configuration cannot produce an image."""


class Color:
    """
    An RGB color whose channels are always kept within [0, 255].

    Colors are compared by value. A brush owns a mutable clone of a palette
    color and shifts it in place every step, so palette entries must never be
    handed to a brush directly.
    """
    __slots__ = ('red', 'green', 'blue')

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0):
        self.red = Color.clamp(red)
        self.green = Color.clamp(green)
        self.blue = Color.clamp(blue)

    @staticmethod
    def clamp(component) -> int:
        """Clips any integer into [0, 255]."""
        return max(0, min(255, int(component)))

    def distance_squared(self, other: "Color") -> int:
        """
        Sum of squared channel differences. Compare it against a squared
        threshold; the square root is never needed.
        """
        dr = self.red - other.red
        dg = self.green - other.green
        db = self.blue - other.blue
        return dr * dr + dg * dg + db * db

    def clone(self) -> "Color":
        return Color(self.red, self.green, self.blue)

    def shift(self, d_red: int, d_green: int, d_blue: int):
        self.red = Color.clamp(self.red + d_red)
        self.green = Color.clamp(self.green + d_green)
        self.blue = Color.clamp(self.blue + d_blue)

    def rgb(self) -> tuple:
        return (self.red, self.green, self.blue)

    def rgba(self, opacity: float = 1.0) -> tuple:
        """RGBA tuple for pygame, with opacity in [0, 1] mapped to 0-255."""
        opacity = max(0.0, min(1.0, float(opacity)))
        return (self.red, self.green, self.blue, int(round(opacity * 255)))

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb() == other.rgb()

    def __hash__(self):
        return hash(self.rgb())

    def __repr__(self):
        return f"Color({self.red}, {self.green}, {self.blue})"


class Palette:
    """
    An ordered, non-empty, read-only sequence of base colors.

    Data Contract:
    - Inputs: colors (iterable of Color). Omitted means a single black entry.
    - Invariants: At least one entry. Entries are never mutated; pick()
      returns the shared entry and the caller clones it before mutating.
    """
    def __init__(self, colors=None):
        if colors is None:
            colors = [Color(*rgb) for rgb in DEFAULT_PALETTE]
        self._colors = tuple(colors)
        if not self._colors:
            raise InvalidConfiguration("Palette must contain at least one color.")

    @classmethod
    def from_config(cls, entries):
        """Parses the JSON form: a list of [r, g, b] triples (Colors pass through)."""
        if entries is None:
            return cls()
        colors = []
        for entry in entries:
            if isinstance(entry, Color):
                colors.append(entry)
                continue
            try:
                red, green, blue = entry
                colors.append(Color(int(red), int(green), int(blue)))
            except (TypeError, ValueError) as e:
                raise InvalidConfiguration(f"Invalid palette entry {entry!r}: expected [r, g, b].") from e
        return cls(colors)

    def pick(self, rng) -> Color:
        return self._colors[rng.choice_index(len(self._colors))]

    def __len__(self):
        return len(self._colors)

    def __getitem__(self, index):
        return self._colors[index]

    def __iter__(self):
        return iter(self._colors)

    def __repr__(self):
        return f"Palette({list(self._colors)!r})"


BLACK_COLOR = Color(*BLACK)
