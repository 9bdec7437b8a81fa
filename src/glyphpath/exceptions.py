"""Exception hierarchy for glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all glyphpath errors."""

    pass


class LibraryInitError(GlyphPathError):
    """The font-outline library could not be initialized."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not initialize FreeType library: {reason}")


class FontError(GlyphPathError):
    """Errors related to opening a font file."""

    pass


class FontLoadError(FontError):
    """The font file could not be opened or is corrupt."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open or process font file '{path}': {reason}")


class FontFormatError(FontError):
    """The font file was opened but its format is unsupported."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Unsupported font format '{path}': {details}")


class GlyphError(GlyphPathError):
    """Errors related to a single glyph."""

    pass


class GlyphNotFoundError(GlyphError):
    """The character has no glyph in the font's character map."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Glyph not found for character '{character}'")


class GlyphLoadError(GlyphError):
    """The glyph could not be loaded."""

    def __init__(self, character: str, reason: str) -> None:
        self.character = character
        self.reason = reason
        super().__init__(f"Could not load glyph for character '{character}': {reason}")


class GlyphFormatError(GlyphError):
    """The loaded glyph is not a scalable outline."""

    def __init__(self, character: str, details: str) -> None:
        self.character = character
        self.details = details
        super().__init__(
            f"Glyph for character '{character}' is not an outline: {details}"
        )


class OutlineError(GlyphPathError):
    """Errors raised while walking a glyph outline."""

    pass


class OutlineDecomposeError(OutlineError):
    """Outline decomposition failed."""

    def __init__(self, character: str, reason: str) -> None:
        self.character = character
        self.reason = reason
        super().__init__(
            f"Could not decompose outline for character '{character}': {reason}"
        )


class OutlineProtocolError(OutlineError):
    """A traversal event arrived out of order (e.g. a segment before any move)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
