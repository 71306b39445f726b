class IdsError(ValueError):
    """Base class for everything that can go wrong turning an IDS into paths."""


class MalformedSequenceError(IdsError):
    """The sequence is missing operands, or has tokens left over at the root."""


class UnsupportedCharacterError(IdsError):
    def __init__(self, character):
        self.character = character
        super().__init__(f"No outline for '{character}' (U+{ord(character):04X}) in font")


class StackDepthExceededError(IdsError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"IDS nesting deeper than {limit} levels")
