from .errors import GrammarError, PropertyTableError, RulesFileError
from .grammar import Grammar, TokenMatch
from .pseudo import canonical_pseudo
from .values import Color, Fraction, Named, Number, ValueMatch, match_value

__all__ = [
    "Grammar",
    "TokenMatch",
    "canonical_pseudo",
    "match_value",
    "ValueMatch",
    "Fraction",
    "Color",
    "Number",
    "Named",
    "GrammarError",
    "PropertyTableError",
    "RulesFileError",
]
