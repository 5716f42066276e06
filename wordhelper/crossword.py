import re
import string

from .results import SearchResult
from .utils import clean_letters

import logging
logger = logging.getLogger()


class InvalidPatternError(ValueError):
    """the pattern can't be turned into a positional matcher"""


class PatternMatcher:
    """
    crossword mode: fixed letters at fixed spots, wildcards everywhere else,
    plus some letters that have to show up somewhere
    """

    WILDCARDS = '_?'

    def __init__(self, dictionary):
        self.dictionary = dictionary

    @classmethod
    def compile(cls, pattern):
        """
        turn 'C_T' into an anchored regex
        anything that isn't a letter or a wildcard is an error
        """
        bad = [c for c in pattern if c not in string.ascii_uppercase + cls.WILDCARDS]

        if bad:
            raise InvalidPatternError(f"invalid pattern {pattern!r}, unexpected characters: {''.join(bad)}")

        regex = ''.join(['.' if c in cls.WILDCARDS else c for c in pattern])

        try:
            return re.compile(regex)
        except re.error as e:
            raise InvalidPatternError(f"invalid pattern {pattern!r}: {e}") from e

    def match(self, pattern, required=''):
        """
        return every word the same length as pattern that fits it and
        contains all the required letters, sorted

        an empty pattern means there's nothing to search for yet
        """
        pattern = (pattern or '').strip().upper()

        if not pattern:
            return SearchResult.not_searched()

        regex = self.compile(pattern)
        required = set(clean_letters(required))

        matches = []

        for word in self.dictionary:
            if all([
                len(word) == len(pattern),
                regex.fullmatch(word),
                all([c in word for c in required]),
            ]):
                matches.append(word)

        logger.debug(f"pattern={pattern} required={''.join(sorted(required))}: {len(matches)} matches")
        return SearchResult.of(sorted(matches))
