import pathlib

dictfile = pathlib.Path(__file__).parent / 'data' / 'words.txt'
wordlen = 5

import logging
logger = logging.getLogger()

from .dictionary import Dictionary
from .results import SearchStatus, SearchResult
from .crossword import PatternMatcher, InvalidPatternError
from .utils import clean_letters
from .wordle import ConstraintMatcher, WordleConstraints, TileState, Tile, Grid, derive_constraints
from .letters import AnagramMatcher, Anchor, Tiles, ScoredWord, SCORES, word_score
