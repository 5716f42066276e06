import enum


class SearchStatus(enum.Enum):

    NOT_SEARCHED = 'not-searched'   # nothing to search for yet
    EMPTY        = 'searched-empty' # searched, nothing matched
    FOUND        = 'searched-with-results'


class SearchResult:
    """
    ordered matches plus how we got them

    an empty result is either "not searched" (the query had nothing in it)
    or "searched but nothing matched", callers need to tell those apart
    """

    def __init__(self, status, words=()):
        self.status = status
        self.words = tuple(words)

    @classmethod
    def not_searched(cls):
        return cls(SearchStatus.NOT_SEARCHED)

    @classmethod
    def of(cls, words):
        words = tuple(words)
        status = SearchStatus.FOUND if words else SearchStatus.EMPTY
        return cls(status, words)

    @property
    def searched(self):
        return self.status != SearchStatus.NOT_SEARCHED

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __getitem__(self, i):
        return self.words[i]

    def __bool__(self):
        return bool(self.words)

    def __eq__(self, other):
        if not isinstance(other, SearchResult):
            return NotImplemented

        return (self.status, self.words) == (other.status, other.words)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.status.value}: {len(self)} words>"
