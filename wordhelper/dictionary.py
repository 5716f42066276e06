import logging
logger = logging.getLogger()


class Dictionary:
    """
    read-only, ordered sequence of uppercase words

    every matcher scans one of these, nothing ever changes it after
    construction so it's safe to share between threads
    """

    def __init__(self, words):
        self._words = tuple(words)

    @property
    def words(self):
        return self._words

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __getitem__(self, i):
        return self._words[i]

    def __contains__(self, word):
        return word in self._words

    def __repr__(self):
        return f"<{self.__class__.__name__} {len(self)} words>"

    def of_length(self, wordlen):
        return (word for word in self._words if len(word) == wordlen)

    @classmethod
    def read_dict(cls, dictpath):
        """
        one word per line, keep file order

        blank lines and anything that isn't purely alphabetic are skipped,
        the rest is uppercased
        """
        dictionary = dictpath.read_text(encoding='utf-8').splitlines()
        logger.debug(f"dictionary file contains {len(dictionary)} lines")

        words = []

        for word in dictionary:
            word = word.strip()

            if all([
                word,
                word.isascii(),
                word.isalpha(),
            ]):
                words.append(word.upper())

        logger.debug(f"our word list contains {len(words)} words")
        return cls(words)
