"""Text cleaning, tokenization and stop-word removal."""

from __future__ import annotations

import string
from typing import Iterable

_PUNCTUATION_TO_SPACE = str.maketrans(string.punctuation, " " * len(string.punctuation))

# Common English stop words, grouped by initial letter.
_STOP_WORD_TEXT = """
    a about above after again against all am an and any are aren't as at
    be because been before being below between both but by
    can't cannot could couldn't
    did didn't do does doesn't doing don't down during
    each
    few for from further
    had hadn't has hasn't have haven't having he he'd he'll he's her here
    here's hers herself him himself his how how's
    i i'd i'll i'm i've if in into is isn't it it's its itself
    let's
    me more most mustn't my myself
    no nor not
    of off on once only or other ought our ours ourselves out over own
    same shan't she she'd she'll she's should shouldn't so some such
    than that that's the their theirs them themselves then there there's
    these they they'd they'll they're they've this those through to too
    under until up
    very
    was wasn't we we'd we'll we're we've were weren't what what's when
    when's where where's which while who who's whom why why's with won't
    would wouldn't
    you you'd you'll you're you've your yours yourself yourselves
"""

DEFAULT_STOP_WORDS = frozenset(_STOP_WORD_TEXT.split())


class Preprocessor:
    """Cleans text and splits it into tokens, optionally dropping stop words."""

    def __init__(self, use_stop_words: bool = True) -> None:
        self.use_stop_words = use_stop_words
        self._stop_words: set[str] = set(DEFAULT_STOP_WORDS) if use_stop_words else set()

    def clean_text(self, text: str) -> str:
        """Lower-case, replace punctuation with spaces and normalise whitespace."""
        return " ".join(text.lower().translate(_PUNCTUATION_TO_SPACE).split())

    def tokenize(self, text: str) -> list[str]:
        """Split on whitespace, removing stop words when enabled."""
        return [
            token
            for token in text.split()
            if not (self.use_stop_words and self.is_stop_word(token))
        ]

    def preprocess(self, text: str) -> list[str]:
        """Clean and tokenize text in one step."""
        return self.tokenize(self.clean_text(text))

    def add_stop_words(self, words: Iterable[str]) -> None:
        """Add custom words to the stop-word set."""
        self._stop_words.update(words)

    def is_stop_word(self, word: str) -> bool:
        """Return whether ``word`` is in the stop-word set."""
        return word in self._stop_words