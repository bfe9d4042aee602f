"""
ResumeRover - Tokenizer and normalizer.

Turns resume and job description text into comparable TokenSets:
lower-cased unigrams with stop words removed, plus 2..N word phrases
built from neighbouring tokens inside the same clause.

Tokens keep internal periods, hyphens, '+' and '#', so terms such as
"c++", "c#", "node.js" and "cross-functional" survive as one token.
A clause ends at punctuation, a newline, or a sentence-final period.
"""
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from nltk.stem.snowball import SnowballStemmer

from .taxonomy import STOP_WORDS, iter_skill_terms

_CLAUSE_BREAK = re.compile(r'[,;:!?()\[\]{}<>|"\n\r•·▪●–—*]+|\.(?=\s|$)')
_TOKEN = re.compile(r'(?:[^\W_]|[+#])+(?:[.\-](?:[^\W_]|[+#])+)*')
_NUMBER = re.compile(r'[\d.\-+#%]+')

# Single characters are noise except where they name a skill ("r")
_SHORT_TERMS: FrozenSet[str] = frozenset(
    term for _, term in iter_skill_terms() if len(term) == 1
)


def _keep(token: str, stop_words: FrozenSet[str]) -> bool:
    if token in stop_words:
        return False
    if _NUMBER.fullmatch(token):
        return False
    if len(token) == 1 and token not in _SHORT_TERMS:
        return False
    return any(ch.isalnum() for ch in token)


# Snowball is rule-based, so it needs no corpus download
_STEMMER = SnowballStemmer("english")


def _stem_word(word: str) -> str:
    # Acronyms ("aws", "sql") and tokens like "node.js" or "c++" are left as-is
    if len(word) <= 3 or not word.isalpha():
        return word
    return _STEMMER.stem(word)


def stem(term: str) -> str:
    """Snowball stem of each word of a term ("managed apis" -> "manag api")."""
    return ' '.join(_stem_word(word) for word in term.split(' '))


def _split_clauses(text: str, stop_words: FrozenSet[str]) -> Tuple[Tuple[str, ...], ...]:
    clauses = []
    for chunk in _CLAUSE_BREAK.split(text.lower()):
        # '/' separates alternatives ("ci/cd", "and/or") without ending a clause
        tokens = tuple(
            token for token in _TOKEN.findall(chunk.replace('/', ' '))
            if _keep(token, stop_words)
        )
        if tokens:
            clauses.append(tokens)
    return tuple(clauses)


@dataclass(frozen=True, eq=False)
class TokenSet:
    """
    Normalized, immutable view of one text.

    segments:    kept tokens per clause, in reading order
    tokens:      all unigrams in reading order
    phrases:     2..max_ngram word phrases in reading order (with repeats)
    counts:      term -> occurrences, for unigrams and phrases
    stem_counts: stem(term) -> occurrences
    positions:   term -> unigram index of its first occurrence
    """
    segments: Tuple[Tuple[str, ...], ...]
    tokens: Tuple[str, ...]
    phrases: Tuple[str, ...]
    counts: Mapping[str, int] = field(repr=False)
    stem_counts: Mapping[str, int] = field(repr=False)
    positions: Mapping[str, int] = field(repr=False)

    def __eq__(self, other):
        if not isinstance(other, TokenSet):
            return NotImplemented
        return self.segments == other.segments and self.phrases == other.phrases

    def __hash__(self):
        return hash((self.segments, self.phrases))

    def __contains__(self, term: str) -> bool:
        return self.match_count(term) > 0

    def __len__(self) -> int:
        return len(self.tokens)

    def count(self, term: str) -> int:
        """Exact occurrences of a normalized term."""
        return self.counts.get(term, 0)

    def match_count(self, term: str) -> int:
        """Occurrences of a term, falling back to its stemmed variants."""
        exact = self.counts.get(term, 0)
        if exact:
            return exact
        return self.stem_counts.get(stem(term), 0)

    def render(self) -> str:
        """Canonical text form; tokenizing it reproduces this TokenSet."""
        return '\n'.join(' '.join(segment) for segment in self.segments)


def _build(segments: Tuple[Tuple[str, ...], ...], max_ngram: int) -> TokenSet:
    tokens = []
    phrases = []
    counts: Dict[str, int] = {}
    positions: Dict[str, int] = {}

    for segment in segments:
        offset = len(tokens)
        for i, token in enumerate(segment):
            tokens.append(token)
            counts[token] = counts.get(token, 0) + 1
            positions.setdefault(token, offset + i)
            for n in range(2, max_ngram + 1):
                if i + n > len(segment):
                    break
                phrase = ' '.join(segment[i:i + n])
                phrases.append(phrase)
                counts[phrase] = counts.get(phrase, 0) + 1
                positions.setdefault(phrase, offset + i)

    stem_counts: Dict[str, int] = {}
    for term, occurrences in counts.items():
        key = stem(term)
        stem_counts[key] = stem_counts.get(key, 0) + occurrences

    return TokenSet(
        segments=segments,
        tokens=tuple(tokens),
        phrases=tuple(phrases),
        counts=MappingProxyType(counts),
        stem_counts=MappingProxyType(stem_counts),
        positions=MappingProxyType(positions),
    )


def tokenize(text: str, max_ngram: int = 3, stop_words: Iterable[str] = STOP_WORDS) -> TokenSet:
    """
    Tokenize text into a TokenSet.

    Deterministic: the same text, max_ngram and stop words always give an
    equal TokenSet, and tokenize(ts.render()) == ts.
    """
    if not isinstance(stop_words, frozenset):
        stop_words = frozenset(stop_words)
    segments = _split_clauses(text or '', stop_words)
    return _build(segments, max(1, max_ngram))


def normalize_term(term: str, stop_words: Iterable[str] = STOP_WORDS) -> str:
    """Normalize a reference term the same way text is tokenized ("Ruby on Rails" -> "ruby rails")."""
    if not isinstance(stop_words, frozenset):
        stop_words = frozenset(stop_words)
    segments = _split_clauses(term, stop_words)
    return ' '.join(token for segment in segments for token in segment)
