"""Text normalization and n-gram tokenization for categorization."""
import re
import unicodedata

TAG_RE = re.compile(r"<[^>]+>")
COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")
# ASCII-only, like a JavaScript \W: non-ASCII letters and digits separate words.
NON_WORD_RE = re.compile(r"\W+", re.ASCII)

NGRAM_JOIN = "_"
MAX_NGRAM = 3


def strip_accents(text: str) -> str:
    """Decompose characters (NFD) and drop combining diacritical marks."""
    return COMBINING_MARKS_RE.sub("", unicodedata.normalize("NFD", text))


def normalize_text(text: str | None) -> str:
    """Strip markup tags, lower-case and remove diacritics."""
    if not text:
        return ""
    return strip_accents(TAG_RE.sub("", text).lower())


def normalize_term(term: str) -> str:
    """Normalize a configured keyword into n-gram token form.

    "Artificial Intelligence" -> "artificial_intelligence", "self-care" ->
    "self_care". Any run of non-word characters becomes the join character,
    matching how `ngrams` glues consecutive words.
    """
    cleaned = strip_accents(term.lower().strip())
    return NON_WORD_RE.sub(NGRAM_JOIN, cleaned).strip(NGRAM_JOIN)


def tokenize(text: str) -> list[str]:
    """Split normalized text into words on runs of non-word characters."""
    return [w for w in NON_WORD_RE.split(text) if w]


def ngrams(words: list[str], max_n: int = MAX_NGRAM) -> dict[str, None]:
    """Return the distinct 1..max_n grams of words as an insertion-ordered set.

    A dict is used instead of a set so that iteration order follows the text,
    which keeps tie-breaking between equal scores reproducible across runs.
    """
    tokens: dict[str, None] = {}
    for i in range(len(words)):
        for n in range(1, max_n + 1):
            if i + n > len(words):
                break
            tokens[NGRAM_JOIN.join(words[i:i + n])] = None
    return tokens


def word_count(term: str) -> int:
    """Number of words in a normalized term."""
    return len(term.split(NGRAM_JOIN)) if term else 0
