"""
Text utility functions.
Plain-text extraction from raw markup and an approximate Flesch Reading Ease score.
"""

import re

SCRIPT_BLOCK = re.compile(r'<script[^>]*>.*?</script>', re.IGNORECASE | re.DOTALL)
STYLE_BLOCK = re.compile(r'<style[^>]*>.*?</style>', re.IGNORECASE | re.DOTALL)
TAG = re.compile(r'<[^>]+>')
WHITESPACE = re.compile(r'\s+')
SENTENCE_BOUNDARY = re.compile(r'[.!?]+')
VOWEL_GROUP = re.compile(r'[aeiouAEIOU]+')

# Only these entities are decoded, in this order (so "&amp;lt;" ends up as "<")
HTML_ENTITIES = (
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
)


def extract_text(html: str) -> str:
    """
    Extract readable text from raw HTML.

    Script and style blocks are dropped, every other tag becomes a single space,
    a fixed set of entities is decoded and whitespace is collapsed.
    """
    if not html:
        return ""

    text = SCRIPT_BLOCK.sub('', html)
    text = STYLE_BLOCK.sub('', text)
    text = TAG.sub(' ', text)

    for entity, replacement in HTML_ENTITIES:
        text = text.replace(entity, replacement)

    return WHITESPACE.sub(' ', text).strip()


def split_words(text: str) -> list:
    return [word for word in WHITESPACE.split(text) if word]


def count_syllables(word: str) -> int:
    """Approximate syllables as vowel groups, with a minimum of one per word."""
    return len(VOWEL_GROUP.findall(word)) or 1


def calculate_readability(text: str) -> float:
    """
    Approximate Flesch Reading Ease of ``text``, clamped into [0, 100].

    Returns 0 when the text has no sentences or no words.
    """
    sentences = [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]
    words = split_words(text)

    if not sentences or not words:
        return 0.0

    syllables = sum(count_syllables(word) for word in words)

    avg_words_per_sentence = len(words) / len(sentences)
    avg_syllables_per_word = syllables / len(words)

    score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    return max(0.0, min(100.0, score))
