import re

UNITS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6, "seven": 7,
    "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
}
TENS = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}
# Lakh and crore are common in rupee amounts
SCALES = {
    "thousand": 1_000,
    "lakh": 100_000,
    "lakhs": 100_000,
    "million": 1_000_000,
    "crore": 10_000_000,
    "crores": 10_000_000,
}
HUNDRED = "hundred"

NUMBER_WORDS = frozenset(UNITS) | frozenset(TENS) | frozenset(SCALES) | {HUNDRED}

_WORD_RE = re.compile(r"[a-z]+")


def _combine(words: list[str]) -> int:
    total = 0
    current = 0
    for word in words:
        if word in UNITS:
            current += UNITS[word]
        elif word in TENS:
            current += TENS[word]
        elif word == HUNDRED:
            current = (current or 1) * 100
        else:
            total += (current or 1) * SCALES[word]
            current = 0
    return total + current


def find_spelled_number(text: str) -> int | None:
    """
    Find the first run of English number words in ``text`` and return its value.

    "two hundred and fifty" -> 250, "one thousand five hundred" -> 1500.
    Hyphenated forms ("twenty-five") work because words are split on any
    non-letter. Only whole words count, so "someone" is not "one".
    """
    words = _WORD_RE.findall(text.lower())
    run: list[str] = []
    for index, word in enumerate(words):
        if word in NUMBER_WORDS:
            run.append(word)
            continue
        # "and" only continues a run that is followed by another number word
        if run and word == "and" and index + 1 < len(words) and words[index + 1] in NUMBER_WORDS:
            continue
        if run:
            break
    if not run:
        return None
    return _combine(run)
