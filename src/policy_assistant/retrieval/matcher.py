"""
Lexical matcher - edit distance between two tokens.

Used for fuzzy matching so that a one-letter typo in a query term
("expence") still hits the document token ("expense").
"""


def levenshtein(a: str, b: str) -> int:
    """
    Return the Levenshtein distance between two strings.

    Counts the minimum number of single-character insertions, deletions
    or substitutions (unit cost each) needed to turn ``a`` into ``b``.

    Only two rows of the DP table are kept and the shorter string is used
    as the row dimension, so memory is O(min(len(a), len(b))).

    Examples:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("", "abc")
        3
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Inner dimension is the shorter string
    if len(a) > len(b):
        a, b = b, a

    previous_row = list(range(len(a) + 1))

    for i, b_char in enumerate(b, start=1):
        current_row = [i]
        for j, a_char in enumerate(a, start=1):
            deletion = previous_row[j] + 1
            insertion = current_row[j - 1] + 1
            substitution = previous_row[j - 1] + (0 if a_char == b_char else 1)
            current_row.append(min(deletion, insertion, substitution))
        previous_row = current_row

    return previous_row[-1]
