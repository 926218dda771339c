from functools import lru_cache


@lru_cache(maxsize=128)
def _pattern_bitmasks(term: str) -> dict[str, int]:
    bitmasks: dict[str, int] = {}
    for position, char in enumerate(term):
        bitmasks[char] = bitmasks.get(char, 0) | (1 << position)
    return bitmasks


def best_substring_distance(term: str, text: str) -> int:
    """
    Smallest Levenshtein distance between `term` and any substring of `text`, computed in one pass over `text`.

    This is the approximate substring DP whose first row is all zeros (a match may start anywhere), evaluated with
    Myers' bit-vector encoding: every column of the DP is held as two bit vectors of positive and negative vertical
    deltas, so each text character costs a constant number of integer operations.
    """
    bitmasks = _pattern_bitmasks(term)
    full_mask = (1 << len(term)) - 1
    last_row_bit = 1 << (len(term) - 1)

    positive_vertical = full_mask
    negative_vertical = 0
    distance = best_distance = len(term)

    for char in text:
        char_mask = bitmasks.get(char, 0)
        vertical_change = char_mask | negative_vertical
        horizontal_change = (((char_mask & positive_vertical) + positive_vertical) ^ positive_vertical) | char_mask
        positive_horizontal = negative_vertical | ~(horizontal_change | positive_vertical)
        negative_horizontal = positive_vertical & horizontal_change

        if positive_horizontal & last_row_bit:
            distance += 1
        elif negative_horizontal & last_row_bit:
            distance -= 1
            if distance < best_distance:
                best_distance = distance

        # no carry-in: the first DP row stays zero
        positive_horizontal = (positive_horizontal << 1) & full_mask
        negative_horizontal <<= 1
        positive_vertical = (negative_horizontal | ~(vertical_change | positive_horizontal)) & full_mask
        negative_vertical = positive_horizontal & vertical_change

    return best_distance


class ApproximateMatcher:
    """
    Location-insensitive approximate substring matcher.

    The score of a field is the smallest edit distance between the term and any substring of the field,
    divided by the term length (0 - perfect match). A field only matches when it shares a run of at least
    `min_match_char_length` consecutive characters with the term, so a single common letter is never enough.
    """

    def __init__(self, threshold: float = 0.5, min_match_char_length: int = 2) -> None:
        self._threshold = threshold
        self._min_match_char_length = min_match_char_length

    def _max_errors(self, term_length: int) -> int:
        return int(self._threshold * term_length)

    def _shares_character_run(self, term: str, text: str) -> bool:
        run_length = self._min_match_char_length
        return any(term[start : start + run_length] in text for start in range(len(term) - run_length + 1))

    def score(self, term: str, text: str) -> float | None:
        """Returns a score in [0, threshold] or None when the field does not match."""
        if len(term) < self._min_match_char_length or not text:
            return None

        if term in text:
            return 0.0

        max_errors = self._max_errors(len(term))
        if max_errors == 0 or not self._shares_character_run(term, text):
            return None

        distance = best_substring_distance(term, text)
        if distance > max_errors:
            return None

        return distance / len(term)
