from typing import Optional


def round_half_up_ratio(numerator: int, denominator: int) -> int:
    """
    Round numerator / denominator to the nearest integer, halves going up.

    Works on integers so (80 + 85 + 90) / 3 never picks up float error, and
    2.5 rounds to 3 rather than to the even neighbour.
    """
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if numerator < 0:
        raise ValueError("numerator must not be negative")
    return (2 * numerator + denominator) // (2 * denominator)


def average_score(*scores: Optional[int]) -> Optional[int]:
    """Rounded mean of the scores, or None while any of them is missing."""
    if not scores or any(score is None for score in scores):
        return None
    return round_half_up_ratio(sum(scores), len(scores))


def percentage(correct: int, total: int) -> int:
    return round_half_up_ratio(100 * correct, total)
