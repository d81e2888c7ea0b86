"""Small numeric and string helpers."""


def round_half_up(number: float) -> int:
    """Round a non-negative number to the nearest integer, halves going up."""
    return int(number + 0.5)


def strlen_space(text: str) -> int:
    """Length of text up to its first space, or the whole length."""
    position = text.find(" ")
    return len(text) if position == -1 else position


def index_last_char(text: str, ch: str) -> int:
    """Position of the last occurrence of ch in text, or -1 if absent."""
    return text.rfind(ch)