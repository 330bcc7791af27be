from typing import List

# (threshold, label), highest first
STRENGTH_LEVELS = (
    (80, "Very Strong"),
    (60, "Strong"),
    (40, "Medium"),
    (20, "Weak"),
    (0, "Very Weak"),
)


def strength_label(score: int) -> str:
    for threshold, label in STRENGTH_LEVELS:
        if score >= threshold:
            return label
    return STRENGTH_LEVELS[-1][1]


def describe(score: int) -> str:
    """Label with the raw score, e.g. ``Strong (70/100)``."""
    return f"{strength_label(score)} ({score}/100)"


def recommendations(score: int) -> List[str]:
    if score < 60:
        return [
            "Consider using a longer password (12+ characters)",
            "Include uppercase and lowercase letters",
            "Add numbers and special characters",
            "Avoid common words or patterns",
        ]
    if score < 80:
        return [
            "Your password is good, but could be stronger",
            "Consider adding more special characters",
            "Ensure it's not based on personal information",
        ]
    return [
        "Excellent password strength!",
        "Your password meets security best practices",
    ]
