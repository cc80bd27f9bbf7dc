from brakeman_scan.domain.models import Category, Priority

_PRIORITY_BY_CONFIDENCE = {
    "High": Priority.HIGH,
    "Medium": Priority.NORMAL,
}

RESULT_SETS = ("warnings", "ignored_warnings")


def priority_from_confidence(confidence: str) -> Priority:
    # Case-sensitive; "Weak" and anything unrecognised map to LOW
    return _PRIORITY_BY_CONFIDENCE.get(confidence, Priority.LOW)


def category_for_result_set(result_set: str) -> Category:
    if result_set == "ignored_warnings":
        return Category.IGNORED
    return Category.GENERAL
