class CaseClass:
    Lower = 'LOWER'
    Upper = 'UPPER'
    Capitalized = 'CAPITALIZED'
    Mixed = 'MIXED'


def case_class(word: str) -> str:
    """
    Classify the casing style of a word.

    :param word: The word to classify.
    :return: One of the ``CaseClass`` values.
    """
    if word == word.lower():
        return CaseClass.Lower
    if word == word.upper():
        return CaseClass.Upper
    if word[:1].isupper():
        return CaseClass.Capitalized
    return CaseClass.Mixed


def restore_case(original: str, transformed: str) -> str:
    """
    Apply the casing style of ``original`` to ``transformed``.

    :param original: The word whose casing is used as reference.
    :param transformed: The word to recase.
    :return: ``transformed`` recased like ``original``, or ``original`` itself when
             ``transformed`` is empty.

    Mixed casing (``iPhone``) can't be mapped character by character onto a
    different word, so it falls back to lowercase.
    """
    if not transformed:
        return original

    style = case_class(original)
    if style == CaseClass.Upper:
        return transformed.upper()
    if style == CaseClass.Capitalized:
        return transformed[0].upper() + transformed[1:].lower()
    return transformed.lower()
