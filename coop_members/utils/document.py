"""문서 번호 정규화 유틸리티 모듈.

Document number normalization utility module.
Member documents (e.g. CPF "123.456.789-00") are stored digits only.
"""

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_document(document: str) -> str:
    """숫자가 아닌 문자를 모두 제거합니다 (Strip every non-digit character).

    Example:
        normalize_document("123.456.789-00")  # "12345678900"
    """
    return _NON_DIGITS.sub("", document)
