"""Brazilian taxpayer document and phone number checks.

CPF (individuals, 11 digits) and CNPJ (companies, 14 digits) both end in two
mod-11 check digits. Inputs may carry mask punctuation; only digits count.
"""

import re

_CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def digits_only(value: str | None) -> str:
    return re.sub(r"\D", "", value or "")


def _check_digit(digits: str, weights) -> int:
    remainder = sum(int(d) * w for d, w in zip(digits, weights, strict=False)) % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(cpf: str) -> bool:
    if len(cpf) != 11 or not cpf.isdigit() or len(set(cpf)) == 1:
        return False

    first = _check_digit(cpf[:9], range(10, 1, -1))
    if first != int(cpf[9]):
        return False

    second = _check_digit(cpf[:10], range(11, 1, -1))
    return second == int(cpf[10])


def is_valid_cnpj(cnpj: str) -> bool:
    if len(cnpj) != 14 or not cnpj.isdigit() or len(set(cnpj)) == 1:
        return False

    first = _check_digit(cnpj[:12], _CNPJ_FIRST_WEIGHTS)
    if first != int(cnpj[12]):
        return False

    second = _check_digit(cnpj[:13], _CNPJ_SECOND_WEIGHTS)
    return second == int(cnpj[13])


def tax_id_error(value: str | None) -> str | None:
    """Return the problem with a CPF/CNPJ, or None when it is valid."""
    digits = digits_only(value)
    if not digits:
        return "Enter your CPF or CNPJ."
    if len(digits) == 11:
        return None if is_valid_cpf(digits) else "Invalid CPF."
    if len(digits) == 14:
        return None if is_valid_cnpj(digits) else "Invalid CNPJ."
    return "Enter a valid CPF (11 digits) or CNPJ (14 digits)."


def phone_error(value: str | None) -> str | None:
    """Return the problem with a phone number, or None when it is valid."""
    digits = digits_only(value)
    if not digits:
        return "Enter a contact phone number."
    if len(digits) in (10, 11):
        return None
    return "Enter a valid phone number including the area code."
