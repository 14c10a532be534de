"""Structural email address checks."""

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def email_error(email: str | None) -> str | None:
    """Return a user-facing message when ``email`` is malformed, else None.

    Requires exactly one @, non-empty local and domain parts, a dotted domain,
    no consecutive dots, no whitespace and none of the forbidden characters.
    """
    if not email or not email.strip():
        return "Enter your email address."

    email = email.strip()
    invalid = "Enter a valid email address."

    if any(ch.isspace() for ch in email) or email.count("@") != 1:
        return invalid

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return invalid

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return invalid

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        return invalid

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return invalid

    if any(forbidden in email for forbidden in _FORBIDDEN):
        return invalid

    return None
