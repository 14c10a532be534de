"""Display helpers for addresses and product copy."""

from storefront.constants import PRODUCT_SUMMARY_LENGTH

_ADDRESS_PARTS = ("street", "number", "district", "city", "complement")


def format_address(address) -> str:
    """Join the non-empty address parts with a comma."""
    if address is None:
        return ""
    parts = [getattr(address, name, None) for name in _ADDRESS_PARTS]
    return ", ".join(part.strip() for part in parts if part and part.strip())


def summarize(text: str | None, length: int = PRODUCT_SUMMARY_LENGTH) -> str:
    """Shorten text to `length` characters on a word boundary, adding an ellipsis."""
    if not text:
        return ""
    text = text.strip()
    if len(text) <= length:
        return text
    cut = text[:length]
    if " " in cut:
        cut = cut[: cut.rfind(" ")]
    return cut.rstrip(" ,.;:") + "..."
