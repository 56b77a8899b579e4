from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Terminal cells occupied by text (wide glyphs count twice)."""
    total = 0
    for ch in text:
        w = wcwidth(ch)
        total += w if w > 0 else 0
    return total


def fit(text: str, width: int, ellipsis: str = "…") -> str:
    """Trim text to `width` cells and pad it with spaces to exactly that width."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text + " " * (width - display_width(text))
    limit = width - display_width(ellipsis)
    out = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > limit:
            break
        out.append(ch)
        used += w
    trimmed = "".join(out) + ellipsis
    return trimmed + " " * (width - display_width(trimmed))


__all__ = ["display_width", "fit"]
