"""Remove terminal colour codes from `tree -C` output."""

_ESC = "\x1b"


def strip_ansi(text: str) -> str:
    """Drop ANSI escape sequences, copying every other character through.

    An ESC followed by ``[`` starts a sequence that runs up to and including the
    first ASCII letter or ``~``. A lone ESC is dropped by itself. Applying this
    to already clean text returns it unchanged.
    """
    if _ESC not in text:
        return text

    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != _ESC:
            out.append(ch)
            i += 1
            continue

        i += 1
        if i < len(text) and text[i] == "[":
            i += 1
            while i < len(text):
                c = text[i]
                i += 1
                if (c.isascii() and c.isalpha()) or c == "~":
                    break
    return "".join(out)
