"""
Raw log text normalizer for the Intake context.

Turns pasted text into the trimmed, non-empty line list the segmenter scans.
Blank lines carry no information and never count toward block offsets.

Text pasted straight from a browser often carries rich-text leftovers
(non-breaking spaces, zero-width joiners) that keep timestamp lines from
matching. normalize_unicode() strips those when enabled in the parse config.
"""

import unicodedata

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space → space
    "\u202f": " ",  # narrow no-break space
    "\u2007": " ",  # figure space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes (smart quotes break the metadata JSON)
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def split_raw_lines(text: str) -> tuple[str, ...]:
    """
    Split raw text into trimmed, non-empty lines in input order.

    Splits on "\\n" only; trimming removes any trailing "\\r", so CRLF and LF
    input produce the same lines.

    Args:
        text: Pasted raw log text

    Returns:
        Immutable tuple of trimmed lines, blanks removed
    """
    return tuple(stripped for stripped in (line.strip() for line in text.split("\n")) if stripped)


def preprocess_raw_log(text: str, normalize: bool = False) -> tuple[str, ...]:
    """
    Preprocess pasted raw log text before segmentation.

    This is the main entry point for text normalization.

    Args:
        text: Pasted raw log text
        normalize: Apply normalize_unicode() first

    Returns:
        Tuple of trimmed, non-empty lines
    """
    if normalize:
        text = normalize_unicode(text)

    return split_raw_lines(text)
