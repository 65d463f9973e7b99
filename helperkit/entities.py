"""HTML entity tables for accented Latin letters.

Two independent tables live here:

- ENTITIES_TO_LETTERS groups every entity spelling of a letter under its plain
  ASCII base letter, for stripping accents.
- ACCENTS_TO_ENTITIES maps each Portuguese accented character to exactly one
  entity, for converting text back and forth.
"""
from html.entities import codepoint2name


ENTITIES_TO_LETTERS: dict[str, tuple[str, ...]] = {
    "A": ("&Agrave;", "&Aacute;", "&Acirc;", "&Atilde;", "&Auml;", "&Aring;"),
    "a": ("&agrave;", "&aacute;", "&acirc;", "&atilde;", "&auml;", "&aring;"),
    "E": ("&Egrave;", "&Eacute;", "&Ecirc;", "&Euml;"),
    "e": ("&egrave;", "&eacute;", "&ecirc;", "&euml;"),
    "I": ("&Igrave;", "&Iacute;", "&Icirc;", "&Iuml;"),
    "i": ("&igrave;", "&iacute;", "&icirc;", "&iuml;"),
    "O": ("&Ograve;", "&Oacute;", "&Ocirc;", "&Otilde;", "&Ouml;"),
    "o": ("&ograve;", "&oacute;", "&ocirc;", "&otilde;", "&ouml;"),
    "U": ("&Ugrave;", "&Uacute;", "&Ucirc;", "&Uuml;"),
    "u": ("&ugrave;", "&uacute;", "&ucirc;", "&uuml;"),
    "C": ("&Ccedil;",),
    "c": ("&ccedil;",),
    "N": ("&Ntilde;",),
    "n": ("&ntilde;",),
    "Y": ("&Yacute;",),
    "y": ("&yacute;", "&yuml;"),
}

ACCENTS_TO_ENTITIES: dict[str, str] = {
    "á": "&aacute;", "ã": "&atilde;", "â": "&acirc;", "à": "&agrave;",
    "Á": "&Aacute;", "Ã": "&Atilde;", "Â": "&Acirc;", "À": "&Agrave;",
    "é": "&eacute;", "ê": "&ecirc;", "É": "&Eacute;", "Ê": "&Ecirc;",
    "í": "&iacute;", "Í": "&Iacute;",
    "ó": "&oacute;", "ô": "&ocirc;", "õ": "&otilde;",
    "Ó": "&Oacute;", "Ô": "&Ocirc;", "Õ": "&Otilde;",
    "ú": "&uacute;", "Ú": "&Uacute;",
    "ç": "&ccedil;", "Ç": "&Ccedil;",
}

ENTITIES_TO_ACCENTS: dict[str, str] = {v: k for k, v in ACCENTS_TO_ENTITIES.items()}

# Quotes stay as they are
_ENCODE_TABLE = {
    codepoint: f"&{name};"
    for codepoint, name in codepoint2name.items()
    if chr(codepoint) not in "\"'"
}


def encode_entities(text: str) -> str:
    """Replace every character that has a named HTML entity with that entity.

    Covers &, < and > as well as accented letters and symbols such as ß or ©.
    Double and single quotes are left untouched.

    Example:
        >>> encode_entities("Pão & <b>")
        'P&atilde;o &amp; &lt;b&gt;'
    """
    return text.translate(_ENCODE_TABLE)
