"""Text utilities: slugs, accents, digit and letter filters, number formats."""

import codecs
import re
import unicodedata

from loguru import logger
from pydantic import ValidationError

from helperkit.config import get_settings
from helperkit.entities import (
    ACCENTS_TO_ENTITIES,
    ENTITIES_TO_ACCENTS,
    ENTITIES_TO_LETTERS,
    encode_entities,
)
from helperkit.exceptions import ConfigurationError, EncodingError


_ENTITY_LETTERS = {
    entity: letter for letter, entities in ENTITIES_TO_LETTERS.items() for entity in entities
}
_ACCENT_ENTITY_PATTERN = re.compile("|".join(map(re.escape, _ENTITY_LETTERS)))
_ENTITY_ACCENT_PATTERN = re.compile("|".join(map(re.escape, ENTITIES_TO_ACCENTS)))
_ACCENT_TRANSLATION = str.maketrans(ACCENTS_TO_ENTITIES)

# Anything that is not a letter or a digit, underscore included
_SEPARATORS = re.compile(r"[\W_]+")
_UNWANTED = re.compile(r"[^-\w]+", re.ASCII)
_REPEATED_DASHES = re.compile(r"-{2,}")

_BR_TO_ENG = str.maketrans({",": ".", ".": ","})


def _default_encoding() -> str:
    """Read the configured input encoding, reporting a bad one as EncodingError."""
    try:
        return get_settings().input_encoding
    except ValidationError as e:
        bad = [err for err in e.errors() if err["loc"][:1] == ("input_encoding",)]
        if not bad:
            raise ConfigurationError(f"Invalid helperkit settings: {e}") from e
        encoding = str(bad[0]["input"])
        logger.debug("Configured input encoding is invalid", encoding=encoding)
        raise EncodingError(encoding) from e


def _decode(text: str | bytes, input_encoding: str | None) -> str:
    """Validate the encoding name and decode byte input with it."""
    encoding = input_encoding or _default_encoding()
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        logger.debug("Unknown input encoding", encoding=encoding)
        raise EncodingError(encoding) from e

    if isinstance(text, bytes):
        try:
            return text.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("Input is not valid for encoding", encoding=encoding, reason=e.reason)
            raise EncodingError(
                encoding, f"Input cannot be decoded as {encoding}: {e.reason}"
            ) from e
    return text


def transliterate(text: str | bytes, input_encoding: str | None = None) -> str:
    """Approximate text with ASCII characters.

    Accented letters lose their marks and compatibility characters are
    replaced by their plain form (e.g. "ﬁ" becomes "fi"). Characters with no
    ASCII approximation are dropped.

    Args:
        text: Text, or bytes encoded with input_encoding.
        input_encoding: Encoding name. Defaults to HELPERKIT_INPUT_ENCODING.

    Returns:
        ASCII-only text.

    Raises:
        EncodingError: If the encoding is unknown or the bytes do not decode.
    """
    decomposed = unicodedata.normalize("NFKD", _decode(text, input_encoding))
    return decomposed.encode("ascii", "ignore").decode("ascii")


def slugify(text: str | bytes, input_encoding: str | None = None) -> str:
    """Convert text to a URL-safe slug.

    Args:
        text: Input text to slugify.
        input_encoding: Encoding of the text. Defaults to HELPERKIT_INPUT_ENCODING.

    Returns:
        Lowercase ASCII slug with words separated by single dashes.

    Raises:
        EncodingError: If the encoding is unknown or the bytes do not decode.

    Example:
        >>> slugify("Olá, Mundo!")
        'ola-mundo'
    """
    slug = remove_accents(_decode(text, input_encoding))
    # Replace every run of non letters/digits with a dash
    slug = _SEPARATORS.sub("-", slug)
    slug = slug.strip("-")
    slug = transliterate(slug, input_encoding)
    slug = slug.lower()
    slug = _UNWANTED.sub("", slug)
    # Letters without an ASCII form were dropped, leaving dashes behind
    slug = _REPEATED_DASHES.sub("-", slug)
    return slug.strip("-")


def humanize(text: str) -> str:
    """Turn a key or constant name into readable text.

    Underscores become spaces and only the first letter is capitalized, so
    accents are not restored and acronyms end up lowercase.

    Example:
        >>> humanize("NOT_REGISTERED")
        'Not registered'
    """
    text = text.replace("_", " ").lower()
    return text[:1].upper() + text[1:]


def remove_accents(
    text: str | bytes,
    comes_with_entities: bool = True,
    input_encoding: str | None = None,
) -> str:
    """Replace accented-letter HTML entities with their base letters.

    Args:
        text: Text to clean.
        comes_with_entities: Whether accents in text are already written as
            HTML entities. When False, the text is entity-encoded first
            (quotes untouched), so other characters come back as entities too,
            e.g. "&" becomes "&amp;".
        input_encoding: Encoding of the text. Defaults to HELPERKIT_INPUT_ENCODING.

    Returns:
        The text with every known accent entity replaced. Unknown entities
        are left as they are.

    Raises:
        EncodingError: If the encoding is unknown or the bytes do not decode.
    """
    content = _decode(text, input_encoding)
    if not comes_with_entities:
        content = encode_entities(content)
    return _ACCENT_ENTITY_PATTERN.sub(lambda m: _ENTITY_LETTERS[m.group(0)], content)


def accents2entities(text: str, opposite: bool = False) -> str:
    """Swap accented characters for their HTML entities, or back with opposite=True."""
    if opposite:
        return _ENTITY_ACCENT_PATTERN.sub(lambda m: ENTITIES_TO_ACCENTS[m.group(0)], text)
    return text.translate(_ACCENT_TRANSLATION)


def only_numbers(text: str) -> str:
    """Return only the digits 0-9 from text."""
    return re.sub(r"[^0-9]", "", text)


def only_letters(text: str) -> str:
    """Return only the ASCII letters from text."""
    return re.sub(r"[^a-zA-Z]", "", text)


def number_br2eng(number: str) -> str:
    """Convert a Brazilian formatted number to English formatting.

    "1.234,56" becomes "1,234.56" and "12,5" becomes "12.5". Numbers that
    are already English ("1,234.56", "1234.56") or have no separator come
    back unchanged.
    """
    dot = number.find(".")
    comma = number.find(",")

    if comma == -1:  # none of both, or only a dot
        return number
    if dot == -1:  # only a comma
        return number.replace(",", ".")
    if dot > comma:
        return number
    return number.translate(_BR_TO_ENG)
