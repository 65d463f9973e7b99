"""helperkit: small helpers for dicts, lists and strings."""

from loguru import logger

from helperkit.arrays import (
    blacklist as blacklist,
    clear as clear,
    compare as compare,
    make_comparator as make_comparator,
    sort_by_key as sort_by_key,
    unset_by_value as unset_by_value,
    whitelist as whitelist,
)
from helperkit.equality import (
    is_empty as is_empty,
    loose_equals as loose_equals,
    strict_equals as strict_equals,
)
from helperkit.exceptions import (
    ConfigurationError as ConfigurationError,
    EncodingError as EncodingError,
    HelperKitError as HelperKitError,
)
from helperkit.text import (
    accents2entities as accents2entities,
    humanize as humanize,
    number_br2eng as number_br2eng,
    only_letters as only_letters,
    only_numbers as only_numbers,
    remove_accents as remove_accents,
    slugify as slugify,
    transliterate as transliterate,
)


__version__ = "0.1.0"

# Silent until the application calls helperkit.logging.configure_logging()
logger.disable("helperkit")
