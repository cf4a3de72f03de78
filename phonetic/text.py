import logging
import typing

from phonetic.dictionary import Dictionaries, get_dictionaries
from phonetic.utils import split_whitespace

logger = logging.getLogger(__name__)


class WordPair(typing.NamedTuple):
    """
    Args:
        text: The word as it appeared in the input, with its casing and punctuation.
        phonetic: The pronunciation of `text`, or `text` itself if it has none.
    """

    text: str
    phonetic: str


def normalize(word: str) -> str:
    """Get the dictionary key for `word` by lowercasing it and removing periods (e.g. "Mr." →
    "mr")."""
    return word.lower().replace(".", "")


def split_words(text: str) -> typing.List[str]:
    """Split `text` on runs of whitespace, ignoring leading and trailing whitespace."""
    return split_whitespace(text)


def resolve_word(word: str, dictionaries: typing.Optional[Dictionaries] = None) -> str:
    """Get the pronunciation of `word`.

    The simplified dictionary is searched first, and then the alphabet dictionary. If neither has
    the word, `word` is returned unchanged.

    Args:
        word: A word, which may have any casing and periods (e.g. "Hello.").
        dictionaries: The dictionaries to search, defaulting to `get_dictionaries`.
    """
    dictionaries = get_dictionaries() if dictionaries is None else dictionaries
    key = normalize(word)
    if key in dictionaries.simplified:
        return dictionaries.simplified[key]
    if key in dictionaries.alphabet:
        return dictionaries.alphabet[key]
    logger.debug("Unable to find pronunciation of '%s'.", word)
    return word


def resolve_pairs(
    text: str, dictionaries: typing.Optional[Dictionaries] = None
) -> typing.Tuple[WordPair, ...]:
    """Get every word in `text` along with its pronunciation, in order."""
    dictionaries = get_dictionaries() if dictionaries is None else dictionaries
    return tuple(WordPair(w, resolve_word(w, dictionaries)) for w in split_words(text))


def resolve_sentence(
    text: str, dictionaries: typing.Optional[Dictionaries] = None
) -> typing.Tuple[str, ...]:
    """Get the pronunciation of every word in `text`, in order."""
    dictionaries = get_dictionaries() if dictionaries is None else dictionaries
    return tuple(resolve_word(w, dictionaries) for w in split_words(text))
