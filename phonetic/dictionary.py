"""Load the pronunciation dictionaries used for phonetic lookups.

A dictionary source is plain text with one entry per line. The first whitespace-delimited token is
the word, and the remaining tokens are its pronunciation, for example:

    cat k ae t
    hello /həˈləʊ/

Two dictionaries are used:
- The "alphabet" dictionary, with broad phonetic alphabet (IPA) transcriptions.
- The "simplified" dictionary, with simplified pronunciations. It takes precedence during lookups.
"""
import logging
import pathlib
import types
import typing

from hparams import configurable

from phonetic.environment import ALPHABET_DICTIONARY_PATH, SIMPLIFIED_DICTIONARY_PATH
from phonetic.utils import cache_once, log_runtime, split_whitespace

logger = logging.getLogger(__name__)

Dictionary = typing.Mapping[str, str]

# NOTE: Decoding with `errors="replace"` substitutes invalid byte sequences with this character.
_REPLACEMENT_CHARACTER = "\ufffd"


def _parse_dictionary(text: str) -> typing.Tuple[typing.Dict[str, str], int]:
    """Parse `text` into a dictionary, and count the lines that have a word but no pronunciation.

    NOTE: If a word is defined multiple times, the last definition is kept.
    """
    dictionary: typing.Dict[str, str] = {}
    skipped = 0
    for line in text.split("\n"):
        tokens = split_whitespace(line)
        if len(tokens) < 2:
            skipped += len(tokens)
            continue
        dictionary[tokens[0].lower()] = " ".join(tokens[1:])
    return dictionary, skipped


def load_dictionary(data: bytes, replacement: str = " ") -> Dictionary:
    """Load a read-only dictionary mapping lowercase words to their pronunciation.

    NOTE: Dictionary sources may have encoding artifacts, so, invalid byte sequences are replaced
    with `replacement` instead of failing the load.

    Args:
        data: The raw dictionary source, encoded with UTF-8.
        replacement: The string that replaces invalid byte sequences.
    """
    text = data.decode("utf-8", errors="replace").replace(_REPLACEMENT_CHARACTER, replacement)
    dictionary, skipped = _parse_dictionary(text)
    if skipped > 0:
        logger.info("Skipped %d dictionary line(s) without a pronunciation.", skipped)
    return types.MappingProxyType(dictionary)


def load_dictionary_file(path: pathlib.Path, replacement: str = " ") -> Dictionary:
    """Load a dictionary from `path`, see `load_dictionary`."""
    dictionary = load_dictionary(pathlib.Path(path).read_bytes(), replacement)
    logger.info("Loaded %d word(s) from `%s`.", len(dictionary), path)
    return dictionary


class Dictionaries(typing.NamedTuple):
    """The dictionaries shared, read-only, by every phonetic lookup.

    Args:
        alphabet: Broad phonetic alphabet transcriptions, looked up second.
        simplified: Simplified pronunciations, looked up first.
    """

    alphabet: Dictionary
    simplified: Dictionary

    @classmethod
    @log_runtime
    def from_paths(
        cls,
        alphabet_path: pathlib.Path,
        simplified_path: pathlib.Path,
        replacement: str = " ",
    ) -> "Dictionaries":
        return cls(
            alphabet=load_dictionary_file(alphabet_path, replacement),
            simplified=load_dictionary_file(simplified_path, replacement),
        )


@configurable
def load_dictionaries(
    alphabet_path: pathlib.Path = ALPHABET_DICTIONARY_PATH,
    simplified_path: pathlib.Path = SIMPLIFIED_DICTIONARY_PATH,
    replacement: str = " ",
) -> Dictionaries:
    """Load the configured `Dictionaries`, or else the dictionaries shipped with the package."""
    return Dictionaries.from_paths(alphabet_path, simplified_path, replacement)


@cache_once
def get_dictionaries() -> Dictionaries:
    """Get the process-wide `Dictionaries`, loaded once on first use.

    NOTE: The dictionaries are never modified after they are loaded; therefore, they are read
    concurrently without a lock.
    """
    return load_dictionaries()
