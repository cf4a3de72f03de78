import logging
import os
import pathlib

from hparams import HParams, add_config

import phonetic
from phonetic.environment import ALPHABET_DICTIONARY_PATH, SIMPLIFIED_DICTIONARY_PATH

logger = logging.getLogger(__name__)

# NOTE: These environment variables override the dictionaries shipped with the package.
ALPHABET_DICTIONARY_ENV = "PHONETIC_ALPHABET_DICTIONARY"
SIMPLIFIED_DICTIONARY_ENV = "PHONETIC_SIMPLIFIED_DICTIONARY"

# NOTE: Invalid byte sequences are replaced with a space, so, they split a line into more tokens
# rather than merging into a neighboring token.
DECODE_REPLACEMENT = " "


def configure():
    """Configure the dictionary sources."""
    alphabet_path = os.environ.get(ALPHABET_DICTIONARY_ENV, ALPHABET_DICTIONARY_PATH)
    alphabet_path = pathlib.Path(alphabet_path)
    simplified_path = os.environ.get(SIMPLIFIED_DICTIONARY_ENV, SIMPLIFIED_DICTIONARY_PATH)
    simplified_path = pathlib.Path(simplified_path)
    logger.info("Alphabet dictionary: %s", alphabet_path)
    logger.info("Simplified dictionary: %s", simplified_path)
    add_config(
        {
            phonetic.dictionary.load_dictionaries: HParams(
                alphabet_path=alphabet_path,
                simplified_path=simplified_path,
                replacement=DECODE_REPLACEMENT,
            )
        }
    )
