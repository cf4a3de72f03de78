import pathlib
import typing

import pytest
from hparams import clear_config

import phonetic
from phonetic._config import configure
from phonetic.dictionary import Dictionaries

phonetic.environment.set_basic_logging_config()


@pytest.fixture(autouse=True)
def run_around_test():
    """Configure `phonetic`, and reset the configuration and the shared dictionaries after each
    test."""
    configure()
    yield
    clear_config()
    phonetic.dictionary.get_dictionaries.clear_cache()  # type: ignore


def write_dictionary(path: pathlib.Path, lines: typing.List[str]) -> pathlib.Path:
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def dictionaries(tmp_path: pathlib.Path) -> Dictionaries:
    """Small dictionaries where "hello" and "cat" are defined in both dictionaries."""
    alphabet = ["cat /kˈat/", "hello /həlˈəʊ/", "world /wˈɜːld/", "mr /mˈɪstə/"]
    simplified = ["cat k ae t", "hello HH AH L OW"]
    return Dictionaries.from_paths(
        write_dictionary(tmp_path / "alphabet.txt", alphabet),
        write_dictionary(tmp_path / "simplified.txt", simplified),
    )
