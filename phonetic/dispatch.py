import dataclasses
import enum
import logging
import typing

from phonetic.dictionary import Dictionaries
from phonetic.text import WordPair, resolve_pairs, resolve_sentence

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    """The response shape requested by the caller."""

    PAIRED_LOOKUP = "PairedLookup"
    SENTENCE_LOOKUP = "SentenceLookup"


class RequestDecodeError(ValueError):
    """The request could not be decoded into a `ConversionRequest`.

    Args:
        message
        code: A string code identifying the problem (e.g. "INVALID_OPERATION").
    """

    def __init__(self, message: str, code: str = "BAD_REQUEST"):
        super().__init__(message)
        self.code = code


@dataclasses.dataclass(frozen=True)
class ConversionRequest:
    """
    Args:
        text: The text to convert.
        operation: Whether to respond with word pairs or only the pronunciations.
    """

    text: str
    operation: Operation

    @classmethod
    def from_dict(cls, payload: typing.Any) -> "ConversionRequest":
        """Decode a boundary `payload` like `{"text": "Hello", "operation": "PairedLookup"}`.

        Raises:
            RequestDecodeError: If `payload` does not have that shape.
        """
        is_mapping = isinstance(payload, typing.Mapping)
        if not (is_mapping and "text" in payload and "operation" in payload):
            message = "Must call with keys `text` and `operation`."
            raise RequestDecodeError(message, code="MISSING_ARGUMENT")

        text = payload["text"]
        operation = payload["operation"]

        if not isinstance(text, str):
            raise RequestDecodeError("Text must be a string.", code="INVALID_TEXT")

        options = ", ".join(f"`{o.value}`" for o in Operation)
        if not isinstance(operation, str) or operation not in set(o.value for o in Operation):
            message = f"Operation must be one of {options}."
            raise RequestDecodeError(message, code="INVALID_OPERATION")

        return cls(text=text, operation=Operation(operation))


@dataclasses.dataclass(frozen=True)
class PairedResponse:
    """Every word in the request text along with its pronunciation."""

    pairs: typing.Tuple[WordPair, ...]
    kind: typing.ClassVar[str] = "paired"

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        return {"kind": self.kind, "pairs": [p._asdict() for p in self.pairs]}


@dataclasses.dataclass(frozen=True)
class SentenceResponse:
    """The pronunciation of every word in the request text."""

    words: typing.Tuple[str, ...]
    kind: typing.ClassVar[str] = "sentence"

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        return {"kind": self.kind, "words": list(self.words)}


ConversionResponse = typing.Union[PairedResponse, SentenceResponse]


def dispatch(
    request: ConversionRequest, dictionaries: typing.Optional[Dictionaries] = None
) -> ConversionResponse:
    """Convert `request.text` into the response shape selected by `request.operation`."""
    if Operation(request.operation) is Operation.PAIRED_LOOKUP:
        return PairedResponse(resolve_pairs(request.text, dictionaries))
    return SentenceResponse(resolve_sentence(request.text, dictionaries))


def convert(
    payload: typing.Any, dictionaries: typing.Optional[Dictionaries] = None
) -> typing.Dict[str, typing.Any]:
    """Decode `payload`, convert it, and encode the response.

    Raises:
        RequestDecodeError: If `payload` is malformed, in which case nothing is converted.
    """
    request = ConversionRequest.from_dict(payload)
    logger.debug("Converting %d character(s) with `%s`.", len(request.text), request.operation)
    return dispatch(request, dictionaries).to_dict()
