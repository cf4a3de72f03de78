""" Run a web service that converts text to phonetic transcriptions.

The service has one endpoint, `POST /api/convert`, which accepts a JSON body like:

    {"text": "Hello world.", "operation": "PairedLookup"}

and responds with either every word paired with its pronunciation:

    {"kind": "paired", "pairs": [{"text": "Hello", "phonetic": "..."}, ...]}

or, for `"operation": "SentenceLookup"`, only the pronunciations:

    {"kind": "sentence", "words": ["...", ...]}

NOTE: The service is called directly from browsers on other origins; therefore, every response
allows any origin, and preflight `OPTIONS` requests are answered without a body.

Example (Flask):

      $ PYTHONPATH=. python -m phonetic.deploy.worker

Example (Gunicorn):

      $ gunicorn phonetic.deploy.worker:app --env='GUNICORN=1'
"""
import gc
import os
import typing

from flask import Flask, jsonify, request
from flask.wrappers import Response

from phonetic._config import configure
from phonetic.dictionary import get_dictionaries
from phonetic.dispatch import ConversionRequest, RequestDecodeError, dispatch
from phonetic.environment import set_basic_logging_config

if __name__ == "__main__" or os.environ.get("DEBUG") == "1":
    # NOTE: Incase this module is imported, don't run `set_basic_logging_config`.
    # NOTE: Flask documentation requests that logging is configured before `app` is created.
    set_basic_logging_config()

app = Flask(__name__)

MAX_CHARS = 10000
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


class FlaskException(Exception):
    """
    Inspired by http://flask.pocoo.org/docs/1.0/patterns/apierrors/

    Args:
        message
        status_code: An HTTP response status codes.
        code: A string code.
        payload: Additional context to send.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "BAD_REQUEST",
        payload: typing.Optional[typing.Dict] = None,
    ):
        super().__init__(self, message)
        self.message = message
        self.status_code = status_code
        self.payload = payload
        self.code = code

    def to_dict(self):
        response = dict(self.payload or ())
        response["message"] = self.message
        response["code"] = self.code
        app.logger.info("Responding with warning: %s", self.message)
        return response


@app.errorhandler(FlaskException)
def handle_invalid_usage(error: FlaskException):
    """Response for a `FlaskException`."""
    response = jsonify(error.to_dict())
    response.status_code = error.status_code
    return response


@app.before_request
def handle_preflight():
    """Respond to a CORS preflight request, on any route, with no content."""
    if request.method == "OPTIONS":
        return Response(status=204)
    return None


@app.after_request
def add_cors_headers(response: Response) -> Response:
    response.headers.update(CORS_HEADERS)
    return response


class RequestArgs(typing.TypedDict):
    text: str
    operation: str


def validate_and_unpack(
    request_args: RequestArgs, max_chars: int = MAX_CHARS
) -> ConversionRequest:
    """Validate and unpack the request object."""
    try:
        conversion_request = ConversionRequest.from_dict(request_args)
    except RequestDecodeError as error:
        raise FlaskException(str(error), code=error.code)

    if len(conversion_request.text) > max_chars:
        message = f"Text must be a string under {max_chars} characters."
        raise FlaskException(message, code="INVALID_TEXT_LENGTH_EXCEEDED")

    return conversion_request


@app.route("/healthy", methods=["GET"])
def healthy():
    return "ok"


@app.route("/api/convert", methods=["POST"])
def convert():
    """Convert `text` to its phonetic transcription, in the shape selected by `operation`.

    Usage:
        $ curl -X POST http://127.0.0.1:8000/api/convert -H "Content-Type: application/json"
            -d '{"text": "Hello world", "operation": "SentenceLookup"}'

    Returns: Response with status 200 and the converted text if the arguments are valid;
        Otherwise, returning a `FlaskException`.
    """
    request_args = request.get_json(silent=True)
    request_args = typing.cast(RequestArgs, request_args)
    conversion_request = validate_and_unpack(request_args)
    try:
        response = dispatch(conversion_request, get_dictionaries())
    except Exception:
        app.logger.exception("Unknown error text: %r", conversion_request.text)
        raise FlaskException("Unknown error.", status_code=500, code="UNKNOWN_ERROR")
    return jsonify(response.to_dict())


if __name__ == "__main__" or "GUNICORN" in os.environ:
    configure()

    # NOTE: The dictionaries are loaded before workers are forked, so they are shared between
    # processes, learn more:
    # https://github.com/benoitc/gunicorn/issues/2007
    dictionaries = get_dictionaries()
    app.logger.info("Alphabet dictionary words: %d", len(dictionaries.alphabet))
    app.logger.info("Simplified dictionary words: %d", len(dictionaries.simplified))

    # NOTE: In order to support copy-on-write, we freeze all the objects tracked by `gc`, learn
    # more:
    # https://docs.python.org/3/library/gc.html#gc.freeze
    # https://github.com/benoitc/gunicorn/issues/1640
    gc.freeze()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000, debug=True)
