""" Convert text to its phonetic transcription from the command line.

Example:

      $ python -m phonetic "Hello world." --operation PairedLookup
"""
import json
import math

import typer

from phonetic._config import configure
from phonetic.dispatch import Operation, convert

app = typer.Typer(context_settings=dict(max_content_width=math.inf))


@app.command()
def main(
    text: str,
    operation: Operation = typer.Option(
        Operation.SENTENCE_LOOKUP, help="Respond with word pairs or only the pronunciations."
    ),
):
    """Print the phonetic transcription of TEXT as JSON."""
    configure()
    response = convert({"text": text, "operation": operation.value})
    typer.echo(json.dumps(response, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    app()
