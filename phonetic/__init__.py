# NOTE: Other `phonetic` modules import `utils` and `environment`; therefore, they need to be
# imported first.
from phonetic import utils  # isort: skip
from phonetic import environment  # isort: skip
from phonetic import dictionary, dispatch, text

# NOTE: `_config` configures every module, so it needs to be imported last.
from phonetic import _config  # isort: skip

# NOTE: `deploy` is not imported due to side-effects from the import.

__all__ = ["utils", "environment", "dictionary", "dispatch", "text", "_config"]
