"""klaw-try: Try[T] for capturing fallible computations in Python 3.13+.

Flat imports (preferred):
    from klaw_try import Try, Success, Failure, of, run, success, failure
    from klaw_try import Either, Left, Right, Option, Some, Nothing
    from klaw_try import safe, is_fatal, init

Submodule imports (for organization):
    from klaw_try.try_ import Try, of
    from klaw_try.interrupt import interrupt, interrupted
"""

from klaw_try._config import TryConfig, get_config, init
from klaw_try.decorators import safe
from klaw_try.either import Either, Left, Right
from klaw_try.errors import NoSuchElementError, NonFatalError, UnsupportedOperationError
from klaw_try.fatal import DEFAULT_FATAL, is_fatal
from klaw_try.interrupt import interrupt, interrupted, is_interrupted, raise_if_interrupted
from klaw_try.option import Nothing, NothingType, Option, Some
from klaw_try.try_ import (
    ExceptionKind,
    Failure,
    Success,
    Try,
    failure,
    of,
    run,
    sequence,
    success,
)

__all__ = [
    # Fatal classification
    'DEFAULT_FATAL',
    # Either
    'Either',
    # Try
    'ExceptionKind',
    'Failure',
    'Left',
    # Errors
    'NoSuchElementError',
    'NonFatalError',
    # Option
    'Nothing',
    'NothingType',
    'Option',
    'Right',
    'Some',
    'Success',
    'Try',
    # Config
    'TryConfig',
    'UnsupportedOperationError',
    'failure',
    'get_config',
    'init',
    # Interrupt flag
    'interrupt',
    'interrupted',
    'is_fatal',
    'is_interrupted',
    'of',
    'raise_if_interrupted',
    'run',
    # Decorators
    'safe',
    'sequence',
    'success',
]
