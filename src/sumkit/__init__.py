"""sumkit: immutable Option, Either, Result, Try and Tuple types for Python 3.13+.

Flat imports (preferred):
    from sumkit import Option, Some, Nothing, Result, Ok, Err, try_of

Submodule imports (for organization):
    from sumkit.option import Some, Nothing, Option
    from sumkit.either import Left, Right, Either
    from sumkit.result import Ok, Err, Result
    from sumkit.try_ import Success, Failure, Try
    from sumkit.tuples import Tuple3, tuple_of
"""

# Configuration
from sumkit._config import LogFormat, Settings, get_config, init

# Logging
from sumkit._logging import configure_logging, get_logger

# Decorators
from sumkit.decorators import optional, safe

# Either types
from sumkit.either import Either, Left, Right, left, right

# Errors
from sumkit.errors import InvalidArgumentError, SumkitError, UnwrapError

# Option types
from sumkit.option import Nothing, Option, Some, from_nullable, from_optional, nothing, some

# Result types
from sumkit.result import Err, Ok, Result, collect, err, ok

# Try types
from sumkit.try_ import Failure, Success, Try, failure, success, try_of, try_run

# Tuples
from sumkit.tuples import (
    Tuple,
    Tuple1,
    Tuple2,
    Tuple3,
    Tuple4,
    Tuple5,
    Tuple6,
    Tuple7,
    Tuple8,
    Tuple9,
    Tuple10,
    tuple_of,
)

# Unit
from sumkit.unit import UNIT, Unit

__all__ = [
    'UNIT',
    # Either types
    'Either',
    # Result types
    'Err',
    # Try types
    'Failure',
    # Errors
    'InvalidArgumentError',
    'Left',
    # Configuration
    'LogFormat',
    # Option types
    'Nothing',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Settings',
    'Some',
    'Success',
    'SumkitError',
    'Try',
    # Tuples
    'Tuple',
    'Tuple1',
    'Tuple2',
    'Tuple3',
    'Tuple4',
    'Tuple5',
    'Tuple6',
    'Tuple7',
    'Tuple8',
    'Tuple9',
    'Tuple10',
    # Unit
    'Unit',
    'UnwrapError',
    'collect',
    # Logging
    'configure_logging',
    'err',
    'failure',
    'from_nullable',
    'from_optional',
    'get_config',
    'get_logger',
    'init',
    'left',
    'nothing',
    'ok',
    # Decorators
    'optional',
    'right',
    'safe',
    'some',
    'success',
    'try_of',
    'try_run',
    'tuple_of',
]
