"""clean-bloc.

Clean Architecture + Bloc building blocks for Python:
- `Result` values (`Ok` / `Err`) carrying a `Failure` description
- `UseCase` boundaries that never raise
- `Bloc` state containers driven by events
- an example user profile feature wired through an explicit container
"""

__version__ = "0.1.0"

from clean_bloc.config import AppSettings
from clean_bloc.core import Bloc, Err, EventPolicy, Failure, Ok, Result, UseCase

__all__ = [
    "__version__",
    "AppSettings",
    "Bloc",
    "Err",
    "EventPolicy",
    "Failure",
    "Ok",
    "Result",
    "UseCase",
]
