"""Core building blocks: results, use cases and state containers."""

from clean_bloc.core.bloc import Bloc, Emitter, EventPolicy, Transition
from clean_bloc.core.errors import (
    BlocClosedError,
    CleanBlocError,
    EmitterClosedError,
    HandlerCancelledError,
    HandlerContractError,
)
from clean_bloc.core.failures import Failure, FailureCode
from clean_bloc.core.observer import BlocObserver, LoggingBlocObserver
from clean_bloc.core.result import Err, Ok, Result, fold
from clean_bloc.core.use_case import NoParams, UseCase

__all__ = [
    "Bloc",
    "BlocClosedError",
    "BlocObserver",
    "CleanBlocError",
    "Emitter",
    "EmitterClosedError",
    "Err",
    "EventPolicy",
    "Failure",
    "FailureCode",
    "HandlerCancelledError",
    "HandlerContractError",
    "LoggingBlocObserver",
    "NoParams",
    "Ok",
    "Result",
    "Transition",
    "UseCase",
    "fold",
]
