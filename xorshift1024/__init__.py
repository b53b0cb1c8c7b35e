"""Seedable xorshift1024* generator with bias-free bounded sampling."""

from .bit_engine import Xorshift1024Star
from .entropy import CallableEntropySource, EntropySource, SystemEntropySource, acquire_seed_words
from .errors import EntropyUnavailableError, PRNGError, PreconditionError, ScriptExhaustedError
from .float_types import FLOAT32, FLOAT64, LONGDOUBLE, FloatType
from .int_types import INT8, INT16, INT32, INT64, INT128, UINT8, UINT16, UINT32, UINT64, UINT128, IntType
from .protocols import RandomSource
from .seeded_random import SeededRandom

__all__ = [
    "SeededRandom",
    "RandomSource",
    "Xorshift1024Star",
    "EntropySource",
    "SystemEntropySource",
    "CallableEntropySource",
    "acquire_seed_words",
    "PRNGError",
    "PreconditionError",
    "EntropyUnavailableError",
    "ScriptExhaustedError",
    "IntType",
    "FloatType",
    "INT8",
    "UINT8",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    "INT128",
    "UINT128",
    "FLOAT32",
    "FLOAT64",
    "LONGDOUBLE",
]
