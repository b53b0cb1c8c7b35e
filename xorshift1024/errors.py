from __future__ import annotations

"""Exception hierarchy shared by the generator, samplers and entropy layer."""


class PRNGError(Exception):
    """Base class for every error raised by this package."""


class PreconditionError(PRNGError, ValueError):
    """A caller broke an operation's contract (bad bounds, malformed seed).

    These are programmer errors. Nothing in the package catches them; the
    offending value is never clamped or wrapped into range.
    """


class EntropyUnavailableError(PRNGError, RuntimeError):
    """The entropy source could not produce a usable seed."""


class ScriptExhaustedError(PRNGError, IndexError):
    """A scripted test source was asked for more values than it holds."""
