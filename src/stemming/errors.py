"""
Error kinds raised by the stemming package.

All errors are deterministic functions of caller input, so nothing here is
retried. Each error also subclasses the builtin that best matches its
meaning, so callers that already catch ValueError/RuntimeError keep working.
"""


class StemmingError(Exception):
    """Base class for all stemming errors"""


class UnknownLanguageError(StemmingError, ValueError):
    """Non-empty language identifier with no entry in the alias table"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Language code {identifier} unknown")


class NullStemmerError(StemmingError, ValueError):
    """Exception list built around an absent stemmer"""

    def __init__(self, message: str = "No stemmer was supplied to NoStemListStemmer"):
        super().__init__(message)


class NoAlgorithmSelectedError(StemmingError, RuntimeError):
    """stem() called on a Stemmer built with the empty identifier"""

    def __init__(self):
        super().__init__(
            "No stemming algorithm selected - check Stemmer.is_available before calling stem()"
        )


class BackendUnavailableError(StemmingError, RuntimeError):
    """The library backing an algorithm variant cannot provide it"""

    def __init__(self, algorithm: str, reason: str = ""):
        self.algorithm = algorithm
        message = f"Stemming algorithm '{algorithm}' is not available"
        if reason:
            message += f": {reason}"
        super().__init__(message)
