class CurrencyException(Exception):
    pass


class UpstreamUnavailable(CurrencyException):
    """The rate source failed: network, HTTP status or malformed body."""


class RatesFetchFailed(CurrencyException):
    pass


class CurrenciesFetchFailed(CurrencyException):
    pass


class CacheError(CurrencyException):
    pass


class CacheWriteRejected(CacheError):
    pass
