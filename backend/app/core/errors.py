# backend/app/core/errors.py


class DiaryError(Exception):
    """Base class for errors raised by the diary service."""


class InvalidDate(DiaryError):
    """The date is before 1900-01-01 or after the current date."""


class ExternalApiError(DiaryError):
    """A call to the weather or clock provider failed."""


class ProviderResponseError(ExternalApiError):
    """A provider answered, but its JSON did not have the expected shape."""
