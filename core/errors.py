"""Exceptions raised while loading and looking up company records."""


class DirectoryError(Exception):
    """Base class for company directory failures."""


class SourceFetchError(DirectoryError):
    """The spreadsheet export could not be fetched."""


class SourceParseError(DirectoryError):
    """The spreadsheet export could not be parsed into records."""


class CompanyNotFoundError(DirectoryError):
    """No record matches the requested company name."""

    def __init__(self, name: str):
        super().__init__(f"Company not found: {name}")
        self.name = name
