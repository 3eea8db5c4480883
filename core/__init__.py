"""Core business logic modules."""
from core.errors import DirectoryError, SourceFetchError, SourceParseError, CompanyNotFoundError
from core.normalizer import RecordNormalizer

__all__ = [
    'DirectoryError',
    'SourceFetchError',
    'SourceParseError',
    'CompanyNotFoundError',
    'RecordNormalizer',
]
