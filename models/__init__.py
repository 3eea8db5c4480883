"""Business entity models."""
from models.company import CompanyRecord, NAME_FIELD
from models.founder import Founder, SocialLinks
from models.result import Loading, Failed, Ready, LoadResult

__all__ = [
    'CompanyRecord',
    'NAME_FIELD',
    'Founder',
    'SocialLinks',
    'Loading',
    'Failed',
    'Ready',
    'LoadResult',
]
