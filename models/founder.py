"""Sub-structures extracted from composite spreadsheet cells."""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Founder:
    """A founder entry parsed from the 'Founders & LinkedIn URLs' cell."""
    name: Optional[str] = None
    linkedin: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {'name': self.name, 'linkedin': self.linkedin}


@dataclass(frozen=True)
class SocialLinks:
    """Social profile URLs parsed from the 'Social Media Links' cell."""
    linkedin: Optional[str] = None
    twitter: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.linkedin or self.twitter)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {'linkedin': self.linkedin, 'twitter': self.twitter}
