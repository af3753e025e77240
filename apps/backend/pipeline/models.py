"""
Job posting data model.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_REQUIREMENTS = 5


@dataclass
class JobCandidate:
    """Raw plugin output. Any field may be empty."""
    company_name: str = ""
    job_title: str = ""
    job_description: str = ""
    location: str = ""
    salary: str = ""
    requirements: List[str] = field(default_factory=list)


class JobPostingRecord(BaseModel):
    """
    Final job posting returned to callers.

    Serialized with camelCase keys (companyName, jobTitle, ...). Immutable
    once built; the extractor guarantees company, title and description are
    never empty or placeholders.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    company_name: str = Field(min_length=1)
    job_title: str = Field(min_length=1)
    job_description: str = Field(min_length=1)
    location: str = ""
    salary: str = ""
    requirements: Tuple[str, ...] = Field(default=(), max_length=MAX_REQUIREMENTS)

    def to_dict(self) -> Dict:
        """Convert to the external JSON shape."""
        return self.model_dump(mode='json', by_alias=True)
