import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson.objectid import ObjectId

DEFAULT_NAME = "Your Name"
DEFAULT_EMAIL = "your@email.com"


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass
class UserRecord:
    """
    The single profile document behind the personal website.

    Nested collections hold whatever the web application later stores there
    (ObjectId references or embedded documents); the seeder only ever writes
    them empty.
    """

    name: str
    email: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    id: ObjectId = field(default_factory=ObjectId)
    skills: List[str] = field(default_factory=list)
    projects: List[Any] = field(default_factory=list)
    experiences: List[Any] = field(default_factory=list)
    certifications: List[Any] = field(default_factory=list)
    volunteer_experiences: List[Any] = field(default_factory=list)

    @classmethod
    def new_default(cls, now: Optional[datetime.datetime] = None) -> "UserRecord":
        # One clock reading so createdAt == updatedAt
        ts = now or _now()
        return cls(name=DEFAULT_NAME, email=DEFAULT_EMAIL, created_at=ts, updated_at=ts)

    def to_document(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "skills": list(self.skills),
            "projects": list(self.projects),
            "experiences": list(self.experiences),
            "certifications": list(self.certifications),
            "volunteerExperiences": list(self.volunteer_experiences),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "UserRecord":
        return cls(
            id=doc["_id"],
            name=doc.get("name", ""),
            email=doc.get("email", ""),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
            skills=list(doc.get("skills") or []),
            projects=list(doc.get("projects") or []),
            experiences=list(doc.get("experiences") or []),
            certifications=list(doc.get("certifications") or []),
            volunteer_experiences=list(doc.get("volunteerExperiences") or []),
        )
