"""
Content service data models for the portfolio JSON files.

Records are validated with pydantic on load. JSON keys are camelCase and map onto
snake_case attributes.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base for read-only content records"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SocialPlatform(str, Enum):
    LINKEDIN = "linkedin"
    GITHUB = "github"
    EMAIL = "email"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"


class SocialLink(ContentModel):
    platform: SocialPlatform
    url: str


class TimelineEntry(ContentModel):
    """Short experience bullet shown on the profile card"""
    id: str
    title: str
    description: str = ""
    year: int
    is_current: bool = False


class Profile(ContentModel):
    name: str
    verified: bool = False
    location: str = ""
    title: str = ""
    avatar: str = ""
    resume_url: str = ""
    email: str
    phone: str = ""
    messenger_url: str = ""
    bio: List[str] = Field(default_factory=list)
    experience: List[TimelineEntry] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    social_links: List[SocialLink] = Field(default_factory=list)


class Experience(ContentModel):
    role: str
    organization: str
    start_date: date
    end_date: Optional[date] = None
    description: str = ""


class Education(ContentModel):
    institution: str
    degree: str
    field: str = ""
    start_year: int
    end_year: Optional[int] = None


class AboutData(ContentModel):
    education: List[Education] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)


class Skill(ContentModel):
    name: str
    icon: str = ""


class SkillCategory(ContentModel):
    id: str
    name: str
    category: str = ""
    display_name: str = ""
    skills: List[Skill] = Field(default_factory=list)


class TechStackData(ContentModel):
    categories: List[SkillCategory] = Field(default_factory=list)


class Project(ContentModel):
    id: str
    title: str
    description: str = ""
    thumbnail: str = ""
    technologies: List[str] = Field(default_factory=list)
    live_url: Optional[str] = None
    repo_url: Optional[str] = None
    featured: bool = False


class ProjectsData(ContentModel):
    projects: List[Project] = Field(default_factory=list)


class Certification(ContentModel):
    id: str
    name: str
    issuer: str


class CertificationsData(ContentModel):
    certifications: List[Certification] = Field(default_factory=list)


class GalleryImage(ContentModel):
    id: str
    src: str
    alt: str = ""


class GalleryData(ContentModel):
    images: List[GalleryImage] = Field(default_factory=list)


@dataclass(frozen=True)
class ProfileFields:
    """Profile values that chat replies may reference"""
    name: str
    email: str
    location: str = ""
    title: str = ""

    @classmethod
    def from_profile(cls, profile: Profile) -> 'ProfileFields':
        return cls(
            name=profile.name,
            email=profile.email,
            location=profile.location,
            title=profile.title,
        )
