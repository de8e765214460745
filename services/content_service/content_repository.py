"""
Content repository - loads and caches the portfolio JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from config.app_config import ContentConfig, get_config
from services.content_service.models import (
    AboutData,
    Certification,
    CertificationsData,
    Experience,
    GalleryData,
    GalleryImage,
    Profile,
    ProfileFields,
    Project,
    ProjectsData,
    TechStackData,
)
from utils.date_formatting import sort_by_start_date_descending
from utils.logging_config import get_logger

M = TypeVar("M", bound=BaseModel)


class PortfolioError(Exception):
    """Base error for the portfolio application"""


class ContentLoadError(PortfolioError):
    """A content file is missing or does not match its schema"""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not load {filename}: {reason}")


class ContentRepository:
    """
    Read-only access to the portfolio content files.
    Each file is parsed and validated once, then served from cache.
    """

    FILES = {
        "profile": ("profile.json", Profile),
        "about": ("about.json", AboutData),
        "techstack": ("techstack.json", TechStackData),
        "projects": ("projects.json", ProjectsData),
        "certifications": ("certifications.json", CertificationsData),
        "gallery": ("gallery.json", GalleryData),
    }

    def __init__(self, data_dir: Optional[str] = None, content_config: Optional[ContentConfig] = None):
        self.logger = get_logger(__name__)
        self.config = content_config or get_config().content
        self.data_dir = Path(data_dir or self.config.data_dir)
        self._cache: Dict[str, BaseModel] = {}

    def _read(self, key: str, model: Type[M]) -> M:
        if key in self._cache:
            return self._cache[key]

        filename, _ = self.FILES[key]
        path = self.data_dir / filename
        try:
            raw: Any = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ContentLoadError(filename, "file not found")
        except json.JSONDecodeError as e:
            raise ContentLoadError(filename, f"invalid JSON ({e.msg} at line {e.lineno})")

        try:
            record = model.model_validate(raw)
        except ValidationError as e:
            raise ContentLoadError(filename, f"{e.error_count()} schema error(s)") from e

        self._cache[key] = record
        self.logger.debug(f"Loaded content file {filename}")
        return record

    def load_all(self):
        """Eagerly load every content file so errors surface at startup"""
        for key, (_, model) in self.FILES.items():
            self._read(key, model)

    def profile(self) -> Profile:
        return self._read("profile", Profile)

    def profile_fields(self) -> ProfileFields:
        return ProfileFields.from_profile(self.profile())

    def about(self) -> AboutData:
        return self._read("about", AboutData)

    def tech_stack(self) -> TechStackData:
        return self._read("techstack", TechStackData)

    def experience_timeline(self) -> List[Experience]:
        """About-section experience, most recent first"""
        return sort_by_start_date_descending(self.about().experience)

    def display_goals(self) -> List[str]:
        return self.profile().goals[:self.config.max_goals]

    def display_projects(self) -> List[Project]:
        return self._read("projects", ProjectsData).projects[:self.config.max_projects]

    def featured_projects(self) -> List[Project]:
        return [project for project in self.display_projects() if project.featured]

    def display_certifications(self) -> List[Certification]:
        certifications = self._read("certifications", CertificationsData).certifications
        return certifications[:self.config.max_certifications]

    def gallery_images(self) -> List[GalleryImage]:
        return self._read("gallery", GalleryData).images[:self.config.max_gallery_images]


# Global repository instance
_content_repository: Optional[ContentRepository] = None


def get_content_repository() -> ContentRepository:
    """Get the global content repository instance"""
    global _content_repository
    if _content_repository is None:
        _content_repository = ContentRepository()
    return _content_repository
