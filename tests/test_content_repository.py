"""
Tests for content loading and display limits
"""

import json
import pytest
from pathlib import Path
from config.app_config import ContentConfig, DEFAULT_DATA_DIR
from services.content_service.content_repository import ContentRepository, ContentLoadError
from services.content_service.models import ProfileFields, SocialPlatform


PROFILE = {
    "name": "Alex Rivera",
    "location": "Cebu",
    "title": "Developer",
    "email": "alex@example.com",
    "goals": ["one", "two", "three", "four"],
    "socialLinks": [{"platform": "github", "url": "https://github.com/alex"}],
}


def write_content(directory: Path, **files):
    for name, data in files.items():
        (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def repository(tmp_path):
    write_content(
        tmp_path,
        profile=PROFILE,
        about={"experience": [
            {"role": "A", "organization": "X", "startDate": "2020-01-01", "endDate": "2021-01-01"},
            {"role": "B", "organization": "Y", "startDate": "2024-06-01", "endDate": None},
        ]},
        projects={"projects": [
            {"id": f"p{i}", "title": f"Project {i}", "featured": i == 2} for i in range(1, 9)
        ]},
        certifications={"certifications": [
            {"id": f"c{i}", "name": f"Cert {i}", "issuer": "Issuer"} for i in range(1, 8)
        ]},
        gallery={"images": [{"id": f"g{i}", "src": f"img{i}.jpg"} for i in range(1, 11)]},
        techstack={"categories": []},
    )
    return ContentRepository(data_dir=str(tmp_path), content_config=ContentConfig(data_dir=str(tmp_path)))


class TestContentRepository:
    """Test parsing and limits"""

    def test_profile_camel_case_keys(self, repository):
        profile = repository.profile()

        assert profile.name == "Alex Rivera"
        assert profile.social_links[0].platform == SocialPlatform.GITHUB

    def test_profile_fields(self, repository):
        assert repository.profile_fields() == ProfileFields(
            name="Alex Rivera", email="alex@example.com", location="Cebu", title="Developer"
        )

    def test_limits(self, repository):
        assert repository.display_goals() == ["one", "two", "three"]
        assert [p.id for p in repository.display_projects()] == [f"p{i}" for i in range(1, 7)]
        assert len(repository.display_certifications()) == 5
        assert len(repository.gallery_images()) == 8

    def test_featured_projects(self, repository):
        assert [p.id for p in repository.featured_projects()] == ["p2"]

    def test_experience_timeline_newest_first(self, repository):
        assert [e.role for e in repository.experience_timeline()] == ["B", "A"]
        assert [e.role for e in repository.about().experience] == ["A", "B"]

    def test_cached_after_first_read(self, repository, tmp_path):
        first = repository.profile()
        (tmp_path / "profile.json").unlink()

        assert repository.profile() is first

    def test_missing_file(self, tmp_path):
        repository = ContentRepository(data_dir=str(tmp_path), content_config=ContentConfig())

        with pytest.raises(ContentLoadError) as exc_info:
            repository.profile()

        assert exc_info.value.filename == "profile.json"
        assert "file not found" in str(exc_info.value)

    def test_malformed_json(self, tmp_path):
        (tmp_path / "gallery.json").write_text("{not json", encoding="utf-8")
        repository = ContentRepository(data_dir=str(tmp_path), content_config=ContentConfig())

        with pytest.raises(ContentLoadError, match="invalid JSON"):
            repository.gallery_images()

    def test_schema_violation(self, tmp_path):
        write_content(tmp_path, profile={"name": "No Email"})
        repository = ContentRepository(data_dir=str(tmp_path), content_config=ContentConfig())

        with pytest.raises(ContentLoadError, match="schema error"):
            repository.profile()

    def test_unknown_social_platform_rejected(self, tmp_path):
        profile = dict(PROFILE, socialLinks=[{"platform": "myspace", "url": "https://myspace.com"}])
        write_content(tmp_path, profile=profile)
        repository = ContentRepository(data_dir=str(tmp_path), content_config=ContentConfig())

        with pytest.raises(ContentLoadError):
            repository.profile()


class TestBundledContent:
    """The shipped data directory must load cleanly"""

    def test_load_all(self):
        repository = ContentRepository(data_dir=DEFAULT_DATA_DIR, content_config=ContentConfig())

        repository.load_all()

        assert repository.profile().email
        assert len(repository.display_projects()) <= 6
