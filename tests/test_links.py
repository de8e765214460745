"""
Tests for link href and attribute rules
"""

import pytest
from services.content_service.links import (
    project_link,
    social_link_attributes,
    mailto_href,
    tel_href
)
from services.content_service.models import Project, SocialLink, SocialPlatform


def make_project(**urls):
    return Project(id="p1", title="Demo", **urls)


class TestProjectLink:
    """Test live/repo URL preference"""

    def test_prefers_live_url(self):
        assert project_link(make_project(live_url="https://live", repo_url="https://repo")) == "https://live"

    def test_falls_back_to_repo(self):
        assert project_link(make_project(repo_url="https://repo")) == "https://repo"

    def test_no_placeholder_anchor(self):
        assert project_link(make_project()) is None
        assert project_link(make_project(live_url="", repo_url="")) is None


class TestSocialLinkAttributes:
    """Test new-tab behaviour per platform"""

    @pytest.mark.parametrize("platform, label", [
        (SocialPlatform.GITHUB, "GitHub"),
        (SocialPlatform.LINKEDIN, "LinkedIn"),
        (SocialPlatform.TWITTER, "Twitter"),
        (SocialPlatform.INSTAGRAM, "Instagram"),
    ])
    def test_external_platforms_open_new_tab(self, platform, label):
        attributes = social_link_attributes(SocialLink(platform=platform, url="https://example.com"))

        assert attributes["label"] == label
        assert attributes["target"] == "_blank"
        assert attributes["rel"] == "noopener noreferrer"

    def test_email_stays_in_tab(self):
        attributes = social_link_attributes(SocialLink(platform="email", url="mailto:a@b.com"))

        assert attributes["href"] == "mailto:a@b.com"
        assert "target" not in attributes
        assert "rel" not in attributes


class TestContactHrefs:
    """Test mailto/tel construction"""

    def test_mailto(self):
        assert mailto_href(" a@b.com ") == "mailto:a@b.com"

    def test_tel_strips_spaces(self):
        assert tel_href("+63 912 345 6789") == "tel:+639123456789"
