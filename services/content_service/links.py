"""
Href and anchor-attribute rules for project, social and contact links.
"""

from typing import Dict, Optional

from services.content_service.models import Project, SocialLink, SocialPlatform

PLATFORM_LABELS = {
    SocialPlatform.GITHUB: "GitHub",
    SocialPlatform.LINKEDIN: "LinkedIn",
    SocialPlatform.EMAIL: "Email",
    SocialPlatform.TWITTER: "Twitter",
    SocialPlatform.INSTAGRAM: "Instagram",
}

PLATFORM_ICONS = {
    SocialPlatform.GITHUB: "🐙",
    SocialPlatform.LINKEDIN: "💼",
    SocialPlatform.EMAIL: "✉️",
    SocialPlatform.TWITTER: "🐦",
    SocialPlatform.INSTAGRAM: "📷",
}

NEW_TAB_REL = "noopener noreferrer"


def project_link(project: Project) -> Optional[str]:
    """
    Live demo URL, else repository URL, else None.

    A project with neither gets no link at all rather than a dead '#' anchor.
    """
    return project.live_url or project.repo_url or None


def social_link_attributes(link: SocialLink) -> Dict[str, str]:
    """Anchor attributes for a social link; email stays in the current tab"""
    attributes = {
        "href": link.url,
        "label": PLATFORM_LABELS[link.platform],
        "icon": PLATFORM_ICONS[link.platform],
    }
    if link.platform != SocialPlatform.EMAIL:
        attributes["target"] = "_blank"
        attributes["rel"] = NEW_TAB_REL
    return attributes


def mailto_href(email: str) -> str:
    return f"mailto:{email.strip()}"


def tel_href(phone: str) -> str:
    return "tel:" + "".join(phone.split())
