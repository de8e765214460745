"""
Content service - loads portfolio content and derives display data from it.
"""

from .models import (
    Profile,
    ProfileFields,
    SocialLink,
    SocialPlatform,
    Experience,
    Project,
    Certification,
    GalleryImage
)
from .content_repository import (
    ContentRepository,
    ContentLoadError,
    PortfolioError,
    get_content_repository
)
from .links import project_link, social_link_attributes, mailto_href, tel_href

__all__ = [
    'Profile',
    'ProfileFields',
    'SocialLink',
    'SocialPlatform',
    'Experience',
    'Project',
    'Certification',
    'GalleryImage',
    'ContentRepository',
    'ContentLoadError',
    'PortfolioError',
    'get_content_repository',
    'project_link',
    'social_link_attributes',
    'mailto_href',
    'tel_href'
]
