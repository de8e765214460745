import streamlit as st

from config.app_config import get_config
from services.content_service import ContentLoadError, get_content_repository
from services.ui_service.chat_widget import ChatWidget
from services.ui_service.portfolio_sections import PortfolioSections
from utils.logging_config import initialize_logging, get_logger, log_content_load

config = get_config()

st.set_page_config(
    page_title=config.ui.app_title,
    page_icon=config.ui.page_icon,
    layout=config.ui.layout,
)

# Initialize logging and error tracking
error_tracker = initialize_logging()
logger = get_logger(__name__)


def main_app():
    """Render the portfolio page"""
    repository = get_content_repository()

    try:
        with log_content_load(logger, "portfolio"):
            repository.load_all()
    except ContentLoadError as e:
        error_tracker.track_error(e, "content_loading", content_file=e.filename)
        st.error(f"Portfolio content is unavailable: {e}")
        return

    PortfolioSections(repository).render()

    profile = repository.profile()
    ChatWidget(repository.profile_fields(), avatar=profile.avatar).render()

    st.divider()
    st.caption(f"© {profile.name} · {config.ui.footer_text}")


main_app()
