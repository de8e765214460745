"""
Portfolio sections - renders each content card of the page.
"""

import streamlit as st
from html import escape
from typing import Optional

from config.app_config import get_config
from services.content_service import (
    ContentRepository,
    get_content_repository,
    mailto_href,
    project_link,
    social_link_attributes,
    tel_href,
)
from services.form_service import ContactFormController, SubmissionStatus
from utils.date_formatting import format_duration
from utils.logging_config import get_logger

CONTACT_FORM_KEY = "contact_form_controller"


class PortfolioSections:
    """
    Service for the page body. Cards are laid out in a fixed grid and fed from
    the content repository.
    """

    def __init__(self, repository: Optional[ContentRepository] = None):
        self.logger = get_logger(__name__)
        self.config = get_config()
        self.repository = repository or get_content_repository()

    def render(self):
        self.render_profile_header()

        left, right = st.columns([2, 1])
        with left:
            self.render_about()
            self.render_tech_stack()
            self.render_projects()
        with right:
            self.render_experience_bullets()
            self.render_goals()
            self.render_certifications()
            self.render_social_links()

        self.render_gallery()
        self.render_contact()

    def render_profile_header(self):
        profile = self.repository.profile()
        cols = st.columns([1, 4])
        with cols[0]:
            if profile.avatar:
                st.image(profile.avatar, width=120)
        with cols[1]:
            badge = " ✅" if profile.verified else ""
            st.markdown(f"## {profile.name}{badge}")
            st.markdown(f"📍 {profile.location}  \n{profile.title}")
            links = []
            if profile.resume_url:
                links.append(f"[📄 Resume]({profile.resume_url})")
            links.append(f"[✉️ Send Email]({mailto_href(profile.email)})")
            if profile.messenger_url:
                links.append(f"[💬 Messenger]({profile.messenger_url})")
            st.markdown(" · ".join(links))

    def render_about(self):
        profile = self.repository.profile()
        with st.container(border=True):
            st.markdown("#### 👤 About")
            for paragraph in profile.bio:
                st.write(paragraph)

            timeline = self.repository.experience_timeline()
            if timeline:
                st.markdown("**Experience**")
                for entry in timeline:
                    st.markdown(
                        f"**{entry.role}** · {entry.organization}  \n"
                        f"_{format_duration(entry.start_date, entry.end_date)}_"
                    )
                    if entry.description:
                        st.caption(entry.description)

            education = self.repository.about().education
            if education:
                st.markdown("**Education**")
                for item in education:
                    end = item.end_year if item.end_year is not None else "Present"
                    st.markdown(f"{item.degree}, {item.field}  \n{item.institution} ({item.start_year} - {end})")

    def render_experience_bullets(self):
        entries = self.repository.profile().experience
        with st.container(border=True):
            st.markdown("#### 🧭 Experience")
            for entry in entries:
                marker = "🟢" if entry.is_current else "⚪"
                st.markdown(f"{marker} **{entry.title}** ({entry.year})")
                if entry.description:
                    st.caption(entry.description)

    def render_tech_stack(self):
        with st.container(border=True):
            st.markdown("#### 🛠️ Tech Stack")
            for category in self.repository.tech_stack().categories:
                names = " ".join(f"`{skill.name}`" for skill in category.skills)
                st.markdown(f"**{category.display_name or category.name}**  \n{names}")

    def render_projects(self):
        projects = self.repository.display_projects()
        with st.container(border=True):
            st.markdown("#### 🗂️ Recent Projects")
            cols = st.columns(2)
            for index, project in enumerate(projects):
                with cols[index % 2]:
                    st.markdown(f"**{project.title}**")
                    st.caption(project.description)
                    href = project_link(project)
                    if href:
                        st.markdown(f"[View Project →]({href})")

    def render_goals(self):
        with st.container(border=True):
            st.markdown("#### 🎯 Goals")
            for goal in self.repository.display_goals():
                st.markdown(f"- {goal}")

    def render_certifications(self):
        with st.container(border=True):
            st.markdown("#### 🏅 Certifications")
            for certification in self.repository.display_certifications():
                st.markdown(f"**{certification.name}**  \n{certification.issuer}")

    def render_social_links(self):
        profile = self.repository.profile()
        anchors = []
        for link in profile.social_links:
            attributes = social_link_attributes(link)
            target = f' target="{attributes["target"]}" rel="{attributes["rel"]}"' if "target" in attributes else ""
            anchors.append(
                f'<a href="{escape(attributes["href"], quote=True)}"{target} '
                f'aria-label="{attributes["label"]}">{attributes["icon"]} {attributes["label"]}</a>'
            )
        with st.container(border=True):
            st.markdown("#### 🔗 Social Links")
            st.markdown(" &nbsp; ".join(anchors), unsafe_allow_html=True)

    def render_gallery(self):
        images = self.repository.gallery_images()
        if not images:
            return
        with st.container(border=True):
            st.markdown("#### 📸 Gallery")
            cols = st.columns(4)
            for index, image in enumerate(images):
                with cols[index % 4]:
                    st.image(image.src, caption=image.alt or None, use_container_width=True)

    def render_contact(self):
        profile = self.repository.profile()
        if CONTACT_FORM_KEY not in st.session_state:
            st.session_state[CONTACT_FORM_KEY] = ContactFormController(rules=self.config.validation)
        controller: ContactFormController = st.session_state[CONTACT_FORM_KEY]

        with st.container(border=True):
            st.markdown("#### 📬 Get In Touch")
            st.markdown(f"[{profile.email}]({mailto_href(profile.email)})")
            if profile.phone:
                st.markdown(f"[{profile.phone}]({tel_href(profile.phone)})")

            if controller.state.status == SubmissionStatus.SUCCESS:
                st.success("Message Sent! Thank you for reaching out. I'll get back to you soon.")
                if st.button("Send Another Message"):
                    controller.reset()
                    st.rerun()
                return

            if controller.state.status == SubmissionStatus.ERROR:
                st.error(controller.state.error_message)

            values = controller.values
            with st.form("contact_form"):
                name = st.text_input("Name", value=values.name, placeholder="Your name")
                email = st.text_input("Email", value=values.email, placeholder="your.email@example.com")
                message = st.text_area("Message", value=values.message, placeholder="Your message...")
                submitted = st.form_submit_button("Send Message")

            if submitted:
                validation = controller.submit({"name": name, "email": email, "message": message})
                for field_error in validation.errors.to_dict().values():
                    if field_error:
                        st.error(field_error)
                if validation.is_valid:
                    st.rerun()
