"""
Chat widget - Streamlit front for a ChatSession kept in session state.
"""

import streamlit as st
from typing import Optional

from config.app_config import get_config
from services.chat_service import ChatSession, ReplyMatcher, Sender
from services.content_service import ProfileFields
from utils.date_formatting import format_timestamp
from utils.logging_config import get_logger, log_chat_event

SESSION_KEY = "chat_session"


class ChatWidget:
    """
    Renders the chat toggle, history and input in the sidebar.
    The session survives Streamlit reruns but not a full page reload.
    """

    def __init__(self, profile: ProfileFields, avatar: str = ""):
        self.logger = get_logger(__name__)
        self.config = get_config()
        self.profile = profile
        self.avatar = avatar

    def get_session(self) -> ChatSession:
        """Get or create this visitor's chat session"""
        session: Optional[ChatSession] = st.session_state.get(SESSION_KEY)
        if session is None or session.is_disposed:
            session = ChatSession(
                matcher=ReplyMatcher(self.profile),
                reply_delay=self.config.chat.reply_delay_seconds,
            )
            st.session_state[SESSION_KEY] = session
            self.logger.info(f"Created chat session {session.session_id}")
        return session

    def reset_session(self):
        """Dispose the current session so the next render starts fresh"""
        session = st.session_state.pop(SESSION_KEY, None)
        if session is not None:
            session.dispose()

    def render(self):
        chat = self.config.chat
        session = self.get_session()

        with st.sidebar:
            label = "✖ Close chat" if session.is_open else f"💬 {chat.tooltip}"
            if st.button(label, key="chat_toggle", use_container_width=True):
                session.toggle()
                log_chat_event(self.logger, "opened" if session.is_open else "closed", session.session_id)
                st.rerun()

            if not session.is_open:
                return

            header = st.columns([1, 3, 1])
            with header[0]:
                if self.avatar:
                    st.image(self.avatar, width=40)
            with header[1]:
                st.markdown(f"**{self.profile.name}**  \n🟢 {chat.status_label}")
            with header[2]:
                if st.button("🗑", key="chat_clear", help="Clear chat", disabled=not session.messages):
                    self.reset_session()
                    self.get_session().open()
                    st.rerun()

            _render_history()

            text = st.chat_input(chat.input_placeholder, key="chat_input")
            if text is not None:
                session.send_user_message(text)
                st.rerun()


@st.fragment(run_every=1.0)
def _render_history():
    """Message list; re-runs on its own so delayed replies appear without input"""
    session: Optional[ChatSession] = st.session_state.get(SESSION_KEY)
    if session is None:
        return

    messages = session.messages
    if not messages:
        st.caption(get_config().chat.empty_state_text)
        return

    for message in messages:
        role = "user" if message.sender == Sender.USER else "assistant"
        with st.chat_message(role):
            st.markdown(message.content)
            st.caption(format_timestamp(message.timestamp))
