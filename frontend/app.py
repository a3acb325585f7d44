import streamlit as st
import pandas as pd

from magentest.chat import Conversation
from magentest.config import configure_logging, get_settings
from magentest.labels import LANGUAGE_NAMES
from magentest.models import ChatTurn, Language, Role, TestCaseResponse

# Configuration
configure_logging()
settings = get_settings()

st.set_page_config(page_title="MagenTest", page_icon="🤖", layout="centered")
st.markdown(
    """
    <style>
    div[data-testid="stDataFrame"] table {
        white-space: normal !important;
        word-break: break-word;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# One conversation per browser session
if "conversation" not in st.session_state:
    st.session_state["conversation"] = Conversation(settings=settings)
conversation: Conversation = st.session_state["conversation"]


def render_test_cases(data: TestCaseResponse, labels: dict):
    st.caption(labels["processed_in"].format(ms=data.tempo_processamento))

    for index, test_case in enumerate(data.casos, start=1):
        with st.container(border=True):
            st.markdown(f"`{labels['case'].format(number=index)}` **{test_case.titulo}**")
            st.markdown(f"**{labels['description']}** {test_case.descricao}")
            st.markdown(f"**{labels['expected_result']}** {test_case.resultado_esperado}")
            badges = f"`{test_case.tipo}`"
            if test_case.prioridade:
                badges += f" `{test_case.prioridade}`"
            st.markdown(badges)

    if data.casos:
        df = pd.DataFrame([case.model_dump() for case in data.casos])
        st.dataframe(df, use_container_width=True, hide_index=True)

    if data.resumo:
        st.info(f"**{labels['summary']}** {data.resumo}")

    with st.expander(labels["raw_json"]):
        st.json(data.model_dump(mode="json"))


def render_turn(turn: ChatTurn):
    labels = conversation.labels
    avatar = "👤" if turn.role is Role.USER else "🤖"
    with st.chat_message(turn.role.value, avatar=avatar):
        st.markdown(turn.content)
        if turn.error:
            st.error(turn.error, icon="⚠️")
        if turn.data is not None:
            render_test_cases(turn.data, labels)
        st.caption(turn.timestamp.strftime("%H:%M:%S"))


# Sidebar for Setup
with st.sidebar:
    st.header(conversation.labels["configuration"])
    languages = list(Language)
    selected = st.selectbox(
        conversation.labels["language"],
        languages,
        index=languages.index(conversation.language),
        format_func=lambda lang: LANGUAGE_NAMES[lang],
    )
    if selected is not conversation.language:
        conversation.set_language(selected)
        st.rerun()

    st.text_input("API", value=settings.api_base_url, disabled=True)
    st.caption(f"Encoding: {settings.request_encoding.value}")

labels = conversation.labels
st.title(f"🤖 {labels['title']}")

if not conversation.turns:
    st.info(labels["welcome"])

for turn in conversation.turns:
    render_turn(turn)

prompt = st.chat_input(labels["placeholder"])
if prompt:
    # Draw the user text before the blocking call; the stored turns are redrawn after rerun.
    if prompt.strip():
        with st.chat_message(Role.USER.value, avatar="👤"):
            st.markdown(prompt)
    with st.spinner(labels["generating"]):
        conversation.submit(prompt)
    st.rerun()
