from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from backend.logging_config import configure_logging
from config.settings import settings
from frontend.generation import GenerationController, ERROR, LOADING, SUCCESS
from frontend.preview import build_preview_html
from frontend.upload import UploadedImage, UploadState
from frontend.validation import ALLOWED_FILE_TYPES

configure_logging()

PREVIEW_HEIGHT = 640


def current_upload(uploaded) -> Optional[UploadedImage]:
    """Đổi UploadedFile của Streamlit sang UploadedImage."""
    if uploaded is None:
        return None
    return UploadedImage(
        name=uploaded.name,
        mime_type=uploaded.type or "",
        data=uploaded.getvalue(),
    )


# ==========================
# Cấu hình
# ==========================
st.set_page_config(
    page_title="Figment",
    page_icon="🧩",
    layout="wide"
)

st.title("🧩 Figment")
st.caption("Design screenshot → React + TypeScript + Tailwind")

# ==========================
# State
# ==========================
if "upload" not in st.session_state:
    st.session_state["upload"] = UploadState()

if "generation" not in st.session_state:
    st.session_state["generation"] = GenerationController()

if "editor_code" not in st.session_state:
    st.session_state["editor_code"] = ""

if "last_upload_id" not in st.session_state:
    st.session_state["last_upload_id"] = None

upload: UploadState = st.session_state["upload"]
generation: GenerationController = st.session_state["generation"]

left, right = st.columns([2, 3])

# ==========================
# Upload + Generate
# ==========================
with left:
    st.subheader("1. Upload design")

    uploaded = st.file_uploader(
        "Drop a screenshot (png, jpg, webp · max 10MB)",
        # Không khoá theo đuôi file để validator tự báo lỗi đúng nội dung
        type=None,
        key="uploader",
    )

    if uploaded is None and st.session_state["last_upload_id"] is not None:
        # user bấm ✕ trên uploader
        upload.clear_file()
        st.session_state["last_upload_id"] = None
    elif uploaded is not None and uploaded.file_id != st.session_state["last_upload_id"]:
        st.session_state["last_upload_id"] = uploaded.file_id
        upload.handle_file_select(current_upload(uploaded))

    if upload.error:
        st.error(upload.error)

    preview_bytes = upload.preview_bytes()
    if preview_bytes:
        st.image(preview_bytes, caption=upload.file.name, use_container_width=True)
        if st.button("🗑️ Clear", use_container_width=True):
            upload.clear_file()
            st.rerun()

    st.subheader("2. Generate")

    prompt = st.text_area(
        "Extra instructions (optional)",
        placeholder="e.g. use a dark theme, make the header sticky",
        height=100,
    )

    can_generate = upload.file is not None and generation.status != LOADING
    if st.button("✨ Generate code", type="primary", disabled=not can_generate, use_container_width=True):
        with st.spinner("🤖 Gemini is reading your design..."):
            generation.generate_file(upload.file, prompt)
        if generation.status == SUCCESS:
            st.session_state["editor_code"] = generation.code

    if generation.status == SUCCESS:
        st.success("✅ Code generated")
    elif generation.status == ERROR:
        st.error(f"❌ {generation.error}")

    st.markdown("---")
    st.caption(f"Accepted: {', '.join(ALLOWED_FILE_TYPES)}")
    st.write("🔗 Backend:", settings.BACKEND_URL)

# ==========================
# Editor + Preview
# ==========================
with right:
    editor_tab, preview_tab = st.tabs(["📝 Code", "👀 Preview"])

    with editor_tab:
        st.text_area(
            "Component.tsx",
            key="editor_code",
            height=PREVIEW_HEIGHT,
            label_visibility="collapsed",
        )
        if st.session_state["editor_code"]:
            st.download_button(
                "⬇️ Download Component.tsx",
                data=st.session_state["editor_code"],
                file_name="Component.tsx",
                mime="text/plain",
            )

    with preview_tab:
        code = st.session_state["editor_code"]
        if code.strip():
            components.html(build_preview_html(code), height=PREVIEW_HEIGHT, scrolling=True)
        else:
            st.info("Upload a design and generate code to see the preview.")
