from frontend.upload import OBJECT_URL_PREFIX, ObjectUrlRegistry, UploadedImage, UploadState


def make_image(name="test.png", mime="image/png", data=b"\x89PNG fake") -> UploadedImage:
    return UploadedImage(name=name, mime_type=mime, data=data)


def test_valid_file_creates_preview() -> None:
    state = UploadState()

    assert state.handle_file_select(make_image()) is True

    assert state.file.name == "test.png"
    assert state.preview.startswith(OBJECT_URL_PREFIX)
    assert state.preview_bytes() == b"\x89PNG fake"
    assert state.error is None


def test_new_file_replaces_preview_and_revokes_old() -> None:
    registry = ObjectUrlRegistry()
    state = UploadState(registry)
    state.handle_file_select(make_image("a.png"))
    old_preview = state.preview

    state.handle_file_select(make_image("b.webp", "image/webp", b"webp"))

    assert state.file.name == "b.webp"
    assert state.preview != old_preview
    assert old_preview not in registry
    assert len(registry) == 1


def test_valid_file_clears_previous_error() -> None:
    state = UploadState()
    state.handle_file_select(make_image("notes.txt", "text/plain"))
    assert state.error is not None

    state.handle_file_select(make_image())

    assert state.error is None
    assert state.file is not None


def test_invalid_file_keeps_previous_state() -> None:
    state = UploadState()
    state.handle_file_select(make_image())
    file, preview = state.file, state.preview

    assert state.handle_file_select(make_image("notes.txt", "text/plain")) is False

    assert "image" in state.error
    assert state.file is file
    assert state.preview == preview


def test_clear_revokes_preview() -> None:
    registry = ObjectUrlRegistry()
    state = UploadState(registry)
    state.handle_file_select(make_image())

    state.clear_file()

    assert state.file is None
    assert state.preview is None
    assert state.preview_bytes() is None
    assert len(registry) == 0


def test_revoke_is_idempotent() -> None:
    registry = ObjectUrlRegistry()
    url = registry.create(b"x", "image/png")

    registry.revoke(url)
    registry.revoke(url)

    assert registry.resolve(url) is None
