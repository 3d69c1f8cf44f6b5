"""Tests for the thumbnail editing session."""

from core.models import ImageData
from features.thumbnail_editor.session import ThumbnailEditorSession, thumbnail_filename
from features.thumbnail_editor.style import NO_STYLE_IMAGES_MESSAGE, style_prompt_fragment


def test_generate_commits_to_history(gateway, face_image):
    session = ThumbnailEditorSession()
    session.set_face_image(face_image)
    artifact = session.generate(gateway, "Learn Python", "python")
    assert session.current is artifact
    assert len(session.history) == 1
    assert not session.is_loading
    name, args = gateway.calls[0]
    assert name == "generate_thumbnail"
    assert args[2] is face_image


def test_edit_uses_current_and_commits(gateway):
    session = ThumbnailEditorSession()
    first = session.generate(gateway, "Learn Python", "python")
    edited = session.edit(gateway, "  make the text bigger ", "Learn Python")
    assert session.current is edited
    assert session.history.items == (first, edited)
    name, args = gateway.calls[-1]
    assert name == "edit_thumbnail"
    assert args[0] is first
    assert args[1] == "make the text bigger"


def test_edit_after_undo_discards_redo_branch(gateway):
    session = ThumbnailEditorSession()
    a = session.generate(gateway, "T", "t")
    b = session.edit(gateway, "one", "T")
    c = session.edit(gateway, "two", "T")
    assert session.undo() is b
    d = session.edit(gateway, "three", "T")
    assert session.history.items == (a, b, d)
    assert c not in session.history.items
    assert session.redo() is d


def test_generation_failure_sets_error_and_keeps_history(gateway):
    session = ThumbnailEditorSession()
    first = session.generate(gateway, "T", "t")
    gateway.fail.add("edit_thumbnail")
    assert session.edit(gateway, "x", "T") is None
    assert session.error
    assert not session.is_loading
    assert session.history.items == (first,)


def test_error_is_cleared_on_next_action(gateway):
    session = ThumbnailEditorSession()
    gateway.fail.add("generate_thumbnail")
    session.generate(gateway, "T", "t")
    assert session.error
    gateway.fail.clear()
    session.generate(gateway, "T", "t")
    assert session.error is None


def test_edit_requires_thumbnail_and_command(gateway):
    session = ThumbnailEditorSession()
    assert session.edit(gateway, "bigger", "T") is None
    assert session.error
    session.generate(gateway, "T", "t")
    assert session.edit(gateway, "   ", "T") is None
    assert session.error
    assert "edit_thumbnail" not in gateway.names()


def test_reentrant_trigger_is_ignored(gateway):
    session = ThumbnailEditorSession()
    nested = []
    original = gateway.generate_thumbnail

    def slow_generate(*args):
        nested.append(session.generate(gateway, "T", "t"))
        return original(*args)

    gateway.generate_thumbnail = slow_generate
    session.generate(gateway, "T", "t")
    assert nested == [None]
    assert len(session.history) == 1


def test_analyze_style_sets_prompt_for_generation(gateway):
    session = ThumbnailEditorSession()
    session.set_style_images([ImageData(base64="aGk=", name="ref.jpg")])
    style = session.analyze_style(gateway)
    assert style is gateway.style
    assert session.style_prompt == style_prompt_fragment(style)

    session.generate(gateway, "T", "t")
    _, args = gateway.calls[-1]
    assert args[3] == session.style_prompt
    assert "#FF0000 red, #FFFFFF white" in args[3]


def test_analyze_failure_keeps_previous_style(gateway):
    session = ThumbnailEditorSession()
    session.set_style_images([ImageData(base64="aGk=", name="ref.jpg")])
    style = session.analyze_style(gateway)
    prompt = session.style_prompt

    gateway.fail.add("analyze_style")
    assert session.analyze_style(gateway) is None
    assert session.error
    assert session.style is style
    assert session.style_prompt == prompt


def test_analyze_without_images_is_validation_error(gateway):
    session = ThumbnailEditorSession()
    assert session.analyze_style(gateway) is None
    assert session.error == NO_STYLE_IMAGES_MESSAGE
    assert gateway.calls == []


def test_set_style_images_replaces_batch_and_keeps_analyzed_style(gateway):
    session = ThumbnailEditorSession()
    session.set_style_images([ImageData(base64="aGk=", name=f"{i}.jpg") for i in range(3)])
    style = session.analyze_style(gateway)
    session.set_style_images([ImageData(base64="aGk=", name="2.jpg")])
    assert [img.name for img in session.style_images] == ["2.jpg"]
    assert session.style is style


def test_each_session_gets_its_own_widget_id():
    ids = {ThumbnailEditorSession().session_id for _ in range(50)}
    assert len(ids) == 50


def test_download_payload(gateway):
    session = ThumbnailEditorSession()
    assert session.download("Learn Python") is None
    artifact = session.generate(gateway, "Learn Python", "python")
    filename, data = session.download("Learn  Python Fast")
    assert filename == "learn_python_fast_thumbnail.png"
    assert data == artifact.to_bytes()


def test_thumbnail_filename():
    assert thumbnail_filename("My Great Video") == "my_great_video_thumbnail.png"
    assert thumbnail_filename("Tabs\tand\nlines") == "tabs_and_lines_thumbnail.png"
