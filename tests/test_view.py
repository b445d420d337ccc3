from webhook_composer import EditState, SendStatus, derive_view, intents
from webhook_composer.reducer import apply


def run(state: EditState, *steps: intents.Intent) -> EditState:
    for intent in steps:
        state, _ = apply(state, intent)
    return state


class TestDeriveView:
    def test_blank_form(self) -> None:
        view = derive_view(EditState())

        assert view.avatar_url == ""
        assert view.username == ""
        assert view.embed_title == ""
        assert view.image_url == ""
        assert not view.show_embed_section
        assert not view.show_footer_inputs
        assert view.status == ""

    def test_sections_follow_toggles(self) -> None:
        state = run(
            EditState(),
            intents.SetHasEmbed(True),
            intents.SetAdvancedMode(True),
            intents.SetHasFooter(True),
            intents.ChangeFooterText("foot"),
            intents.SetHasImage(True),
            intents.ChangeImageUrl("http://img"),
        )

        view = derive_view(state)

        assert view.show_embed_section
        assert view.show_advanced_toggles
        assert view.show_footer_inputs
        assert view.show_image_input
        assert not view.show_thumbnail_input
        assert view.footer_text == "foot"
        assert view.footer_icon_url == ""
        assert view.image_url == "http://img"
        assert view.thumbnail_url == ""

    def test_status_line(self) -> None:
        assert derive_view(EditState(send_status=SendStatus.SUCCEEDED)).status == "Sent"
        failed = derive_view(EditState(send_status=SendStatus.FAILED, last_error="timeout"))
        assert failed.status == "Last send failed: timeout"
