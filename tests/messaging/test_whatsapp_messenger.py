"""
Tests for message envelope building and sending.
"""

import pytest
from pydantic import ValidationError

from wacloud.core.exceptions import WhatsAppApiError
from wacloud.messaging.whatsapp.messenger.whatsapp_messenger import WhatsAppMessenger
from wacloud.messaging.whatsapp.models import (
    ActionObject,
    ComponentObject,
    ContactName,
    ContactObject,
    ContactPhone,
    CurrencyObject,
    InteractiveObject,
    InteractiveText,
    LanguageObject,
    LocationObject,
    MediaObject,
    MessageRequest,
    MessageType,
    ParameterObject,
    ReplyButton,
    ReplyButtonPayload,
    SectionObject,
    SectionRow,
    TemplateObject,
    TextObject,
)

SEND_RESPONSE = {
    "messaging_product": "whatsapp",
    "contacts": [{"input": "16505551234", "wa_id": "16505551234"}],
    "messages": [{"id": "wamid.HBgLMTY1MDUwNzY1MjAVAgARGBI5QTNDQTVCM0Q0Q0Q2RTY3RTcA"}],
}


@pytest.fixture
def messenger(client) -> WhatsAppMessenger:
    return WhatsAppMessenger(client)


class TestMessageRequest:
    def test_envelope_shape(self):
        request = MessageRequest(
            to="16505551234", type=MessageType.TEXT, content=TextObject(body="hi")
        )

        assert request.to_payload() == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": "16505551234",
            "type": "text",
            "text": {"body": "hi"},
        }

    @pytest.mark.parametrize(
        "message_type",
        [
            MessageType.IMAGE,
            MessageType.VIDEO,
            MessageType.AUDIO,
            MessageType.DOCUMENT,
            MessageType.STICKER,
        ],
    )
    def test_media_types_take_media_object(self, message_type):
        request = MessageRequest(
            to="1", type=message_type, content=MediaObject(id="1013859600285441")
        )

        payload = request.to_payload()

        assert payload["type"] == message_type.value
        assert payload[message_type.value] == {"id": "1013859600285441"}

    def test_mismatched_content_is_rejected(self):
        with pytest.raises(ValueError, match="MediaObject"):
            MessageRequest(to="1", type=MessageType.IMAGE, content=TextObject(body="x"))

    def test_contacts_require_a_list(self):
        contact = ContactObject(name=ContactName(formatted_name="Jane Doe"))

        with pytest.raises(ValueError):
            MessageRequest(to="1", type=MessageType.CONTACTS, content=contact)
        with pytest.raises(ValueError):
            MessageRequest(to="1", type=MessageType.CONTACTS, content=[])

    def test_dict_content_is_validated(self):
        request = MessageRequest(
            to="1", type=MessageType.LOCATION, content={"latitude": 1.5, "longitude": 2}
        )

        assert isinstance(request.content, LocationObject)

    def test_callback_data_length(self):
        with pytest.raises(ValidationError):
            MessageRequest(
                to="1",
                type=MessageType.TEXT,
                content=TextObject(body="x"),
                biz_opaque_callback_data="x" * 513,
            )


class TestContentModels:
    def test_media_needs_exactly_one_source(self):
        with pytest.raises(ValidationError):
            MediaObject()
        with pytest.raises(ValidationError):
            MediaObject(id="1", link="https://example.com/a.png")

    def test_interactive_button_requires_buttons(self):
        with pytest.raises(ValidationError):
            InteractiveObject(
                type="button", body=InteractiveText(text="Pick"), action=ActionObject()
            )

    def test_template_parameter_requires_its_value(self):
        with pytest.raises(ValidationError):
            ParameterObject(type="currency")

    def test_button_component_requires_sub_type_and_index(self):
        with pytest.raises(ValidationError):
            ComponentObject(type="button")


class TestSend:
    @pytest.mark.asyncio
    async def test_send_text(self, messenger, fake_session, make_response):
        fake_session.queue(make_response(json_body=SEND_RESPONSE))

        response = await messenger.send_text(
            "16505551234", "Check https://example.com", preview_url=True
        )

        assert response.message_id == SEND_RESPONSE["messages"][0]["id"]
        assert response.contacts[0].wa_id == "16505551234"
        assert fake_session.last_call["json"]["text"] == {
            "body": "Check https://example.com",
            "preview_url": True,
        }

    @pytest.mark.asyncio
    async def test_reply_and_callback_data(self, messenger, fake_session, make_response):
        fake_session.queue(make_response(json_body=SEND_RESPONSE))

        await messenger.send(
            "16505551234",
            "text",
            {"body": "thanks"},
            reply_to_message_id="wamid.ORIGINAL",
            biz_opaque_callback_data="ticket-7",
        )

        payload = fake_session.last_call["json"]
        assert payload["context"] == {"message_id": "wamid.ORIGINAL"}
        assert payload["biz_opaque_callback_data"] == "ticket-7"

    @pytest.mark.asyncio
    async def test_send_template(self, messenger, fake_session, make_response):
        fake_session.queue(make_response(json_body=SEND_RESPONSE))
        template = TemplateObject(
            name="order_update",
            language=LanguageObject(code="en_US"),
            components=[
                ComponentObject(
                    type="body",
                    parameters=[
                        ParameterObject(type="text", text="Jane"),
                        ParameterObject(
                            type="currency",
                            currency=CurrencyObject(
                                fallback_value="$100.99", code="USD", amount_1000=100990
                            ),
                        ),
                    ],
                )
            ],
        )

        await messenger.send_template("16505551234", template)

        payload = fake_session.last_call["json"]
        assert payload["type"] == "template"
        assert payload["template"] == {
            "name": "order_update",
            "language": {"code": "en_US", "policy": "deterministic"},
            "components": [
                {
                    "type": "body",
                    "parameters": [
                        {"type": "text", "text": "Jane"},
                        {
                            "type": "currency",
                            "currency": {
                                "fallback_value": "$100.99",
                                "code": "USD",
                                "amount_1000": 100990,
                            },
                        },
                    ],
                }
            ],
        }

    @pytest.mark.asyncio
    async def test_send_interactive_list(self, messenger, fake_session, make_response):
        fake_session.queue(make_response(json_body=SEND_RESPONSE))
        interactive = InteractiveObject(
            type="list",
            body=InteractiveText(text="Choose a slot"),
            action=ActionObject(
                button="Slots",
                sections=[
                    SectionObject(
                        title="Morning",
                        rows=[SectionRow(id="9am", title="9:00")],
                    )
                ],
            ),
        )

        await messenger.send_interactive("16505551234", interactive)

        sent = fake_session.last_call["json"]["interactive"]
        assert sent["type"] == "list"
        assert sent["action"]["sections"][0]["rows"] == [{"id": "9am", "title": "9:00"}]

    @pytest.mark.asyncio
    async def test_send_interactive_buttons(self, messenger, fake_session):
        interactive = InteractiveObject(
            type="button",
            body=InteractiveText(text="Confirm?"),
            action=ActionObject(
                buttons=[ReplyButton(reply=ReplyButtonPayload(id="yes", title="Yes"))]
            ),
        )

        await messenger.send_interactive("16505551234", interactive)

        buttons = fake_session.last_call["json"]["interactive"]["action"]["buttons"]
        assert buttons == [{"type": "reply", "reply": {"id": "yes", "title": "Yes"}}]

    @pytest.mark.asyncio
    async def test_send_contacts(self, messenger, fake_session):
        contacts = [
            ContactObject(
                name=ContactName(formatted_name="Jane Doe", first_name="Jane"),
                phones=[ContactPhone(phone="+1 650 555 1234", type="WORK")],
            )
        ]

        await messenger.send_contacts("16505551234", contacts)

        assert fake_session.last_call["json"]["contacts"] == [
            {
                "name": {"formatted_name": "Jane Doe", "first_name": "Jane"},
                "phones": [{"phone": "+1 650 555 1234", "type": "WORK"}],
            }
        ]

    @pytest.mark.asyncio
    async def test_send_media_location_and_reaction(self, messenger, fake_session):
        await messenger.send_image(
            "1", MediaObject(link="https://example.com/a.png", caption="A")
        )
        await messenger.send_document(
            "1", MediaObject(id="55", filename="invoice.pdf")
        )
        await messenger.send_location(
            "1", LocationObject(latitude=37.48, longitude=-122.14, name="HQ")
        )
        await messenger.send_reaction("1", "wamid.X", "\U0001f44d")

        image, document, location, reaction = (c["json"] for c in fake_session.calls)
        assert image["image"] == {"link": "https://example.com/a.png", "caption": "A"}
        assert document["document"] == {"id": "55", "filename": "invoice.pdf"}
        assert location["location"]["name"] == "HQ"
        assert reaction["reaction"] == {"message_id": "wamid.X", "emoji": "\U0001f44d"}

    @pytest.mark.asyncio
    async def test_mismatch_is_rejected_before_io(self, messenger, fake_session):
        with pytest.raises(ValueError):
            await messenger.send("1", MessageType.AUDIO, TextObject(body="x"))

        assert fake_session.calls == []

    @pytest.mark.asyncio
    async def test_unknown_type_is_rejected(self, messenger, fake_session):
        with pytest.raises(ValueError):
            await messenger.send("1", "hologram", {})

        assert fake_session.calls == []

    @pytest.mark.asyncio
    async def test_api_errors_are_reraised(self, messenger, fake_session, make_response):
        fake_session.queue(
            make_response(
                status=401,
                reason="Unauthorized",
                json_body={
                    "error": {
                        "message": "Error validating access token",
                        "type": "OAuthException",
                        "code": 190,
                    }
                },
            )
        )

        with pytest.raises(WhatsAppApiError) as exc_info:
            await messenger.send_text("1", "hi")

        assert exc_info.value.code == 190


class TestMarkAsRead:
    @pytest.mark.asyncio
    async def test_mark_as_read(self, messenger, fake_session, make_response):
        fake_session.queue(make_response(json_body={"success": True}))

        response = await messenger.mark_as_read("wamid.INBOUND")

        assert response.success is True
        assert fake_session.last_call["json"] == {
            "message_id": "wamid.INBOUND",
            "messaging_product": "whatsapp",
            "status": "read",
        }
