"""Tests for the contract value models."""

from __future__ import annotations

import datetime as dt
import io
import json

import pytest
from pydantic import ValidationError

from cloudcore.contracts.access import AccessPermission, SignedAccessConfig
from cloudcore.contracts.auth import AccessToken, BearerAccessToken
from cloudcore.contracts.identity import IdentityType
from cloudcore.contracts.lookup import AddressResult, UrlShortenResult
from cloudcore.contracts.messaging import EntityMessageCount
from cloudcore.contracts.notification import (
    EmailAttachment,
    EmailMessage,
    EmailTemplateMessage,
    SmsLink,
    SmsMessage,
)
from cloudcore.contracts.storage import TransferEventType, TransferResult
from cloudcore.contracts.templates import TemplateResult
from tests.models import Address


class TestBearerAccessToken:
    def test_default_never_expires(self) -> None:
        token = BearerAccessToken(bearer_token="abc")
        assert not token.has_expired

    def test_past_expiry(self) -> None:
        token = BearerAccessToken(
            bearer_token="abc", expires=dt.datetime.now(dt.UTC) - dt.timedelta(seconds=1)
        )
        assert token.has_expired

    def test_naive_expiry_is_utc(self) -> None:
        token = BearerAccessToken(bearer_token="abc", expires=dt.datetime(2000, 1, 1))
        assert token.has_expired

    def test_satisfies_protocol(self) -> None:
        assert isinstance(BearerAccessToken(bearer_token="abc"), AccessToken)


class TestNotificationModels:
    def test_sms_full_content_without_links(self) -> None:
        assert SmsMessage(text="Hi").full_content == "Hi"

    def test_sms_full_content_with_links(self) -> None:
        sms = SmsMessage(
            to=["+4477"],
            text="Your order",
            links=[SmsLink(title="Track", link="https://t.example"), SmsLink(title="Help", link="h")],
        )
        assert sms.full_content == "Your order\nTrack: https://t.example\nHelp: h"

    @pytest.mark.parametrize(("title", "link"), [("", "x"), ("x", "  ")])
    def test_sms_link_requires_values(self, title: str, link: str) -> None:
        with pytest.raises(ValidationError):
            SmsLink(title=title, link=link)

    def test_template_object_json_from_model(self) -> None:
        message = EmailTemplateMessage(template_id="t1", template_object=Address(city="Belfast"))
        assert json.loads(message.template_object_as_json())["city"] == "Belfast"
        assert message.template_object_type() is Address

    def test_template_object_json_from_dict(self) -> None:
        message = EmailTemplateMessage(template_object={"when": dt.date(2020, 7, 31)})
        assert json.loads(message.template_object_as_json()) == {"when": "2020-07-31"}

    def test_template_object_unset(self) -> None:
        message = EmailTemplateMessage()
        assert message.template_object_as_json() == ""
        assert message.template_object_type() is None

    def test_attachment_holds_stream(self) -> None:
        attachment = EmailAttachment(
            name="a.pdf", content_type="application/pdf", content=io.BytesIO(b"%PDF")
        )
        email = EmailMessage(to=["a@example.org"], subject="s", attachments=[attachment])
        assert email.attachments[0].content.read() == b"%PDF"


class TestValueModels:
    def test_entity_message_count_unknown(self) -> None:
        counts = EntityMessageCount()
        assert counts.active_entity_count == -1
        assert counts.errored_entity_count == -1

    def test_signed_access_config(self) -> None:
        config = SignedAccessConfig(access_permissions=[1, 2])
        assert config.access_permissions == [AccessPermission.READ, AccessPermission.WRITE]
        assert config.access_expiry is None

    def test_transfer_result_is_frozen(self) -> None:
        result = TransferResult(bytes_transferred=10)
        with pytest.raises(ValidationError):
            result.bytes_transferred = 5

    def test_enum_values(self) -> None:
        assert IdentityType.ALL == -1
        assert TransferEventType("skipped") is TransferEventType.SKIPPED
        assert AccessPermission.UPDATE == 7

    def test_lookup_defaults(self) -> None:
        assert AddressResult(postcode="BT1").addresses == []
        assert UrlShortenResult(source_link="https://x").short_link is None

    def test_template_result_defaults(self) -> None:
        result = TemplateResult(template_id="invoice")
        assert not result.template_found
        assert result.template_keys == []
