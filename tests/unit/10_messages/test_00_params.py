"""Tests for mapping a Message onto form parameters."""

from datetime import datetime, timezone

from mailgun_v3 import EmailAddress
from mailgun_v3 import messages
from mailgun_v3.messages import DeliveryTime, Header, Html, HtmlAndText, Message, Tag, Text


class TestMessageBody:
    """Each body variant populates its own keys."""

    def test_text(self):
        params = Message(body=Text("hello, world")).to_params()
        assert params["text"] == "hello, world"
        assert "html" not in params

    def test_html(self):
        params = Message(body=Html("<body>hello, world</body>")).to_params()
        assert params["html"] == "<body>hello, world</body>"
        assert "text" not in params

    def test_html_and_text(self):
        params = Message(body=HtmlAndText("<body/>", "hello")).to_params()
        assert params["html"] == "<body/>"
        assert params["text"] == "hello"

    def test_default_body_is_empty_text(self):
        params = Message().to_params()
        assert params["text"] == ""
        assert "html" not in params


class TestRecipients:
    """Recipient lists are rendered and comma-joined."""

    def test_to_and_cc(self):
        msg = Message(
            to=[EmailAddress("foo@bar.com")],
            cc=[EmailAddress("woo@woah.com", name="Tim"), EmailAddress("z@c.c")],
        )
        params = msg.to_params()

        assert params["to"] == "foo@bar.com"
        assert params["cc"] == "Tim <woo@woah.com>,z@c.c"

    def test_empty_lists_are_omitted(self):
        params = Message(to=[EmailAddress("foo@bar.com")]).to_params()
        assert "cc" not in params
        assert "bcc" not in params

    def test_order_is_preserved(self):
        msg = Message(bcc=[EmailAddress("b@x.com"), EmailAddress("a@x.com")])
        assert msg.to_params()["bcc"] == "b@x.com,a@x.com"


class TestSubject:
    def test_subject_always_present(self):
        assert Message().to_params()["subject"] == ""

    def test_subject_value(self):
        assert Message(subject="Hello").to_params()["subject"] == "Hello"


class TestSendOptions:
    """Each option writes one key; later duplicates win."""

    def test_all_options(self):
        msg = Message(options=[
            messages.TestMode(),
            DeliveryTime(datetime(1970, 1, 17, 13, 40, 48, tzinfo=timezone.utc)),
            Header("X-For", "Fizz"),
            Tag("Important"),
        ])
        params = msg.to_params()

        assert params["o:testmode"] == "yes"
        assert params["o:deliverytime"] == "Sat, 17 Jan 1970 13:40:48 +0000"
        assert params["h:X-For"] == "Fizz"
        assert params["o:tag"] == "Important"

    def test_naive_delivery_time_is_utc(self):
        msg = Message(options=[DeliveryTime(datetime(2015, 5, 15, 0, 0, 0))])
        assert msg.to_params()["o:deliverytime"] == "Fri, 15 May 2015 00:00:00 +0000"

    def test_last_duplicate_wins(self):
        msg = Message(options=[Tag("first"), Header("X-A", "1"), Tag("second"), Header("X-A", "2")])
        params = msg.to_params()

        assert params["o:tag"] == "second"
        assert params["h:X-A"] == "2"

    def test_distinct_headers_coexist(self):
        msg = Message(options=[Header("X-A", "1"), Header("X-B", "2")])
        params = msg.to_params()

        assert params["h:X-A"] == "1"
        assert params["h:X-B"] == "2"

    def test_no_options_no_option_keys(self):
        params = Message(subject="s", body=Text("t")).to_params()
        assert set(params) == {"subject", "text"}
