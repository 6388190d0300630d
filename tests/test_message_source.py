"""Tests for loading and filtering device SMS exports."""

import json
import pytest
from datetime import datetime, UTC

from spendly.domain.errors import NotFoundError, ValidationError
from spendly.domain.message_source import (
    filter_bank_messages,
    is_bank_message,
    load_messages,
    message_from_dict,
)


class TestFilterBankMessages:
    """Tests for bank message filtering."""

    def test_keyword_in_body(self, make_message):
        message = make_message("Your A/C (***3766) has been debited BDT 100", address="+8801711")
        assert is_bank_message(message)

    def test_keyword_in_sender(self, make_message):
        message = make_message("Dear customer, visit our branch", address="BRAC-BANK")
        assert is_bank_message(message)

    def test_case_insensitive(self, make_message):
        assert is_bank_message(make_message("your balance is low", address="x"))

    def test_non_bank_message_dropped(self, make_message):
        messages = [
            make_message("Your internet pack expires tomorrow", id="1", address="GP"),
            make_message("Your A/C has been credited BDT 5.00", id="2", address="GP"),
        ]
        assert [m.id for m in filter_bank_messages(messages)] == ["2"]

    def test_bank_name_adds_keyword(self, make_message):
        """Test that the user's bank name recognises its own messages."""
        message = make_message("Your UCB Debit Card#5884 has been charged for BDT4,300.00", address="UCB")
        assert filter_bank_messages([message]) == []
        assert filter_bank_messages([message], bank_name="ucb") == [message]

    def test_blank_bank_name_ignored(self, make_message):
        message = make_message("hello", address="friend")
        assert filter_bank_messages([message], bank_name="  ") == []


class TestLoadMessages:
    """Tests for reading JSON exports."""

    def test_load_fixture(self, fixtures_dir):
        messages = load_messages(fixtures_dir / "messages.json")
        assert len(messages) == 7
        first = messages[0]
        assert first.id == "1"
        assert first.address == "UCB"
        assert first.received_at == datetime(2025, 5, 7, 14, 0, tzinfo=UTC)
        assert first.body.startswith("Your A/C (***3766)")

    def test_missing_file(self, tmp_path):
        with pytest.raises(NotFoundError):
            load_messages(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_messages(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "utf16.json"
        path.write_bytes(b"\xff\xfe[\x00]\x00")
        with pytest.raises(ValidationError, match="not valid UTF-8"):
            load_messages(path)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")
        with pytest.raises(ValidationError, match="array"):
            load_messages(path)

    def test_missing_body(self, tmp_path):
        path = tmp_path / "messages.json"
        path.write_text(json.dumps([{"id": 1, "date": 0}]), encoding="utf-8")
        with pytest.raises(ValidationError, match="Message #1: missing 'body'"):
            load_messages(path)


class TestMessageFromDict:
    """Tests for single export records."""

    def test_iso_date_and_missing_address(self):
        message = message_from_dict({"id": 7, "body": "hi", "date": "2025-05-07T20:00:00Z"})
        assert message.id == "7"
        assert message.address == ""
        assert message.received_at == datetime(2025, 5, 7, 20, 0, tzinfo=UTC)

    def test_invalid_date(self):
        with pytest.raises(ValidationError, match="Message #3"):
            message_from_dict({"id": 1, "body": "hi", "date": "soon"}, index=3)

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            message_from_dict(["id", "body"], index=1)
