import logging

from mojang_api.utils.logging_config import get_logger


class TestGetLogger:

    def test_named_under_package(self):
        assert get_logger("unit").name == "mojang_api.unit"

    def test_does_not_propagate_to_root(self):
        assert get_logger("unit").propagate is False

    def test_handlers_attached_once(self):
        first = get_logger("unit")
        count = len(first.handlers)

        second = get_logger("unit")

        assert second is first
        assert len(second.handlers) == count
        assert any(isinstance(h, logging.StreamHandler) for h in second.handlers)
