"""Unit tests for settings, exceptions and structured logging."""

import io
import json
import logging

from pydantic import ValidationError as PydanticValidationError
import pytest

from favorites_tracker.shared.config.settings import Settings, get_settings
from favorites_tracker.shared.core.exceptions import (
    AuthenticationError,
    ContainerFrozenError,
    ErrorKind,
    InjectedFaultError,
    NotConfiguredError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
    exception_to_dict,
    is_recoverable,
)
from favorites_tracker.shared.utils.logging import (
    ContextualFormatter,
    StructuredJSONFormatter,
    correlation_id_var,
    get_logger,
    log_context,
    setup_logging,
    user_id_var,
)


class TestSettings:
    def test_values_come_from_environment(self):
        settings = Settings()

        assert settings.ENVIRONMENT == "test"
        assert settings.is_testing
        assert settings.SUPABASE_URL == "https://test-project.supabase.co"
        assert settings.supabase_storage_url == "https://test-project.supabase.co/storage/v1"
        assert settings.MAX_IMAGE_SIZE_BYTES == 10 * 1024 * 1024

    def test_normalisation(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("SUPABASE_URL", "https://proj.supabase.co/")

        settings = Settings()

        assert settings.is_production
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_FORMAT == "json"
        assert settings.SUPABASE_URL == "https://proj.supabase.co"

    @pytest.mark.parametrize(
        "key, value",
        [
            ("ENVIRONMENT", "qa"),
            ("LOG_LEVEL", "loud"),
            ("LOG_FORMAT", "xml"),
            ("SUPABASE_URL", "proj.supabase.co"),
            ("MAX_IMAGE_SIZE_BYTES", "0"),
        ],
    )
    def test_invalid_values_are_rejected(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(PydanticValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestExceptions:
    @pytest.mark.parametrize(
        "error, kind",
        [
            (NotConfiguredError(capability="ItemRepository"), ErrorKind.NOT_CONFIGURED),
            (ContainerFrozenError("ItemRepository"), ErrorKind.NOT_CONFIGURED),
            (NotFoundError(resource_type="item", resource_id="i1"), ErrorKind.NOT_FOUND),
            (ValidationError(field="name"), ErrorKind.VALIDATION_FAILED),
            (AuthenticationError(), ErrorKind.UNAUTHORIZED),
            (ServiceUnavailableError(service="supabase"), ErrorKind.UNAVAILABLE),
            (InjectedFaultError(), ErrorKind.UNSPECIFIED),
        ],
    )
    def test_kinds(self, error, kind):
        assert error.kind is kind

    def test_only_wiring_bugs_are_unrecoverable(self):
        assert not is_recoverable(NotConfiguredError())
        assert is_recoverable(NotFoundError())
        assert is_recoverable(ServiceUnavailableError())
        assert not is_recoverable(RuntimeError("plain"))

    def test_to_dict(self):
        error = NotFoundError(
            message="Item i1 not found", resource_type="item", resource_id="i1", operation="update_item"
        )

        assert error.to_dict() == {
            "error": {
                "code": "NOT_FOUND",
                "kind": "not_found",
                "message": "Item i1 not found",
                "details": {"resource_id": "i1", "operation": "update_item", "resource_type": "item"},
            }
        }

    def test_exception_to_dict_for_plain_exception(self):
        result = exception_to_dict(KeyError("x"))

        assert result["error"]["code"] == "INTERNAL_ERROR"
        assert result["error"]["details"] == {"type": "KeyError"}


def make_record(logger_name: str, message: str, **extra_fields) -> logging.LogRecord:
    record = logging.LogRecord(logger_name, logging.INFO, __file__, 1, message, None, None)
    record.extra_fields = extra_fields
    return record


class TestLogging:
    def test_structured_logger_nests_extra_fields(self, caplog):
        caplog.set_level(logging.INFO)

        get_logger("favorites_tracker.tests").info("Item created", item_id="i1")

        record = caplog.records[-1]
        assert record.getMessage() == "Item created"
        assert record.extra_fields == {"item_id": "i1"}

    def test_get_logger_is_cached(self):
        assert get_logger("favorites_tracker.tests") is get_logger("favorites_tracker.tests")

    def test_log_repository_call_level_follows_outcome(self, caplog):
        caplog.set_level(logging.DEBUG)
        logger = get_logger("favorites_tracker.tests")

        logger.log_repository_call("InMemoryItemRepository", "get_items", 1.234)
        logger.log_repository_call("InMemoryItemRepository", "get_items", 2.0, outcome="not_found")

        success, failure = caplog.records[-2:]
        assert success.levelno == logging.DEBUG
        assert success.extra_fields["duration_ms"] == 1.23
        assert failure.levelno == logging.WARNING
        assert failure.extra_fields["outcome"] == "not_found"

    def test_log_context_binds_and_restores(self):
        with log_context(user_id="user-1") as context:
            assert user_id_var.get() == "user-1"
            assert correlation_id_var.get() == context["correlation_id"]

        assert user_id_var.get() == ""
        assert correlation_id_var.get() == ""

    def test_json_formatter_output(self):
        formatter = StructuredJSONFormatter()

        with log_context(user_id="user-1", correlation_id="corr-1"):
            output = formatter.format(make_record("favorites_tracker.tests", "hello", item_id="i1"))

        payload = json.loads(output)
        assert payload["message"] == "hello"
        assert payload["user_id"] == "user-1"
        assert payload["correlation_id"] == "corr-1"
        assert payload["service"] == "favorites-tracker"
        assert payload["extra"] == {"item_id": "i1"}

    def test_contextual_formatter_output(self):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(ContextualFormatter("%(service)s %(user_id)s %(message)s %(item_id)s"))

        with log_context(user_id="user-1"):
            handler.emit(make_record("favorites_tracker.tests", "hello", item_id="i1"))

        assert stream.getvalue().strip() == "favorites-tracker user-1 hello i1"

    def test_setup_logging_swaps_only_its_own_handlers(self, settings, tmp_path):
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        log_file = tmp_path / "logs" / "app.log"

        try:
            setup_logging(settings, log_format="json", log_file=str(log_file), enable_console=False, force=True)
            setup_logging(settings, log_format="text", log_file=str(log_file), enable_console=False, force=True)

            ours = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
            assert len(ours) == 1
            assert isinstance(ours[0].formatter, ContextualFormatter)
            assert foreign in root.handlers
            assert log_file.parent.is_dir()
        finally:
            root.removeHandler(foreign)
            for handler in [h for h in root.handlers if isinstance(h, logging.FileHandler)]:
                root.removeHandler(handler)
                handler.close()
