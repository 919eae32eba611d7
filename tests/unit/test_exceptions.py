"""Unit tests for the monument_safezones exception hierarchy."""

from monument_safezones import lang
from monument_safezones.exceptions import (
    ArgumentError,
    ConfigError,
    ErrorSeverity,
    HostError,
    MissingHostError,
    OffsetSyntaxError,
    RadiusSyntaxError,
    RegistrationError,
    SafeZoneError,
    SizeOrRadiusConflictError,
    SizeSyntaxError,
    UnknownOptionError,
    UsageError,
    ValueSyntaxError,
)


class TestSafeZoneError:
    """Base exception and hierarchy."""

    def test_base_message(self):
        e = SafeZoneError("test message")
        assert e.message == "test message"
        assert str(e) == "[ERROR] test message"

    def test_details_in_str(self):
        e = SafeZoneError("oops", details={"key": "value"})
        assert str(e) == "[ERROR] oops (key=value)"

    def test_hierarchy(self):
        for cls in (OffsetSyntaxError, SizeSyntaxError, RadiusSyntaxError):
            assert issubclass(cls, ValueSyntaxError)
        for cls in (ValueSyntaxError, UsageError, UnknownOptionError, SizeOrRadiusConflictError):
            assert issubclass(cls, ArgumentError)
        for cls in (MissingHostError, RegistrationError):
            assert issubclass(cls, HostError)
        for cls in (ArgumentError, HostError, ConfigError):
            assert issubclass(cls, SafeZoneError)


class TestArgumentErrors:
    """Argument errors carry their lang entry and arguments."""

    def test_argument_errors_are_warnings(self):
        assert UnknownOptionError("x").severity == ErrorSeverity.WARNING
        assert SizeOrRadiusConflictError().severity == ErrorSeverity.WARNING

    def test_offset_syntax(self):
        e = OffsetSyntaxError("bad", "maspawn", "safezone")
        assert e.lang_entry is lang.ERROR_OFFSET_SYNTAX
        assert e.lang_args == ("bad", "maspawn", "safezone")
        assert e.details == {"option": "offset", "value": "bad"}

    def test_size_and_radius_entries(self):
        assert SizeSyntaxError("a", "b", "c").lang_entry is lang.ERROR_SIZE_SYNTAX
        assert RadiusSyntaxError("a", "b", "c").lang_entry is lang.ERROR_RADIUS_SYNTAX

    def test_usage(self):
        e = UsageError("maedit", "safezone")
        assert e.lang_entry is lang.GENERAL_SYNTAX
        assert e.lang_args == ("maedit", "safezone")

    def test_lang_args_fill_entry(self):
        e = UnknownOptionError("colour")
        text = e.lang_entry.format(e.lang_entry.english, *e.lang_args)
        assert text == "Error: Unrecognized option: 'colour'"


class TestHostErrors:

    def test_missing_host(self):
        e = MissingHostError()
        assert e.message == "MonumentAddons is not loaded, get it at https://umod.org"
        assert e.details["host"] == "MonumentAddons"

    def test_registration(self):
        e = RegistrationError(addon_name="safezone")
        assert e.message == "Error registering addon with Monument Addons."
        assert e.details == {"addon": "safezone"}


class TestConfigError:

    def test_not_recoverable(self):
        e = ConfigError("broken", path="/tmp/x.json")
        assert not e.recoverable
        assert e.severity == ErrorSeverity.CRITICAL
        assert "path=/tmp/x.json" in str(e)
