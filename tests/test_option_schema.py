"""
Tests for the option schema.

Covers usage rendering and structural matching of raw arguments.
"""

import pytest

from tuic_server.domain.config import OPTION_SPECS, OptionMatchError, OptionSchema


class TestOptionSpecs:
    """Test cases for the declared flag table."""

    def test_declared_flags(self):
        """Test exactly the four flags are registered."""
        assert [spec.name for spec in OPTION_SPECS] == ["port", "token", "version", "help"]

    def test_required_and_value_flags(self):
        """Test required/value distinctions."""
        specs = {spec.name: spec for spec in OPTION_SPECS}

        assert specs["port"].required and specs["port"].takes_value
        assert specs["token"].required and specs["token"].takes_value
        assert not specs["version"].required and not specs["version"].takes_value
        assert not specs["help"].required and not specs["help"].takes_value

    def test_option_strings(self):
        """Test short and long forms of each flag."""
        assert [spec.option_strings for spec in OPTION_SPECS] == [
            ("-p", "--port"),
            ("-t", "--token"),
            ("-v", "--version"),
            ("-h", "--help"),
        ]


class TestUsage:
    """Test cases for usage rendering."""

    def setup_method(self):
        """Set up test fixtures."""
        self.schema = OptionSchema()

    def test_usage_mentions_every_flag(self):
        """Test usage contains all long forms."""
        usage = self.schema.usage("tuic-server")

        for flag in ("--port", "--token", "--version", "--help"):
            assert flag in usage

    def test_usage_invocation_line(self):
        """Test usage starts with the invocation line."""
        usage = self.schema.usage("/usr/local/bin/tuic-server")

        assert usage.splitlines()[0] == "Usage: /usr/local/bin/tuic-server [options]"

    def test_usage_default_program(self):
        """Test the default program name."""
        assert self.schema.usage().startswith("Usage: tuic-server [options]")

    def test_usage_layout(self):
        """Test the per-flag block."""
        lines = self.schema.usage("tuic-server").splitlines()

        assert lines[1:] == [
            "",
            "Options:",
            "    -p, --port SERVER_PORT",
            "                        Set the listening port(Required)",
            "    -t, --token TOKEN   Set the TUIC token for the authentication(Required)",
            "    -v, --version       Print the version",
            "    -h, --help          Print this help menu",
        ]

    def test_usage_is_deterministic(self):
        """Test repeated rendering is identical."""
        assert self.schema.usage("x") == self.schema.usage("x")
        assert OptionSchema().usage("x") == self.schema.usage("x")


class TestMatch:
    """Test cases for structural matching."""

    def setup_method(self):
        """Set up test fixtures."""
        self.schema = OptionSchema()

    def test_short_forms(self):
        """Test short flags with separate values."""
        outcome = self.schema.match(["-p", "443", "-t", "secret"])

        assert outcome.opt_str("port") == "443"
        assert outcome.opt_str("token") == "secret"
        assert outcome.free == ()

    def test_long_forms_with_attached_values(self):
        """Test --flag=value form."""
        outcome = self.schema.match(["--port=8443", "--token=a=b"])

        assert outcome.opt_str("port") == "8443"
        assert outcome.opt_str("token") == "a=b"

    def test_short_form_with_attached_value(self):
        """Test -pVALUE form."""
        outcome = self.schema.match(["-p443", "-tsecret"])

        assert outcome.opt_str("port") == "443"
        assert outcome.opt_str("token") == "secret"

    @pytest.mark.parametrize("value", ["-abc", "--abc", "-v", "--help", "-", "--"])
    def test_value_starting_with_dash(self, value):
        """Test a value flag takes the next argument even when it looks like a flag."""
        outcome = self.schema.match(["-p", "443", "-t", value])

        assert outcome.opt_str("token") == value
        assert not outcome.opt_present("version")
        assert not outcome.opt_present("help")
        assert outcome.free == ()

    def test_short_form_keeps_equals_sign(self):
        """Test -p=443 attaches the value '=443' verbatim."""
        outcome = self.schema.match(["-p=443", "-t=x"])

        assert outcome.opt_str("port") == "=443"
        assert outcome.opt_str("token") == "=x"

    def test_terminator_stops_value_folding(self):
        """Test flags after -- are left as free tokens."""
        outcome = self.schema.match(["-p", "443", "-t", "x", "--", "-t", "y"])

        assert outcome.opt_str("token") == "x"
        assert outcome.free == ("-t", "y")

    def test_boolean_flags(self):
        """Test boolean flags are present without values."""
        outcome = self.schema.match(["-v", "--help"])

        assert outcome.opt_present("version")
        assert outcome.opt_present("help")
        assert outcome.opt_str("version") is None
        assert not outcome.opt_present("port")

    def test_free_tokens_collected(self):
        """Test positional tokens are left over, not rejected."""
        outcome = self.schema.match(["-p", "443", "extra", "-t", "x", "more"])

        assert outcome.free == ("extra", "more")

    def test_missing_value(self):
        """Test a value flag at the end of the line."""
        with pytest.raises(OptionMatchError, match="expected one argument"):
            self.schema.match(["-t", "secret", "--port"])

    def test_unrecognized_flag(self):
        """Test unknown flags are rejected."""
        with pytest.raises(OptionMatchError, match="--verbose"):
            self.schema.match(["-p", "443", "--verbose"])

    def test_abbreviated_long_flag_rejected(self):
        """Test long forms must be spelled out."""
        with pytest.raises(OptionMatchError):
            self.schema.match(["--po", "443"])

    def test_repeated_flag(self):
        """Test a flag given twice."""
        with pytest.raises(OptionMatchError, match="more than once"):
            self.schema.match(["-p", "443", "--port", "8443"])

    def test_value_on_boolean_flag(self):
        """Test an attached value on a boolean flag."""
        with pytest.raises(OptionMatchError):
            self.schema.match(["--help=yes"])

    def test_match_does_not_check_required(self):
        """Test required presence is a separate step."""
        outcome = self.schema.match([])

        assert outcome.present == frozenset()


class TestCheckRequired:
    """Test cases for required flag enforcement."""

    def setup_method(self):
        """Set up test fixtures."""
        self.schema = OptionSchema()

    def test_all_present(self):
        """Test no error when both required flags are given."""
        self.schema.check_required(self.schema.match(["-p", "1", "-t", "x"]))

    def test_missing_flags_named(self):
        """Test the error names each missing flag."""
        with pytest.raises(OptionMatchError) as exc_info:
            self.schema.check_required(self.schema.match(["-v"]))

        assert "-p/--port" in str(exc_info.value)
        assert "-t/--token" in str(exc_info.value)

    def test_single_missing_flag(self):
        """Test only the absent flag is named."""
        with pytest.raises(OptionMatchError) as exc_info:
            self.schema.check_required(self.schema.match(["-p", "443"]))

        assert "-t/--token" in str(exc_info.value)
        assert "--port" not in str(exc_info.value)
