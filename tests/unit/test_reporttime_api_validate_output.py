"""Unit tests for reporttime.api.validate_output."""

import pytest

from reporttime.api.config.cmd_version import cmd_version
from reporttime.api.validate_output import validate_output

pytestmark = pytest.mark.cli


def test_valid_output_is_returned():
    output = {"errors": [], "warnings": [], "version": "1.0"}
    assert validate_output(cmd_version, output) == output


def test_missing_field_rejected():
    with pytest.raises(ValueError, match="ConfigVersionOutput"):
        validate_output(cmd_version, {"errors": [], "warnings": []})


def test_unregistered_command_rejected():
    def cmd_missing():
        pass

    cmd_missing.__module__ = "reporttime.api.timing.cmd_missing"
    with pytest.raises(ValueError, match="No output schema registered for timing.missing"):
        validate_output(cmd_missing, {"errors": [], "warnings": []})
