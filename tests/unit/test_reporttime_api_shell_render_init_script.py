"""Unit tests for reporttime.api.shell.render_init_script and cmd_init."""

import pytest

from reporttime.api.config.ReportTimeConfig import ReportTimeConfig
from reporttime.api.shell.cmd_init import cmd_init
from reporttime.api.shell.render_init_script import default_executable, render_init_script
from tests.conftest import run_cmd

pytestmark = pytest.mark.shell

EXE = ["/opt/bin/reporttime"]


class TestRenderInitScript:
    def test_bash_hooks(self):
        script = render_init_script("bash", ReportTimeConfig(), executable=EXE)
        assert "trap '__reporttime_preexec \"$BASH_COMMAND\"' DEBUG" in script
        assert 'PROMPT_COMMAND="__reporttime_precmd${PROMPT_COMMAND:+; $PROMPT_COMMAND}; __reporttime_arm"' in script
        assert "reporttime_exec_start=$(/opt/bin/reporttime now)" in script
        assert "timelast() {" in script
        assert 'echo "real ${rttime}s"' in script

    def test_bash_precmd_disarms_before_user_prompt_command(self):
        script = render_init_script("bash", ReportTimeConfig(), executable=EXE)
        precmd = script.split("__reporttime_precmd() {\n", 1)[1]
        assert precmd.splitlines()[1] == "  __reporttime_armed=0"

    def test_bash_seeds_defaults_from_config(self):
        config = ReportTimeConfig(threshold="no", precision=2, calibration_loops=9)
        script = render_init_script("bash", config, executable=EXE)
        assert "[[ -n $REPORTTIME ]] || REPORTTIME=no" in script
        assert "[[ -n $REPORTTIME_SCALE ]] || REPORTTIME_SCALE=2" in script
        assert "[[ -n $REPORTTIME_LOOP ]] || REPORTTIME_LOOP=9" in script
        assert "calibrate --spawn --loops \"$REPORTTIME_LOOP\" --print-overhead" in script

    def test_zsh_hooks(self):
        script = render_init_script("zsh", ReportTimeConfig(threshold=2.5), executable=EXE)
        assert "add-zsh-hook preexec __reporttime_preexec" in script
        assert "add-zsh-hook precmd __reporttime_precmd" in script
        assert "typeset -g reporttime_threshold=2.5" in script
        assert "REPORTTIME=" not in script

    def test_custom_bypass_command(self):
        script = render_init_script("bash", ReportTimeConfig(bypass_command="lasttime"), executable=EXE)
        assert 'if [[ $1 == "lasttime" ]]; then' in script
        assert "lasttime() {" in script

    def test_executable_is_quoted(self):
        script = render_init_script("bash", ReportTimeConfig(), executable=["/my tools/python", "-m", "reporttime"])
        assert "$('/my tools/python' -m reporttime now)" in script

    def test_unsupported_shell(self):
        with pytest.raises(ValueError, match="Unsupported shell"):
            render_init_script("fish", ReportTimeConfig(), executable=EXE)

    def test_bypass_must_be_function_name(self):
        with pytest.raises(ValueError, match="function name"):
            render_init_script("bash", ReportTimeConfig(bypass_command="rm -rf"), executable=EXE)

    def test_default_executable(self, monkeypatch):
        monkeypatch.setattr("shutil.which", lambda name: None)
        exe = default_executable()
        assert exe[1:] == ["-m", "reporttime"]


class TestCmdInit:
    def test_success(self):
        result = run_cmd(cmd_init, "bash")
        assert result.success
        assert result.output["shell"] == "bash"
        assert "__reporttime_precmd" in result.output["script"]

    def test_failure(self):
        result = run_cmd(cmd_init, "tcsh")
        assert not result.success
        assert result.output["script"] == ""
        assert result.output["errors"]
