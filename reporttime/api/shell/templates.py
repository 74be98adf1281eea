"""Jinja2 templates for the shell integration scripts."""

BASH_TEMPLATE = r"""# reporttime {{ version }} -- ZSH-like REPORTTIME for bash
# Load with: eval "$({{ exe }} init bash)"
#
# REPORTTIME        seconds before a command's run time is reported (0 always, "no" never)
# REPORTTIME_SCALE  decimals in the report (0-9)
# REPORTTIME_LOOP   samples used to calibrate the cost of taking a timestamp
#
# After each command rtdays, rthours, rtmins, rtsecs, rttime and
# reporttime_exec_time hold the elapsed time for use in PS1.
# Uses the DEBUG trap and PROMPT_COMMAND.

[[ -n $REPORTTIME ]] || REPORTTIME={{ threshold }}
[[ -n $REPORTTIME_SCALE ]] || REPORTTIME_SCALE={{ precision }}
[[ -n $REPORTTIME_LOOP ]] || REPORTTIME_LOOP={{ loops }}

reporttime_exec_start=0
__reporttime_armed=0

__reporttime_preexec() {
  [[ $__reporttime_armed == 1 ]] || return 0
  [[ -n $COMP_LINE ]] && return 0
  [[ $1 == __reporttime_* ]] && return 0
  __reporttime_armed=0
  if [[ $1 == "{{ bypass }}" ]]; then
    reporttime_exec_start=0
  else
    reporttime_exec_start=$({{ exe }} now)
  fi
}

__reporttime_precmd() {
  # the rest of PROMPT_COMMAND must not start a measurement
  __reporttime_armed=0
  local reporttime_exec_stop
  reporttime_exec_stop=$({{ exe }} now)
  if [[ $reporttime_exec_start != 0 ]]; then
    eval "$({{ exe }} report --start "$reporttime_exec_start" --stop "$reporttime_exec_stop" \
      --overhead "$reporttime_delta" --threshold "$REPORTTIME" --precision "$REPORTTIME_SCALE")"
  fi
  reporttime_exec_start=0
}

__reporttime_arm() {
  __reporttime_armed=1
}

{{ bypass }}() {
  echo "real ${rttime}s"
}

[[ -n $reporttime_delta ]] || reporttime_delta=$({{ exe }} calibrate --spawn --loops "$REPORTTIME_LOOP" --print-overhead)

trap '__reporttime_preexec "$BASH_COMMAND"' DEBUG
PROMPT_COMMAND="__reporttime_precmd${PROMPT_COMMAND:+; $PROMPT_COMMAND}; __reporttime_arm"
"""

# zsh's own REPORTTIME reports CPU usage, so the threshold lives in
# reporttime_threshold instead.
ZSH_TEMPLATE = r"""# reporttime {{ version }} -- wall-clock REPORTTIME for zsh
# Load with: eval "$({{ exe }} init zsh)"
#
# reporttime_threshold  seconds before a command's run time is reported (0 always, "no" never)
# REPORTTIME_SCALE      decimals in the report (0-9)
# REPORTTIME_LOOP       samples used to calibrate the cost of taking a timestamp
#
# After each command rtdays, rthours, rtmins, rtsecs, rttime and
# reporttime_exec_time hold the elapsed time for use in PROMPT.

autoload -Uz add-zsh-hook

[[ -n $reporttime_threshold ]] || typeset -g reporttime_threshold={{ threshold }}
[[ -n $REPORTTIME_SCALE ]] || typeset -g REPORTTIME_SCALE={{ precision }}
[[ -n $REPORTTIME_LOOP ]] || typeset -g REPORTTIME_LOOP={{ loops }}

typeset -g reporttime_exec_start=0

__reporttime_preexec() {
  if [[ $1 == "{{ bypass }}" ]]; then
    reporttime_exec_start=0
  else
    reporttime_exec_start=$({{ exe }} now)
  fi
}

__reporttime_precmd() {
  local reporttime_exec_stop
  reporttime_exec_stop=$({{ exe }} now)
  if [[ $reporttime_exec_start != 0 ]]; then
    eval "$({{ exe }} report --start "$reporttime_exec_start" --stop "$reporttime_exec_stop" \
      --overhead "$reporttime_delta" --threshold "$reporttime_threshold" --precision "$REPORTTIME_SCALE")"
  fi
  reporttime_exec_start=0
}

{{ bypass }}() {
  print -r -- "real ${rttime}s"
}

[[ -n $reporttime_delta ]] || typeset -g reporttime_delta=$({{ exe }} calibrate --spawn --loops "$REPORTTIME_LOOP" --print-overhead)

add-zsh-hook preexec __reporttime_preexec
add-zsh-hook precmd __reporttime_precmd
"""

TEMPLATES = {
    "bash": BASH_TEMPLATE,
    "zsh": ZSH_TEMPLATE,
}
