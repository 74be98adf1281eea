"""reporttime - ZSH-like REPORTTIME for bash, zsh and Python REPLs."""
