"""Value-resolution engine: command runner, subshell resolver, selector."""
