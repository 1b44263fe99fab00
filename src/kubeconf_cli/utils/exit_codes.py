"""
Exit codes for kubeconf.

Semantic exit codes so scripts and agents can tell what went wrong
without parsing the error text.
"""

# Success
SUCCESS = 0

# General error (unspecified, includes unreadable or unwritable config files)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found
ERROR_NOT_FOUND = 5

# Permission denied
ERROR_PERMISSION_DENIED = 6

# Resource already exists
ERROR_CONFLICT = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
        ERROR_CONFLICT: "ERROR_CONFLICT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Resource not found",
        ERROR_PERMISSION_DENIED: "Permission denied",
        ERROR_CONFLICT: "Resource already exists",
    }
    return descriptions.get(code, "Unknown error")


# Agent action suggestions based on exit codes
AGENT_ACTIONS = {
    SUCCESS: "Proceed to next task",
    ERROR_GENERAL: "Check the kubeconfig file is readable and valid YAML",
    ERROR_INVALID_ARGS: "Correct the command arguments and retry",
    ERROR_NOT_FOUND: "Run 'kubeconf config get-contexts' to list valid names",
    ERROR_PERMISSION_DENIED: "Check file permissions on the kubeconfig file",
    ERROR_CONFLICT: "Choose a different name or remove the existing entry first",
}


def get_agent_action(code: int) -> str:
    """Get suggested action for an AI agent based on exit code."""
    return AGENT_ACTIONS.get(code, "Log error and request user intervention")
