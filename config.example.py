# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASK_CLI_APP_NAME": "App display name used in logs (default: task-cli).",
    "TASK_CLI_PROG_NAME": "Keyword every command line must start with (default: task-cli).",
    "TASK_CLI_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASK_CLI_LOG_FILE_ENABLED": "Write full debug logs to <data_dir>/task-cli.log (true/false).",
    # Console
    "TASK_CLI_PROMPT": "Prompt shown before each input line (default: empty).",
    # Paths
    "TASK_CLI_DATA_DIR": "Local data directory for logs (default: .local/task-cli).",
    "TASK_CLI_TASKS_PATH": "Tasks JSON file (default: tasks.json in the working directory).",
}
