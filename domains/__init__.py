"""Domain modules for the ccusage Slack status updater."""
