"""Script modules of the hypr-quickshell suite."""
