"""novelfeed: latest-updates feed and reading-progress read model."""
