"""Generate release notes and changelogs from merged GitHub pull requests."""
