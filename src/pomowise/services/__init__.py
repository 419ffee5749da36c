"""Services: configuration, status file and notifications."""
