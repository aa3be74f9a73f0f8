"""Board rules: win detection, change notifications, and error types."""
